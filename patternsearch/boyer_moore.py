"""Single-pattern search with the Boyer-Moore algorithm."""

from __future__ import annotations

import sys

from .loading import convert_pattern, load_file


def _good_suffix_shifts(pattern: str) -> list[int]:
    """Shift table for the strong good-suffix rule, indexed by mismatch position + 1."""
    m = len(pattern)
    shift = [0] * (m + 1)
    border = [0] * (m + 1)
    i, j = m, m + 1
    border[i] = j
    while i > 0:
        while j <= m and pattern[i - 1] != pattern[j - 1]:
            if shift[j] == 0:
                shift[j] = j - i
            j = border[j]
        i -= 1
        j -= 1
        border[i] = j
    j = border[0]
    for i in range(m + 1):
        if shift[i] == 0:
            shift[i] = j
        if i == j:
            j = border[j]
    return shift


class BoyerMooreSearcher:
    """A prepared pattern that can be searched for in many texts."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self._last = {ch: index for index, ch in enumerate(pattern)}
        self._shift = _good_suffix_shifts(pattern)

    def find(self, text: str) -> int | None:
        """Return the position of the first occurrence in ``text``, or ``None``.

        An empty pattern is found at position 0.
        """
        pattern = self.pattern
        m = len(pattern)
        n = len(text)
        if m == 0:
            return 0
        s = 0
        while s <= n - m:
            j = m - 1
            while j >= 0 and pattern[j] == text[s + j]:
                j -= 1
            if j < 0:
                return s
            bad_char = j - self._last.get(text[s + j], -1)
            s += max(self._shift[j + 1], bad_char)
        return None


def boyer_moore_find(text: str, pattern: str) -> int | None:
    """Return the first position of ``pattern`` in ``text``, or ``None``."""
    return BoyerMooreSearcher(pattern).find(text)


def main(argv: list[str] | None = None) -> int:
    """Search a corpus for one pattern given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Uso: boyer_moore <nombre_del_archivo> <patron_a_buscar>", file=sys.stderr)
        return 1
    file_name, raw_pattern = args
    pattern = convert_pattern(raw_pattern)
    try:
        corpus = load_file(file_name)
    except OSError as exc:
        print(f"Error: No se puedo abrir el archivo: {exc.filename}", file=sys.stderr)
        return 1

    position = boyer_moore_find(corpus, pattern)
    if position is None:
        print("No se encontraron ocurrencias en el archivo")
        return 0
    print(f"El patron se encuentra en la posicion: {position}")
    print(corpus[position:position + len(pattern)])
    return 0


if __name__ == "__main__":
    sys.exit(main())