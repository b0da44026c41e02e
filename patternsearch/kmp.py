"""Multi-pattern search with the Knuth-Morris-Pratt algorithm."""

from __future__ import annotations

import sys
import time
from collections.abc import Iterable, Iterator

from .loading import load_file, load_patterns


def build_lps(pattern: str) -> list[int]:
    """Return the longest-proper-prefix-that-is-also-suffix table of ``pattern``."""
    lps = [0] * len(pattern)
    length = 0
    for i, ch in enumerate(pattern[1:], start=1):
        while length and ch != pattern[length]:
            length = lps[length - 1]
        if ch == pattern[length]:
            length += 1
        lps[i] = length
    return lps


def _find_all(pattern: str, text: str, lps: list[int]) -> Iterator[int]:
    m = len(pattern)
    j = 0
    for i, ch in enumerate(text):
        while j and ch != pattern[j]:
            j = lps[j - 1]
        if ch == pattern[j]:
            j += 1
            if j == m:
                yield i - m + 1
                j = lps[j - 1]


def search(patterns: Iterable[str], text: str) -> dict[str, list[int]]:
    """Find every (possibly overlapping) occurrence of each pattern in ``text``.

    Returns a mapping ordered by pattern, holding only patterns that occur.
    A pattern given more than once has its positions listed once per mention.
    """
    results: dict[str, list[int]] = {}
    for pattern in patterns:
        if not pattern:
            raise ValueError("patterns must not be empty")
        positions = list(_find_all(pattern, text, build_lps(pattern)))
        if positions:
            results.setdefault(pattern, []).extend(positions)
    return dict(sorted(results.items()))


def main(argv: list[str] | None = None) -> int:
    """Search a corpus for the patterns listed in a patterns file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Uso: kmp <nombre_del_archivo> <archivo_de_patrones>")
        return 1
    corpus_name, patterns_name = args
    try:
        text = load_file(corpus_name)
    except OSError as exc:
        print(f"Error: No se puedo abrir el archivo: {exc.filename}", file=sys.stderr)
        return 1
    try:
        patterns = load_patterns(patterns_name)
    except OSError as exc:
        print(f"Error: No se pudo abrir el archivo de patrones: {exc.filename}")
        return 1

    start = time.perf_counter_ns()
    results = search(patterns, text)
    duration = (time.perf_counter_ns() - start) * 1e-9

    if not results:
        print("No se encontraron coincidencias para los patrones.")
        return 0
    for pattern, positions in results.items():
        listed = "".join(f"{pos} " for pos in positions)
        print(f"Patron {pattern} encontrado en posiciones: {listed}")
    print(f"Tiempo de busqueda: {duration:g}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())