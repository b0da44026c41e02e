"""Single-pattern search with the Rabin-Karp rolling hash."""

from __future__ import annotations

import sys

from .loading import convert_pattern, load_file

BASE = 256
MODULUS = 1_000_000_007


def rabin_karp_search(text: str, pattern: str) -> list[int]:
    """Return every start position of ``pattern`` in ``text``, overlaps included.

    An empty pattern, or one longer than the text, yields no positions.
    """
    m = len(pattern)
    n = len(text)
    if m == 0 or n < m:
        return []

    high = pow(BASE, m - 1, MODULUS)
    pat_hash = 0
    win_hash = 0
    for p_ch, t_ch in zip(pattern, text):
        pat_hash = (BASE * pat_hash + ord(p_ch)) % MODULUS
        win_hash = (BASE * win_hash + ord(t_ch)) % MODULUS

    matches = []
    last = n - m
    for i in range(last + 1):
        if win_hash == pat_hash and text.startswith(pattern, i):
            matches.append(i)
        if i < last:
            win_hash = (BASE * (win_hash - ord(text[i]) * high) + ord(text[i + m])) % MODULUS
    return matches


def main(argv: list[str] | None = None) -> int:
    """Search a corpus for one pattern given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Uso: rk <nombre_del_archivo> <patron_a_buscar>", file=sys.stderr)
        return 1
    file_name, raw_pattern = args
    pattern = convert_pattern(raw_pattern)
    try:
        corpus = load_file(file_name)
    except OSError as exc:
        print(f"Error: No se puedo abrir el archivo: {exc.filename}", file=sys.stderr)
        return 1

    matches = rabin_karp_search(corpus, pattern)
    if not matches:
        print("No se encontraron ocurrencias del patrón en el archivo.")
    else:
        print(f"Se encontraron {len(matches)} ocurrencias.")
        print(f"Primera ocurrencia en la posición: {matches[0]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())