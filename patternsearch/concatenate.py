"""Concatenating partitioned dataset files into a single corpus file."""

from __future__ import annotations

import re
import shutil
import sys
from pathlib import Path

DEFAULT_DATASETS_DIR = Path("../datasets")
MAX_FILES = 40

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def concatenate(
    datasets_dir: str | Path, name: str, num_files: int
) -> Path:
    """Join the first ``num_files`` entries of ``datasets_dir/name`` in sorted order.

    The result is written to ``datasets_dir/Concatenated/concatenated_<name>_<n>``
    and its path is returned. Raises ``ValueError`` if ``num_files`` is not
    between 1 and 40 or the directory holds fewer files, and ``OSError`` if a
    file cannot be read or written.
    """
    if not 1 <= num_files <= MAX_FILES:
        raise ValueError(f"El numero de archivos de estar entre 1 y {MAX_FILES}")
    base = Path(datasets_dir)
    files = sorted((base / name).iterdir())
    if len(files) < num_files:
        raise ValueError(
            f"Se pidieron {num_files} archivos pero solo hay {len(files)} en {base / name}"
        )
    output_path = base / "Concatenated" / f"concatenated_{name}_{num_files}"
    with output_path.open("wb") as output:
        for source in files[:num_files]:
            with source.open("rb") as data:
                shutil.copyfileobj(data, output)
    return output_path


def _parse_count(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Concatenate dataset partitions named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: concatenate <numero_de_archivos> <nombre_del_archivo>", file=sys.stderr)
        return 1
    count_text, name = args
    try:
        concatenate(DEFAULT_DATASETS_DIR, name, _parse_count(count_text))
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())