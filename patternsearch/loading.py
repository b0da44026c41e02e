"""Loading and normalising corpora and search patterns."""

from __future__ import annotations

import re
import string
from pathlib import Path

DEFAULT_CORPUS_DIR = Path("../datasets/Concatenated")
DEFAULT_PATTERNS_DIR = Path("../datasets")

# Files are decoded as Latin-1 so that every byte maps to exactly one character
# and positions in the text equal byte offsets in the file.
ENCODING = "latin-1"

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_CONTROL_TO_SPACE = str.maketrans({"\n": " ", "\r": " ", "\t": " "})
_C_WHITESPACE = " \t\n\v\f\r"
_STRIP_WHITESPACE = str.maketrans("", "", _C_WHITESPACE)
_SPACE_RUN = re.compile(" {2,}")


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def normalize_text(text: str) -> str:
    """Turn newlines, carriage returns and tabs into spaces, collapse runs of
    spaces into one, and lower-case ASCII letters."""
    spaced = text.translate(_CONTROL_TO_SPACE)
    collapsed = _SPACE_RUN.sub(" ", spaced)
    return _ascii_lower(collapsed)


def load_file(file_name: str, base_dir: str | Path = DEFAULT_CORPUS_DIR) -> str:
    """Read ``base_dir/file_name`` and return its normalised contents.

    Raises ``OSError`` (for example ``FileNotFoundError``) if it cannot be read.
    """
    path = Path(base_dir) / file_name
    return normalize_text(path.read_bytes().decode(ENCODING))


def parse_patterns(line: str) -> list[str]:
    """Split a comma-separated line into patterns.

    All whitespace inside each pattern is removed, letters are lower-cased and
    empty patterns are dropped.
    """
    patterns = (
        _ascii_lower(piece.translate(_STRIP_WHITESPACE)) for piece in line.split(",")
    )
    return [pattern for pattern in patterns if pattern]


def load_patterns(file_name: str, base_dir: str | Path = DEFAULT_PATTERNS_DIR) -> list[str]:
    """Read the first line of ``base_dir/file_name`` and parse its patterns.

    Raises ``OSError`` (for example ``FileNotFoundError``) if it cannot be read.
    """
    path = Path(base_dir) / file_name
    content = path.read_bytes().decode(ENCODING)
    first_line = content.split("\n", 1)[0]
    return parse_patterns(first_line)


def convert_pattern(pattern: str) -> str:
    """Turn underscores into spaces and lower-case ASCII letters.

    Patterns given on the command line use underscores in place of spaces.
    """
    return _ascii_lower(pattern.replace("_", " "))