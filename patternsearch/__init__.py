"""Case-insensitive pattern search over concatenated text corpora."""

__version__ = "0.1.0"
__all__ = ["loading", "kmp", "rabin_karp", "boyer_moore", "concatenate"]