"""Lexical path join-and-clean, with a small benchmark harness."""

from .cleaner import clean, clean_append, join_path, segments

__version__ = "0.1.0"

__all__ = ["clean", "clean_append", "join_path", "segments", "__version__"]
