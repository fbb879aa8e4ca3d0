"""Split text into words with line and column positions, and write colored HTML logs."""

__version__ = "0.1.0"

__all__ = ["cli", "colors", "htmllog", "htmlstyle", "words"]