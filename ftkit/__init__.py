"""C-style character, string, memory, formatting and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "conversions", "strings", "output", "printf", "linereader"]