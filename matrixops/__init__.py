"""Bounded integer square matrices, composable operations on them, and a line token reader."""

__version__ = "0.1.0"
__all__ = ["input_line", "matrix", "operations"]