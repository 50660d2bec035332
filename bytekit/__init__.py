"""Helpers for ASCII characters, 32-bit numbers, fd output, byte buffers, strings and linked lists."""

__version__ = "0.1.0"
__all__ = ["chars", "numbers", "output", "memory", "linkedlist", "strings"]