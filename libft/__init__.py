"""Character, string, memory, conversion, output and linked-list utilities."""

__version__ = "0.1.0"
__all__ = ["chars", "convert", "memory", "strings", "output", "linkedlist"]