"""Classic hashing, two-pointer, array, matrix, sliding-window, string and linked-list algorithms."""

__version__ = "0.1.0"