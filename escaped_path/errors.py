#!/usr/bin/env python3
"""
Exceptions raised by the escaped path package.

Each error also derives from the built-in exception a tuple (or str) would
raise in the same situation, so callers can catch either.
"""


class EscapedPathError(Exception):
    """Base class for all escaped path errors."""


class InvalidIndexError(EscapedPathError, IndexError):
    """Raised when reading a segment index that is not present in the path."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"Path segment index {index} out of range (path has {length} segments)")


class ImmutablePathError(EscapedPathError, TypeError):
    """Raised on any attempt to assign or delete a segment of a path."""

    def __init__(self, message: str = "Cannot modify parts of the path"):
        super().__init__(message)


class InvalidSeparatorError(EscapedPathError, ValueError):
    """Raised when a separator is not a single, non-escape character."""

    def __init__(self, separator):
        self.separator = separator
        super().__init__(f"Separator must be a single character other than '\\', got {separator!r}")
