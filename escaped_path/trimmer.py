#!/usr/bin/env python3
"""
Trimmer module for removing spurious empty segments from a path.

Can be used both on freshly split strings and on sub-ranges of an existing
path, so every way of building a path ends up in the same normal form.
"""

from typing import Iterable, List


def trim_empty_parts(parts: Iterable[str]) -> List[str]:
    """
    Drop the empty segments produced by doubled or trailing separators.

    Two markers survive trimming:

    - an empty first segment, which records a leading separator ("/foo")
    - an empty second segment after an empty first one, which records a
      path made of separators only ("/", "//")

    A path made of a single empty segment is the empty path.

    Args:
        parts: Raw segments, in path order

    Returns:
        Trimmed list of segments

    Example:
        >>> trim_empty_parts(["foo", "", "bar", ""])
        ['foo', 'bar']
        >>> trim_empty_parts(["", "", ""])
        ['', '']
        >>> trim_empty_parts([""])
        []
    """
    parts = list(parts)
    if not parts:
        return []

    empty_leading = parts[0] == ""
    if len(parts) == 1 and empty_leading:
        return []

    trimmed = parts[:2] if empty_leading else parts[:1]
    trimmed.extend(part for part in parts[len(trimmed):] if part != "")
    return trimmed
