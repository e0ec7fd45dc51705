#!/usr/bin/env python3
"""
Escaping codec for path segment names.

A segment name may contain the separator character; in the string form of a
path every separator inside a name is written as ``\\<sep>`` and every literal
backslash as ``\\\\``, so the string can be split again without ambiguity.
"""

import os
from typing import List

from .errors import InvalidSeparatorError

ESCAPE_CHAR = "\\"
# Where the platform separator is the escape character (Windows), use the alternative one
DEFAULT_SEPARATOR = os.altsep if os.sep == ESCAPE_CHAR else os.sep


def validate_separator(separator: str) -> str:
    """
    Check that a separator can be used to delimit path segments.

    Args:
        separator: Candidate separator

    Returns:
        The separator, unchanged

    Raises:
        InvalidSeparatorError: If the separator is not exactly one character,
            or is the escape character itself
    """
    if not isinstance(separator, str) or len(separator) != 1 or separator == ESCAPE_CHAR:
        raise InvalidSeparatorError(separator)
    return separator


def escape_name(name: str, separator: str = DEFAULT_SEPARATOR) -> str:
    """
    Escape any separators which appear in a name (a single part of a path).

    The escape character is escaped as well, so that it stays usable. Both
    replacements happen in one scan, so an escape inserted in front of a
    separator is never doubled again.

    Args:
        name: Unescaped segment name
        separator: Path separator character

    Returns:
        Escaped name, safe to join with the separator

    Example:
        >>> escape_name("my/file", "/")
        'my\\\\/file'
        >>> escape_name("a\\\\b", "/")
        'a\\\\\\\\b'
    """
    return "".join(
        ESCAPE_CHAR + ch if ch == ESCAPE_CHAR or ch == separator else ch
        for ch in name
    )


def unescape_name(name: str, separator: str = DEFAULT_SEPARATOR) -> str:
    """
    Reverse escape_name.

    Only a doubled escape and an escaped separator are recognized; any other
    backslash (including a trailing one) is kept as it is.

    This generally shouldn't be needed outside of this package, as asking a
    path for one of its segments already returns the unescaped name.

    Args:
        name: Escaped segment name
        separator: Path separator character

    Returns:
        Unescaped name
    """
    if ESCAPE_CHAR not in name:
        return name

    out: List[str] = []
    i = 0
    length = len(name)
    while i < length:
        ch = name[i]
        if ch == ESCAPE_CHAR and i + 1 < length and name[i + 1] in (ESCAPE_CHAR, separator):
            out.append(name[i + 1])
            i += 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)
