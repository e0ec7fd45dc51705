#!/usr/bin/env python3
"""
Tokenizer module for splitting a path string into unescaped segments.

Splitting would be a plain str.split were it not for escaped separators:
a separator preceded by an unescaped backslash belongs to the segment name
and must not close the segment.
"""

import logging
from typing import List

from .escaping import DEFAULT_SEPARATOR, ESCAPE_CHAR, unescape_name

logger = logging.getLogger(__name__)


def split_path(path: str, separator: str = DEFAULT_SEPARATOR) -> List[str]:
    """
    Split a path on unescaped separators and unescape each segment.

    The result always holds one more segment than there are unescaped
    separators, so empty input gives ``[""]`` and leading, trailing or
    doubled separators give empty segments. Those are collapsed later by
    trim_empty_parts.

    Args:
        path: Path string, possibly containing escape sequences
        separator: Path separator character

    Returns:
        Raw list of unescaped segments

    Example:
        >>> split_path("foo/bar\\\\/baz/", "/")
        ['foo', 'bar/baz', '']
    """
    segments: List[str] = []
    escaping = False
    last_sep = 0

    for index, ch in enumerate(path):
        if escaping:
            # Character was protected by the previous backslash
            escaping = False
        elif ch == ESCAPE_CHAR:
            escaping = True
        elif ch == separator:
            segments.append(unescape_name(path[last_sep:index], separator))
            last_sep = index + 1

    if escaping:
        # Nothing left to protect; the backslash stays in the last segment
        logger.debug("Dangling escape at end of path %r kept as literal backslash", path)

    segments.append(unescape_name(path[last_sep:], separator))
    return segments
