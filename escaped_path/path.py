#!/usr/bin/env python3
"""
Immutable, escape-aware path type.

An EscapedPath is a read-only sequence of unescaped segment names joined by a
configurable separator. Segment names may contain the separator or the
escape character; they are escaped only in the string form of the path.
"""

import logging
from collections.abc import Sequence
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

from .errors import ImmutablePathError, InvalidIndexError
from .escaping import DEFAULT_SEPARATOR, escape_name, unescape_name, validate_separator
from .path_info import InfoField, PathInfo, derive_info
from .tokenizer import split_path
from .trimmer import trim_empty_parts

logger = logging.getLogger(__name__)


class EscapedPath(Sequence):
    """
    Path made of unescaped segments, split and joined on a single separator.

    Index 0 is the root-most segment. A leading separator is kept as an empty
    first segment, so "/foo" has the segments ("", "foo") and "/" has ("", "").

    Note that ``len(path)`` is the segment count; ``path.count(value)`` keeps
    the usual Sequence meaning of counting occurrences of a segment.

    Example:
        >>> path = EscapedPath.from_string("docs/my\\\\/file.txt", "/")
        >>> list(path)
        ['docs', 'my/file.txt']
        >>> path.info(InfoField.EXTENSION)
        'txt'
        >>> str(path.get_dirname_path())
        'docs'
    """

    escape_name = staticmethod(escape_name)
    unescape_name = staticmethod(unescape_name)

    def __init__(self, segments: Iterable[str] = (), separator: str = DEFAULT_SEPARATOR):
        """
        Build a path from segments that are already split and unescaped.

        Args:
            segments: Segment names, root-most first
            separator: Path separator character

        Raises:
            InvalidSeparatorError: If separator is not a single non-escape character
            TypeError: If segments is a plain string rather than a list of names
        """
        if isinstance(segments, str):
            raise TypeError("segments must be an iterable of names, use EscapedPath.from_string to parse a string")

        self._separator = validate_separator(separator)
        self._segments: Tuple[str, ...] = tuple(trim_empty_parts(segments))
        self._info: Optional[PathInfo] = None

    @classmethod
    def from_string(cls, path: str, separator: str = DEFAULT_SEPARATOR) -> "EscapedPath":
        """Create a path by splitting a string on its unescaped separators."""
        separator = validate_separator(separator)
        return cls(split_path(path, separator), separator)

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def segments(self) -> Tuple[str, ...]:
        return self._segments

    def _derive(self, segments: Iterable[str]) -> "EscapedPath":
        return type(self)(segments, self._separator)

    def get_dirname_path(self) -> "EscapedPath":
        """Get a new path for everything up to the parent directory."""
        return self.slice(0, -1)

    def slice(self, offset: int, length: Optional[int] = None) -> "EscapedPath":
        """
        Get a new path over a range of segments.

        Follows PHP's array_slice: a negative offset counts back from the
        end, a negative length stops that many segments before the end and
        a missing length runs to the end.

        Args:
            offset: Index of the first segment to keep
            length: Number of segments to keep, or None for all the rest

        Returns:
            New EscapedPath with the same separator
        """
        count = len(self._segments)
        start = max(count + offset, 0) if offset < 0 else min(offset, count)
        if length is None:
            stop = count
        elif length < 0:
            stop = count + length
        else:
            stop = start + length
        return self._derive(self._segments[start:max(start, stop)])

    def trim_start(self) -> "EscapedPath":
        """Get a new path with any empty start segment (leading separator) removed."""
        segments = self._segments
        if len(segments) > 1 and segments[0] == "":
            segments = segments[1:]
        return self._derive(segments)

    def to_string(self) -> str:
        """
        Get the string form of the path.

        Separators and escape characters inside segment names are escaped,
        so the result parses back to an equal path.
        """
        sep = self._separator
        return sep.join(escape_name(segment, sep) for segment in self._segments)

    def path_info(self) -> PathInfo:
        """Get the full info record of the path, computed on first use."""
        if self._info is None:
            logger.debug("Deriving path info for %r", self)
            self._info = derive_info(self._segments, self._separator)
        return self._info

    def info(self, fields: int = InfoField.ALL) -> Union[str, None, Dict[str, str]]:
        """
        Get the path info for this path.

        Ignoring the escaping of separators, this returns the same result as
        PHP's pathinfo() for the equivalent string.

        Args:
            fields: InfoField flags to return, InfoField.ALL by default

        Returns:
            For a single flag, the value of that field, or None if the path
            does not have it (e.g. EXTENSION with no dot in the basename).
            For several flags, a dict of the requested fields that are present.
        """
        info = self.path_info().to_dict(fields)
        if (fields & (fields - 1)) == 0:
            # Power of two, i.e. a single field was requested
            return next(iter(info.values()), None)
        return info

    def get(self, index: int) -> str:
        """Get the unescaped segment at index, raising InvalidIndexError if absent."""
        try:
            return self._segments[index]
        except IndexError:
            raise InvalidIndexError(index, len(self._segments)) from None

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._derive(self._segments[index])
        return self.get(index)

    def __setitem__(self, index, value):
        logger.warning("Rejected assignment to segment %r of path %r", index, self)
        raise ImmutablePathError()

    def __delitem__(self, index):
        logger.warning("Rejected deletion of segment %r of path %r", index, self)
        raise ImmutablePathError()

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self._segments)

    def __eq__(self, other):
        if not isinstance(other, EscapedPath):
            return NotImplemented
        return self._segments == other._segments and self._separator == other._separator

    def __hash__(self):
        return hash((self._segments, self._separator))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._segments)!r}, separator={self._separator!r})"
