#!/usr/bin/env python3
"""
Path info derivation, escape-aware.

Given the segments of a path, works out the same four fields PHP's
``pathinfo()`` reports for the equivalent unescaped string:

- dirname: everything up to the last segment, in escaped string form
- basename: the last segment, unescaped
- filename: basename up to its last dot
- extension: basename after its last dot (absent when there is no dot)
"""

import enum
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from .escaping import escape_name


class InfoField(enum.IntFlag):
    """Flags selecting which info fields to return from EscapedPath.info."""
    DIRNAME = 1
    BASENAME = 2
    EXTENSION = 4
    FILENAME = 8
    ALL = 15


# Output order of the keys in an info mapping
INFO_KEYS = (
    (InfoField.DIRNAME, "dirname"),
    (InfoField.BASENAME, "basename"),
    (InfoField.EXTENSION, "extension"),
    (InfoField.FILENAME, "filename"),
)


@dataclass(frozen=True)
class PathInfo:
    """Structured info of a path. Fields that do not apply are None."""
    basename: str
    filename: str
    dirname: Optional[str] = None
    extension: Optional[str] = None

    def to_dict(self, fields: int = InfoField.ALL) -> Dict[str, str]:
        """Return the requested fields that are present, keyed by field name."""
        return {
            name: getattr(self, name)
            for flag, name in INFO_KEYS
            if fields & flag and getattr(self, name) is not None
        }


def derive_info(segments: Sequence[str], separator: str) -> PathInfo:
    """
    Build the info record for a list of (trimmed) segments.

    Args:
        segments: Unescaped segments, already passed through trim_empty_parts
        separator: Path separator, used to rebuild dirname

    Returns:
        PathInfo for the path
    """
    if not segments:
        return PathInfo(basename="", filename="")

    *parents, basename = segments

    if not parents:
        dirname = "."
    elif len(parents) == 1 and parents[0] == "":
        # Only the root marker is left
        dirname = separator
    else:
        dirname = separator.join(escape_name(part, separator) for part in parents)

    dot_pos = basename.rfind(".")
    if dot_pos == -1:
        return PathInfo(basename=basename, filename=basename, dirname=dirname)

    return PathInfo(
        basename=basename,
        filename=basename[:dot_pos],
        dirname=dirname,
        extension=basename[dot_pos + 1:],
    )
