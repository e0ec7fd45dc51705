"""
Escaped path package.

This package contains the path parsing and formatting modules:
- escaping: Escape codec for segment names and separator validation
- tokenizer: Escape-aware splitting of a path string into segments
- trimmer: Removal of spurious empty segments
- path_info: pathinfo()-style dirname/basename/filename/extension derivation
- path: The immutable EscapedPath sequence type
- errors: Exception hierarchy
"""

# Explicit imports make the public API clear and prevent namespace pollution
from .errors import (
    EscapedPathError,
    ImmutablePathError,
    InvalidIndexError,
    InvalidSeparatorError
)
from .escaping import (
    DEFAULT_SEPARATOR,
    ESCAPE_CHAR,
    escape_name,
    unescape_name,
    validate_separator
)
from .tokenizer import split_path
from .trimmer import trim_empty_parts
from .path_info import InfoField, PathInfo, derive_info
from .path import EscapedPath

__all__ = [
    'EscapedPathError',
    'ImmutablePathError',
    'InvalidIndexError',
    'InvalidSeparatorError',
    'DEFAULT_SEPARATOR',
    'ESCAPE_CHAR',
    'escape_name',
    'unescape_name',
    'validate_separator',
    'split_path',
    'trim_empty_parts',
    'InfoField',
    'PathInfo',
    'derive_info',
    'EscapedPath',
]
