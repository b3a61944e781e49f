# SPDX-License-Identifier: MIT
"""PEP 440 version parsing and comparison.

This package parses Python package version strings into structured values
and orders them by PEP 440 precedence.

Example:
    >>> from pyver import parse, compare_versions, is_valid_version
    >>>
    >>> version = parse("v1.0a2.dev456")
    >>> version.release
    (1, 0)
    >>> str(version)
    '1.0a2.dev456'
    >>>
    >>> is_valid_version("1.0-")
    False
    >>>
    >>> compare_versions("1.0.dev1", "1.0a1")
    -1
"""

__version__ = "0.1.0"

from .errors import (
    ParseError,
    MissingReleaseError,
    InvalidLabelError,
    NumericOverflowError,
    ConflictingPostFormError,
    TrailingCharactersError,
    MalformedLocalSegmentError,
)
from .lexicon import (
    PreReleaseLabel,
    Numeric,
    Alphanumeric,
    LocalSegment,
    MAX_NUMERIC_VALUE,
    normalize_prerelease_label,
    classify_local_segment,
)
from .version import (
    PackageVersion,
    PreRelease,
    format_version,
)
from .parser import (
    parse,
    validate_version,
    is_valid_version,
)
from .compare import (
    compare,
    compare_versions,
    version_key,
    sort_versions,
    max_version,
)
from .serialization import (
    VersionModel,
    PreReleaseModel,
    dump_version,
    load_version,
)

__all__ = [
    # Errors
    "ParseError",
    "MissingReleaseError",
    "InvalidLabelError",
    "NumericOverflowError",
    "ConflictingPostFormError",
    "TrailingCharactersError",
    "MalformedLocalSegmentError",
    # Identifier vocabulary
    "PreReleaseLabel",
    "Numeric",
    "Alphanumeric",
    "LocalSegment",
    "MAX_NUMERIC_VALUE",
    "normalize_prerelease_label",
    "classify_local_segment",
    # Parsed versions
    "PackageVersion",
    "PreRelease",
    "format_version",
    "parse",
    "validate_version",
    "is_valid_version",
    # Version comparison
    "compare",
    "compare_versions",
    "version_key",
    "sort_versions",
    "max_version",
    # Serialization
    "VersionModel",
    "PreReleaseModel",
    "dump_version",
    "load_version",
]
