# SPDX-License-Identifier: MIT
"""Errors raised while parsing PEP 440 version strings.

Every failure is raised at parse time. Once a ``PackageVersion`` exists,
comparing, rendering and hashing it cannot fail.
"""

from __future__ import annotations

from typing import Optional


class ParseError(ValueError):
    """Raised when a string is not a valid PEP 440 version.

    Attributes:
        version: The text that was being parsed
        message: Human readable description of the failure
        position: Index into the trimmed input where parsing stopped, if known
    """

    def __init__(self, version: str, message: str = "", position: Optional[int] = None):
        self.version = version
        self.message = message or f"Invalid version: {version!r}"
        self.position = position
        super().__init__(self.message)


class MissingReleaseError(ParseError):
    """No numeric release segment was found."""


class InvalidLabelError(ParseError):
    """A label-like token does not match any recognized spelling."""


class NumericOverflowError(ParseError):
    """A numeric component does not fit in an unsigned 64-bit integer."""


class ConflictingPostFormError(ParseError):
    """Both the bare ``-N`` shorthand and a labeled post-release were given."""


class TrailingCharactersError(ParseError):
    """Input remains after the complete version grammar was matched."""


class MalformedLocalSegmentError(ParseError):
    """The local version label contains characters outside ``[a-z0-9._-]``."""
