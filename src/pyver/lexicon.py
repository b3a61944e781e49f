# SPDX-License-Identifier: MIT
"""Identifier vocabulary shared by the parser and the comparator.

PEP 440 accepts several spellings for the same segment:
- Pre-release: a/alpha, b/beta, rc/c/pre/preview
- Post-release: post/rev/r
- Dev-release: dev

Local version labels are split into numeric and alphanumeric segments,
which the comparator orders differently.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import InvalidLabelError, MalformedLocalSegmentError, NumericOverflowError

# Largest value accepted for any numeric component (unsigned 64-bit)
MAX_NUMERIC_VALUE = 2**64 - 1
_MAX_NUMERIC_DIGITS = len(str(MAX_NUMERIC_VALUE))

# Separators that PEP 440 treats as equivalent to no separator at all
SEPARATORS = "._-"

POST_SPELLINGS = frozenset({"post", "rev", "r"})
DEV_SPELLING = "dev"

_DIGITS = re.compile(r"[0-9]+")
_LOCAL_TOKEN = re.compile(r"[a-zA-Z0-9]+")


class PreReleaseLabel(Enum):
    """Canonical pre-release labels, declared in release-cycle order."""

    ALPHA = "a"
    BETA = "b"
    RELEASE_CANDIDATE = "rc"

    @property
    def rank(self) -> int:
        """Position in the release cycle: alpha < beta < release candidate."""
        return _LABEL_RANK[self]

    def __str__(self) -> str:
        return self.value


_LABEL_RANK = {
    PreReleaseLabel.ALPHA: 0,
    PreReleaseLabel.BETA: 1,
    PreReleaseLabel.RELEASE_CANDIDATE: 2,
}

# Every accepted spelling, already lowercased and stripped of separators
PRE_SPELLINGS = {
    "a": PreReleaseLabel.ALPHA,
    "alpha": PreReleaseLabel.ALPHA,
    "b": PreReleaseLabel.BETA,
    "beta": PreReleaseLabel.BETA,
    "c": PreReleaseLabel.RELEASE_CANDIDATE,
    "rc": PreReleaseLabel.RELEASE_CANDIDATE,
    "pre": PreReleaseLabel.RELEASE_CANDIDATE,
    "preview": PreReleaseLabel.RELEASE_CANDIDATE,
}


@dataclass(frozen=True, slots=True)
class Numeric:
    """A local version segment made only of ASCII digits."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Alphanumeric:
    """A local version segment containing at least one letter."""

    value: str

    def __str__(self) -> str:
        return self.value


LocalSegment = Union[Numeric, Alphanumeric]


def strip_separators(text: str) -> str:
    """Lowercase ``text`` and drop every ``.``, ``-`` and ``_``."""
    return "".join(ch for ch in text.lower() if ch not in SEPARATORS)


def normalize_prerelease_label(text: str) -> PreReleaseLabel:
    """Map any accepted pre-release spelling to its canonical label.

    Args:
        text: The label as written, optionally with separators around it

    Returns:
        The canonical PreReleaseLabel

    Raises:
        InvalidLabelError: If the token is not a recognized pre-release spelling

    Examples:
        >>> normalize_prerelease_label("Alpha")
        <PreReleaseLabel.ALPHA: 'a'>
        >>> normalize_prerelease_label("-preview")
        <PreReleaseLabel.RELEASE_CANDIDATE: 'rc'>
    """
    label = PRE_SPELLINGS.get(strip_separators(text))
    if label is None:
        raise InvalidLabelError(text, f"Unrecognized pre-release label: {text!r}")
    return label


def parse_number(text: str) -> int:
    """Convert a run of ASCII digits to an int, enforcing the 64-bit limit.

    Leading zeros are dropped first, so zero padding of any length is accepted
    and oversized values are rejected without converting them.

    Raises:
        NumericOverflowError: If the value exceeds MAX_NUMERIC_VALUE
    """
    significant = text.lstrip("0") or "0"
    if len(significant) > _MAX_NUMERIC_DIGITS:
        raise NumericOverflowError(
            text,
            f"Numeric component of {len(significant)} digits exceeds the maximum "
            f"of {MAX_NUMERIC_VALUE}",
        )
    value = int(significant)
    if value > MAX_NUMERIC_VALUE:
        raise NumericOverflowError(
            text, f"Numeric component {text} exceeds the maximum of {MAX_NUMERIC_VALUE}"
        )
    return value


def classify_local_segment(text: str) -> LocalSegment:
    """Classify one local version token as numeric or alphanumeric.

    Alphanumeric tokens are lowercased. The empty token, or one holding
    characters outside ``[a-zA-Z0-9]``, is rejected.

    Examples:
        >>> classify_local_segment("007")
        Numeric(value=7)
        >>> classify_local_segment("Ubuntu")
        Alphanumeric(value='ubuntu')
    """
    if _DIGITS.fullmatch(text):
        return Numeric(parse_number(text))

    if not _LOCAL_TOKEN.fullmatch(text):
        raise MalformedLocalSegmentError(text, f"Invalid local version segment: {text!r}")
    return Alphanumeric(text.lower())
