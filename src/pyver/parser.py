# SPDX-License-Identifier: MIT
"""PEP 440 version string parsing.

Grammar, matched left to right after trimming whitespace and lowercasing:

    [v][N!]N(.N)*[{a|b|rc}N][.postN][.devN][+local]

Every spelling variant allowed by PEP 440 is accepted: alternate labels
(alpha, c, pre, preview, rev, r), ``.``/``-``/``_`` or no separator around
labels, a missing number (read as 0) and the ``1.0-1`` post-release
shorthand.

References:
- PEP 440: https://peps.python.org/pep-0440/
"""

from __future__ import annotations

import logging
import re
import string
from typing import Optional

from .errors import (
    ConflictingPostFormError,
    InvalidLabelError,
    MalformedLocalSegmentError,
    MissingReleaseError,
    NumericOverflowError,
    ParseError,
    TrailingCharactersError,
)
from .lexicon import (
    DEV_SPELLING,
    POST_SPELLINGS,
    PRE_SPELLINGS,
    classify_local_segment,
    normalize_prerelease_label,
    parse_number,
    strip_separators,
)
from .version import PackageVersion, PreRelease

logger = logging.getLogger(__name__)


def _alternatives(spellings) -> str:
    # Longest first so "preview" wins over "pre" and "rc" over "c"
    return "|".join(sorted(spellings, key=len, reverse=True))


EPOCH_PATTERN = re.compile(r"(?P<epoch>[0-9]+)!")
RELEASE_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+)*")
PRE_PATTERN = re.compile(rf"[._-]?(?:{_alternatives(PRE_SPELLINGS)})")
POST_PATTERN = re.compile(rf"[._-]?(?:{_alternatives(POST_SPELLINGS)})")
BARE_POST_PATTERN = re.compile(r"-(?P<number>[0-9]+)")
DEV_PATTERN = re.compile(rf"[._-]?{DEV_SPELLING}")
LABEL_NUMBER_PATTERN = re.compile(r"[._-]?(?P<number>[0-9]+)")
LOCAL_PATTERN = re.compile(r"[a-z0-9]+(?:[._-][a-z0-9]+)*")
LOCAL_SEPARATOR_PATTERN = re.compile(r"[._-]")
WORD_PATTERN = re.compile(r"[._-]?[a-z]+")

_KNOWN_WORDS = frozenset(PRE_SPELLINGS) | POST_SPELLINGS | {DEV_SPELLING}
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_BARE = "bare"
_LABELED = "labeled"


class _Scanner:
    """Cursor over the normalized input text."""

    def __init__(self, source: str, text: str):
        self.source = source
        self.text = text
        self.pos = 0

    def match(self, pattern: re.Pattern) -> Optional[re.Match]:
        found = pattern.match(self.text, self.pos)
        if found:
            self.pos = found.end()
        return found

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def number(self, digits: str, position: int) -> int:
        try:
            return parse_number(digits)
        except NumericOverflowError as exc:
            raise NumericOverflowError(self.source, exc.message, position) from exc

    def label_number(self) -> int:
        """Consume the optional number after a label; a missing number is 0."""
        found = self.match(LABEL_NUMBER_PATTERN)
        if found is None:
            return 0
        return self.number(found.group("number"), found.start("number"))


def _parse_release(scanner: _Scanner) -> tuple[int, ...]:
    start = scanner.pos
    found = scanner.match(RELEASE_PATTERN)
    if found is None:
        raise MissingReleaseError(
            scanner.source, f"No release segment found in {scanner.source!r}", start
        )

    release = []
    offset = start
    for digits in found.group(0).split("."):
        release.append(scanner.number(digits, offset))
        offset += len(digits) + 1
    return tuple(release)


def _parse_pre(scanner: _Scanner) -> Optional[PreRelease]:
    found = scanner.match(PRE_PATTERN)
    if found is None:
        return None
    label = normalize_prerelease_label(found.group(0))
    return PreRelease(label, scanner.label_number())


def _parse_post(scanner: _Scanner) -> tuple[Optional[int], Optional[str]]:
    """Return the post-release number and which form spelled it."""
    found = scanner.match(BARE_POST_PATTERN)
    if found is not None:
        return scanner.number(found.group("number"), found.start("number")), _BARE

    if scanner.match(POST_PATTERN) is not None:
        return scanner.label_number(), _LABELED

    return None, None


def _parse_dev(scanner: _Scanner) -> Optional[int]:
    if scanner.match(DEV_PATTERN) is None:
        return None
    return scanner.label_number()


def _parse_local(scanner: _Scanner) -> Optional[tuple]:
    if scanner.at_end() or scanner.text[scanner.pos] != "+":
        return None

    start = scanner.pos + 1
    label = scanner.text[start:]
    scanner.pos = len(scanner.text)
    if not LOCAL_PATTERN.fullmatch(label):
        raise MalformedLocalSegmentError(
            scanner.source, f"Invalid local version label: {label!r}", start
        )

    segments = []
    offset = start
    for token in LOCAL_SEPARATOR_PATTERN.split(label):
        try:
            segments.append(classify_local_segment(token))
        except NumericOverflowError as exc:
            raise NumericOverflowError(scanner.source, exc.message, offset) from exc
        offset += len(token) + 1
    return tuple(segments)


def _reject_leftover(scanner: _Scanner, post_form: Optional[str]) -> None:
    """Raise the most specific error for text the grammar did not consume."""
    position = scanner.pos
    leftover = scanner.text[position:]

    word = WORD_PATTERN.match(scanner.text, position)
    if word is not None:
        token = strip_separators(word.group(0))
        if post_form == _BARE and token in POST_SPELLINGS:
            raise ConflictingPostFormError(
                scanner.source,
                f"Post-release given both as '-N' and as {token!r} in {scanner.source!r}",
                position,
            )
        if token not in _KNOWN_WORDS:
            raise InvalidLabelError(
                scanner.source, f"Unrecognized label {token!r} in {scanner.source!r}", position
            )

    if post_form == _LABELED and BARE_POST_PATTERN.match(scanner.text, position):
        raise ConflictingPostFormError(
            scanner.source,
            f"Post-release given both as a label and as '-N' in {scanner.source!r}",
            position,
        )

    raise TrailingCharactersError(
        scanner.source, f"Unexpected trailing characters {leftover!r} in {scanner.source!r}", position
    )


def _parse(version_string: str) -> PackageVersion:
    if not isinstance(version_string, str):
        raise ParseError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    # Only ASCII letters fold; anything else is left to fail the grammar
    scanner = _Scanner(version_string, version_string.strip().translate(_ASCII_LOWER))
    if scanner.text.startswith("v"):
        scanner.pos = 1

    epoch = 0
    found = scanner.match(EPOCH_PATTERN)
    if found is not None:
        epoch = scanner.number(found.group("epoch"), found.start("epoch"))

    release = _parse_release(scanner)
    pre = _parse_pre(scanner)
    post, post_form = _parse_post(scanner)
    dev = _parse_dev(scanner)
    local = _parse_local(scanner)

    if not scanner.at_end():
        _reject_leftover(scanner, post_form)

    return PackageVersion(
        release=release,
        epoch=epoch,
        pre=pre,
        post=post,
        dev=dev,
        local=local,
        original=version_string,
    )


def parse(version_string: str) -> PackageVersion:
    """Parse a PEP 440 version string into a PackageVersion.

    Args:
        version_string: Version text such as ``1.0``, ``v1.0a2.dev456`` or
            ``1!2.3.4.post1+local.7``

    Returns:
        The parsed PackageVersion

    Raises:
        ParseError: If the string is not a valid PEP 440 version. The
            subclass names the problem (MissingReleaseError,
            InvalidLabelError, NumericOverflowError,
            ConflictingPostFormError, TrailingCharactersError or
            MalformedLocalSegmentError).

    Examples:
        >>> parse("1.0-ALPHA_2")
        <PackageVersion('1.0a2')>
        >>> parse("1.0-1").post
        1
        >>> parse("1!2.3.4.post1+local.7").local_label
        'local.7'
    """
    try:
        return _parse(version_string)
    except ParseError as exc:
        logger.debug("Rejected version %r: %s", version_string, exc.message)
        raise


def validate_version(version_string: str) -> str:
    """Return the canonical form of a version string.

    Raises:
        ParseError: If the string is not a valid PEP 440 version

    Examples:
        >>> validate_version("v1.0.0-RC.1")
        '1.0.0rc1'
    """
    return str(parse(version_string))


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid PEP 440 version.

    Examples:
        >>> is_valid_version("1.0.post1")
        True
        >>> is_valid_version("1.0-")
        False
        >>> is_valid_version(None)
        False
    """
    try:
        parse(version_string)
    except ParseError:
        return False
    return True
