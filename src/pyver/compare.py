# SPDX-License-Identifier: MIT
"""Version comparison following PEP 440 precedence.

Versions are compared field by field, stopping at the first difference:
epoch, release, pre-release, post-release, dev-release, local label.
Each field has its own rule because a missing segment sorts differently
depending on which segment it is:
- no pre-release sorts after any pre-release
- no post-release sorts before any post-release
- no dev-release sorts after any dev-release
- no local label sorts before any local label

The same rules build the sort/hash key, so ``compare(a, b) == 0`` holds
exactly when ``version_key(a) == version_key(b)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterable, TypeVar, Union

from .lexicon import Numeric

if TYPE_CHECKING:
    from .version import PackageVersion

VersionLike = Union[str, "PackageVersion"]
_T = TypeVar("_T", str, "PackageVersion")


def _epoch_rule(version: PackageVersion) -> int:
    # Any epoch outranks every other field
    return version.epoch


def _release_rule(version: PackageVersion) -> tuple[int, ...]:
    # 1.0 and 1.0.0 are the same release
    release = list(version.release)
    while release and release[-1] == 0:
        release.pop()
    return tuple(release)


def _pre_rule(version: PackageVersion) -> tuple[int, int, int]:
    if version.pre is None:
        if version.post is None and version.dev is not None:
            # 1.0.dev1 precedes 1.0a1
            return (-1, 0, 0)
        return (1, 0, 0)
    return (0, version.pre.label.rank, version.pre.number)


def _post_rule(version: PackageVersion) -> tuple[int, int]:
    if version.post is None:
        return (0, 0)
    return (1, version.post)


def _dev_rule(version: PackageVersion) -> tuple[int, int]:
    if version.dev is None:
        return (1, 0)
    return (0, version.dev)


def _local_rule(version: PackageVersion) -> tuple[int, tuple[tuple[int, int, str], ...]]:
    if version.local is None:
        return (0, ())
    # Numeric segments sort below alphanumeric ones at the same position;
    # tuple comparison makes a strict prefix sort first
    segments = tuple(
        (0, segment.value, "") if isinstance(segment, Numeric) else (1, 0, segment.value)
        for segment in version.local
    )
    return (1, segments)


_RULES: tuple[Callable[[PackageVersion], Any], ...] = (
    _epoch_rule,
    _release_rule,
    _pre_rule,
    _post_rule,
    _dev_rule,
    _local_rule,
)


def compare(left: PackageVersion, right: PackageVersion) -> int:
    """Compare two parsed versions.

    Returns:
        -1 if left < right
        0 if left == right
        1 if left > right
    """
    for rule in _RULES:
        left_key = rule(left)
        right_key = rule(right)
        if left_key != right_key:
            return -1 if left_key < right_key else 1
    return 0


def _coerce(version: VersionLike) -> PackageVersion:
    if isinstance(version, str):
        from .parser import parse

        return parse(version)
    return version


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, suitable for sorting and hashing.

    Args:
        version: Version string or PackageVersion

    Returns:
        A tuple ordered exactly like ``compare``

    Raises:
        ParseError: If a version string is invalid

    Examples:
        >>> sorted(["1.0", "1.0rc1", "1.0.post1", "1.0.dev1"], key=version_key)
        ['1.0.dev1', '1.0rc1', '1.0', '1.0.post1']
    """
    parsed = _coerce(version)
    return tuple(rule(parsed) for rule in _RULES)


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions following PEP 440 ordering.

    Args:
        version1: First version (string or PackageVersion)
        version2: Second version (string or PackageVersion)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        ParseError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0", "1.0.0")
        0
        >>> compare_versions("1.0a1", "1.0")
        -1
        >>> compare_versions("1!0.1", "2.0")
        1
    """
    return compare(_coerce(version1), _coerce(version2))


def sort_versions(versions: Iterable[_T], reverse: bool = False) -> list[_T]:
    """Sort versions by PEP 440 precedence, keeping the caller's items."""
    return sorted(versions, key=version_key, reverse=reverse)


def max_version(versions: Iterable[_T]) -> _T:
    """Return the highest version.

    Raises:
        ValueError: If ``versions`` is empty
    """
    return max(versions, key=version_key)
