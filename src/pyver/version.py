# SPDX-License-Identifier: MIT
"""Structured representation of a parsed PEP 440 version."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, NamedTuple, Optional

from .compare import compare, version_key
from .lexicon import LocalSegment, PreReleaseLabel


class PreRelease(NamedTuple):
    """A pre-release segment such as ``a1`` or ``rc2``."""

    label: PreReleaseLabel
    number: int

    def __str__(self) -> str:
        return f"{self.label.value}{self.number}"


def format_version(
    epoch: int,
    release: Iterable[int],
    pre: Optional[object] = None,
    post: Optional[int] = None,
    dev: Optional[int] = None,
    local: Optional[Iterable[object]] = None,
) -> str:
    """Render version fields in canonical PEP 440 form.

    ``pre`` is anything whose ``str()`` is the canonical pre-release segment
    (a PreRelease, or text such as ``"rc1"``). Local segments are rendered
    with ``str()`` and joined with dots.

    Examples:
        >>> format_version(1, (2, 0), "rc1", post=3, local=("ubuntu", 2))
        '1!2.0rc1.post3+ubuntu.2'
    """
    version = ".".join(str(part) for part in release)
    if epoch:
        version = f"{epoch}!{version}"
    if pre is not None:
        version += str(pre)
    if post is not None:
        version += f".post{post}"
    if dev is not None:
        version += f".dev{dev}"
    if local is not None:
        version += "+" + ".".join(str(segment) for segment in local)
    return version


@dataclass(frozen=True, slots=True, eq=False)
class PackageVersion:
    """Represents a parsed PEP 440 version.

    Instances come from ``pyver.parse``. Equality, ordering and hashing all
    go through ``pyver.compare``, so ``1.0 == 1.0.0`` and equal versions
    always hash the same.

    Attributes:
        release: Release numbers, at least one (e.g., (1, 2, 3))
        epoch: Version epoch, 0 unless written as ``N!``
        pre: Optional pre-release label and number
        post: Optional post-release number
        dev: Optional dev-release number
        local: Optional local version segments
        original: The text this version was parsed from (not compared)
    """

    release: tuple[int, ...]
    epoch: int = 0
    pre: Optional[PreRelease] = None
    post: Optional[int] = None
    dev: Optional[int] = None
    local: Optional[tuple[LocalSegment, ...]] = None
    original: str = ""

    def __str__(self) -> str:
        """Return the canonical (normalized) form of the version."""
        return format_version(self.epoch, self.release, self.pre, self.post, self.dev, self.local)

    def __repr__(self) -> str:
        return f"<PackageVersion({str(self)!r})>"

    def __hash__(self) -> int:
        return hash(version_key(self))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackageVersion):
            return NotImplemented
        return compare(self, other) == 0

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, PackageVersion):
            return NotImplemented
        return compare(self, other) != 0

    def __lt__(self, other: PackageVersion) -> bool:
        if not isinstance(other, PackageVersion):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: PackageVersion) -> bool:
        if not isinstance(other, PackageVersion):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: PackageVersion) -> bool:
        if not isinstance(other, PackageVersion):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: PackageVersion) -> bool:
        if not isinstance(other, PackageVersion):
            return NotImplemented
        return compare(self, other) >= 0

    @property
    def major(self) -> int:
        return self.release[0]

    @property
    def minor(self) -> int:
        return self.release[1] if len(self.release) > 1 else 0

    @property
    def micro(self) -> int:
        return self.release[2] if len(self.release) > 2 else 0

    @property
    def is_prerelease(self) -> bool:
        """Return True for pre-releases and dev-releases."""
        return self.pre is not None or self.dev is not None

    @property
    def is_postrelease(self) -> bool:
        return self.post is not None

    @property
    def is_devrelease(self) -> bool:
        return self.dev is not None

    @property
    def base_version(self) -> str:
        """Return the epoch and release only (e.g., ``1!2.0`` for ``1!2.0rc1``)."""
        return format_version(self.epoch, self.release)

    @property
    def public(self) -> str:
        """Return the canonical form without the local label."""
        return format_version(self.epoch, self.release, self.pre, self.post, self.dev)

    @property
    def local_label(self) -> Optional[str]:
        """Return the canonical local label (e.g., ``ubuntu.1``), if any."""
        if self.local is None:
            return None
        return ".".join(str(segment) for segment in self.local)
