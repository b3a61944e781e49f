# SPDX-License-Identifier: MIT
"""Pydantic models for storing parsed versions as structured data."""

from __future__ import annotations

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .lexicon import MAX_NUMERIC_VALUE
from .parser import parse
from .version import PackageVersion, format_version


class PreReleaseModel(BaseModel):
    """Pre-release segment in canonical form."""

    model_config = ConfigDict(frozen=True)

    label: Literal["a", "b", "rc"]
    number: int = Field(ge=0, le=MAX_NUMERIC_VALUE)


class VersionModel(BaseModel):
    """Structured, JSON-ready form of a PackageVersion."""

    model_config = ConfigDict(frozen=True)

    epoch: int = Field(default=0, ge=0, le=MAX_NUMERIC_VALUE)
    release: list[int] = Field(..., min_length=1, description="Release numbers, major first")
    pre: Optional[PreReleaseModel] = None
    post: Optional[int] = Field(default=None, ge=0, le=MAX_NUMERIC_VALUE)
    dev: Optional[int] = Field(default=None, ge=0, le=MAX_NUMERIC_VALUE)
    local: Optional[list[Union[int, str]]] = Field(
        default=None,
        description="Local segments; ints for numeric, lowercase strings for alphanumeric",
    )

    @field_validator("release")
    @classmethod
    def validate_release(cls, v: list[int]) -> list[int]:
        """Validate every release number is within range."""
        for part in v:
            if part < 0 or part > MAX_NUMERIC_VALUE:
                raise ValueError(f"release numbers must be between 0 and {MAX_NUMERIC_VALUE}")
        return v

    @field_validator("local")
    @classmethod
    def validate_local(cls, v: Optional[list[Union[int, str]]]) -> Optional[list[Union[int, str]]]:
        """Validate local segments are non-negative ints or alphanumeric strings."""
        if v is None:
            return v
        if not v:
            raise ValueError("local must hold at least one segment")
        for segment in v:
            if isinstance(segment, int):
                if segment < 0 or segment > MAX_NUMERIC_VALUE:
                    raise ValueError("numeric local segments must be non-negative 64-bit values")
            elif not segment.isascii() or not segment.isalnum() or segment.isdigit():
                raise ValueError(
                    f"alphanumeric local segment {segment!r} must contain a letter "
                    "and only ASCII letters and digits"
                )
        return [s.lower() if isinstance(s, str) else s for s in v]

    def render(self) -> str:
        """Return the canonical version string for these fields."""
        pre = None if self.pre is None else f"{self.pre.label}{self.pre.number}"
        return format_version(self.epoch, self.release, pre, self.post, self.dev, self.local)


def to_model(version: PackageVersion) -> VersionModel:
    """Build the structured model for a parsed version."""
    pre = None
    if version.pre is not None:
        pre = PreReleaseModel(label=version.pre.label.value, number=version.pre.number)

    local = None
    if version.local is not None:
        local = [segment.value for segment in version.local]

    return VersionModel(
        epoch=version.epoch,
        release=list(version.release),
        pre=pre,
        post=version.post,
        dev=version.dev,
        local=local,
    )


def dump_version(version: PackageVersion) -> dict[str, Any]:
    """Return a JSON-ready dict describing ``version``.

    Examples:
        >>> dump_version(parse("1.0rc1+ubuntu.2"))
        {'epoch': 0, 'release': [1, 0], 'pre': {'label': 'rc', 'number': 1}, 'post': None, 'dev': None, 'local': ['ubuntu', 2]}
    """
    return to_model(version).model_dump(mode="json")


def load_version(data: Union[dict[str, Any], VersionModel]) -> PackageVersion:
    """Rebuild a PackageVersion from data produced by ``dump_version``.

    The fields are validated, rendered to canonical text and parsed, so the
    result is exactly what ``parse`` would return for that text.

    Raises:
        pydantic.ValidationError: If the data does not describe a version
        ParseError: If the rendered text is rejected by the parser
    """
    model = data if isinstance(data, VersionModel) else VersionModel.model_validate(data)
    return parse(model.render())
