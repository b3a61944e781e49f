# SPDX-License-Identifier: MIT
"""Unit tests for structured version serialization."""

import json

import pytest
from hypothesis import given, settings
from pydantic import ValidationError

from pyver import VersionModel, dump_version, load_version, parse
from pyver.serialization import to_model

from strategies import version_text


class TestDumpVersion:
    """Tests for dump_version."""

    def test_plain_release(self):
        """Test dumping a plain release."""
        assert dump_version(parse("1.2")) == {
            "epoch": 0,
            "release": [1, 2],
            "pre": None,
            "post": None,
            "dev": None,
            "local": None,
        }

    def test_all_segments(self):
        """Test dumping a version with every segment."""
        data = dump_version(parse("2!1.0-Preview-3.post4.dev5+Ubuntu.7"))
        assert data == {
            "epoch": 2,
            "release": [1, 0],
            "pre": {"label": "rc", "number": 3},
            "post": 4,
            "dev": 5,
            "local": ["ubuntu", 7],
        }

    def test_json_serializable(self):
        """Test that dumped data survives a JSON round trip."""
        data = dump_version(parse("1.0a1+abc.5"))
        assert load_version(json.loads(json.dumps(data))) == parse("1.0a1+abc.5")


class TestLoadVersion:
    """Tests for load_version."""

    def test_from_dict(self):
        """Test loading a version from a dict."""
        v = load_version({"release": [1, 0], "pre": {"label": "b", "number": 2}})
        assert v == parse("1.0b2")

    def test_from_model(self):
        """Test loading a version from a VersionModel."""
        model = VersionModel(release=[3, 1], post=1)
        assert load_version(model) == parse("3.1.post1")

    def test_original_is_canonical_text(self):
        """Test that loaded versions record their canonical text."""
        v = load_version({"release": [1, 0], "local": ["ABC", 5]})
        assert v.original == "1.0+abc.5"

    def test_empty_release(self):
        """Test that an empty release is rejected."""
        with pytest.raises(ValidationError):
            load_version({"release": []})

    def test_missing_release(self):
        """Test that a missing release is rejected."""
        with pytest.raises(ValidationError):
            load_version({"epoch": 1})

    def test_negative_numbers(self):
        """Test that negative numbers are rejected."""
        with pytest.raises(ValidationError):
            load_version({"release": [1, -1]})
        with pytest.raises(ValidationError):
            load_version({"release": [1], "post": -1})

    def test_unknown_label(self):
        """Test that non-canonical labels are rejected."""
        with pytest.raises(ValidationError):
            load_version({"release": [1], "pre": {"label": "alpha", "number": 1}})

    @pytest.mark.parametrize("local", [[], ["a.b"], ["12"], ["é"], [-1]])
    def test_invalid_local(self, local):
        """Test that malformed local segments are rejected."""
        with pytest.raises(ValidationError):
            load_version({"release": [1], "local": local})


class TestSerializationProperties:
    """Round-trip properties for structured data."""

    @given(text=version_text())
    @settings(max_examples=200, deadline=None)
    def test_dump_load_round_trip(self, text):
        """load_version(dump_version(v)) == v."""
        version = parse(text)
        assert load_version(dump_version(version)) == version

    @given(text=version_text())
    @settings(max_examples=100, deadline=None)
    def test_model_render_matches_str(self, text):
        """The model renders the same canonical text as the version."""
        version = parse(text)
        assert to_model(version).render() == str(version)
