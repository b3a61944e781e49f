# SPDX-License-Identifier: MIT
"""Unit tests for the identifier vocabulary."""

import pytest

from pyver import (
    Alphanumeric,
    InvalidLabelError,
    MalformedLocalSegmentError,
    MAX_NUMERIC_VALUE,
    Numeric,
    NumericOverflowError,
    PreReleaseLabel,
    classify_local_segment,
    normalize_prerelease_label,
)


class TestNormalizePrereleaseLabel:
    """Tests for normalize_prerelease_label."""

    @pytest.mark.parametrize("text", ["a", "alpha", "A", "ALPHA", "Alpha"])
    def test_alpha_spellings(self, text):
        """Test every alpha spelling maps to ALPHA."""
        assert normalize_prerelease_label(text) is PreReleaseLabel.ALPHA

    @pytest.mark.parametrize("text", ["b", "beta", "B", "Beta"])
    def test_beta_spellings(self, text):
        """Test every beta spelling maps to BETA."""
        assert normalize_prerelease_label(text) is PreReleaseLabel.BETA

    @pytest.mark.parametrize("text", ["c", "rc", "pre", "preview", "RC", "Preview"])
    def test_release_candidate_spellings(self, text):
        """Test every release candidate spelling maps to RELEASE_CANDIDATE."""
        assert normalize_prerelease_label(text) is PreReleaseLabel.RELEASE_CANDIDATE

    @pytest.mark.parametrize("text", [".a", "-beta", "_rc", "pre-", "r_c"])
    def test_separators_are_ignored(self, text):
        """Test that '.', '-' and '_' do not affect matching."""
        assert isinstance(normalize_prerelease_label(text), PreReleaseLabel)

    @pytest.mark.parametrize("text", ["gamma", "dev", "post", "", "alph", "rc1"])
    def test_unknown_label(self, text):
        """Test that unknown tokens raise InvalidLabelError."""
        with pytest.raises(InvalidLabelError):
            normalize_prerelease_label(text)


class TestPreReleaseLabel:
    """Tests for label ranking."""

    def test_rank_order(self):
        """Test alpha < beta < release candidate."""
        assert PreReleaseLabel.ALPHA.rank < PreReleaseLabel.BETA.rank
        assert PreReleaseLabel.BETA.rank < PreReleaseLabel.RELEASE_CANDIDATE.rank

    def test_str_is_canonical_spelling(self):
        """Test labels render in their canonical short form."""
        assert str(PreReleaseLabel.ALPHA) == "a"
        assert str(PreReleaseLabel.BETA) == "b"
        assert str(PreReleaseLabel.RELEASE_CANDIDATE) == "rc"


class TestClassifyLocalSegment:
    """Tests for classify_local_segment."""

    def test_numeric(self):
        """Test that digit-only tokens are numeric."""
        assert classify_local_segment("42") == Numeric(42)

    def test_numeric_leading_zeros(self):
        """Test that leading zeros are dropped from numeric tokens."""
        assert classify_local_segment("007") == Numeric(7)

    def test_alphanumeric(self):
        """Test that tokens with letters are alphanumeric."""
        assert classify_local_segment("abc5") == Alphanumeric("abc5")

    def test_alphanumeric_lowercased(self):
        """Test that alphanumeric tokens are lowercased."""
        assert classify_local_segment("Ubuntu") == Alphanumeric("ubuntu")

    def test_numeric_limit(self):
        """Test the largest 64-bit value is accepted."""
        assert classify_local_segment(str(MAX_NUMERIC_VALUE)) == Numeric(MAX_NUMERIC_VALUE)

    def test_numeric_overflow(self):
        """Test that values past 64 bits raise NumericOverflowError."""
        with pytest.raises(NumericOverflowError):
            classify_local_segment(str(MAX_NUMERIC_VALUE + 1))

    @pytest.mark.parametrize("text", ["", "a.b", "a-b", "é", "a b"])
    def test_malformed(self, text):
        """Test that empty or non-alphanumeric tokens are rejected."""
        with pytest.raises(MalformedLocalSegmentError):
            classify_local_segment(text)

    def test_long_digit_run_overflows(self):
        """Test that digit runs too long for int() still raise NumericOverflowError."""
        with pytest.raises(NumericOverflowError):
            classify_local_segment("9" * 5000)

    def test_zero_padded_numeric(self):
        """Test that long zero padding is dropped."""
        assert classify_local_segment("0" * 5000 + "12") == Numeric(12)
        assert classify_local_segment("0" * 5000) == Numeric(0)
