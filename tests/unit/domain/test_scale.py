"""
Tests for the Scale enumeration.

Covers:
- Case-insensitive token coercion with UNKNOWN fallback
- Canonical token output
- Total ordering, including UNKNOWN's position
"""

import pytest

from image_sizes.domain import Scale

CANONICAL_TOKENS = ["xxsm", "xsm", "sm", "md", "lg", "xlg", "xxlg"]


class TestScaleFromToken:
    """Test coercion of external tokens."""

    @pytest.mark.parametrize("token", CANONICAL_TOKENS)
    def test_canonical_tokens(self, token):
        """Test each canonical token maps to its member."""
        assert Scale.from_token(token).value == token

    @pytest.mark.parametrize(
        ("token", "expected"),
        [("XXSM", Scale.XXSM), ("Md", Scale.MD), ("xLg", Scale.XLG), (" lg ", Scale.LG)],
    )
    def test_case_insensitive(self, token, expected):
        """Test that matching ignores case and surrounding whitespace."""
        assert Scale.from_token(token) is expected

    @pytest.mark.parametrize(
        "token", ["", "huge", "xxxlg", "s", "medium", "thumbnail", None, 3]
    )
    def test_unrecognized_input_yields_unknown(self, token):
        """Test that unmatched input normalizes to UNKNOWN."""
        assert Scale.from_token(token) is Scale.UNKNOWN


class TestScaleToToken:
    """Test canonical token output."""

    @pytest.mark.parametrize("token", CANONICAL_TOKENS + ["XXLG", "Sm"])
    def test_round_trip_produces_lowercase_canonical_form(self, token):
        """Test from_token(t).to_token() == t.lower()."""
        assert Scale.from_token(token).to_token() == token.lower()

    def test_unknown_serializes_to_empty_string(self):
        """Test that UNKNOWN has the empty token."""
        assert Scale.UNKNOWN.to_token() == ""

    def test_tokens_are_in_ascending_order(self):
        """Test tokens() lists the seven scales smallest first."""
        assert Scale.tokens() == tuple(CANONICAL_TOKENS)


class TestScaleOrdering:
    """Test comparison behavior."""

    def test_declared_ascending_order(self):
        """Test XXSM < XSM < SM < MD < LG < XLG < XXLG."""
        assert Scale.XXSM < Scale.XSM < Scale.SM < Scale.MD < Scale.LG < Scale.XLG < Scale.XXLG

    def test_unknown_sorts_lowest(self):
        """Test UNKNOWN precedes every named scale."""
        for scale in Scale.ordered():
            assert Scale.UNKNOWN < scale
            assert scale > Scale.UNKNOWN

    def test_non_strict_comparisons(self):
        """Test <= and >= including equality."""
        assert Scale.MD <= Scale.MD
        assert Scale.MD >= Scale.MD
        assert Scale.SM <= Scale.LG
        assert Scale.XXLG >= Scale.XLG
        assert not Scale.LG <= Scale.SM

    def test_sorting(self):
        """Test that sorted() follows rank."""
        shuffled = [Scale.LG, Scale.UNKNOWN, Scale.XXSM, Scale.XXLG, Scale.MD]
        assert sorted(shuffled) == [
            Scale.UNKNOWN,
            Scale.XXSM,
            Scale.MD,
            Scale.LG,
            Scale.XXLG,
        ]
        assert max(Scale) is Scale.XXLG
        assert min(Scale) is Scale.UNKNOWN

    def test_rank_values(self):
        """Test rank runs from 0 (UNKNOWN) to 7 (XXLG)."""
        assert Scale.UNKNOWN.rank == 0
        assert [s.rank for s in Scale.ordered()] == list(range(1, 8))

    def test_comparison_with_other_types_is_unsupported(self):
        """Test ordering against non-Scale values raises TypeError."""
        with pytest.raises(TypeError):
            Scale.SM < "lg"  # noqa: B015
        with pytest.raises(TypeError):
            Scale.SM >= 3  # noqa: B015

    def test_equality_with_other_types_is_false(self):
        """Test equality is member identity, not token equality."""
        assert Scale.SM != "sm"
