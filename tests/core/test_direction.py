"""Tests for direction.py - Base text direction."""

import pytest

from ldgraph.direction import Direction, UnrecognizedDirection


class TestDirection:
    """Tests for the Direction enum."""

    def test_all_directions_exist(self):
        """Both directions exist with their token values."""
        assert Direction.LTR.value == "ltr"
        assert Direction.RTL.value == "rtl"
        assert len(list(Direction)) == 2

    @pytest.mark.parametrize("token", ["ltr", "rtl"])
    def test_round_trip(self, token):
        assert Direction.parse(token).render() == token
        assert str(Direction.parse(token)) == token

    def test_parse_values(self):
        assert Direction.parse("ltr") is Direction.LTR
        assert Direction.parse("rtl") is Direction.RTL

    @pytest.mark.parametrize("token", ["LTR", "Rtl", " ltr", "ltr ", "", "auto", "left"])
    def test_parse_rejects_other_tokens(self, token):
        with pytest.raises(UnrecognizedDirection) as exc_info:
            Direction.parse(token)
        assert exc_info.value.token == token

    def test_unrecognized_is_value_error(self):
        with pytest.raises(ValueError, match="Unrecognized direction"):
            Direction.parse("up")

    def test_parse_rejects_non_string(self):
        with pytest.raises(UnrecognizedDirection) as exc_info:
            Direction.parse(b"ltr")
        assert exc_info.value.token == b"ltr"

    def test_ordering(self):
        assert Direction.LTR < Direction.RTL
        assert Direction.RTL > Direction.LTR
        assert Direction.LTR <= Direction.LTR
        assert sorted([Direction.RTL, Direction.LTR]) == [Direction.LTR, Direction.RTL]

    def test_derived_comparisons(self):
        assert Direction.RTL >= Direction.LTR
        assert Direction.RTL >= Direction.RTL
        assert not Direction.RTL <= Direction.LTR
        assert max(Direction) is Direction.RTL

    def test_ordering_against_other_types_fails(self):
        with pytest.raises(TypeError):
            Direction.LTR < "rtl"
        with pytest.raises(TypeError):
            Direction.LTR >= "rtl"

    def test_hashable(self):
        assert len({Direction.LTR, Direction.parse("ltr"), Direction.RTL}) == 2
