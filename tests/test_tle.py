"""Tests for the TLE record model."""

import dataclasses

import pytest

from sgpkit.core.tle import TLE
from sgpkit.exceptions import InvalidLineLength, TLEError

ISS_NAME = "ISS (ZARYA)"
ISS_LINE1 = "1 11416U 79057A   80003.44366214  .00000727  00000-0  33454-3 0   878"
ISS_LINE2 = "2 11416  98.7309  35.7226 0013335  92.0280 268.2428 14.22474848 27074"


class TestTLEConstruction:
    def test_create(self) -> None:
        tle = TLE(ISS_NAME, ISS_LINE1, ISS_LINE2)
        assert tle.title == ISS_NAME
        assert tle.line1 == ISS_LINE1
        assert tle.line2 == ISS_LINE2

    def test_from_lines_defaults_to_empty_title(self) -> None:
        tle = TLE.from_lines(ISS_LINE1, ISS_LINE2)
        assert tle.title == ""

    def test_from_lines_with_title(self) -> None:
        assert TLE.from_lines(ISS_LINE1, ISS_LINE2, title=ISS_NAME) == TLE(ISS_NAME, ISS_LINE1, ISS_LINE2)

    def test_title_kept_verbatim(self) -> None:
        tle = TLE("  padded title  ", ISS_LINE1, ISS_LINE2)
        assert tle.title == "  padded title  "

    def test_empty_lines_rejected(self) -> None:
        with pytest.raises(InvalidLineLength):
            TLE.from_lines("", "")

    @pytest.mark.parametrize("length", [67, 68, 70, 71])
    def test_wrong_length_line1_rejected(self, length: int) -> None:
        with pytest.raises(InvalidLineLength, match="69 characters"):
            TLE.from_lines("a" * length, ISS_LINE2)

    def test_wrong_length_line2_rejected(self) -> None:
        with pytest.raises(InvalidLineLength) as excinfo:
            TLE.from_lines(ISS_LINE1, ISS_LINE2[:-1])
        assert excinfo.value.line_lengths == (69, 68)
        assert excinfo.value.record_index is None

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            TLE.from_lines("a" * 70, "a" * 70)
        assert issubclass(InvalidLineLength, TLEError)

    def test_no_charset_validation(self) -> None:
        tle = TLE.from_lines("x" * 69, "y" * 69)
        assert tle.line1 == "x" * 69


class TestTLEValueSemantics:
    def test_equality_is_structural(self) -> None:
        assert TLE(ISS_NAME, ISS_LINE1, ISS_LINE2) == TLE(ISS_NAME, ISS_LINE1, ISS_LINE2)

    def test_title_participates_in_equality(self) -> None:
        assert TLE("A", ISS_LINE1, ISS_LINE2) != TLE("B", ISS_LINE1, ISS_LINE2)

    def test_hashable(self) -> None:
        assert len({TLE(ISS_NAME, ISS_LINE1, ISS_LINE2), TLE(ISS_NAME, ISS_LINE1, ISS_LINE2)}) == 1

    def test_immutable(self) -> None:
        tle = TLE(ISS_NAME, ISS_LINE1, ISS_LINE2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            tle.line1 = "x" * 69  # type: ignore[misc]

    def test_replace_revalidates(self) -> None:
        tle = TLE(ISS_NAME, ISS_LINE1, ISS_LINE2)
        with pytest.raises(InvalidLineLength):
            dataclasses.replace(tle, line2="short")

    def test_str(self) -> None:
        tle = TLE(ISS_NAME, ISS_LINE1, ISS_LINE2)
        assert str(tle) == f"{ISS_NAME}\n{ISS_LINE1}\n{ISS_LINE2}"
