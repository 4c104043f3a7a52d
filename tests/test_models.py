"""
Tests for RightAngle and RightAngleInput models.

Run with: pytest tests/ -v
"""
import math

import pytest

from pythagoras.models import RightAngle, RightAngleInput

from helpers import RIGHT_ANGLE_345


class TestRightAngleModel:
    """Test the complete record."""

    def test_to_dict_has_all_fields(self) -> None:
        data = RightAngle(radians=0.5, rise=1.0, run=2.0, diagonal=3.0).to_dict()
        assert data == {'radians': 0.5, 'rise': 1.0, 'run': 2.0, 'diagonal': 3.0}

    def test_from_dict(self) -> None:
        triangle = RightAngle.from_dict({'radians': 0.5, 'rise': 1, 'run': 2, 'diagonal': 3})
        assert triangle == RightAngle(radians=0.5, rise=1.0, run=2.0, diagonal=3.0)
        assert isinstance(triangle.rise, float)

    def test_from_dict_missing_field(self) -> None:
        with pytest.raises(KeyError):
            RightAngle.from_dict({'radians': 0.5, 'rise': 1.0, 'run': 2.0})  # type: ignore[typeddict-item]

    def test_from_dict_rejects_bool(self) -> None:
        with pytest.raises(TypeError, match="rise must be a number"):
            RightAngle.from_dict({'radians': 0.5, 'rise': True, 'run': 2.0, 'diagonal': 3.0})

    def test_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            RIGHT_ANGLE_345.rise = 6.0  # type: ignore[misc]

    def test_degrees(self) -> None:
        triangle = RightAngle(radians=math.pi / 4, rise=1.0, run=1.0, diagonal=math.sqrt(2))
        assert triangle.degrees == pytest.approx(45.0)

    def test_repr(self) -> None:
        triangle = RightAngle(radians=0.5, rise=3.0, run=4.0, diagonal=5.0)
        assert repr(triangle) == "RightAngle(rise=3, run=4, diagonal=5, radians=0.5)"


class TestRightAngleInputModel:
    """Test the partial record."""

    def test_defaults_unknown(self) -> None:
        partial = RightAngleInput()
        assert partial.radians is None
        assert partial.known_sides() == {}
        assert partial.side_count == 0

    def test_known_sides_order(self) -> None:
        partial = RightAngleInput(diagonal=5.0, rise=3.0)
        assert list(partial.known_sides()) == ['rise', 'diagonal']
        assert partial.side_count == 2

    def test_zero_counts_as_known(self) -> None:
        assert RightAngleInput(run=0.0).side_count == 1

    def test_to_dict_omits_unknown(self) -> None:
        assert RightAngleInput(rise=3.0, radians=0.5).to_dict() == {'radians': 0.5, 'rise': 3.0}

    def test_from_dict_none_is_unknown(self) -> None:
        partial = RightAngleInput.from_dict({'rise': 3.0, 'run': None})  # type: ignore[typeddict-item]
        assert partial == RightAngleInput(rise=3.0)

    def test_from_dict_ignores_extra_keys(self) -> None:
        partial = RightAngleInput.from_dict({'rise': 3, 'colour': 'red'})  # type: ignore[typeddict-unknown-key]
        assert partial == RightAngleInput(rise=3.0)

    def test_from_dict_rejects_string(self) -> None:
        with pytest.raises(TypeError, match="run must be a number, got str"):
            RightAngleInput.from_dict({'run': '4'})  # type: ignore[typeddict-item]

    def test_repr_shows_known_only(self) -> None:
        assert repr(RightAngleInput(rise=3.0)) == "RightAngleInput(rise=3.0)"

    def test_is_mutable(self) -> None:
        partial = RightAngleInput()
        partial.run = 4.0
        assert partial.side_count == 1
