"""Right angle data models.

Naming used throughout the package:
    rise: side opposite the angle (a)
    run: side adjacent to the angle (b)
    diagonal: hypotenuse (c)
    radians: the angle between run and diagonal (r)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, TypedDict

SideName = Literal['rise', 'run', 'diagonal']

SIDE_NAMES: tuple[SideName, ...] = ('rise', 'run', 'diagonal')


class RightAngleDict(TypedDict):
    """Type definition for RightAngle serialization."""

    radians: float
    rise: float
    run: float
    diagonal: float


class RightAngleInputDict(TypedDict, total=False):
    """Type definition for RightAngleInput serialization.

    Absent keys mean the value is unknown.
    """

    radians: float
    rise: float
    run: float
    diagonal: float


def _require_number(key: str, value: object) -> float:
    """Coerce a serialized value to float, rejecting non-numbers.

    bool is rejected explicitly since it is an int subclass. Integers too
    large for a float raise OverflowError.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(
            f"{key} must be a number, got {type(value).__name__}"
        )
    try:
        return float(value)
    except OverflowError as e:
        raise OverflowError(f"{key} is too large for a float") from e


@dataclass(slots=True, frozen=True)
class RightAngle:
    """
    A fully populated right angle.

    Attributes:
        radians: Angle between run and diagonal, in radians
        rise: Length of the side opposite the angle
        run: Length of the side adjacent to the angle
        diagonal: Length of the hypotenuse
    """

    radians: float
    rise: float
    run: float
    diagonal: float

    def __repr__(self) -> str:
        return (
            f"RightAngle(rise={self.rise:g}, run={self.run:g}, "
            f"diagonal={self.diagonal:g}, radians={self.radians:g})"
        )

    @property
    def degrees(self) -> float:
        """The angle converted to degrees, for display only."""
        return math.degrees(self.radians)

    def to_dict(self) -> RightAngleDict:
        """Convert to dictionary for JSON serialization. All keys are emitted."""
        return RightAngleDict(
            radians=self.radians,
            rise=self.rise,
            run=self.run,
            diagonal=self.diagonal,
        )

    @classmethod
    def from_dict(cls, data: RightAngleDict) -> RightAngle:
        """Create RightAngle from dictionary.

        Raises:
            KeyError: If any of the four fields is missing
            TypeError: If a field is not a number
        """
        return cls(
            radians=_require_number('radians', data['radians']),
            rise=_require_number('rise', data['rise']),
            run=_require_number('run', data['run']),
            diagonal=_require_number('diagonal', data['diagonal']),
        )


@dataclass(slots=True)
class RightAngleInput:
    """
    A partially known right angle, used to request completion.

    Each field is independently known or unknown. None means unknown,
    which is distinct from a length or angle of zero.
    """

    radians: float | None = None
    rise: float | None = None
    run: float | None = None
    diagonal: float | None = None

    def __repr__(self) -> str:
        parts = [
            f"{name}={getattr(self, name)!r}"
            for name in ('radians', *SIDE_NAMES)
            if getattr(self, name) is not None
        ]
        return f"RightAngleInput({', '.join(parts)})"

    def known_sides(self) -> dict[SideName, float]:
        """Return the known sides in rise, run, diagonal order."""
        sides: dict[SideName, float] = {}
        for name in SIDE_NAMES:
            value = getattr(self, name)
            if value is not None:
                sides[name] = value
        return sides

    @property
    def side_count(self) -> int:
        """Number of known sides (0 to 3)."""
        return len(self.known_sides())

    def to_dict(self) -> RightAngleInputDict:
        """Convert to dictionary for JSON serialization, omitting unknown fields."""
        data = RightAngleInputDict()
        if self.radians is not None:
            data['radians'] = self.radians
        if self.rise is not None:
            data['rise'] = self.rise
        if self.run is not None:
            data['run'] = self.run
        if self.diagonal is not None:
            data['diagonal'] = self.diagonal
        return data

    @classmethod
    def from_dict(cls, data: RightAngleInputDict) -> RightAngleInput:
        """Create RightAngleInput from dictionary.

        Missing keys and None values are treated as unknown. Keys other
        than the four fields are ignored.

        Raises:
            TypeError: If a present value is not a number
        """
        values: dict[str, float | None] = {}
        for name in ('radians', *SIDE_NAMES):
            raw = data.get(name)
            values[name] = None if raw is None else _require_number(name, raw)
        return cls(**values)
