"""Complete a right angle from partially known measurements.

The input is first classified by how many sides are known:

    NoSides     -> nothing fixes the scale, always an error
    OneSide     -> the angle is required, the other two sides follow
    TwoSides    -> the third side follows; the angle follows if missing
    ThreeSides  -> all sides are kept; the angle follows if missing

A supplied angle (or a full set of sides) is trusted verbatim. No
consistency check is made between supplied values, and NaN or infinite
results from out-of-domain input are returned as-is unless strict mode
is requested.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..models import (
    AngleRequiredError,
    InvalidInputError,
    RightAngle,
    RightAngleInput,
    SideName,
    TooFewSidesError,
    TooManySidesError,
)
from .trig import (
    diagonal_from_rise_run,
    radians_from_rise_diagonal,
    radians_from_rise_run,
    radians_from_run_diagonal,
    rise_diagonal_from_radians_run,
    rise_from_run_diagonal,
    rise_run_from_radians_diagonal,
    run_diagonal_from_radians_rise,
    run_from_rise_diagonal,
)
from .validation import validate_domain


@dataclass(slots=True, frozen=True)
class NoSides:
    """No side is known."""

    radians: float | None


@dataclass(slots=True, frozen=True)
class OneSide:
    """Exactly one side is known."""

    side: SideName
    length: float
    radians: float | None


@dataclass(slots=True, frozen=True)
class TwoSides:
    """Exactly two sides are known, in rise, run, diagonal order."""

    first: SideName
    first_length: float
    second: SideName
    second_length: float
    radians: float | None


@dataclass(slots=True, frozen=True)
class ThreeSides:
    """All three sides are known."""

    rise: float
    run: float
    diagonal: float
    radians: float | None


KnownSides = Union[NoSides, OneSide, TwoSides, ThreeSides]


def classify(partial: RightAngleInput) -> KnownSides:
    """
    Classify a partial input by the sides it carries.

    Args:
        partial: Partially known right angle

    Returns:
        The matching KnownSides variant

    Raises:
        InvalidInputError: If the side count falls outside 0-3
    """
    sides = list(partial.known_sides().items())
    count = len(sides)

    if count == 0:
        return NoSides(radians=partial.radians)
    if count == 1:
        (side, length), = sides
        return OneSide(side=side, length=length, radians=partial.radians)
    if count == 2:
        (first, first_length), (second, second_length) = sides
        return TwoSides(
            first=first,
            first_length=first_length,
            second=second,
            second_length=second_length,
            radians=partial.radians,
        )
    if count == 3:
        return ThreeSides(
            rise=sides[0][1],
            run=sides[1][1],
            diagonal=sides[2][1],
            radians=partial.radians,
        )
    raise InvalidInputError()


def _solve_one_side(known: OneSide) -> RightAngle:
    """Derive the two missing sides from the angle and the known side."""
    if known.radians is None:
        raise AngleRequiredError()
    radians = known.radians

    if known.side == 'rise':
        run, diagonal = run_diagonal_from_radians_rise(radians, known.length)
        return RightAngle(radians=radians, rise=known.length, run=run, diagonal=diagonal)
    if known.side == 'run':
        rise, diagonal = rise_diagonal_from_radians_run(radians, known.length)
        return RightAngle(radians=radians, rise=rise, run=known.length, diagonal=diagonal)
    if known.side == 'diagonal':
        rise, run = rise_run_from_radians_diagonal(radians, known.length)
        return RightAngle(radians=radians, rise=rise, run=run, diagonal=known.length)
    raise InvalidInputError(f"Unknown side: {known.side!r}")


def _solve_two_sides(known: TwoSides) -> RightAngle:
    """Derive the missing side, and the angle when it was not supplied."""
    pair = (known.first, known.second)
    a, b = known.first_length, known.second_length

    if pair == ('rise', 'run'):
        rise, run = a, b
        diagonal = diagonal_from_rise_run(rise, run)
        radians = known.radians if known.radians is not None else radians_from_rise_run(rise, run)
    elif pair == ('rise', 'diagonal'):
        rise, diagonal = a, b
        run = run_from_rise_diagonal(rise, diagonal)
        radians = known.radians if known.radians is not None else radians_from_rise_diagonal(rise, diagonal)
    elif pair == ('run', 'diagonal'):
        run, diagonal = a, b
        rise = rise_from_run_diagonal(run, diagonal)
        radians = known.radians if known.radians is not None else radians_from_run_diagonal(run, diagonal)
    else:
        raise InvalidInputError(f"Unexpected side pair: {pair!r}")

    return RightAngle(radians=radians, rise=rise, run=run, diagonal=diagonal)


def _solve_three_sides(known: ThreeSides) -> RightAngle:
    """Keep all three sides; derive the angle from rise and run if missing."""
    radians = known.radians
    if radians is None:
        radians = radians_from_rise_run(known.rise, known.run)
    return RightAngle(
        radians=radians,
        rise=known.rise,
        run=known.run,
        diagonal=known.diagonal,
    )


def _finish(result: RightAngle, strict: bool) -> RightAngle:
    """Apply the strict-mode domain check when requested."""
    if strict:
        validate_domain(result)
    return result


def complete(partial: RightAngleInput, strict: bool = False) -> RightAngle:
    """
    Fill in whatever is missing from a partially known right angle.

    Supported inputs:
      1. One side and the angle: the other two sides are derived
      2. Two sides: the third side is derived, and the angle if missing
      3. Three sides: the angle is derived if missing

    Args:
        partial: Partially known right angle
        strict: Raise DomainError when any resulting field is NaN or infinite

    Returns:
        Fully populated RightAngle

    Raises:
        TooFewSidesError: If no side is known
        AngleRequiredError: If one side is known without the angle
        InvalidInputError: If the input cannot be classified
        DomainError: In strict mode, if a field is NaN or infinite
    """
    known = classify(partial)

    if isinstance(known, NoSides):
        raise TooFewSidesError()
    if isinstance(known, OneSide):
        return _finish(_solve_one_side(known), strict)
    if isinstance(known, TwoSides):
        return _finish(_solve_two_sides(known), strict)
    if isinstance(known, ThreeSides):
        return _finish(_solve_three_sides(known), strict)
    raise InvalidInputError()


def complete_from_angle(partial: RightAngleInput, strict: bool = False) -> RightAngle:
    """
    Given the angle and exactly one side, calculate the other two sides.

    More than one side is rejected rather than resolved by priority.

    Args:
        partial: Input carrying the angle and one side
        strict: Raise DomainError when any resulting field is NaN or infinite

    Returns:
        Fully populated RightAngle

    Raises:
        AngleRequiredError: If the angle is missing
        TooFewSidesError: If no side is known
        TooManySidesError: If more than one side is known
    """
    if partial.radians is None:
        raise AngleRequiredError()

    known = classify(partial)
    if isinstance(known, NoSides):
        raise TooFewSidesError()
    if not isinstance(known, OneSide):
        raise TooManySidesError()
    return _finish(_solve_one_side(known), strict)


def complete_from_sides(partial: RightAngleInput, strict: bool = False) -> RightAngle:
    """
    Given two or three sides, calculate whatever is missing.

    Args:
        partial: Input carrying at least two sides, angle optional
        strict: Raise DomainError when any resulting field is NaN or infinite

    Returns:
        Fully populated RightAngle

    Raises:
        TooFewSidesError: If fewer than two sides are known
    """
    known = classify(partial)
    if isinstance(known, TwoSides):
        return _finish(_solve_two_sides(known), strict)
    if isinstance(known, ThreeSides):
        return _finish(_solve_three_sides(known), strict)
    raise TooFewSidesError()
