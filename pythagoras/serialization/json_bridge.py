"""JSON interchange for right angle records.

The partial record is read from a JSON object whose recognized keys are
``radians``, ``rise``, ``run`` and ``diagonal``. Any subset may be present;
missing keys and ``null`` mean unknown. Other keys are ignored.

The complete record is always written with all four keys.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from .. import config
from ..core import complete
from ..lib.triangle_utils import log
from ..models import RightAngle, RightAngleInput, RightAngleParseError


def _load_object(text: str | bytes) -> dict[str, Any]:
    """
    Decode text into a JSON object.

    Raises:
        RightAngleParseError: If the text cannot be decoded as a JSON object
    """
    try:
        parsed = json.loads(text)
    except ValueError as e:
        # JSONDecodeError, or UnicodeDecodeError for undecodable bytes
        log(f'JSONBridge: JSON decode error: {e}', logging.DEBUG)
        raise RightAngleParseError(f"Invalid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise RightAngleParseError(
            f"Expected JSON object, got {type(parsed).__name__}"
        )
    return parsed


def _report_unknown_keys(data: dict[str, Any]) -> None:
    unknown = sorted(key for key in data if key not in config.FIELD_NAMES)
    if unknown:
        log(f'JSONBridge: Ignoring unknown keys: {", ".join(unknown)}', logging.DEBUG)


def _ordered(values: dict[str, Any]) -> dict[str, Any]:
    return {name: values[name] for name in config.FIELD_NAMES if name in values}


def parse_input(text: str | bytes) -> RightAngleInput:
    """
    Parse a JSON document into a partial record.

    Args:
        text: JSON object text, e.g. '{"rise": 3, "run": 4}'

    Returns:
        RightAngleInput with unknown fields left as None

    Raises:
        RightAngleParseError: If the text is malformed or a value is not numeric
    """
    data = _load_object(text)
    _report_unknown_keys(data)
    try:
        return RightAngleInput.from_dict(data)
    except (TypeError, OverflowError) as e:
        raise RightAngleParseError(str(e)) from e


def load_right_angle(text: str | bytes) -> RightAngle:
    """
    Parse a JSON document holding a complete record.

    Raises:
        RightAngleParseError: If a field is missing or not numeric
    """
    data = _load_object(text)
    _report_unknown_keys(data)
    try:
        return RightAngle.from_dict(data)
    except KeyError as e:
        raise RightAngleParseError(f"Missing field: {e.args[0]}") from e
    except (TypeError, OverflowError) as e:
        raise RightAngleParseError(str(e)) from e


def dump_input(partial: RightAngleInput, indent: int | None = config.DEFAULT_JSON_INDENT) -> str:
    """Serialize a partial record, omitting unknown fields."""
    return json.dumps(_ordered(dict(partial.to_dict())), indent=indent)


def dump_right_angle(triangle: RightAngle, indent: int | None = config.DEFAULT_JSON_INDENT) -> str:
    """Serialize a complete record with all four fields."""
    return json.dumps(_ordered(dict(triangle.to_dict())), indent=indent)


def parse_and_complete(text: str | bytes, strict: bool = False) -> RightAngle:
    """
    Parse a partial record from JSON and complete it.

    Args:
        text: JSON object text with any subset of the four fields
        strict: Raise DomainError when any resulting field is NaN or infinite

    Returns:
        Fully populated RightAngle

    Raises:
        RightAngleParseError: If the text cannot be parsed
        RightAngleError: If the parsed input cannot be completed
    """
    partial = parse_input(text)
    return complete(partial, strict=strict)
