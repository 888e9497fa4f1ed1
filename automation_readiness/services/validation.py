from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Dict, List, Mapping, Optional

from automation_readiness.models.inputs import (
    DEFAULT_INPUTS,
    INPUT_CONSTRAINTS,
    ReadinessInputs,
    field_for_key,
)
from automation_readiness.scoring.utils import clamp_int

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


class ValidationErrorKind(StrEnum):
    not_a_number = "not_a_number"
    below_minimum = "below_minimum"
    above_maximum = "above_maximum"


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    message: str = ""
    kind: Optional[ValidationErrorKind] = None
    field: Optional[str] = None


class InputValidationError(ValueError):
    def __init__(self, results: List[ValidationResult]):
        self.results = results
        detail = "; ".join(f"{r.field}: {r.message}" for r in results)
        super().__init__(f"invalid readiness inputs: {detail}")


def _fmt_bound(x: float) -> str:
    return str(int(x)) if float(x).is_integer() else str(x)


def parse_int(value: Any) -> Optional[int]:
    """
    Lenient integer parse: ints pass through, floats truncate, strings use their
    leading integer ("12abc" -> 12, "7.9" -> 7). Returns None when nothing parses.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)
    m = _INT_PREFIX.match(str(value))
    if not m:
        return None
    try:
        return int(m.group(1))
    except ValueError:
        # past sys.get_int_max_str_digits()
        return None


def _to_number(value: Any) -> int | float:
    """
    Exact int where possible (volume is unbounded, floats lose digits past 2**53);
    NaN when the value is not a number at all.
    """
    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return value
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except (ValueError, OverflowError):
        return math.nan


def validate_input(name: str, value: Any) -> ValidationResult:
    field = field_for_key(name)
    if field is None:
        return ValidationResult(valid=True)

    number = _to_number(value)
    if isinstance(number, float) and math.isnan(number):
        return ValidationResult(
            valid=False,
            message="Please enter a valid number",
            kind=ValidationErrorKind.not_a_number,
            field=field,
        )

    lo, hi = INPUT_CONSTRAINTS[field]
    if number < lo:
        return ValidationResult(
            valid=False,
            message=f"Value must be at least {_fmt_bound(lo)}",
            kind=ValidationErrorKind.below_minimum,
            field=field,
        )
    if number > hi:
        return ValidationResult(
            valid=False,
            message=f"Value must be at most {_fmt_bound(hi)}",
            kind=ValidationErrorKind.above_maximum,
            field=field,
        )
    return ValidationResult(valid=True, field=field)


def validate_inputs(raw: Mapping[str, Any]) -> Dict[str, int]:
    """
    Strict path: every known key in `raw` must hold a number inside its range.
    Returns the validated values (partial) or raises InputValidationError.
    """
    failures: List[ValidationResult] = []
    out: Dict[str, int] = {}
    for key, value in raw.items():
        field = field_for_key(key)
        if field is None:
            continue
        result = validate_input(field, value)
        if not result.valid:
            failures.append(result)
            continue
        number = _to_number(value)
        if isinstance(number, float) and not number.is_integer():
            failures.append(
                ValidationResult(
                    valid=False,
                    message="Please enter a whole number",
                    kind=ValidationErrorKind.not_a_number,
                    field=field,
                )
            )
            continue
        out[field] = int(number)

    if failures:
        raise InputValidationError(failures)
    return out


def coerce_inputs(raw: Mapping[str, Any]) -> ReadinessInputs:
    """
    Lenient path used for restored state: unparseable values become 0 and
    everything is clamped into range. Absent fields keep their defaults.
    """
    values: Dict[str, int] = dict(DEFAULT_INPUTS)
    for key, value in raw.items():
        field = field_for_key(key)
        if field is None:
            continue
        parsed = parse_int(value)
        number = 0 if parsed is None else parsed
        lo, hi = INPUT_CONSTRAINTS[field]
        values[field] = clamp_int(number, lo, hi)
    return ReadinessInputs(**values)
