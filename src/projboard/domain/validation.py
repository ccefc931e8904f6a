"""Declarative field validation.

A :class:`ConstraintSet` bundles optional rules for one field value.
Rules are independent and conjunctive; an absent rule is vacuously met,
and a rule that does not apply to the value's type is ignored:

- ``required``: strings must be non-blank after trimming; any number
  (including ``0``) is present; ``None`` never is.
- ``min_length`` / ``max_length``: strings only, trimmed length.
- ``min`` / ``max``: numbers only (``bool`` is not a number here).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ConstraintSet(BaseModel):
    """Optional validation rules applied to a single value."""

    model_config = {"frozen": True}

    required: bool = False
    min_length: int | None = None
    max_length: int | None = None
    min: float | None = None
    max: float | None = None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def failed_constraints(value: Any, constraints: ConstraintSet) -> list[str]:
    """Return the names of every constraint *value* fails, in declaration order."""
    failed: list[str] = []

    if constraints.required:
        if value is None or (isinstance(value, str) and not value.strip()):
            failed.append("required")

    if isinstance(value, str):
        length = len(value.strip())
        if constraints.min_length is not None and length < constraints.min_length:
            failed.append("min_length")
        if constraints.max_length is not None and length > constraints.max_length:
            failed.append("max_length")

    if _is_number(value):
        if constraints.min is not None and not value >= constraints.min:
            failed.append("min")
        if constraints.max is not None and not value <= constraints.max:
            failed.append("max")

    return failed


def validate(value: Any, constraints: ConstraintSet) -> bool:
    """True iff *value* satisfies every rule in *constraints*."""
    return not failed_constraints(value, constraints)


def parse_people(raw: str | int | None) -> int | None:
    """Coerce the headcount form field to an int.

    Blank or non-integer text yields None, which fails ``required``.
    """
    if raw is None:
        return None
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    text = str(raw).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        return None
