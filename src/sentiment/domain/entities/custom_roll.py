"""Custom roll model: a named shortcut onto one of the roll scenarios."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_ROLL_TYPE = "RollToDo"
DEFAULT_ADDED_FORMULA = "+0"


@dataclass(slots=True)
class CustomRoll:
    """
    User-defined roll configuration.

    ``roll_type`` stays a raw string because it comes straight from stored
    data; it is validated only when the roll is executed. ``additional_formula``
    is the legacy single-formula field and overrides the hit/effect formulas
    when present.
    """

    id: str
    name: str
    roll_type: str = DEFAULT_ROLL_TYPE
    formula_added_to_hit: str = DEFAULT_ADDED_FORMULA
    formula_added_to_effect: str = DEFAULT_ADDED_FORMULA
    additional_formula: str | None = None
    sort: float = 0
