"""Swing model: the banked die result tied to one attribute."""
from __future__ import annotations

from dataclasses import dataclass

NO_SWING = "ATTRIBUTE_ID_NO_SWING"


@dataclass(slots=True)
class Swing:
    """Stores the swing attribute id (or NO_SWING) and its banked value."""

    attribute_id: str = NO_SWING
    value: int = 0

    @property
    def is_set(self) -> bool:
        return self.attribute_id != NO_SWING

    def copy(self) -> "Swing":
        return Swing(attribute_id=self.attribute_id, value=self.value)
