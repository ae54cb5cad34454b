"""Enumerations shared across the rules."""
from __future__ import annotations

from enum import Enum, IntEnum


class AttributeStatus(IntEnum):
    """Whether an attribute can be chosen for swings and rolls."""

    NORMAL = 0
    LOCKED_OUT = 1
    WOUNDED = 2


class GiftEquipStatus(IntEnum):
    UNEQUIPPED = 0
    EQUIPPED = 1
    PRIMARY = 2


class RollType(Enum):
    """Stored roll type of a custom roll."""

    ROLL_TO_DO = "RollToDo"
    ROLL_TO_DYE = "RollToDye"
    RECOVERY_ROLL = "RecoveryRoll"


class ScenarioKind(Enum):
    """Totalling variant of a Roll to Dye."""

    DYE = "Dye"
    RECOVERY = "Recovery"
