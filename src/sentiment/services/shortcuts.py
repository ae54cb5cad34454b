"""Hotbar shortcuts that invoke a named sheet operation on a character."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from sentiment.domain.entities import Character
from sentiment.services.character_sheet_service import CharacterSheetService
from sentiment.services.errors import ShortcutError

logger = logging.getLogger(__name__)

SHORTCUT_OPERATIONS: Tuple[str, ...] = (
    "roll_to_do",
    "roll_to_dye",
    "recovery_roll",
    "drop_swing",
    "execute_custom_roll",
)
MIN_SLOT = 1
MAX_SLOT = 50
_LITERAL_TYPES = (str, int, float, bool, type(None))


@dataclass(frozen=True, slots=True)
class Shortcut:
    """Structured record of which operation to run on which character."""

    entity_id: str
    operation_name: str
    literal_args: Tuple[Any, ...] = ()
    name: str = ""


def create_shortcut(data: Mapping[str, Any]) -> Shortcut:
    """Build a shortcut from dropped data, rejecting missing or unknown fields."""
    entity_id = data.get("entity_id")
    operation_name = data.get("operation_name")
    if not entity_id or not operation_name:
        raise ShortcutError("create_shortcut called with required values missing from data.")
    if operation_name not in SHORTCUT_OPERATIONS:
        raise ShortcutError(f"Unknown shortcut operation {operation_name!r}.")
    raw_args = data.get("literal_args") or ()
    if not isinstance(raw_args, (list, tuple)):
        raise ShortcutError("Shortcut literal_args must be a list.")
    for arg in raw_args:
        if not isinstance(arg, _LITERAL_TYPES):
            raise ShortcutError(f"Shortcut argument {arg!r} is not a literal value.")
    return Shortcut(
        entity_id=str(entity_id),
        operation_name=str(operation_name),
        literal_args=tuple(raw_args),
        name=str(data.get("name") or operation_name),
    )


class ShortcutBar:
    """Numbered hotbar slots holding shortcuts."""

    def __init__(self) -> None:
        self.slots: Dict[int, Shortcut] = {}

    def assign(self, shortcut: Shortcut, slot: int) -> None:
        if not MIN_SLOT <= slot <= MAX_SLOT:
            raise ShortcutError(f"Hotbar slot must be between {MIN_SLOT} and {MAX_SLOT}, got {slot}.")
        self.slots[slot] = shortcut

    def get(self, slot: int) -> Shortcut | None:
        return self.slots.get(slot)

    def clear(self, slot: int) -> None:
        self.slots.pop(slot, None)


class ShortcutDispatcher:
    """Runs shortcuts against the sheet service."""

    def __init__(self, *, sheet_service: CharacterSheetService, characters: Mapping[str, Character]) -> None:
        self._sheet_service = sheet_service
        self._characters = characters

    def invoke(self, shortcut: Shortcut) -> Any:
        character = self._characters.get(shortcut.entity_id)
        if character is None:
            raise ShortcutError(f"Shortcut '{shortcut.name}' targets missing character '{shortcut.entity_id}'.")
        if shortcut.operation_name not in SHORTCUT_OPERATIONS:
            raise ShortcutError(f"Unknown shortcut operation {shortcut.operation_name!r}.")
        operation = getattr(self._sheet_service, shortcut.operation_name)
        logger.debug("Invoking shortcut '%s' on '%s'", shortcut.name, character.name)
        return operation(character, *shortcut.literal_args)

    def invoke_slot(self, bar: ShortcutBar, slot: int) -> Any:
        shortcut = bar.get(slot)
        if shortcut is None:
            raise ShortcutError(f"Hotbar slot {slot} is empty.")
        return self.invoke(shortcut)
