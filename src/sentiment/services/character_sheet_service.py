"""UI-agnostic character sheet operations."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence

from sentiment.core.rng import RNG
from sentiment.domain.entities import NO_SWING, Attribute, Character, CustomRoll, Gift, Health, Swing
from sentiment.domain.enums import AttributeStatus, GiftEquipStatus
from sentiment.domain.gift_ordering import group_gifts_by_status, reorder_gift
from sentiment.presentation.render import render_attribute_dice, render_roll_to_do, render_roll_to_dye
from sentiment.services.chat import ChatMessage, ChatSink
from sentiment.services.custom_roll_service import CustomRollKey, CustomRollService, RollOutcome
from sentiment.services.errors import AttributeNotFoundError, GiftNotFoundError
from sentiment.services.factories import create_attribute, create_gift
from sentiment.services.roll_resolver import (
    AttributeDie,
    DiceReporter,
    RollResolver,
    RollToDoResult,
    RollToDyeResult,
)
from sentiment.services.swing_tracker import SwingTracker

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SheetView:
    """Structured data a sheet needs to render a character."""

    character_id: str
    name: str
    health: Health
    attributes: List[Attribute]
    selectable_attributes: List[Attribute]
    swing_attribute: Attribute | None
    swing_value: int
    gifts_by_status: Dict[GiftEquipStatus, List[Gift]]
    custom_rolls: List[CustomRoll]


class CharacterSheetService:
    """
    Character sheet behaviour without any rendering.

    Responsibilities:
    - Create, edit and delete the items a character owns
    - Run rolls and post their results to the chat sink
    - Keep the swing consistent when attributes change or disappear
    """

    def __init__(
        self,
        *,
        resolver: RollResolver,
        swing_tracker: SwingTracker,
        custom_rolls: CustomRollService,
        chat: ChatSink,
        rng: RNG,
    ) -> None:
        self._resolver = resolver
        self._swing_tracker = swing_tracker
        self._custom_rolls = custom_rolls
        self._chat = chat
        self._rng = rng

    def get_sheet_view(self, character: Character) -> SheetView:
        swing_attribute = self._swing_tracker.get_swing_attribute(character)
        return SheetView(
            character_id=character.id,
            name=character.name,
            health=character.health,
            attributes=list(character.attributes),
            selectable_attributes=character.normal_attributes(),
            swing_attribute=swing_attribute,
            swing_value=character.swing.value if swing_attribute else 0,
            gifts_by_status=group_gifts_by_status(character.gifts),
            custom_rolls=list(character.custom_rolls),
        )

    # -----------------------
    # Attributes
    # -----------------------
    def add_attribute(self, character: Character, name: str | None = None) -> Attribute:
        if name is None:
            return create_attribute(character, self._rng)
        return create_attribute(character, self._rng, name)

    def delete_attribute(self, character: Character, attribute_id: str) -> Attribute:
        attribute = self._require_attribute(character, attribute_id)
        character.attributes.remove(attribute)
        self._swing_tracker.prune_dangling_swing(character)
        return attribute

    def set_attribute_modifier(self, character: Character, attribute_id: str, modifier: int) -> Attribute:
        if modifier < 0:
            raise ValueError(f"Attribute modifier must be non-negative, got {modifier}.")
        attribute = self._require_attribute(character, attribute_id)
        attribute.modifier = modifier
        return attribute

    def set_attribute_status(self, character: Character, attribute_id: str, status: AttributeStatus) -> Attribute:
        return self._resolver.set_attribute_status(character, attribute_id, status)

    # -----------------------
    # Swing
    # -----------------------
    def select_swing_attribute(self, character: Character, attribute_id: str) -> Swing:
        """Point the swing at another attribute, keeping the banked value."""
        if attribute_id == NO_SWING:
            return self._resolver.drop_swing(character)
        return self._swing_tracker.set_swing(character, attribute_id, character.swing.value)

    def drop_swing(self, character: Character) -> Swing:
        return self._resolver.drop_swing(character)

    # -----------------------
    # Gifts
    # -----------------------
    def add_gift(self, character: Character, name: str | None = None) -> Gift:
        if name is None:
            return create_gift(character, self._rng)
        return create_gift(character, self._rng, name)

    def delete_gift(self, character: Character, gift_id: str) -> Gift:
        gift = self._require_gift(character, gift_id)
        character.gifts.remove(gift)
        return gift

    def set_gift_equip_status(self, character: Character, gift_id: str, status: GiftEquipStatus) -> Gift:
        gift = self._require_gift(character, gift_id)
        gift.equip_status = GiftEquipStatus(status)
        return gift

    def reorder_gift(self, character: Character, source_id: str, target_id: str) -> Gift:
        """Drop ``source_id`` onto ``target_id``; only the dropped gift's sort key changes."""
        source = self._require_gift(character, source_id)
        self._require_gift(character, target_id)
        reorder_gift(character.gifts, source_id, target_id)
        return source

    # -----------------------
    # Custom rolls
    # -----------------------
    def add_custom_roll(self, character: Character, name: str | None = None) -> CustomRoll:
        if name is None:
            return self._custom_rolls.create_custom_roll(character)
        return self._custom_rolls.create_custom_roll(character, name)

    def delete_custom_roll(self, character: Character, key: CustomRollKey) -> CustomRoll:
        return self._custom_rolls.delete_custom_roll(character, key)

    def execute_custom_roll(self, character: Character, key: CustomRollKey) -> RollOutcome:
        result = self._custom_rolls.execute_custom_roll(
            character, key, on_dice_rolled=self._dice_reporter(character)
        )
        self._post_result(character, result)
        return result

    # -----------------------
    # Rolls
    # -----------------------
    def roll_to_do(self, character: Character, additional_formula: str | None = None) -> RollToDoResult:
        result = self._resolver.roll_to_do(character, additional_formula)
        self._post_result(character, result)
        return result

    def roll_to_dye(self, character: Character, additional_formula: str | None = None) -> RollToDyeResult:
        result = self._resolver.roll_to_dye(
            character, additional_formula=additional_formula, on_dice_rolled=self._dice_reporter(character)
        )
        self._post_result(character, result)
        return result

    def recovery_roll(self, character: Character, additional_formula: str | None = None) -> RollToDyeResult:
        result = self._resolver.recovery_roll(
            character, additional_formula, on_dice_rolled=self._dice_reporter(character)
        )
        self._post_result(character, result)
        return result

    # -----------------------
    # Helpers
    # -----------------------
    def _dice_reporter(self, character: Character) -> DiceReporter:
        def report(dice: Sequence[AttributeDie]) -> None:
            self._post(character, render_attribute_dice(dice))

        return report

    def _post_result(self, character: Character, result: RollOutcome) -> None:
        if isinstance(result, RollToDoResult):
            if result.cancelled:
                return
            self._post(character, render_roll_to_do(result))
        else:
            self._post(character, render_roll_to_dye(result))

    def _post(self, character: Character, content: str) -> None:
        self._chat(ChatMessage(speaker=character.name, content=content))

    @staticmethod
    def _require_attribute(character: Character, attribute_id: str) -> Attribute:
        attribute = character.find_attribute(attribute_id)
        if attribute is None:
            raise AttributeNotFoundError(f"Attribute '{attribute_id}' not found on '{character.name}'.")
        return attribute

    @staticmethod
    def _require_gift(character: Character, gift_id: str) -> Gift:
        gift = character.find_gift(gift_id)
        if gift is None:
            raise GiftNotFoundError(f"Gift '{gift_id}' not found on '{character.name}'.")
        return gift
