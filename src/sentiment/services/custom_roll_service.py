"""Custom roll registry and dispatch onto the roll scenarios."""
from __future__ import annotations

import logging
from typing import Tuple, Union

from sentiment.core.rng import RNG
from sentiment.domain.entities import Character, CustomRoll
from sentiment.domain.enums import RollType, ScenarioKind
from sentiment.services.errors import CustomRollNotFoundError, UnknownRollTypeError
from sentiment.services.factories import create_custom_roll
from sentiment.services.factories.character_factory import NEW_CUSTOM_ROLL_NAME
from sentiment.services.roll_resolver import DiceReporter, RollResolver, RollToDoResult, RollToDyeResult

logger = logging.getLogger(__name__)

CustomRollKey = Union[int, str]
RollOutcome = Union[RollToDoResult, RollToDyeResult]


def resolve_roll_type(custom_roll: CustomRoll, key: CustomRollKey) -> RollType:
    """Map the stored roll type onto a RollType, naming the offending roll if unknown."""
    try:
        return RollType(custom_roll.roll_type)
    except ValueError as exc:
        raise UnknownRollTypeError(
            f"Custom roll {key!r} ('{custom_roll.name}') has unknown roll type {custom_roll.roll_type!r}."
        ) from exc


def formula_for(custom_roll: CustomRoll, roll_type: RollType) -> str:
    """Return the extra formula merged into the base roll for this roll type."""
    if custom_roll.additional_formula:
        return custom_roll.additional_formula
    if roll_type is RollType.ROLL_TO_DO:
        return custom_roll.formula_added_to_hit
    return custom_roll.formula_added_to_effect


class CustomRollService:
    """Ordered per-character registry of custom rolls."""

    def __init__(self, *, resolver: RollResolver, rng: RNG) -> None:
        self._resolver = resolver
        self._rng = rng

    def create_custom_roll(self, character: Character, name: str = NEW_CUSTOM_ROLL_NAME) -> CustomRoll:
        return create_custom_roll(character, self._rng, name)

    def get_custom_roll(self, character: Character, key: CustomRollKey) -> Tuple[int, CustomRoll]:
        """Look a custom roll up by list index or by id."""
        if isinstance(key, int) and not isinstance(key, bool):
            if 0 <= key < len(character.custom_rolls):
                return key, character.custom_rolls[key]
        else:
            for index, custom_roll in enumerate(character.custom_rolls):
                if custom_roll.id == key:
                    return index, custom_roll
        raise CustomRollNotFoundError(f"Custom roll {key!r} not found on '{character.name}'.")

    def delete_custom_roll(self, character: Character, key: CustomRollKey) -> CustomRoll:
        index, custom_roll = self.get_custom_roll(character, key)
        del character.custom_rolls[index]
        return custom_roll

    def execute_custom_roll(
        self,
        character: Character,
        key: CustomRollKey,
        *,
        on_dice_rolled: DiceReporter | None = None,
    ) -> RollOutcome:
        _, custom_roll = self.get_custom_roll(character, key)
        roll_type = resolve_roll_type(custom_roll, key)
        formula = formula_for(custom_roll, roll_type)
        logger.debug("Executing custom roll '%s' as %s with %r", custom_roll.name, roll_type.value, formula)
        if roll_type is RollType.ROLL_TO_DO:
            return self._resolver.roll_to_do(character, formula)
        if roll_type is RollType.ROLL_TO_DYE:
            return self._resolver.roll_to_dye(character, ScenarioKind.DYE, formula, on_dice_rolled=on_dice_rolled)
        if roll_type is RollType.RECOVERY_ROLL:
            return self._resolver.roll_to_dye(
                character, ScenarioKind.RECOVERY, formula, on_dice_rolled=on_dice_rolled
            )
        raise UnknownRollTypeError(f"Custom roll {key!r} has unhandled roll type {roll_type!r}.")
