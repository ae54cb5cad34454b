"""Roll resolution for Roll to Do, Roll to Dye and Recovery Rolls."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Sequence

from sentiment.core.dice import DiceRoll, DiceRoller, parse_formula
from sentiment.domain.entities import Attribute, Character, Swing
from sentiment.domain.enums import AttributeStatus, ScenarioKind
from sentiment.services.swing_tracker import SwingTracker

logger = logging.getLogger(__name__)

WILD_OPTION_KEY = "wild"
WILD_OPTION_LABEL = "Wild"


@dataclass(frozen=True, slots=True)
class ChoiceOption:
    key: str
    label: str


# Receives (title, content, options) and returns the chosen key, or None when
# the dialog was closed without a choice.
ChoicePrompt = Callable[[str, str, Sequence[ChoiceOption]], str | None]


@dataclass(frozen=True, slots=True)
class AttributeDie:
    """A d6 rolled for one attribute during a Roll to Dye."""

    attribute: Attribute
    roll: int
    existing: bool = False

    @property
    def value(self) -> int:
        return self.roll + self.attribute.modifier


DiceReporter = Callable[[Sequence[AttributeDie]], None]


@dataclass(slots=True)
class RollToDoResult:
    d20_roll: int
    d6_roll: int | None
    chosen_attribute: Attribute | None
    swing_attribute: Attribute | None
    swing_used: bool
    swing_value: int
    additional: DiceRoll | None
    total: int
    cancelled: bool = False

    @property
    def is_wild(self) -> bool:
        return not self.swing_used and not self.cancelled and self.chosen_attribute is None


@dataclass(slots=True)
class RollToDyeResult:
    kind: ScenarioKind
    dice_results: List[AttributeDie]
    available_dice: List[AttributeDie]
    chosen_swing: AttributeDie | None
    resolved_swing: AttributeDie | None
    additional: DiceRoll | None
    total: int
    released_attributes: List[Attribute] = field(default_factory=list)
    health_before: int | None = None
    health_after: int | None = None


class RollResolver:
    """
    Resolves the three roll scenarios against a character.

    Dice come from the injected DiceRoller and choices from the injected
    prompt, so the resolver performs no I/O itself. Every swing or status
    change is routed through the SwingTracker.
    """

    def __init__(self, *, dice: DiceRoller, swing_tracker: SwingTracker, prompt: ChoicePrompt) -> None:
        self._dice = dice
        self._swing_tracker = swing_tracker
        self._prompt = prompt

    # -----------------------
    # Roll to Do
    # -----------------------
    def roll_to_do(self, character: Character, additional_formula: str | None = None) -> RollToDoResult:
        """Roll a d20 plus the swing, or d20 + d6 + a chosen attribute when there is no swing."""
        self._validate_formula(additional_formula)
        swing_attribute = self._swing_tracker.get_swing_attribute(character)
        d20_roll = self._dice.roll_die(20)

        if swing_attribute is not None:
            swing_value = character.swing.value
            additional = self._roll_additional(additional_formula)
            total = self._clamp(d20_roll + swing_value + self._additional_total(additional))
            logger.info(
                "Roll to Do for '%s' with swing on '%s': %d + %d = %d",
                character.name,
                swing_attribute.name,
                d20_roll,
                swing_value,
                total,
            )
            return RollToDoResult(
                d20_roll=d20_roll,
                d6_roll=None,
                chosen_attribute=None,
                swing_attribute=swing_attribute,
                swing_used=True,
                swing_value=swing_value,
                additional=additional,
                total=total,
            )

        d6_roll = self._dice.roll_die(6)
        options = [ChoiceOption(key=a.id, label=a.name) for a in character.normal_attributes()]
        options.append(ChoiceOption(key=WILD_OPTION_KEY, label=WILD_OPTION_LABEL))
        choice = self._prompt(
            "Roll to Do",
            f"You rolled {d20_roll} on the d20 and {d6_roll} on the d6. Choose an attribute.",
            options,
        )
        if choice is None:
            logger.debug("Roll to Do for '%s' cancelled", character.name)
            return RollToDoResult(
                d20_roll=d20_roll,
                d6_roll=d6_roll,
                chosen_attribute=None,
                swing_attribute=None,
                swing_used=False,
                swing_value=0,
                additional=None,
                total=0,
                cancelled=True,
            )

        self._require_option(options, choice)
        chosen = None if choice == WILD_OPTION_KEY else character.find_attribute(choice)
        modifier = chosen.modifier if chosen else 0
        additional = self._roll_additional(additional_formula)
        total = self._clamp(d20_roll + d6_roll + modifier + self._additional_total(additional))
        logger.info(
            "Roll to Do for '%s' on %s: %d + %d + %d = %d",
            character.name,
            chosen.name if chosen else WILD_OPTION_LABEL,
            d20_roll,
            d6_roll,
            modifier,
            total,
        )
        return RollToDoResult(
            d20_roll=d20_roll,
            d6_roll=d6_roll,
            chosen_attribute=chosen,
            swing_attribute=None,
            swing_used=False,
            swing_value=0,
            additional=additional,
            total=total,
        )

    # -----------------------
    # Roll to Dye / Recovery
    # -----------------------
    def roll_to_dye(
        self,
        character: Character,
        kind: ScenarioKind = ScenarioKind.DYE,
        additional_formula: str | None = None,
        *,
        on_dice_rolled: DiceReporter | None = None,
    ) -> RollToDyeResult:
        """
        Roll a d6 for every attribute and offer the Normal ones as the new swing.

        The swing attribute keeps its existing die, recovered from the banked
        swing value. Locked-out attributes still roll but cannot become the swing;
        they are released to Normal once the choice is made. A swing left on an
        attribute that is missing or not Normal is dropped rather than revived.
        """
        kind = ScenarioKind(kind)
        self._validate_formula(additional_formula)

        existing_die = self._existing_swing_die(character)
        dice_results: List[AttributeDie] = []
        for attribute in character.attributes:
            if existing_die is not None and attribute.id == existing_die.attribute.id:
                dice_results.append(existing_die)
                continue
            dice_results.append(AttributeDie(attribute=attribute, roll=self._dice.roll_die(6)))

        if on_dice_rolled is not None:
            on_dice_rolled(list(dice_results))

        available_dice = [die for die in dice_results if die.attribute.status == AttributeStatus.NORMAL]
        chosen_swing = self._choose_swing(available_dice) if available_dice else None

        self._swing_tracker.prune_dangling_swing(character)
        released = self._swing_tracker.release_lockouts(character)
        if chosen_swing is not None:
            self._swing_tracker.set_swing(character, chosen_swing.attribute.id, chosen_swing.value)
        resolved_swing = chosen_swing or existing_die

        additional = self._roll_additional(additional_formula)
        if kind is ScenarioKind.RECOVERY:
            subtotal = sum(die.roll + die.attribute.modifier for die in available_dice)
        else:
            subtotal = sum(die.roll for die in available_dice)
            if resolved_swing is not None:
                subtotal += resolved_swing.attribute.modifier
        total = self._clamp(subtotal + self._additional_total(additional))

        result = RollToDyeResult(
            kind=kind,
            dice_results=dice_results,
            available_dice=available_dice,
            chosen_swing=chosen_swing,
            resolved_swing=resolved_swing,
            additional=additional,
            total=total,
            released_attributes=released,
        )
        if kind is ScenarioKind.RECOVERY:
            result.health_before = character.health.value
            character.health.value = min(character.health.max, character.health.value + total)
            result.health_after = character.health.value
        logger.info(
            "%s for '%s': %d eligible dice, total %d",
            "Recovery Roll" if kind is ScenarioKind.RECOVERY else "Roll to Dye",
            character.name,
            len(available_dice),
            total,
        )
        return result

    def recovery_roll(
        self,
        character: Character,
        additional_formula: str | None = None,
        *,
        on_dice_rolled: DiceReporter | None = None,
    ) -> RollToDyeResult:
        """Roll to Dye variant whose total heals the character, capped at max health."""
        return self.roll_to_dye(
            character, ScenarioKind.RECOVERY, additional_formula, on_dice_rolled=on_dice_rolled
        )

    # -----------------------
    # Swing and status
    # -----------------------
    def drop_swing(self, character: Character) -> Swing:
        return self._swing_tracker.drop_swing(character)

    def set_attribute_status(self, character: Character, attribute_id: str, status: AttributeStatus) -> Attribute:
        return self._swing_tracker.set_attribute_status(character, attribute_id, status)

    # -----------------------
    # Helpers
    # -----------------------
    def _existing_swing_die(self, character: Character) -> AttributeDie | None:
        swing_attribute = self._swing_tracker.get_swing_attribute(character)
        if swing_attribute is None:
            return None
        roll = max(0, character.swing.value - swing_attribute.modifier)
        return AttributeDie(attribute=swing_attribute, roll=roll, existing=True)

    def _choose_swing(self, available_dice: Sequence[AttributeDie]) -> AttributeDie | None:
        options = [
            ChoiceOption(
                key=die.attribute.id,
                label=f"{die.attribute.name} ({die.roll} + {die.attribute.modifier} = {die.value})",
            )
            for die in available_dice
        ]
        choice = self._prompt("Choose Swing", "Choose an attribute die to become your swing.", options)
        if choice is None:
            return None
        self._require_option(options, choice)
        return next(die for die in available_dice if die.attribute.id == choice)

    def _roll_additional(self, formula: str | None) -> DiceRoll | None:
        if formula is None or not formula.strip():
            return None
        return self._dice.roll(formula)

    @staticmethod
    def _validate_formula(formula: str | None) -> None:
        if formula is not None:
            parse_formula(formula)

    @staticmethod
    def _additional_total(additional: DiceRoll | None) -> int:
        return additional.total if additional is not None else 0

    @staticmethod
    def _require_option(options: Sequence[ChoiceOption], key: str) -> None:
        if all(option.key != key for option in options):
            raise ValueError(f"Prompt returned an option that was not offered: {key!r}")

    @staticmethod
    def _clamp(total: int) -> int:
        return max(0, total)
