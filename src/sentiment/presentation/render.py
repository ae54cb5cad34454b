"""Chat text rendering for roll results."""
from __future__ import annotations

from typing import List, Sequence

from sentiment.core.dice import DiceRoll
from sentiment.domain.enums import AttributeStatus, ScenarioKind
from sentiment.services.roll_resolver import WILD_OPTION_LABEL, AttributeDie, RollToDoResult, RollToDyeResult

_STATUS_LABELS = {
    AttributeStatus.LOCKED_OUT: "locked out",
    AttributeStatus.WOUNDED: "wounded",
}


def _render_additional(additional: DiceRoll | None) -> str:
    if additional is None or (additional.total == 0 and not additional.dice_results):
        return ""
    return f" + [{additional.formula.strip()}] {additional.total}"


def render_attribute_dice(dice: Sequence[AttributeDie]) -> str:
    """Render one line per attribute die, marking the retained swing die and unusable attributes."""
    if not dice:
        return "No attributes to roll."
    lines: List[str] = []
    for die in dice:
        notes: List[str] = []
        if die.existing:
            notes.append("swing")
        status_label = _STATUS_LABELS.get(die.attribute.status)
        if status_label:
            notes.append(status_label)
        suffix = f" ({', '.join(notes)})" if notes else ""
        lines.append(f"{die.attribute.name}: {die.roll}{suffix}")
    return "\n".join(lines)


def render_roll_to_do(result: RollToDoResult) -> str:
    additional = _render_additional(result.additional)
    if result.swing_used:
        name = result.swing_attribute.name if result.swing_attribute else "swing"
        return (
            f"Roll to Do: d20 {result.d20_roll} + swing {result.swing_value} ({name})"
            f"{additional} = {result.total}"
        )
    if result.chosen_attribute is None:
        return (
            f"Roll to Do ({WILD_OPTION_LABEL}): d20 {result.d20_roll} + d6 {result.d6_roll}"
            f"{additional} = {result.total}"
        )
    attribute = result.chosen_attribute
    return (
        f"Roll to Do ({attribute.name}): d20 {result.d20_roll} + d6 {result.d6_roll}"
        f" + {attribute.modifier}{additional} = {result.total}"
    )


def render_roll_to_dye(result: RollToDyeResult) -> str:
    lines: List[str] = []
    if result.kind is ScenarioKind.RECOVERY:
        lines.append(f"Recovery Roll: {result.total}")
    else:
        lines.append(f"Roll to Dye: {result.total}")
    if _render_additional(result.additional):
        assert result.additional is not None
        lines.append(f"Extra: [{result.additional.formula.strip()}] {result.additional.total}")
    if result.kind is ScenarioKind.RECOVERY:
        lines.append(f"Health: {result.health_before} -> {result.health_after}")
    if result.resolved_swing is not None:
        swing = result.resolved_swing
        lines.append(f"Swing: {swing.attribute.name} ({swing.value})")
    else:
        lines.append("Swing: none")
    if result.released_attributes:
        lines.append("No longer locked out: " + ", ".join(a.name for a in result.released_attributes))
    return "\n".join(lines)
