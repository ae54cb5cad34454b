"""Tests for chat text rendering."""
from sentiment.domain.entities import Swing
from sentiment.domain.enums import AttributeStatus, ScenarioKind
from sentiment.presentation.render import render_attribute_dice, render_roll_to_do, render_roll_to_dye
from sentiment.services.roll_resolver import WILD_OPTION_KEY, AttributeDie
from tests.helpers.doubles import build_resolver, make_attribute, make_character


def test_render_roll_to_do_with_swing() -> None:
    character = make_character(make_attribute("courage", modifier=3), swing=Swing(attribute_id="courage", value=5))
    resolver, _, _, _ = build_resolver(rolls=[11])

    text = render_roll_to_do(resolver.roll_to_do(character))

    assert text == "Roll to Do: d20 11 + swing 5 (Courage) = 16"


def test_render_roll_to_do_wild_hides_zero_additional() -> None:
    character = make_character(make_attribute("dread"))
    resolver, _, _, _ = build_resolver(rolls=[9, 2], answers=[WILD_OPTION_KEY])

    text = render_roll_to_do(resolver.roll_to_do(character, "+0"))

    assert text == "Roll to Do (Wild): d20 9 + d6 2 = 11"


def test_render_roll_to_do_with_attribute_and_additional() -> None:
    character = make_character(make_attribute("grit", modifier=2))
    resolver, _, _, _ = build_resolver(rolls=[10, 4, 3], answers=["grit"])

    text = render_roll_to_do(resolver.roll_to_do(character, "+1d4"))

    assert text == "Roll to Do (Grit): d20 10 + d6 4 + 2 + [+1d4] 3 = 19"


def test_render_attribute_dice_marks_swing_and_status() -> None:
    dice = [
        AttributeDie(attribute=make_attribute("alpha", modifier=2), roll=4, existing=True),
        AttributeDie(attribute=make_attribute("beta", status=AttributeStatus.LOCKED_OUT), roll=6),
        AttributeDie(attribute=make_attribute("gamma"), roll=1),
    ]

    assert render_attribute_dice(dice) == "Alpha: 4 (swing)\nBeta: 6 (locked out)\nGamma: 1"
    assert render_attribute_dice([]) == "No attributes to roll."


def test_render_recovery_roll_shows_health_change() -> None:
    character = make_character(make_attribute("alpha", modifier=1))
    character.health.value = 3
    resolver, _, _, _ = build_resolver(rolls=[4], answers=["alpha"])

    result = resolver.roll_to_dye(character, ScenarioKind.RECOVERY)

    assert render_roll_to_dye(result).splitlines() == [
        "Recovery Roll: 5",
        "Health: 3 -> 8",
        "Swing: Alpha (5)",
    ]


def test_render_roll_to_dye_lists_extra_formula_separately() -> None:
    character = make_character(make_attribute("alpha", modifier=2))
    resolver, _, _, _ = build_resolver(rolls=[3, 4], answers=[None])

    result = resolver.roll_to_dye(character, additional_formula="+1d4")

    assert render_roll_to_dye(result).splitlines() == [
        "Roll to Dye: 7",
        "Extra: [+1d4] 4",
        "Swing: none",
    ]
