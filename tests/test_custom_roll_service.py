from __future__ import annotations

import pytest

from sentiment.core.rng import RNG
from sentiment.domain.entities import CustomRoll, Swing
from sentiment.domain.enums import RollType, ScenarioKind
from sentiment.services.custom_roll_service import CustomRollService, formula_for, resolve_roll_type
from sentiment.services.errors import CustomRollNotFoundError, UnknownRollTypeError
from sentiment.services.roll_resolver import RollToDoResult, RollToDyeResult
from tests.helpers.doubles import build_resolver, make_attribute, make_character


def _make_service(rolls=(), answers=()):
    resolver, tracker, rng, prompt = build_resolver(rolls=rolls, answers=answers)
    return CustomRollService(resolver=resolver, rng=RNG(3)), rng, prompt


def test_create_custom_roll_appends_with_defaults() -> None:
    service, _, _ = _make_service()
    character = make_character()

    first = service.create_custom_roll(character)
    second = service.create_custom_roll(character, "Sneak")

    assert character.custom_rolls == [first, second]
    assert first.name == "New Custom Roll"
    assert first.roll_type == "RollToDo"
    assert first.formula_added_to_hit == "+0"
    assert first.formula_added_to_effect == "+0"
    assert first.id != second.id


def test_delete_custom_roll_by_index_and_id() -> None:
    service, _, _ = _make_service()
    character = make_character()
    first = service.create_custom_roll(character, "First")
    second = service.create_custom_roll(character, "Second")
    third = service.create_custom_roll(character, "Third")

    assert service.delete_custom_roll(character, 1) is second
    assert service.delete_custom_roll(character, third.id) is third
    assert character.custom_rolls == [first]


@pytest.mark.parametrize("key", [5, -1, "missing"])
def test_missing_custom_roll_raises(key) -> None:
    service, _, _ = _make_service()
    character = make_character()
    service.create_custom_roll(character)

    with pytest.raises(CustomRollNotFoundError):
        service.execute_custom_roll(character, key)


def test_formula_for_picks_hit_or_effect_formula() -> None:
    custom_roll = CustomRoll(id="c1", name="Strike", formula_added_to_hit="+1", formula_added_to_effect="+1d4")

    assert formula_for(custom_roll, RollType.ROLL_TO_DO) == "+1"
    assert formula_for(custom_roll, RollType.ROLL_TO_DYE) == "+1d4"
    assert formula_for(custom_roll, RollType.RECOVERY_ROLL) == "+1d4"


def test_legacy_additional_formula_overrides() -> None:
    custom_roll = CustomRoll(id="c1", name="Old", formula_added_to_hit="+1", additional_formula="+2")

    assert formula_for(custom_roll, RollType.ROLL_TO_DO) == "+2"
    assert formula_for(custom_roll, RollType.ROLL_TO_DYE) == "+2"


def test_resolve_roll_type_names_offending_roll() -> None:
    custom_roll = CustomRoll(id="c9", name="Broken", roll_type="RollToFly")

    with pytest.raises(UnknownRollTypeError) as excinfo:
        resolve_roll_type(custom_roll, 3)

    assert "3" in str(excinfo.value)
    assert "RollToFly" in str(excinfo.value)


def test_execute_roll_to_do_uses_hit_formula() -> None:
    service, _, _ = _make_service(rolls=[12])
    character = make_character(make_attribute("alpha", modifier=1), swing=Swing(attribute_id="alpha", value=4))
    custom_roll = service.create_custom_roll(character)
    custom_roll.formula_added_to_hit = "+3"

    result = service.execute_custom_roll(character, 0)

    assert isinstance(result, RollToDoResult)
    assert result.total == 12 + 4 + 3


def test_execute_roll_to_dye_uses_effect_formula() -> None:
    service, _, _ = _make_service(rolls=[5, 2], answers=[None])
    character = make_character(make_attribute("alpha", modifier=1))
    custom_roll = service.create_custom_roll(character)
    custom_roll.roll_type = "RollToDye"
    custom_roll.formula_added_to_effect = "+1d4"

    result = service.execute_custom_roll(character, custom_roll.id)

    assert isinstance(result, RollToDyeResult)
    assert result.kind is ScenarioKind.DYE
    assert result.total == 5 + 2


def test_execute_recovery_roll_heals() -> None:
    service, _, _ = _make_service(rolls=[3], answers=[None])
    character = make_character(make_attribute("alpha", modifier=2))
    character.health.value = 1
    custom_roll = service.create_custom_roll(character)
    custom_roll.roll_type = "RecoveryRoll"

    result = service.execute_custom_roll(character, 0)

    assert isinstance(result, RollToDyeResult)
    assert result.kind is ScenarioKind.RECOVERY
    assert character.health.value == 1 + 3 + 2


def test_execute_unknown_roll_type_changes_nothing() -> None:
    service, rng, _ = _make_service(rolls=[6])
    character = make_character(make_attribute("alpha"), swing=Swing(attribute_id="alpha", value=3))
    custom_roll = service.create_custom_roll(character)
    custom_roll.roll_type = "Mystery"

    with pytest.raises(UnknownRollTypeError):
        service.execute_custom_roll(character, custom_roll.id)

    assert rng.faces_rolled == []
    assert character.swing == Swing(attribute_id="alpha", value=3)
