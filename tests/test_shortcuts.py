from __future__ import annotations

import pytest

from sentiment.domain.entities import Swing
from sentiment.main import build_runtime
from sentiment.services.chat import ChatLog
from sentiment.services.errors import ShortcutError
from sentiment.services.shortcuts import Shortcut, ShortcutBar, create_shortcut
from tests.helpers.doubles import ScriptedPrompt, ScriptedRNG, make_attribute, make_character


def _runtime(rolls=(), answers=()):
    chat = ChatLog()
    runtime = build_runtime(
        prompt=ScriptedPrompt(*answers),
        chat=chat,
        config={"log_level": "WARNING"},
        rng=ScriptedRNG(rolls),
    )
    return runtime, chat


@pytest.mark.parametrize(
    "data",
    [
        {"operation_name": "roll_to_do"},
        {"entity_id": "character_1"},
        {"entity_id": "character_1", "operation_name": "delete_everything"},
        {"entity_id": "character_1", "operation_name": "roll_to_do", "literal_args": "oops"},
        {"entity_id": "character_1", "operation_name": "roll_to_do", "literal_args": [object()]},
    ],
)
def test_create_shortcut_rejects_bad_data(data: dict) -> None:
    with pytest.raises(ShortcutError):
        create_shortcut(data)


def test_create_shortcut_defaults_name_to_operation() -> None:
    shortcut = create_shortcut({"entity_id": "character_1", "operation_name": "drop_swing"})

    assert shortcut == Shortcut(entity_id="character_1", operation_name="drop_swing", name="drop_swing")


def test_shortcut_bar_slot_bounds() -> None:
    bar = ShortcutBar()
    shortcut = create_shortcut({"entity_id": "character_1", "operation_name": "roll_to_do"})

    bar.assign(shortcut, 1)
    bar.assign(shortcut, 50)
    with pytest.raises(ShortcutError):
        bar.assign(shortcut, 0)
    with pytest.raises(ShortcutError):
        bar.assign(shortcut, 51)
    bar.clear(1)
    assert bar.get(1) is None
    assert bar.get(50) is shortcut


def test_dispatcher_invokes_roll_to_do() -> None:
    runtime, chat = _runtime(rolls=[11])
    character = make_character(make_attribute("courage", modifier=3), swing=Swing("courage", 5))
    dispatcher = runtime.shortcut_dispatcher({character.id: character})
    bar = ShortcutBar()
    bar.assign(create_shortcut({"entity_id": character.id, "operation_name": "roll_to_do", "name": "Act"}), 3)

    result = dispatcher.invoke_slot(bar, 3)

    assert result.total == 16
    assert chat.contents() == ["Roll to Do: d20 11 + swing 5 (Courage) = 16"]


def test_dispatcher_passes_literal_args() -> None:
    runtime, _ = _runtime(rolls=[12])
    character = make_character(make_attribute("alpha", modifier=1), swing=Swing("alpha", 4))
    custom_roll = runtime.sheet.add_custom_roll(character, "Strike")
    custom_roll.formula_added_to_hit = "+2"
    dispatcher = runtime.shortcut_dispatcher({character.id: character})
    shortcut = create_shortcut(
        {"entity_id": character.id, "operation_name": "execute_custom_roll", "literal_args": [custom_roll.id]}
    )

    result = dispatcher.invoke(shortcut)

    assert result.total == 12 + 4 + 2


def test_dispatcher_drop_swing() -> None:
    runtime, _ = _runtime()
    character = make_character(make_attribute("alpha"), swing=Swing("alpha", 4))
    dispatcher = runtime.shortcut_dispatcher({character.id: character})

    dispatcher.invoke(create_shortcut({"entity_id": character.id, "operation_name": "drop_swing"}))

    assert character.swing == Swing()


def test_dispatcher_missing_character_or_slot_raises() -> None:
    runtime, _ = _runtime()
    dispatcher = runtime.shortcut_dispatcher({})

    with pytest.raises(ShortcutError):
        dispatcher.invoke(create_shortcut({"entity_id": "nobody", "operation_name": "roll_to_do"}))
    with pytest.raises(ShortcutError):
        dispatcher.invoke_slot(ShortcutBar(), 7)
