from __future__ import annotations

from sentiment.domain.entities import Swing
from sentiment.domain.entities.character import DEFAULT_TOKEN_IMAGE_PATH
from sentiment.services.swing_tracker import SwingTracker
from sentiment.services.token_images import SwingTokenImageUpdater
from tests.helpers.doubles import make_attribute, make_character


def _token_character():
    alpha = make_attribute("alpha")
    alpha.custom_token_image_path = "tokens/alpha.png"
    beta = make_attribute("beta")
    character = make_character(alpha, beta)
    character.is_token = True
    character.swing_token_images.enabled = True
    return character


def test_swing_change_sets_attribute_token_image() -> None:
    tracker = SwingTracker(on_swing_changed=SwingTokenImageUpdater())
    character = _token_character()

    tracker.set_swing(character, "alpha", 4)

    assert character.token_image_path == "tokens/alpha.png"


def test_attribute_without_art_falls_back_to_default() -> None:
    tracker = SwingTracker(on_swing_changed=SwingTokenImageUpdater())
    character = _token_character()

    tracker.set_swing(character, "beta", 4)

    assert character.token_image_path == DEFAULT_TOKEN_IMAGE_PATH


def test_dropping_swing_restores_default_image() -> None:
    tracker = SwingTracker(on_swing_changed=SwingTokenImageUpdater())
    character = _token_character()
    tracker.set_swing(character, "alpha", 4)

    tracker.drop_swing(character)

    assert character.token_image_path == DEFAULT_TOKEN_IMAGE_PATH


def test_disabled_setting_or_non_token_leaves_image_alone() -> None:
    tracker = SwingTracker(on_swing_changed=SwingTokenImageUpdater())
    disabled = _token_character()
    disabled.swing_token_images.enabled = False
    not_token = _token_character()
    not_token.is_token = False

    tracker.set_swing(disabled, "alpha", 4)
    tracker.set_swing(not_token, "alpha", 4)

    assert disabled.token_image_path is None
    assert not_token.token_image_path is None


def test_value_only_change_keeps_image() -> None:
    updater = SwingTokenImageUpdater()
    character = _token_character()
    character.token_image_path = "custom.png"

    updater(character, Swing(attribute_id="alpha", value=3), Swing(attribute_id="alpha", value=5))

    assert character.token_image_path == "custom.png"
