"""Entry-point for wiring the rules services together."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from sentiment.config import configure_logging, load_config, normalize_config
from sentiment.core.dice import DiceRoller
from sentiment.core.rng import RNG
from sentiment.domain.entities import Character
from sentiment.services.character_sheet_service import CharacterSheetService
from sentiment.services.chat import ChatSink
from sentiment.services.custom_roll_service import CustomRollService
from sentiment.services.factories import create_character
from sentiment.services.roll_resolver import ChoicePrompt, RollResolver
from sentiment.services.shortcuts import ShortcutDispatcher
from sentiment.services.swing_tracker import SwingTracker
from sentiment.services.token_images import SwingTokenImageUpdater


@dataclass(slots=True)
class SentimentRuntime:
    """Services built from one config, sharing a single RNG."""

    config: Dict[str, Any]
    rng: RNG
    swing_tracker: SwingTracker
    resolver: RollResolver
    custom_rolls: CustomRollService
    sheet: CharacterSheetService

    def new_character(self, name: str, *, is_token: bool = False) -> Character:
        return create_character(
            name,
            self.rng,
            default_token_image_path=self.config["default_token_image_path"],
            is_token=is_token,
        )

    def shortcut_dispatcher(self, characters: Mapping[str, Character]) -> ShortcutDispatcher:
        return ShortcutDispatcher(sheet_service=self.sheet, characters=characters)


def build_runtime(
    *,
    prompt: ChoicePrompt,
    chat: ChatSink,
    config: Dict[str, Any] | None = None,
    rng: RNG | None = None,
) -> SentimentRuntime:
    """Construct the rules services with the host's prompt and chat collaborators."""
    config = normalize_config(config) if config is not None else load_config()
    configure_logging(config["log_level"])
    rng = rng if rng is not None else RNG(config.get("dice_seed"))
    swing_tracker = SwingTracker(on_swing_changed=SwingTokenImageUpdater())
    resolver = RollResolver(dice=DiceRoller(rng), swing_tracker=swing_tracker, prompt=prompt)
    custom_rolls = CustomRollService(resolver=resolver, rng=rng)
    sheet = CharacterSheetService(
        resolver=resolver,
        swing_tracker=swing_tracker,
        custom_rolls=custom_rolls,
        chat=chat,
        rng=rng,
    )
    return SentimentRuntime(
        config=config,
        rng=rng,
        swing_tracker=swing_tracker,
        resolver=resolver,
        custom_rolls=custom_rolls,
        sheet=sheet,
    )
