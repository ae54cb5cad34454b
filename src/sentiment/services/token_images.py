"""Token image swapping driven by swing changes."""
from __future__ import annotations

import logging

from sentiment.domain.entities import Character, Swing

logger = logging.getLogger(__name__)


class SwingTokenImageUpdater:
    """Swing-changed callback that points the token image at the swing attribute's art."""

    def __call__(self, character: Character, old_swing: Swing, new_swing: Swing) -> None:
        settings = character.swing_token_images
        if not settings.enabled or not character.is_token:
            return
        if old_swing.attribute_id == new_swing.attribute_id:
            return
        character.token_image_path = self.resolve_image_path(character, new_swing)
        logger.debug("Token image for '%s' set to %s", character.name, character.token_image_path)

    @staticmethod
    def resolve_image_path(character: Character, swing: Swing) -> str:
        default_path = character.swing_token_images.default_token_image_path
        if not swing.is_set:
            return default_path
        attribute = character.find_attribute(swing.attribute_id)
        if attribute is None or not attribute.custom_token_image_path:
            return default_path
        return attribute.custom_token_image_path
