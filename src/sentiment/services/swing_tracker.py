"""Swing tracking and attribute status transitions."""
from __future__ import annotations

import logging
from typing import Callable, List

from sentiment.domain.entities import NO_SWING, Attribute, Character, Swing
from sentiment.domain.enums import AttributeStatus
from sentiment.services.errors import AttributeNotFoundError, SwingError

logger = logging.getLogger(__name__)

SwingChangedCallback = Callable[[Character, Swing, Swing], None]


class SwingTracker:
    """
    Owns every mutation of a character's swing.

    All changes pass through a single commit point, which invokes
    ``on_swing_changed(character, old_swing, new_swing)`` when the swing
    actually changed.
    """

    def __init__(self, *, on_swing_changed: SwingChangedCallback | None = None) -> None:
        self._on_swing_changed = on_swing_changed

    # -----------------------
    # Queries
    # -----------------------
    def get_swing_attribute(self, character: Character) -> Attribute | None:
        """Return the swing attribute if it still exists and is Normal."""
        if not character.swing.is_set:
            return None
        attribute = character.find_attribute(character.swing.attribute_id)
        if attribute is None or not attribute.is_normal:
            return None
        return attribute

    def current_swing(self, character: Character) -> Swing:
        """Return the swing with dangling references normalized to no swing."""
        if self.get_swing_attribute(character) is None:
            return Swing()
        return character.swing.copy()

    # -----------------------
    # Mutations
    # -----------------------
    def set_swing(self, character: Character, attribute_id: str, value: int) -> Swing:
        attribute = self._require_attribute(character, attribute_id)
        if not attribute.is_normal:
            raise SwingError(f"Attribute '{attribute.name}' is {attribute.status.name} and cannot hold the swing.")
        if value < 0:
            raise SwingError(f"Swing value must be non-negative, got {value}.")
        self._commit(character, Swing(attribute_id=attribute.id, value=value))
        return character.swing

    def drop_swing(self, character: Character) -> Swing:
        """Reset the swing to no swing; a no-op when already cleared."""
        if character.swing.attribute_id == NO_SWING and character.swing.value == 0:
            return character.swing
        self._commit(character, Swing())
        return character.swing

    def prune_dangling_swing(self, character: Character) -> bool:
        """Drop a swing whose attribute is missing or unusable. Returns True when dropped."""
        if character.swing.is_set and self.get_swing_attribute(character) is None:
            self.drop_swing(character)
            return True
        return False

    def set_attribute_status(
        self, character: Character, attribute_id: str, status: AttributeStatus
    ) -> Attribute:
        """Change an attribute's status, dropping the swing if it leaves Normal."""
        attribute = self._require_attribute(character, attribute_id)
        status = AttributeStatus(status)
        self.prune_dangling_swing(character)
        attribute.status = status
        if status != AttributeStatus.NORMAL and character.swing.attribute_id == attribute.id:
            logger.info("Swing on '%s' cleared: attribute is now %s", attribute.name, status.name)
            self.drop_swing(character)
        return attribute

    def release_lockouts(self, character: Character) -> List[Attribute]:
        """Restore every locked-out attribute to Normal and return them."""
        released: List[Attribute] = []
        for attribute in character.attributes:
            if attribute.status == AttributeStatus.LOCKED_OUT:
                attribute.status = AttributeStatus.NORMAL
                released.append(attribute)
        if released:
            logger.debug("Released lockouts on %s", ", ".join(a.name for a in released))
        return released

    # -----------------------
    # Helpers
    # -----------------------
    def _commit(self, character: Character, new_swing: Swing) -> None:
        old_swing = character.swing.copy()
        character.swing = new_swing
        if old_swing == new_swing:
            return
        logger.debug(
            "Swing for '%s' changed from %s=%d to %s=%d",
            character.name,
            old_swing.attribute_id,
            old_swing.value,
            new_swing.attribute_id,
            new_swing.value,
        )
        if self._on_swing_changed is not None:
            self._on_swing_changed(character, old_swing, new_swing.copy())

    @staticmethod
    def _require_attribute(character: Character, attribute_id: str) -> Attribute:
        attribute = character.find_attribute(attribute_id)
        if attribute is None:
            raise AttributeNotFoundError(f"Attribute '{attribute_id}' not found on '{character.name}'.")
        return attribute
