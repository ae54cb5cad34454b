"""Character model owning attributes, gifts and custom rolls."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .attribute import Attribute
from .custom_roll import CustomRoll
from .gift import Gift
from .swing import Swing

DEFAULT_TOKEN_IMAGE_PATH = "icons/svg/mystery-man.svg"


@dataclass(slots=True)
class Health:
    value: int = 10
    min: int = 0
    max: int = 10


@dataclass(slots=True)
class SwingTokenImages:
    """Settings for swapping the token image whenever the swing changes."""

    enabled: bool = False
    default_token_image_path: str = DEFAULT_TOKEN_IMAGE_PATH


@dataclass(slots=True)
class Character:
    """A player character and everything the rules read from it."""

    id: str
    name: str
    description: str = ""
    health: Health = field(default_factory=Health)
    speed: int = 30
    experience: int = 0
    swing: Swing = field(default_factory=Swing)
    swing_token_images: SwingTokenImages = field(default_factory=SwingTokenImages)
    is_token: bool = False
    token_image_path: str | None = None
    attributes: List[Attribute] = field(default_factory=list)
    gifts: List[Gift] = field(default_factory=list)
    custom_rolls: List[CustomRoll] = field(default_factory=list)

    def find_attribute(self, attribute_id: str) -> Attribute | None:
        for attribute in self.attributes:
            if attribute.id == attribute_id:
                return attribute
        return None

    def find_gift(self, gift_id: str) -> Gift | None:
        for gift in self.gifts:
            if gift.id == gift_id:
                return gift
        return None

    def normal_attributes(self) -> List[Attribute]:
        """Return attributes that may be chosen for swings and rolls, in sheet order."""
        return [attribute for attribute in self.attributes if attribute.is_normal]

    def entity_ids(self) -> set[str]:
        ids = {attribute.id for attribute in self.attributes}
        ids.update(gift.id for gift in self.gifts)
        ids.update(custom_roll.id for custom_roll in self.custom_rolls)
        return ids
