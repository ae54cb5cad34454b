"""Factories for characters and the items they own."""
from __future__ import annotations

from sentiment.core.rng import RNG
from sentiment.domain.entities import Attribute, Character, CustomRoll, Gift, SwingTokenImages
from sentiment.domain.entities.character import DEFAULT_TOKEN_IMAGE_PATH
from sentiment.domain.gift_ordering import SORT_DENSITY

from .id_factory import make_entity_id

NEW_ATTRIBUTE_NAME = "New Attribute"
NEW_GIFT_NAME = "New Gift"
NEW_CUSTOM_ROLL_NAME = "New Custom Roll"


def create_character(
    name: str,
    rng: RNG,
    *,
    default_token_image_path: str = DEFAULT_TOKEN_IMAGE_PATH,
    is_token: bool = False,
) -> Character:
    """Instantiate an empty character with schema defaults."""
    return Character(
        id=make_entity_id("character", rng),
        name=name,
        swing_token_images=SwingTokenImages(default_token_image_path=default_token_image_path),
        is_token=is_token,
    )


def create_attribute(character: Character, rng: RNG, name: str = NEW_ATTRIBUTE_NAME) -> Attribute:
    """Create an attribute and append it to the character."""
    attribute = Attribute(id=make_entity_id("attribute", rng, character.entity_ids()), name=name)
    character.attributes.append(attribute)
    return attribute


def create_gift(character: Character, rng: RNG, name: str = NEW_GIFT_NAME) -> Gift:
    """Create a gift at the end of the character's gift list."""
    last_sort = max((gift.sort for gift in character.gifts), default=None)
    sort = 0 if last_sort is None else last_sort + SORT_DENSITY
    gift = Gift(id=make_entity_id("gift", rng, character.entity_ids()), name=name, sort=sort)
    character.gifts.append(gift)
    return gift


def create_custom_roll(character: Character, rng: RNG, name: str = NEW_CUSTOM_ROLL_NAME) -> CustomRoll:
    """Create an empty custom roll and append it to the character."""
    custom_roll = CustomRoll(id=make_entity_id("custom_roll", rng, character.entity_ids()), name=name)
    character.custom_rolls.append(custom_roll)
    return custom_roll
