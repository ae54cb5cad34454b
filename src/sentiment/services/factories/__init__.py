"""Factory helpers for runtime entities."""

from .character_factory import (
    create_attribute,
    create_character,
    create_custom_roll,
    create_gift,
)
from .id_factory import make_entity_id

__all__ = [
    "create_attribute",
    "create_character",
    "create_custom_roll",
    "create_gift",
    "make_entity_id",
]
