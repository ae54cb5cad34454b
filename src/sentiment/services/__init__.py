"""Service layer: swing tracking, roll resolution and sheet operations."""

from .errors import (
    AttributeNotFoundError,
    CustomRollNotFoundError,
    GiftNotFoundError,
    SentimentError,
    ShortcutError,
    SwingError,
    UnknownRollTypeError,
)

__all__ = [
    "AttributeNotFoundError",
    "CustomRollNotFoundError",
    "GiftNotFoundError",
    "SentimentError",
    "ShortcutError",
    "SwingError",
    "UnknownRollTypeError",
]
