"""Service-layer exceptions."""


class SentimentError(Exception):
    """Base exception for rules and sheet operations."""


class AttributeNotFoundError(SentimentError):
    """Raised when an attribute id does not exist on the character."""


class GiftNotFoundError(SentimentError):
    """Raised when a gift id does not exist on the character."""


class CustomRollNotFoundError(SentimentError):
    """Raised when a custom roll index or id does not exist on the character."""


class UnknownRollTypeError(SentimentError):
    """Raised when a custom roll carries a roll type the rules do not know."""


class SwingError(SentimentError):
    """Raised when a swing cannot be set on the requested attribute."""


class ShortcutError(SentimentError):
    """Raised when a shortcut cannot be created or invoked."""
