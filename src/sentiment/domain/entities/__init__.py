"""Runtime entity exports."""

from .attribute import Attribute
from .character import Character, Health, SwingTokenImages
from .custom_roll import CustomRoll
from .gift import Gift
from .swing import NO_SWING, Swing

__all__ = [
    "Attribute",
    "Character",
    "CustomRoll",
    "Gift",
    "Health",
    "NO_SWING",
    "Swing",
    "SwingTokenImages",
]
