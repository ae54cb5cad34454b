"""Attribute model for characters."""
from __future__ import annotations

from dataclasses import dataclass

from sentiment.domain.enums import AttributeStatus


@dataclass(slots=True)
class Attribute:
    """One named trait of a character."""

    id: str
    name: str
    modifier: int = 0
    status: AttributeStatus = AttributeStatus.NORMAL
    descriptive_name: str = ""
    custom_token_image_path: str = ""

    @property
    def is_normal(self) -> bool:
        return self.status == AttributeStatus.NORMAL
