"""Gift model for characters."""
from __future__ import annotations

from dataclasses import dataclass

from sentiment.domain.enums import GiftEquipStatus


@dataclass(slots=True)
class Gift:
    id: str
    name: str
    description: str = ""
    equip_status: GiftEquipStatus = GiftEquipStatus.UNEQUIPPED
    sort: float = 0
