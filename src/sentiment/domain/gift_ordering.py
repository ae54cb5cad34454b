"""Fractional sort keys for drag-drop reordering of gifts."""
from __future__ import annotations

from typing import Dict, List, Sequence

from sentiment.domain.entities import Gift
from sentiment.domain.enums import GiftEquipStatus

SORT_DENSITY = 100000


def sort_between(before: float | None, after: float | None) -> float:
    """Return a sort key strictly between two neighbours (either may be missing)."""
    if before is None and after is None:
        return 0
    if before is None:
        assert after is not None
        return after - SORT_DENSITY
    if after is None:
        return before + SORT_DENSITY
    return (before + after) / 2


def sorted_gifts(gifts: Sequence[Gift]) -> List[Gift]:
    return sorted(gifts, key=lambda gift: gift.sort)


def compute_drop_sort(siblings: Sequence[Gift], target_id: str, *, sort_before: bool) -> float:
    """
    Compute the sort key for an item dropped next to ``target_id``.

    ``siblings`` must not contain the dropped item. Only the dropped item needs
    the returned key; every sibling keeps its current sort value.
    """
    ordered = sorted_gifts(siblings)
    index = next((i for i, gift in enumerate(ordered) if gift.id == target_id), None)
    if index is None:
        raise KeyError(target_id)
    target = ordered[index]
    if sort_before:
        previous = ordered[index - 1].sort if index > 0 else None
        return sort_between(previous, target.sort)
    following = ordered[index + 1].sort if index + 1 < len(ordered) else None
    return sort_between(target.sort, following)


def reorder_gift(gifts: Sequence[Gift], source_id: str, target_id: str) -> float:
    """
    Move ``source_id`` next to ``target_id`` and return its new sort key.

    The source lands before the target when it currently sorts after it, and
    after the target otherwise.
    """
    source = next((gift for gift in gifts if gift.id == source_id), None)
    target = next((gift for gift in gifts if gift.id == target_id), None)
    if source is None:
        raise KeyError(source_id)
    if target is None:
        raise KeyError(target_id)
    if source is target:
        return source.sort
    siblings = [gift for gift in gifts if gift.id != source_id]
    source.sort = compute_drop_sort(siblings, target_id, sort_before=source.sort > target.sort)
    return source.sort


def group_gifts_by_status(gifts: Sequence[Gift]) -> Dict[GiftEquipStatus, List[Gift]]:
    """Bucket gifts by equip status, each bucket in sort order."""
    groups: Dict[GiftEquipStatus, List[Gift]] = {status: [] for status in GiftEquipStatus}
    for gift in sorted_gifts(gifts):
        groups[gift.equip_status].append(gift)
    return groups
