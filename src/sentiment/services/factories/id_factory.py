"""Utilities for creating deterministic entity identifiers."""
from __future__ import annotations

from typing import Collection

from sentiment.core.rng import RNG


def make_entity_id(prefix: str, rng: RNG, taken: Collection[str] = ()) -> str:
    """Generate an identifier using the provided RNG, skipping ids already taken."""
    while True:
        entity_id = f"{prefix}_{rng.randint(100000, 999999)}"
        if entity_id not in taken:
            return entity_id
