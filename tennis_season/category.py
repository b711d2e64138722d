"""Player categories: the men's (ATP) and women's (WTA) tours."""

from __future__ import annotations

from enum import Enum


class PlayerCategory(Enum):
    """The tour a player belongs to."""

    ATP = 0
    WTA = 1

    @classmethod
    def from_index(cls, index: int) -> "PlayerCategory":
        """Return the category at ``index`` (0 for ATP, 1 for WTA)."""
        for category in cls:
            if category.value == index:
                return category
        raise IndexError(f"invalid index for PlayerCategory: {index}")