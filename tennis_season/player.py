"""Players, their skills and their weekly ranking points."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

MAX_SKILL = 100.0
RANKED_RESULTS = 16


def _round2(value: float) -> float:
    """Round to two decimals, halves away from zero."""
    return math.floor(value * 100 + 0.5) / 100.0


def _draw(rng: random.Random, low: float, high: float) -> float:
    return _round2(rng.random() * (high - low) + low)


@dataclass(eq=False)
class Player:
    """A ranked player with a theoretical skill and a per-match actual skill."""

    number: int = 0
    first_name: str = ""
    last_name: str = ""
    age: int = 0
    nationality: str = ""
    skill: float = 0.0
    ranking: int = 0
    tournament_points: list[int] = field(default_factory=list)
    seeding: str = ""
    group_points: int = 0
    actual_skill: float = field(init=False)

    def __post_init__(self) -> None:
        self.actual_skill = self.skill

    def roll_actual_skill(self, sex: str, rng: random.Random) -> None:
        """Draw the actual skill for a set around the theoretical skill."""
        spread = 3.5 if sex == "M" else 5.5
        low = max(0.0, self.skill - spread)
        high = min(MAX_SKILL, self.skill + spread)
        self.actual_skill = _draw(rng, low, high)

    def numbered_info(self) -> str:
        """Description prefixed with the player's list number."""
        return f"{self.number}. {self.info()}"

    def recompute_rank(self) -> None:
        """Sort weekly points descending and rank by the best sixteen."""
        self.tournament_points.sort(reverse=True)
        self.ranking = sum(self.tournament_points[:RANKED_RESULTS])

    def info(self) -> str:
        """Name, age, nationality and seeding."""
        return (
            f"{self.first_name} {self.last_name} {self.age} "
            f"({self.nationality}) ({self.seeding})"
        )

    def reset_actual_skill(self) -> None:
        """Set the actual skill back to the theoretical skill."""
        self.actual_skill = self.skill

    def _has_week(self, week: int) -> bool:
        return 0 <= week < len(self.tournament_points)

    def add_points(self, points: int, week: int) -> None:
        """Add points to a week; weeks outside the record are ignored."""
        if self._has_week(week):
            self.tournament_points[week] += points

    def reset_points(self, week: int) -> None:
        """Clear a week's points; weeks outside the record are ignored."""
        if self._has_week(week):
            self.tournament_points[week] = 0

    def points_in_week(self, week: int) -> int:
        """Points earned in a week, or 0 for a week outside the record."""
        return self.tournament_points[week] if self._has_week(week) else 0

    def update_after_win(self, rng: random.Random) -> None:
        """Raise the theoretical skill by up to 0.8."""
        low = max(0.0, self.skill)
        high = min(MAX_SKILL, self.skill + 0.8)
        self.skill = _draw(rng, low, high)

    def update_after_loss(self, rng: random.Random) -> None:
        """Lower the theoretical skill by up to 1.5."""
        low = max(0.0, self.skill - 1.5)
        high = min(MAX_SKILL, self.skill)
        self.skill = _draw(rng, low, high)

    def jitter_skill(self, rng: random.Random) -> None:
        """Move the theoretical skill by up to one point either way."""
        low = max(0.0, self.skill - 1.0)
        high = min(MAX_SKILL, self.skill + 1.0)
        self.skill = _draw(rng, low, high)

    def __lt__(self, other: "Player") -> bool:
        """Higher ranking sorts first."""
        return self.ranking > other.ranking