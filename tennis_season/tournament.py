"""Tournaments: points tables, seeding positions and byes."""

from __future__ import annotations

from dataclasses import dataclass, field

# category -> (main threshold, qualifying threshold, field limit or None,
#              points for large draws, points for draws of 32 or fewer,
#              draw size above which the large table applies)
_POINTS = {
    "GrandSlam": (0, 10, None, [0, 8, 16, 25, 10, 45, 90, 180, 360, 720, 1200, 2000], None, None),
    "Masters1000": (
        0, 20, None,
        [0, 8, 16, 5, 10, 45, 90, 180, 360, 600, 1000],
        [0, 8, 16, 10, 45, 90, 180, 360, 600, 1000],
        64,
    ),
    "ATP500": (
        35, 65, None,
        [0, 5, 10, 0, 20, 45, 90, 180, 300, 500],
        [0, 5, 10, 0, 45, 90, 180, 300, 500],
        32,
    ),
    "ATP250": (
        60, 75, None,
        [0, 5, 10, 0, 10, 20, 45, 90, 150, 250],
        [0, 5, 10, 0, 20, 45, 90, 150, 250],
        32,
    ),
    "Challenger175": (
        55, 70, 91,
        [0, 3, 8, 2, 5, 16, 35, 60, 100, 175],
        [0, 3, 8, 5, 16, 35, 60, 100, 175],
        32,
    ),
    "Challenger125": (
        65, 80, 91,
        [0, 3, 7, 2, 5, 11, 25, 45, 75, 125],
        [0, 3, 7, 5, 11, 25, 45, 75, 125],
        32,
    ),
    "Challenger100": (
        65, 80, 101,
        [0, 3, 6, 2, 4, 9, 20, 36, 60, 100],
        [0, 3, 6, 4, 9, 20, 36, 60, 100],
        32,
    ),
    "Challenger75": (
        70, 80, 111,
        [0, 3, 6, 2, 4, 9, 20, 36, 60, 100],
        [0, 2, 5, 3, 7, 15, 26, 44, 75],
        32,
    ),
    "Challenger50": (
        75, 85, 121,
        [0, 2, 4, 0, 1, 3, 7, 16, 30, 50],
        [0, 2, 4, 0, 3, 7, 16, 30, 50, 70],
        32,
    ),
}
_POINTS["WTA500"] = _POINTS["ATP500"]
_POINTS["WTA250"] = _POINTS["ATP250"]

_SEEDS_8 = [0, 7]
_SEEDS_16 = [0, 15, 8, 7]
_SEEDS_32 = [0, 31, 16, 15, 8, 23, 24, 7]
_SEEDS_64 = [0, 63, 32, 31, 16, 47, 48, 15, 8, 55, 40, 23, 25, 39, 56, 7]
_SEEDS_128 = [
    0, 127, 64, 63, 32, 95, 96, 31, 16, 111, 80, 47, 48, 79, 112, 15,
    8, 119, 72, 55, 40, 87, 104, 23, 24, 103, 88, 39, 56, 71, 120, 7,
]
_BYES_EIGHT_PER_32 = [1, 6, 9, 14, 17, 22, 25, 30]

_MAIN_SEEDS = {
    8: _SEEDS_8,
    16: _SEEDS_16,
    24: _SEEDS_32,
    28: _SEEDS_32,
    30: _SEEDS_32,
    32: _SEEDS_32,
    48: _SEEDS_64,
    56: _SEEDS_64,
    64: _SEEDS_64,
    96: _SEEDS_128,
    128: _SEEDS_128,
}

_MAIN_BYES = {
    24: _BYES_EIGHT_PER_32,
    28: [1, 14, 17, 30],
    30: [1, 30],
    48: _BYES_EIGHT_PER_32 + [b + 32 for b in _BYES_EIGHT_PER_32],
    56: [1, 14, 17, 30, 33, 46, 49, 62],
    96: [b + offset for offset in (0, 32, 64, 96) for b in _BYES_EIGHT_PER_32],
}

_QUALIFYING = {
    8: ([0, 7, 4, 3], 4),
    16: ([0, 15, 8, 7, 4, 11, 12, 3], 4),
    24: ([0, 23, 12, 11, 4, 19, 16, 7, 8, 15, 20, 3], 6),
    28: ([0, 27, 12, 11, 4, 19, 23, 20, 16, 7, 8, 15, 24, 3], 7),
    32: (_SEEDS_32, 8),
    48: (
        [0, 47, 24, 23, 12, 35, 36, 11, 4, 43, 28, 19, 16, 31, 40, 7,
         8, 39, 32, 15, 20, 27, 44, 3],
        12,
    ),
    128: (_SEEDS_128, 16),
}


@dataclass
class Tournament:
    """One event of the season and its draw configuration."""

    week: int = 0
    number: int = 0
    size: int = 0
    qualifying_size: int = 0
    country: str = ""
    city: str = ""
    name: str = ""
    category: str = ""
    seed: str = ""
    bracket: str = ""
    sex: str = ""
    qualifiers: int = 0
    main_threshold: int = 0
    qualifying_threshold: int = 0
    field_limit: int = 0
    seeds: list[int] = field(default_factory=list)
    qualifying_seeds: list[int] = field(default_factory=list)
    byes: list[int] = field(default_factory=list)
    points: list[int] = field(default_factory=list)

    def configure_points(self) -> None:
        """Set the points table and entry thresholds for the category."""
        entry = _POINTS.get(self.category)
        if entry is None:
            return
        main, qualifying, limit, large, small, cutoff = entry
        self.main_threshold = main
        self.qualifying_threshold = qualifying
        if limit is not None:
            self.field_limit = limit
        table = large if cutoff is None or self.size > cutoff else small
        self.points = list(table)

    def configure_main_draw(self) -> None:
        """Set seeding positions and byes for the main draw size."""
        seeds = _MAIN_SEEDS.get(self.size)
        if seeds is None:
            return
        self.seeds = list(seeds)
        if self.size in _MAIN_BYES:
            self.byes = list(_MAIN_BYES[self.size])

    def configure_qualifying(self) -> None:
        """Set qualifying seeding positions and the number of qualifiers."""
        entry = _QUALIFYING.get(self.qualifying_size)
        if entry is None:
            return
        seeds, qualifiers = entry
        self.qualifying_seeds = list(seeds)
        self.qualifiers = qualifiers

    def info(self) -> str:
        """One-line description of the tournament."""
        return (
            f"{self.name} {self.city} {self.country} {self.category} "
            f"{self.seed} {self.bracket} {self.sex} {self.size}"
        )