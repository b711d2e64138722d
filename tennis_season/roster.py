"""An editable list of players with CSV storage."""

from __future__ import annotations

import csv
import os
from typing import Optional, Union

from .player import Player

CSV_HEADER = [
    "LP",
    "Imie",
    "Nazwisko",
    "Wiek",
    "Narodowosc",
    "Ranking",
    "UmiejetnoscTeoretyczna",
    "TournamentPts",
]
WEEKS = 36
MIN_FIELDS = 7

PathLike = Union[str, "os.PathLike[str]"]


def _to_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def _to_float(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        return 0.0


class PlayerRoster:
    """A list of players shown one per row; shares the list it is given."""

    def __init__(self, players: Optional[list[Player]] = None) -> None:
        self.players = players if players is not None else []

    def __len__(self) -> int:
        return len(self.players)

    def _valid(self, row: int) -> bool:
        return 0 <= row < len(self.players)

    def display(self, row: int) -> Optional[str]:
        """Text shown for a row, or None for a row that does not exist."""
        if not self._valid(row):
            return None
        p = self.players[row]
        return (
            f"{row + 1}. {p.first_name} {p.last_name} "
            f"({p.nationality}, {p.age} lat) - Ranking: {p.ranking}"
        )

    def tooltip(self, row: int) -> Optional[str]:
        """Skill hint for a row, or None for a row that does not exist."""
        if not self._valid(row):
            return None
        return f"Umiejętności: {self.players[row].skill:g}/100"

    def add_player(self, player: Player) -> None:
        """Append a player."""
        self.players.append(player)

    def remove_player(self, index: int) -> None:
        """Remove the player at ``index``; invalid indexes are ignored."""
        if self._valid(index):
            del self.players[index]

    def update_player(self, index: int, player: Player) -> None:
        """Replace the player at ``index``; invalid indexes are ignored."""
        if self._valid(index):
            self.players[index] = player

    def save_csv(self, path: PathLike) -> None:
        """Write all players with their 36 weekly point totals."""
        with open(path, "w", encoding="utf-8", newline="") as handle:
            writer = csv.writer(handle, lineterminator="\n")
            writer.writerow(CSV_HEADER)
            for position, p in enumerate(self.players, start=1):
                writer.writerow(
                    [
                        position,
                        p.first_name,
                        p.last_name,
                        p.age,
                        p.nationality,
                        p.ranking,
                        f"{p.skill:g}",
                        *(p.points_in_week(week) for week in range(WEEKS)),
                    ]
                )

    def load_csv(self, path: PathLike) -> None:
        """Replace the players with those read from a CSV file.

        Rows with fewer than seven fields are skipped; unreadable numbers
        count as zero; weekly points are cut or padded to 36 weeks.
        """
        with open(path, encoding="utf-8", newline="") as handle:
            rows = list(csv.reader(handle))
        self.players.clear()
        for fields in rows[1:]:
            if len(fields) < MIN_FIELDS:
                continue
            weekly = [_to_int(value) for value in fields[MIN_FIELDS : MIN_FIELDS + WEEKS]]
            weekly.extend([0] * (WEEKS - len(weekly)))
            self.players.append(
                Player(
                    number=_to_int(fields[0]),
                    first_name=fields[1],
                    last_name=fields[2],
                    age=_to_int(fields[3]),
                    nationality=fields[4],
                    ranking=_to_int(fields[5]),
                    skill=_to_float(fields[6]),
                    tournament_points=weekly,
                )
            )