"""Set, match and tournament simulation."""

from __future__ import annotations

import math
import random
import sys
from dataclasses import dataclass
from itertools import cycle
from typing import Optional, Sequence, TextIO

from .player import Player
from .tournament import Tournament

FINALS_SIZE = 8
NEXT_GEN_MAX_AGE = 21
SETS_TO_WIN = 2
_FINALS_CATEGORIES = ("ATPFinals", "WTAFinals")


def _round2(value: float) -> float:
    """Round to two decimals, halves away from zero."""
    return math.floor(value * 100 + 0.5) / 100.0


@dataclass(eq=False)
class Match:
    """Two players meeting in a draw, and the winner once it is played."""

    first: Player
    second: Player
    winner: Optional[Player] = None


def _set_over(games_first: int, games_second: int) -> bool:
    reached_six = games_first == 6 or games_second == 6
    return (reached_six and abs(games_first - games_second) >= 2) or 7 in (
        games_first,
        games_second,
    )


def simulate_set(
    first: Player,
    second: Player,
    range_first: float,
    range_second: float,
    border_first: float,
    border_second: float,
    rng: random.Random,
) -> tuple[int, int]:
    """Play one set and return the games won by each player.

    Games alternate between the two serving configurations; a game goes to
    the second player when the draw exceeds the border. At 6-6 a tiebreak
    is decided by the players' actual skills.
    """
    games_first = games_second = 0
    for span, border in cycle(((range_first, border_first), (range_second, border_second))):
        game = _round2(rng.random() * span)
        if game > border:
            games_second += 1
        else:
            games_first += 1
        if _set_over(games_first, games_second):
            break
        if games_first == 6 and games_second == 6:
            tie = _round2(rng.random() * (first.actual_skill + second.actual_skill))
            if tie > first.actual_skill:
                games_second += 1
            else:
                games_first += 1
            break
    return games_first, games_second


def _serve_parameters(first: Player, second: Player) -> tuple[float, float, float, float]:
    range_first = first.actual_skill * 1.5 + second.actual_skill
    range_second = second.actual_skill + first.actual_skill * 1.5
    border_first = first.actual_skill * 1.5
    border_second = first.actual_skill
    return range_first, range_second, border_first, border_second


def simulate_match(
    match: Match,
    points: Sequence[int],
    week: int,
    index: int,
    sex: str,
    rng: random.Random,
    out: Optional[TextIO] = None,
) -> Player:
    """Play a best-of-three match, award the loser's points and return the winner."""
    out = sys.stdout if out is None else out
    first, second = match.first, match.second
    sets_first = sets_second = 0
    score = ""
    while True:
        range_first, range_second, border_first, border_second = _serve_parameters(first, second)
        if rng.randrange(2) == 0:
            games = simulate_set(
                first, second, range_first, range_second, border_first, border_second, rng
            )
        else:
            games = simulate_set(
                first, second, range_second, range_first, border_second, border_first, rng
            )
        score += f"{games[0]}-{games[1]} "
        if games[0] > games[1]:
            sets_first += 1
        else:
            sets_second += 1
        if SETS_TO_WIN in (sets_first, sets_second):
            break
        first.roll_actual_skill(sex, rng)
        second.roll_actual_skill(sex, rng)

    first.reset_actual_skill()
    second.reset_actual_skill()
    print(f"{first.info()} {score} {second.info()}", file=out)
    winner, loser = (first, second) if sets_first == SETS_TO_WIN else (second, first)
    loser.add_points(points[index], week)
    winner.update_after_win(rng)
    loser.update_after_loss(rng)
    match.winner = winner
    return winner


def head_to_head_winner(x: Player, y: Player, matches: Sequence[Match]) -> Optional[Player]:
    """Winner of the first match between ``x`` and ``y``, or None if they never met."""
    for match in matches:
        players = (match.first, match.second)
        if any(p is x for p in players) and any(p is y for p in players):
            return match.winner
    return None


def simulate_finals(
    players: Sequence[Player],
    tournament: Tournament,
    number: int,
    rng: random.Random,
    out: Optional[TextIO] = None,
) -> list[Player]:
    """Select and seed the eight players of a season-ending finals event.

    Tour finals take the top of the list; other finals events take every
    player aged 21 or under. Returns the seeded field.
    """
    out = sys.stdout if out is None else out
    if tournament.category in _FINALS_CATEGORIES:
        participants = list(players[: tournament.size])
    else:
        participants = [p for p in players if p.age <= NEXT_GEN_MAX_AGE]
    if len(participants) < FINALS_SIZE:
        raise ValueError(
            f"finals need {FINALS_SIZE} players, only {len(participants)} eligible"
        )
    print(f"{number + 1}. {tournament.info()}", file=out)
    field = participants[:FINALS_SIZE]
    for seed, player in enumerate(field, start=1):
        player.roll_actual_skill(tournament.sex, rng)
        player.seeding = str(seed)
        player.group_points = 0
    return field


def simulate_tournament(
    players: Sequence[Player],
    tournament: Tournament,
    number: int,
    appearances: dict[int, set[int]],
    rng: random.Random,
    out: Optional[TextIO] = None,
) -> Optional[list[Player]]:
    """Prepare a tournament of the season.

    Finals events are handed to :func:`simulate_finals`, whose seeded field
    is returned. Other events get their points table, main draw and
    qualifying configured and their header printed. ``appearances`` maps
    player ids to the weeks they have played.
    """
    out = sys.stdout if out is None else out
    if "Finals" in tournament.category:
        return simulate_finals(players, tournament, number, rng, out)
    tournament.configure_points()
    tournament.configure_main_draw()
    tournament.configure_qualifying()
    print(f"{number + 1}. {tournament.info()}", file=out)
    return None