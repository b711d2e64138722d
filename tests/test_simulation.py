import io
import random

import pytest

from tennis_season.player import Player
from tennis_season.simulation import (
    Match,
    head_to_head_winner,
    simulate_finals,
    simulate_match,
    simulate_set,
    simulate_tournament,
)
from tennis_season.tournament import Tournament


_LEGAL_SET_SCORES = {(0, 6), (1, 6), (2, 6), (3, 6), (4, 6), (5, 7), (6, 7)}


class _FixedRandom:
    def __init__(self, value=0.5, choice=0):
        self.value = value
        self.choice = choice

    def random(self):
        return self.value

    def randrange(self, stop):
        return self.choice


def _player(name, skill=50.0, age=25, weeks=36):
    return Player(
        number=1,
        first_name=name,
        last_name="Test",
        age=age,
        nationality="XYZ",
        skill=skill,
        tournament_points=[0] * weeks,
    )


def test_set_first_player_holds_every_game():
    a, b = _player("A"), _player("B")
    assert simulate_set(a, b, 1.0, 1.0, 1.0, 1.0, _FixedRandom()) == (6, 0)


def test_set_second_player_wins_every_game():
    a, b = _player("A"), _player("B")
    assert simulate_set(a, b, 1.0, 1.0, 0.4, 0.4, _FixedRandom()) == (0, 6)


def test_tiebreak_goes_to_second_when_draw_exceeds_first_skill():
    a, b = _player("A", 10.0), _player("B", 30.0)
    games = simulate_set(a, b, 1.0, 1.0, 1.0, 0.0, _FixedRandom())
    assert games[1] == games[0] + 1
    assert games[1] == 7


def test_tiebreak_goes_to_first_when_draw_within_first_skill():
    a, b = _player("A", 30.0), _player("B", 10.0)
    games = simulate_set(a, b, 1.0, 1.0, 1.0, 0.0, _FixedRandom())
    assert games[0] == games[1] + 1
    assert games[0] == 7


@pytest.mark.parametrize("seed", range(25))
def test_random_sets_have_legal_scores(seed):
    rng = random.Random(seed)
    a, b = _player("A", 60.0), _player("B", 55.0)
    r1 = a.actual_skill * 1.5 + b.actual_skill
    games = simulate_set(a, b, r1, r1, a.actual_skill * 1.5, a.actual_skill, rng)
    assert len(games) == 2
    assert tuple(sorted(games)) in _LEGAL_SET_SCORES


def test_match_worked_example():
    a, b = _player("Anna"), _player("Beata")
    match = Match(a, b)
    out = io.StringIO()
    points = [0, 5, 10, 20]
    winner = simulate_match(match, points, 3, 2, "M", _FixedRandom(), out)
    assert winner is a
    assert match.winner is a
    assert b.points_in_week(3) == points[2]
    assert a.points_in_week(3) == 0
    assert a.skill > 50.0
    assert b.skill < 50.0
    assert out.getvalue() == f"{a.info()} 7-6 7-6  {b.info()}\n"


def test_head_to_head_found_in_either_order():
    a, b, c = _player("A"), _player("B"), _player("C")
    matches = [Match(a, c, winner=c), Match(b, a, winner=b)]
    assert head_to_head_winner(a, b, matches) is b
    assert head_to_head_winner(c, a, matches) is c


def test_head_to_head_missing_returns_none():
    a, b, c = _player("A"), _player("B"), _player("C")
    assert head_to_head_winner(b, c, [Match(a, c, winner=a)]) is None


def test_tour_finals_seeds_top_players():
    players = [_player(f"P{i}") for i in range(10)]
    for p in players:
        p.group_points = 5
    cup = Tournament(week=46, size=8, category="ATPFinals", sex="M", name="Finals")
    out = io.StringIO()
    field = simulate_finals(players, cup, 0, random.Random(1), out)
    assert field == players[:8]
    assert [p.seeding for p in field] == [str(i) for i in range(1, 9)]
    assert all(p.group_points == 0 for p in field)
    assert players[8].seeding == ""
    assert out.getvalue() == f"1. {cup.info()}\n"


def test_next_gen_finals_take_young_players_only():
    players = [_player(f"P{i}", age=20 if i % 2 else 30) for i in range(20)]
    cup = Tournament(size=8, category="NextGenFinals", sex="M")
    field = simulate_finals(players, cup, 4, random.Random(2), io.StringIO())
    assert len(field) == 8
    assert all(p.age <= 21 for p in field)


def test_finals_with_too_few_players_raise():
    players = [_player(f"P{i}", age=30) for i in range(10)]
    cup = Tournament(size=8, category="NextGenFinals", sex="M")
    with pytest.raises(ValueError):
        simulate_finals(players, cup, 0, random.Random(0), io.StringIO())


def test_tournament_is_configured_and_announced():
    cup = Tournament(week=1, size=32, qualifying_size=16, category="ATP250", sex="M", name="Open")
    out = io.StringIO()
    result = simulate_tournament([], cup, 2, {}, random.Random(0), out)
    assert result is None
    assert cup.points[-1] == 250
    assert len(cup.seeds) == 8
    assert cup.qualifiers == 4
    assert out.getvalue() == f"3. {cup.info()}\n"


def test_tournament_dispatches_finals():
    players = [_player(f"P{i}") for i in range(8)]
    cup = Tournament(size=8, category="WTAFinals", sex="F")
    field = simulate_tournament(players, cup, 0, {}, random.Random(3), io.StringIO())
    assert field == players
    assert cup.points == []