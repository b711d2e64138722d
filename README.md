# tennis-season

A small library of building blocks for simulating a professional tennis
season: players with skills and weekly ranking points, tournaments of
different tiers with their points tables and draw layouts, sets and matches
played out at random, and player lists stored in CSV files.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `tennis_season.category`

`PlayerCategory` is an enum with the members `ATP` (0) and `WTA` (1).
`PlayerCategory.from_index(index)` returns the member for 0 or 1 and raises
`IndexError` for any other index.

### `tennis_season.player`

`Player` is a dataclass with the fields `number`, `first_name`, `last_name`,
`age`, `nationality`, `skill`, `ranking`, `tournament_points` (a list of
points per week), `seeding` and `group_points`. It also has `actual_skill`,
which starts equal to `skill`.

- `roll_actual_skill(sex, rng)` draws `actual_skill` within 3.5 of `skill`
  when `sex` is `"M"` and within 5.5 otherwise, kept between 0 and 100 and
  rounded to two decimals. `reset_actual_skill()` sets it back to `skill`.
- `update_after_win(rng)` raises `skill` by up to 0.8,
  `update_after_loss(rng)` lowers it by up to 1.5, and `jitter_skill(rng)`
  moves it by up to 1 either way; all stay between 0 and 100.
- `add_points(points, week)`, `reset_points(week)` and
  `points_in_week(week)` work on one week; weeks outside the list are
  ignored, and `points_in_week` returns 0 for them.
- `recompute_rank()` sorts the weekly points from highest to lowest and sets
  `ranking` to the sum of the 16 best.
- `info()` gives `"First Last age (NAT) (seeding)"`; `numbered_info()` puts
  `"number. "` in front of it.
- Players compare with `<` by ranking, so `sorted(players)` puts the
  highest-ranked first.

### `tennis_season.tournament`

`Tournament` is a dataclass describing one event: `week`, `number`, `size`
(main draw), `qualifying_size`, `country`, `city`, `name`, `category`,
`seed`, `bracket` and `sex`, plus the values filled in by:

- `configure_points()`: for the categories `GrandSlam`, `Masters1000`,
  `ATP500`/`WTA500`, `ATP250`/`WTA250` and `Challenger175`, `125`, `100`,
  `75`, `50`, sets `points` (the points table, chosen by draw size),
  `main_threshold`, `qualifying_threshold` and, for Challengers,
  `field_limit`. Other categories are left unchanged.
- `configure_main_draw()`: sets `seeds` (seed positions) and, for draws of
  24, 28, 30, 48, 56 and 96, `byes`. Supported sizes are 8, 16, 24, 28, 30,
  32, 48, 56, 64, 96 and 128.
- `configure_qualifying()`: sets `qualifying_seeds` and `qualifiers` for
  qualifying draws of 8, 16, 24, 28, 32, 48 and 128.
- `info()`: a one-line description.

### `tennis_season.simulation`

- `Match(first, second, winner=None)` records one meeting.
- `simulate_set(first, second, range_first, range_second, border_first,
  border_second, rng)` plays one set game by game and returns the games won
  by each player as a tuple. At 6-6 a tiebreak is decided by the players'
  actual skills.
- `simulate_match(match, points, week, index, sex, rng, out=None)` plays a
  best-of-three match, prints the score line to `out` (standard output by
  default), gives the loser `points[index]` in `week`, updates both players'
  skills, sets `match.winner` and returns the winner.
- `head_to_head_winner(x, y, matches)` returns the winner of the first match
  in `matches` between `x` and `y`, or `None` if they did not meet.
- `simulate_finals(players, tournament, number, rng, out=None)` picks the
  field of a finals event: the first `tournament.size` players for
  `ATPFinals`/`WTAFinals`, otherwise every player aged 21 or under. It prints
  the event header, seeds the first eight 1 to 8, rolls their actual skills,
  clears their `group_points` and returns them. It raises `ValueError` when
  fewer than eight players are eligible.
- `simulate_tournament(players, tournament, number, appearances, rng,
  out=None)` passes events whose category contains `"Finals"` to
  `simulate_finals` and returns its field. For other events it configures
  the points table, main draw and qualifying, prints the header and returns
  `None`.

### `tennis_season.roster`

`PlayerRoster(players=None)` wraps a list of players (sharing the list it is
given). `len(roster)` is the number of players.

- `display(row)` gives text such as `"1. Anna Nowak (POL, 24 lat) - Ranking: 0"`
  and `tooltip(row)` gives `"Umiejętności: 80/100"`; both return `None` for a
  row that does not exist.
- `add_player(player)` appends; `remove_player(index)` and
  `update_player(index, player)` ignore invalid indexes.
- `save_csv(path)` and `load_csv(path)` store the list as CSV (see below).

Every random step takes a `random.Random` instance; pass a seeded one for
repeatable runs.

## Example

```python
import random

from tennis_season.player import Player
from tennis_season.simulation import Match, simulate_match

rng = random.Random(7)
a = Player(1, "Anna", "Nowak", 24, "POL", 80.0, 0, [0] * 36)
b = Player(2, "Ewa", "Kowalska", 22, "POL", 75.0, 0, [0] * 36)
match = Match(a, b)
winner = simulate_match(match, [0, 5, 10], week=3, index=1, sex="F", rng=rng)
print(winner.info())
```

## CSV format

`PlayerRoster.save_csv` writes UTF-8 text with this header line:

```
LP,Imie,Nazwisko,Wiek,Narodowosc,Ranking,UmiejetnoscTeoretyczna,TournamentPts
```

Each following row holds the position in the list, first name, last name,
age, nationality, ranking and skill, then 36 weekly point values.

`load_csv` replaces the roster's players with those in the file. It skips
the header and any row with fewer than seven fields, reads unparsable
numbers as zero, and cuts or pads the weekly points to 36 values.

## What it does not do

There is no command-line program and no graphical interface; the package is
used from Python code. Tournaments are configured but their qualifying and
main draws are not played round by round, and finals events stop after the
field is chosen and seeded: no group stage or knockout is played. There is
no season calendar or driver that runs a whole season.