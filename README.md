# aotsim

`aotsim` simulates a battle in a base attack and defence strategy game.
Attackers walk planned paths across a 40 × 40 map and may plant EMPs on
the way; the defending base answers with defenders that leave their huts
to chase attackers in range, and with mines that go off when an attacker
comes near. The simulation advances one frame at a time and reports where
every attacker and defender is and the state of every mine, so a client
can replay the fight.

The package has no runtime dependencies. All game data (building types,
attacker types, map spaces, precomputed shortest paths, users, games) is
passed in as plain Python objects from `aotsim.models`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `aotsim.constants` | Timing and scoring constants, `attacker_allowed`, `get_minute` |
| `aotsim.errors` | `SimulationError` and the errors derived from it |
| `aotsim.models` | Records: `User`, `Game`, `MapSpaces`, `MapLayout`, `LevelsFixture`, `BuildingType`, `AttackerType`, `DefenderType`, `MineType`, `AttackType`, `NewAttacker`, `NewAttackerPath`, `UpdateUser`, … |
| `aotsim.render` | Per-frame output: `RenderAttacker`, `RenderDefender`, `RenderMine`, `BuildingStats`, `RenderSimulation` |
| `aotsim.blocks` | `BuildingsManager`, `build_buildings_grid`, `parse_pathlist`, `SourceDest` |
| `aotsim.attacker` | `Attacker`: movement and damage along its path |
| `aotsim.emp` | `Emps`: EMP blasts scheduled by game minute |
| `aotsim.defender` | `Defenders`: targeting and chasing; `generate_movement_sequence` |
| `aotsim.mine` | `Mines`: proximity mines |
| `aotsim.defense` | `DefenseManager`: mines and defenders together |
| `aotsim.attack` | `AttackManager`: all attackers and their EMPs |
| `aotsim.simulator` | `Simulator`, which drives a battle frame by frame |
| `aotsim.stats` | Player statistics, replay visibility, level rounds and rating upkeep |

## Game clock

A game lasts 480 in-game minutes at 2 minutes per frame
(`NO_OF_FRAMES` is 240). Attackers and defences stay still for the first
30 frames:

```python
from aotsim.constants import attacker_allowed, get_minute

attacker_allowed(30)   # False
attacker_allowed(31)   # True
get_minute(5)          # 10
```

## Running a battle

Build the three managers from your game data, hand them to a `Simulator`
and call `simulate()` once per frame. Each call returns a
`RenderSimulation`; its `to_dict()` gives plain data ready for JSON (map
keys become strings).

```python
from aotsim.attack import AttackManager
from aotsim.blocks import BuildingsManager
from aotsim.constants import NO_OF_FRAMES
from aotsim.defender import Defenders
from aotsim.defense import DefenseManager
from aotsim.mine import Mines
from aotsim.models import (
    AttackerType, BuildingType, MapSpaces, MineType, NewAttacker, NewAttackerPath,
)
from aotsim.simulator import Simulator

hall = BuildingType(id=1, name="hall", width=2, height=2, capacity=10, level=1, cost=0)
buildings = BuildingsManager.from_map(
    map_spaces=[MapSpaces(id=1, map_id=1, x_coordinate=5, y_coordinate=5, block_type_id=1)],
    building_block_map={1: hall},   # block type id -> building type
    shortest_paths=[],
)

scout = AttackerType(id=1, max_health=100, speed=2, amt_of_emps=0, level=1, cost=0)
attack = AttackManager.from_new_attackers(
    [NewAttacker(
        attacker_type=1,
        attacker_path=[NewAttackerPath(y_coord=0, x_coord=x, is_emp=False) for x in range(10)],
    )],
    attacker_types=[scout],
    emp_types=[],
)

mine = MineType(id=1, radius=1, damage=30, level=1, cost=0)
defense = DefenseManager(
    defenders=Defenders.from_placements([]),
    mines=Mines.from_placements(
        [(MapSpaces(id=2, map_id=1, x_coordinate=4, y_coordinate=0, block_type_id=2), mine)]
    ),
)

simulator = Simulator(buildings, attack, defense, rating_factor=1.0)
first_defenders = simulator.get_defender_position()
first_mines = simulator.get_mines()
frames = [simulator.simulate().to_dict() for _ in range(NO_OF_FRAMES)]

attack_score, defend_score = simulator.get_scores()
live_attackers, used_defenders, used_mines = simulator.get_attack_defence_metrics()
```

How a frame is played:

- Each attacker moves up to `speed` steps along its path. EMPs due at the
  frame's minute go off if their attacker has reached them, killing
  defenders and damaging attackers on every cell within the blast radius.
- Each armed mine damages attackers that pass within its radius and is
  then spent.
- An idle defender at its hut targets the nearest live attacker within its
  radius and follows the stored shortest path to it; when it reaches the
  attacker it deals its damage once and dies. If its target dies first it
  walks back to its hut. Defenders act strongest first.
- Every attacker's and defender's list of positions in a frame is padded to
  its speed.

`get_damage_done()` currently returns a fixed 60, so `get_scores()` gives
`(60, -60)`; a damage below `WIN_THRESHOLD` (50) would give
`(damage - 100, 100 - damage)`. Building populations are reported by
`BuildingsManager.get_building_stats()` but nothing in the simulation
changes them.

Shortest paths are stored as strings of coordinate pairs;
`parse_pathlist` reads them:

```python
from aotsim.blocks import parse_pathlist

parse_pathlist("(1,2)(1,3)(2,3)")   # [(1, 2), (1, 3), (2, 3)]
```

A defender that needs a path which was not supplied raises
`ShortestPathNotFoundError`; an EMP step without type or time raises
`EmpDetailsError`; an unknown attacker, EMP or block type raises
`MissingKeyError` (also a `KeyError`). All derive from
`aotsim.errors.SimulationError`.

## Player statistics and ratings

`aotsim.stats` works on lists of `User`, `Game`, `LevelsFixture` and
`MapLayout` records:

- `make_response(user, attack_games, defense_games, users)` returns a
  `StatsResponse` with the best attack and defence scores, total damage,
  EMPs used, attackers lost, game counts and the player's 1-based position
  in `users`, which should be ordered by trophies, highest first.
- `can_show_replay(requested_user, game, levels_fixture, now=None)` is true
  for the game's attacker or defender, or once the round has started.
- `current_levels_fixture(fixtures, now=None)` returns the round running at
  `now`, or raises `LookupError`.
- `reset_ratings(users)` returns copies with trophies set to 1000.
- `penalise_invalid_bases(users, layouts, level_id)` returns copies with 80
  trophies taken from every player without a valid base for the level.
- `UpdateUser(...).apply(user)` returns a copy of a user with the given
  profile fields changed.

## What it does not do

`aotsim` is a library only. It has no command-line tool, no web server or
API, no player registration or sessions, and no database: loading game
data and saving results, logs or ratings is left to the caller.