"""Player statistics, replay visibility, level rounds and rating upkeep."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .constants import INITIAL_RATING, SCALE_FACTOR
from .models import Game, LevelsFixture, MapLayout, User

INVALID_BASE_PENALTY = int(4.0 * SCALE_FACTOR)


@dataclass
class StatsResponse:
    highest_attack_score: int = 0
    highest_defense_score: int = 0
    trophies: int = 0
    position_in_leaderboard: int = 0
    no_of_emps_used: int = 0
    total_damage_defense: int = 0
    total_damage_attack: int = 0
    no_of_attackers_suicided: int = 0
    no_of_attacks: int = 0
    no_of_defenses: int = 0

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)


def make_response(
    user: User,
    attack_games: Iterable[Game],
    defense_games: Iterable[Game],
    users: Sequence[User],
) -> StatsResponse:
    """Summarise a player's games; ``users`` is the leaderboard, best first."""
    attacks = list(attack_games)
    defenses = list(defense_games)
    stats = StatsResponse(
        trophies=user.trophies,
        no_of_attacks=len(attacks),
        no_of_defenses=len(defenses),
    )
    if attacks:
        stats.highest_attack_score = max(game.attack_score for game in attacks)
        stats.total_damage_attack = sum(game.damage_done for game in attacks)
        stats.no_of_emps_used = sum(game.emps_used for game in attacks)
        stats.no_of_attackers_suicided = sum(
            1 for game in attacks if not game.is_attacker_alive
        )
    if defenses:
        stats.highest_defense_score = max(game.defend_score for game in defenses)
        stats.total_damage_defense = sum(game.damage_done for game in defenses)
    if users:
        index = next((i for i, other in enumerate(users) if other.id == user.id), 0)
        stats.position_in_leaderboard = index + 1
    return stats


def can_show_replay(
    requested_user: int,
    game: Game,
    levels_fixture: LevelsFixture,
    now: Optional[datetime] = None,
) -> bool:
    """A replay is visible to the game's players, or once the round has started."""
    current = now if now is not None else datetime.now()
    return (
        requested_user == game.attack_id
        or requested_user == game.defend_id
        or current > levels_fixture.start_date
    )


def current_levels_fixture(
    fixtures: Iterable[LevelsFixture], now: Optional[datetime] = None
) -> LevelsFixture:
    """Return the first round running at ``now``; raise LookupError if none is."""
    current = now if now is not None else datetime.now()
    for fixture in fixtures:
        if fixture.start_date <= current < fixture.end_date:
            return fixture
    raise LookupError(f"no levels fixture is running at {current.isoformat()}")


def reset_ratings(users: Iterable[User]) -> list[User]:
    """Return copies of the users with their trophies back at the initial rating."""
    return [dataclasses.replace(user, trophies=INITIAL_RATING) for user in users]


def penalise_invalid_bases(
    users: Iterable[User], layouts: Iterable[MapLayout], level_id: int
) -> list[User]:
    """Take trophies from every user without a valid base for ``level_id``."""
    valid_players = {
        layout.player
        for layout in layouts
        if layout.level_id == level_id and layout.is_valid
    }
    return [
        user
        if user.id in valid_players
        else dataclasses.replace(user, trophies=user.trophies - INVALID_BASE_PENALTY)
        for user in users
    ]