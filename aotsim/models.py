"""Records describing players, bases, block types and games."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class BlockCategory(Enum):
    """What kind of thing occupies a block on the map."""

    BUILDING = "building"
    DEFENDER = "defender"
    MINE = "mine"


@dataclass(frozen=True)
class AttackType:
    id: int
    att_type: str
    attack_radius: int
    attack_damage: int


@dataclass(frozen=True)
class AttackerPath:
    """One numbered step of an attacker's path, possibly planting an EMP."""

    id: int
    y_coord: int
    x_coord: int
    is_emp: bool
    emp_type: Optional[int] = None
    emp_time: Optional[int] = None


@dataclass(frozen=True)
class NewAttackerPath:
    """A path step as submitted by a player, before numbering."""

    y_coord: int
    x_coord: int
    is_emp: bool
    emp_type: Optional[int] = None
    emp_time: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> NewAttackerPath:
        return cls(
            y_coord=int(data["y_coord"]),
            x_coord=int(data["x_coord"]),
            is_emp=bool(data["is_emp"]),
            emp_type=data.get("emp_type"),
            emp_time=data.get("emp_time"),
        )


@dataclass(frozen=True)
class NewAttacker:
    """An attacker submitted for a game: its type and its planned path."""

    attacker_type: int
    attacker_path: list[NewAttackerPath] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> NewAttacker:
        return cls(
            attacker_type=int(data["attacker_type"]),
            attacker_path=[NewAttackerPath.from_dict(p) for p in data["attacker_path"]],
        )


@dataclass(frozen=True)
class BuildingType:
    id: int
    name: str
    width: int
    height: int
    capacity: int
    level: int
    cost: int


@dataclass
class Game:
    id: int
    attack_id: int
    defend_id: int
    map_layout_id: int
    attack_score: int
    defend_score: int
    artifacts_collected: int
    emps_used: int
    is_attacker_alive: bool
    damage_done: int

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class LevelsFixture:
    id: int
    start_date: datetime
    end_date: datetime
    no_of_bombs: int
    rating_factor: float
    no_of_attackers: int


@dataclass(frozen=True)
class MapLayout:
    id: int
    player: int
    level_id: int
    is_valid: bool


@dataclass(frozen=True)
class MapSpaces:
    id: int
    map_id: int
    x_coordinate: int
    y_coordinate: int
    block_type_id: int


@dataclass(frozen=True)
class ShortestPath:
    base_id: int
    source_x: int
    source_y: int
    dest_x: int
    dest_y: int
    pathlist: str


@dataclass
class User:
    id: int
    name: str
    email: str
    username: str
    is_pragyan: bool
    attacks_won: int
    defenses_won: int
    trophies: int
    avatar_id: int
    artifacts: int

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class UpdateUser:
    """A partial profile change; fields left as None are not touched."""

    name: Optional[str] = None
    username: Optional[str] = None
    avatar_id: Optional[int] = None

    def apply(self, user: User) -> User:
        """Return a copy of ``user`` with the given fields changed."""
        changes = {
            name: value
            for name, value in dataclasses.asdict(self).items()
            if value is not None
        }
        return dataclasses.replace(user, **changes)


@dataclass(frozen=True)
class MineType:
    id: int
    radius: int
    damage: int
    level: int
    cost: int


@dataclass(frozen=True)
class DefenderType:
    id: int
    speed: int
    damage: int
    radius: int
    level: int
    cost: int


@dataclass(frozen=True)
class BlockType:
    id: int
    defender_type: Optional[int]
    mine_type: Optional[int]
    category: BlockCategory
    building_type: int


@dataclass(frozen=True)
class AttackerType:
    id: int
    max_health: int
    speed: int
    amt_of_emps: int
    level: int
    cost: int