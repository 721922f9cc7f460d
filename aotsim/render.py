"""Per-frame snapshots of the simulation, ready to be sent to a client."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field


@dataclass(frozen=True)
class RenderAttacker:
    attacker_id: int
    health: int
    x_position: int
    y_position: int
    is_alive: bool
    emp_id: int
    attacker_type: int

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class RenderDefender:
    defender_id: int
    x_position: int
    y_position: int
    is_alive: bool
    defender_type: int

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class RenderMine:
    mine_id: int
    x_position: int
    y_position: int
    mine_type: int
    is_activated: bool

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class BuildingStats:
    map_space_id: int
    population: int

    def to_dict(self) -> dict:
        # The wire format spells the key this way.
        return {"mapsace_id": self.map_space_id, "population": self.population}


@dataclass
class RenderSimulation:
    """Everything that changed in one simulated frame."""

    attackers: dict[int, list[RenderAttacker]] = field(default_factory=dict)
    defenders: dict[int, list[RenderDefender]] = field(default_factory=dict)
    mines: dict[int, RenderMine] = field(default_factory=dict)
    buildings: list[BuildingStats] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Return a JSON-ready mapping; integer map keys become strings."""
        return {
            "attackers": {
                str(key): [a.to_dict() for a in frames]
                for key, frames in self.attackers.items()
            },
            "defenders": {
                str(key): [d.to_dict() for d in frames]
                for key, frames in self.defenders.items()
            },
            "mines": {str(key): mine.to_dict() for key, mine in self.mines.items()},
            "buildings": [b.to_dict() for b in self.buildings],
        }