"""Mines hidden on a base that go off once an attacker comes near."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from .models import MapSpaces, MineType
from .render import RenderMine


@dataclass
class Mine:
    id: int
    mine_type: int
    damage: int
    radius: int
    x_position: int
    y_position: int
    is_activated: bool = True

    def render(self) -> RenderMine:
        return RenderMine(
            mine_id=self.id,
            x_position=self.x_position,
            y_position=self.y_position,
            mine_type=self.mine_type,
            is_activated=self.is_activated,
        )


@dataclass
class Mines:
    """All mines of a base."""

    mines: list[Mine] = field(default_factory=list)

    def __iter__(self) -> Iterator[Mine]:
        return iter(self.mines)

    def __len__(self) -> int:
        return len(self.mines)

    @classmethod
    def from_placements(cls, placements: Iterable[tuple[MapSpaces, MineType]]) -> Mines:
        """Create armed mines from their map spaces and types, numbered from 1."""
        return cls(
            [
                Mine(
                    id=number,
                    mine_type=kind.id,
                    damage=kind.damage,
                    radius=kind.radius,
                    x_position=space.x_coordinate,
                    y_position=space.y_coordinate,
                )
                for number, (space, kind) in enumerate(placements, start=1)
            ]
        )

    def simulate(self, attack_manager: Any) -> None:
        """Set off every armed mine that an attacker passed within reach of.

        Each attacker is hit from the first in-range step of its frame on; an
        armed mine hits every attacker in range during the frame it goes off.
        """
        attackers = attack_manager.attackers
        for mine in self.mines:
            if not mine.is_activated:
                continue
            radius_sq = mine.radius**2
            for attacker in attackers.values():
                frame = attacker.path_in_current_frame
                for index in range(len(frame) - 1, -1, -1):
                    step = frame[index].attacker_path
                    distance = (mine.x_position - step.x_coord) ** 2 + (
                        mine.y_position - step.y_coord
                    ) ** 2
                    if distance <= radius_sq:
                        attacker.get_damage(mine.damage, index)
                        mine.is_activated = False
                        break

    def post_simulate(self) -> dict[int, RenderMine]:
        """Return the state of every mine, keyed by mine id."""
        return {mine.id: mine.render() for mine in self.mines}

    def get_initial_mines(self) -> list[RenderMine]:
        """Return the state of every mine, in order."""
        return [mine.render() for mine in self.mines]