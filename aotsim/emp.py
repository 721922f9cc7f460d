"""EMPs planted by attackers and their blast at a set minute."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from .attacker import Attacker
from .blocks import BuildingsManager
from .constants import MAP_SIZE
from .errors import EmpDetailsError, MissingKeyError
from .models import AttackType


@dataclass(frozen=True)
class Emp:
    """One EMP planted on an attacker's path."""

    path_id: int
    x_coord: int
    y_coord: int
    radius: int
    damage: int
    attacker_id: int


def _index_types(
    emp_types: Union[Mapping[int, AttackType], Iterable[AttackType]],
) -> Mapping[int, AttackType]:
    if isinstance(emp_types, Mapping):
        return emp_types
    return {emp_type.id: emp_type for emp_type in emp_types}


def _last_frame_index(attacker: Attacker, x: int, y: int) -> int | None:
    frame = attacker.path_in_current_frame
    for index in range(len(frame) - 1, -1, -1):
        step = frame[index].attacker_path
        if step.x_coord == x and step.y_coord == y:
            return index
    return None


@dataclass
class Emps:
    """All EMPs of a game, grouped by the minute they go off."""

    by_time: dict[int, set[Emp]] = field(default_factory=dict)

    @classmethod
    def from_attackers(
        cls,
        attackers: Mapping[int, Attacker],
        emp_types: Union[Mapping[int, AttackType], Iterable[AttackType]],
    ) -> Emps:
        """Collect the EMPs on every attacker's path."""
        types = _index_types(emp_types)
        by_time: dict[int, set[Emp]] = {}
        for attacker_id, attacker in attackers.items():
            for step in attacker.path:
                if not step.is_emp:
                    continue
                if step.emp_type is None or step.emp_time is None:
                    raise EmpDetailsError(step.id)
                try:
                    emp_type = types[step.emp_type]
                except KeyError:
                    raise MissingKeyError(step.emp_type, "emp_types") from None
                by_time.setdefault(step.emp_time, set()).add(
                    Emp(
                        path_id=step.id,
                        x_coord=step.x_coord,
                        y_coord=step.y_coord,
                        radius=emp_type.attack_radius,
                        damage=emp_type.attack_damage,
                        attacker_id=attacker_id,
                    )
                )
        return cls(by_time=by_time)

    def simulate(
        self,
        minute: int,
        buildings_manager: BuildingsManager,
        defense_manager: Any,
        attackers: Mapping[int, Attacker],
    ) -> set[int]:
        """Set off the EMPs due at ``minute`` whose attacker has reached them.

        Every cell within an EMP's radius damages defenders and attackers on it.
        Returns the ids of the buildings caught in a blast.
        """
        affected_buildings: set[int] = set()
        for emp in self.by_time.get(minute, ()):
            try:
                owner = attackers[emp.attacker_id]
            except KeyError:
                raise MissingKeyError(emp.attacker_id, "attackers") from None
            if not owner.is_planted(emp.path_id):
                continue
            radius = emp.radius
            for x in range(emp.x_coord - radius, emp.x_coord + radius + 1):
                for y in range(emp.y_coord - radius, emp.y_coord + radius + 1):
                    if not (0 <= x < MAP_SIZE and 0 <= y < MAP_SIZE):
                        continue
                    if (x - emp.x_coord) ** 2 + (y - emp.y_coord) ** 2 > radius**2:
                        continue
                    defense_manager.defenders.get_damage(x, y)
                    for attacker in attackers.values():
                        index = _last_frame_index(attacker, x, y)
                        if index is not None:
                            attacker.get_damage(emp.damage, index)
                    building_id = buildings_manager.buildings_grid[x][y]
                    if building_id:
                        affected_buildings.add(building_id)
        return affected_buildings