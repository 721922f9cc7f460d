"""The attacking side of a game: its attackers and their EMPs."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from .attacker import Attacker
from .constants import get_minute
from .emp import Emps
from .errors import MissingKeyError
from .models import AttackerType, AttackType, NewAttacker
from .render import RenderAttacker


def _index_attacker_types(
    attacker_types: Union[Mapping[int, AttackerType], Iterable[AttackerType]],
) -> Mapping[int, AttackerType]:
    if isinstance(attacker_types, Mapping):
        return attacker_types
    return {attacker_type.id: attacker_type for attacker_type in attacker_types}


@dataclass
class AttackManager:
    """All attackers of a game, keyed by their id, and the EMPs they carry."""

    attackers: dict[int, Attacker] = field(default_factory=dict)
    no_of_attackers: int = 0
    emps: Emps = field(default_factory=Emps)

    @classmethod
    def from_new_attackers(
        cls,
        new_attackers: Sequence[NewAttacker],
        attacker_types: Union[Mapping[int, AttackerType], Iterable[AttackerType]],
        emp_types: Union[Mapping[int, AttackType], Iterable[AttackType]],
    ) -> AttackManager:
        """Create the attackers of a game, numbered from 1 in submission order."""
        types = _index_attacker_types(attacker_types)
        attackers: dict[int, Attacker] = {}
        for number, new_attacker in enumerate(new_attackers, start=1):
            try:
                attacker_type = types[new_attacker.attacker_type]
            except KeyError:
                raise MissingKeyError(new_attacker.attacker_type, "attacker_types") from None
            attackers[number] = Attacker.from_path(
                new_attacker.attacker_path, attacker_type, number
            )
        return cls(
            attackers=attackers,
            no_of_attackers=len(attackers),
            emps=Emps.from_attackers(attackers, emp_types),
        )

    def update_attackers_position(self, frames_passed: int) -> None:
        """Move every attacker for the given frame."""
        for attacker in self.attackers.values():
            attacker.move_attacker(frames_passed)

    def simulate_attack(
        self, frames_passed: int, buildings_manager: Any, defense_manager: Any
    ) -> None:
        """Move the attackers, then set off the EMPs due at this frame's minute."""
        self.update_attackers_position(frames_passed)
        self.emps.simulate(
            get_minute(frames_passed), buildings_manager, defense_manager, self.attackers
        )

    def get_attacker_positions(self) -> dict[int, list[RenderAttacker]]:
        """Settle the frame for every attacker and return their renders by id."""
        return {
            attacker.id: attacker.post_simulate() for attacker in self.attackers.values()
        }