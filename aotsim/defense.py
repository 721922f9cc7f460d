"""The defence of a base: its defenders and its mines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .constants import attacker_allowed
from .defender import Defenders
from .mine import Mines


@dataclass
class DefenseManager:
    defenders: Defenders = field(default_factory=Defenders)
    mines: Mines = field(default_factory=Mines)

    def simulate(
        self, attack_manager: Any, buildings_manager: Any, frames_passed: int
    ) -> None:
        """Run mines, then defenders, once attackers are allowed to move."""
        if not attacker_allowed(frames_passed):
            return
        self.mines.simulate(attack_manager)
        self.defenders.simulate(attack_manager, buildings_manager)