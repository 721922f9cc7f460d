"""Frame-by-frame simulation of an attack on a base."""

from __future__ import annotations

from dataclasses import dataclass

from .attack import AttackManager
from .blocks import BuildingsManager
from .constants import WIN_THRESHOLD
from .defense import DefenseManager
from .render import RenderDefender, RenderMine, RenderSimulation

_FIXED_DAMAGE = 60


@dataclass
class Simulator:
    """Runs a game one frame at a time."""

    buildings_manager: BuildingsManager
    attack_manager: AttackManager
    defense_manager: DefenseManager
    rating_factor: float = 1.0
    frames_passed: int = 0

    def get_damage_done(self) -> int:
        """Return the damage done to the base."""
        return _FIXED_DAMAGE

    def get_attack_defence_metrics(self) -> tuple[int, int, int]:
        """Return (live attackers, defenders that dealt damage, mines set off)."""
        live_attackers = sum(
            1 for attacker in self.attack_manager.attackers.values() if attacker.is_alive
        )
        used_defenders = sum(
            1 for defender in self.defense_manager.defenders if defender.damage_dealt
        )
        used_mines = sum(1 for mine in self.defense_manager.mines if not mine.is_activated)
        return live_attackers, used_defenders, used_mines

    def get_scores(self) -> tuple[int, int]:
        """Return (attack score, defence score)."""
        damage_done = self.get_damage_done()
        if damage_done < WIN_THRESHOLD:
            return damage_done - 100, 100 - damage_done
        return damage_done, -damage_done

    def get_defender_position(self) -> list[RenderDefender]:
        return self.defense_manager.defenders.get_defender_initial_position()

    def get_mines(self) -> list[RenderMine]:
        return self.defense_manager.mines.get_initial_mines()

    def simulate(self) -> RenderSimulation:
        """Advance one frame and return what happened in it."""
        self.frames_passed += 1
        frames_passed = self.frames_passed

        self.attack_manager.simulate_attack(
            frames_passed, self.buildings_manager, self.defense_manager
        )
        self.defense_manager.simulate(
            self.attack_manager, self.buildings_manager, frames_passed
        )

        attackers = self.attack_manager.get_attacker_positions()
        defenders = self.defense_manager.defenders.post_simulate()
        buildings = self.buildings_manager.get_building_stats()
        mines = self.defense_manager.mines.post_simulate()
        return RenderSimulation(
            attackers=attackers,
            defenders=defenders,
            mines=mines,
            buildings=buildings,
        )