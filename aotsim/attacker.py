"""Attackers walking their planned path across a base."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .constants import attacker_allowed
from .errors import EmptyAttackerPathError
from .models import AttackerPath, AttackerType, NewAttackerPath
from .render import RenderAttacker


@dataclass
class AttackPathStats:
    """An attacker's state at one step it passes through in a frame."""

    attacker_path: AttackerPath
    health: int
    is_alive: bool


@dataclass
class Attacker:
    """An attacker and the path still ahead of it.

    ``path`` is stored in reverse: its last element is the current position.
    ``path_in_current_frame`` runs the other way round: element 0 is where the
    attacker ends the frame, the last element is where it started.
    """

    id: int
    path: list[AttackerPath]
    emps_used: int
    is_alive: bool
    health: int
    speed: int
    attacker_type: int
    path_in_current_frame: list[AttackPathStats] = field(default_factory=list)

    @classmethod
    def from_path(
        cls,
        path: Sequence[NewAttackerPath],
        attacker_type: AttackerType,
        attacker_id: int,
    ) -> Attacker:
        """Create an attacker at the first step of ``path``, numbering the steps from 1."""
        steps = [
            AttackerPath(
                id=number,
                y_coord=step.y_coord,
                x_coord=step.x_coord,
                is_emp=step.is_emp,
                emp_type=step.emp_type,
                emp_time=step.emp_time,
            )
            for number, step in enumerate(path, start=1)
        ]
        steps.reverse()
        return cls(
            id=attacker_id,
            path=steps,
            emps_used=sum(1 for step in path if step.is_emp),
            is_alive=True,
            health=attacker_type.max_health,
            speed=attacker_type.speed,
            attacker_type=attacker_type.id,
        )

    def _stats(self, step: AttackerPath) -> AttackPathStats:
        return AttackPathStats(attacker_path=step, health=self.health, is_alive=self.is_alive)

    def move_attacker(self, frames_passed: int) -> None:
        """Advance up to ``speed`` steps and record the steps crossed this frame."""
        self.path_in_current_frame = []
        if not attacker_allowed(frames_passed):
            self.path_in_current_frame.append(self._stats(self.path[-1]))
            return
        if self.is_alive and len(self.path) > 1:
            split_at = len(self.path) - self.speed if len(self.path) > self.speed else 1
            crossed = self.path[split_at:]
            del self.path[split_at:]
            self.path_in_current_frame = [self._stats(step) for step in crossed]
        self.path_in_current_frame.insert(0, self._stats(self.path[-1]))

    def is_planted(self, path_id: int) -> bool:
        """Return True once the attacker has reached the step ``path_id``."""
        if not self.path:
            raise EmptyAttackerPathError()
        return self.path[-1].id >= path_id

    def get_damage(self, damage: int, current_attacker_pos: int) -> None:
        """Damage the attacker from frame step ``current_attacker_pos`` onwards."""
        for stats in self.path_in_current_frame[: current_attacker_pos + 1]:
            stats.health -= damage
            if stats.health <= 0:
                stats.is_alive = False
                stats.health = 0
        if current_attacker_pos >= len(self.path_in_current_frame):
            raise IndexError(f"frame position {current_attacker_pos} out of range")

    def _render(self, stats: AttackPathStats) -> RenderAttacker:
        step = stats.attacker_path
        return RenderAttacker(
            attacker_id=self.id,
            health=stats.health,
            x_position=step.x_coord,
            y_position=step.y_coord,
            is_alive=stats.is_alive,
            emp_id=step.id if step.is_emp else 0,
            attacker_type=self.attacker_type,
        )

    def post_simulate(self) -> list[RenderAttacker]:
        """Settle the frame and return one render per step, padded to ``speed``.

        The attacker stops where it died; steps it did not reach go back onto
        its path.
        """
        frame = self.path_in_current_frame
        renders: list[RenderAttacker] = []
        if not frame:
            frame.append(self._stats(self.path[-1]))
        while len(frame) > 1 and frame[-1].is_alive:
            frame.pop()
            renders.append(self._render(frame[-1]))
        while len(renders) < self.speed:
            renders.append(self._render(frame[-1]))

        destination = frame[-1]
        self.health = destination.health
        self.is_alive = destination.is_alive

        self.path.extend(stats.attacker_path for stats in frame[1:])
        frame.clear()
        return renders