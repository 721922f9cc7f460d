"""Defenders guarding a base: they chase attackers in range and strike once."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .attacker import Attacker
from .blocks import SourceDest
from .errors import EmptyDefenderPathError, MissingKeyError, ShortestPathNotFoundError
from .models import DefenderType, MapSpaces
from .render import RenderDefender

Point = tuple[int, int]
ShortestPaths = Mapping[SourceDest, list[Point]]


class MovementType(Enum):
    """Who moves at one tick of a chase."""

    ATTACKER = "attacker"
    DEFENDER = "defender"
    ATTACKER_AND_DEFENDER = "attacker_and_defender"


def generate_movement_sequence(
    attacker_speed: int, defender_speed: int
) -> list[MovementType]:
    """Interleave the moves of an attacker and a defender within one frame.

    Each side's moves are spread evenly over the frame; moves that fall at the
    same instant are made together.
    """
    attacker_times = deque(step * defender_speed for step in range(1, attacker_speed + 1))
    defender_times = deque(step * attacker_speed for step in range(1, defender_speed + 1))
    sequence: list[MovementType] = []
    while attacker_times or defender_times:
        if not attacker_times or not defender_times:
            raise ValueError(
                f"cannot interleave speeds {attacker_speed} and {defender_speed}"
            )
        attacker_time, defender_time = attacker_times[0], defender_times[0]
        if attacker_time == defender_time:
            attacker_times.popleft()
            defender_times.popleft()
            sequence.append(MovementType.ATTACKER_AND_DEFENDER)
        elif attacker_time > defender_time:
            defender_times.popleft()
            sequence.append(MovementType.DEFENDER)
        else:
            attacker_times.popleft()
            sequence.append(MovementType.ATTACKER)
    return sequence


@dataclass
class DefenderPathStats:
    """A defender's state at one cell it passes through in a frame."""

    x_coord: int
    y_coord: int
    is_alive: bool


@dataclass
class Defender:
    """A defender and its path; the last element of ``path`` is its position."""

    id: int
    defender_type: int
    radius: int
    speed: int
    damage: int
    hut_x: int
    hut_y: int
    path: list[Point]
    is_alive: bool = True
    damage_dealt: bool = False
    target_id: int | None = None
    path_in_current_frame: list[DefenderPathStats] = field(default_factory=list)

    @property
    def position(self) -> Point:
        if not self.path:
            raise EmptyDefenderPathError()
        return self.path[-1]

    def _stats(self, point: Point) -> DefenderPathStats:
        return DefenderPathStats(x_coord=point[0], y_coord=point[1], is_alive=self.is_alive)

    def _render(self, stats: DefenderPathStats) -> RenderDefender:
        return RenderDefender(
            defender_id=self.id,
            x_position=stats.x_coord,
            y_position=stats.y_coord,
            is_alive=stats.is_alive,
            defender_type=self.defender_type,
        )

    def move_defender_to_hut(self) -> None:
        """Walk up to ``speed`` cells back along the path towards the hut."""
        split_at = len(self.path) - self.speed if len(self.path) > self.speed else 1
        crossed = self.path[split_at:]
        del self.path[split_at:]
        self.path_in_current_frame = [self._stats(point) for point in crossed]
        self.path_in_current_frame.insert(0, self._stats(self.position))
        self.path_in_current_frame.pop()


def _attacker_position(attacker: Attacker, index: int) -> Point:
    step = attacker.path_in_current_frame[index].attacker_path
    return step.x_coord, step.y_coord


def _damage_attacker(attacker: Attacker, defender: Defender, index: int) -> None:
    defender.damage_dealt = True
    attacker.get_damage(defender.damage, index)
    defender.is_alive = False


def _move_defender(attacker: Attacker, defender: Defender, index: int) -> None:
    if defender.is_alive and len(defender.path) > 1:
        defender.path.pop()
        if _attacker_position(attacker, index) == defender.position:
            _damage_attacker(attacker, defender, index)
        defender.path_in_current_frame.insert(0, defender._stats(defender.position))


def _move_attacker(attacker: Attacker, index: int, defender: Defender) -> int:
    """Advance the attacker one step in the chase and return its new frame index."""
    if index > 0 and attacker.path_in_current_frame[index].is_alive:
        index -= 1
        attacker_pos = _attacker_position(attacker, index)
        if len(defender.path) > 1 and defender.is_alive:
            if defender.path[1] == attacker_pos:
                defender.path.pop(0)
            else:
                defender.path.insert(0, attacker_pos)
            if attacker_pos == defender.position:
                _damage_attacker(attacker, defender, index)
    return index


@dataclass
class Defenders:
    """All defenders of a base, strongest first."""

    defenders: list[Defender] = field(default_factory=list)

    def __iter__(self) -> Iterator[Defender]:
        return iter(self.defenders)

    def __len__(self) -> int:
        return len(self.defenders)

    @classmethod
    def from_placements(
        cls, placements: Iterable[tuple[MapSpaces, DefenderType]]
    ) -> Defenders:
        """Create defenders from their map spaces and types, numbered from 1.

        They are kept sorted by damage, highest first, so that the strongest
        defender strikes first when several reach the same attacker.
        """
        defenders = [
            Defender(
                id=number,
                defender_type=kind.id,
                radius=kind.radius,
                speed=kind.speed,
                damage=kind.damage,
                hut_x=space.x_coordinate,
                hut_y=space.y_coordinate,
                path=[(space.x_coordinate, space.y_coordinate)],
            )
            for number, (space, kind) in enumerate(placements, start=1)
        ]
        defenders.sort(key=lambda defender: defender.damage, reverse=True)
        return cls(defenders)

    def simulate(self, attack_manager: Any, buildings_manager: Any) -> None:
        """Move every live defender for one frame and pick targets for idle ones."""
        attackers: Mapping[int, Attacker] = attack_manager.attackers
        shortest_paths: ShortestPaths = buildings_manager.shortest_paths
        without_target: set[int] = set()
        for defender in self.defenders:
            defender.path_in_current_frame = []
            if not defender.is_alive:
                continue
            if defender.target_id is not None:
                try:
                    attacker = attackers[defender.target_id]
                except KeyError:
                    raise MissingKeyError(defender.target_id, "attackers") from None
                self._chase(defender, attacker, shortest_paths)
            elif len(defender.path) > 1:
                defender.move_defender_to_hut()
            else:
                without_target.add(defender.id)
        for defender in self.defenders:
            if defender.is_alive and defender.id in without_target:
                self.assign_defender(defender, attackers, shortest_paths)

    @staticmethod
    def _chase(
        defender: Defender, attacker: Attacker, shortest_paths: ShortestPaths
    ) -> None:
        sequence = generate_movement_sequence(attacker.speed, defender.speed)
        frame = attacker.path_in_current_frame
        index = len(frame) - 1
        if not frame[0].is_alive:
            Defenders.reassign_defender(defender, shortest_paths)
            defender.move_defender_to_hut()
            defender.target_id = None
            defender.move_defender_to_hut()
            return
        for movement in sequence:
            if not defender.is_alive:
                break
            if movement in (MovementType.ATTACKER, MovementType.ATTACKER_AND_DEFENDER):
                index = _move_attacker(attacker, index, defender)
            if movement in (MovementType.DEFENDER, MovementType.ATTACKER_AND_DEFENDER):
                _move_defender(attacker, defender, index)

    @staticmethod
    def reassign_defender(defender: Defender, shortest_paths: ShortestPaths) -> None:
        """Send the defender back to its hut along the stored shortest path."""
        x, y = defender.position
        source_dest = SourceDest(x, y, defender.hut_x, defender.hut_y)
        try:
            path = shortest_paths[source_dest]
        except KeyError:
            raise ShortestPathNotFoundError(source_dest) from None
        defender.path = list(reversed(path))

    @staticmethod
    def assign_defender(
        defender: Defender,
        attackers: Mapping[int, Attacker],
        shortest_paths: ShortestPaths,
    ) -> None:
        """Target the nearest live attacker within the defender's radius, if any."""
        defender_x, defender_y = defender.position
        defender.path_in_current_frame.append(defender._stats((defender_x, defender_y)))
        radius_sq = defender.radius**2
        target_id: int | None = None
        optimal_path: list[Point] = []
        optimal_distance: int | None = None
        for attacker in attackers.values():
            frame = attacker.path_in_current_frame
            if not frame[0].is_alive:
                continue
            for stats in reversed(frame):
                step = stats.attacker_path
                distance = (step.x_coord - defender_x) ** 2 + (step.y_coord - defender_y) ** 2
                if distance > radius_sq:
                    continue
                if optimal_distance is None or distance < optimal_distance:
                    end = frame[0].attacker_path
                    source_dest = SourceDest(end.x_coord, end.y_coord, defender_x, defender_y)
                    try:
                        path = shortest_paths[source_dest]
                    except KeyError:
                        raise ShortestPathNotFoundError(source_dest) from None
                    optimal_distance = distance
                    target_id = attacker.id
                    optimal_path = list(path)
                break
        defender.target_id = target_id
        if target_id is not None:
            defender.path = optimal_path

    def post_simulate(self) -> dict[int, list[RenderDefender]]:
        """Return each defender's positions in this frame, padded to its speed."""
        renders: dict[int, list[RenderDefender]] = {}
        for defender in self.defenders:
            frame = defender.path_in_current_frame
            if not frame:
                frame.append(defender._stats(defender.position))
            positions = [defender._render(stats) for stats in reversed(frame)]
            missing = defender.speed - len(positions)
            if missing > 0:
                positions.extend([defender._render(frame[0])] * missing)
            renders[defender.id] = positions
        return renders

    def get_defender_initial_position(self) -> list[RenderDefender]:
        """Return where every defender starts."""
        return [
            RenderDefender(
                defender_id=defender.id,
                x_position=defender.position[0],
                y_position=defender.position[1],
                is_alive=True,
                defender_type=defender.defender_type,
            )
            for defender in self.defenders
        ]

    def get_damage(self, x_position: int, y_position: int) -> None:
        """Kill every defender standing on the given cell."""
        for defender in self.defenders:
            if defender.position == (x_position, y_position):
                defender.is_alive = False