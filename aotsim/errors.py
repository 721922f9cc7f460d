"""Exceptions raised by the simulation."""

from typing import Any


class SimulationError(Exception):
    """Base class for all simulation errors."""


class EmpDetailsError(SimulationError):
    """An EMP path step is missing its type or its time."""

    def __init__(self, path_id: int) -> None:
        self.path_id = path_id
        super().__init__(f"EmpDetailsError(path_id={path_id})")


class EmptyAttackerPathError(SimulationError):
    """An attacker has no path left."""

    def __init__(self) -> None:
        super().__init__("EmptyAttackerPathError")


class EmptyDefenderPathError(SimulationError):
    """A defender has no path left."""

    def __init__(self) -> None:
        super().__init__("EmptyDefenderPathError")


class MissingKeyError(SimulationError, KeyError):
    """A lookup table had no entry for the requested key."""

    def __init__(self, key: Any, hashmap: str) -> None:
        self.key = key
        self.hashmap = hashmap
        super().__init__(f"MissingKeyError(key={key!r}, hashmap={hashmap!r})")

    def __str__(self) -> str:
        return self.args[0]


class MapSpaceRotationError(SimulationError):
    """A map space carries a rotation that is not supported."""

    def __init__(self, map_space_id: int) -> None:
        self.map_space_id = map_space_id
        super().__init__(f"MapSpaceRotationError(map_space_id={map_space_id})")


class ShortestPathNotFoundError(SimulationError):
    """No precomputed shortest path exists between two points."""

    def __init__(self, source_dest: Any) -> None:
        self.source_dest = source_dest
        super().__init__(f"ShortestPathNotFoundError({source_dest!r})")