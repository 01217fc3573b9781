"""Configuration classes for the shortest path engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union


class _ParsableEnum(IntEnum):
    @classmethod
    def from_string(cls, value: str):
        """Parse a case-insensitive member name.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid {cls.__name__} '{value}'. Valid values are: {valid}"
            ) from None


class UnknownVertexPolicy(_ParsableEnum):
    """What to do with start/end vertices that are not in the graph."""

    #: Drop them silently (logged at DEBUG).
    IGNORE = 1
    #: Raise UnknownVertexError.
    RAISE = 2


class DuplicateVertexPolicy(_ParsableEnum):
    """What to do when two vertex references compare equal at construction."""

    #: Later reference takes over the index mapping (logged at WARNING).
    OVERWRITE = 1
    #: Raise DuplicateVertexError.
    RAISE = 2


@dataclass(frozen=True)
class EngineConfig:
    """Behaviour switches for ``Dijkstra``.

    Policies may be given as members or as case-insensitive member names,
    e.g. ``EngineConfig(unknown_vertex="raise")``; names are parsed on
    construction so the stored fields are always enum members.

    Raises:
        ValueError: If a policy name is not recognised.
    """

    unknown_vertex: Union[UnknownVertexPolicy, str] = UnknownVertexPolicy.IGNORE
    duplicate_vertex: Union[DuplicateVertexPolicy, str] = DuplicateVertexPolicy.OVERWRITE

    def __post_init__(self) -> None:
        # Frozen dataclass: bypass __setattr__ to store the parsed members
        if isinstance(self.unknown_vertex, str):
            object.__setattr__(
                self, "unknown_vertex", UnknownVertexPolicy.from_string(self.unknown_vertex)
            )
        if isinstance(self.duplicate_vertex, str):
            object.__setattr__(
                self,
                "duplicate_vertex",
                DuplicateVertexPolicy.from_string(self.duplicate_vertex),
            )

    @classmethod
    def strict(cls) -> EngineConfig:
        """Config that reports every unknown or duplicate vertex as an error."""
        return cls(
            unknown_vertex=UnknownVertexPolicy.RAISE,
            duplicate_vertex=DuplicateVertexPolicy.RAISE,
        )


# Used when no config is passed to the engine
DEFAULT_ENGINE_CONFIG = EngineConfig()
