"""Coordinate types for the triangular lattice used by Matchsticks."""

from __future__ import annotations

import math
from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict

SIN_60 = math.sin(math.radians(60))


class Orientation(str, Enum):
    """The three canonical edge directions out of an anchor vertex.

    W: (u, v) -> (u, v + 1)
    S: (u, v) -> (u + 1, v)
    E: (u, v + 1) -> (u + 1, v)  (the anchor itself is not an endpoint)
    """

    WEST = "W"
    SOUTH = "S"
    EAST = "E"


class Vertex(BaseModel):
    """A lattice point in axial coordinates."""

    model_config = ConfigDict(frozen=True)

    u: int
    v: int

    def cartesian(self) -> tuple[float, float]:
        return self.u + 0.5 * self.v, -SIN_60 * self.v

    def to_key(self) -> str:
        return f"{self.u},{self.v}"

    @staticmethod
    def from_key(key: str) -> Vertex:
        try:
            u, v = key.split(",")
            return Vertex(u=int(u), v=int(v))
        except ValueError:
            raise ValueError(f"Invalid vertex key: {key!r}") from None

    def __repr__(self) -> str:
        return f"Vertex({self.u}, {self.v})"


class Edge(BaseModel):
    """A lattice segment: an anchor vertex plus one of three orientations."""

    model_config = ConfigDict(frozen=True)

    u: int
    v: int
    orientation: Orientation

    @property
    def anchor(self) -> Vertex:
        return Vertex(u=self.u, v=self.v)

    def to_key(self) -> str:
        return f"{self.u},{self.v}:{self.orientation.value}"

    @staticmethod
    def from_key(key: str) -> Edge:
        try:
            anchor, tag = key.split(":")
            u, v = anchor.split(",")
            return Edge(u=int(u), v=int(v), orientation=Orientation(tag))
        except ValueError:
            raise ValueError(f"Invalid edge key: {key!r}") from None

    def __repr__(self) -> str:
        return f"Edge({self.u}, {self.v}, {self.orientation.value})"


def vertex(u: int, v: int) -> Vertex:
    return Vertex(u=u, v=v)


def west(u: int, v: int) -> Edge:
    return Edge(u=u, v=v, orientation=Orientation.WEST)


def south(u: int, v: int) -> Edge:
    return Edge(u=u, v=v, orientation=Orientation.SOUTH)


def east(u: int, v: int) -> Edge:
    return Edge(u=u, v=v, orientation=Orientation.EAST)


def sorted_keys(items: Iterable[Vertex | Edge]) -> list[str]:
    """Deterministic key list for a collection of vertices or edges."""
    return sorted(item.to_key() for item in items)
