"""Closed-hexagon detection (the win condition)."""

from __future__ import annotations

from collections.abc import Iterable

from src.games.matchsticks.types import Edge, Orientation, Vertex, east, south, west


def hexagon_below(edge: Edge) -> frozenset[Edge]:
    """Return the six rim edges of the unit hexagon below a South edge.

    Every unit hexagon has exactly one South edge on its lower boundary, so
    anchoring on South edges enumerates each hexagon once.
    """
    if edge.orientation != Orientation.SOUTH:
        raise ValueError(f"Hexagons are anchored on South edges, got {edge!r}")
    u, v = edge.u, edge.v
    return frozenset({
        south(u, v),
        east(u + 1, v - 1),
        west(u + 2, v - 2),
        south(u + 1, v - 2),
        east(u, v - 2),
        west(u, v - 1),
    })


def hexagon_around(center: Vertex) -> frozenset[Edge]:
    """Return the rim of the hexagon whose centre is ``center``."""
    return hexagon_below(south(center.u - 1, center.v + 1))


def find_closed_hexagons(edges: Iterable[Edge]) -> set[frozenset[Edge]]:
    edge_set = frozenset(edges)
    closed: set[frozenset[Edge]] = set()
    for edge in edge_set:
        if edge.orientation != Orientation.SOUTH:
            continue
        rim = hexagon_below(edge)
        if rim <= edge_set:
            closed.add(rim)
    return closed
