"""Reachability over a player's claimed edges."""

from __future__ import annotations

from collections.abc import Set

from src.games.matchsticks.grid import far_endpoint, protruding_edges
from src.games.matchsticks.types import Edge, Vertex


def accessible_vertices_from(
    origin: Vertex,
    walkable_edges: Set[Edge],
    forbidden_vertex: Vertex,
) -> set[Vertex]:
    """Return every vertex reachable from ``origin`` over ``walkable_edges``.

    No edge incident to ``forbidden_vertex`` may be crossed, so the search
    neither passes through nor stops on it. Each edge is traversed at most
    once, which bounds the search on a lattice full of cycles. ``origin``
    is never part of the result.
    """
    if origin == forbidden_vertex:
        raise ValueError("forbidden_vertex must differ from origin")

    barrier = protruding_edges(forbidden_vertex)
    traversed: set[Edge] = set()
    reached: set[Vertex] = set()
    stack = [origin]

    while stack:
        current = stack.pop()
        for edge in protruding_edges(current) & walkable_edges:
            if edge in traversed or edge in barrier:
                continue
            traversed.add(edge)
            nxt = far_endpoint(edge, current)
            reached.add(nxt)
            stack.append(nxt)

    reached.discard(origin)
    return reached
