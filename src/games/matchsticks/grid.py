"""Incidence algebra of the triangular lattice.

A vertex (u, v) touches six edges. Three of them are anchored at the vertex
itself and three at its lower-coordinate neighbours:

    W(u, v)    -> (u, v + 1)
    S(u, v)    -> (u + 1, v)
    E(u, v-1)  -> (u + 1, v - 1)
    W(u, v-1)  -> (u, v - 1)
    S(u-1, v)  -> (u - 1, v)
    E(u-1, v)  -> (u - 1, v + 1)

``protruding_edges`` and ``endpoints`` are inverses of one another; the tests
check this in all six directions.
"""

from __future__ import annotations

from src.games.matchsticks.types import Edge, Orientation, Vertex, east, south, west

# Axial offsets of the six lattice neighbours
NEIGHBOR_OFFSETS: list[tuple[int, int]] = [
    (0, 1), (1, 0), (1, -1), (0, -1), (-1, 0), (-1, 1),
]


def protruding_edges(vertex: Vertex) -> frozenset[Edge]:
    """Return the six edges incident to ``vertex``, in canonical form."""
    u, v = vertex.u, vertex.v
    return frozenset({
        west(u, v),
        south(u, v),
        east(u, v - 1),
        west(u, v - 1),
        south(u - 1, v),
        east(u - 1, v),
    })


def endpoints(edge: Edge) -> frozenset[Vertex]:
    """Return the two vertices bounding ``edge``."""
    u, v = edge.u, edge.v
    if edge.orientation == Orientation.WEST:
        return frozenset({Vertex(u=u, v=v), Vertex(u=u, v=v + 1)})
    if edge.orientation == Orientation.SOUTH:
        return frozenset({Vertex(u=u, v=v), Vertex(u=u + 1, v=v)})
    if edge.orientation == Orientation.EAST:
        return frozenset({Vertex(u=u, v=v + 1), Vertex(u=u + 1, v=v)})
    raise ValueError(f"Invalid orientation: {edge.orientation}")


def adjacent_vertices(vertex: Vertex) -> frozenset[Vertex]:
    """The six lattice neighbours of ``vertex``."""
    return frozenset(
        Vertex(u=vertex.u + du, v=vertex.v + dv) for du, dv in NEIGHBOR_OFFSETS
    )


def far_endpoint(edge: Edge, vertex: Vertex) -> Vertex:
    """Return the endpoint of ``edge`` that is not ``vertex``."""
    ends = endpoints(edge)
    if vertex not in ends:
        raise ValueError(f"{vertex!r} is not an endpoint of {edge!r}")
    (other,) = ends - {vertex}
    return other


def edge_between(a: Vertex, b: Vertex) -> Edge:
    """Return the unique edge joining two adjacent vertices."""
    shared = [e for e in protruding_edges(a) & protruding_edges(b) if b in endpoints(e)]
    if len(shared) != 1:
        raise ValueError(f"{a!r} and {b!r} are not adjacent")
    return shared[0]


def edge_midpoint(edge: Edge) -> tuple[float, float]:
    """Cartesian midpoint of ``edge`` (for renderers)."""
    (x1, y1), (x2, y2) = (p.cartesian() for p in endpoints(edge))
    return (x1 + x2) / 2, (y1 + y2) / 2
