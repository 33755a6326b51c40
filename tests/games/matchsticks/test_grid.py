"""Tests for triangular-grid geometry."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from src.games.matchsticks.grid import (
    NEIGHBOR_OFFSETS,
    adjacent_vertices,
    edge_between,
    edge_midpoint,
    endpoints,
    far_endpoint,
    protruding_edges,
)
from src.games.matchsticks.types import Edge, Orientation, Vertex, east, south, vertex, west

SAMPLE_VERTICES = [vertex(0, 0), vertex(3, -2), vertex(-7, 5), vertex(100, 100), vertex(-1, -1)]


class TestVertexAndEdgeValues:
    def test_vertices_compare_by_value(self) -> None:
        assert vertex(1, 2) == Vertex(u=1, v=2)
        assert len({vertex(1, 2), vertex(1, 2), vertex(2, 1)}) == 2

    def test_edges_compare_by_value(self) -> None:
        assert south(0, 0) == Edge(u=0, v=0, orientation=Orientation.SOUTH)
        assert south(0, 0) != west(0, 0)
        assert {east(1, 1): "x"}[east(1, 1)] == "x"

    def test_vertex_is_frozen(self) -> None:
        v = vertex(0, 0)
        with pytest.raises(ValidationError):
            v.u = 3

    def test_keys(self) -> None:
        assert vertex(-3, 4).to_key() == "-3,4"
        assert Vertex.from_key("-3,4") == vertex(-3, 4)
        assert east(3, -2).to_key() == "3,-2:E"
        assert Edge.from_key("3,-2:E") == east(3, -2)

    @pytest.mark.parametrize("key", ["3,-2", "a,b:S", "1,2:N", "1:2:S", ""])
    def test_bad_edge_keys_rejected(self, key: str) -> None:
        with pytest.raises(ValueError):
            Edge.from_key(key)

    @pytest.mark.parametrize("key", ["1", "x,1", "1,2,3"])
    def test_bad_vertex_keys_rejected(self, key: str) -> None:
        with pytest.raises(ValueError):
            Vertex.from_key(key)

    def test_cartesian_projection(self) -> None:
        assert vertex(0, 0).cartesian() == (0.0, 0.0)
        x, y = vertex(1, 2).cartesian()
        assert x == pytest.approx(2.0)
        assert y == pytest.approx(-2 * math.sin(math.radians(60)))

    @pytest.mark.parametrize("du,dv", NEIGHBOR_OFFSETS)
    def test_neighbours_are_unit_distance_apart(self, du: int, dv: int) -> None:
        x1, y1 = vertex(2, -1).cartesian()
        x2, y2 = vertex(2 + du, -1 + dv).cartesian()
        assert math.hypot(x2 - x1, y2 - y1) == pytest.approx(1.0)


class TestEndpoints:
    def test_west(self) -> None:
        assert endpoints(west(0, 0)) == {vertex(0, 0), vertex(0, 1)}

    def test_south(self) -> None:
        assert endpoints(south(0, 0)) == {vertex(0, 0), vertex(1, 0)}

    def test_east_does_not_touch_its_anchor(self) -> None:
        ends = endpoints(east(0, 0))
        assert ends == {vertex(0, 1), vertex(1, 0)}
        assert vertex(0, 0) not in ends

    def test_far_endpoint(self) -> None:
        assert far_endpoint(south(0, 0), vertex(0, 0)) == vertex(1, 0)
        assert far_endpoint(south(0, 0), vertex(1, 0)) == vertex(0, 0)

    def test_far_endpoint_of_unrelated_vertex(self) -> None:
        with pytest.raises(ValueError, match="not an endpoint"):
            far_endpoint(south(0, 0), vertex(5, 5))

    def test_midpoint(self) -> None:
        assert edge_midpoint(south(0, 0)) == pytest.approx((0.5, 0.0))


class TestProtrudingEdges:
    @pytest.mark.parametrize("v", SAMPLE_VERTICES)
    def test_six_distinct_edges(self, v: Vertex) -> None:
        assert len(protruding_edges(v)) == 6

    @pytest.mark.parametrize("v", SAMPLE_VERTICES)
    def test_every_edge_touches_the_vertex(self, v: Vertex) -> None:
        for edge in protruding_edges(v):
            assert v in endpoints(edge)

    def test_origin(self) -> None:
        assert protruding_edges(vertex(0, 0)) == {
            west(0, 0), south(0, 0), east(0, -1),
            west(0, -1), south(-1, 0), east(-1, 0),
        }


class TestAdjacentVertices:
    @pytest.mark.parametrize("v", SAMPLE_VERTICES)
    def test_six_neighbours_excluding_self(self, v: Vertex) -> None:
        neighbours = adjacent_vertices(v)
        assert len(neighbours) == 6
        assert v not in neighbours

    @pytest.mark.parametrize("v", SAMPLE_VERTICES)
    def test_matches_far_ends_of_protruding_edges(self, v: Vertex) -> None:
        far_ends = set()
        for edge in protruding_edges(v):
            far_ends |= endpoints(edge)
        assert adjacent_vertices(v) == far_ends - {v}


class TestIncidence:
    @pytest.mark.parametrize("v", SAMPLE_VERTICES)
    @pytest.mark.parametrize("du,dv", NEIGHBOR_OFFSETS)
    def test_adjacent_vertices_share_exactly_one_edge(
        self, v: Vertex, du: int, dv: int,
    ) -> None:
        other = vertex(v.u + du, v.v + dv)
        shared = protruding_edges(v) & protruding_edges(other)
        assert len(shared) == 1
        (edge,) = shared
        assert endpoints(edge) == {v, other}

    @pytest.mark.parametrize("du,dv", NEIGHBOR_OFFSETS)
    def test_edge_between(self, du: int, dv: int) -> None:
        a = vertex(0, 0)
        b = vertex(du, dv)
        edge = edge_between(a, b)
        assert edge == edge_between(b, a)
        assert endpoints(edge) == {a, b}

    def test_edge_between_non_adjacent(self) -> None:
        with pytest.raises(ValueError, match="not adjacent"):
            edge_between(vertex(0, 0), vertex(2, 0))

    def test_non_adjacent_vertices_share_no_edge(self) -> None:
        assert not protruding_edges(vertex(0, 0)) & protruding_edges(vertex(2, -1))
