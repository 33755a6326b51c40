"""Tests for closed-hexagon detection."""

from __future__ import annotations

from collections import Counter

import pytest

from src.games.matchsticks.grid import adjacent_vertices, endpoints
from src.games.matchsticks.hexagons import find_closed_hexagons, hexagon_around, hexagon_below
from src.games.matchsticks.types import east, south, vertex, west

HEXAGON = frozenset({
    south(0, 0), east(1, -1), west(2, -2), south(1, -2), east(0, -2), west(0, -1),
})


class TestHexagonBelow:
    def test_known_hexagon(self) -> None:
        assert hexagon_below(south(0, 0)) == HEXAGON

    def test_around_centre(self) -> None:
        assert hexagon_around(vertex(1, -1)) == HEXAGON

    def test_rejects_non_south_edges(self) -> None:
        with pytest.raises(ValueError, match="South"):
            hexagon_below(west(0, 0))
        with pytest.raises(ValueError):
            hexagon_below(east(0, 0))

    @pytest.mark.parametrize("centre", [vertex(1, -1), vertex(-4, 2), vertex(7, 7)])
    def test_rim_is_a_closed_cycle_around_the_centre(self, centre) -> None:
        rim = hexagon_around(centre)
        assert len(rim) == 6
        counts = Counter(v for edge in rim for v in endpoints(edge))
        # six vertices, each shared by two rim edges
        assert set(counts) == adjacent_vertices(centre)
        assert set(counts.values()) == {2}

    def test_distinct_centres_give_distinct_rims(self) -> None:
        assert hexagon_around(vertex(0, 0)) != hexagon_around(vertex(1, 0))


class TestFindClosedHexagons:
    def test_full_hexagon(self) -> None:
        assert find_closed_hexagons(HEXAGON) == {HEXAGON}

    @pytest.mark.parametrize("missing", sorted(HEXAGON, key=lambda e: e.to_key()))
    def test_any_missing_edge_breaks_it(self, missing) -> None:
        assert find_closed_hexagons(HEXAGON - {missing}) == set()

    def test_empty(self) -> None:
        assert find_closed_hexagons(set()) == set()

    def test_extra_edges_do_not_matter(self) -> None:
        edges = set(HEXAGON) | {west(9, 9), south(-3, 4), east(1, 1)}
        assert find_closed_hexagons(edges) == {HEXAGON}

    def test_two_hexagons_sharing_an_edge(self) -> None:
        left = hexagon_around(vertex(1, -1))
        right = hexagon_around(vertex(2, 0))
        assert len(left & right) == 1
        assert find_closed_hexagons(left | right) == {left, right}

    def test_accepts_any_iterable(self) -> None:
        assert find_closed_hexagons(list(HEXAGON)) == {HEXAGON}
