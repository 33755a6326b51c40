"""Immutable game state and its JSON-safe ``game_data`` encoding.

Every transition builds a new ``GameState`` with ``model_copy(update=...)``;
nothing in this module mutates a state once it is built.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from src.config import settings
from src.games.matchsticks.types import Edge, Vertex, sorted_keys, south, vertex

DEFAULT_START_POSITIONS: tuple[Vertex, Vertex] = (vertex(0, 0), vertex(1, 0))
DEFAULT_NEUTRAL_EDGES: frozenset[Edge] = frozenset({south(0, 0)})
DEFAULT_COLOURS: tuple[str, str] = ("red", "blue")


class PlayerState(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    matchsticks: int = Field(ge=0)
    position: Vertex
    owned_edges: frozenset[Edge] = frozenset()
    colour: str = ""


class GameState(BaseModel):
    model_config = ConfigDict(frozen=True)

    players: tuple[PlayerState, PlayerState]
    neutral_edges: frozenset[Edge] = frozenset()
    current_player_index: int = Field(default=0, ge=0, le=1)
    winner: int | None = None  # index into players
    turn_number: int = 0

    @property
    def current_player(self) -> PlayerState:
        return self.players[self.current_player_index]

    @property
    def opponent(self) -> PlayerState:
        return self.players[1 - self.current_player_index]

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    def with_player(self, index: int, player: PlayerState) -> GameState:
        players = list(self.players)
        players[index] = player
        return self.model_copy(update={"players": tuple(players)})


def create_initial_state(
    names: tuple[str, str] = ("", ""),
    starting_matchsticks: int | None = None,
    start_positions: tuple[Vertex, Vertex] = DEFAULT_START_POSITIONS,
    neutral_edges: frozenset[Edge] = DEFAULT_NEUTRAL_EDGES,
) -> GameState:
    """Two players on distinct vertices, one shared neutral matchstick."""
    if start_positions[0] == start_positions[1]:
        raise ValueError("Players must start on distinct vertices")
    if starting_matchsticks is None:
        starting_matchsticks = settings.starting_matchsticks

    players = tuple(
        PlayerState(
            name=names[i],
            matchsticks=starting_matchsticks,
            position=start_positions[i],
            owned_edges=frozenset(),
            colour=DEFAULT_COLOURS[i],
        )
        for i in range(2)
    )
    return GameState(
        players=players,
        neutral_edges=frozenset(neutral_edges),
        current_player_index=0,
        winner=None,
        turn_number=0,
    )


# ── game_data codec ──


def state_to_game_data(state: GameState) -> dict:
    """Encode ``state`` as the plain dict passed through the plugin protocol."""
    return {
        "players": [
            {
                "name": p.name,
                "matchsticks": p.matchsticks,
                "position": p.position.to_key(),
                "owned_edges": sorted_keys(p.owned_edges),
                "colour": p.colour,
            }
            for p in state.players
        ],
        "neutral_edges": sorted_keys(state.neutral_edges),
        "current_player_index": state.current_player_index,
        "winner": state.winner,
        "turn_number": state.turn_number,
    }


def state_from_game_data(game_data: dict) -> GameState:
    players = tuple(
        PlayerState(
            name=p["name"],
            matchsticks=p["matchsticks"],
            position=Vertex.from_key(p["position"]),
            owned_edges=frozenset(Edge.from_key(k) for k in p["owned_edges"]),
            colour=p["colour"],
        )
        for p in game_data["players"]
    )
    return GameState(
        players=players,
        neutral_edges=frozenset(Edge.from_key(k) for k in game_data["neutral_edges"]),
        current_player_index=game_data["current_player_index"],
        winner=game_data["winner"],
        turn_number=game_data["turn_number"],
    )
