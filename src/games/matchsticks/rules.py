"""Matchsticks rules engine.

Each move type has a legal-target query and a transition. Both are pure:
they take a ``GameState`` and return sets or a new ``GameState``. The
command entry point, ``apply_move``, refuses anything that is not among
the legal targets and runs the win check after every accepted move.

Turn policy:
  * an accepted move advances ``current_player_index`` unless it wins;
    the winner keeps the turn pointer and the game is terminal.
  * a refused move leaves the state untouched, or only passes the turn
    when ``advance_turn_on_refusal`` is set.
"""

from __future__ import annotations

import logging
from enum import Enum

from src.config import settings
from src.games.matchsticks.grid import far_endpoint, protruding_edges
from src.games.matchsticks.hexagons import find_closed_hexagons
from src.games.matchsticks.state import GameState, PlayerState
from src.games.matchsticks.traversal import accessible_vertices_from
from src.games.matchsticks.types import Edge, Vertex, sorted_keys

logger = logging.getLogger(__name__)

Target = Vertex | Edge


class MoveType(str, Enum):
    EXPAND = "expand"
    MOVE = "move"
    RESUPPLY = "resupply"
    ASSAULT = "assault"


# Moves whose target is a vertex; all others target an edge
VERTEX_TARGET_MOVES = frozenset({MoveType.MOVE})


# ── Legal-target queries ──


def expand_targets(state: GameState, player_index: int) -> frozenset[Edge]:
    player = state.players[player_index]
    if player.matchsticks <= 0:
        return frozenset()
    claimed = state.players[0].owned_edges | state.players[1].owned_edges
    return protruding_edges(player.position) - claimed - state.neutral_edges


def move_targets(state: GameState, player_index: int) -> frozenset[Vertex]:
    player = state.players[player_index]
    opponent = state.players[1 - player_index]
    return frozenset(
        accessible_vertices_from(player.position, player.owned_edges, opponent.position)
    )


def resupply_targets(state: GameState, player_index: int) -> frozenset[Edge]:
    return state.players[player_index].owned_edges


def assault_targets(state: GameState, player_index: int) -> frozenset[Edge]:
    player = state.players[player_index]
    opponent = state.players[1 - player_index]
    if player.matchsticks <= 0:
        return frozenset()
    raidable = opponent.owned_edges | state.neutral_edges
    return (
        (protruding_edges(player.position) & raidable)
        - protruding_edges(opponent.position)
    )


def legal_targets(
    state: GameState,
    move_type: MoveType,
    player_index: int | None = None,
) -> frozenset[Target]:
    """Return the legal targets of ``move_type`` for a player.

    ``player_index`` defaults to the player whose turn it is. A finished
    game has no legal targets.
    """
    if state.is_over:
        return frozenset()
    if player_index is None:
        player_index = state.current_player_index

    match MoveType(move_type):
        case MoveType.EXPAND:
            return expand_targets(state, player_index)
        case MoveType.MOVE:
            return move_targets(state, player_index)
        case MoveType.RESUPPLY:
            return resupply_targets(state, player_index)
        case MoveType.ASSAULT:
            return assault_targets(state, player_index)


def all_legal_moves(state: GameState) -> list[tuple[MoveType, Target]]:
    """Every legal (move, target) pair for the current player, in a stable order."""
    moves: list[tuple[MoveType, Target]] = []
    for move_type in MoveType:
        targets = legal_targets(state, move_type)
        for key in sorted_keys(targets):
            target = Vertex.from_key(key) if move_type in VERTEX_TARGET_MOVES else Edge.from_key(key)
            moves.append((move_type, target))
    return moves


# ── Transitions ──


def _expand(state: GameState, edge: Edge) -> GameState:
    idx = state.current_player_index
    player = state.current_player
    return state.with_player(idx, player.model_copy(update={
        "owned_edges": player.owned_edges | {edge},
        "matchsticks": player.matchsticks - 1,
    }))


def _move(state: GameState, target: Vertex) -> GameState:
    idx = state.current_player_index
    return state.with_player(idx, state.current_player.model_copy(update={"position": target}))


def _resupply(state: GameState, edge: Edge) -> GameState:
    idx = state.current_player_index
    player = state.current_player
    return state.with_player(idx, player.model_copy(update={
        "owned_edges": player.owned_edges - {edge},
        "matchsticks": player.matchsticks + 1,
    }))


def _assault(state: GameState, edge: Edge) -> GameState:
    idx = state.current_player_index
    player = state.current_player
    opponent = state.opponent

    if edge in opponent.owned_edges:
        state = state.with_player(1 - idx, opponent.model_copy(update={
            "owned_edges": opponent.owned_edges - {edge},
            "matchsticks": opponent.matchsticks + 1,
        }))
    else:
        state = state.model_copy(update={"neutral_edges": state.neutral_edges - {edge}})

    return state.with_player(idx, player.model_copy(update={
        "owned_edges": player.owned_edges | {edge},
        "matchsticks": player.matchsticks - 1,
        "position": far_endpoint(edge, player.position),
    }))


def _transition(state: GameState, move_type: MoveType, target: Target) -> GameState:
    match move_type:
        case MoveType.EXPAND:
            return _expand(state, target)
        case MoveType.MOVE:
            return _move(state, target)
        case MoveType.RESUPPLY:
            return _resupply(state, target)
        case MoveType.ASSAULT:
            return _assault(state, target)


# ── Command interface ──


def validate_move(state: GameState, move_type: MoveType, target: Target) -> str | None:
    """Return why the current player may not make this move, or None."""
    if state.is_over:
        return "Game is over"

    try:
        move_type = MoveType(move_type)
    except ValueError:
        return f"Unknown move type: {move_type!r}"

    expected = Vertex if move_type in VERTEX_TARGET_MOVES else Edge
    if not isinstance(target, expected):
        return f"{move_type.value} targets a {expected.__name__.lower()}, got {target!r}"

    if move_type in (MoveType.EXPAND, MoveType.ASSAULT) and state.current_player.matchsticks <= 0:
        return "No matchsticks remaining"

    if target not in legal_targets(state, move_type):
        return f"{target!r} is not a legal {move_type.value} target"

    return None


def apply_move(
    state: GameState,
    move_type: MoveType,
    target: Target,
    *,
    advance_turn_on_refusal: bool | None = None,
) -> GameState:
    """Validate and apply one move, returning the next state."""
    error = validate_move(state, move_type, target)
    if error is not None:
        if advance_turn_on_refusal is None:
            advance_turn_on_refusal = settings.advance_turn_on_refusal
        logger.debug(f"Refused {move_type} {target!r} for player {state.current_player_index}: {error}")
        if advance_turn_on_refusal and not state.is_over:
            return _pass_turn(state)
        return state

    move_type = MoveType(move_type)
    next_state = _transition(state, move_type, target)
    next_state = next_state.model_copy(update={"turn_number": state.turn_number + 1})

    winner = detect_winner(next_state)
    if winner is not None:
        logger.info(
            f"Player {winner} closed a hexagon on turn {next_state.turn_number}"
        )
        return next_state.model_copy(update={"winner": winner})

    return _pass_turn(next_state)


def _pass_turn(state: GameState) -> GameState:
    return state.model_copy(update={"current_player_index": 1 - state.current_player_index})


# ── Win interface ──


def closed_hexagons(player: PlayerState) -> set[frozenset[Edge]]:
    return find_closed_hexagons(player.owned_edges)


def detect_winner(state: GameState) -> int | None:
    """Index of a player holding a closed hexagon; the mover is checked first."""
    first = state.current_player_index
    for idx in (first, 1 - first):
        if closed_hexagons(state.players[idx]):
            return idx
    return None


def winner_of(state: GameState) -> PlayerState | None:
    if state.winner is None:
        return None
    return state.players[state.winner]
