"""MatchsticksPlugin: implements the GamePlugin protocol for Matchsticks."""

from __future__ import annotations

import logging
from typing import ClassVar

from src.engine.models import (
    Action,
    ConcurrentMode,
    Event,
    ExpectedAction,
    GameConfig,
    GameResult,
    Phase,
    Player,
    PlayerId,
    TransitionResult,
)
from src.games.matchsticks.rules import (
    VERTEX_TARGET_MOVES,
    MoveType,
    Target,
    all_legal_moves,
    apply_move,
    closed_hexagons,
    validate_move,
)
from src.games.matchsticks.state import (
    GameState,
    create_initial_state,
    state_from_game_data,
    state_to_game_data,
)
from src.games.matchsticks.types import Edge, Vertex, sorted_keys

logger = logging.getLogger(__name__)

PLAY_PHASE = "play"

MOVE_EVENTS: dict[MoveType, str] = {
    MoveType.EXPAND: "edge_expanded",
    MoveType.MOVE: "marker_moved",
    MoveType.RESUPPLY: "edge_resupplied",
    MoveType.ASSAULT: "edge_assaulted",
}


def _make_play_phase(players: list[Player], player_index: int) -> Phase:
    player_id = players[player_index].player_id
    return Phase(
        name=PLAY_PHASE,
        concurrent_mode=ConcurrentMode.SEQUENTIAL,
        expected_actions=[
            ExpectedAction(player_id=player_id, action_type=move.value)
            for move in MoveType
        ],
        auto_resolve=False,
        metadata={"player_index": player_index},
    )


def _parse_target(move_type: MoveType, key: str) -> Target:
    if move_type in VERTEX_TARGET_MOVES:
        return Vertex.from_key(key)
    return Edge.from_key(key)


def _scores(state: GameState, players: list[Player]) -> dict[str, float]:
    return {
        p.player_id: float(len(closed_hexagons(state.players[i])))
        for i, p in enumerate(players)
    }


class MatchsticksPlugin:
    """Matchsticks: claim edges of a triangular grid, enclose a hexagon to win."""

    game_id: ClassVar[str] = "matchsticks"
    display_name: ClassVar[str] = "Matchsticks"
    min_players: ClassVar[int] = 2
    max_players: ClassVar[int] = 2
    description: ClassVar[str] = (
        "Lay matchsticks on a triangular grid, walk your marker along them, "
        "raid your opponent and be first to enclose a hexagon."
    )
    config_schema: ClassVar[dict] = {
        "type": "object",
        "properties": {
            "starting_matchsticks": {"type": "integer", "minimum": 1},
        },
    }

    # ── Lifecycle ──

    def create_initial_state(
        self,
        players: list[Player],
        config: GameConfig,
    ) -> tuple[dict, Phase, list[Event]]:
        state = create_initial_state(
            names=(players[0].display_name, players[1].display_name),
            starting_matchsticks=config.options.get("starting_matchsticks"),
        )
        events = [
            Event(event_type="game_started", payload={
                "players": [p.player_id for p in players],
                "matchsticks_per_player": state.players[0].matchsticks,
                "neutral_edges": sorted_keys(state.neutral_edges),
            }),
        ]
        return state_to_game_data(state), _make_play_phase(players, 0), events

    def validate_config(self, options: dict) -> list[str]:
        errors: list[str] = []
        count = options.get("starting_matchsticks")
        if count is not None and (not isinstance(count, int) or isinstance(count, bool) or count < 1):
            errors.append("starting_matchsticks must be a positive integer")
        unknown = set(options) - set(self.config_schema["properties"])
        if unknown:
            errors.append(f"Unknown options: {', '.join(sorted(unknown))}")
        return errors

    # ── Core game loop ──

    def get_valid_actions(
        self,
        game_data: dict,
        phase: Phase,
        player_id: PlayerId,
    ) -> list[dict]:
        if phase.name != PLAY_PHASE:
            return []
        if player_id != self._expected_player(phase):
            return []

        state = state_from_game_data(game_data)
        return [
            {"action_type": move_type.value, "target": target.to_key()}
            for move_type, target in all_legal_moves(state)
        ]

    def validate_action(
        self,
        game_data: dict,
        phase: Phase,
        action: Action,
    ) -> str | None:
        if phase.name != PLAY_PHASE:
            return f"No actions accepted in phase {phase.name}"
        if action.player_id != self._expected_player(phase):
            return "Not your turn"

        try:
            move_type = MoveType(action.action_type)
        except ValueError:
            return f"Unknown action type: {action.action_type}"

        key = action.payload.get("target")
        if not isinstance(key, str):
            return "Missing target in payload"
        try:
            target = _parse_target(move_type, key)
        except ValueError as e:
            return str(e)

        return validate_move(state_from_game_data(game_data), move_type, target)

    def apply_action(
        self,
        game_data: dict,
        phase: Phase,
        action: Action,
        players: list[Player],
    ) -> TransitionResult:
        if phase.name != PLAY_PHASE:
            raise ValueError(f"Unknown phase: {phase.name}")

        move_type = MoveType(action.action_type)
        target = _parse_target(move_type, action.payload["target"])
        state = state_from_game_data(game_data)
        next_state = apply_move(state, move_type, target)

        mover = state.current_player_index
        events = [
            Event(
                event_type=MOVE_EVENTS[move_type],
                player_id=action.player_id,
                payload={
                    "target": target.to_key(),
                    "position": next_state.players[mover].position.to_key(),
                    "matchsticks": next_state.players[mover].matchsticks,
                },
            ),
        ]
        scores = _scores(next_state, players)

        if next_state.winner is not None:
            return self._end_game(next_state, events, scores, players)

        return TransitionResult(
            game_data=state_to_game_data(next_state),
            events=events,
            next_phase=_make_play_phase(players, next_state.current_player_index),
            scores=scores,
            game_over=None,
        )

    # ── View filtering ──

    def get_player_view(
        self,
        game_data: dict,
        phase: Phase,
        player_id: PlayerId | None,
        players: list[Player],
    ) -> dict:
        # No hidden info
        return dict(game_data)

    # ── Private helpers ──

    @staticmethod
    def _expected_player(phase: Phase) -> PlayerId | None:
        return phase.expected_actions[0].player_id if phase.expected_actions else None

    def _end_game(
        self,
        state: GameState,
        events: list[Event],
        scores: dict[str, float],
        players: list[Player],
    ) -> TransitionResult:
        winner = players[state.winner]
        logger.info(f"Matchsticks game won by {winner.player_id} on turn {state.turn_number}")

        events.append(Event(
            event_type="game_ended",
            payload={
                "final_scores": scores,
                "winners": [winner.player_id],
            },
        ))

        return TransitionResult(
            game_data=state_to_game_data(state),
            events=events,
            next_phase=Phase(name="game_over", auto_resolve=False),
            scores=scores,
            game_over=GameResult(
                winners=[winner.player_id],
                final_scores=scores,
                reason="closed_hexagon",
            ),
        )
