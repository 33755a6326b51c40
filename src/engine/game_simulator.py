"""Synchronous game driver: validates and applies actions one at a time.

Plays complete games through the plugin interface with no transport in
between, which is how the engine tests drive a plugin. Actions are
serialized by the caller; each call is all-or-nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.engine.errors import GameOverError, InvalidActionError, NotYourTurnError
from src.engine.models import Action, Event, GameConfig, GameResult, Phase, Player
from src.engine.protocol import GamePlugin

logger = logging.getLogger(__name__)


@dataclass
class SimulationState:
    """Game state for synchronous play."""

    game_data: dict
    phase: Phase
    players: list[Player]
    scores: dict[str, float] = field(default_factory=dict)
    game_over: GameResult | None = None
    events: list[Event] = field(default_factory=list)


def start_game(
    plugin: GamePlugin,
    players: list[Player],
    config: GameConfig | None = None,
) -> SimulationState:
    """Create the initial simulation state for ``plugin``."""
    config = config or GameConfig()
    errors = plugin.validate_config(config.options)
    if errors:
        raise ValueError(f"Invalid game config: {'; '.join(errors)}")

    game_data, phase, events = plugin.create_initial_state(players, config)
    return SimulationState(
        game_data=game_data,
        phase=phase,
        players=players,
        scores={p.player_id: 0.0 for p in players},
        events=list(events),
    )


def apply_action(
    plugin: GamePlugin,
    state: SimulationState,
    action: Action,
) -> list[Event]:
    """Validate ``action`` and apply it, mutating *state* in place.

    Raises the engine errors instead of silently ignoring a bad action;
    *state* is untouched when an error is raised. Returns the new events.
    """
    if state.game_over is not None:
        raise GameOverError(state.game_over)

    expected = {ea.player_id for ea in state.phase.expected_actions}
    if expected and action.player_id not in expected:
        raise NotYourTurnError(action.player_id, next(iter(expected)))

    error = plugin.validate_action(state.game_data, state.phase, action)
    if error is not None:
        logger.debug(f"Rejected {action.action_type} from {action.player_id}: {error}")
        raise InvalidActionError(error, action)

    result = plugin.apply_action(
        state.game_data, state.phase, action, state.players
    )
    state.game_data = result.game_data
    state.phase = result.next_phase
    state.scores = result.scores or state.scores
    state.game_over = result.game_over
    state.events.extend(result.events)
    return result.events


def acting_player(state: SimulationState) -> Player | None:
    """The player the current phase is waiting on, if any."""
    if state.game_over is not None or not state.phase.expected_actions:
        return None
    pid = state.phase.expected_actions[0].player_id
    return next((p for p in state.players if p.player_id == pid), None)
