from __future__ import annotations

from typing import ClassVar, Protocol, runtime_checkable

from src.engine.models import (
    Action,
    Event,
    GameConfig,
    Phase,
    Player,
    PlayerId,
    TransitionResult,
)


@runtime_checkable
class GamePlugin(Protocol):
    """What the engine needs from a strictly alternating two-seat game.

    The plugin owns ``game_data``, a JSON-safe dict the engine passes back
    unchanged on the next call. Turn order is carried by the phase: its
    ``expected_actions`` name the one player who may act, and every
    accepted action returns the phase for the next player.
    """

    game_id: ClassVar[str]
    display_name: ClassVar[str]
    min_players: ClassVar[int]
    max_players: ClassVar[int]
    description: ClassVar[str]

    def create_initial_state(
        self,
        players: list[Player],
        config: GameConfig,
    ) -> tuple[dict, Phase, list[Event]]:
        """Seat ``players`` and return the opening data, phase and events."""
        ...

    def validate_config(self, options: dict) -> list[str]:
        """Problems with the table options; an empty list accepts them."""
        ...

    def get_valid_actions(
        self,
        game_data: dict,
        phase: Phase,
        player_id: PlayerId,
    ) -> list[dict]:
        """Every action ``player_id`` may submit now.

        A player who is not on move gets an empty list.
        """
        ...

    def validate_action(
        self,
        game_data: dict,
        phase: Phase,
        action: Action,
    ) -> str | None:
        ...

    def apply_action(
        self,
        game_data: dict,
        phase: Phase,
        action: Action,
        players: list[Player],
    ) -> TransitionResult:
        """Apply an action that ``validate_action`` accepted.

        The result holds fresh ``game_data``; the argument is left as it was.
        A finished game comes back with ``game_over`` set.
        """
        ...

    def get_player_view(
        self,
        game_data: dict,
        phase: Phase,
        player_id: PlayerId | None,
        players: list[Player],
    ) -> dict:
        ...
