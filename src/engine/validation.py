"""Smoke checks run against a game plugin before it is registered.

The checks seat ``min_players`` placeholder players, build the opening
position twice and make sure the player on move is offered actions the
plugin itself will accept. No action is ever applied.
"""

from __future__ import annotations

from src.engine.models import Action, GameConfig, Phase, Player, PlayerId
from src.engine.protocol import GamePlugin

REQUIRED_ATTRIBUTES = ("game_id", "display_name", "min_players", "max_players")


def _seat_players(count: int) -> list[Player]:
    return [
        Player(player_id=PlayerId(f"seat-{i}"), display_name=f"Seat {i}", seat_index=i)
        for i in range(count)
    ]


def _check_turn_offers(
    plugin: GamePlugin,
    game_data: dict,
    phase: Phase,
    players: list[Player],
) -> list[str]:
    on_move = {ea.player_id for ea in phase.expected_actions}
    problems: list[str] = []

    for p in players:
        offered = plugin.get_valid_actions(game_data, phase, p.player_id)
        if p.player_id not in on_move:
            if offered:
                problems.append(f"{p.player_id} is offered actions out of turn")
            continue
        if not offered:
            problems.append(f"{p.player_id} is on move but has no valid actions")
            continue
        # The offer and the check must agree; one sample is enough.
        sample = offered[0]
        action = Action(action_type=sample["action_type"], player_id=p.player_id, payload=sample)
        error = plugin.validate_action(game_data, phase, action)
        if error is not None:
            problems.append(f"Offered action {sample} is refused: {error}")

    return problems


def validate_plugin(plugin: GamePlugin) -> list[str]:
    """Return every problem found with ``plugin``; an empty list means usable."""
    missing = [attr for attr in REQUIRED_ATTRIBUTES if not hasattr(plugin, attr)]
    if missing:
        return [f"Missing attribute: {attr}" for attr in missing]

    if not isinstance(plugin, GamePlugin):
        return ["Plugin does not implement the GamePlugin protocol"]

    players = _seat_players(plugin.min_players)
    config = GameConfig(random_seed=0)
    problems: list[str] = []
    try:
        problems.extend(plugin.validate_config(config.options))

        game_data, phase, _ = plugin.create_initial_state(players, config)
        if not isinstance(game_data, dict):
            return problems + ["Opening game_data is not a dict"]
        if not isinstance(phase, Phase):
            return problems + ["Opening phase is not a Phase"]
        if not phase.expected_actions:
            return problems + [f"Opening phase {phase.name!r} waits on nobody"]

        problems.extend(_check_turn_offers(plugin, game_data, phase, players))

        for p in players:
            plugin.get_player_view(game_data, phase, p.player_id, players)

        replay, _, _ = plugin.create_initial_state(players, config)
        if replay != game_data:
            problems.append("create_initial_state is not deterministic")
    except Exception as e:
        problems.append(f"Plugin raised during validation: {e!r}")

    return problems
