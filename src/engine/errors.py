from __future__ import annotations

from src.engine.models import Action, GameResult, PlayerId


class GameEngineError(Exception):
    """Base class for engine errors."""
    pass


class InvalidActionError(GameEngineError):
    """The plugin refused the action; ``message`` is its reason."""

    def __init__(self, message: str, action: Action | None = None):
        self.message = message
        self.action = action
        super().__init__(message)


class GameOverError(GameEngineError):
    """An action arrived after a player had already won."""

    def __init__(self, result: GameResult):
        self.result = result
        winners = ", ".join(result.winners) or "nobody"
        super().__init__(f"Game is over ({result.reason}), won by {winners}")


class NotYourTurnError(GameEngineError):
    def __init__(self, player_id: PlayerId, expected: PlayerId | None):
        self.player_id = player_id
        self.expected = expected
        super().__init__(f"It is not {player_id}'s turn (expected {expected})")


class PluginError(GameEngineError):
    """A built-in plugin failed the checks run before registration."""

    def __init__(self, game_id: str, problems: list[str]):
        self.game_id = game_id
        self.problems = problems
        super().__init__(f"Plugin {game_id} is invalid: {'; '.join(problems)}")
