"""Undo/redo timeline built on immutable game states."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from src.games.matchsticks.state import GameState


class GameHistory(BaseModel):
    model_config = ConfigDict(frozen=True)

    states: tuple[GameState, ...]
    cursor: int = 0

    @classmethod
    def start(cls, state: GameState) -> GameHistory:
        return cls(states=(state,), cursor=0)

    @property
    def current(self) -> GameState:
        return self.states[self.cursor]

    @property
    def can_undo(self) -> bool:
        return self.cursor > 0

    @property
    def can_redo(self) -> bool:
        return self.cursor < len(self.states) - 1

    def record(self, state: GameState) -> GameHistory:
        """Append ``state`` after the cursor, discarding any redo tail.

        Recording the current state again (a refused move) is a no-op.
        """
        if state == self.current:
            return self
        kept = self.states[: self.cursor + 1]
        return GameHistory(states=kept + (state,), cursor=self.cursor + 1)

    def undo(self) -> GameHistory:
        if not self.can_undo:
            raise IndexError("Nothing to undo")
        return self.model_copy(update={"cursor": self.cursor - 1})

    def redo(self) -> GameHistory:
        if not self.can_redo:
            raise IndexError("Nothing to redo")
        return self.model_copy(update={"cursor": self.cursor + 1})
