"""Hot-seat terminal front end for Matchsticks.

Usage::

    python -m src.cli --names Alice Bob

    # Shorter game, and pass the turn whenever a move is refused
    MATCHSTICKS_ADVANCE_TURN_ON_REFUSAL=1 python -m src.cli --matchsticks 8

Commands at the prompt::

    expand 0,0:W      claim an edge next to your marker
    move 1,-1         walk your marker along your own edges
    resupply 0,0:W    pick one of your edges back up
    assault 0,0:S     raid a neutral or opponent edge next to your marker
    undo | redo | quit
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import TextIO

from src.config import settings
from src.games.matchsticks.history import GameHistory
from src.games.matchsticks.rules import (
    VERTEX_TARGET_MOVES,
    MoveType,
    Target,
    apply_move,
    legal_targets,
    winner_of,
)
from src.games.matchsticks.state import GameState, create_initial_state
from src.games.matchsticks.types import Edge, Vertex, sorted_keys

logger = logging.getLogger(__name__)

CONTROL_COMMANDS = ("undo", "redo", "quit")


@dataclass(frozen=True)
class Command:
    name: str
    move_type: MoveType | None = None
    target: Target | None = None


def parse_command(line: str) -> Command:
    """Parse one prompt line. Raises ValueError on anything unrecognised."""
    parts = line.split()
    if not parts:
        raise ValueError("Empty command")

    name = parts[0].lower()
    if name in CONTROL_COMMANDS:
        if len(parts) != 1:
            raise ValueError(f"'{name}' takes no arguments")
        return Command(name=name)

    try:
        move_type = MoveType(name)
    except ValueError:
        raise ValueError(f"Unknown command: {parts[0]}") from None
    if len(parts) != 2:
        raise ValueError(f"Usage: {move_type.value} <target>")

    if move_type in VERTEX_TARGET_MOVES:
        target: Target = Vertex.from_key(parts[1])
    else:
        target = Edge.from_key(parts[1])
    return Command(name=move_type.value, move_type=move_type, target=target)


def describe(state: GameState) -> str:
    """Multi-line summary of the position from the mover's point of view."""
    lines = []
    for idx, player in enumerate(state.players):
        marker = "*" if idx == state.current_player_index else " "
        label = player.name or f"Player {idx + 1}"
        lines.append(
            f"{marker} {label} ({player.colour}) at {player.position.to_key()}, "
            f"{player.matchsticks} matchsticks, edges: {' '.join(sorted_keys(player.owned_edges)) or '-'}"
        )
    lines.append(f"  neutral: {' '.join(sorted_keys(state.neutral_edges)) or '-'}")
    if not state.is_over:
        for move_type in MoveType:
            targets = sorted_keys(legal_targets(state, move_type))
            lines.append(f"  {move_type.value:<9} {' '.join(targets) or '-'}")
    return "\n".join(lines)


def run(
    history: GameHistory,
    stdin: TextIO,
    stdout: TextIO,
) -> GameHistory:
    """Read commands until the game ends, input runs out, or the user quits."""
    print(describe(history.current), file=stdout)

    while not history.current.is_over:
        print(f"turn {history.current.turn_number}> ", end="", file=stdout)
        line = stdin.readline()
        if not line:
            break

        try:
            command = parse_command(line)
        except ValueError as e:
            print(f"error: {e}", file=stdout)
            continue

        if command.name == "quit":
            break
        if command.name in ("undo", "redo"):
            try:
                history = history.undo() if command.name == "undo" else history.redo()
            except IndexError as e:
                print(f"error: {e}", file=stdout)
                continue
        else:
            before = history.current
            after = apply_move(before, command.move_type, command.target)
            if after.turn_number == before.turn_number:
                print(f"refused: {command.name} {command.target.to_key()}", file=stdout)
            history = history.record(after)

        print(describe(history.current), file=stdout)

    winner = winner_of(history.current)
    if winner is not None:
        print(f"{winner.name or winner.colour} wins!", file=stdout)
    return history


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play Matchsticks in the terminal")
    parser.add_argument("--names", nargs=2, default=["", ""], metavar=("P1", "P2"))
    parser.add_argument(
        "--matchsticks",
        type=int,
        default=settings.starting_matchsticks,
        help="Matchsticks each player starts with",
    )
    args = parser.parse_args(argv)

    if args.matchsticks < 1:
        parser.error("--matchsticks must be at least 1")

    logging.basicConfig(level=settings.log_level)
    logger.info(f"Starting hot-seat game with {args.matchsticks} matchsticks each")

    state = create_initial_state(
        names=tuple(args.names),
        starting_matchsticks=args.matchsticks,
    )
    run(GameHistory.start(state), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
