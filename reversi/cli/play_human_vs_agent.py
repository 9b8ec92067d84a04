"""CLI for playing Othello against the minimax opponent."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

import tyro

from reversi.config import AppConfig, load_config
from reversi.envs.base import BoardView, SessionPhase
from reversi.envs.othello.utils import DRAW, OTHELLO_SIZE, PLAYER_A, PLAYER_B
from reversi.games import GameSession
from reversi.search import MinimaxPolicy

SYMBOLS = {0: ".", PLAYER_A: "X", PLAYER_B: "O"}
HELP = "Enter 'x y' to place a stone, 'u' to undo, 'n' for a new game, 'q' to quit."


@dataclass(frozen=True)
class Command:
    kind: str  # "move", "undo", "new" or "quit"
    x: int = -1
    y: int = -1


def parse_command(text: str) -> Optional[Command]:
    """Parse one line of user input; None when it makes no sense."""
    tokens = text.replace(",", " ").split()
    if not tokens:
        return None

    keyword = tokens[0].lower()
    if len(tokens) == 1:
        if keyword in ("u", "undo"):
            return Command("undo")
        if keyword in ("n", "new"):
            return Command("new")
        if keyword in ("q", "quit", "exit"):
            return Command("quit")
        return None

    if len(tokens) != 2:
        return None
    try:
        x, y = int(tokens[0]), int(tokens[1])
    except ValueError:
        return None
    if not (0 <= x < OTHELLO_SIZE and 0 <= y < OTHELLO_SIZE):
        return None
    return Command("move", x, y)


def render_view(view: BoardView, human_player: int, show_hints: bool = True) -> str:
    """Draw the board, hints, last computer move and scoreboard as text."""
    hints = set(view.legal_moves) if show_hints else set()
    lines = ["   " + "".join(f" {x} " for x in range(OTHELLO_SIZE))]

    for y in range(OTHELLO_SIZE):
        cells = []
        for x in range(OTHELLO_SIZE):
            symbol = SYMBOLS[int(view.grid[y, x])]
            if (x, y) in hints:
                symbol = "*"
            if view.last_computer_move == (x, y):
                cells.append(f"[{symbol}]")
            else:
                cells.append(f" {symbol} ")
        lines.append(f"{y}  " + "".join(cells))

    computer_player = -human_player
    lines.append(
        f"You ({SYMBOLS[human_player]}): {view.scores[human_player]}   "
        f"Computer ({SYMBOLS[computer_player]}): {view.scores[computer_player]}"
    )
    if view.done:
        lines.append(result_message(view.winner, human_player))
    else:
        mover = "Your" if view.current_player == human_player else "Computer's"
        lines.append(f"{mover} turn ({SYMBOLS[view.current_player]})")
    return "\n".join(lines)


def result_message(winner: Optional[int], human_player: int) -> str:
    if winner == DRAW:
        return "Game over! Draw!"
    if winner == human_player:
        return "Game over! You win!"
    return "Game over! Computer wins!"


def play_human_vs_agent(
    config: Optional[str] = None,
    human_first: bool = True,
    depth: Optional[int] = None,
    hints: bool = True,
    delay: Optional[float] = None,
):
    """
    Play a game of Othello against the minimax computer opponent.

    Args:
        config: Path to a YAML config file (defaults are used when omitted)
        human_first: Whether the human plays first (X); --no-human-first wins over the config
        depth: Search depth of the computer; overrides the config
        hints: Whether to mark legal moves with '*'; --no-hints wins over the config
        delay: Pause in seconds before the computer replies; overrides the config
    """
    cfg = load_config(config) if config else AppConfig()
    cfg.play.human_first = cfg.play.human_first and human_first
    if depth is not None:
        cfg.search.depth = depth
    cfg.play.show_hints = cfg.play.show_hints and hints
    if delay is not None:
        cfg.play.computer_delay = delay

    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    session = GameSession(MinimaxPolicy(config=cfg.search.to_minimax()))
    session.start_game(computer_first=not cfg.play.human_first)

    print("=" * 50)
    print("Othello - Human vs Computer")
    print("=" * 50)
    print(f"Search depth: {cfg.search.depth}")
    print(f"Human plays: {'first (X)' if cfg.play.human_first else 'second (O)'}")
    print(HELP)
    print("=" * 50)
    print()

    while True:
        print(render_view(session.view(), session.human_player, cfg.play.show_hints))
        print()

        if session.phase is SessionPhase.AWAITING_COMPUTER_MOVE:
            print("Computer is thinking...")
            time.sleep(cfg.play.computer_delay)
            move = session.request_computer_move()
            if move is None:
                print("Computer passes.")
            else:
                print(f"Computer plays {move[0]} {move[1]}")
            continue

        try:
            line = input("> ")
        except EOFError:
            break

        command = parse_command(line)
        if command is None:
            print(HELP)
            continue

        if command.kind == "quit":
            break
        if command.kind == "new":
            session.start_game(computer_first=not cfg.play.human_first)
            continue
        if command.kind == "undo":
            print("Undo successful." if session.undo() else "Cannot undo.")
            continue

        if session.done:
            print("The game is over. Press 'n' for a new game or 'u' to undo.")
        elif not session.submit_human_move(command.x, command.y):
            print(f"Illegal move! Legal moves: {session.legal_moves()}")


def main() -> None:
    tyro.cli(play_human_vs_agent)


if __name__ == "__main__":
    main()
