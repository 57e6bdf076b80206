"""
Console front end for Noughts & Crosses.

Play against the computer (or a friend) in a terminal:

    tictactoe --difficulty hard
    tictactoe --ai-first --seed 7
    tictactoe --two-player
"""

import argparse
import logging
import random
import sys
from typing import Callable, List, Optional

from .ai_player import Difficulty
from .board import NUM_CELLS, Mark, format_board
from .config import GameConfig
from .logging_setup import setup_logging
from .match_stats import StatsRecorder
from .move_validator import MoveValidator
from .session import MatchSession

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  1-9        place your mark (cells are numbered left to right, top to bottom)
  u          undo
  h          hint
  r          new game
  d <level>  set difficulty (easy, medium, hard)
  s          show statistics
  q          quit"""


class ConsoleGame:
    """
    Text-mode game loop.

    Game flow:
    1. Human types a cell number
    2. AI replies (in vs-AI mode)
    3. Repeat until someone wins or it's a draw, then offer a new game
    """

    def __init__(
        self,
        session: MatchSession,
        recorder: StatsRecorder,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ):
        self.session = session
        self.recorder = recorder
        self.validator = MoveValidator()
        self._input = input_fn or input
        self._output = output_fn or print
        self.is_running = False

    def run(self) -> None:
        """Run until the player quits or input runs out."""
        self._output(HELP_TEXT)
        self._show_board()
        self.is_running = True

        while self.is_running:
            try:
                line = self._input(self._prompt())
            except EOFError:
                break
            self.handle_command(line)

        self._output("Goodbye!")

    def handle_command(self, line: str) -> None:
        """Handle one line of input."""
        parts = line.strip().lower().split()
        if not parts:
            return

        command = parts[0]

        if command.isdigit():
            self._place(int(command) - 1)
        elif command in ("q", "quit", "exit"):
            self.is_running = False
        elif command in ("u", "undo"):
            if self.session.undo():
                self._show_board()
            else:
                self._output("Nothing to undo.")
        elif command in ("h", "hint"):
            hint = self.session.suggest_move()
            if hint is None:
                self._output("The game is over.")
            else:
                self._output(f"Try cell {hint + 1}.")
        elif command in ("r", "reset", "new"):
            self.session.new_game()
            self._output("New game!")
            self._show_board()
        elif command in ("d", "difficulty"):
            self._set_difficulty(parts[1:])
        elif command in ("s", "stats"):
            self._show_stats()
        else:
            self._output(HELP_TEXT)

    def _place(self, index: int) -> None:
        if not 0 <= index < NUM_CELLS:
            self._output(f"Pick a cell from 1 to {NUM_CELLS}.")
            return

        state = self.session.state
        result = self.validator.validate_move(state, index)
        if not result.is_valid:
            self._output(result.error_message)
            return

        if not self.session.play_human(index):
            self._output("Wait for your turn!")
            return

        self._show_board()
        if state.is_game_over:
            self._show_game_result()

    def _set_difficulty(self, args: List[str]) -> None:
        if not args:
            self._output(f"Difficulty: {self.session.difficulty.value}")
            return
        try:
            self.session.set_difficulty(args[0])
        except ValueError as e:
            self._output(str(e))
            return
        self._output(f"Difficulty set to {self.session.difficulty.value}.")

    def _prompt(self) -> str:
        state = self.session.state
        if state.is_game_over:
            return "Game over - r for a new game, q to quit: "
        return f"{state.current_player} to move: "

    def _show_board(self) -> None:
        self._output("")
        self._output(format_board(self.session.state.board))
        self._output("")

    def _show_game_result(self) -> None:
        state = self.session.state
        winner = state.winner

        if winner is None:
            self._output("It's a draw! Good game!")
        elif not self.session.vs_ai:
            self._output(f"{winner} wins!")
        elif winner is self.session.human_player:
            self._output("Congratulations! You won!")
        else:
            self._output("The computer wins! Better luck next time!")

        if state.winning_line is not None:
            cells = ", ".join(str(i + 1) for i in state.winning_line)
            self._output(f"Winning line: {cells}")

    def _show_stats(self) -> None:
        s = self.recorder.stats
        self._output(
            f"Games: {s.games}  X wins: {s.x_wins}  O wins: {s.o_wins}  "
            f"Draws: {s.draws}  Avg moves: {s.avg_moves:.1f}"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Noughts & Crosses against the computer")
    parser.add_argument(
        "--difficulty",
        default=GameConfig.DEFAULT_DIFFICULTY,
        help="AI difficulty: easy, medium or hard (default: %(default)s)"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the computer play X and move first"
    )
    parser.add_argument(
        "--two-player",
        action="store_true",
        help="Two humans share the board, no AI"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=GameConfig.AI_SEED,
        help="Seed the AI's random choices for repeatable games"
    )
    parser.add_argument(
        "--no-undo",
        action="store_true",
        help="Disable undo"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: LOG_LEVEL or WARNING)"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        difficulty = Difficulty.parse(args.difficulty)
    except ValueError as e:
        parser.error(str(e))

    if args.ai_first:
        human_player = Mark.O
    else:
        human_player = Mark.O if GameConfig.HUMAN_PLAYER == "O" else Mark.X

    recorder = StatsRecorder()
    session = MatchSession(
        difficulty=difficulty,
        human_player=human_player,
        vs_ai=not args.two_player,
        sink=recorder,
        rng=random.Random(args.seed),
        undo_enabled=GameConfig.UNDO_ENABLED and not args.no_undo,
    )
    logger.debug("Starting session: human=%s difficulty=%s", human_player, difficulty.value)

    game = ConsoleGame(session, recorder)
    try:
        game.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
