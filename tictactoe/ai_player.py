"""
AI player for Noughts & Crosses.
Three difficulty tiers, from random moves up to a full Minimax search.
"""

import logging
import random
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from .board import CENTER, CORNERS, NUM_CELLS, Board, Mark, empty_cells
from .game_state import GameState
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

_win_checker = WinChecker()


class Difficulty(Enum):
    """How hard the computer opponent plays."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: Union["Difficulty", str]) -> "Difficulty":
        """
        Accept a Difficulty or its name in any case ("hard", "Hard", ...).

        Raises:
            ValueError: For anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        choices = ", ".join(d.value for d in cls)
        raise ValueError(f"Unknown difficulty {value!r} (expected one of: {choices})")


class _Minimax:
    """
    Exhaustive Minimax from one decision point.

    Scores are from the AI's point of view: a win is 10 - depth, a loss
    depth - 10, a draw 0. depth counts plies after the candidate move,
    so quicker wins and slower losses score better.
    """

    def __init__(self, ai: Mark):
        self.ai = ai
        self.opponent = ai.opposite()
        # Number of positions scored, for debugging
        self.positions_evaluated = 0

    def score(self, board: Board, is_maximizing: bool, depth: int) -> int:
        self.positions_evaluated += 1

        winner = _win_checker.check_winner(board)
        if winner is self.ai:
            return 10 - depth
        if winner is self.opponent:
            return depth - 10

        moves = empty_cells(board)
        if not moves:
            return 0  # Draw

        player = self.ai if is_maximizing else self.opponent
        scores = []
        for index in moves:
            board[index] = player
            scores.append(self.score(board, not is_maximizing, depth + 1))
            board[index] = Mark.EMPTY

        return max(scores) if is_maximizing else min(scores)


def _random_move(board: Board, rng: random.Random) -> int:
    return rng.choice(empty_cells(board))


def _completes_line(board: Board, index: int, mark: Mark) -> bool:
    board[index] = mark
    try:
        return _win_checker.check_winner(board) is mark
    finally:
        board[index] = Mark.EMPTY


def _medium_move(board: Board, ai: Mark, rng: random.Random) -> int:
    """
    Win if we can, block if we must, else centre, a corner, anything.
    """
    moves = empty_cells(board)

    for index in moves:
        if _completes_line(board, index, ai):
            return index

    opponent = ai.opposite()
    for index in moves:
        if _completes_line(board, index, opponent):
            return index

    if board[CENTER] is Mark.EMPTY:
        return CENTER

    free_corners = [i for i in CORNERS if board[i] is Mark.EMPTY]
    if free_corners:
        return rng.choice(free_corners)

    return rng.choice(moves)


def _minimax_move(board: Board, ai: Mark, rng: random.Random) -> Tuple[int, int]:
    search = _Minimax(ai)
    best_score: Optional[int] = None
    best_moves: List[int] = []

    for index in empty_cells(board):
        board[index] = ai
        score = search.score(board, is_maximizing=False, depth=0)
        board[index] = Mark.EMPTY

        if best_score is None or score > best_score:
            best_score = score
            best_moves = [index]
        elif score == best_score:
            best_moves.append(index)

    # Pick among the equally good moves
    move = rng.choice(best_moves)
    logger.debug(
        "Minimax evaluated %d positions. Best moves: %s (score: %s), chose %d",
        search.positions_evaluated, best_moves, best_score, move,
    )
    return move, search.positions_evaluated


def _choose(
    board: Sequence[Mark],
    mark: Mark,
    difficulty: Union[Difficulty, str],
    rng: Optional[random.Random],
) -> Tuple[int, int]:
    difficulty = Difficulty.parse(difficulty)
    if mark not in (Mark.X, Mark.O):
        raise ValueError(f"AI must play X or O, not {mark!r}")
    if len(board) != NUM_CELLS:
        raise ValueError(f"Board must have {NUM_CELLS} cells, got {len(board)}")

    # Work on a private copy; the caller's board is never touched
    work = list(board)
    if not empty_cells(work) or _win_checker.check_winner(work) is not None:
        raise ValueError("No legal moves: the game is already over")

    if rng is None:
        rng = random.Random()

    if difficulty is Difficulty.EASY:
        return _random_move(work, rng), 0
    if difficulty is Difficulty.MEDIUM:
        return _medium_move(work, mark, rng), 0
    return _minimax_move(work, mark, rng)


def select_move(
    board: Sequence[Mark],
    mark: Mark,
    difficulty: Union[Difficulty, str],
    rng: Optional[random.Random] = None,
) -> int:
    """
    Pick a cell for mark to play.

    Args:
        board: The 9 cells. Not modified.
        mark: The side the AI plays (X or O).
        difficulty: Which policy to use.
        rng: Randomness for tie-breaks and random picks. Pass a seeded
            random.Random for repeatable choices.

    Returns:
        An index of an empty cell.

    Raises:
        ValueError: If the board is already won or full, or the
            arguments are malformed.
    """
    return _choose(board, mark, difficulty, rng)[0]


class AIPlayer:
    """
    A computer opponent bound to one difficulty and one source of randomness.

    HARD always plays optimally - it wins whenever it can force a win,
    and never loses (at worst, draw).
    """

    def __init__(
        self,
        difficulty: Union[Difficulty, str] = Difficulty.HARD,
        rng: Optional[random.Random] = None,
        player: Optional[Mark] = None,
    ):
        """
        Initialize the AI player.

        Args:
            difficulty: Starting difficulty, can be changed later.
            rng: Randomness source (default: a fresh random.Random).
            player: Which mark the AI controls. None means "whoever is to move".
        """
        self.difficulty = Difficulty.parse(difficulty)
        self.rng = rng if rng is not None else random.Random()
        self.player = player

        # How many positions the last HARD search scored (for debugging)
        self.positions_evaluated = 0

    def choose_move(self, board: Sequence[Mark], mark: Mark) -> int:
        """Pick a move for mark on board at the current difficulty."""
        move, self.positions_evaluated = _choose(board, mark, self.difficulty, self.rng)
        return move

    def suggest_move(self, game_state: GameState) -> Optional[int]:
        """
        Get a move suggestion for the current position.

        Returns:
            A cell index, or None if the game is over.
        """
        if game_state.is_game_over:
            return None
        mark = self.player or game_state.current_player
        return self.choose_move(game_state.snapshot(), mark)

    def play(self, game_state: GameState) -> bool:
        """
        Choose a move and play it through the normal move path.

        Returns:
            True if a move was played, False if the game is over, it is
            not this player's turn, or the chosen cell is no longer legal.
        """
        if game_state.is_game_over:
            return False

        mark = self.player or game_state.current_player
        if mark is not game_state.current_player:
            logger.warning("It's not %s's turn!", mark)
            return False

        move = self.choose_move(game_state.snapshot(), mark)

        # The snapshot may be stale by the time we get here
        if not game_state.is_legal_move(move):
            logger.warning("AI chose %d but it is no longer legal", move)
            return False

        logger.debug("AI (%s, %s) plays %d", mark, self.difficulty.value, move)
        return game_state.make_move(move)
