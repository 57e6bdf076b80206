"""
Game state management for Noughts & Crosses.
Tracks the board, current player, outcome and an undo history.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .board import NUM_CELLS, Board, Mark, empty_board, empty_cells
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

_win_checker = WinChecker()


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    index: int              # Cell index (0-8)
    player: Mark            # Who made the move


@dataclass
class GameState:
    """
    The complete state of one match.

    Tracks:
    - The 9-cell board
    - Current player (X always opens)
    - Game status (ongoing, won, draw) and the winning line
    - Move history, newest last, for undo

    Only make_move, undo_move and reset change it. Rejected operations
    are silent no-ops reported through their return value.

    outcome is None while the game is in progress, the winning Mark once
    someone has won, and Mark.EMPTY for a draw.
    """

    board: Board = field(default_factory=empty_board)

    # Whose move is next, never EMPTY
    current_player: Mark = Mark.X

    # Game result
    is_game_over: bool = False
    outcome: Optional[Mark] = None
    winning_line: Optional[Tuple[int, int, int]] = None

    # Move history
    moves: List[Move] = field(default_factory=list)

    def is_legal_move(self, index: int) -> bool:
        """True if the current player may play at index."""
        if self.is_game_over:
            return False
        if not isinstance(index, int) or isinstance(index, bool):
            return False
        if not 0 <= index < NUM_CELLS:
            return False
        return self.board[index] is Mark.EMPTY

    def make_move(self, index: int) -> bool:
        """
        Place the current player's mark at index.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the move was made, False if it was illegal
            (nothing changes in that case).
        """
        if not self.is_legal_move(index):
            logger.debug("Rejected move at %r for %s", index, self.current_player)
            return False

        player = self.current_player
        self.board[index] = player
        self.moves.append(Move(index=index, player=player))

        _win_checker.update_game_state(self)

        # The side that ended the game keeps the turn
        if not self.is_game_over:
            self.current_player = player.opposite()

        logger.debug("%s played %d (move %d)", player, index, len(self.moves))
        return True

    def undo_move(self) -> bool:
        """
        Take back the most recent move.

        The mover of the undone move plays again. The game is always
        in progress afterwards, even if the position before that move
        was itself terminal.

        Returns:
            True if a move was undone, False if history was empty.
        """
        if not self.moves:
            return False

        last = self.moves.pop()
        self.board[last.index] = Mark.EMPTY
        self.current_player = last.player
        self.is_game_over = False
        self.outcome = None
        self.winning_line = None

        logger.debug("Undid %s at %d", last.player, last.index)
        return True

    def reset(self) -> None:
        """Start over: empty board, X to move, no history."""
        self.board = empty_board()
        self.current_player = Mark.X
        self.is_game_over = False
        self.outcome = None
        self.winning_line = None
        self.moves = []

    @property
    def winner(self) -> Optional[Mark]:
        """The winning mark, or None for a draw or an unfinished game."""
        if self.outcome is None or self.outcome is Mark.EMPTY:
            return None
        return self.outcome

    @property
    def is_draw(self) -> bool:
        return self.outcome is Mark.EMPTY

    @property
    def move_count(self) -> int:
        """Number of marks on the board."""
        return sum(1 for mark in self.board if mark is not Mark.EMPTY)

    @property
    def last_move(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of cell indices, ascending.
        """
        return empty_cells(self.board)

    def snapshot(self) -> Board:
        """A copy of the board that callers can hand around freely."""
        return list(self.board)

    def copy(self) -> "GameState":
        """Create an independent copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            is_game_over=self.is_game_over,
            outcome=self.outcome,
            winning_line=self.winning_line,
            moves=list(self.moves),
        )
