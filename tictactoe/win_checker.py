"""
Win checker for Noughts & Crosses.
Checks if a player has won or if the game is a draw.
"""

from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from .board import WINNING_LINES, Mark

if TYPE_CHECKING:
    from .game_state import GameState


class WinChecker:
    """
    Checks for win conditions in Noughts & Crosses.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally).

    Everything here works on a bare board so the AI can reuse it
    on simulated positions.
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, board: Sequence[Mark]) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The 9 cells.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        result = self._scan(board)
        return result[0] if result else None

    def get_winning_line(self, board: Sequence[Mark]) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            board: The 9 cells.

        Returns:
            The first complete line in scan order, or None.
        """
        result = self._scan(board)
        return result[1] if result else None

    def check_draw(self, board: Sequence[Mark]) -> bool:
        """A draw is a full board with no winner."""
        if Mark.EMPTY in board:
            return False
        return self.check_winner(board) is None

    def update_game_state(self, game_state: "GameState") -> "GameState":
        """
        Update the game state with winner/draw information.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        result = self._scan(game_state.board)

        if result is not None:
            game_state.is_game_over = True
            game_state.outcome, game_state.winning_line = result
        elif self.check_draw(game_state.board):
            game_state.is_game_over = True
            game_state.outcome = Mark.EMPTY
            game_state.winning_line = None

        return game_state

    def _scan(self, board: Sequence[Mark]) -> Optional[Tuple[Mark, Tuple[int, int, int]]]:
        for line in self.WINNING_LINES:
            a, b, c = line
            mark = board[a]
            if mark is not Mark.EMPTY and mark is board[b] is board[c]:
                return mark, line
        return None
