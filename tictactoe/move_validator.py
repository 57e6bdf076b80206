"""
Move validator for Noughts & Crosses.
Explains why a move would be rejected, for callers that show messages.
"""

from dataclasses import dataclass
from typing import List, Optional

from .board import NUM_CELLS, Mark
from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates moves.

    Rules:
    1. Game must not be over
    2. Index must be on the board (0-8)
    3. Can only place on empty cells

    Agrees with GameState.is_legal_move; this only adds the reason.
    """

    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place a mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < NUM_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index!r}. Must be 0-{NUM_CELLS - 1}."
            )

        occupant = game_state.board[index]
        if occupant is not Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"That cell is already taken by {occupant}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of valid cell indices.
        """
        if game_state.is_game_over:
            return []
        return game_state.get_empty_cells()
