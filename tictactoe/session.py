"""
Match session for Noughts & Crosses.

Ties one GameState to an AI opponent and a results sink, the way a
front end drives a match:
1. Human places a mark
2. If the game goes on and it's the AI's turn, the AI replies
3. When the game ends, the result is reported once
"""

import logging
import random
from typing import Any, Optional, Protocol, Union

from .ai_player import AIPlayer, Difficulty
from .board import Mark
from .game_state import GameState

logger = logging.getLogger(__name__)


class ResultsSink(Protocol):
    """Anything that wants to hear about finished matches."""

    def record_game(self, outcome: Optional[Mark], moves: int) -> Any:
        ...


class MatchSession:
    """
    One match at a time, against the AI or between two humans.
    """

    def __init__(
        self,
        difficulty: Union[Difficulty, str] = Difficulty.MEDIUM,
        human_player: Mark = Mark.X,
        vs_ai: bool = True,
        sink: Optional[ResultsSink] = None,
        rng: Optional[random.Random] = None,
        undo_enabled: bool = True,
    ):
        """
        Start a session; the first game begins right away.

        Args:
            difficulty: AI difficulty, can be changed between turns.
            human_player: Which mark the human plays in vs-AI mode.
            vs_ai: False for two humans sharing the board.
            sink: Notified once per finished match.
            rng: Randomness for the AI.
            undo_enabled: Whether undo is allowed at all.
        """
        if human_player not in (Mark.X, Mark.O):
            raise ValueError(f"Human must play X or O, not {human_player!r}")

        self.human_player = human_player
        self.vs_ai = vs_ai
        self.sink = sink
        self.undo_enabled = undo_enabled

        self.state = GameState()
        self.ai = AIPlayer(difficulty, rng=rng, player=human_player.opposite())

        self._reported = False
        self.new_game()

    @property
    def ai_player(self) -> Mark:
        return self.human_player.opposite()

    @property
    def difficulty(self) -> Difficulty:
        return self.ai.difficulty

    def set_difficulty(self, difficulty: Union[Difficulty, str]) -> None:
        """Used from the AI's next move on."""
        self.ai.difficulty = Difficulty.parse(difficulty)
        logger.debug("Difficulty set to %s", self.ai.difficulty.value)

    @property
    def is_ai_turn(self) -> bool:
        return (
            self.vs_ai
            and not self.state.is_game_over
            and self.state.current_player is self.ai_player
        )

    def play_human(self, index: int) -> bool:
        """
        Play a human move, then let the AI reply if it's its turn.

        Returns:
            True if the human move was accepted.
        """
        if self.vs_ai and self.state.current_player is not self.human_player:
            logger.debug("Not the human's turn")
            return False

        if not self.state.make_move(index):
            return False

        self._after_move()

        if self.is_ai_turn:
            self.play_ai()

        return True

    def play_ai(self) -> bool:
        """Let the AI make its move. False if it isn't the AI's turn."""
        if not self.is_ai_turn:
            return False

        played = self.ai.play(self.state)
        if played:
            self._after_move()
        return played

    def suggest_move(self) -> Optional[int]:
        """A hint for whoever is to move."""
        if self.state.is_game_over:
            return None
        return self.ai.choose_move(self.state.snapshot(), self.state.current_player)

    def undo(self) -> bool:
        """
        Take back the last move, or against the AI, the last human
        move and the AI's reply to it.

        Returns:
            True if anything was undone.
        """
        if not self.undo_enabled:
            return False

        if not self.vs_ai:
            return self.state.undo_move()

        if not any(move.player is self.human_player for move in self.state.moves):
            return False

        while self.state.undo_move():
            if self.state.current_player is self.human_player:
                break
        return True

    def new_game(self) -> None:
        """Clear the board; the AI opens if it plays X."""
        self.state.reset()
        self._reported = False

        if self.is_ai_turn:
            self.play_ai()

    def _after_move(self) -> None:
        if not self.state.is_game_over or self._reported:
            return

        self._reported = True
        outcome = self.state.outcome
        logger.info(
            "Game over: %s after %d moves",
            "draw" if outcome is Mark.EMPTY else f"{outcome} wins",
            self.state.move_count,
        )
        if self.sink is not None:
            self.sink.record_game(outcome, self.state.move_count)
