"""
Match statistics.
An in-memory results sink: one record per finished match.
"""

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from .board import Mark

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchStats:
    """Running totals over finished matches."""
    games: int = 0
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0
    moves_total: int = 0
    last_game_at: Optional[datetime] = None

    @property
    def x_win_rate(self) -> float:
        return self.x_wins / self.games if self.games else 0.0

    @property
    def o_win_rate(self) -> float:
        return self.o_wins / self.games if self.games else 0.0

    @property
    def draw_rate(self) -> float:
        return self.draws / self.games if self.games else 0.0

    @property
    def avg_moves(self) -> float:
        return self.moves_total / self.games if self.games else 0.0


class StatsRecorder:
    """
    Collects match results.

    The recorder doesn't know about games in progress; whoever calls
    record_game is responsible for calling it once per match.
    """

    def __init__(self):
        self._stats = MatchStats()

    @property
    def stats(self) -> MatchStats:
        return self._stats

    def record_game(self, outcome: Optional[Mark], moves: int) -> MatchStats:
        """
        Add one finished match.

        Args:
            outcome: Mark.X or Mark.O for a win, Mark.EMPTY (or None) for a draw.
            moves: How many moves were played.

        Returns:
            The updated totals.
        """
        if moves < 0:
            raise ValueError(f"moves must be >= 0, got {moves}")

        s = self._stats
        self._stats = replace(
            s,
            games=s.games + 1,
            x_wins=s.x_wins + (1 if outcome is Mark.X else 0),
            o_wins=s.o_wins + (1 if outcome is Mark.O else 0),
            draws=s.draws + (1 if outcome in (None, Mark.EMPTY) else 0),
            moves_total=s.moves_total + moves,
            last_game_at=datetime.now(),
        )
        logger.info(
            "Recorded game %d: %s in %d moves",
            self._stats.games,
            "draw" if outcome in (None, Mark.EMPTY) else f"{outcome} wins",
            moves,
        )
        return self._stats

    def reset(self) -> MatchStats:
        self._stats = MatchStats()
        return self._stats
