"""
Noughts & Crosses
=================
A 3x3 game engine with undo and a computer opponent at three
difficulty levels (easy, medium, and a perfect-play Minimax hard mode).
"""

from .board import Mark, WINNING_LINES
from .game_state import GameState, Move
from .win_checker import WinChecker
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, Difficulty, select_move
from .match_stats import MatchStats, StatsRecorder
from .session import MatchSession

__version__ = "1.0.0"
