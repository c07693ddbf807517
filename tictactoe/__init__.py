"""
TicTacToe
=========
Play TicTacToe against a computer opponent at easy, medium or hard.

Handles the board, rules, game flow and the AI opponent. The hard AI
searches the full game tree and never loses once past the opening.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .board import Board, GameStatus, Outcome, Player, WINNING_LINES
from .search import GameTreeSearch, search
from .ai_player import AIPlayer, Difficulty
from .move_validator import MoveValidator, ValidationResult
from .game_state import GameState, Move
