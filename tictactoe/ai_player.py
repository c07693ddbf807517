"""
AI player for TicTacToe.
Wraps the search engine with a difficulty level.
"""

import random
from enum import Enum
from typing import Optional

from .board import Board, Player
from .config import GameConfig
from .search import GameTreeSearch


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"        # Random moves
    MEDIUM = "medium"    # Coin flip between search and random
    HARD = "hard"        # Full search

    @classmethod
    def from_string(cls, name: str) -> "Difficulty":
        """Look up a difficulty by name, ignoring case."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown difficulty {name!r}. Choose from: {', '.join(GameConfig.DIFFICULTIES)}"
            ) from None


class AIPlayer:
    """
    An AI that plays TicTacToe at a chosen difficulty.

    HARD never loses once the opening move is made - it will win if
    possible and block the opponent if needed. EASY ignores the search
    entirely and MEDIUM only uses it half of the time.
    """

    def __init__(
        self,
        player: Player = Player.O,
        difficulty: Difficulty = Difficulty.HARD,
        rng: Optional[random.Random] = None,
        verbose: bool = GameConfig.VERBOSE
    ):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
            difficulty: How strong the AI plays.
            rng: Random source, pass a seeded one for repeatable games.
            verbose: Print search statistics after every move.
        """
        self.player = player
        self.difficulty = difficulty
        self.rng = rng if rng is not None else random.Random()
        self.verbose = verbose
        self.searcher = GameTreeSearch()

        # Whether the last choose_move() ran the search (for debugging)
        self.used_search = False

    def choose_move(self, board: Board) -> Optional[int]:
        """
        Pick the AI's next cell.

        Args:
            board: Current board. Never modified.

        Returns:
            Cell index (0-8), or None if the game is already over.
        """
        self.used_search = False

        if board.winner().is_terminal or not board.empty_cells():
            return None

        if self.difficulty == Difficulty.EASY:
            return self._random_move(board)

        # Opening move: nothing to search on, just vary it
        if board.is_empty():
            return self._random_move(board)

        if self.difficulty == Difficulty.MEDIUM:
            if self.rng.random() < GameConfig.MEDIUM_SEARCH_PROBABILITY:
                return self._search_move(board)
            return self._random_move(board)

        return self._search_move(board)

    def _random_move(self, board: Board) -> int:
        """Random empty cell. Occupied picks are simply drawn again."""
        index = self.rng.randint(0, GameConfig.CELL_COUNT - 1)
        while board.cells[index] is not None:
            index = self.rng.randint(0, GameConfig.CELL_COUNT - 1)
        return index

    def _search_move(self, board: Board) -> int:
        self.used_search = True
        score, move = self.searcher.search(board, self.player)

        if self.verbose:
            print(
                f"AI evaluated {self.searcher.nodes_evaluated} positions. "
                f"Best move: {move} (score: {score})"
            )

        return move
