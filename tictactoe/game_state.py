"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, and who is human and who is the AI.
"""

from typing import Optional, List
from dataclasses import dataclass, field

from .ai_player import AIPlayer
from .board import Board, Outcome, Player
from .config import GameConfig
from .move_validator import MoveValidator, ValidationResult


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell (0-8)
    move_number: int        # Which move this is (0-8)


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The board
    - Which player the human controls (the AI gets the other one)
    - Current player
    - Move history

    The outcome is always worked out from the board, never stored.
    """

    board: Board = field(default_factory=Board)
    human_player: Player = Player(GameConfig.DEFAULT_HUMAN_PLAYER)
    current_player: Player = Player(GameConfig.FIRST_PLAYER)
    moves: List[Move] = field(default_factory=list)
    validator: MoveValidator = field(default_factory=MoveValidator, repr=False, compare=False)

    @classmethod
    def new(cls, human_player: Player) -> "GameState":
        """Start an empty game with the human playing human_player."""
        return cls(human_player=human_player)

    @property
    def ai_player(self) -> Player:
        return self.human_player.opposite()

    @property
    def outcome(self) -> Outcome:
        return self.board.winner()

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def is_human_turn(self) -> bool:
        return not self.is_game_over and self.current_player == self.human_player

    def request_human_move(self, index: int) -> ValidationResult:
        """
        Play the human's move if it is legal.

        Args:
            index: Cell index (0-8).

        Returns:
            ValidationResult, the move was played only if is_valid.
        """
        result = self.validator.validate_move(self, index, self.human_player)
        if result.is_valid:
            self._play(index)
        return result

    def request_ai_move(self, ai: AIPlayer) -> Optional[int]:
        """
        Let the AI pick and play its move.

        Args:
            ai: The AI controlling ai_player.

        Returns:
            The cell played, or None if it is not the AI's turn or the
            AI was set up for the other side.
        """
        if self.is_game_over or self.current_player != self.ai_player:
            return None

        if ai.player != self.ai_player:
            print(f"Warning: AI plays {ai.player.value}, but this game's AI is {self.ai_player.value}!")
            return None

        index = ai.choose_move(self.board)
        if index is None:
            return None

        self._play(index)
        return index

    def _play(self, index: int):
        player = self.current_player
        placed = self.board.place(index, player)
        assert placed, f"cell {index} was not free"

        self.moves.append(Move(player=player, index=index, move_number=len(self.moves)))
        self.current_player = player.opposite()

    def reset(self):
        """Clear the board for a new round, keeping the same sides."""
        self.board = Board()
        self.current_player = Player(GameConfig.FIRST_PLAYER)
        self.moves = []

    def print_board(self):
        """Print the board to console."""
        print(self.board.pretty())

        # Print game info
        outcome = self.outcome
        if outcome.is_terminal:
            print(outcome.message)
        else:
            who = "you" if self.current_player == self.human_player else "AI"
            print(f"Current turn: {self.current_player.value} ({who})")
