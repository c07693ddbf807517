"""
Move validator for TicTacToe.
Checks that a human move follows the rules before it is played.
"""

from typing import Optional, List, TYPE_CHECKING
from dataclasses import dataclass

from .board import Player
from .config import GameConfig

if TYPE_CHECKING:
    from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Cell index must be on the board
    3. Can only place on empty cells
    4. Must be the mover's turn
    """

    def validate_move(
        self,
        game_state: "GameState",
        index: int,
        player: Player
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to mark (0-8).
            player: Who is trying to move.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if index is in valid range
        if not 0 <= index < GameConfig.CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )

        # Check if cell is empty
        occupant = game_state.board.cells[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already taken by {occupant.value}"
            )

        # Check whose turn it is
        if game_state.current_player != player:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's not {player.value}'s turn!"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: "GameState") -> List[int]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of cell indices, empty once the game is over.
        """
        if game_state.is_game_over:
            return []
        return game_state.board.empty_cells()
