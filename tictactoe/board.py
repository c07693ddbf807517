"""
Board model for TicTacToe.
Holds the 9 cells, finds empty cells and works out who (if anyone) has won.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


class GameStatus(Enum):
    """Where the game stands."""
    ONGOING = "ongoing"
    WON = "won"
    DRAW = "draw"


# All possible winning lines, checked in this order
WINNING_LINES: List[Tuple[int, int, int]] = [
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
]


@dataclass(frozen=True)
class Outcome:
    """
    Result of checking a board.

    winner is only set when status is WON.
    """
    status: GameStatus
    winner: Optional[Player] = None

    @classmethod
    def ongoing(cls) -> "Outcome":
        return cls(GameStatus.ONGOING)

    @classmethod
    def won(cls, player: Player) -> "Outcome":
        return cls(GameStatus.WON, player)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(GameStatus.DRAW)

    @property
    def is_terminal(self) -> bool:
        """True once the game is won or drawn."""
        return self.status != GameStatus.ONGOING

    def score(self, player: Player) -> int:
        """
        Value of this outcome from one player's point of view.

        Args:
            player: The player we are scoring for.

        Returns:
            +1 if they won, -1 if their opponent won, 0 otherwise.
        """
        if self.status != GameStatus.WON:
            return 0
        return 1 if self.winner == player else -1

    @property
    def message(self) -> str:
        """Human-readable result, empty while the game is still going."""
        if self.status == GameStatus.WON:
            return f"Player {self.winner.value} wins!"
        if self.status == GameStatus.DRAW:
            return "It's a draw!"
        return ""


@dataclass
class Board:
    """
    The 3x3 TicTacToe grid, stored as 9 cells in row-major order.

    None means empty, otherwise the Player who marked the cell.
    A marked cell is never cleared or overwritten.
    """

    cells: List[Optional[Player]] = field(
        default_factory=lambda: [None] * GameConfig.CELL_COUNT
    )

    def __post_init__(self):
        if len(self.cells) != GameConfig.CELL_COUNT:
            raise ValueError(
                f"Board needs {GameConfig.CELL_COUNT} cells, got {len(self.cells)}"
            )
        self.cells = list(self.cells)

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from a 9 character string such as "XX.OO....".

        Args:
            text: One symbol per cell: X, O, or one of GameConfig.EMPTY_SYMBOLS.

        Returns:
            The new Board.
        """
        if len(text) != GameConfig.CELL_COUNT:
            raise ValueError(
                f"Board string must be {GameConfig.CELL_COUNT} characters, got {len(text)}"
            )

        cells: List[Optional[Player]] = []
        for symbol in text.upper():
            if symbol in GameConfig.EMPTY_SYMBOLS:
                cells.append(None)
            elif symbol in ("X", "O"):
                cells.append(Player(symbol))
            else:
                raise ValueError(f"Unknown board symbol: {symbol!r}")
        return cls(cells)

    def empty_cells(self) -> List[int]:
        """Indices of all empty cells, in ascending order."""
        return [i for i, cell in enumerate(self.cells) if cell is None]

    def is_empty(self) -> bool:
        """True if nobody has moved yet."""
        return all(cell is None for cell in self.cells)

    def place(self, index: int, player: Player) -> bool:
        """
        Mark a cell on this board.

        Args:
            index: Cell index (0-8).
            player: Who is marking it.

        Returns:
            True if the cell was empty and is now marked, False otherwise.
        """
        if not 0 <= index < GameConfig.CELL_COUNT:
            return False
        if self.cells[index] is not None:
            return False
        self.cells[index] = player
        return True

    def apply_move(self, index: int, player: Player) -> "Board":
        """
        Return a copy of the board with one more mark on it.

        An occupied cell leaves the board unchanged and the same board
        is returned.
        """
        if not 0 <= index < GameConfig.CELL_COUNT or self.cells[index] is not None:
            return self
        new_board = self.clone()
        new_board.cells[index] = player
        return new_board

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        """The first completed line, or None."""
        for line in WINNING_LINES:
            a, b, c = line
            if self.cells[a] is not None and self.cells[a] == self.cells[b] == self.cells[c]:
                return line
        return None

    def winner(self) -> Outcome:
        """
        Work out the outcome from the cells.

        Returns:
            Outcome.won(player) for a completed line, Outcome.draw() for a
            full board with no line, Outcome.ongoing() otherwise.
        """
        line = self.winning_line()
        if line is not None:
            return Outcome.won(self.cells[line[0]])

        if not self.empty_cells():
            return Outcome.draw()

        return Outcome.ongoing()

    def clone(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(list(self.cells))

    def pretty(self) -> str:
        """Multi-line grid for the console."""
        symbols = [cell.value if cell is not None else " " for cell in self.cells]
        size = GameConfig.BOARD_SIZE
        rows = [
            " " + " | ".join(symbols[i:i + size])
            for i in range(0, GameConfig.CELL_COUNT, size)
        ]
        return "\n" + "\n---+---+---\n".join(rows) + "\n"

    def __str__(self) -> str:
        return "".join(cell.value if cell is not None else "." for cell in self.cells)
