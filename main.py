"""
Main script for TicTacToe.

This script ties together:
- Game state (board, turns, human move validation)
- AI (difficulty policy and game tree search)
- A simple console board to play on

Run this script to play TicTacToe against the computer!
"""

import time
from typing import Optional, List

from tictactoe.config import GameConfig
from tictactoe.board import Player
from tictactoe.game_state import GameState
from tictactoe.ai_player import AIPlayer, Difficulty
from tictactoe.move_validator import MoveValidator


class TicTacToeGame:
    """
    Main controller for a console TicTacToe game.

    Game flow:
    1. X moves first (human or AI, depending on the chosen side)
    2. Human types a cell number, AI replies after a short pause
    3. The board is checked for a winner after every move
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        human_player: Player = Player.X,
        difficulty: Difficulty = Difficulty.HARD,
        ai_delay: float = GameConfig.AI_DELAY_SECONDS,
        verbose: bool = GameConfig.VERBOSE
    ):
        """
        Initialize the game.

        Args:
            human_player: Which player the human controls.
            difficulty: AI strength.
            ai_delay: Seconds to wait before the AI moves.
            verbose: Print AI search statistics.
        """
        self.game_state = GameState.new(human_player)
        self.ai = AIPlayer(self.game_state.ai_player, difficulty, verbose=verbose)
        self.ai_delay = ai_delay
        self.validator = MoveValidator()
        self.is_running = False

        print("\n" + "="*40)
        print("   TicTacToe")
        print(f"   You play: {human_player.value}")
        print(f"   AI plays: {self.game_state.ai_player.value} ({difficulty.value})")
        print("="*40)
        print("\nCells are numbered like a phone keypad:")
        print(" 1 | 2 | 3\n---+---+---\n 4 | 5 | 6\n---+---+---\n 7 | 8 | 9\n")

    def start(self):
        """Play one game until it ends or the human quits."""
        self.is_running = True
        self.game_state.print_board()

        while self.is_running and not self.game_state.is_game_over:
            if self.game_state.is_human_turn:
                self._human_move()
            else:
                self._ai_move()

        if self.game_state.is_game_over:
            self._show_game_result()

    def _human_move(self):
        """Ask the human for a cell until a legal one is given."""
        while True:
            index = self._read_cell()
            if index is None:
                print("\nGame quit by user.")
                self.is_running = False
                return

            result = self.game_state.request_human_move(index)
            if result.is_valid:
                self.game_state.print_board()
                return
            print(result.error_message)

            free = self.validator.get_valid_moves(self.game_state)
            print("Free cells: " + ", ".join(str(i + 1) for i in free))

    def _read_cell(self) -> Optional[int]:
        """Read a cell number 1-9, returning its 0-8 index, or None to quit."""
        while True:
            text = input(f"Your move ({self.game_state.human_player.value}) [1-9, q to quit]: ").strip()
            if text.lower() == "q":
                return None
            try:
                number = int(text)
            except ValueError:
                print("Please type a number 1-9.")
                continue
            if 1 <= number <= GameConfig.CELL_COUNT:
                return number - 1
            print("Please type a number 1-9.")

    def _ai_move(self):
        """Execute the AI's move."""
        print("\n>>> AI is thinking...")
        time.sleep(self.ai_delay)

        index = self.game_state.request_ai_move(self.ai)
        if index is None:
            print("ERROR: AI could not find a move!")
            self.is_running = False
            return

        print(f">>> AI plays {index + 1}")
        self.game_state.print_board()

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*40)
        print("   GAME OVER!")
        print("="*40)

        outcome = self.game_state.outcome
        print(f"\n{outcome.message}")
        if outcome.winner == self.game_state.human_player:
            print("Congratulations! You won!")
        elif outcome.winner is not None:
            print("AI wins! Better luck next time!")

        print("\n" + "="*40)


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against the computer")
    parser.add_argument(
        "--player",
        choices=["X", "O"],
        default=GameConfig.DEFAULT_HUMAN_PLAYER,
        help="Which mark you play (X moves first)"
    )
    parser.add_argument(
        "--difficulty",
        choices=GameConfig.DIFFICULTIES,
        default=GameConfig.DEFAULT_DIFFICULTY,
        help="AI strength"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=GameConfig.AI_DELAY_SECONDS,
        help="Seconds the AI waits before moving"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print AI search statistics"
    )

    args = parser.parse_args(argv)

    game = TicTacToeGame(
        human_player=Player(args.player),
        difficulty=Difficulty.from_string(args.difficulty),
        ai_delay=args.delay,
        verbose=args.verbose or GameConfig.VERBOSE
    )

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
