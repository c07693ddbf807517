"""
Search engine for TicTacToe.
Exhaustive negamax over the remaining game tree.
"""

from typing import Optional, Tuple

from .board import Board, Player


SearchResult = Tuple[int, Optional[int]]


class GameTreeSearch:
    """
    Full-depth negamax search, no pruning and no depth limit.

    The whole tree from any 3x3 position is small enough to walk every
    time. One function plays both sides: scores are always reported from
    score_for's point of view and the sign multiplier flips them at the
    opponent's nodes.
    """

    def __init__(self):
        # Nodes visited during the last search (for debugging)
        self.nodes_evaluated = 0

    def search(
        self,
        board: Board,
        player: Player,
        score_for: Optional[Player] = None
    ) -> SearchResult:
        """
        Find the best move for the player to move.

        Args:
            board: Position to search. Never modified.
            player: The player whose turn it is.
            score_for: Perspective of the returned score (default: player).

        Returns:
            (score, move) where score is -1, 0 or +1 and move is the best
            cell index, or None if the board is already finished.
        """
        self.nodes_evaluated = 0
        if score_for is None:
            score_for = player
        return self._negamax(board, player, score_for)

    def _negamax(self, board: Board, player: Player, score_for: Player) -> SearchResult:
        self.nodes_evaluated += 1

        outcome = board.winner()
        if outcome.is_terminal:
            return outcome.score(score_for), None

        empty_cells = board.empty_cells()
        assert empty_cells, "non-terminal board with no empty cells"

        multiplier = 1 if player == score_for else -1
        best_score: Optional[int] = None
        best_move: Optional[int] = None

        # Ascending order, strict comparison: lowest index wins ties
        for square in empty_cells:
            child = board.apply_move(square, player)
            assert child is not board, f"search tried occupied cell {square}"

            child_score, _ = self._negamax(child, player.opposite(), score_for)
            this_score = multiplier * child_score

            if best_score is None or this_score > best_score:
                best_score = this_score
                best_move = square

        return best_score * multiplier, best_move


def search(
    board: Board,
    player: Player,
    score_for: Optional[Player] = None
) -> SearchResult:
    """Run a one-off GameTreeSearch. See GameTreeSearch.search."""
    return GameTreeSearch().search(board, player, score_for)
