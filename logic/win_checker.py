"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from dataclasses import dataclass
from typing import List, Tuple
from .game_state import Board, GameStatus, Line, Player


@dataclass(frozen=True)
class StatusResult:
    """Status of a board plus the line(s) the winner completed."""
    status: GameStatus
    winning_lines: Tuple[Line, ...] = ()


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells owned by the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as position triples)
    WINNING_LINES: Tuple[Line, ...] = (
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
    )

    def lines_won_by(self, board: Board, player: Player) -> List[Line]:
        """
        Get every line fully owned by a player.

        Args:
            board: The 9-cell board.
            player: The player to check.

        Returns:
            The completed lines, in WINNING_LINES order.
        """
        self._check_board(board)
        return [
            line for line in self.WINNING_LINES
            if all(board[pos] == player for pos in line)
        ]

    def has_won(self, board: Board, player: Player) -> bool:
        return bool(self.lines_won_by(board, player))

    def is_full(self, board: Board) -> bool:
        return all(owner is not None for owner in board)

    def evaluate_status(self, board: Board, last_mover: Player) -> StatusResult:
        """
        Work out the status of a board after `last_mover` played.

        Args:
            board: The 9-cell board.
            last_mover: The player who made the most recent move.

        Returns:
            StatusResult with WonBy(p) and the completed lines, Drawn when
            the board is full with no line, InProgress otherwise.
        """
        # Boards built by callers may hold lines for both players,
        # so the opponent is checked too
        for player in (last_mover, last_mover.opposite()):
            lines = self.lines_won_by(board, player)
            if lines:
                return StatusResult(GameStatus.won_by(player), tuple(lines))

        if self.is_full(board):
            return StatusResult(GameStatus.drawn())

        return StatusResult(GameStatus.in_progress())

    def _check_board(self, board: Board):
        if len(board) != 9:
            raise ValueError(f"Board must have 9 cells, got {len(board)}")
