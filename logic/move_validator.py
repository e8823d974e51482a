"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional
from dataclasses import dataclass
from .game_state import GameState, Player


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must be in progress
    2. Position must be 0-8
    3. Only the current player can move
    4. Can only place on empty cells
    """

    def validate_move(
        self,
        game_state: GameState,
        position: int,
        player: Player
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            position: Cell to place the mark on (0-8).
            player: Player making the move.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not game_state.status.is_in_progress:
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is not in progress ({game_state.status})"
            )

        if (not isinstance(position, int) or isinstance(position, bool)
                or not 0 <= position <= 8):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {position!r}. Must be 0-8."
            )

        if not isinstance(player, Player):
            return ValidationResult(
                is_valid=False,
                error_message=f"Unknown player {player!r}"
            )

        if player != game_state.current_player:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's {game_state.current_player.value}'s turn, not {player.value}'s"
            )

        owner = game_state.board[position]
        if owner is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {position} is already occupied by {owner.value}"
            )

        return ValidationResult(is_valid=True)
