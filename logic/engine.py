"""
Game engine for TicTacToe.
Applies moves, recomputes the status and asks the AI for computer moves.
"""

import random
from typing import Optional
from .config import GameConfig
from .game_state import GameMode, GameState, GameStatus, Move, Player, empty_board
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .ai_player import AIPlayer


class GameEngine:
    """
    Pure game rules: (state, move) -> state.

    Accepted moves return a new GameState. Rejected moves return the
    same object, untouched. Nothing is raised for a bad move.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        ai: Optional[AIPlayer] = None
    ):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = ai or AIPlayer(self.config.COMPUTER_PLAYER, self.config)

    def new_game(
        self,
        mode: GameMode,
        first_player: Optional[Player] = None,
        session_id: int = 0
    ) -> GameState:
        """
        Create the state for a fresh game.

        Args:
            mode: Two players or vs computer.
            first_player: Who starts. Random (50/50) if not given.
            session_id: Game this state belongs to.
        """
        if first_player is None:
            first_player = self.rng.choice([Player.X, Player.O])

        computer = self.config.COMPUTER_PLAYER if mode == GameMode.WITH_COMPUTER else None

        return GameState(
            board=empty_board(),
            current_player=first_player,
            computer_player=computer,
            status=GameStatus.in_progress(),
            mode=mode,
            session_id=session_id,
        )

    def apply_move(self, state: GameState, position: int, player: Player) -> GameState:
        """
        Apply a move.

        Args:
            state: Current state.
            position: Cell (0-8).
            player: Who is moving. Must be the current player.

        Returns:
            The new state, or `state` itself if the move was rejected.
        """
        result = self.validator.validate_move(state, position, player)
        if not result.is_valid:
            if self.config.DEBUG_MODE:
                print(f"Move rejected: {result.error_message}")
            return state

        new_state = state.copy()
        new_state.board[position] = player
        new_state.moves.append(Move(player, position, len(state.moves)))
        new_state.current_player = player.opposite()

        status = self.win_checker.evaluate_status(new_state.board, player)
        new_state.status = status.status
        new_state.winning_lines = status.winning_lines

        return new_state

    def select_computer_move(self, state: GameState) -> Optional[int]:
        """Ask the AI where the current player should move."""
        if not state.status.is_in_progress:
            return None
        return self.ai.select_move(state)

    def thinking_delay(self) -> float:
        return self.ai.thinking_delay()
