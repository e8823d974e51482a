"""
Game session for TicTacToe.
Owns the running game and hands out computer turns tagged with the game
they belong to, so a delayed computer move never lands in a newer game.
"""

from dataclasses import dataclass
from typing import Optional
from .engine import GameEngine
from .game_state import GameMode, GameState, Player


@dataclass(frozen=True)
class ComputerTurn:
    """A computer move waiting for its thinking delay to pass."""
    session_id: int
    position: int
    delay: float      # seconds


class GameSession:
    """
    The running game.

    The host (UI or console) creates one session and threads every call
    through it. Moves are applied one at a time.
    """

    def __init__(self, engine: Optional[GameEngine] = None):
        self.engine = engine or GameEngine()
        self.session_id = 0
        self.state = GameState()   # NotStarted until start_game()

    @property
    def winning_positions(self) -> frozenset:
        return self.state.winning_positions

    def start_game(self, mode: GameMode, first_player: Optional[Player] = None) -> GameState:
        """
        Start a new game, replacing the current one.

        Any ComputerTurn handed out before this call becomes stale.
        """
        self.session_id += 1
        self.state = self.engine.new_game(mode, first_player, self.session_id)

        if self.engine.config.DEBUG_MODE:
            print(f"Game {self.session_id} started ({mode.value}), "
                  f"{self.state.current_player.value} goes first")

        return self.state

    def is_computer_turn(self) -> bool:
        return self.state.is_computer_turn()

    def request_move(self, position: int) -> GameState:
        """
        Human move for the current player.

        Ignored while it is the computer's turn.
        """
        if self.is_computer_turn():
            if self.engine.config.DEBUG_MODE:
                print(f"Ignoring move {position}: computer is thinking")
            return self.state

        self.state = self.engine.apply_move(self.state, position, self.state.current_player)
        return self.state

    def computer_turn(self) -> Optional[ComputerTurn]:
        """
        Pick the computer's move for the host to schedule.

        Returns:
            ComputerTurn, or None if it is not the computer's turn.
        """
        if not self.is_computer_turn():
            return None

        position = self.engine.select_computer_move(self.state)
        if position is None:
            return None

        return ComputerTurn(
            session_id=self.session_id,
            position=position,
            delay=self.engine.thinking_delay(),
        )

    def play_computer_turn(self, turn: ComputerTurn) -> GameState:
        """
        Apply a scheduled computer move.

        Stale turns (from an earlier game) are discarded.
        """
        if turn.session_id != self.session_id:
            if self.engine.config.DEBUG_MODE:
                print(f"Discarding stale computer move from game {turn.session_id}")
            return self.state

        if not self.is_computer_turn():
            return self.state

        self.state = self.engine.apply_move(self.state, turn.position, self.state.computer_player)
        return self.state
