"""
Logic module for TicTacToe.
Handles game state, rules, the computer opponent and the game session.
"""

__version__ = "1.0.0"

from .game_state import GameState, GameStatus, GameMode, Player, StatusKind
from .config import GameConfig
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .ai_player import AIPlayer
from .engine import GameEngine
from .session import GameSession, ComputerTurn
