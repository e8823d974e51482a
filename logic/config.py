"""
Game configuration for TicTacToe.
All the settings for the computer opponent, timing and board snapshots.
"""

from .game_state import Player


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune the computer opponent!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, positions 0-8
    BOARD_SIZE = 3
    BOARD_CELLS = BOARD_SIZE * BOARD_SIZE  # 9

    # ==================== COMPUTER SETTINGS ====================
    # Symbol played by the computer in "vs computer" mode
    COMPUTER_PLAYER = Player.O

    # Minimax is only used when the number of empty cells is at or
    # below a threshold drawn from this range (inclusive) on every move.
    # Above it the computer plays a random empty cell.
    MINIMAX_THRESHOLD_RANGE = (3, 7)

    # Fake "thinking" time before the computer's move (seconds)
    THINK_DELAY_RANGE = (1.0, 2.0)

    # ==================== SNAPSHOT SETTINGS ====================
    SNAPSHOT_CELL_SIZE = 120   # pixels per cell
    SNAPSHOT_LINE_WIDTH = 4
    SNAPSHOT_BACKGROUND = (26, 26, 46)    # '#1a1a2e'
    SNAPSHOT_GRID_COLOR = (0, 212, 255)   # '#00d4ff'
    SNAPSHOT_X_COLOR = (248, 113, 113)    # '#f87171'
    SNAPSHOT_O_COLOR = (16, 185, 129)     # '#10b981'
    SNAPSHOT_HIGHLIGHT = (255, 215, 0)    # '#ffd700'
    SNAPSHOT_OUTPUT_DIR = "."

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
