"""
Board snapshots for TicTacToe.
Renders a game state to an image and saves it as PNG.
"""

import os
import time
from typing import Optional
from PIL import Image, ImageDraw

from logic.config import GameConfig
from logic.game_state import GameState, Player


def render_board(state: GameState, config: Optional[GameConfig] = None) -> Image.Image:
    """
    Draw the board.

    Args:
        state: Game state to draw.
        config: Sizes and colours.

    Returns:
        RGB image, BOARD_SIZE * SNAPSHOT_CELL_SIZE pixels square.
    """
    config = config or GameConfig()
    cell = config.SNAPSHOT_CELL_SIZE
    size = cell * config.BOARD_SIZE
    width = config.SNAPSHOT_LINE_WIDTH

    image = Image.new("RGB", (size, size), config.SNAPSHOT_BACKGROUND)
    draw = ImageDraw.Draw(image)

    # Highlight winning cells first so the marks are drawn on top
    for pos in state.winning_positions:
        row, col = divmod(pos, config.BOARD_SIZE)
        draw.rectangle(
            [col * cell, row * cell, (col + 1) * cell - 1, (row + 1) * cell - 1],
            fill=config.SNAPSHOT_HIGHLIGHT
        )

    # Grid lines
    for i in range(1, config.BOARD_SIZE):
        draw.line([(i * cell, 0), (i * cell, size)], fill=config.SNAPSHOT_GRID_COLOR, width=width)
        draw.line([(0, i * cell), (size, i * cell)], fill=config.SNAPSHOT_GRID_COLOR, width=width)

    margin = cell // 5
    for pos, owner in enumerate(state.board):
        if owner is None:
            continue
        row, col = divmod(pos, config.BOARD_SIZE)
        left, top = col * cell + margin, row * cell + margin
        right, bottom = (col + 1) * cell - margin, (row + 1) * cell - margin

        if owner == Player.X:
            draw.line([(left, top), (right, bottom)], fill=config.SNAPSHOT_X_COLOR, width=width * 2)
            draw.line([(left, bottom), (right, top)], fill=config.SNAPSHOT_X_COLOR, width=width * 2)
        else:
            draw.ellipse([left, top, right, bottom], outline=config.SNAPSHOT_O_COLOR, width=width * 2)

    return image


def save_snapshot(
    state: GameState,
    path: Optional[str] = None,
    config: Optional[GameConfig] = None
) -> str:
    """
    Save the board as a PNG.

    Args:
        state: Game state to draw.
        path: Output file. Defaults to tictactoe_<unix time>.png in
            SNAPSHOT_OUTPUT_DIR.

    Returns:
        The path written.
    """
    config = config or GameConfig()
    if path is None:
        path = os.path.join(config.SNAPSHOT_OUTPUT_DIR, f"tictactoe_{int(time.time())}.png")

    render_board(state, config).save(path, format="PNG")
    return path
