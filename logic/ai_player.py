"""
AI player for TicTacToe.
Plays random moves early on and switches to Minimax near the end.
"""

import random
from typing import Callable, Optional, List, Tuple
from .config import GameConfig
from .game_state import Board, GameState, Player
from .win_checker import WinChecker


class AIPlayer:
    """
    The computer opponent.

    Every time it is asked for a move it draws a threshold T from
    MINIMAX_THRESHOLD_RANGE. With T or fewer empty cells it plays the
    Minimax move (never loses), otherwise a random empty cell, so it is
    dumb at times.
    """

    def __init__(
        self,
        player: Player = Player.O,
        config: Optional[GameConfig] = None,
        rng_factory: Callable[[], random.Random] = random.Random
    ):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
            config: Game configuration.
            rng_factory: Builds a new random source for every decision.
        """
        self.player = player
        self.config = config or GameConfig()
        self.rng_factory = rng_factory
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def draw_threshold(self, rng: random.Random) -> int:
        low, high = self.config.MINIMAX_THRESHOLD_RANGE
        return rng.randint(low, high)

    def select_move(self, game_state: GameState) -> Optional[int]:
        """
        Pick the computer's next move.

        Args:
            game_state: Current game state.

        Returns:
            Position (0-8), or None if no moves available or it is
            not this player's turn.
        """
        # Check if it's our turn
        if game_state.current_player != self.player:
            if self.config.DEBUG_MODE:
                print(f"Warning: It's not {self.player.value}'s turn!")
            return None

        empty = game_state.get_empty_cells()
        if not empty:
            return None

        # New random source per call, the threshold is not fixed for a game
        rng = self.rng_factory()
        threshold = self.draw_threshold(rng)

        if len(empty) <= threshold:
            move = self.best_move(game_state.board, self.player)
            how = "minimax"
        else:
            move = rng.choice(empty)
            how = "random"

        if self.config.DEBUG_MODE:
            print(f"AI ({how}, {len(empty)} empty, threshold {threshold}) plays {move}")

        return move

    def thinking_delay(self) -> float:
        """Seconds to wait before showing the computer's move."""
        low, high = self.config.THINK_DELAY_RANGE
        return self.rng_factory().uniform(low, high)

    def best_move(self, board: Board, perspective: Player) -> Optional[int]:
        """
        Get the Minimax move for `perspective`, who is to move.

        Ties go to the lowest position.

        Returns:
            Position (0-8), or None if the board is full.
        """
        self.moves_evaluated = 0

        scored = self.score_moves(list(board), perspective)
        if not scored:
            return None

        # Stable sort keeps ascending position order among equal scores
        ranked = sorted(scored, key=lambda item: item[1], reverse=True)
        best_move, best_score = ranked[0]

        if self.config.DEBUG_MODE:
            print(f"AI evaluated {self.moves_evaluated} positions. "
                  f"Best move: {best_move} (score: {best_score})")

        return best_move

    def score_moves(self, board: Board, perspective: Player) -> List[Tuple[int, int]]:
        """
        Score every empty position for `perspective` moving now.

        Returns:
            (position, score) pairs in ascending position order.
        """
        scored = []
        for pos, owner in enumerate(board):
            if owner is not None:
                continue
            board[pos] = perspective
            try:
                scored.append((pos, self.score(board, perspective.opposite(), perspective)))
            finally:
                board[pos] = None
        return scored

    def score(self, board: Board, player_to_move: Player, perspective: Player) -> int:
        """
        Minimax value of a board.

        Args:
            board: Board to evaluate. Restored before returning.
            player_to_move: Whose turn it is on this board.
            perspective: The maximizing side.

        Returns:
            +1 if perspective wins, -1 if it loses, 0 for a draw.
        """
        self.moves_evaluated += 1

        if self.win_checker.has_won(board, perspective):
            return 1
        if self.win_checker.has_won(board, perspective.opposite()):
            return -1
        if self.win_checker.is_full(board):
            return 0

        scores = []
        for pos, owner in enumerate(board):
            if owner is not None:
                continue
            board[pos] = player_to_move
            try:
                scores.append(self.score(board, player_to_move.opposite(), perspective))
            finally:
                board[pos] = None

        if player_to_move == perspective:
            return max(scores)
        return min(scores)
