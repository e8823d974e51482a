"""
Game state for TicTacToe.
Tracks the board, current player, computer assignment and game status.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


class GameMode(Enum):
    """Who is playing."""
    TWO_PLAYER = "two-player"
    WITH_COMPUTER = "computer"


class StatusKind(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    DRAWN = "drawn"
    WON = "won"


@dataclass(frozen=True)
class GameStatus:
    """
    Status of a game: NotStarted, InProgress, Drawn or WonBy(player).

    Only WON carries a winner.
    """
    kind: StatusKind
    winner: Optional[Player] = None

    @classmethod
    def not_started(cls) -> "GameStatus":
        return cls(StatusKind.NOT_STARTED)

    @classmethod
    def in_progress(cls) -> "GameStatus":
        return cls(StatusKind.IN_PROGRESS)

    @classmethod
    def drawn(cls) -> "GameStatus":
        return cls(StatusKind.DRAWN)

    @classmethod
    def won_by(cls, player: Player) -> "GameStatus":
        return cls(StatusKind.WON, player)

    @property
    def is_in_progress(self) -> bool:
        return self.kind == StatusKind.IN_PROGRESS

    @property
    def is_game_over(self) -> bool:
        """True once the game is Drawn or WonBy someone."""
        return self.kind in (StatusKind.DRAWN, StatusKind.WON)

    def __str__(self) -> str:
        if self.kind == StatusKind.WON:
            return f"won by {self.winner.value}"
        return self.kind.value.replace("_", " ")


# A board is always exactly 9 cells, None means empty
Board = List[Optional[Player]]
Line = Tuple[int, int, int]


def empty_board() -> Board:
    """Create a fresh 9-cell board."""
    return [None] * 9


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    position: int           # Cell (0-8)
    move_number: int        # Which move this is in the game (0-8)


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The board (9 cells, who owns each one)
    - Current player
    - Which player the computer controls (if any)
    - Game status and the winning line(s)
    - Move history for this game
    """

    board: Board = field(default_factory=empty_board)

    # Current player's turn
    current_player: Player = Player.X

    # Computer-controlled symbol, None in two-player games
    computer_player: Optional[Player] = None

    status: GameStatus = field(default_factory=GameStatus.not_started)

    # Lines completed by the winner, empty unless the game is won
    winning_lines: Tuple[Line, ...] = ()

    moves: List[Move] = field(default_factory=list)

    mode: GameMode = GameMode.TWO_PLAYER

    # Identifies the game this state belongs to
    session_id: int = 0

    @property
    def winning_positions(self) -> frozenset:
        """All positions that are part of a winning line."""
        return frozenset(pos for line in self.winning_lines for pos in line)

    def is_computer_turn(self) -> bool:
        return (
            self.computer_player is not None
            and self.status.is_in_progress
            and self.current_player == self.computer_player
        )

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of positions in ascending order.
        """
        return [pos for pos, owner in enumerate(self.board) if owner is None]

    def copy(self) -> "GameState":
        """Create a copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            computer_player=self.computer_player,
            status=self.status,
            winning_lines=self.winning_lines,
            moves=list(self.moves),
            mode=self.mode,
            session_id=self.session_id,
        )

    def print_board(self):
        """Print the board to console."""
        print()
        for row in range(3):
            cells = []
            for col in range(3):
                pos = row * 3 + col
                owner = self.board[pos]
                cells.append(owner.value if owner else str(pos))
            print(" " + " | ".join(cells))
            if row < 2:
                print("---+---+---")

        if self.status.is_game_over:
            if self.status.winner:
                print(f"\n{self.status.winner.value} WINS!")
            else:
                print("\nIt's a DRAW!")
        elif self.status.is_in_progress:
            turn = f"Current turn: {self.current_player.value}"
            if self.current_player == self.computer_player:
                turn += " (computer)"
            print(f"\n{turn}")
