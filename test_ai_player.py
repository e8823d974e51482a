"""Tests for the computer opponent."""

import random

from logic.ai_player import AIPlayer
from logic.game_state import GameState, GameStatus, Player
from logic.win_checker import WinChecker


def board_from(text: str):
    marks = {"X": Player.X, "O": Player.O, ".": None}
    return [marks[ch] for ch in text]


def state_from(text: str, to_move: Player) -> GameState:
    return GameState(
        board=board_from(text),
        current_player=to_move,
        computer_player=to_move,
        status=GameStatus.in_progress(),
    )


class StubRandom(random.Random):
    """Random source with a fixed threshold that records random picks."""

    def __init__(self, threshold: int):
        super().__init__(0)
        self.threshold = threshold
        self.choices = 0

    def randint(self, a, b):
        return self.threshold

    def choice(self, seq):
        self.choices += 1
        return super().choice(seq)


def test_takes_last_winning_cell():
    # X to move, only cell 2 left, and it completes the top row
    state = state_from("XX.OOXOXO", Player.X)
    assert state.get_empty_cells() == [2]

    ai = AIPlayer(Player.X)
    assert ai.select_move(state) == 2
    assert ai.best_move(state.board, Player.X) == 2


def test_blocks_opponent_win():
    ai = AIPlayer(Player.O)
    assert ai.best_move(board_from("XX..O...."), Player.O) == 2


def test_ties_go_to_lowest_position():
    board = board_from("XX.OO...X")
    ai = AIPlayer(Player.O)

    assert ai.score_moves(list(board), Player.O) == [(2, 1), (5, 1), (6, -1), (7, -1)]
    assert ai.best_move(board, Player.O) == 2


def test_best_move_leaves_board_untouched():
    board = board_from("X...O....")
    AIPlayer(Player.X).best_move(board, Player.X)
    assert board == board_from("X...O....")


def test_best_move_on_full_board():
    assert AIPlayer().best_move(board_from("XOXXOOOXX"), Player.X) is None


def test_score_terminal_boards():
    ai = AIPlayer(Player.O)

    assert ai.score(board_from("OOOXX.X.."), Player.X, Player.O) == 1
    assert ai.score(board_from("XXXOO.O.."), Player.O, Player.O) == -1
    assert ai.score(board_from("XOXXOOOXX"), Player.O, Player.O) == 0


def minimax_losses(ai, board, to_move):
    """Final boards won by the opponent when `ai` answers every reply with minimax."""
    checker = WinChecker()
    opponent = ai.player.opposite()
    losses = []

    def explore(mover):
        if checker.has_won(board, opponent):
            losses.append(list(board))
            return
        if checker.has_won(board, ai.player) or checker.is_full(board):
            return
        if mover == ai.player:
            pos = ai.best_move(board, ai.player)
            board[pos] = ai.player
            explore(opponent)
            board[pos] = None
        else:
            for pos in range(9):
                if board[pos] is None:
                    board[pos] = opponent
                    explore(ai.player)
                    board[pos] = None

    explore(to_move)
    return losses


def test_minimax_never_loses_replying():
    ai = AIPlayer(Player.O)

    # Corner, edge and centre openings cover every opening up to symmetry
    for opening in (0, 1, 4):
        board = [None] * 9
        board[opening] = Player.X
        assert minimax_losses(ai, board, Player.O) == []


def test_minimax_never_loses_opening():
    ai = AIPlayer(Player.O)
    assert minimax_losses(ai, [None] * 9, Player.O) == []


def test_no_move_on_other_players_turn():
    rng = StubRandom(threshold=7)
    ai = AIPlayer(Player.O, rng_factory=lambda: rng)

    assert ai.select_move(state_from("XX.OO...X", Player.X)) is None
    assert rng.choices == 0


def test_random_branch_above_threshold():
    rng = StubRandom(threshold=3)
    ai = AIPlayer(Player.O, rng_factory=lambda: rng)
    state = state_from("X........", Player.O)

    move = ai.select_move(state)

    assert rng.choices == 1
    assert move in state.get_empty_cells()


def test_minimax_at_or_below_threshold():
    state = state_from("XX.OO...X", Player.O)   # 4 empty

    for threshold in (4, 7):
        rng = StubRandom(threshold=threshold)
        ai = AIPlayer(Player.O, rng_factory=lambda: rng)
        assert ai.select_move(state) == 2
        assert rng.choices == 0


def test_fresh_random_source_per_move():
    made = []

    def factory():
        rng = StubRandom(threshold=3)
        made.append(rng)
        return rng

    ai = AIPlayer(Player.O, rng_factory=factory)
    state = state_from("X........", Player.O)
    ai.select_move(state)
    ai.select_move(state)

    assert len(made) == 2


def test_threshold_range():
    ai = AIPlayer()
    rng = random.Random(3)
    draws = {ai.draw_threshold(rng) for _ in range(500)}
    assert draws == {3, 4, 5, 6, 7}


def test_thinking_delay_range():
    ai = AIPlayer()
    for _ in range(100):
        assert 1.0 <= ai.thinking_delay() <= 2.0


def test_no_move_on_full_board():
    state = state_from("XOXXOOOXX", Player.X)
    assert AIPlayer(Player.X).select_move(state) is None
