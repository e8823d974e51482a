"""Tests for applying moves with the game engine."""

import random

import pytest

from logic.engine import GameEngine
from logic.game_state import GameMode, GameState, GameStatus, Player, StatusKind


def play(engine, state, positions):
    """Play positions in order, each by the current player."""
    for pos in positions:
        state = engine.apply_move(state, pos, state.current_player)
    return state


@pytest.fixture
def engine():
    return GameEngine(rng=random.Random(7))


@pytest.fixture
def game(engine):
    return engine.new_game(GameMode.TWO_PLAYER, first_player=Player.X)


def test_new_game(engine):
    state = engine.new_game(GameMode.TWO_PLAYER, first_player=Player.O, session_id=3)

    assert state.board == [None] * 9
    assert state.current_player == Player.O
    assert state.computer_player is None
    assert state.status == GameStatus.in_progress()
    assert state.session_id == 3
    assert state.moves == []


def test_new_game_with_computer_assigns_o(engine):
    state = engine.new_game(GameMode.WITH_COMPUTER)

    assert state.computer_player == Player.O
    assert state.mode == GameMode.WITH_COMPUTER


def test_first_player_is_random(engine):
    starters = {engine.new_game(GameMode.TWO_PLAYER).current_player for _ in range(50)}
    assert starters == {Player.X, Player.O}


def test_row_win_scenario(engine, game):
    state = play(engine, game, [0, 4, 1, 7])
    assert state.status.is_in_progress

    state = engine.apply_move(state, 2, Player.X)

    assert state.status == GameStatus.won_by(Player.X)
    assert state.winning_lines == ((0, 1, 2),)
    assert state.winning_positions == {0, 1, 2}


def test_draw_scenario(engine, game):
    state = play(engine, game, [0, 1, 2, 4, 3, 5, 7, 6, 8])

    assert state.status == GameStatus.drawn()
    assert state.winning_lines == ()
    assert None not in state.board


def test_players_alternate(engine, game):
    state = game
    expected = Player.X
    for pos in [4, 0, 8, 2, 1, 7, 6]:
        assert state.current_player == expected
        state = engine.apply_move(state, pos, expected)
        expected = expected.opposite()
    assert state.current_player == expected
    assert [move.player for move in state.moves] == [
        Player.X, Player.O, Player.X, Player.O, Player.X, Player.O, Player.X
    ]


def test_accepted_move_does_not_touch_old_state(engine, game):
    new_state = engine.apply_move(game, 4, Player.X)

    assert new_state is not game
    assert game.board[4] is None
    assert game.current_player == Player.X
    assert new_state.board[4] == Player.X
    assert new_state.moves[0].position == 4
    assert new_state.moves[0].move_number == 0


def test_occupied_cell_is_rejected(engine, game):
    state = play(engine, game, [4, 0])
    board_before = list(state.board)

    result = engine.apply_move(state, 0, Player.X)

    assert result is state
    assert result.board == board_before
    assert result.current_player == Player.X


def test_wrong_player_is_rejected(engine, game):
    result = engine.apply_move(game, 4, Player.O)

    assert result is game
    assert game.board[4] is None


@pytest.mark.parametrize("player", ["X", None, 1])
def test_unknown_player_is_rejected(engine, game, player):
    result = engine.apply_move(game, 4, player)

    assert result is game
    assert game.board[4] is None
    assert game.moves == []


def test_bool_position_is_not_a_cell(engine, game):
    assert engine.apply_move(game, True, Player.X) is game
    assert game.board[1] is None


@pytest.mark.parametrize("position", [-1, 9, 42, True, "4", None])
def test_bad_position_is_rejected(engine, game, position):
    assert engine.apply_move(game, position, Player.X) is game


@pytest.mark.parametrize("moves", [
    [0, 4, 1, 7, 2],                   # X wins
    [0, 1, 2, 4, 3, 5, 7, 6, 8],       # draw
])
def test_no_moves_after_game_over(engine, game, moves):
    state = play(engine, game, moves)
    assert state.status.is_game_over

    for pos in state.get_empty_cells():
        for player in Player:
            assert engine.apply_move(state, pos, player) is state


def test_moves_before_start_are_rejected(engine):
    state = GameState()
    assert state.status.kind == StatusKind.NOT_STARTED
    assert engine.apply_move(state, 0, Player.X) is state


def test_select_computer_move_only_in_progress(engine, game):
    state = play(engine, game, [0, 4, 1, 7, 2])
    assert engine.select_computer_move(state) is None

    vs_computer = engine.new_game(GameMode.WITH_COMPUTER, first_player=Player.O)
    assert engine.select_computer_move(vs_computer) in range(9)


def test_select_computer_move_only_for_computer(engine):
    state = engine.new_game(GameMode.WITH_COMPUTER, first_player=Player.X)
    assert engine.select_computer_move(state) is None
