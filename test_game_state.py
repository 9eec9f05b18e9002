"""Tests for the game session, scoreboard and game modes."""

import pytest

import logic.game_state
from display.scoreboard import Scoreboard
from logic.ai_player import Difficulty
from logic.board import (
    EMPTY_BOARD,
    GameOutcome,
    GameStatus,
    Player,
    board_from_string,
    player_to_move,
)
from logic.config import GameConfig, GameMode
from logic.game_state import GameState
from logic.move_validator import IllegalMove, apply_move
from logic.win_checker import evaluate


def play(state, *indices):
    for index in indices:
        state.make_move(index)


# ==================== GAME STATE ====================

def test_new_game():
    state = GameState()

    assert state.board == EMPTY_BOARD
    assert state.current_player == Player.X == GameConfig.FIRST_PLAYER
    assert state.moves == []
    assert not state.is_game_over
    assert state.get_empty_cells() == list(range(9))


def test_turns_alternate():
    state = GameState()

    first = state.make_move(4)
    assert first.player == Player.X
    assert first.move_number == 0
    assert state.current_player == Player.O

    second = state.make_move(0)
    assert second.player == Player.O
    assert second.move_number == 1
    assert state.current_player == Player.X
    assert state.board == board_from_string("O...X....")


def test_illegal_move_leaves_state_unchanged():
    state = GameState()
    state.make_move(4)

    with pytest.raises(IllegalMove):
        state.make_move(4)

    assert state.current_player == Player.O
    assert len(state.moves) == 1
    assert state.board == board_from_string("....X....")


def test_win_ends_game():
    state = GameState()
    play(state, 0, 3, 1, 4, 2)

    assert state.is_game_over
    assert state.winner == Player.X
    assert state.outcome.line == (0, 1, 2)
    # Winner stays as current player
    assert state.current_player == Player.X

    with pytest.raises(IllegalMove):
        state.make_move(8)


def test_draw_ends_game():
    state = GameState()
    # X O X
    # X O O
    # O X X
    play(state, 0, 1, 2, 4, 3, 5, 7, 6, 8)

    assert state.is_game_over
    assert state.outcome.status == GameStatus.DRAW
    assert state.winner is None


def test_listeners_see_moves_and_resets():
    events = []
    state = GameState()
    state.subscribe(lambda s, move: events.append(move))

    play(state, 4, 0)
    state.reset()

    assert [m.index if m else None for m in events] == [4, 0, None]
    assert state.board == EMPTY_BOARD
    assert state.current_player == Player.X
    assert state.outcome == GameOutcome.in_progress()


def test_unsubscribe():
    events = []
    state = GameState()
    listener = lambda s, move: events.append(move)
    state.subscribe(listener)
    state.unsubscribe(listener)

    state.make_move(0)

    assert events == []


def test_listener_not_called_for_illegal_move():
    events = []
    state = GameState()
    state.make_move(0)
    state.subscribe(lambda s, move: events.append(move))

    with pytest.raises(IllegalMove):
        state.make_move(0)

    assert events == []


def test_copy_is_independent():
    state = GameState()
    state.make_move(4)

    clone = state.copy()
    clone.make_move(0)

    assert state.board == board_from_string("....X....")
    assert len(state.moves) == 1
    assert clone.board == board_from_string("O...X....")


def test_session_uses_the_rules_engine():
    # The session applies and scores moves with the same functions as the AI
    assert logic.game_state.apply_move is apply_move
    assert logic.game_state.evaluate is evaluate

    state = GameState()
    play(state, 0, 3, 1, 4, 2)
    assert state.board == apply_move(board_from_string("XX.OO...."), 2, Player.X)
    assert state.outcome == evaluate(state.board)


def test_board_from_string():
    board = board_from_string("xo.-X O..")
    assert board == (Player.X, Player.O, None, None, Player.X, None, Player.O, None, None)

    with pytest.raises(ValueError):
        board_from_string("XO")


def test_player_to_move():
    assert player_to_move(EMPTY_BOARD) == Player.X
    assert player_to_move(board_from_string("X........")) == Player.O
    assert player_to_move(board_from_string("XO.......")) == Player.X


# ==================== SCOREBOARD ====================

def test_scoreboard_records_outcomes():
    board = Scoreboard()

    board.record(GameOutcome.win(Player.X, (0, 1, 2)))
    board.record(GameOutcome.win(Player.O, (0, 4, 8)))
    board.record(GameOutcome.win(Player.O, (2, 4, 6)))
    board.record(GameOutcome.draw())
    board.record(GameOutcome.in_progress())

    assert (board.x, board.o, board.draws) == (1, 2, 1)
    assert board.summary() == "X: 1  O: 2  Draws: 1"

    board.reset()
    assert (board.x, board.o, board.draws) == (0, 0, 0)


def test_scoreboard_counts_each_finished_game_once():
    scores = Scoreboard()
    state = GameState()
    state.subscribe(scores.on_game_event)

    play(state, 0, 3, 1, 4, 2)
    state.reset()
    play(state, 0, 3, 1, 4, 8, 5)
    state.reset()

    assert (scores.x, scores.o, scores.draws) == (1, 1, 0)


# ==================== GAME MODES ====================

def test_game_mode_difficulty():
    assert GameMode.PVP.difficulty is None
    assert GameMode.PVC_EASY.difficulty == Difficulty.EASY
    assert GameMode.PVC_HARD.difficulty == Difficulty.HARD


@pytest.mark.parametrize("text, mode", [
    ("pvp", GameMode.PVP),
    ("pvc-easy", GameMode.PVC_EASY),
    ("PVC-HARD", GameMode.PVC_HARD),
    ("pvc_hard", GameMode.PVC_HARD),
])
def test_game_mode_from_string(text, mode):
    assert GameMode.from_string(text) == mode


def test_unknown_game_mode():
    with pytest.raises(ValueError):
        GameMode.from_string("online")
