"""Tests for the random and minimax computer opponents."""

import random

import numpy as np
import pytest

from logic.ai_player import (
    WIN_SCORE,
    AIPlayer,
    Difficulty,
    MinimaxSearch,
    choose_optimal_move,
    choose_random_move,
    minimax_score,
)
from logic.board import (
    GameStatus,
    Player,
    board_from_string,
    get_empty_cells,
    new_board,
    player_to_move,
)
from logic.move_validator import apply_move
from logic.win_checker import evaluate


# Chi-squared critical values at p = 0.001
CHI2_CRITICAL = {8: 26.12, 3: 16.27}


def chi_squared(counts: np.ndarray) -> float:
    expected = counts.sum() / len(counts)
    return float(((counts - expected) ** 2 / expected).sum())


# ==================== RANDOM STRATEGY ====================

def test_random_move_on_full_board_is_none():
    assert choose_random_move(board_from_string("XOXXOOOXX")) is None


def test_random_move_is_always_an_empty_cell():
    rng = random.Random(7)
    board = board_from_string("XO.X.O...")
    for _ in range(200):
        assert choose_random_move(board, rng) in get_empty_cells(board)


def test_random_move_with_one_empty_cell():
    board = board_from_string("XOXXOOOX.")
    assert choose_random_move(board) == 8


def test_random_move_is_uniform_on_empty_board():
    rng = random.Random(1234)
    trials = 9000

    picks = [choose_random_move(new_board(), rng) for _ in range(trials)]
    counts = np.bincount(picks, minlength=9)

    assert counts.sum() == trials
    assert (counts > 0).all()
    assert chi_squared(counts) < CHI2_CRITICAL[8]


def test_random_move_is_uniform_over_remaining_cells():
    rng = random.Random(99)
    board = board_from_string("XOX.O.X..")
    empty = get_empty_cells(board)
    assert empty == [3, 5, 7, 8]

    picks = [choose_random_move(board, rng) for _ in range(4000)]
    counts = np.bincount(picks, minlength=9)

    # Never picks an occupied cell
    assert counts[[0, 1, 2, 4, 6]].sum() == 0
    assert chi_squared(counts[empty]) < CHI2_CRITICAL[3]


# ==================== MINIMAX SCORES ====================

def test_empty_board_is_a_draw_with_perfect_play():
    assert minimax_score(new_board(), 0, True, Player.O) == 0


def test_scores_prefer_fast_wins_and_slow_losses():
    won_by_o = board_from_string("OOOXX.X..")

    assert minimax_score(won_by_o, 0, False, Player.O) == WIN_SCORE
    assert minimax_score(won_by_o, 3, False, Player.O) == WIN_SCORE - 3
    assert minimax_score(won_by_o, 0, True, Player.X) == -WIN_SCORE
    assert minimax_score(won_by_o, 3, True, Player.X) == 3 - WIN_SCORE


def test_score_of_drawn_board_is_zero():
    assert minimax_score(board_from_string("XOXXOOOXX"), 0, True, Player.X) == 0


def test_minimax_score_does_not_modify_board():
    board = board_from_string("XO..X....")
    minimax_score(board, 0, True, Player.O)
    assert board == board_from_string("XO..X....")


# ==================== OPTIMAL STRATEGY ====================

def test_optimal_move_on_full_board_is_none():
    assert choose_optimal_move(board_from_string("XOXXOOOXX"), Player.O) is None


def test_empty_board_tie_break_picks_lowest_index():
    # Every opening draws, so the first cell wins the tie
    assert choose_optimal_move(new_board(), Player.X) == 0


def test_takes_immediate_win_over_blocking():
    # X X .
    # O O .
    # . . .
    board = board_from_string("XX.OO....")

    assert choose_optimal_move(board, Player.O) == 5
    assert choose_optimal_move(board, Player.X) == 2


def test_blocks_opponent_threat():
    # . O .
    # X X .
    # . . .
    board = board_from_string(".O.XX....")
    assert choose_optimal_move(board, Player.O) == 5


def test_completes_diagonal_for_win():
    # O X X
    # X O O
    # X . .
    board = board_from_string("OXXXOOX..")
    assert get_empty_cells(board) == [7, 8]
    assert choose_optimal_move(board, Player.O) == 8


def test_optimal_move_is_deterministic():
    board = board_from_string("X...O...X")
    first = choose_optimal_move(board, Player.O)
    assert all(choose_optimal_move(board, Player.O) == first for _ in range(3))


def test_answers_corner_opening_with_center():
    # Any reply other than the centre loses against a corner opening
    assert choose_optimal_move(board_from_string("X........"), Player.O) == 4


def test_search_counts_positions():
    search = MinimaxSearch(Player.O)
    search.best_move(board_from_string("XO..X...."))
    assert search.positions_evaluated > 0


def play_out_all(board, optimal, outcomes):
    """
    Play every possible game from board, with `optimal` choosing by minimax
    and the other side trying every legal move.
    """
    outcome = evaluate(board)
    if outcome.is_over:
        outcomes.append(outcome)
        return

    to_move = player_to_move(board)
    if to_move == optimal:
        move = choose_optimal_move(board, optimal)
        play_out_all(apply_move(board, move, optimal), optimal, outcomes)
    else:
        for index in get_empty_cells(board):
            play_out_all(apply_move(board, index, to_move), optimal, outcomes)


@pytest.mark.parametrize("optimal", [Player.X, Player.O])
def test_minimax_never_loses(optimal):
    outcomes = []
    play_out_all(new_board(), optimal, outcomes)

    assert outcomes
    assert all(o.status in (GameStatus.WIN, GameStatus.DRAW) for o in outcomes)
    assert all(o.winner in (None, optimal) for o in outcomes)
    # Weak opponent lines get punished
    assert any(o.winner == optimal for o in outcomes)


@pytest.mark.parametrize("text", [
    "XO.......",   # O answered the corner with an adjacent edge
    "X.......O",   # O answered the corner with the opposite corner
])
def test_minimax_converts_every_forced_win(text):
    board = board_from_string(text)
    assert player_to_move(board) == Player.X
    assert minimax_score(board, 0, True, Player.X) > 0

    outcomes = []
    play_out_all(board, Player.X, outcomes)

    assert outcomes
    assert all(o.winner == Player.X for o in outcomes)


def test_minimax_beats_random_opponent_or_draws():
    rng = random.Random(2024)
    for _ in range(10):
        board = new_board()
        while not evaluate(board).is_over:
            to_move = player_to_move(board)
            if to_move == Player.O:
                move = choose_optimal_move(board, Player.O)
            else:
                move = choose_random_move(board, rng)
            board = apply_move(board, move, to_move)
        assert evaluate(board).winner != Player.X


# ==================== AI PLAYER ====================

def test_ai_player_hard_blocks():
    ai = AIPlayer(Player.O, Difficulty.HARD, verbose=False)

    move = ai.get_move(board_from_string(".O.XX...."))

    assert move == 5
    assert ai.moves_evaluated > 0


def test_ai_player_easy_plays_empty_cell():
    ai = AIPlayer(Player.O, Difficulty.EASY, rng=random.Random(3), verbose=False)
    # X has one more mark, so it's O's turn
    board = board_from_string("X...X..O.")

    for _ in range(20):
        assert ai.get_move(board) in get_empty_cells(board)
    assert ai.moves_evaluated == 0


def test_ai_player_refuses_when_not_its_turn():
    ai = AIPlayer(Player.O, verbose=False)
    assert ai.get_move(new_board()) is None


def test_ai_player_prints_choice(capsys):
    ai = AIPlayer(Player.O, Difficulty.HARD)
    ai.get_move(board_from_string("X........"))

    out = capsys.readouterr().out
    assert "Best move: 4" in out
