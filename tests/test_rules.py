"""Tests for game rules."""

import pytest
from othello_engine.core import (
    BLACK,
    EMPTY,
    WHITE,
    Board,
    IllegalMoveError,
    Move,
    apply_move,
    compute_flips,
    count_discs,
    create_starting_board,
    generate_legal_moves,
    get_game_result,
    get_winner,
    has_legal_move,
    is_legal_move,
    is_terminal,
    parse_board,
)


def test_opening_moves_black():
    """Test Black's four canonical opening moves."""
    board = create_starting_board()

    moves = generate_legal_moves(board, BLACK)

    assert [m.position for m in moves] == [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert all(m.flips == 1 for m in moves)


def test_opening_moves_white():
    """Test White's opening moves (row-major order)."""
    board = create_starting_board()

    moves = generate_legal_moves(board, WHITE)

    assert [m.position for m in moves] == [(2, 4), (3, 5), (4, 2), (5, 3)]


def test_compute_flips_single_direction():
    """Test flipping one disc in the opening."""
    board = create_starting_board()

    assert compute_flips(board, 2, 3, BLACK) == [(3, 3)]


def test_compute_flips_several_directions():
    """Test a placement that flips along E, SE and S at once."""
    board = parse_board(
        """
        .WB.....
        WW......
        B.B.....
        ........
        ........
        ........
        ........
        ........
        """
    )

    # Direction order is N, NE, E, SE, S, SW, W, NW
    assert compute_flips(board, 0, 0, BLACK) == [(0, 1), (1, 1), (1, 0)]


def test_compute_flips_long_run():
    """Test a run of several opposing discs flips entirely."""
    board = parse_board("BWWWW..." + "." * 56)

    assert compute_flips(board, 0, 5, BLACK) == [(0, 4), (0, 3), (0, 2), (0, 1)]


def test_unclosed_run_does_not_flip():
    """Test a run reaching an empty cell or the edge flips nothing."""
    board = parse_board(".WW.B..." + "." * 56)

    assert compute_flips(board, 0, 0, BLACK) == []
    assert compute_flips(board, 0, 3, BLACK) == []
    assert not is_legal_move(board, 0, 0, BLACK)


def test_compute_flips_occupied_cell():
    """Test an occupied target is never legal."""
    board = create_starting_board()

    assert compute_flips(board, 3, 3, BLACK) == []
    assert compute_flips(board, 3, 4, WHITE) == []


def test_compute_flips_out_of_bounds():
    """Test off-board positions are a programming error."""
    with pytest.raises(ValueError):
        compute_flips(create_starting_board(), 8, 8, BLACK)


def test_apply_move():
    """Test placing and flipping."""
    board = create_starting_board()

    next_board = apply_move(board, Move(2, 3, 1), BLACK)

    assert next_board.get(2, 3) == BLACK
    assert next_board.get(3, 3) == BLACK
    assert count_discs(next_board) == (4, 1)
    # Input board untouched
    assert board == create_starting_board()


def test_apply_move_occupied_cell():
    """Test placing on an occupied cell fails."""
    board = create_starting_board()

    with pytest.raises(IllegalMoveError) as excinfo:
        apply_move(board, Move(3, 3, 1), BLACK)

    assert excinfo.value.row == 3
    assert excinfo.value.side == BLACK
    assert board == create_starting_board()


def test_apply_move_without_flips():
    """Test placing where nothing flips fails."""
    board = create_starting_board()

    with pytest.raises(IllegalMoveError):
        apply_move(board, Move(0, 0, 0), BLACK)

    # IllegalMoveError is a ValueError
    with pytest.raises(ValueError):
        apply_move(board, Move(2, 2, 1), BLACK)

    assert board == create_starting_board()


def test_apply_move_recomputes_flips():
    """Test a move generated for another side is not trusted."""
    board = create_starting_board()
    white_move = generate_legal_moves(board, WHITE)[0]

    with pytest.raises(IllegalMoveError):
        apply_move(board, white_move, BLACK)


def test_legal_moves_are_consistent(playout_positions):
    """Test every generated move targets an empty cell and flips what it says."""
    for board, side in playout_positions:
        for move in generate_legal_moves(board, side):
            assert board.get(move.row, move.col) == EMPTY
            flips = compute_flips(board, move.row, move.col, side)
            assert flips
            assert len(flips) == move.flips


def test_disc_growth(playout_positions):
    """Test each move adds exactly one disc plus its flips to the mover."""
    for board, side in playout_positions:
        for move in generate_legal_moves(board, side):
            next_board = apply_move(board, move, side)

            assert next_board.total_discs == board.total_discs + 1
            assert next_board.count(side) == board.count(side) + 1 + move.flips


def test_legal_moves_do_not_mutate(playout_positions):
    """Test move generation leaves boards unchanged."""
    for board, side in playout_positions[:20]:
        before = board.cells
        generate_legal_moves(board, side)
        assert board.cells == before


def test_terminal_full_board():
    """Test a full board ends the game."""
    board = Board(cells=(BLACK,) * 32 + (WHITE,) * 32)

    assert is_terminal(board) is True


def test_terminal_no_moves():
    """Test neither side moving ends the game even with empty cells."""
    board = parse_board("BBB....." + "." * 56)

    assert is_terminal(board) is True
    assert not has_legal_move(board, BLACK)
    assert not has_legal_move(board, WHITE)


def test_non_terminal_one_side_blocked():
    """Test a position where only one side can move is not terminal."""
    # White has no move, Black can play (0,2)
    board = parse_board(".B.WBBBW" + "." * 56)

    assert not has_legal_move(board, WHITE)
    assert has_legal_move(board, BLACK)
    assert is_terminal(board) is False


def test_non_terminal_start():
    """Test the opening position is live."""
    assert is_terminal(create_starting_board()) is False
    assert get_game_result(create_starting_board()) is None


def test_winner_and_result():
    """Test final result reporting."""
    black_win = Board(cells=(BLACK,) * 40 + (WHITE,) * 24)
    draw = Board(cells=(BLACK,) * 32 + (WHITE,) * 32)
    white_win = parse_board("WWWWWW.W" + "." * 56)

    assert get_winner(black_win) == BLACK
    assert get_game_result(black_win) == "Black wins 40-24"
    assert get_winner(draw) is None
    assert get_game_result(draw) == "Draw 32-32"
    assert get_winner(white_win) == WHITE
    assert get_game_result(white_win) == "White wins 7-0"
