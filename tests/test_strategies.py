"""Tests for move selection and minimax search."""

import random

import pytest
from othello_engine.ai import (
    Difficulty,
    GreedyStrategy,
    MinimaxSearch,
    MinimaxStrategy,
    RandomStrategy,
    get_strategy,
    rank_moves,
    select_move,
)
from othello_engine.core import (
    BLACK,
    WHITE,
    Move,
    apply_move,
    create_starting_board,
    generate_legal_moves,
    parse_board,
)


class LastChoice:
    """Randomness source that always picks the last option."""

    def choice(self, seq):
        return seq[-1]


def test_no_legal_move_returns_none():
    """Test every tier signals a pass with None."""
    board = parse_board("BBB....." + "." * 56)

    for difficulty in (1, 2, 3, 99):
        assert select_move(board, WHITE, difficulty) is None


def test_random_uses_injected_source():
    """Test the random tier draws from the supplied source."""
    board = create_starting_board()

    move = select_move(board, BLACK, Difficulty.EASY, rng=LastChoice())

    assert move == Move(5, 4, 1)


def test_random_is_reproducible_with_seed():
    """Test a seeded source gives the same sequence of choices."""
    board = create_starting_board()
    first = RandomStrategy(random.Random(7))
    second = RandomStrategy(random.Random(7))

    picks_a = [first.select(board, BLACK) for _ in range(10)]
    picks_b = [second.select(board, BLACK) for _ in range(10)]

    assert picks_a == picks_b
    assert all(move in generate_legal_moves(board, BLACK) for move in picks_a)


def test_strategy_for_difficulty():
    """Test tier mapping and the greedy fallback."""
    assert isinstance(get_strategy(1), RandomStrategy)
    assert isinstance(get_strategy(2), GreedyStrategy)
    assert isinstance(get_strategy(3), MinimaxStrategy)
    assert isinstance(get_strategy(0), GreedyStrategy)
    assert isinstance(get_strategy(4), GreedyStrategy)
    assert isinstance(get_strategy(-1), GreedyStrategy)


def test_invalid_difficulty_plays_greedy(edge_trap_board):
    """Test an unknown difficulty behaves exactly like the greedy tier."""
    assert select_move(edge_trap_board, BLACK, 7) == select_move(edge_trap_board, BLACK, 2)


def test_opening_tie_break():
    """Test symmetric opening moves resolve to the first in row-major order."""
    board = create_starting_board()

    assert select_move(board, BLACK, Difficulty.MEDIUM) == Move(2, 3, 1)
    assert select_move(board, BLACK, Difficulty.HARD) == Move(2, 3, 1)
    assert select_move(board, WHITE, Difficulty.MEDIUM) == Move(2, 4, 1)


def test_greedy_takes_corner():
    """Test the greedy tier prefers the corner capture."""
    board = parse_board(
        """
        .WB.....
        ........
        ....WB..
        ........
        ........
        ........
        ........
        ........
        """
    )

    assert GreedyStrategy().select(board, BLACK) == Move(0, 0, 1)


def test_greedy_vs_minimax(edge_trap_board):
    """Test greedy walks into the corner trap and minimax avoids it."""
    board = edge_trap_board
    trap = Move(0, 2, 1)
    safe = Move(0, 6, 1)

    assert generate_legal_moves(board, BLACK) == [trap, safe]

    # After the trap move White can take (0,0)
    after_trap = apply_move(board, trap, BLACK)
    assert Move(0, 0, 4) in generate_legal_moves(after_trap, WHITE)

    assert rank_moves(board, BLACK) == [(trap, -210), (safe, -225)]
    assert select_move(board, BLACK, Difficulty.MEDIUM) == trap
    assert select_move(board, BLACK, Difficulty.HARD) == safe


def test_minimax_scores_with_pass(edge_trap_board):
    """Test search values, including a forced White pass in the safe line."""
    search = MinimaxSearch()

    move, score = search.choose(edge_trap_board, BLACK)

    assert move == Move(0, 6, 1)
    assert score == -390
    assert search.nodes > 0


def test_minimax_no_moves():
    """Test choose() reports a pass."""
    board = parse_board("BBB....." + "." * 56)

    assert MinimaxSearch().choose(board, WHITE) == (None, None)


def test_minimax_depth_validation():
    """Test the search needs at least one ply."""
    with pytest.raises(ValueError):
        MinimaxSearch(depth=0)


def test_pruning_matches_full_width_from_start():
    """Test alpha-beta gives the full-width result at depth 4 from the opening."""
    board = create_starting_board()
    pruned = MinimaxSearch(depth=4, pruning=True)
    full = MinimaxSearch(depth=4, pruning=False)

    assert pruned.choose(board, BLACK) == full.choose(board, BLACK)
    assert pruned.nodes <= full.nodes


@pytest.mark.parametrize("index", [8, 16, 24])
def test_pruning_matches_full_width(playout_positions, index):
    """Test alpha-beta never changes the chosen move or its score."""
    board, side = playout_positions[index]
    pruned = MinimaxSearch(depth=3, pruning=True)
    full = MinimaxSearch(depth=3, pruning=False)

    assert pruned.choose(board, side) == full.choose(board, side)
    assert pruned.nodes <= full.nodes


@pytest.mark.parametrize("depth", [1, 2])
def test_pruning_matches_full_width_shallow(playout_positions, depth):
    """Test shallow searches over many positions."""
    for board, side in playout_positions[::7]:
        pruned = MinimaxSearch(depth=depth, pruning=True)
        full = MinimaxSearch(depth=depth, pruning=False)
        assert pruned.choose(board, side) == full.choose(board, side)


def test_depth_one_equals_greedy(playout_positions):
    """Test a one-ply search picks the same move as the greedy tier."""
    for board, side in playout_positions[::5]:
        move, _ = MinimaxSearch(depth=1).choose(board, side)
        assert move == GreedyStrategy().select(board, side)


def test_select_move_leaves_board_unchanged(playout_positions):
    """Test selection never alters the caller's board."""
    board, side = playout_positions[10]
    before = board.cells

    for difficulty in (1, 2, 3):
        select_move(board, side, difficulty, rng=random.Random(0))

    assert board.cells == before


def test_rank_moves_is_stable():
    """Test equal scores keep row-major order."""
    ranked = rank_moves(create_starting_board(), BLACK)

    assert [move.position for move, _ in ranked] == [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert len({score for _, score in ranked}) == 1
