import pytest

from algobench.queens import EMPTY, QUEEN, count_solutions, format_board, is_safe, solve


def _empty(n):
    return [[EMPTY] * n for _ in range(n)]


def test_count_four():
    assert count_solutions(4) == 2


def test_count_eight():
    assert count_solutions(8) == 92


@pytest.mark.parametrize("n", [2, 3])
def test_no_solutions_for_two_and_three(n):
    assert list(solve(n)) == []


def test_one_queen():
    assert list(solve(1)) == [[[QUEEN]]]


@pytest.mark.parametrize("n", [4, 5, 6])
def test_every_solution_is_valid(n):
    for board in solve(n):
        positions = [(r, c) for r, line in enumerate(board) for c, cell in enumerate(line) if cell == QUEEN]
        assert len(positions) == n
        assert len({r for r, _ in positions}) == n
        assert len({c for _, c in positions}) == n
        assert len({r - c for r, c in positions}) == n
        assert len({r + c for r, c in positions}) == n


@pytest.mark.parametrize("n", [4, 6])
def test_solutions_are_distinct(n):
    boards = [format_board(board) for board in solve(n)]
    assert len(boards) == len(set(boards)) == count_solutions(n)


def test_first_solution_order_is_row_by_row_left_first():
    boards = list(solve(4))
    first_columns = [board[0].index(QUEEN) for board in boards]
    assert first_columns == sorted(first_columns)


def test_solve_rejects_negative():
    with pytest.raises(ValueError):
        list(solve(-1))


def test_is_safe_on_empty_board():
    board = _empty(4)
    assert all(is_safe(board, r, c) for r in range(4) for c in range(4))


def test_is_safe_detects_row_column_and_diagonals():
    board = _empty(5)
    board[2][2] = QUEEN
    assert not is_safe(board, 2, 0)
    assert not is_safe(board, 4, 2)
    assert not is_safe(board, 0, 0)
    assert not is_safe(board, 0, 4)
    assert not is_safe(board, 4, 0)
    assert not is_safe(board, 4, 4)
    assert is_safe(board, 0, 1)
    assert is_safe(board, 3, 0)


def test_format_board():
    assert format_board([[QUEEN, EMPTY], [EMPTY, QUEEN]]) == "Q 0\n0 Q"


def test_format_board_round_trip():
    for board in solve(5):
        text = format_board(board)
        assert [line.split(" ") for line in text.split("\n")] == board