"""The n-queens puzzle solved by backtracking."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

QUEEN = "Q"
EMPTY = "0"

_DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def is_safe(board: Sequence[Sequence[str]], row: int, col: int) -> bool:
    """Whether a queen at ``(row, col)`` is attacked by none already on the board."""
    size = len(board)
    if QUEEN in board[row]:
        return False
    if any(line[col] == QUEEN for line in board):
        return False
    for step_row, step_col in _DIAGONALS:
        r, c = row, col
        while 0 <= r < size and 0 <= c < size:
            if board[r][c] == QUEEN:
                return False
            r += step_row
            c += step_col
    return True


def _place(board: list[list[str]], row: int) -> Iterator[list[list[str]]]:
    if row == len(board):
        yield [line[:] for line in board]
        return
    for col in range(len(board)):
        if is_safe(board, row, col):
            board[row][col] = QUEEN
            yield from _place(board, row + 1)
            board[row][col] = EMPTY


def solve(n: int) -> Iterator[list[list[str]]]:
    """Yield every placement of ``n`` non-attacking queens on an ``n`` by ``n`` board.

    Queens are placed row by row, trying columns from left to right.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    board = [[EMPTY] * n for _ in range(n)]
    yield from _place(board, 0)


def count_solutions(n: int) -> int:
    """Number of ways to place ``n`` non-attacking queens."""
    return sum(1 for _ in solve(n))


def format_board(board: Sequence[Sequence[str]]) -> str:
    """The board as text, one row per line, cells separated by spaces."""
    return "\n".join(" ".join(line) for line in board)