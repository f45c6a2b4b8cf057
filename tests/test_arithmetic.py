import math

import pytest

from algobench.arithmetic import (
    bitwise_add,
    calculate,
    factorial,
    floyds_triangle,
    max_without_comparison,
    pascals_triangle,
    to_binary,
)


def test_calculate_multiply():
    assert calculate("*", 1.5, 4) == 6.0


@pytest.mark.parametrize("a,b", [(7.5, 2.5), (-3, 8), (0, 0), (1e6, -1e-3)])
def test_calculate_add_and_subtract_are_inverse(a, b):
    assert calculate("-", calculate("+", a, b), b) == pytest.approx(a)


@pytest.mark.parametrize("a,b", [(9, 3), (-2, 0.5), (1, 7)])
def test_calculate_divide_then_multiply(a, b):
    assert calculate("*", calculate("/", a, b), b) == pytest.approx(a)


def test_calculate_divide_by_zero_follows_float_rules():
    assert calculate("/", 1, 0) == math.inf
    assert calculate("/", -1, 0) == -math.inf
    assert math.isnan(calculate("/", 0, 0))


@pytest.mark.parametrize("op", ["%", "", "x", "++"])
def test_calculate_rejects_unknown_operator(op):
    with pytest.raises(ValueError, match="operator is not correct"):
        calculate(op, 1, 2)


@pytest.mark.parametrize("n", [0, -3])
def test_factorial_of_non_positive_is_one(n):
    assert factorial(n) == 1


@pytest.mark.parametrize("n", range(1, 25))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


@pytest.mark.parametrize("a,b", [(3, 9), (9, 3), (-4, -7), (0, 0), (-5, 5), (10**12, 1)])
def test_max_without_comparison(a, b):
    assert max_without_comparison(a, b) == max(a, b)


@pytest.mark.parametrize("a,b", [(0, 0), (13, 29), (-13, 29), (-100, -23), (1000, -1)])
def test_bitwise_add_small(a, b):
    assert bitwise_add(a, b) == a + b


def test_bitwise_add_wraps_like_32_bit():
    assert bitwise_add(2**31 - 1, 1) == -(2**31)


@pytest.mark.parametrize("n", [1, 2, 5, 255, 256, 1023, 2**40 + 3])
def test_to_binary_round_trip(n):
    digits = to_binary(n)
    assert int(digits, 2) == n
    assert digits.startswith("1")


def test_to_binary_zero():
    assert to_binary(0) == "0"


def test_to_binary_rejects_negative():
    with pytest.raises(ValueError):
        to_binary(-1)


@pytest.mark.parametrize("rows", [0, 1, 4, 10])
def test_floyds_triangle(rows):
    triangle = floyds_triangle(rows)
    assert [len(row) for row in triangle] == list(range(1, rows + 1))
    flat = [value for row in triangle for value in row]
    assert flat == list(range(1, len(flat) + 1))


@pytest.mark.parametrize("rows", [0, 1, 2, 8, 15])
def test_pascals_triangle_matches_binomials(rows):
    triangle = pascals_triangle(rows)
    assert len(triangle) == rows
    for index, row in enumerate(triangle):
        assert row == [math.comb(index, k) for k in range(index + 1)]
        assert sum(row) == 2**index