import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.recursion import Move, factorial, gcd, solve_n_queens, tower_of_hanoi


def test_factorial_base_cases():
    assert factorial(0) == 1
    assert factorial(1) == 1


def test_factorial_negative_is_one():
    assert factorial(-4) == 1


@given(st.integers(2, 60))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_gcd_example():
    assert gcd(98, 56) == 14


@given(st.integers(1, 10_000), st.integers(1, 10_000))
def test_gcd_divides_both(a, b):
    result = gcd(a, b)
    assert a % result == 0
    assert b % result == 0
    assert gcd(b, a) == result
    assert gcd(a // result, b // result) == 1


@given(st.integers(0, 10_000))
def test_gcd_with_zero(a):
    assert gcd(a, 0) == a


def _assert_valid_board(board, n):
    assert len(board) == n
    assert all(len(row) == n for row in board)
    assert all(sum(row) == 1 for row in board)
    queens = [(r, row.index(1)) for r, row in enumerate(board)]
    assert len({c for _, c in queens}) == n
    assert len({r - c for r, c in queens}) == n
    assert len({r + c for r, c in queens}) == n


@pytest.mark.parametrize("n", [4, 5, 6, 7, 8])
def test_n_queens_solutions_are_valid(n):
    board = solve_n_queens(n)
    _assert_valid_board(board, n)


def test_n_queens_single():
    assert solve_n_queens(1) == [[1]]


def test_n_queens_empty_board():
    assert solve_n_queens(0) == []


@pytest.mark.parametrize("n", [2, 3])
def test_n_queens_impossible(n):
    assert solve_n_queens(n) is None


def test_n_queens_negative_raises():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def test_hanoi_first_move_text():
    moves = list(tower_of_hanoi(3, "A", "C", "B"))
    assert str(moves[0]) == "Move disk 1 from rod A to rod C"


def test_hanoi_zero_disks():
    assert list(tower_of_hanoi(0)) == []


def test_hanoi_largest_disk_moves_once():
    moves = list(tower_of_hanoi(4))
    largest = [move for move in moves if move.disk == 4]
    assert largest == [Move(4, "A", "C")]


@pytest.mark.parametrize("n", [1, 2, 3, 5, 7])
def test_hanoi_moves_are_legal_and_complete(n):
    rods = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    moves = list(tower_of_hanoi(n, "A", "C", "B"))
    assert len(moves) == 2**n - 1
    for move in moves:
        disk = rods[move.source].pop()
        assert disk == move.disk
        assert not rods[move.target] or rods[move.target][-1] > disk
        rods[move.target].append(disk)
    assert rods["C"] == list(range(n, 0, -1))
    assert rods["A"] == [] and rods["B"] == []