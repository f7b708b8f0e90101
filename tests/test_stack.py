import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.stack import BoundedStack, StackEmptyError, StackFullError


def test_new_stack_is_empty():
    stack = BoundedStack()
    assert stack.is_empty()
    assert not stack.is_full()
    assert len(stack) == 0
    assert stack.capacity == 100


def test_push_pop_is_lifo():
    stack = BoundedStack(capacity=5)
    for value in (1, 2, 3):
        stack.push(value)
    assert stack.pop() == 3
    assert stack.pop() == 2
    assert stack.pop() == 1
    assert stack.is_empty()


def test_top_does_not_remove():
    stack = BoundedStack(capacity=3)
    stack.push("a")
    stack.push("b")
    assert stack.top() == "b"
    assert len(stack) == 2


def test_pop_empty_raises():
    with pytest.raises(StackEmptyError):
        BoundedStack().pop()


def test_top_empty_raises():
    with pytest.raises(StackEmptyError):
        BoundedStack().top()


def test_push_full_raises():
    stack = BoundedStack(capacity=2)
    stack.push(1)
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(StackFullError):
        stack.push(3)
    assert stack.top() == 2


def test_bad_capacity_raises():
    with pytest.raises(ValueError):
        BoundedStack(capacity=0)


@given(st.lists(st.integers(), max_size=20))
def test_iteration_is_top_to_bottom(values):
    stack = BoundedStack(capacity=20)
    for value in values:
        stack.push(value)
    assert list(stack) == list(reversed(values))
    assert len(stack) == len(values)


@given(st.lists(st.integers(), min_size=1, max_size=20))
def test_pop_all_reverses_pushes(values):
    stack = BoundedStack(capacity=20)
    for value in values:
        stack.push(value)
    popped = [stack.pop() for _ in values]
    assert popped == list(reversed(values))
    assert stack.is_empty()