import pytest

from leetsolve.min_stack import MinStack


def test_sequence_from_example():
    stack = MinStack()
    stack.push(-2)
    stack.push(0)
    stack.push(-3)
    assert stack.get_min() == -3
    stack.pop()
    assert stack.top() == 0
    assert stack.get_min() == -2


def test_min_restored_after_pops():
    stack = MinStack()
    for value in [5, 3, 7, 1, 4]:
        stack.push(value)
    assert stack.get_min() == 1
    stack.pop()
    stack.pop()
    assert stack.get_min() == 3
    assert stack.top() == 7
    assert len(stack) == 3


def test_duplicate_minimum():
    stack = MinStack()
    stack.push(2)
    stack.push(2)
    stack.pop()
    assert stack.get_min() == 2


def test_pop_on_empty_stack_raises():
    stack = MinStack()
    with pytest.raises(IndexError):
        stack.pop()
    assert len(stack) == 0
    stack.push(4)
    assert stack.top() == 4
    assert stack.get_min() == 4


def test_top_on_empty_stack_raises():
    stack = MinStack()
    with pytest.raises(IndexError):
        stack.top()
    assert len(stack) == 0
    stack.push(-1)
    assert stack.top() == -1


def test_get_min_on_empty_stack_raises():
    stack = MinStack()
    with pytest.raises(IndexError):
        stack.get_min()
    assert len(stack) == 0
    stack.push(6)
    stack.push(3)
    assert stack.get_min() == 3


def test_stack_emptied_again_raises():
    stack = MinStack()
    stack.push(1)
    stack.pop()
    assert len(stack) == 0
    with pytest.raises(IndexError):
        stack.top()