import io

import pytest

from algoshelf.array_stack import BoundedStack, main


def test_push_pop_lifo():
    stack = BoundedStack(10)
    for value in (3, 4, 5):
        stack.push(value)
    assert stack.pop() == 5
    assert stack.pop() == 4
    assert len(stack) == 1


def test_peek_does_not_remove():
    stack = BoundedStack(5)
    stack.push(9)
    assert stack.peek() == 9
    assert len(stack) == 1


def test_empty_pop_and_peek_raise():
    stack = BoundedStack(5)
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_overflow():
    stack = BoundedStack(2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(OverflowError):
        stack.push(3)


def test_iter_is_top_to_bottom():
    stack = BoundedStack(5)
    for value in (1, 2, 3):
        stack.push(value)
    assert list(stack) == [3, 2, 1]


def test_update_counts_from_top():
    stack = BoundedStack(5)
    for value in (1, 2, 3):
        stack.push(value)
    stack.update(1, 30)
    stack.update(3, 10)
    assert list(stack) == [30, 2, 10]


@pytest.mark.parametrize("position", [0, 4, -1])
def test_update_out_of_range(position):
    stack = BoundedStack(5)
    for value in (1, 2, 3):
        stack.push(value)
    with pytest.raises(IndexError):
        stack.update(position, 0)


def test_main_displays_stack(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n5\n1\n7\n5\n2\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "7\n5\n" in out
    assert "Poped item is 7" in out


def test_main_reports_empty(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3\n0\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.count("Stack is empty") == 2