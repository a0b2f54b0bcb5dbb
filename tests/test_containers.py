import pytest

from array_ import Array
from list_ import Stack
from utils import is_equal_long


class TestArray:
    """Growable array."""

    def test_insert_and_get(self):
        array = Array(2)
        for value in (10, 20, 30):
            array.insert(value)
        assert array.length() == 3
        assert len(array) == 3
        assert array.size == 4
        assert array.get(2) == 30
        assert list(array) == [10, 20, 30]
        assert array.to_list() == [10, 20, 30]

    @pytest.mark.parametrize("i", [-1, 3, 10])
    def test_get_out_of_range(self, i):
        array = Array(5)
        for value in (1, 2, 3):
            array.insert(value)
        with pytest.raises(IndexError):
            array.get(i)

    def test_contains(self):
        array = Array()
        array.insert(4)
        assert array.contains(4, is_equal_long)
        assert not array.contains(5, is_equal_long)

    def test_non_positive_size_falls_back_to_default(self):
        array = Array(0)
        array.insert(1)
        assert array.get(0) == 1


class TestStack:
    """Linked stack."""

    def test_lifo(self):
        stack = Stack()
        for value in (1, 2, 3):
            stack.push(value)
        assert len(stack) == 3
        assert stack.peek() == 3
        assert list(stack) == [3, 2, 1]
        assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
        assert stack.is_empty()

    def test_empty(self):
        stack = Stack()
        with pytest.raises(IndexError):
            stack.pop()
        with pytest.raises(IndexError):
            stack.peek()
