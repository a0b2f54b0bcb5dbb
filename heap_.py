from typing import Callable, Generic, Iterable, List, Optional, TypeVar

from logger import get_logger
from utils import greater_than, less_than

T = TypeVar("T")

logger = get_logger(__name__)


class Heap(Generic[T]):
    """
    Binary heap ordered by a strict predicate.

    ``order(a, b)`` is true when ``a`` must sit above ``b``. Elements live in
    ``data[1:]``; ``data[0]`` is an unused slot so that the parent of ``i`` is
    ``i // 2`` and its children are ``2 * i`` and ``2 * i + 1``.

    The heap is its own iterator: each ``next()`` removes and returns the
    most preferred element, and the sequence ends when the heap is empty.
    """

    def __init__(self, order: Callable[[T, T], bool]):
        self.order = order
        self.count = 0
        self.data: List[Optional[T]] = [None]

    @classmethod
    def new_min(cls) -> "Heap[T]":
        return cls(less_than)

    @classmethod
    def new_max(cls) -> "Heap[T]":
        return cls(greater_than)

    def __len__(self):
        return self.count

    def length(self):
        return self.count

    def is_empty(self) -> bool:
        return self.count == 0

    def add(self, value: T):
        self.data.append(value)
        self.count += 1
        self._sift_up(self.count)

    def __iter__(self):
        return self

    def __next__(self) -> T:
        if self.count == 0:
            raise StopIteration

        top = self.data[1]
        last = self.data.pop()
        self.count -= 1
        if self.count > 0:
            self.data[1] = last
            self._sift_down(1)
        return top

    # Index helpers for the 1-based layout
    def _parent(self, i):
        return i // 2

    def _left(self, i):
        return 2 * i

    def _right(self, i):
        return 2 * i + 1

    # Pick the child that should move up, per the ordering
    def _preferred_child(self, i):
        left = self._left(i)
        right = self._right(i)
        if right > self.count or self.order(self.data[left], self.data[right]):
            return left
        return right

    # Helper function to maintain heap property from child to parent
    def _sift_up(self, i):
        while i > 1:
            parent = self._parent(i)
            if not self.order(self.data[i], self.data[parent]):
                break
            self.data[i], self.data[parent] = self.data[parent], self.data[i]
            i = parent

    # Helper function to maintain heap property from parent to child
    def _sift_down(self, i):
        while self._left(i) <= self.count:
            child = self._preferred_child(i)
            if not self.order(self.data[child], self.data[i]):
                break
            self.data[i], self.data[child] = self.data[child], self.data[i]
            i = child


def min_heap() -> Heap:
    return Heap.new_min()


def max_heap() -> Heap:
    return Heap.new_max()


def heap_sort(values: Iterable[T], order: Optional[Callable[[T, T], bool]] = None) -> List[T]:
    """
    Sorts values by draining a heap.

    :param values: Any iterable, including numpy arrays.
    :param order: Strict ordering predicate; ascending when omitted.
    :return: A new list, first element being the most preferred.
    """
    heap = Heap(order if order is not None else less_than)
    for value in values:
        heap.add(value)
    logger.debug(f"Draining heap of {len(heap)} elements")
    return list(heap)
