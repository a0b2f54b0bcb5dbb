class Element:
    def __init__(self, data, next_=None):
        self.data = data
        self.next = next_


class Stack:
    """LIFO stack over a singly-linked chain of Elements."""

    def __init__(self):
        self.head = None
        self.count = 0

    def push(self, data):
        self.head = Element(data, self.head)
        self.count += 1

    def pop(self):
        if self.head is None:
            raise IndexError("pop from an empty stack")
        data = self.head.data
        self.head = self.head.next
        self.count -= 1
        return data

    def peek(self):
        if self.head is None:
            raise IndexError("peek at an empty stack")
        return self.head.data

    def is_empty(self) -> bool:
        return self.head is None

    def __len__(self):
        return self.count

    def __iter__(self):
        iterator = self.head
        while iterator is not None:
            yield iterator.data
            iterator = iterator.next
