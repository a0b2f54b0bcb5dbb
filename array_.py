DEFAULT_SIZE = 10


class Array:
    def __init__(self, size=DEFAULT_SIZE):
        self.size = size if size > 0 else DEFAULT_SIZE
        self.index = 0
        self.elements = [None] * self.size

    def _resize(self):
        self.size *= 2
        self.elements.extend([None] * (self.size - len(self.elements)))

    def insert(self, data):
        if self.index >= self.size:
            self._resize()
        self.elements[self.index] = data
        self.index += 1

    def get(self, i):
        if i < 0 or i >= self.index:
            raise IndexError(f"Array index {i} out of range [0, {self.index})")
        return self.elements[i]

    def length(self):
        return self.index

    def contains(self, element, is_equal) -> bool:
        for i in range(self.index):
            if is_equal(self.elements[i], element):
                return True
        return False

    def to_list(self):
        return self.elements[:self.index]

    def __len__(self):
        return self.index

    def __iter__(self):
        for i in range(self.index):
            yield self.elements[i]
