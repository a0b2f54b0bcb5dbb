def less_than(a, b) -> bool:
    """Strict ascending order, used by min-heaps."""
    return a < b


def greater_than(a, b) -> bool:
    """Strict descending order, used by max-heaps."""
    return a > b


def is_equal_long(a, b) -> bool:
    """Check if two integers are equal."""
    return a == b
