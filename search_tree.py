class TreeNode:
    def __init__(self, value):
        self.value = value
        self.left = None
        self.right = None

    def insert(self, value):
        if value < self.value:
            if self.left is None:
                self.left = TreeNode(value)
            else:
                self.left.insert(value)
        elif value > self.value:
            if self.right is None:
                self.right = TreeNode(value)
            else:
                self.right.insert(value)
        # Equal values are already in the tree; nothing to do


class BinarySearchTree:
    """Unbalanced binary search tree over totally ordered values, without duplicates."""

    def __init__(self):
        self.root = None

    def insert(self, value):
        if self.root is None:
            self.root = TreeNode(value)
        else:
            self.root.insert(value)

    def search(self, value) -> bool:
        return _search_node(self.root, value)

    def __contains__(self, value):
        return self.search(value)


def _search_node(node, value) -> bool:
    if node is None:
        return False
    if value < node.value:
        return _search_node(node.left, value)
    if value > node.value:
        return _search_node(node.right, value)
    return True
