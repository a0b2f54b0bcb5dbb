import pytest

from search_tree import BinarySearchTree


class TestBinarySearchTree:
    """Insertion and lookup."""

    def test_empty_tree(self):
        bst = BinarySearchTree()
        assert bst.root is None
        assert not bst.search(1)

    def test_insert_and_search(self):
        bst = BinarySearchTree()
        for value in (5, 3, 7, 2, 4):
            bst.insert(value)

        for value in (5, 3, 7, 2, 4):
            assert bst.search(value)
        assert not bst.search(1)
        assert not bst.search(6)

    def test_shape_follows_insertion_order(self):
        bst = BinarySearchTree()
        for value in (5, 3, 7, 2, 4):
            bst.insert(value)
        assert bst.root.value == 5
        assert bst.root.left.value == 3
        assert bst.root.right.value == 7
        assert bst.root.left.left.value == 2
        assert bst.root.left.right.value == 4

    def test_insert_duplicate(self):
        bst = BinarySearchTree()
        bst.insert(1)
        bst.insert(1)

        assert bst.search(1)
        assert bst.root is not None
        assert bst.root.left is None
        assert bst.root.right is None

    def test_contains(self):
        bst = BinarySearchTree()
        for word in ("m", "c", "x"):
            bst.insert(word)
        assert "c" in bst
        assert "a" not in bst

    def test_incomparable_values(self):
        bst = BinarySearchTree()
        bst.insert(1)
        with pytest.raises(TypeError):
            bst.insert("one")
