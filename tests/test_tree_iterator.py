import itertools
import logging
import unittest

from flat_tree import TreeIterator
from flat_tree.errors import InvalidIndexError, LeafHasNoChildrenError
from flat_tree.limits import UINT32


class TestTreeIterator(unittest.TestCase):
    def test_walk_from_leaf(self):
        it = TreeIterator()
        self.assertEqual(it.index, 0)
        self.assertEqual(it.parent(), 1)
        self.assertEqual(it.parent(), 3)
        self.assertEqual(it.parent(), 7)
        self.assertEqual(it.right_child(), 11)
        self.assertEqual(it.left_child(), 9)
        self.assertEqual(next(it), 13)
        self.assertEqual(it.left_span(), 12)

    def test_walk_from_non_leaf(self):
        it = TreeIterator(1)
        self.assertEqual(it.index, 1)
        self.assertEqual(it.parent(), 3)
        self.assertEqual(it.parent(), 7)
        self.assertEqual(it.right_child(), 11)
        self.assertEqual(it.left_child(), 9)
        self.assertEqual(next(it), 13)
        self.assertEqual(it.left_span(), 12)

    def test_iteration_walks_along_depth(self):
        self.assertEqual(list(itertools.islice(TreeIterator(0), 4)), [2, 4, 6, 8])
        self.assertEqual(list(itertools.islice(TreeIterator(1), 3)), [5, 9, 13])

    def test_prev(self):
        it = TreeIterator(13)
        self.assertEqual(it.prev(), 9)
        self.assertEqual(it.prev(), 5)
        self.assertEqual(it.prev(), 1)
        with self.assertRaises(InvalidIndexError):
            it.prev()
        self.assertEqual(it.index, 1)

    def test_sibling_uncle_and_spans(self):
        it = TreeIterator(0)
        self.assertEqual(it.sibling(), 2)
        self.assertEqual(it.uncle(), 5)
        self.assertEqual(it.seek(23), 23)
        self.assertEqual(it.right_span(), 30)
        it.seek(23)
        self.assertEqual(it.left_span(), 16)

    def test_accessors(self):
        it = TreeIterator(11)
        self.assertEqual((it.depth, it.offset), (2, 1))
        self.assertEqual(it.count, 7)
        self.assertFalse(it.is_leaf)
        self.assertTrue(it.is_right)
        self.assertFalse(it.is_left)
        it.seek(4)
        self.assertTrue(it.is_leaf)
        self.assertTrue(it.is_left)
        self.assertEqual(it.count, 1)

    def test_leaf_child_leaves_cursor_in_place(self):
        it = TreeIterator(4)
        with self.assertRaises(LeafHasNoChildrenError):
            it.left_child()
        with self.assertRaises(LeafHasNoChildrenError):
            it.right_child()
        self.assertEqual(it.index, 4)

    def test_bad_seek_leaves_cursor_in_place(self):
        it = TreeIterator(6, width=UINT32)
        with self.assertRaises(OverflowError):
            it.seek(2**32)
        with self.assertRaises(InvalidIndexError):
            it.seek(-1)
        self.assertEqual((it.index, it.depth, it.offset), (6, 0, 3))

    def test_moves_are_logged(self):
        it = TreeIterator(0)
        with self.assertLogs("flat_tree.iterator", level=logging.DEBUG) as logs:
            it.parent()
        self.assertIn("flat tree cursor at 1", logs.output[0])

    def test_repr(self):
        self.assertEqual(repr(TreeIterator(5)), "TreeIterator(index=5, depth=1, offset=1)")


if __name__ == "__main__":
    unittest.main()
