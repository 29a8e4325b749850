"""Stateful cursor over a flat tree."""
from __future__ import annotations

import logging
from typing import Optional

from . import tree_math
from .errors import InvalidIndexError
from .limits import DEFAULT_WIDTH, IndexWidth

logger = logging.getLogger(__name__)


class TreeIterator:
    """Cursor holding one flat index, moved around by navigation calls.

    Navigation methods move the cursor and return the new index. Iterating
    walks right along the current depth::

        it = TreeIterator(0)
        it.parent()        # 1
        it.parent()        # 3
        next(it)           # 11, the next depth-2 node

    Instances are not safe to share between threads.
    """

    def __init__(self, index: int = 0, *, width: Optional[IndexWidth] = DEFAULT_WIDTH):
        self._width = width
        self._index = 0
        self._depth = 0
        self._offset = 0
        self.seek(index)

    def __repr__(self) -> str:
        return f"TreeIterator(index={self._index}, depth={self._depth}, offset={self._offset})"

    def __iter__(self) -> "TreeIterator":
        return self

    def __next__(self) -> int:
        return self.seek(tree_math.index(self._depth, self._offset + 1, width=self._width))

    @property
    def index(self) -> int:
        return self._index

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def count(self) -> int:
        """Number of nodes in the subtree under the cursor."""
        return tree_math.count_with_depth(self._index, self._depth, width=self._width)

    @property
    def is_leaf(self) -> bool:
        return self._depth == 0

    @property
    def is_left(self) -> bool:
        return self._offset & 0x01 == 0

    @property
    def is_right(self) -> bool:
        return not self.is_left

    def seek(self, index: int) -> int:
        """Reposition the cursor at ``index``."""
        d = tree_math.depth(index, width=self._width)
        self._index = index
        self._depth = d
        self._offset = tree_math.offset_with_depth(index, d, width=self._width)
        logger.debug("flat tree cursor at %d (depth=%d offset=%d)", index, d, self._offset)
        return self._index

    def prev(self) -> int:
        """Move to the previous node at the same depth."""
        if self._offset == 0:
            raise InvalidIndexError(f"node {self._index} is the leftmost node at depth {self._depth}")
        return self.seek(tree_math.index(self._depth, self._offset - 1, width=self._width))

    def parent(self) -> int:
        return self.seek(tree_math.parent_with_depth(self._index, self._depth, width=self._width))

    def sibling(self) -> int:
        return self.seek(tree_math.sibling_with_depth(self._index, self._depth, width=self._width))

    def uncle(self) -> int:
        return self.seek(tree_math.uncle_with_depth(self._index, self._depth, width=self._width))

    def left_child(self) -> int:
        """Move to the left child. A leaf raises LeafHasNoChildrenError and stays put."""
        return self.seek(tree_math.left_child_with_depth(self._index, self._depth, width=self._width))

    def right_child(self) -> int:
        """Move to the right child. A leaf raises LeafHasNoChildrenError and stays put."""
        return self.seek(tree_math.right_child_with_depth(self._index, self._depth, width=self._width))

    def left_span(self) -> int:
        return self.seek(tree_math.left_span_with_depth(self._index, self._depth, width=self._width))

    def right_span(self) -> int:
        return self.seek(tree_math.right_span_with_depth(self._index, self._depth, width=self._width))
