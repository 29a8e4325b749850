"""Array-based binary tree arithmetic ("flat tree").

Nodes of a complete, unbounded binary tree are laid out in a single array:
leaves occupy the even indices and every parent sits between its two
children, so the subtree rooted at depth d spans 2**(d+1) - 1 consecutive
slots::

    depth 2:          3
    depth 1:    1           5
    depth 0: 0     2     4     6

    index(depth, offset) = (2 * offset + 1) * 2**depth - 1

Every function takes a keyword-only ``width`` (an ``IndexWidth``) that bounds
inputs and results; pass ``width=None`` to work with unbounded integers.
The ``*_with_depth`` variants trust the caller-supplied depth of ``i`` and
skip recomputing it.
"""
from __future__ import annotations

from typing import Iterator, Optional

from .errors import IndexOverflowError, InvalidIndexError, LeafHasNoChildrenError
from .limits import DEFAULT_WIDTH, IndexWidth


def _require_int(value: int, what: str, width: Optional[IndexWidth]) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidIndexError(f"{what} must be an int, got {type(value).__name__}")
    if value < 0:
        raise InvalidIndexError(f"{what} must be non-negative, got {value}")
    if width is not None:
        width.check(value, what)
    return value


def _require_depth(value: int, width: Optional[IndexWidth]) -> int:
    _require_int(value, "depth", None)
    if width is not None and value > width.max_depth:
        raise IndexOverflowError("depth", value, width.bits)
    return value


def _checked(value: int, what: str, width: Optional[IndexWidth]) -> int:
    if width is None:
        return value
    return width.check(value, what)


def _index(depth: int, offset: int, width: Optional[IndexWidth]) -> int:
    return _checked((offset << (depth + 1)) | ((1 << depth) - 1), "index", width)


def _depth(i: int) -> int:
    # Trailing one bits of i, i.e. the power of two dividing i + 1.
    d = 0
    while i & 0x01 == 1:
        i >>= 1
        d += 1
    return d


def _offset(i: int, depth: int) -> int:
    if i & 0x01 == 0:
        return i >> 1
    return i >> (depth + 1)


# Indexer


def index(depth: int, offset: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> int:
    """Flat index of the node at ``(depth, offset)``.

    Parameters:
        depth: Distance from the leaf level (0 = leaf).
        offset: Left-to-right rank among the nodes at ``depth``.
        width: Integer width the result must fit into.

    Returns:
        ``(2 * offset + 1) * 2**depth - 1``.

    Raises:
        InvalidIndexError: If either argument is negative or not an int.
        IndexOverflowError: If the result does not fit in ``width``.
    """
    _require_depth(depth, width)
    _require_int(offset, "offset", width)
    return _index(depth, offset, width)


def depth(i: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> int:
    """Depth of node ``i``; leaves (even indices) are depth 0."""
    return _depth(_require_int(i, "index", width))


def offset_with_depth(i: int, depth: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> int:
    _require_int(i, "index", width)
    _require_depth(depth, width)
    return _offset(i, depth)


def offset(i: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> int:
    """Left-to-right rank of node ``i`` among the nodes sharing its depth."""
    _require_int(i, "index", width)
    return _offset(i, _depth(i))


def is_leaf(i: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> bool:
    return _require_int(i, "index", width) & 0x01 == 0


# Navigator


def parent_with_depth(i: int, depth: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> int:
    _require_int(i, "index", width)
    _require_depth(depth, width)
    return _index(depth + 1, _offset(i, depth) >> 1, width)


def parent(i: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> int:
    """Parent of node ``i``.

    The tree is unbounded upward so every node has a parent; callers that
    model a finite tree must stop at their own root.
    """
    return parent_with_depth(i, _depth(_require_int(i, "index", width)), width=width)


def sibling_with_depth(i: int, depth: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> int:
    _require_int(i, "index", width)
    _require_depth(depth, width)
    return _index(depth, _offset(i, depth) ^ 1, width)


def sibling(i: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> int:
    """The other child of ``parent(i)``."""
    return sibling_with_depth(i, _depth(_require_int(i, "index", width)), width=width)


def uncle_with_depth(i: int, depth: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> int:
    p = parent_with_depth(i, depth, width=width)
    return sibling_with_depth(p, depth + 1, width=width)


def uncle(i: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> int:
    """Sibling of the parent of ``i``."""
    return uncle_with_depth(i, _depth(_require_int(i, "index", width)), width=width)


def children_with_depth(
    i: int, depth: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH
) -> tuple[int, int]:
    _require_int(i, "index", width)
    _require_depth(depth, width)
    if depth == 0:
        raise LeafHasNoChildrenError(i)
    o = _offset(i, depth) << 1
    return _index(depth - 1, o, width), _index(depth - 1, o + 1, width)


def children(i: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> tuple[int, int]:
    """Left and right child of node ``i``.

    Raises:
        LeafHasNoChildrenError: If ``i`` is a leaf.
    """
    return children_with_depth(i, _depth(_require_int(i, "index", width)), width=width)


def left_child_with_depth(i: int, depth: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> int:
    _require_int(i, "index", width)
    _require_depth(depth, width)
    if depth == 0:
        raise LeafHasNoChildrenError(i)
    return _index(depth - 1, _offset(i, depth) << 1, width)


def left_child(i: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> int:
    return left_child_with_depth(i, _depth(_require_int(i, "index", width)), width=width)


def right_child_with_depth(i: int, depth: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> int:
    _require_int(i, "index", width)
    _require_depth(depth, width)
    if depth == 0:
        raise LeafHasNoChildrenError(i)
    return _index(depth - 1, (_offset(i, depth) << 1) + 1, width)


def right_child(i: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> int:
    return right_child_with_depth(i, _depth(_require_int(i, "index", width)), width=width)


def ancestor(i: int, depth: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> int:
    """Node at ``depth`` whose subtree contains ``i``.

    ``ancestor(i, depth(i)) == i``; each extra level is one ``parent`` step.

    Raises:
        InvalidIndexError: If ``depth`` is below the depth of ``i``.
    """
    _require_int(i, "index", width)
    _require_depth(depth, width)
    own = _depth(i)
    if depth < own:
        raise InvalidIndexError(f"node {i} is at depth {own}, cannot have an ancestor at depth {depth}")
    return _index(depth, _offset(i, own) >> (depth - own), width)


# Spanner


def left_span_with_depth(i: int, depth: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> int:
    _require_int(i, "index", width)
    _require_depth(depth, width)
    if depth == 0:
        return i
    return _checked(_offset(i, depth) * (2 << depth), "index", width)


def left_span(i: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> int:
    """Leftmost leaf under the subtree rooted at ``i``."""
    return left_span_with_depth(i, _depth(_require_int(i, "index", width)), width=width)


def right_span_with_depth(i: int, depth: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> int:
    _require_int(i, "index", width)
    _require_depth(depth, width)
    if depth == 0:
        return i
    return _checked((_offset(i, depth) + 1) * (2 << depth) - 2, "index", width)


def right_span(i: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> int:
    """Rightmost leaf under the subtree rooted at ``i``."""
    return right_span_with_depth(i, _depth(_require_int(i, "index", width)), width=width)


def spans_with_depth(
    i: int, depth: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH
) -> tuple[int, int]:
    return (
        left_span_with_depth(i, depth, width=width),
        right_span_with_depth(i, depth, width=width),
    )


def spans(i: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> tuple[int, int]:
    """``(left_span(i), right_span(i))``; a leaf spans only itself."""
    return spans_with_depth(i, _depth(_require_int(i, "index", width)), width=width)


def count_with_depth(i: int, depth: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> int:
    _require_int(i, "index", width)
    _require_depth(depth, width)
    return _checked((2 << depth) - 1, "count", width)


def count(i: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> int:
    """Number of nodes (internal and leaves) in the perfect subtree rooted at ``i``.

    Equal to ``right_span(i) - left_span(i) + 1``.
    """
    return count_with_depth(i, _depth(_require_int(i, "index", width)), width=width)


# RootEnumerator


def _full_root_blocks(leaf_count: int) -> Iterator[tuple[int, int]]:
    # Binary-counter decomposition, most significant bit first:
    # yields (depth, first leaf offset) for each set bit of leaf_count.
    remaining = leaf_count
    start = 0
    while remaining:
        k = remaining.bit_length() - 1
        yield k, start
        start += 1 << k
        remaining -= 1 << k


def _require_leaf_count(leaf_count: int, width: Optional[IndexWidth]) -> int:
    _require_int(leaf_count, "leaf count", None)
    if width is not None and leaf_count > width.max_leaf_count:
        raise IndexOverflowError("leaf count", leaf_count, width.bits)
    return leaf_count


def iter_full_roots(leaf_count: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> Iterator[int]:
    """Lazily yield the full roots covering leaves ``[0, leaf_count)``.

    See ``full_roots``. Arguments are validated immediately, not on first
    iteration.
    """
    _require_leaf_count(leaf_count, width)
    return (_index(k, start >> k, width) for k, start in _full_root_blocks(leaf_count))


def full_roots(leaf_count: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> list[int]:
    """Roots of the perfect subtrees that exactly tile leaves ``[0, leaf_count)``.

    Each set bit 2**k of ``leaf_count`` contributes one depth-k root, highest
    bit first, so the roots are ordered left to right. This is the forest an
    append-only Merkle tree holds after ``leaf_count`` appends: appending a
    leaf merges equal-sized neighbours the way a binary counter carries.

    Parameters:
        leaf_count: Number of leaves already present.
        width: Integer width the leaf indices must fit into.

    Returns:
        Flat indices of the roots, left to right; empty for ``leaf_count == 0``.

    Example:
        ``full_roots(5) == [3, 8]``: a depth-2 root over leaves 0..3 and the
        single leaf 4 (flat index 8).
    """
    return list(iter_full_roots(leaf_count, width=width))


def full_roots_before(i: int, *, width: Optional[IndexWidth] = DEFAULT_WIDTH) -> list[int]:
    """Full roots covering every leaf strictly left of the leaf at flat index ``i``.

    ``full_roots_before(8) == [3]`` since the subtree at 3 spans 0..6 while
    the one at 7 would need leaf 8.

    Raises:
        InvalidIndexError: If ``i`` is not a leaf (odd) index.
    """
    _require_int(i, "index", width)
    if i & 0x01 == 1:
        raise InvalidIndexError(f"full roots can only be looked up for leaf indices, got {i}")
    return full_roots(i >> 1, width=width)
