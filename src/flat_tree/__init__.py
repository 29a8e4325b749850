"""flat-tree: map the nodes of a binary tree onto a flat array and navigate it."""

__version__ = "0.1.0"

from .errors import (  # noqa: E402
    FlatTreeError,
    IndexOverflowError,
    InvalidIndexError,
    LeafHasNoChildrenError,
)
from .iterator import TreeIterator  # noqa: E402
from .limits import DEFAULT_WIDTH, UINT32, UINT64, IndexWidth  # noqa: E402
from .tree_math import (  # noqa: E402
    ancestor,
    children,
    children_with_depth,
    count,
    count_with_depth,
    depth,
    full_roots,
    full_roots_before,
    index,
    is_leaf,
    iter_full_roots,
    left_child,
    left_child_with_depth,
    left_span,
    left_span_with_depth,
    offset,
    offset_with_depth,
    parent,
    parent_with_depth,
    right_child,
    right_child_with_depth,
    right_span,
    right_span_with_depth,
    sibling,
    sibling_with_depth,
    spans,
    spans_with_depth,
    uncle,
    uncle_with_depth,
)

__all__ = [
    "__version__",
    "DEFAULT_WIDTH",
    "UINT32",
    "UINT64",
    "IndexWidth",
    "FlatTreeError",
    "IndexOverflowError",
    "InvalidIndexError",
    "LeafHasNoChildrenError",
    "TreeIterator",
    "ancestor",
    "children",
    "children_with_depth",
    "count",
    "count_with_depth",
    "depth",
    "full_roots",
    "full_roots_before",
    "index",
    "is_leaf",
    "iter_full_roots",
    "left_child",
    "left_child_with_depth",
    "left_span",
    "left_span_with_depth",
    "offset",
    "offset_with_depth",
    "parent",
    "parent_with_depth",
    "right_child",
    "right_child_with_depth",
    "right_span",
    "right_span_with_depth",
    "sibling",
    "sibling_with_depth",
    "spans",
    "spans_with_depth",
    "uncle",
    "uncle_with_depth",
]
