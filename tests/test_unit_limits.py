import pytest

from flat_tree import tree_math
from flat_tree.errors import FlatTreeError, IndexOverflowError
from flat_tree.limits import DEFAULT_WIDTH, UINT32, UINT64, IndexWidth


def test_width_presets():
    assert DEFAULT_WIDTH is UINT64
    assert UINT32.max_index == 0xFFFFFFFF
    assert UINT64.max_index == 0xFFFFFFFFFFFFFFFF
    assert UINT32.max_depth == 32
    assert UINT32.max_leaf_count == 2**31


def test_width_rejects_nonsense_bits():
    with pytest.raises(ValueError):
        IndexWidth(bits=1)
    with pytest.raises(ValueError):
        IndexWidth(bits=True)


def test_largest_representable_node():
    top = UINT32.max_index
    assert tree_math.index(32, 0, width=UINT32) == top
    assert tree_math.depth(top, width=UINT32) == 32
    assert tree_math.left_span(top, width=UINT32) == 0


def test_results_past_the_width_overflow():
    top = UINT32.max_index
    for fn in (tree_math.parent, tree_math.sibling, tree_math.right_span, tree_math.count):
        with pytest.raises(IndexOverflowError):
            fn(top, width=UINT32)
    with pytest.raises(IndexOverflowError):
        tree_math.index(33, 0, width=UINT32)
    with pytest.raises(IndexOverflowError):
        tree_math.index(0, 2**63)
    assert tree_math.index(0, 2**63 - 1) == 2**64 - 2


def test_inputs_past_the_width_overflow():
    with pytest.raises(IndexOverflowError) as excinfo:
        tree_math.depth(2**32, width=UINT32)
    assert excinfo.value.bits == 32
    assert excinfo.value.value == 2**32
    assert isinstance(excinfo.value, OverflowError)
    assert isinstance(excinfo.value, FlatTreeError)


def test_full_roots_leaf_count_ceiling():
    assert tree_math.full_roots(2**31, width=UINT32) == [2**31 - 1]
    with pytest.raises(IndexOverflowError):
        tree_math.full_roots(2**31 + 1, width=UINT32)


def test_unbounded_width():
    huge = 2**70
    assert tree_math.parent(huge, width=None) == huge + 1
    assert tree_math.full_roots(2**80 + 1, width=None) == [2**80 - 1, 2**81]
    with pytest.raises(IndexOverflowError):
        tree_math.parent(huge)
