"""Exceptions raised by flat-tree index arithmetic."""
from __future__ import annotations


class FlatTreeError(Exception):
    """Base class for every error raised by this package."""


class LeafHasNoChildrenError(FlatTreeError, ValueError):
    """Raised when children are requested of a depth-0 (leaf) node."""

    def __init__(self, index: int):
        super().__init__(f"leaf node has no children: {index}")
        self.index = index


class InvalidIndexError(FlatTreeError, ValueError):
    """Raised when an argument is not a valid non-negative integer for the call."""


class IndexOverflowError(FlatTreeError, OverflowError):
    """Raised when an input or a computed result exceeds the configured integer width."""

    def __init__(self, what: str, value: int, bits: int):
        super().__init__(f"{what} {value} does not fit in {bits} bits")
        self.what = what
        self.value = value
        self.bits = bits
