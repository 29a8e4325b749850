"""Integer width policy for flat-tree arithmetic.

Python integers never wrap, but the arrays these indices address live in
storage layers that do use fixed-width unsigned integers (file offsets, u64
columns, on-disk headers). An ``IndexWidth`` names that width so every input
and every computed result can be checked against it instead of silently
producing an index the storage layer cannot represent.
"""
from __future__ import annotations

from dataclasses import dataclass

from .errors import IndexOverflowError


@dataclass(frozen=True)
class IndexWidth:
    """Unsigned integer width that flat indices must fit into."""

    bits: int = 64

    def __post_init__(self) -> None:
        if isinstance(self.bits, bool) or not isinstance(self.bits, int) or self.bits < 2:
            raise ValueError(f"index width must be an integer of at least 2 bits, got {self.bits!r}")

    @property
    def max_index(self) -> int:
        return (1 << self.bits) - 1

    @property
    def max_depth(self) -> int:
        # index(bits, 0) == 2**bits - 1 is the deepest node that still fits.
        return self.bits

    @property
    def max_leaf_count(self) -> int:
        # Leaves sit on even indices, the last one at 2**bits - 2.
        return 1 << (self.bits - 1)

    def check(self, value: int, what: str = "index") -> int:
        """Return ``value`` unchanged, or raise IndexOverflowError if it does not fit."""
        if value > self.max_index:
            raise IndexOverflowError(what, value, self.bits)
        return value

    @classmethod
    def uint32(cls) -> "IndexWidth":
        return cls(bits=32)

    @classmethod
    def uint64(cls) -> "IndexWidth":
        return cls(bits=64)


UINT32 = IndexWidth.uint32()
UINT64 = IndexWidth.uint64()
DEFAULT_WIDTH = UINT64
