"""Linear scratch allocator that carves allocations out of large blocks."""

from __future__ import annotations

from hecore.config import align_to
from hecore.stack_alloc import Block, SystemAllocator


class ScratchAllocator:
    """Bump allocator over blocks taken from ``allocator``; freed all at once."""

    def __init__(self, block_size: int, alignment: int = 16, allocator=None) -> None:
        if block_size <= 0:
            raise ValueError(f"block size must be positive, got {block_size}")
        align_to(0, alignment)
        self.block_size = block_size
        self.alignment = alignment
        self.allocator = allocator if allocator is not None else SystemAllocator()
        self._used: list[Block] = []
        self._free: list[Block] = []
        self._pos = 0
        self._closed = False

    @property
    def block_count(self) -> int:
        """Blocks held, in use or kept for reuse."""
        return len(self._used) + len(self._free)

    def _next_block(self, size: int) -> Block:
        for index, block in enumerate(self._free):
            if block.size >= size:
                return self._free.pop(index)
        return self.allocator.malloc(max(size, self.block_size))

    def alloc(self, size: int) -> Block:
        """Allocate ``size`` bytes aligned within the current block."""
        if self._closed:
            raise RuntimeError("scratch allocator is closed")
        if size < 0:
            raise ValueError(f"allocation size must not be negative, got {size}")
        if self._used:
            current = self._used[-1]
            start = align_to(self._pos, self.alignment)
            if start + size <= current.size:
                self._pos = start + size
                return Block(current.buffer, current.offset + start, size)
        current = self._next_block(size)
        self._used.append(current)
        self._pos = size
        return Block(current.buffer, current.offset, size)

    def reset(self) -> None:
        """Forget every allocation and keep the blocks for reuse."""
        self._free.extend(self._used)
        self._used.clear()
        self._pos = 0

    def close(self) -> None:
        """Return every block to the underlying allocator."""
        for block in self._used + self._free:
            self.allocator.free(block)
        self._used.clear()
        self._free.clear()
        self._pos = 0
        self._closed = True

    def __enter__(self) -> "ScratchAllocator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()