"""Fixed-size element pool that grows chunk by chunk."""

from __future__ import annotations

from hecore.config import align_to
from hecore.stack_alloc import Block


class BlockAllocator:
    """Hands out equally sized elements carved from chunks of ``num_elements``."""

    def __init__(self, element_size: int, num_elements: int, alignment: int = 8) -> None:
        if element_size <= 0:
            raise ValueError(f"element size must be positive, got {element_size}")
        if num_elements <= 0:
            raise ValueError(f"elements per chunk must be positive, got {num_elements}")
        self.element_size = element_size
        self.num_elements = num_elements
        self.alignment = alignment
        self.stride = align_to(element_size, alignment)
        self._chunks: list[bytearray] = []
        self._free: list[Block] = []
        self._free_keys: set[tuple[int, int]] = set()

    @property
    def chunk_count(self) -> int:
        return len(self._chunks)

    @property
    def free_count(self) -> int:
        return len(self._free)

    @property
    def capacity(self) -> int:
        """Total number of elements across all chunks."""
        return len(self._chunks) * self.num_elements

    @staticmethod
    def _key(block: Block) -> tuple[int, int]:
        return id(block.buffer), block.offset

    def _grow(self) -> None:
        chunk = bytearray(self.stride * self.num_elements)
        self._chunks.append(chunk)
        blocks = [
            Block(chunk, index * self.stride, self.element_size)
            for index in range(self.num_elements)
        ]
        self._free.extend(reversed(blocks))
        self._free_keys.update(self._key(block) for block in blocks)

    def alloc(self) -> Block:
        """Return a free element, adding a chunk when none is left."""
        if not self._free:
            self._grow()
        block = self._free.pop()
        self._free_keys.discard(self._key(block))
        return block

    def free(self, block: Block) -> None:
        """Return ``block`` to the pool."""
        if not any(block.buffer is chunk for chunk in self._chunks):
            raise ValueError("block does not belong to this allocator")
        if block.offset % self.stride or block.size != self.element_size:
            raise ValueError("block is not an element of this allocator")
        key = self._key(block)
        if key in self._free_keys:
            raise ValueError("block was already freed")
        self._free_keys.add(key)
        self._free.append(block)