"""Allocation blocks, the system allocator and a fixed stack allocator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class Block:
    """A region of ``size`` bytes starting at ``offset`` inside ``buffer``."""

    buffer: bytearray
    offset: int
    size: int

    @property
    def view(self) -> memoryview:
        """A writable view of the block's bytes."""
        return memoryview(self.buffer)[self.offset : self.offset + self.size]

    def __len__(self) -> int:
        return self.size

    def __bytes__(self) -> bytes:
        return bytes(self.buffer[self.offset : self.offset + self.size])

    def write(self, data: bytes, at: int = 0) -> None:
        """Copy ``data`` into the block starting ``at`` bytes in."""
        data = bytes(data)
        if at < 0 or at + len(data) > self.size:
            raise ValueError(
                f"writing {len(data)} bytes at {at} overflows a block of {self.size} bytes"
            )
        start = self.offset + at
        self.buffer[start : start + len(data)] = data


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"allocation size must not be negative, got {size}")


def _copy_contents(source: Block, target: Block) -> None:
    count = min(source.size, target.size)
    target.buffer[target.offset : target.offset + count] = source.buffer[
        source.offset : source.offset + count
    ]


class SystemAllocator:
    """Allocates every block from its own fresh buffer and tracks live blocks."""

    def __init__(self) -> None:
        self._live: dict[int, Block] = {}

    @property
    def allocated(self) -> int:
        """Number of blocks handed out and not yet freed."""
        return len(self._live)

    def malloc(self, size: int) -> Block:
        """Allocate a block of ``size`` bytes."""
        _check_size(size)
        block = Block(bytearray(size), 0, size)
        self._live[id(block)] = block
        return block

    def calloc(self, count: int, size: int) -> Block:
        """Allocate a zeroed block of ``count * size`` bytes."""
        _check_size(count)
        _check_size(size)
        return self.malloc(count * size)

    def realloc(self, block: Block | None, size: int) -> Block:
        """Resize ``block``, keeping its leading contents."""
        if block is None:
            return self.malloc(size)
        resized = self.malloc(size)
        _copy_contents(block, resized)
        self.free(block)
        return resized

    def free(self, block: Block | None) -> None:
        """Release ``block``; freeing ``None`` does nothing."""
        if block is None:
            return
        if self._live.pop(id(block), None) is None:
            raise ValueError("block was not allocated here or was already freed")


class StackAllocator:
    """Bump allocator over a fixed buffer that overflows to a fallback allocator."""

    def __init__(self, size: int, fallback=None) -> None:
        _check_size(size)
        self._buffer = bytearray(size)
        self.fallback = fallback if fallback is not None else SystemAllocator()
        self._cursor_last = 0
        self._cursor_current = 0

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    @property
    def used(self) -> int:
        """Bytes of the fixed buffer currently handed out."""
        return self._cursor_current

    def owns(self, block: Block) -> bool:
        """True when ``block`` lies inside this allocator's fixed buffer."""
        return block.buffer is self._buffer

    def _take(self, size: int) -> Block | None:
        if self._cursor_current + size > self.capacity:
            return None
        self._cursor_last = self._cursor_current
        self._cursor_current += size
        return Block(self._buffer, self._cursor_last, size)

    def malloc(self, size: int) -> Block:
        """Allocate ``size`` bytes from the buffer, or from the fallback when full."""
        _check_size(size)
        block = self._take(size)
        if block is None:
            return self.fallback.malloc(size)
        return block

    def calloc(self, count: int, size: int) -> Block:
        """Allocate ``count * size`` zeroed bytes."""
        _check_size(count)
        _check_size(size)
        block = self._take(count * size)
        if block is None:
            return self.fallback.calloc(count, size)
        block.write(bytes(block.size))
        return block

    def realloc(self, block: Block | None, size: int) -> Block:
        """Resize ``block``; the most recent stack block grows in place."""
        _check_size(size)
        if block is None:
            return self.malloc(size)
        if self.owns(block) and block.offset == self._cursor_last:
            if self._cursor_last + size > self.capacity:
                resized = self.fallback.malloc(size)
                _copy_contents(block, resized)
                return resized
            self._cursor_current = self._cursor_last + size
            return Block(self._buffer, self._cursor_last, size)
        resized = self.malloc(size)
        _copy_contents(block, resized)
        self.free(block)
        return resized

    def free(self, block: Block | None) -> None:
        """Release ``block``; blocks from the fixed buffer are reclaimed by reset."""
        if block is None or self.owns(block):
            return
        self.fallback.free(block)

    def reset(self) -> None:
        """Make the whole fixed buffer available again."""
        self._cursor_last = 0
        self._cursor_current = 0