"""Ring-buffer sub-allocator whose segments are reclaimed after a number of frames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SegmentRequest:
    """Where an allocation landed inside the ring buffer."""

    element_offset: int
    element_stride: int
    num_elements: int


class SegmentAllocatorFull(Exception):
    """Raised when the ring buffer has no room for a request."""


@dataclass
class _Segment:
    frame_num: int = 0
    num_elements: int = 0


class SegmentAllocator:
    """Per-frame ring allocator; a frame's elements free up ``num_segments`` frames later."""

    def __init__(self, element_stride: int, num_segments: int, max_elements: int) -> None:
        if element_stride <= 0:
            raise ValueError(f"element stride must be positive, got {element_stride}")
        if num_segments <= 0:
            raise ValueError(f"segment count must be positive, got {num_segments}")
        if max_elements <= 0:
            raise ValueError(f"max elements must be positive, got {max_elements}")
        self.element_stride = element_stride
        self.num_segments = num_segments
        self.max_elements = max_elements
        self._segments = [_Segment() for _ in range(num_segments + 2)]
        self._tail = 0
        self._head = 1
        self._num_elements = 0
        self._element_offset = 0

    @property
    def num_elements(self) -> int:
        """Elements currently held, padding included."""
        return self._num_elements

    @property
    def element_offset(self) -> int:
        """Offset of the oldest element still held."""
        return self._element_offset

    def _reclaim(self, frame_index: int) -> None:
        ring = len(self._segments)
        while self._tail != self._head:
            tail = self._segments[self._tail]
            if frame_index < tail.frame_num + self.num_segments:
                break
            self._num_elements -= tail.num_elements
            self._element_offset = (self._element_offset + tail.num_elements) % self.max_elements
            tail.num_elements = 0
            tail.frame_num = 0
            self._tail = (self._tail + 1) % ring

    def alloc(self, frame_index: int, num_elements: int) -> SegmentRequest:
        """Reserve ``num_elements`` contiguous elements for ``frame_index``."""
        if num_elements < 0:
            raise ValueError(f"element count must not be negative, got {num_elements}")
        self._reclaim(frame_index)

        if frame_index != self._segments[self._head].frame_num:
            self._head = (self._head + 1) % len(self._segments)
            if self._head == self._tail:
                raise SegmentAllocatorFull("too many frames are still in flight")
            head = self._segments[self._head]
            head.frame_num = frame_index
            head.num_elements = 0
        head = self._segments[self._head]

        end = (self._element_offset + self._num_elements) % self.max_elements
        # Not enough room before the end of the buffer: give up the rest and wrap.
        if self._element_offset < end and end + num_elements > self.max_elements:
            remaining = self.max_elements - end
            head.num_elements += remaining
            self._num_elements += remaining
            end = 0

        if self._num_elements >= self.max_elements:
            available = 0
        elif end < self._element_offset:
            available = self._element_offset - end
        else:
            available = self.max_elements - end

        if num_elements > available:
            raise SegmentAllocatorFull(
                f"{num_elements} elements requested, {available} available"
            )

        head.num_elements += num_elements
        self._num_elements += num_elements
        return SegmentRequest(end, self.element_stride, num_elements)