"""Engine-wide configuration constants and size helpers."""

from __future__ import annotations

import struct

RI_MAX_SWAPCHAIN_IMAGES = 8
RI_NUMBER_FRAMES_FLIGHT = 3

MUTEX_DEFAULT_SPIN_COUNT = 1500

ALLOC_HASH_BITS = 12
ALLOC_RANDOM_WIPE = False
ALLOC_ALWAYS_VALIDATE_ALL = False
ALLOC_ALWAYS_LOG_ALL = False
ALLOC_ALWAYS_WIPE_ALL = True
ALLOC_CLEANUP_LOG_ON_FIRST_RUN = True
ALLOC_PADDING_SIZE = 4

FS_MAX_PATH = 512

KB_TO_BYTE = 1024
MB_TO_BYTE = 1024 * KB_TO_BYTE
GB_TO_BYTE = 1024 * MB_TO_BYTE

PTR_SIZE = struct.calcsize("P")


def align_to(size: int, alignment: int) -> int:
    """Round ``size`` up to the next multiple of a power-of-two ``alignment``."""
    if alignment <= 0 or alignment & (alignment - 1):
        raise ValueError(f"alignment must be a positive power of two, got {alignment}")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return (size + alignment - 1) & ~(alignment - 1)


def kilobytes(count: int) -> int:
    """Return the number of bytes in ``count`` kilobytes."""
    return count * KB_TO_BYTE


def megabytes(count: int) -> int:
    """Return the number of bytes in ``count`` megabytes."""
    return count * MB_TO_BYTE


def gigabytes(count: int) -> int:
    """Return the number of bytes in ``count`` gigabytes."""
    return count * GB_TO_BYTE