"""Core engine utilities: hashing, UTF decoding, vectors, allocators, files, mutex and swapchain helpers."""

__version__ = "0.1.0"

__all__ = [
    "buildinfo",
    "block_alloc",
    "config",
    "filesystem",
    "hashing",
    "mutex",
    "scratch_alloc",
    "segment_alloc",
    "stack_alloc",
    "swapchain",
    "utf",
    "vectors",
]