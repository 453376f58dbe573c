# hecore

Small building blocks for engine-style code, written in plain Python with no
third-party dependencies.

## What is inside

- `hecore.config` – engine constants (`RI_MAX_SWAPCHAIN_IMAGES`,
  `MUTEX_DEFAULT_SPIN_COUNT`, `FS_MAX_PATH`, …) and size helpers:
  `align_to` (round up to a power-of-two alignment, `ValueError` otherwise),
  `kilobytes`, `megabytes` and `gigabytes`.
- `hecore.hashing` – 64-bit FNV-style hashing seeded with
  `HASH_INITIAL_VALUE`: `hash_u32`, `hash_s32`, `hash_u64`, `hash_f32`,
  `hash_data`, and Paul Hsieh's algorithm as `hash_data_hsieh`.
- `hecore.vectors` – dataclass records with a fixed little-endian layout
  (`F32x4`, `F32x3`, `F64x4`, `F64x3`, `U8x3`, `Recti16`, `RectF32`), all
  based on `PackedVector`, with `to_bytes()`, `from_bytes()`, iteration and a
  `v` tuple; `F32x4` and `F32x3` also expose `r`, `g`, `b` (and `a`).
- `hecore.utf` – `utf8_code_points` and `utf16_code_points` (little-endian)
  yield `CodePoint(code_point, invalid, finished)`. Malformed input yields
  U+FFFD with `invalid=True`; `finished` marks the last code point.
  `is_legal_code_point` rejects surrogates, values above U+10FFFF and
  xxFFFE/xxFFFF.
- `hecore.stack_alloc` – `Block` (a slice of a `bytearray` with `view`,
  `write` and `bytes()`), `SystemAllocator` (one buffer per block, tracks
  live blocks, `ValueError` on a double free) and `StackAllocator`, a bump
  allocator over a fixed buffer that hands overflow to a fallback allocator
  and is emptied with `reset()`.
- `hecore.block_alloc` – `BlockAllocator`, a pool of equally sized elements
  that adds a chunk of `num_elements` whenever it runs out.
- `hecore.scratch_alloc` – `ScratchAllocator`, an aligned bump allocator over
  large blocks; `reset()` keeps the blocks for reuse, `close()` (or leaving a
  `with` block) returns them.
- `hecore.segment_alloc` – `SegmentAllocator`, a per-frame ring allocator
  whose space is reclaimed `num_segments` frames later. `alloc()` returns a
  `SegmentRequest` or raises `SegmentAllocatorFull`.
- `hecore.filesystem` – `open_file(path, FileMode)` returns a `HeFile` with
  `seek_start`, `seek_current`, `position`, `size`, `flush`, `is_at_end`,
  `append` and `close`; it is also a context manager.
- `hecore.mutex` – `Mutex`, a non-recursive lock that tries `spin_count`
  times before blocking, with `try_acquire` and context-manager use.
- `hecore.buildinfo` – `detect_build(system, machine)` returns a `BuildInfo`
  (OS name, CPU and architecture strings, shared-library prefix and suffix);
  `library_filename` builds a library file name; `stricmp` and `strnicmp`
  compare ignoring ASCII case.
- `hecore.swapchain` – `surface_priority` and `select_surface_format` choose a
  `SurfaceFormat` for a `SwapchainFormat`; `select_present_mode` prefers
  `IMMEDIATE`, then `FIFO_RELAXED`, then `FIFO`; `FramePacer` counts presents
  and cycles through the semaphore slots.

## Installation

```
pip install .
```

## Examples

Hashing:

```python
from hecore.hashing import HASH_INITIAL_VALUE, hash_data

digest = hash_data(HASH_INITIAL_VALUE, b"hello")
```

Iterating over code points:

```python
from hecore.utf import utf8_code_points

for cp in utf8_code_points("héllo".encode("utf-8")):
    print(cp.code_point, cp.invalid, cp.finished)
```

Stack allocation with a fallback:

```python
from hecore.stack_alloc import StackAllocator

stack = StackAllocator(64)
small = stack.malloc(16)          # from the fixed buffer
small.write(b"abc")
large = stack.malloc(128)         # too big: served by the fallback allocator
stack.free(large)
stack.reset()
```

Frame-based ring allocation:

```python
from hecore.segment_alloc import SegmentAllocator, SegmentAllocatorFull

ring = SegmentAllocator(element_stride=16, num_segments=3, max_elements=1024)
try:
    request = ring.alloc(frame_index=1, num_elements=64)
    print(request.element_offset, request.num_elements)
except SegmentAllocatorFull:
    pass
```

Choosing a surface format:

```python
from hecore.swapchain import (
    ColorSpace, PixelFormat, SurfaceFormat, SwapchainFormat, select_surface_format,
)

surfaces = [
    SurfaceFormat(PixelFormat.B8G8R8A8_SRGB, ColorSpace.SRGB_NONLINEAR),
    SurfaceFormat(PixelFormat.B8G8R8A8_UNORM, ColorSpace.SRGB_NONLINEAR),
]
chosen = select_surface_format(SwapchainFormat.BT709_G22_8BIT, surfaces)
```

## What the package does not do

- There is no logging facility: nothing here writes log messages, log files
  or assertion reports.
- `hecore.swapchain` holds only the selection and pacing logic; it does not
  open windows, create surfaces or talk to a graphics device.
- The allocators work on Python `bytearray` buffers; they do not hand out raw
  memory addresses.

## Running the tests

```
pip install .[test]
pytest
```