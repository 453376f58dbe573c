import pytest

from hecore.stack_alloc import Block, StackAllocator, SystemAllocator


def test_block_write_and_bytes():
    block = Block(bytearray(8), 2, 4)
    block.write(b"ab", at=1)
    assert bytes(block) == b"\x00ab\x00"
    assert len(block) == 4
    assert bytes(block.view) == bytes(block)


def test_block_write_overflow_raises():
    block = Block(bytearray(4), 0, 4)
    with pytest.raises(ValueError):
        block.write(b"hello")


def test_system_malloc_and_free_tracks_live_blocks():
    system = SystemAllocator()
    first = system.malloc(10)
    second = system.calloc(3, 4)
    assert len(first) == 10
    assert len(second) == 12
    assert bytes(second) == bytes(12)
    assert system.allocated == 2
    system.free(first)
    assert system.allocated == 1


def test_system_double_free_raises():
    system = SystemAllocator()
    block = system.malloc(4)
    system.free(block)
    with pytest.raises(ValueError):
        system.free(block)


def test_system_realloc_keeps_contents():
    system = SystemAllocator()
    block = system.malloc(4)
    block.write(b"wxyz")
    grown = system.realloc(block, 6)
    assert bytes(grown)[:4] == b"wxyz"
    assert len(grown) == 6
    assert system.allocated == 1
    shrunk = system.realloc(grown, 2)
    assert bytes(shrunk) == b"wx"


def test_system_negative_size_raises():
    with pytest.raises(ValueError):
        SystemAllocator().malloc(-1)


def test_stack_allocations_are_consecutive():
    stack = StackAllocator(32)
    first = stack.malloc(8)
    second = stack.malloc(8)
    assert stack.owns(first) and stack.owns(second)
    assert second.offset == first.offset + first.size
    assert stack.used == 16


def test_stack_overflow_goes_to_fallback():
    fallback = SystemAllocator()
    stack = StackAllocator(8, fallback)
    inside = stack.malloc(8)
    outside = stack.malloc(4)
    assert stack.owns(inside)
    assert not stack.owns(outside)
    assert fallback.allocated == 1
    stack.free(outside)
    assert fallback.allocated == 0


def test_stack_free_of_own_block_does_not_touch_fallback():
    fallback = SystemAllocator()
    stack = StackAllocator(16, fallback)
    block = stack.malloc(4)
    stack.free(block)
    assert fallback.allocated == 0
    assert stack.used == 4


def test_stack_calloc_zeroes_reused_memory():
    stack = StackAllocator(8)
    block = stack.malloc(8)
    block.write(b"\xff" * 8)
    stack.reset()
    zeroed = stack.calloc(2, 4)
    assert zeroed.offset == block.offset
    assert bytes(zeroed) == bytes(8)


def test_stack_calloc_overflow_uses_fallback():
    fallback = SystemAllocator()
    stack = StackAllocator(4, fallback)
    block = stack.calloc(2, 4)
    assert not stack.owns(block)
    assert fallback.allocated == 1


def test_stack_realloc_last_block_grows_in_place():
    stack = StackAllocator(32)
    stack.malloc(4)
    last = stack.malloc(4)
    last.write(b"data")
    grown = stack.realloc(last, 12)
    assert grown.offset == last.offset
    assert bytes(grown)[:4] == b"data"
    assert stack.used == last.offset + 12


def test_stack_realloc_last_block_too_large_moves_to_fallback():
    fallback = SystemAllocator()
    stack = StackAllocator(8, fallback)
    block = stack.malloc(4)
    block.write(b"keep")
    moved = stack.realloc(block, 64)
    assert not stack.owns(moved)
    assert bytes(moved)[:4] == b"keep"
    assert fallback.allocated == 1


def test_stack_realloc_older_block_allocates_new():
    stack = StackAllocator(32)
    older = stack.malloc(4)
    older.write(b"abcd")
    stack.malloc(4)
    moved = stack.realloc(older, 4)
    assert moved.offset != older.offset
    assert bytes(moved) == b"abcd"


def test_stack_reset_restarts_at_beginning():
    stack = StackAllocator(16)
    first = stack.malloc(10)
    stack.reset()
    assert stack.used == 0
    again = stack.malloc(10)
    assert again.offset == first.offset