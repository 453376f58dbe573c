import pytest

from hecore import config
from hecore.config import align_to, gigabytes, kilobytes, megabytes


@pytest.mark.parametrize("size", [0, 1, 3, 4, 5, 15, 16, 17, 100, 1023])
@pytest.mark.parametrize("alignment", [1, 2, 4, 8, 16, 256])
def test_align_to_invariants(size, alignment):
    result = align_to(size, alignment)
    assert result % alignment == 0
    assert result >= size
    assert result - size < alignment


def test_align_to_pinned_value():
    assert align_to(5, 4) == 8


def test_align_to_already_aligned_is_unchanged():
    assert align_to(64, 16) == 64
    assert align_to(0, 8) == 0


@pytest.mark.parametrize("alignment", [0, -4, 3, 6, 12])
def test_align_to_rejects_bad_alignment(alignment):
    with pytest.raises(ValueError):
        align_to(10, alignment)


def test_align_to_rejects_negative_size():
    with pytest.raises(ValueError):
        align_to(-1, 4)


def test_size_helpers_match_constants():
    assert kilobytes(1) == config.KB_TO_BYTE == 1024
    assert megabytes(1) == config.MB_TO_BYTE
    assert gigabytes(1) == config.GB_TO_BYTE


def test_size_helpers_scale_consistently():
    assert megabytes(1) == kilobytes(1024)
    assert gigabytes(1) == megabytes(1024)
    assert kilobytes(3) == 3 * kilobytes(1)
    assert gigabytes(0) == 0