"""Code point iteration over UTF-8 and UTF-16 byte buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

REPLACEMENT_CHARACTER = 0xFFFD


@dataclass(frozen=True)
class CodePoint:
    """One decoded code point; ``finished`` marks the last one in the buffer."""

    code_point: int
    invalid: bool = False
    finished: bool = False


def is_legal_code_point(value: int) -> bool:
    """True for scalar values that are neither surrogates nor xxFFFE/xxFFFF."""
    return (
        0 <= value <= 0x10FFFF
        and not 0xD800 <= value <= 0xDFFF
        and (value | 0x1F0001) != 0x1FFFFF
    )


_UTF8_LEADS = (
    (0xC2, 0xDF, 1, 0x1F, 0x80),
    (0xE0, 0xEF, 2, 0x0F, 0x800),
    (0xF0, 0xF4, 3, 0x07, 0x10000),
)


def _decode_utf8(data: bytes, pos: int) -> tuple[int, bool, int]:
    lead = data[pos]
    if lead < 0x80:
        return lead, False, pos + 1
    for low, high, extra, mask, minimum in _UTF8_LEADS:
        if low <= lead <= high:
            break
    else:
        return REPLACEMENT_CHARACTER, True, pos + 1

    continuation = data[pos + 1 : pos + 1 + extra]
    if len(continuation) < extra or any(b & 0xC0 != 0x80 for b in continuation):
        return REPLACEMENT_CHARACTER, True, pos + 1

    value = lead & mask
    for byte in continuation:
        value = (value << 6) | (byte & 0x3F)
    end = pos + 1 + extra
    if value < minimum or not is_legal_code_point(value):
        return REPLACEMENT_CHARACTER, True, end
    return value, False, end


def utf8_code_points(data: bytes) -> Iterator[CodePoint]:
    """Yield the code points of a UTF-8 buffer, flagging malformed sequences."""
    data = bytes(data)
    pos = 0
    while pos < len(data):
        value, invalid, pos = _decode_utf8(data, pos)
        yield CodePoint(value, invalid, pos >= len(data))


def _decode_utf16(data: bytes, pos: int) -> tuple[int, bool, int]:
    if pos + 2 > len(data):
        return REPLACEMENT_CHARACTER, True, len(data)
    unit = int.from_bytes(data[pos : pos + 2], "little")
    if 0xD800 <= unit <= 0xDBFF:
        if pos + 4 <= len(data):
            low = int.from_bytes(data[pos + 2 : pos + 4], "little")
            if 0xDC00 <= low <= 0xDFFF:
                value = 0x10000 + ((unit - 0xD800) << 10) + (low - 0xDC00)
                if not is_legal_code_point(value):
                    return REPLACEMENT_CHARACTER, True, pos + 4
                return value, False, pos + 4
        return REPLACEMENT_CHARACTER, True, pos + 2
    if not is_legal_code_point(unit):
        return REPLACEMENT_CHARACTER, True, pos + 2
    return unit, False, pos + 2


def utf16_code_points(data: bytes) -> Iterator[CodePoint]:
    """Yield the code points of a little-endian UTF-16 buffer (RFC 2781)."""
    data = bytes(data)
    pos = 0
    while pos < len(data):
        value, invalid, pos = _decode_utf16(data, pos)
        yield CodePoint(value, invalid, pos >= len(data))