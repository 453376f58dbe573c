"""64-bit FNV-style hashing and the Hsieh "SuperFastHash" variant."""

from __future__ import annotations

import struct

HASH_INITIAL_VALUE = 0xCBF29CE484222325
FNV_PRIME = 0x100000001B3

_MASK64 = 0xFFFFFFFFFFFFFFFF
_MASK32 = 0xFFFFFFFF


def hash_u32(hash: int, value: int) -> int:
    """Mix an unsigned 32-bit value into ``hash``."""
    return ((hash * FNV_PRIME) & _MASK64) ^ (value & _MASK32)


def hash_s32(hash: int, value: int) -> int:
    """Mix a signed 32-bit value into ``hash`` (two's complement)."""
    return hash_u32(hash, value & _MASK32)


def hash_u64(hash: int, value: int) -> int:
    """Mix an unsigned 64-bit value into ``hash``, low half first."""
    value &= _MASK64
    hash = hash_u32(hash, value & _MASK32)
    return hash_u32(hash, value >> 32)


def hash_f32(hash: int, value: float) -> int:
    """Mix the IEEE-754 single-precision bits of ``value`` into ``hash``."""
    (bits,) = struct.unpack("<I", struct.pack("<f", value))
    return hash_u32(hash, bits)


def hash_data(hash: int, data: bytes) -> int:
    """Mix every byte of ``data`` into ``hash``."""
    for byte in bytes(data):
        hash = ((hash * FNV_PRIME) & _MASK64) ^ byte
    return hash


def _get16(data: bytes, offset: int) -> int:
    return data[offset] | (data[offset + 1] << 8)


def hash_data_hsieh(hash: int, data: bytes) -> int:
    """Hash ``data`` with Paul Hsieh's algorithm, seeded with ``hash``."""
    if data is None or len(data) == 0:
        return hash
    data = bytes(data)
    remainder = len(data) & 3
    body = len(data) - remainder

    for offset in range(0, body, 4):
        hash = (hash + _get16(data, offset)) & _MASK64
        tmp = ((_get16(data, offset + 2) << 11) ^ hash) & _MASK32
        hash = ((hash << 16) & _MASK64) ^ tmp
        hash = (hash + (hash >> 11)) & _MASK64

    tail = data[body:]
    if remainder == 3:
        hash = (hash + _get16(tail, 0)) & _MASK64
        hash ^= (hash << 16) & _MASK64
        hash ^= tail[2] << 18
        hash = (hash + (hash >> 11)) & _MASK64
    elif remainder == 2:
        hash = (hash + _get16(tail, 0)) & _MASK64
        hash ^= (hash << 11) & _MASK64
        hash = (hash + (hash >> 17)) & _MASK64
    elif remainder == 1:
        hash = (hash + tail[0]) & _MASK64
        hash ^= (hash << 10) & _MASK64
        hash = (hash + (hash >> 1)) & _MASK64

    hash ^= (hash << 3) & _MASK64
    hash = (hash + (hash >> 5)) & _MASK64
    hash ^= (hash << 4) & _MASK64
    hash = (hash + (hash >> 17)) & _MASK64
    hash ^= (hash << 25) & _MASK64
    hash = (hash + (hash >> 6)) & _MASK64
    return hash