"""Small fixed-layout vector and rectangle records with binary packing."""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass
from typing import ClassVar, Iterator


class PackedVector:
    """Base for records that pack to a fixed little-endian binary layout."""

    _struct: ClassVar[struct.Struct]
    SIZE: ClassVar[int]

    def __init_subclass__(cls, fmt: str | None = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if fmt is not None:
            cls._struct = struct.Struct("<" + fmt)
            cls.SIZE = cls._struct.size

    @property
    def v(self) -> tuple:
        """All components in declaration order."""
        return astuple(self)

    def __iter__(self) -> Iterator:
        return iter(self.v)

    def to_bytes(self) -> bytes:
        """Pack the components into their binary layout."""
        try:
            return self._struct.pack(*self.v)
        except struct.error as exc:
            raise ValueError(f"cannot pack {self!r}: {exc}") from exc

    @classmethod
    def from_bytes(cls, data: bytes):
        """Build a record from exactly ``SIZE`` bytes."""
        if len(data) != cls.SIZE:
            raise ValueError(f"{cls.__name__} needs {cls.SIZE} bytes, got {len(data)}")
        return cls(*cls._struct.unpack(bytes(data)))


class _RGB:
    @property
    def r(self):
        return self.x

    @property
    def g(self):
        return self.y

    @property
    def b(self):
        return self.z


@dataclass
class F32x4(_RGB, PackedVector, fmt="4f"):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @property
    def a(self):
        return self.w


@dataclass
class Recti16(PackedVector, fmt="4h"):
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


@dataclass
class RectF32(PackedVector, fmt="4f"):
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0


@dataclass
class F32x3(_RGB, PackedVector, fmt="3f"):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class F64x4(PackedVector, fmt="4d"):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


@dataclass
class U8x3(PackedVector, fmt="3B"):
    x: int = 0
    y: int = 0
    z: int = 0


@dataclass
class F64x3(PackedVector, fmt="3d"):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0