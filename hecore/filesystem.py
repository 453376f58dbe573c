"""Thin file handles over operating-system descriptors with explicit open modes."""

from __future__ import annotations

import enum
import os

from hecore.config import FS_MAX_PATH


class FileMode(enum.IntFlag):
    """How a file is opened; flags combine."""

    READ = 1 << 0
    WRITE = 1 << 1
    APPEND = 1 << 2
    ALLOW_READ = 1 << 4
    READ_WRITE = READ | WRITE
    WRITE_APPEND = WRITE | APPEND
    READ_APPEND = READ | APPEND
    READ_WRITE_APPEND = READ | APPEND
    WRITE_ALLOW_READ = WRITE | ALLOW_READ
    READ_WRITE_ALLOW_READ = READ | WRITE | ALLOW_READ
    WRITE_APPEND_ALLOW_READ = WRITE | APPEND | ALLOW_READ
    READ_WRITE_APPEND_ALLOW_READ = READ | APPEND | ALLOW_READ


class HeFile:
    """An open file descriptor together with the mode it was opened with."""

    def __init__(self, fd: int, mode: FileMode) -> None:
        self._fd: int | None = fd
        self.mode = FileMode(mode)

    def _descriptor(self) -> int:
        if self._fd is None:
            raise ValueError("operation on a closed file")
        return self._fd

    def is_open(self) -> bool:
        """True until the file is closed."""
        return self._fd is not None

    def close(self) -> None:
        """Close the file; closing twice does nothing."""
        if self._fd is not None:
            fd, self._fd = self._fd, None
            os.close(fd)

    def seek_start(self, offset: int) -> int:
        """Move to ``offset`` bytes from the start; return the new position."""
        return os.lseek(self._descriptor(), offset, os.SEEK_SET)

    def seek_current(self, offset: int) -> int:
        """Move ``offset`` bytes from the current position; return the new position."""
        return os.lseek(self._descriptor(), offset, os.SEEK_CUR)

    def position(self) -> int:
        """The current position."""
        return os.lseek(self._descriptor(), 0, os.SEEK_CUR)

    def size(self) -> int:
        """The size of the file in bytes."""
        return os.fstat(self._descriptor()).st_size

    def flush(self) -> None:
        """Push written data to the storage device."""
        os.fsync(self._descriptor())

    def is_at_end(self) -> bool:
        """True when the position is at or past the end of the file."""
        return self.position() >= self.size()

    def append(self, data: bytes | str) -> int:
        """Write ``data`` at the end of the file; return the number of bytes written."""
        fd = self._descriptor()
        if isinstance(data, str):
            data = data.encode("utf-8")
        view = memoryview(bytes(data))
        os.lseek(fd, 0, os.SEEK_END)
        written = 0
        while written < len(view):
            written += os.write(fd, view[written:])
        return written

    def __enter__(self) -> "HeFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "open" if self.is_open() else "closed"
        return f"<HeFile {state} mode={self.mode!r}>"


def open_file(path, mode: FileMode) -> HeFile:
    """Open ``path``; reading a missing file raises, writing creates it."""
    mode = FileMode(mode)
    path = os.fspath(path)
    if len(path) >= FS_MAX_PATH:
        raise ValueError(f"path is longer than {FS_MAX_PATH - 1} characters")
    readable = bool(mode & FileMode.READ)
    writable = bool(mode & FileMode.WRITE)
    if readable and writable:
        flags = os.O_RDWR
    elif writable:
        flags = os.O_WRONLY
    elif readable:
        flags = os.O_RDONLY
    else:
        raise ValueError(f"mode {mode!r} grants neither read nor write access")
    if writable:
        flags |= os.O_CREAT
    flags |= getattr(os, "O_BINARY", 0)
    fd = os.open(path, flags, 0o644)
    if mode & FileMode.APPEND:
        os.lseek(fd, 0, os.SEEK_END)
    return HeFile(fd, mode)