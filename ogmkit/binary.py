"""Little-endian integer helpers, file type codes and the package's base error."""

from __future__ import annotations

import enum


class OgmError(Exception):
    """Raised when media data or arguments cannot be processed."""


class FileType(enum.IntEnum):
    """Kinds of input file the merger knows about."""

    UNKNOWN = 0
    OGM = 1
    AVI = 2
    WAV = 3
    SRT = 4
    MP3 = 5
    AC3 = 6
    CHAPTERS = 7
    MICRODVD = 8
    VOBSUB = 9


def _get(buf: bytes, offset: int, size: int) -> int:
    if offset < 0 or offset + size > len(buf):
        raise OgmError(
            f"need {size} bytes at offset {offset}, buffer holds {len(buf)}"
        )
    return int.from_bytes(bytes(buf[offset:offset + size]), "little")


def get_uint16(buf: bytes, offset: int = 0) -> int:
    """Read an unsigned 16-bit little-endian integer."""
    return _get(buf, offset, 2)


def get_uint32(buf: bytes, offset: int = 0) -> int:
    """Read an unsigned 32-bit little-endian integer."""
    return _get(buf, offset, 4)


def get_uint64(buf: bytes, offset: int = 0) -> int:
    """Read an unsigned 64-bit little-endian integer."""
    return _get(buf, offset, 8)


def put_uint16(value: int) -> bytes:
    """Encode the low 16 bits of value as little-endian bytes."""
    return (value & 0xFFFF).to_bytes(2, "little")


def put_uint32(value: int) -> bytes:
    """Encode the low 32 bits of value as little-endian bytes."""
    return (value & 0xFFFFFFFF).to_bytes(4, "little")


def put_uint64(value: int) -> bytes:
    """Encode the low 64 bits of value as little-endian bytes."""
    return (value & 0xFFFFFFFFFFFFFFFF).to_bytes(8, "little")


def fourcc(code: str | bytes) -> int:
    """Return the big-endian integer of a four character code."""
    raw = code.encode("latin-1") if isinstance(code, str) else bytes(code)
    if len(raw) != 4:
        raise OgmError(f"a FourCC must be exactly four characters: {code!r}")
    return int.from_bytes(raw, "big")