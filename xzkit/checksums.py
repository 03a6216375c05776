"""CRC-32 (IEEE) and CRC-64 (ECMA) checksums with little-endian digests."""

from __future__ import annotations

import zlib

from .bits import encode_uint32_le, encode_uint64_le

_CRC64_POLY = 0xC96C5795D7870F42
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _make_crc64_table() -> tuple[int, ...]:
    table = []
    for i in range(256):
        crc = i
        for _ in range(8):
            crc = (crc >> 1) ^ _CRC64_POLY if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_CRC64_TABLE = _make_crc64_table()


def crc64(data: bytes, crc: int = 0) -> int:
    """Return the CRC-64/ECMA of ``data``, continuing from ``crc``."""
    crc = ~crc & _MASK64
    table = _CRC64_TABLE
    for b in data:
        crc = table[(crc ^ b) & 0xFF] ^ (crc >> 8)
    return ~crc & _MASK64


class CRC32:
    """Incremental CRC-32 whose digest is little-endian."""

    digest_size = 4

    def __init__(self, data: bytes = b"") -> None:
        self._crc = zlib.crc32(data)

    def update(self, data: bytes) -> None:
        self._crc = zlib.crc32(data, self._crc)

    def digest(self) -> bytes:
        return encode_uint32_le(self._crc)


class CRC64:
    """Incremental CRC-64 (ECMA) whose digest is little-endian."""

    digest_size = 8

    def __init__(self, data: bytes = b"") -> None:
        self._crc = crc64(data)

    def update(self, data: bytes) -> None:
        self._crc = crc64(data, self._crc)

    def digest(self) -> bytes:
        return encode_uint64_le(self._crc)