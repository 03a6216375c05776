"""Stream header, stream footer and index of the xz file format."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import BinaryIO, Iterable

from .bits import encode_uint32_le, encode_uvarint, read_uvarint, uint32_le
from .checksums import CRC32

HEADER_LEN = 12
FOOTER_LEN = 12
HEADER_MAGIC = b"\xfd7zXZ\x00"
FOOTER_MAGIC = b"YZ"
MIN_INDEX_SIZE = 4
MAX_INDEX_SIZE = (1 << 32) * 4


class FormatError(ValueError):
    """Raised for malformed or unsupported xz structures."""


class CheckMethod(enum.IntEnum):
    """Checksum methods supported by xz."""

    NONE = 0x0
    CRC32 = 0x1
    CRC64 = 0x4
    SHA256 = 0xA


_FLAG_STRINGS = {
    CheckMethod.NONE: "None",
    CheckMethod.CRC32: "CRC-32",
    CheckMethod.CRC64: "CRC-64",
    CheckMethod.SHA256: "SHA-256",
}


def verify_flags(flags: int) -> CheckMethod:
    """Return the check method for ``flags`` or raise :class:`FormatError`."""
    try:
        return CheckMethod(flags)
    except ValueError:
        raise FormatError("xz: invalid flags") from None


def flag_string(flags: int) -> str:
    """Return a human-readable name for the check method in ``flags``."""
    try:
        return _FLAG_STRINGS[CheckMethod(flags)]
    except ValueError:
        return "invalid"


def pad_len(n: int) -> int:
    """Return the number of bytes needed to align ``n`` to four bytes."""
    return (4 - n % 4) % 4


def _crc32(data: bytes) -> int:
    return uint32_le(CRC32(data).digest())


@dataclass(frozen=True)
class Header:
    """The xz stream header; it carries only the check flags."""

    flags: int

    def __str__(self) -> str:
        return flag_string(self.flags)

    def to_bytes(self) -> bytes:
        verify_flags(self.flags)
        flag_bytes = bytes([0, self.flags])
        return HEADER_MAGIC + flag_bytes + encode_uint32_le(_crc32(flag_bytes))

    @classmethod
    def from_bytes(cls, data: bytes) -> Header:
        if len(data) != HEADER_LEN:
            raise FormatError("xz: wrong file header length")
        if data[:6] != HEADER_MAGIC:
            raise FormatError("xz: invalid header magic bytes")
        if uint32_le(data[8:]) != _crc32(data[6:8]):
            raise FormatError("xz: invalid checksum for file header")
        if data[6] != 0:
            raise FormatError("xz: invalid flags")
        verify_flags(data[7])
        return cls(flags=data[7])


def valid_header(data: bytes) -> bool:
    """Tell whether ``data`` is a correct xz stream header."""
    try:
        Header.from_bytes(data)
    except FormatError:
        return False
    return True


@dataclass(frozen=True)
class Footer:
    """The xz stream footer: index size and check flags."""

    index_size: int
    flags: int

    def __str__(self) -> str:
        return f"{flag_string(self.flags)} index size {self.index_size}"

    def to_bytes(self) -> bytes:
        verify_flags(self.flags)
        if not MIN_INDEX_SIZE <= self.index_size <= MAX_INDEX_SIZE:
            raise FormatError("xz: index size out of range")
        if self.index_size % 4 != 0:
            raise FormatError("xz: index size not aligned to four bytes")
        body = (
            encode_uint32_le(self.index_size // 4 - 1)
            + bytes([0, self.flags])
        )
        return encode_uint32_le(_crc32(body)) + body + FOOTER_MAGIC

    @classmethod
    def from_bytes(cls, data: bytes) -> Footer:
        if len(data) != FOOTER_LEN:
            raise FormatError("xz: wrong footer length")
        if data[10:] != FOOTER_MAGIC:
            raise FormatError("xz: footer magic invalid")
        if uint32_le(data) != _crc32(data[4:10]):
            raise FormatError("xz: footer checksum error")
        index_size = (uint32_le(data[4:]) + 1) * 4
        if data[8] != 0:
            raise FormatError("xz: invalid flags")
        verify_flags(data[9])
        return cls(index_size=index_size, flags=data[9])


@dataclass(frozen=True)
class Record:
    """A block entry of the xz index."""

    unpadded_size: int
    uncompressed_size: int

    def to_bytes(self) -> bytes:
        return encode_uvarint(self.unpadded_size) + encode_uvarint(
            self.uncompressed_size
        )


_INT64_LIMIT = 1 << 63


def read_record(stream: BinaryIO) -> tuple[Record, int]:
    """Read an index record; return it with the number of bytes consumed."""
    unpadded, k1 = read_uvarint(stream)
    if unpadded >= _INT64_LIMIT:
        raise FormatError("xz: unpadded size negative")
    uncompressed, k2 = read_uvarint(stream)
    if uncompressed >= _INT64_LIMIT:
        raise FormatError("xz: uncompressed size negative")
    return Record(unpadded, uncompressed), k1 + k2


def write_index(stream: BinaryIO, records: Iterable[Record]) -> int:
    """Write the index, indicator included; return the bytes written."""
    records = list(records)
    body = bytearray(b"\x00")
    body += encode_uvarint(len(records))
    for rec in records:
        body += rec.to_bytes()
    body += bytes(pad_len(len(body)))
    body += encode_uint32_le(_crc32(bytes(body)))
    stream.write(bytes(body))
    return len(body)


class _ChecksumReader:
    """Reader that feeds everything it reads into a CRC-32."""

    def __init__(self, stream: BinaryIO, crc: CRC32) -> None:
        self._stream = stream
        self._crc = crc

    def read(self, size: int = -1) -> bytes:
        data = self._stream.read(size)
        self._crc.update(data)
        return data

    def read_exact(self, size: int) -> bytes:
        data = self.read(size)
        if len(data) != size:
            raise EOFError("unexpected end of index data")
        return data


def read_index_body(
    stream: BinaryIO, expected_record_count: int
) -> tuple[list[Record], int]:
    """Read the index after its indicator byte.

    Returns the records and the number of bytes consumed.
    """
    crc = CRC32(b"\x00")
    reader = _ChecksumReader(stream, crc)

    count, n = read_uvarint(reader)
    if count >= _INT64_LIMIT:
        raise FormatError("xz: record number overflow")
    if count != expected_record_count:
        raise FormatError(
            f"xz: index length is {count}; want {expected_record_count}"
        )

    records = []
    for _ in range(count):
        rec, k = read_record(reader)
        n += k
        records.append(rec)

    padding = reader.read_exact(pad_len(n + 1))
    n += len(padding)
    if any(padding):
        raise FormatError("xz: non-zero byte in index padding")

    expected = uint32_le(crc.digest())
    stored = reader.read_exact(4)
    n += 4
    if uint32_le(stored) != expected:
        raise FormatError("xz: wrong checksum for index")
    return records, n