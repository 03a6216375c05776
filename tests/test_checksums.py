import pytest

from xzkit.checksums import CRC32, CRC64, crc64

CHECK_INPUT = b"123456789"


def test_crc32_check_value():
    h = CRC32()
    h.update(CHECK_INPUT)
    assert h.digest() == b"\x26\x39\xf4\xcb"


def test_crc64_check_value():
    assert crc64(CHECK_INPUT) == 0x995DC9BBDF1939FA


def test_empty_digests_are_zero():
    assert CRC32().digest() == b"\x00" * 4
    assert CRC64().digest() == b"\x00" * 8


@pytest.mark.parametrize("split", [0, 1, 4, 9])
def test_crc32_incremental_matches_one_shot(split):
    h = CRC32()
    h.update(CHECK_INPUT[:split])
    h.update(CHECK_INPUT[split:])
    assert h.digest() == CRC32(CHECK_INPUT).digest()


@pytest.mark.parametrize("split", [0, 3, 5, 9])
def test_crc64_incremental_matches_one_shot(split):
    h = CRC64()
    h.update(CHECK_INPUT[:split])
    h.update(CHECK_INPUT[split:])
    assert h.digest() == CRC64(CHECK_INPUT).digest()


def test_crc64_continuation():
    a, b = b"hello ", b"world"
    assert crc64(b, crc64(a)) == crc64(a + b)


def test_crc64_digest_is_little_endian_value():
    h = CRC64(CHECK_INPUT)
    assert int.from_bytes(h.digest(), "little") == crc64(CHECK_INPUT)
    assert len(h.digest()) == 8