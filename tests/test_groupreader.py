import io
import random
import string

import pytest

from xzkit.groupreader import GroupReader


def _letters(n, seed=1):
    rnd = random.Random(seed)
    return "".join(rnd.choice(string.ascii_uppercase) for _ in range(n)).encode()


def _strip(out):
    return out.replace(b" ", b"").replace(b"\n", b"")


def test_two_groups():
    out = GroupReader(io.BytesIO(b"ABCDEFGHIJ")).read()
    assert out == b"ABCDE FGHIJ\n"


def test_empty_input_gives_newline():
    assert GroupReader(io.BytesIO(b"")).read() == b"\n"


def test_read_after_end_is_empty():
    r = GroupReader(io.BytesIO(b"ABC"))
    first = r.read()
    assert _strip(first) == b"ABC"
    assert r.read() == b""
    assert r.read(10) == b""


def test_content_preserved():
    data = _letters(500)
    out = GroupReader(io.BytesIO(data)).read()
    assert _strip(out) == data
    assert out.endswith(b"\n")


def test_spaces_become_underscores():
    data = b"ab cd ef gh"
    out = GroupReader(io.BytesIO(data)).read()
    assert _strip(out) == data.replace(b" ", b"_")


def test_unprintable_become_dashes():
    data = bytes([0x01, 0x02, 0x7F, 0x80, 0x9F, 0x0A, 0x09])
    out = GroupReader(io.BytesIO(data)).read()
    assert _strip(out) == b"-" * len(data)


def test_groups_have_five_characters():
    out = GroupReader(io.BytesIO(_letters(203))).read()
    groups = out.split()
    assert all(len(g) == 5 for g in groups[:-1])
    assert 1 <= len(groups[-1]) <= 5


@pytest.mark.parametrize("per_line, expected", [(2, 2), (3, 3), (0, 8), (-1, 8)])
def test_groups_per_line(per_line, expected):
    out = GroupReader(io.BytesIO(_letters(400)), per_line).read()
    lines = out.decode().splitlines()
    assert all(len(line.split(" ")) == expected for line in lines[:-1])
    assert len(lines[-1].split(" ")) <= expected
    assert all(not line.endswith(" ") for line in lines)


@pytest.mark.parametrize("size", [2, 3, 7, 64])
@pytest.mark.parametrize("length", [5, 47, 48, 100, 241])
def test_chunked_reads_match_full_read(size, length):
    data = _letters(length, seed=length)
    full = GroupReader(io.BytesIO(data)).read()
    r = GroupReader(io.BytesIO(data))
    parts = []
    while chunk := r.read(size):
        assert len(chunk) <= size
        parts.append(chunk)
    assert b"".join(parts) == full


def test_chunk_never_ends_with_separator():
    r = GroupReader(io.BytesIO(_letters(300)))
    chunks = []
    while chunk := r.read(6):
        chunks.append(chunk)
    assert all(not c.endswith((b" ", b"\n")) for c in chunks[:-1])
    assert chunks[-1].endswith(b"\n")