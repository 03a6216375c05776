import random

import pytest

from xzkit.rollhash import DEFAULT_A, CyclicPoly, RabinKarp, hashes


def _bench_bytes(n):
    rnd = random.Random(42)
    return bytes(rnd.getrandbits(8) for _ in range(n))


@pytest.mark.parametrize("factory", [CyclicPoly, RabinKarp])
def test_simple_rolling_matches_window(factory):
    p = b"abcde"
    r = factory(4)
    h2 = hashes(r, p)
    assert len(h2) == 2
    for i, h in enumerate(h2):
        w = hashes(r, p[i:i + 4])[0]
        assert h == w


@pytest.mark.parametrize("factory", [CyclicPoly, RabinKarp])
def test_rolling_matches_fresh_roller(factory):
    data = _bench_bytes(300)
    rolled = hashes(factory(4), data)
    assert len(rolled) == len(data) - 3
    for i in (0, 17, 150, len(rolled) - 1):
        assert rolled[i] == hashes(factory(4), data[i:i + 4])[0]


@pytest.mark.parametrize("factory", [CyclicPoly, RabinKarp])
def test_len(factory):
    assert len(factory(7)) == 7


@pytest.mark.parametrize("factory", [CyclicPoly, RabinKarp])
def test_short_input_gives_no_hashes(factory):
    assert hashes(factory(4), b"abc") == []


@pytest.mark.parametrize("factory", [CyclicPoly, RabinKarp])
@pytest.mark.parametrize("n", [0, -3])
def test_non_positive_length_rejected(factory, n):
    with pytest.raises(ValueError):
        factory(n)


def test_rabin_karp_single_byte_value():
    assert RabinKarp(1).roll_byte(1) == DEFAULT_A


def test_cyclic_poly_single_byte_value():
    assert CyclicPoly(1).roll_byte(0) == 0x2E4FC3F904065142


def test_cyclic_poly_window_one_rolls():
    r = CyclicPoly(1)
    first = r.roll_byte(5)
    r.roll_byte(9)
    assert r.roll_byte(5) == first


@pytest.mark.parametrize("factory", [CyclicPoly, RabinKarp])
def test_hash_values_are_64_bit(factory):
    for h in hashes(factory(3), _bench_bytes(100)):
        assert 0 <= h < 1 << 64


def test_rabin_karp_custom_constant_differs():
    data = b"hello world"
    assert hashes(RabinKarp(4, 3), data) != hashes(RabinKarp(4), data)