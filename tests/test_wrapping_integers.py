import random

import pytest

from tcpstack.wrapping_integers import Wrap32

UINT32_MAX = (1 << 32) - 1
INT32_MAX = (1 << 31) - 1


def test_compare_low_adjacent():
    assert (Wrap32(3) != Wrap32(1)) is True
    assert (Wrap32(3) == Wrap32(1)) is False


def test_compare_random():
    rd = random.Random(1234)
    for _ in range(32768):
        n = rd.getrandbits(32)
        diff = rd.getrandbits(8)
        m = (n + diff) & UINT32_MAX
        assert (Wrap32(n) == Wrap32(m)) == (n == m)
        assert (Wrap32(n) != Wrap32(m)) == (n != m)


@pytest.mark.parametrize(
    "n, zero, expected",
    [
        (3 * (1 << 32), 0, 0),
        (3 * (1 << 32) + 17, 15, 32),
        (7 * (1 << 32) - 2, 15, 13),
    ],
)
def test_wrap(n, zero, expected):
    assert Wrap32.wrap(n, Wrap32(zero)) == Wrap32(expected)


@pytest.mark.parametrize(
    "raw, zero, checkpoint, expected",
    [
        (1, 0, 0, 1),
        (1, 0, UINT32_MAX, (1 << 32) + 1),
        (UINT32_MAX - 1, 0, 3 * (1 << 32), 3 * (1 << 32) - 2),
        (UINT32_MAX - 10, 0, 3 * (1 << 32), 3 * (1 << 32) - 11),
        (UINT32_MAX, 10, 3 * (1 << 32), 3 * (1 << 32) - 11),
        (UINT32_MAX, 0, 0, UINT32_MAX),
        (16, 16, 0, 0),
        (15, 16, 0, UINT32_MAX),
        (0, INT32_MAX, 0, INT32_MAX + 2),
        (UINT32_MAX, INT32_MAX, 0, 1 << 31),
        (UINT32_MAX, 1 << 31, 0, UINT32_MAX >> 1),
        (0, 1, 1, UINT32_MAX),
    ],
)
def test_unwrap(raw, zero, checkpoint, expected):
    assert Wrap32(raw).unwrap(Wrap32(zero), checkpoint) == expected


_STEP = 7


@pytest.mark.parametrize("value", [0, 1])
def test_extra_small_values(value):
    zero = Wrap32(19)
    for checkpoint in range(0, 100000, _STEP):
        assert Wrap32.wrap(value, zero).unwrap(zero, checkpoint) == value


@pytest.mark.parametrize(
    "value", [UINT32_MAX - 1, UINT32_MAX, UINT32_MAX + 1, UINT32_MAX + 2]
)
def test_extra_around_first_wrap(value):
    zero = Wrap32(19)
    for checkpoint in range(UINT32_MAX - 100000, UINT32_MAX + 100000, _STEP):
        assert Wrap32.wrap(value, zero).unwrap(zero, checkpoint) == value


@pytest.mark.parametrize(
    "value",
    [2 * UINT32_MAX - 1, 2 * UINT32_MAX, 2 * UINT32_MAX + 1, 2 * UINT32_MAX + 2],
)
def test_extra_around_second_wrap(value):
    zero = Wrap32(19)
    for checkpoint in range(2 * UINT32_MAX - 100000, 2 * UINT32_MAX + 100000, _STEP):
        assert Wrap32.wrap(value, zero).unwrap(zero, checkpoint) == value


@pytest.mark.parametrize("base", [UINT32_MAX, 2 * UINT32_MAX])
def test_extra_values_near_checkpoint(base):
    zero = Wrap32(19)
    for i in range(-100000, 100000, _STEP):
        assert Wrap32.wrap(base + i, zero).unwrap(zero, base) == base + i


def test_roundtrip():
    rd = random.Random(42)
    big_offset = (1 << 31) - 1
    for _ in range(3000):
        isn = Wrap32(rd.randint(0, UINT32_MAX))
        val = rd.randint(big_offset, 1 << 63)
        offset = rd.randint(0, (1 << 31) - 1)
        for value in (
            val,
            val + 1,
            val - 1,
            val + offset,
            val - offset,
            val + big_offset,
            val - big_offset,
        ):
            assert Wrap32.wrap(value, isn).unwrap(isn, val) == value


def test_add_wraps_around():
    assert Wrap32(UINT32_MAX) + 1 == Wrap32(0)
    assert Wrap32(5) + 10 == Wrap32(15)