import pytest

from seagraph.bitset import Bitset


@pytest.mark.parametrize("width", [64, 32, 16, 8])
def test_bitset_functionality(width):
    bs = Bitset(0, width)
    assert len(bs) == 0
    assert bs.blocks() == 0

    bs = Bitset(1, width)
    assert len(bs) == 1
    assert bs.blocks() == 1

    bs = Bitset(64, width)
    assert len(bs) == 64
    assert bs.blocks() == 64 // width

    bs = Bitset(65, width)
    assert len(bs) == 65
    assert bs.blocks() == 64 // width + 1

    for i in range(len(bs)):
        assert bs[i] == 0
        assert bs.get(i) == bs[i]
        bs[i] = 1

    other = Bitset(65, width)
    for i in range(len(bs)):
        assert bs[i] == 1
        assert bs.get(i) == bs[i]

    for i in range(len(bs)):
        other[i] = bs[i]
        assert other[i] == bs[i]
        assert other.get(i) == bs[i]

    bs.clear()
    assert all(bs[i] == 0 for i in range(len(bs)))
    bs.set_all()
    assert all(bs[i] == 1 for i in range(len(bs)))

    bs.set_block(0, 0)
    assert bs.get_block(0) == 0
    for i in range(width):
        assert bs[i] == 0
        bs.flip_bit(i)
        assert bs[i] == 1
        bs.flip_bit(i)
        assert bs[i] == 0
    assert bs[len(bs) - 1] == 1

    bs.set_block(1, 0)
    assert bs[width] == 0

    full = (1 << width) - 1
    bs.set_block(0, full)
    for i in range(width):
        assert bs[i] == 1
    assert bs.get_block(0) == full


def test_from_bools_round_trip():
    values = [True, False, True, True, False, False, True, False, True]
    bs = Bitset.from_bools(values)
    assert len(bs) == len(values)
    assert list(bs) == values
    assert bs.block_bits == 8


def test_insert_and_equality():
    a = Bitset(10)
    b = Bitset(10)
    a.insert(3, True)
    assert a != b
    b[3] = 1
    assert a == b
    assert a.copy() == a


def test_copy_is_independent():
    a = Bitset.from_bools([1, 0, 1])
    b = a.copy()
    b[0] = 0
    assert a[0] is True
    assert b[0] is False


def test_bitwise_operators():
    a = Bitset.from_bools([1, 1, 0, 0, 1])
    b = Bitset.from_bools([1, 0, 1, 0, 1])

    c = a.copy()
    c &= b
    assert list(c) == [a[i] and b[i] for i in range(5)]

    c = a.copy()
    c |= b
    assert list(c) == [a[i] or b[i] for i in range(5)]

    c = a.copy()
    c ^= b
    assert list(c) == [a[i] != b[i] for i in range(5)]

    c = a.copy()
    c -= b
    assert list(c) == [a[i] and not b[i] for i in range(5)]

    assert list(~a) == [not x for x in a]
    assert list(a) == [True, True, False, False, True]


def test_operator_size_mismatch():
    a = Bitset(4)
    with pytest.raises(ValueError):
        a &= Bitset(5)


def test_index_errors():
    bs = Bitset(8)
    with pytest.raises(IndexError):
        bs.get(8)
    with pytest.raises(IndexError):
        bs[-1] = 1
    with pytest.raises(IndexError):
        bs.get_block(1)
    with pytest.raises(ValueError):
        bs.set_block(0, 256)
    with pytest.raises(ValueError):
        Bitset(-1)


def test_shifted_block_matches_bits():
    bs = Bitset(24)
    bs.set_block(0, 0xAB)
    bs.set_block(1, 0xCD)
    bs.set_block(2, 0x5E)
    for idx in range(len(bs)):
        shifted = bs.get_shifted_block(idx)
        for j in range(8):
            expected = bs[idx + j] if idx + j < len(bs) else False
            assert bool((shifted >> j) & 1) == expected


def test_shifted_block_aligned_is_block():
    bs = Bitset(16)
    bs.set_block(1, 0x3C)
    assert bs.get_shifted_block(8) == bs.get_block(1)