import numpy as np
import pytest
from bitvector import BitVector
from errors import InvalidSizeError, InvalidDigitError, IndexOutOfRangeError


def test_constructor():
    vec = BitVector(5)
    assert vec.size == 5
    assert len(vec) == 5
    for bit in vec:
        assert bit is False
    assert str(vec) == "00000"


@pytest.mark.parametrize("size", [0, -1])
def test_constructor_bad_size(size):
    with pytest.raises(InvalidSizeError):
        BitVector(size)


def test_string_constructor():
    assert all(not bit for bit in BitVector.from_binary_string("00000"))
    assert all(BitVector.from_binary_string("11111"))


def test_string_constructor_bit_order():
    vec = BitVector.from_binary_string("10000")
    assert vec.get(4) is True
    assert vec.get(0) is False
    assert str(vec) == "10000"


def test_string_constructor_empty():
    with pytest.raises(InvalidSizeError):
        BitVector.from_binary_string("")


@pytest.mark.parametrize("binary", ["1234", "10 1", "1_0", "0b10"])
def test_string_constructor_non_binary(binary):
    with pytest.raises(InvalidDigitError):
        BitVector.from_binary_string(binary)


def test_from_int_masks_width():
    vec = BitVector.from_int(0b110101, 4)
    assert str(vec) == "0101"
    assert vec.value == 0b0101


@pytest.mark.parametrize("position", [-1, 5])
@pytest.mark.parametrize("op", ["get", "set", "clear"])
def test_index_out_of_range(op, position):
    vec = BitVector.from_binary_string("00000")
    with pytest.raises(IndexOutOfRangeError):
        getattr(vec, op)(position)


def test_index_error_is_index_error():
    with pytest.raises(IndexError):
        BitVector(3).get(3)


def test_set_bit():
    vec = BitVector.from_binary_string("00000")
    vec.set(1)
    assert vec == BitVector.from_binary_string("00010")


def test_set_bit_no_op():
    vec = BitVector.from_binary_string("01010")
    vec.set(1)
    assert vec == BitVector.from_binary_string("01010")


def test_clear_bit():
    vec = BitVector.from_binary_string("11111")
    vec.clear(1)
    assert vec == BitVector.from_binary_string("11101")


def test_clear_bit_no_op():
    vec = BitVector.from_binary_string("10101")
    vec.clear(1)
    assert vec == BitVector.from_binary_string("10101")


@pytest.mark.parametrize("method, bit, evicted, expected", [
    ("push_left", False, False, "01100"),
    ("push_left", True, False, "11100"),
    ("push_right", False, True, "10000"),
    ("push_right", True, True, "10001"),
])
def test_push(method, bit, evicted, expected):
    vec = BitVector.from_binary_string("11000")
    out = getattr(vec, method)(bit)
    assert out is evicted
    assert vec == BitVector.from_binary_string(expected)


def test_push_right_keeps_width():
    vec = BitVector.from_binary_string("111")
    for _ in range(10):
        vec.push_right(True)
    assert vec.size == 3
    assert vec.value == 0b111


def test_copy_is_independent():
    vec = BitVector.from_binary_string("1010")
    dup = vec.copy()
    assert dup == vec
    dup.set(0)
    assert vec == BitVector.from_binary_string("1010")
    assert dup == BitVector.from_binary_string("1011")


def test_equality_and_hash():
    a = BitVector.from_binary_string("10110")
    b = BitVector.from_binary_string("10110")
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_different_sizes_not_equal():
    assert BitVector.from_binary_string("0101") != BitVector.from_binary_string("00101")
    assert BitVector(4) != BitVector(5)


def test_not_equal_to_other_types():
    assert BitVector.from_binary_string("1") != "1"


def test_iteration_is_restartable():
    vec = BitVector.from_binary_string("0011")
    assert list(vec) == [True, True, False, False]
    assert list(vec) == [True, True, False, False]


def test_to_numpy():
    arr = BitVector.from_binary_string("0011").to_numpy()
    assert arr.dtype == np.uint8
    np.testing.assert_array_equal(arr, [1, 1, 0, 0])


def test_repr():
    assert repr(BitVector.from_binary_string("0110")) == "BitVector('0110')"
