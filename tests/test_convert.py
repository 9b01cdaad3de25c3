import pytest

from structs.convert import convert_bits
from structs.errors import CharsetError, PaddingError, RangeError


def test_golden_byte_to_symbols():
    assert convert_bits([255], 8, 5, True) == [31, 28]


def test_two_bytes_to_symbols():
    # 0x751e = 01110 10100 01111 0(0000)
    assert convert_bits([0x75, 0x1e], 8, 5, True) == [14, 20, 15, 0]


def test_exact_multiple_needs_no_padding():
    data = [0x00, 0x44, 0x32, 0x14, 0xc7]
    assert convert_bits(data, 8, 5, True) == convert_bits(data, 8, 5, False)
    assert len(convert_bits(data, 8, 5, True)) == 8


def test_round_trip_bytes():
    data = list(bytes.fromhex("751e76e8199196d454941c45d1b3a323f1433bd6"))
    symbols = convert_bits(data, 8, 5, True)
    assert all(0 <= v < 32 for v in symbols)
    assert convert_bits(symbols, 5, 8, False) == data


@pytest.mark.parametrize("length", range(1, 12))
def test_round_trip_lengths(length):
    data = [(i * 37 + 11) & 0xff for i in range(length)]
    assert convert_bits(convert_bits(data, 8, 5, True), 5, 8, False) == data


def test_output_range_for_other_widths():
    out = convert_bits([0xff, 0xff, 0xff], 8, 3, True)
    assert all(0 <= v < 8 for v in out)
    assert out == [7] * 8


def test_empty_input():
    assert convert_bits([], 8, 5, True) == []
    assert convert_bits([], 5, 8, False) == []


@pytest.mark.parametrize("value", [-1, 256])
def test_value_out_of_range(value):
    with pytest.raises(RangeError) as exc_info:
        convert_bits([1, value], 8, 5, True)
    assert exc_info.value.index == 1
    assert exc_info.value.value == value
    assert isinstance(exc_info.value, CharsetError)


def test_non_zero_padding():
    # 31, 28 carries 0xff plus two zero bits; 31, 29 leaves a set bit behind
    assert convert_bits([31, 28], 5, 8, False) == [255]
    with pytest.raises(PaddingError, match="non-zero padding"):
        convert_bits([31, 29], 5, 8, False)


def test_illegal_zero_padding():
    # A third symbol leaves 7 leftover bits, more than a whole input group
    with pytest.raises(PaddingError, match="illegal zero padding"):
        convert_bits([31, 28, 0], 5, 8, False)
