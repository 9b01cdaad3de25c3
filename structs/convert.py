from typing import List, Sequence

from structs.errors import PaddingError, RangeError


def convert_bits(data: Sequence[int], from_bits: int, to_bits: int, pad: bool = True) -> List[int]:
    """
    Regroups a sequence of from_bits-wide integers into to_bits-wide integers.

    The input is treated as one contiguous bitstream, most significant bit first.

    Args:
        data (Sequence[int]): Values to convert, each fitting in from_bits bits.
        from_bits (int): Width of the input values.
        to_bits (int): Width of the output values.
        pad (bool): Left-justify and emit leftover bits as a final group. When False,
                    leftover bits must be fewer than from_bits and all zero.

    Returns:
        List[int]: The converted values, each within [0, 2**to_bits).
    """
    acc = 0
    bits = 0
    ret = []
    maxv = (1 << to_bits) - 1
    for idx, value in enumerate(data):
        if value < 0 or (value >> from_bits):
            raise RangeError(f"invalid data range : data[{idx}]={value} (frombits={from_bits})",
                             value=value, index=idx)
        acc = (acc << from_bits) | value
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            ret.append((acc >> bits) & maxv)
    if pad:
        if bits:
            ret.append((acc << (to_bits - bits)) & maxv)
    elif bits >= from_bits:
        raise PaddingError("illegal zero padding", value=bits)
    elif (acc << (to_bits - bits)) & maxv:
        raise PaddingError("non-zero padding", value=(acc << (to_bits - bits)) & maxv)
    return ret
