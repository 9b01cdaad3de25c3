from typing import List, Sequence, Tuple

from structs.charset import char_to_symbol, symbol_to_char
from structs.checksum import CHECKSUM_LENGTH, create_checksum, verify_checksum
from structs.errors import Bch32Error, CharsetError, ChecksumError, LengthError
from structs.mixed_case import mixed_case

MAX_LENGTH = 90
HRP_LENGTHS = (1, 2)


def _check_hrp_chars(hrp: str):
    for p, c in enumerate(hrp):
        if ord(c) < 33 or ord(c) > 126:
            raise CharsetError(f"invalid character human-readable part : hrp[{p}]={ord(c)}", value=ord(c), index=p)


def bch32_encode(hrp: str, data: Sequence[int]) -> str:
    """
    Encodes a human-readable part and 5-bit data into a checksummed string.

    A lowercase hrp yields a lowercase string, a Title-cased two character hrp
    yields the mixed display style, anything else yields an uppercase string.
    """
    if len(hrp) + len(data) + 7 > MAX_LENGTH:
        raise LengthError(f"too long : hrp length={len(hrp)}, data length={len(data)}",
                          value=len(hrp) + len(data) + 7)
    if len(hrp) not in HRP_LENGTHS:
        raise LengthError(f"invalid hrp : hrp={hrp!r}", value=len(hrp))
    _check_hrp_chars(hrp)

    lower = hrp.lower() == hrp
    mixed = len(hrp) == 2 and hrp[0].upper() + hrp[1].lower() == hrp
    hrp = hrp.lower()
    data = list(data)
    # Symbol range is checked before the checksum is computed over it
    body = "".join(symbol_to_char(value, idx) for idx, value in enumerate(data))
    body += "".join(symbol_to_char(value) for value in create_checksum(hrp, data))
    ret = hrp + body
    if lower:
        return ret
    if mixed:
        return mixed_case(ret)
    return ret.upper()


def _decode_with_hrp_length(bch_string: str, hrp_length: int) -> Tuple[str, List[int]]:
    hrp = bch_string[:hrp_length]
    _check_hrp_chars(hrp)
    data = [char_to_symbol(c, p) for p, c in enumerate(bch_string[hrp_length:], start=hrp_length)]
    if not verify_checksum(hrp, data):
        raise ChecksumError("invalid checksum", value=bch_string)
    return hrp, data[:-CHECKSUM_LENGTH]


def bch32_decode(bch_string: str) -> Tuple[str, List[int]]:
    """
    Decodes a checksummed string into its lowercase hrp and 5-bit data.

    There is no separator between the hrp and the data, so both hrp lengths are
    tried (two characters first) and the one whose checksum verifies wins.
    """
    if len(bch_string) > MAX_LENGTH:
        raise LengthError(f"too long : len={len(bch_string)}", value=len(bch_string))
    bch_string = bch_string.lower()

    errors = []
    for hrp_length in sorted(HRP_LENGTHS, reverse=True):
        if len(bch_string) < hrp_length + CHECKSUM_LENGTH:
            continue
        try:
            return _decode_with_hrp_length(bch_string, hrp_length)
        except Bch32Error as e:
            errors.append(e)

    if not errors:
        raise LengthError(f"too short : len={len(bch_string)}", value=len(bch_string))
    for e in errors:
        if isinstance(e, ChecksumError):
            raise e
    raise errors[0]


def is_valid(bch_string: str) -> bool:
    try:
        bch32_decode(bch_string)
    except Bch32Error:
        return False
    return True
