from typing import Sequence, Tuple

from structs.bch32 import bch32_decode, bch32_encode
from structs.convert import convert_bits
from structs.errors import LengthError, PrefixError, VersionError

MAX_VERSION = 16
MIN_PROGRAM_LENGTH = 2
MAX_PROGRAM_LENGTH = 40


def addr_encode(hrp: str, version: int, program: Sequence[int]) -> str:
    """Encodes a versioned program (bytes) as an address string."""
    if version < 0 or version > MAX_VERSION:
        raise VersionError(f"invalid version : {version}", value=version)
    if len(program) < MIN_PROGRAM_LENGTH or len(program) > MAX_PROGRAM_LENGTH:
        raise LengthError(f"invalid program length : {len(program)}", value=len(program))
    data = convert_bits(program, 8, 5, True)
    return bch32_encode(hrp, [version] + data)


def addr_decode(hrp: str, addr: str) -> Tuple[int, bytes]:
    """
    Decodes an address string into its version and program.

    The expected hrp matches case-insensitively: "BC", "Bc" and "bc" all
    accept an address whose decoded (always lowercase) hrp is "bc".
    """
    dec_hrp, data = bch32_decode(addr)
    if dec_hrp != hrp.lower():
        raise PrefixError(f"invalid human-readable part : {hrp} != {dec_hrp}", value=dec_hrp)
    if len(data) < 1:
        raise LengthError(f"invalid decode data length : {len(data)}", value=len(data))
    if data[0] > MAX_VERSION:
        raise VersionError(f"invalid version : {data[0]}", value=data[0], index=0)
    program = convert_bits(data[1:], 5, 8, False)
    if len(program) < MIN_PROGRAM_LENGTH or len(program) > MAX_PROGRAM_LENGTH:
        raise LengthError(f"invalid convertbits length : {len(program)}", value=len(program))
    return data[0], bytes(program)
