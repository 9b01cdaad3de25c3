from typing import Sequence, Tuple

from construct import Byte, Bytes, ConstructError, Rebuild, Struct, Terminated, len_, this

from structs.address import addr_decode, addr_encode
from structs.errors import PayloadError

# version | program length | program
WitnessPayload = Struct(
    'version' / Byte,
    'length' / Rebuild(Byte, len_(this.program)),
    'program' / Bytes(this.length),
    Terminated,
)


def pack_payload(version: int, program: Sequence[int]) -> bytes:
    try:
        return WitnessPayload.build(dict(version=version, program=bytes(program)))
    except (ConstructError, ValueError) as e:
        raise PayloadError(f"cannot build payload : {e}", value=version) from e


def unpack_payload(blob: bytes) -> Tuple[int, bytes]:
    try:
        parsed = WitnessPayload.parse(blob)
    except ConstructError as e:
        raise PayloadError(f"malformed payload : {e}", value=bytes(blob)) from e
    return parsed.version, parsed.program


def payload_to_address(hrp: str, blob: bytes) -> str:
    """Encodes a serialized payload as an address string."""
    version, program = unpack_payload(blob)
    return addr_encode(hrp, version, program)


def address_to_payload(hrp: str, addr: str) -> bytes:
    """Decodes an address string into its serialized payload."""
    version, program = addr_decode(hrp, addr)
    return pack_payload(version, program)
