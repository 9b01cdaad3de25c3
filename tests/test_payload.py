import pytest

from structs.errors import PayloadError, VersionError
from structs.payload import address_to_payload, pack_payload, payload_to_address, unpack_payload

PROGRAM = bytes.fromhex("751e76e8199196d454941c45d1b3a323f1433bd6")
ADDRESS = "bcqw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4"


def test_pack_payload_layout():
    assert pack_payload(0, PROGRAM) == b"\x00\x14" + PROGRAM
    assert pack_payload(16, [0x75, 0x1e]) == bytes.fromhex("1002751e")


def test_unpack_payload():
    assert unpack_payload(b"\x00\x14" + PROGRAM) == (0, PROGRAM)


@pytest.mark.parametrize("blob", [b"", b"\x00", b"\x00\x05\x01\x02", b"\x00\x01\x01\x02"])
def test_unpack_malformed_payload(blob):
    with pytest.raises(PayloadError):
        unpack_payload(blob)


def test_pack_rejects_out_of_range_values():
    with pytest.raises(PayloadError):
        pack_payload(300, PROGRAM)
    with pytest.raises(PayloadError):
        pack_payload(0, [1, 256])


def test_payload_to_address():
    assert payload_to_address("bc", b"\x00\x14" + PROGRAM) == ADDRESS


def test_address_to_payload():
    assert address_to_payload("bc", ADDRESS) == b"\x00\x14" + PROGRAM


def test_payload_version_is_checked_by_address_codec():
    with pytest.raises(VersionError):
        payload_to_address("bc", pack_payload(17, PROGRAM))
