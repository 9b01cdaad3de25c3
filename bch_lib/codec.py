import logging
from typing import Optional, Sequence

from config.settings import DEFAULT_HRP, DEFAULT_VERSION
from bch_lib.result import Result
from structs.address import addr_decode, addr_encode
from structs.bch32 import bch32_decode, bch32_encode
from structs.errors import Bch32Error
from structs.mixed_case import mixed_case
from structs.payload import address_to_payload, payload_to_address

logger = logging.getLogger(__name__)


class Bch32Codec:
    def __init__(self, default_hrp: str = DEFAULT_HRP, default_version: int = DEFAULT_VERSION):
        self.default_hrp = default_hrp
        self.default_version = default_version

    def _hrp(self, hrp: Optional[str]) -> str:
        return self.default_hrp if hrp is None else hrp

    def _run(self, operation: str, func, *args) -> Result:
        try:
            value = func(*args)
        except Bch32Error as e:
            logger.warning(f"{operation} failed: {e}")
            return Result(False, error=str(e), exception=e)
        logger.debug(f"{operation} succeeded: {value!r}")
        return Result(True, value)

    def encode(self, data: Sequence[int], hrp: Optional[str] = None) -> Result:
        """Encodes 5-bit symbols under hrp (or the default hrp)."""
        return self._run("encode", bch32_encode, self._hrp(hrp), data)

    def decode(self, bch_string: str) -> Result:
        """Decodes a string into an (hrp, symbols) tuple."""
        return self._run("decode", bch32_decode, bch_string)

    def validate(self, bch_string: str) -> Result:
        """Checks a string, returning the canonical lowercase form on success."""
        result = self.decode(bch_string)
        if result.success:
            return Result(True, bch_string.lower())
        return result

    def addr_encode(self, program: Sequence[int], version: Optional[int] = None,
                    hrp: Optional[str] = None) -> Result:
        if version is None:
            version = self.default_version
        return self._run("addr_encode", addr_encode, self._hrp(hrp), version, program)

    def addr_decode(self, address: str, hrp: Optional[str] = None) -> Result:
        """Decodes an address into a (version, program) tuple."""
        return self._run("addr_decode", addr_decode, self._hrp(hrp), address)

    def mixed_case(self, address: str) -> Result:
        result = self.validate(address)
        if not result.success:
            return result
        return Result(True, mixed_case(result.data))

    def encode_payload(self, blob: bytes, hrp: Optional[str] = None) -> Result:
        """Encodes a serialized version|length|program payload as an address."""
        return self._run("encode_payload", payload_to_address, self._hrp(hrp), blob)

    def decode_payload(self, address: str, hrp: Optional[str] = None) -> Result:
        return self._run("decode_payload", address_to_payload, self._hrp(hrp), address)
