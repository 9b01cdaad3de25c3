from typing import List, Sequence

GENERATOR = (0x3b6a57b2, 0x26508e6d, 0x1ea119fa, 0x3d4233dd, 0x2a1462b3)

CHECKSUM_LENGTH = 6


def polymod(values: Sequence[int]) -> int:
    """Internal polynomial modulus operation for checksum calculation."""
    checksum = 1
    for value in values:
        top = checksum >> 25
        checksum = ((checksum & 0x1FFFFFF) << 5) ^ value
        for i in range(5):
            if (top >> i) & 1:
                checksum ^= GENERATOR[i]
    return checksum


def hrp_expand(hrp: str) -> List[int]:
    """Expands the human-readable part for checksum calculation."""
    return [ord(x) >> 5 for x in hrp] + [0] + [ord(x) & 31 for x in hrp]


def verify_checksum(hrp: str, data: Sequence[int]) -> bool:
    return polymod(hrp_expand(hrp) + list(data)) == 1


def create_checksum(hrp: str, data: Sequence[int]) -> List[int]:
    """Computes the six checksum symbols binding hrp and data."""
    values = hrp_expand(hrp) + list(data) + [0] * CHECKSUM_LENGTH
    mod = polymod(values) ^ 1
    return [(mod >> 5 * (5 - p)) & 31 for p in range(CHECKSUM_LENGTH)]
