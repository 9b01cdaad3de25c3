BLOCK_SIZE = 4


def mixed_case(address: str) -> str:
    """
    Renders an address in the mixed display style: Title-cased two character prefix,
    body in 4-character blocks alternating upper/lower starting upper, and the
    trailing 6 checksum characters in the next case of the alternation.
    """
    # Strings shorter than prefix plus checksum must not be read twice
    cut = max(2, len(address) - 6)
    hrp, body, checksum = address[:2], address[2:cut], address[cut:]
    lower = False
    blocks = []
    for idx in range(0, len(body), BLOCK_SIZE):
        block = body[idx:idx + BLOCK_SIZE]
        blocks.append(block.lower() if lower else block.upper())
        lower = not lower
    checksum = checksum.lower() if lower else checksum.upper()
    return hrp[:1].upper() + hrp[1:].lower() + "".join(blocks) + checksum
