from typing import Optional

from structs.errors import InvalidSymbolError

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"

CHARSET_REVERSE = {char: value for value, char in enumerate(CHARSET)}


def symbol_to_char(value: int, index: Optional[int] = None) -> str:
    """Maps a 5-bit symbol to its charset character."""
    if value < 0 or value >= len(CHARSET):
        raise InvalidSymbolError(f"invalid data : data[{index}]={value}", value=value, index=index)
    return CHARSET[value]


def char_to_symbol(char: str, index: Optional[int] = None) -> int:
    """Maps a lowercase charset character back to its 5-bit symbol."""
    value = CHARSET_REVERSE.get(char)
    if value is None:
        raise InvalidSymbolError(f"invalid character data part : string[{index}]={char!r}", value=char, index=index)
    return value
