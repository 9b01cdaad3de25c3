class Bch32Error(ValueError):
    """Base class for every encode/decode failure."""

    def __init__(self, message: str, value=None, index=None):
        super().__init__(message)
        self.value = value
        self.index = index


class LengthError(Bch32Error):
    pass


class CharsetError(Bch32Error):
    pass


class InvalidSymbolError(CharsetError):
    pass


class RangeError(CharsetError):
    pass


class ChecksumError(Bch32Error):
    pass


class VersionError(Bch32Error):
    pass


class PaddingError(Bch32Error):
    pass


class PrefixError(Bch32Error):
    pass


class PayloadError(Bch32Error):
    pass
