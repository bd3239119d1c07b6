class DecodeError(ValueError):
    """Base class for every failure raised while reading a QOI header."""


class TooShort(DecodeError):
    pass


class BadMagic(DecodeError):
    pass


class IllegalWidth(DecodeError):
    pass


class IllegalHeight(DecodeError):
    pass


class ImageTooLarge(DecodeError):
    pass


class IllegalChannels(DecodeError):
    pass


class IllegalColorspace(DecodeError):
    pass
