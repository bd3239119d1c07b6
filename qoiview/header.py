import struct
from typing import NamedTuple

from .errors import (
    BadMagic,
    IllegalChannels,
    IllegalColorspace,
    IllegalHeight,
    IllegalWidth,
    ImageTooLarge,
    TooShort,
)
from .qoi import QOI


class QOIHeader(NamedTuple):
    width: int
    height: int
    channels: int
    colorspace: int


def read_header(data) -> QOIHeader:
    """
    Parse and validate the 14 byte QOI header at the start of data.

    The buffer must also be long enough to hold the 8 byte end marker,
    otherwise it cannot be a complete QOI file.

    :param data: bytes-like object holding the whole QOI file.
    :return: QOIHeader(width, height, channels, colorspace)
    :raises DecodeError: one of the subclasses in qoiview.errors.
    """
    if len(data) < QOI.QOI_HEADER_SIZE + len(QOI.QOI_PADDING):
        raise TooShort("QOI.decode: file too short")

    # > : Big Endian
    # 4s: 4-byte string (magic)
    # I : unsigned int (4 bytes)
    # B : unsigned char (1 byte)
    magic, width, height, channels, colorspace = struct.unpack(
        ">4sIIBB", data[: QOI.QOI_HEADER_SIZE]
    )

    if magic != QOI.QOI_MAGIC:
        raise BadMagic("QOI.decode: The signature of the QOI file is invalid")

    if width == 0:
        raise IllegalWidth(f"QOI.decode: illegal width: {width}")

    if height == 0:
        raise IllegalHeight(f"QOI.decode: illegal height: {height}")

    if width * height > QOI.QOI_PIXELS_MAX:
        raise ImageTooLarge(
            f"QOI.decode: file is too large ({width}x{height} pixels)"
        )

    if channels not in (3, 4):
        raise IllegalChannels(f"QOI.decode: illegal number of channels: {channels}")

    # Only the low nibble carries meaning (0 = sRGB, 1 = linear)
    if colorspace & 0xF0:
        raise IllegalColorspace(f"QOI.decode: illegal color space: 0x{colorspace:x}")

    return QOIHeader(width, height, channels, colorspace)
