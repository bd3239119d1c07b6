from enum import IntEnum


class Channels(IntEnum):
    RGB = 3
    RGBA = 4


class ColorSpace(IntEnum):
    SRGB = 0
    LINEAR = 1


class QOI:
    # QOI Constants
    QOI_OP_INDEX = 0x00  # 00xxxxxx
    QOI_OP_DIFF  = 0x40  # 01xxxxxx
    QOI_OP_LUMA  = 0x80  # 10xxxxxx
    QOI_OP_RUN   = 0xC0  # 11xxxxxx
    QOI_OP_RGB   = 0xFE  # 11111110
    QOI_OP_RGBA  = 0xFF  # 11111111

    QOI_MASK_2   = 0xC0
    QOI_HEADER_SIZE = 14
    QOI_MAGIC = b'qoif'
    QOI_PADDING = b'\x00' * 7 + b'\x01'
    QOI_PIXELS_MAX = 400000000  # Safety limit (400MP)

    @staticmethod
    def hash(r, g, b, a):
        """Calculates the index position for the color array."""
        return (r * 3 + g * 5 + b * 7 + a * 11) % 64


def is_qoi(data) -> bool:
    """Cheap sniff: does the buffer start with the QOI magic?"""
    return bytes(data[:4]) == QOI.QOI_MAGIC
