from enum import IntEnum

from .qoi import QOI


class Op(IntEnum):
    INDEX = 0
    DIFF = 1
    LUMA = 2
    RUN = 3
    RGB = 4
    RGBA = 5


def classify(byte1: int) -> Op:
    """
    Map an op byte to its chunk type.

    The two 8-bit tags have to be checked before the 2-bit mask: both
    0xFE and 0xFF also carry the 11xxxxxx run pattern.
    """
    if byte1 == QOI.QOI_OP_RGB:
        return Op.RGB
    if byte1 == QOI.QOI_OP_RGBA:
        return Op.RGBA

    tag = byte1 & QOI.QOI_MASK_2
    if tag == QOI.QOI_OP_INDEX:
        return Op.INDEX
    if tag == QOI.QOI_OP_DIFF:
        return Op.DIFF
    if tag == QOI.QOI_OP_LUMA:
        return Op.LUMA
    return Op.RUN


# Lookup table so the pixel loop does a single list access per op byte
OP_TABLE = tuple(classify(value) for value in range(256))


def diff_deltas(byte1: int) -> tuple:
    """Signed (dr, dg, db), each in -2..1, packed into a QOI_OP_DIFF byte."""
    return (
        ((byte1 >> 4) & 0x03) - 2,
        ((byte1 >> 2) & 0x03) - 2,
        (byte1 & 0x03) - 2,
    )


def luma_deltas(byte1: int, byte2: int) -> tuple:
    """
    Effective (dr, dg, db) of a QOI_OP_LUMA chunk.

    The first byte holds the green delta biased by 32, the second byte
    holds dr - dg and db - dg biased by 8 in its high and low nibbles.
    """
    dg = (byte1 & 0x3F) - 32
    dr = dg - 8 + ((byte2 >> 4) & 0x0F)
    db = dg - 8 + (byte2 & 0x0F)
    return dr, dg, db


def run_length(byte1: int) -> int:
    """Total pixels covered by a QOI_OP_RUN chunk, 1..62."""
    return (byte1 & 0x3F) + 1
