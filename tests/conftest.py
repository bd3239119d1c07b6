import struct

import pytest

END_MARKER = b"\x00\x00\x00\x00\x00\x00\x00\x01"


def build_qoi(width, height, channels=4, colorspace=0, chunks=b"", magic=b"qoif"):
    """Hand-assemble a QOI file: header, raw chunk bytes, end marker."""
    return (
        magic
        + struct.pack(">IIBB", width, height, channels, colorspace)
        + bytes(chunks)
        + END_MARKER
    )


@pytest.fixture
def make_qoi():
    return build_qoi
