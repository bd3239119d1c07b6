import pytest

from qoiview import (
    BadMagic,
    DecodeError,
    IllegalChannels,
    IllegalColorspace,
    IllegalHeight,
    IllegalWidth,
    ImageTooLarge,
    QOIDecoder,
    QOIHeader,
    TooShort,
    is_qoi,
    read_header,
)


def test_minimal_file_is_accepted(make_qoi):
    data = make_qoi(1, 1, 3)
    assert len(data) == 22
    assert read_header(data) == QOIHeader(1, 1, 3, 0)


@pytest.mark.parametrize("length", [0, 4, 14, 21])
def test_too_short(make_qoi, length):
    data = make_qoi(1, 1, 3)[:length]
    with pytest.raises(TooShort):
        QOIDecoder.decode(data)


@pytest.mark.parametrize("magic", [b"qoiF", b"QOIF", b"\x00\x00\x00\x00", b"fioq"])
def test_bad_magic(make_qoi, magic):
    with pytest.raises(BadMagic):
        QOIDecoder.decode(make_qoi(1, 1, 3, magic=magic))


def test_zero_dimensions(make_qoi):
    with pytest.raises(IllegalWidth):
        read_header(make_qoi(0, 5))
    with pytest.raises(IllegalHeight):
        read_header(make_qoi(5, 0))
    # width is checked first
    with pytest.raises(IllegalWidth):
        read_header(make_qoi(0, 0))


def test_pixel_ceiling(make_qoi):
    assert read_header(make_qoi(20000, 20000)).width == 20000
    assert read_header(make_qoi(400_000_000, 1)).height == 1

    with pytest.raises(ImageTooLarge):
        read_header(make_qoi(20000, 20001))
    with pytest.raises(ImageTooLarge):
        read_header(make_qoi(400_000_001, 1))
    with pytest.raises(ImageTooLarge):
        QOIDecoder.decode(make_qoi(0xFFFFFFFF, 0xFFFFFFFF))


def test_dimensions_are_unsigned_big_endian():
    data = b"qoif" + b"\x00\x00\x01\x00" + b"\x00\x01\x00\x00" + b"\x04\x00" + b"\x00" * 7 + b"\x01"
    header = read_header(data)
    assert header.width == 256
    assert header.height == 65536


@pytest.mark.parametrize("channels", [0, 1, 2, 5, 255])
def test_illegal_channels(make_qoi, channels):
    with pytest.raises(IllegalChannels):
        read_header(make_qoi(1, 1, channels))


@pytest.mark.parametrize("colorspace", [0x10, 0x20, 0x80, 0xF1, 0xFF])
def test_illegal_colorspace(make_qoi, colorspace):
    with pytest.raises(IllegalColorspace):
        read_header(make_qoi(1, 1, 3, colorspace))


@pytest.mark.parametrize("colorspace", [0, 1, 0x0F])
def test_colorspace_low_nibble_passes_through(make_qoi, colorspace):
    assert read_header(make_qoi(1, 1, 3, colorspace)).colorspace == colorspace
    assert QOIDecoder.decode(make_qoi(1, 1, 3, colorspace))["colorspace"] == colorspace


def test_errors_are_value_errors(make_qoi):
    with pytest.raises(ValueError, match="QOI.decode"):
        QOIDecoder.decode(make_qoi(1, 1, 7))
    assert issubclass(TooShort, DecodeError)


def test_is_qoi(make_qoi):
    assert is_qoi(make_qoi(1, 1))
    assert is_qoi(memoryview(make_qoi(1, 1)))
    assert not is_qoi(b"\x89PNG\r\n\x1a\n")
    assert not is_qoi(b"")
