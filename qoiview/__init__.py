from .chunks import CHUNK_BYTE_LIMIT, RowChunk, iter_row_chunks
from .decoder import QOIDecoder, decode
from .errors import (
    BadMagic,
    DecodeError,
    IllegalChannels,
    IllegalColorspace,
    IllegalHeight,
    IllegalWidth,
    ImageTooLarge,
    TooShort,
)
from .header import QOIHeader, read_header
from .qoi import QOI, Channels, ColorSpace, is_qoi
from .utils import load_qoi, to_array, to_image

__all__ = [
    "QOIDecoder",
    "decode",
    "QOI",
    "Channels",
    "ColorSpace",
    "is_qoi",
    "QOIHeader",
    "read_header",
    "RowChunk",
    "CHUNK_BYTE_LIMIT",
    "iter_row_chunks",
    "load_qoi",
    "to_array",
    "to_image",
    "DecodeError",
    "TooShort",
    "BadMagic",
    "IllegalWidth",
    "IllegalHeight",
    "ImageTooLarge",
    "IllegalChannels",
    "IllegalColorspace",
]
