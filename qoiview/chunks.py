from typing import Iterator, NamedTuple

# Target size of one transfer chunk
CHUNK_BYTE_LIMIT = 512 * 1024


class RowChunk(NamedTuple):
    offset_y: int
    rows: int
    data: memoryview


def iter_row_chunks(decoded: dict, byte_limit: int = CHUNK_BYTE_LIMIT) -> Iterator[RowChunk]:
    """
    Split a decoded image into row ranges of at most byte_limit bytes.

    A chunk always holds whole rows, so a single row wider than the limit
    still goes out as one chunk. Images that fit the limit come back as a
    single chunk. Each chunk's data is a view into decoded["pixels"].
    """
    if byte_limit <= 0:
        raise ValueError("iter_row_chunks: byte_limit must be positive")

    width, height = decoded["width"], decoded["height"]
    row_bytes = width * decoded["channels"]
    pixels = memoryview(decoded["pixels"])

    max_rows_per_chunk = max(1, byte_limit // row_bytes)
    for offset_y in range(0, height, max_rows_per_chunk):
        rows = min(max_rows_per_chunk, height - offset_y)
        start = offset_y * row_bytes
        end = start + rows * row_bytes
        yield RowChunk(offset_y, rows, pixels[start:end])
