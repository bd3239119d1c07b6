#! Our decoder is pure Python and the official qoi package is a C extension, so expect a large gap.
#! The point of this script is checking that both agree and seeing how far apart they are.

import sys
import time

import numpy as np
from PIL import Image

import qoi as OfficialQOI
from qoiview import QOIDecoder, to_array

INPUT_IMAGE = "fruits.png"


def time_compare(encoded: bytes):
    # Decode with the C extension
    start_time = time.time()
    reference = OfficialQOI.decode(encoded)
    end_time = time.time()
    print(f"Official qoi decoded in {end_time - start_time:.4f} seconds")

    # Decode in pure Python (our implementation)
    start_time = time.time()
    decoded = QOIDecoder.decode(encoded)
    end_time = time.time()
    print(f"qoiview decoded in {end_time - start_time:.4f} seconds")

    assert np.array_equal(reference, to_array(decoded)), "Decoded data mismatch!"


if __name__ == "__main__":
    path = sys.argv[1] if len(sys.argv) > 1 else INPUT_IMAGE
    img = Image.open(path)
    if img.mode != "RGBA":
        img = img.convert("RGB")
    pixel_data = np.array(img)
    print(f"Loaded image {path}: {img.size[0]}x{img.size[1]} Channels: {pixel_data.shape[2]}")

    encoded = OfficialQOI.encode(pixel_data)
    print(f"Encoded QOI to {len(encoded)} bytes")

    time_compare(encoded)
