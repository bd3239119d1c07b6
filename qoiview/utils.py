import numpy as np
from PIL import Image

from .decoder import QOIDecoder


def to_array(decoded: dict) -> np.ndarray:
    """View a decode result as a (height, width, channels) uint8 array."""
    return np.frombuffer(decoded["pixels"], dtype=np.uint8).reshape(
        decoded["height"], decoded["width"], decoded["channels"]
    )


def to_image(decoded: dict) -> Image.Image:
    mode = "RGBA" if decoded["channels"] == 4 else "RGB"
    return Image.frombytes(
        mode, (decoded["width"], decoded["height"]), decoded["pixels"]
    )


def load_qoi(filepath: str, channels: int = None) -> tuple[np.ndarray, dict]:
    """Load a QOI file and return pixel data as numpy array + description."""

    with open(filepath, "rb") as f:
        content = f.read()

    decoded = QOIDecoder.decode(content, output_channels=channels)

    return to_array(decoded), {
        "width": decoded["width"],
        "height": decoded["height"],
        "channels": decoded["channels"],
        "colorspace": decoded["colorspace"],
    }
