import argparse
import sys

from .chunks import CHUNK_BYTE_LIMIT, iter_row_chunks
from .decoder import QOIDecoder
from .errors import DecodeError
from .qoi import ColorSpace, is_qoi
from .utils import to_image


def _read(path):
    with open(path, "rb") as f:
        return f.read()


def qoi_to_png(qoi_path, png_path, channels=4):
    """Decode a QOI file and save it as PNG. RGBA unless channels == 3."""
    decoded = QOIDecoder.decode(_read(qoi_path), output_channels=channels)
    to_image(decoded).save(png_path, format="PNG")
    return png_path


def _info(args):
    content = _read(args.file)
    if not is_qoi(content):
        print(f"{args.file}: not a QOI file", file=sys.stderr)
        return 1

    decoded = QOIDecoder.decode(content)
    colorspace = decoded["colorspace"]
    name = ColorSpace(colorspace).name if colorspace in (0, 1) else f"0x{colorspace:x}"
    print(
        f"{args.file}: {decoded['width']}x{decoded['height']} "
        f"Channels: {decoded['channels']} Colorspace: {name}"
    )
    print(f"Encoded {len(content)} bytes, decoded {len(decoded['pixels'])} bytes")
    return 0


def _png(args):
    output = args.output or args.file.rsplit(".", 1)[0] + ".png"
    qoi_to_png(args.file, output, channels=3 if args.rgb else 4)
    print(f"Converted {args.file} to {output}")
    return 0


def _chunks(args):
    decoded = QOIDecoder.decode(_read(args.file))
    for chunk in iter_row_chunks(decoded, args.limit):
        print(f"rows {chunk.offset_y}..{chunk.offset_y + chunk.rows - 1}: {chunk.data.nbytes} bytes")
    return 0


def main(argv=None):
    ap = argparse.ArgumentParser(prog="qoiview", description="Inspect and export QOI images")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("info", help="print the header of a .qoi file")
    p.add_argument("file", help="path to .qoi")
    p.set_defaults(func=_info)

    p = sub.add_parser("png", help="convert a .qoi file to PNG")
    p.add_argument("file", help="path to .qoi")
    p.add_argument("-o", "--output", help="path to output .png (default: next to input)")
    p.add_argument("--rgb", action="store_true", help="drop the alpha channel")
    p.set_defaults(func=_png)

    p = sub.add_parser("chunks", help="show how the pixels split into transfer chunks")
    p.add_argument("file", help="path to .qoi")
    p.add_argument("--limit", type=int, default=CHUNK_BYTE_LIMIT, help="bytes per chunk")
    p.set_defaults(func=_chunks)

    args = ap.parse_args(argv)
    try:
        return args.func(args)
    except (DecodeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
