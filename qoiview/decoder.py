from .errors import IllegalChannels
from .header import read_header
from .ops import OP_TABLE, Op, diff_deltas, luma_deltas, run_length
from .qoi import QOI


class QOIDecoder:
    """
    A class to decode QOI (Quite OK Image) files into raw pixel data.
    """

    @staticmethod
    def decode(
        file_data,
        byte_offset: int = 0,
        byte_length: int = None,
        output_channels: int = None,
    ) -> dict:
        """
        Decode a QOI file given as a bytes/bytearray/memoryview object.

        :param file_data: Bytes containing the QOI file.
        :param byte_offset: Offset to the start of the QOI file in file_data.
        :param byte_length: Length of the QOI file in bytes.
        :param output_channels: Number of channels to include in the decoded array (3 or 4).
                                If None, uses the channels defined in the file header.
        :return: Dictionary containing width, height, colorspace, channels, and pixels (bytes).
        :raises DecodeError: if the header is invalid. The pixel stream itself never raises.
        """

        # --- Handle Slicing ---
        if byte_length is None:
            byte_length = len(file_data) - byte_offset

        # memoryview keeps the selection zero-copy for bytes and bytearray alike
        data = memoryview(file_data)[byte_offset : byte_offset + byte_length]

        # --- Header Parsing ---
        width, height, channels, colorspace = read_header(data)

        if output_channels is None:
            output_channels = channels

        if output_channels not in (3, 4):
            raise IllegalChannels(
                "QOI.decode: The number of channels for the output is invalid"
            )

        # --- Initialization ---
        pixel_length = width * height * output_channels
        result = bytearray(pixel_length)

        # Index array: 64 pixels, initialized to (0, 0, 0, 0)
        index = [(0, 0, 0, 0)] * 64

        # Initial pixel state (R, G, B, A)
        r, g, b, a = 0, 0, 0, 255

        read_pos = QOI.QOI_HEADER_SIZE
        run = 0

        # Op bytes are only read before the end marker. Literal chunks that
        # start just before it read into the padding, never past the buffer.
        chunks_length = len(data) - len(QOI.QOI_PADDING)

        # --- Decoding Loop ---
        # Driven by output size only; a stream that runs out early keeps
        # repeating the last pixel.
        for write_pos in range(0, pixel_length, output_channels):

            # 1. Handle Run-Length Decoding
            if run > 0:
                run -= 1

            # 2. Read Next Op-Code (if any are left)
            elif read_pos < chunks_length:
                b1 = data[read_pos]
                read_pos += 1
                op = OP_TABLE[b1]

                if op is Op.RGB:
                    r = data[read_pos]
                    g = data[read_pos + 1]
                    b = data[read_pos + 2]
                    read_pos += 3

                elif op is Op.RGBA:
                    r = data[read_pos]
                    g = data[read_pos + 1]
                    b = data[read_pos + 2]
                    a = data[read_pos + 3]
                    read_pos += 4

                elif op is Op.INDEX:
                    r, g, b, a = index[b1]

                elif op is Op.DIFF:
                    dr, dg, db = diff_deltas(b1)
                    r = (r + dr) & 0xFF
                    g = (g + dg) & 0xFF
                    b = (b + db) & 0xFF

                elif op is Op.LUMA:
                    dr, dg, db = luma_deltas(b1, data[read_pos])
                    read_pos += 1
                    r = (r + dr) & 0xFF
                    g = (g + dg) & 0xFF
                    b = (b + db) & 0xFF

                else:
                    # This pixel is the first of the run
                    run = run_length(b1) - 1

                # 3. Update Index (only after an op byte was read)
                index[QOI.hash(r, g, b, a)] = (r, g, b, a)

            # 4. Write Pixel to Result
            result[write_pos] = r
            result[write_pos + 1] = g
            result[write_pos + 2] = b
            if output_channels == 4:
                result[write_pos + 3] = a

        return {
            "width": width,
            "height": height,
            "colorspace": colorspace,
            "channels": output_channels,
            "pixels": bytes(result),
        }


def decode(file_data, output_channels: int = None) -> dict:
    """Shorthand for QOIDecoder.decode on a complete in-memory file."""
    return QOIDecoder.decode(file_data, output_channels=output_channels)
