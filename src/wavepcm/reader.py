"""WAVE PCM decoder.

Only the canonical layout is supported: the fmt chunk directly follows the
RIFF header and the data chunk directly follows the fmt chunk, so every
header field sits at a fixed offset.
"""

from wavepcm.errors import MalformedHeaderError, TruncatedInputError
from wavepcm.model import WaveFormat
from wavepcm.riff import HEADER_SIZE, TAG_FIELDS, byte_range, split_header, unpack_int


def decode(buffer: bytes | bytearray | memoryview) -> WaveFormat:
    """Decode a complete WAVE PCM file held in memory.

    Header fields are copied verbatim. Apart from the FourCC tags nothing is
    validated here; call check() on the result for that. Bytes after the
    declared data chunk are ignored.

    Args:
        buffer: The entire file contents.

    Returns:
        The decoded WaveFormat.

    Raises:
        TruncatedInputError: If the buffer is shorter than the 44-byte header
            or than the data length declared in subchunk2_size.
        MalformedHeaderError: If a FourCC tag does not match its constant.
    """
    buffer = bytes(buffer)
    fields = split_header(buffer)

    for name, expected in TAG_FIELDS.items():
        if fields[name] != expected:
            raise MalformedHeaderError(
                f"WAVE PCM format requires {expected!r} as {byte_range(name)}, "
                f"got {fields[name]!r} instead",
                field=name,
            )

    data_size = unpack_int(fields["subchunk2_size"])
    end = HEADER_SIZE + data_size
    if len(buffer) < end:
        raise TruncatedInputError(
            f"data chunk declares {data_size} bytes but only "
            f"{len(buffer) - HEADER_SIZE} follow the header"
        )

    return WaveFormat(**fields, data=buffer[HEADER_SIZE:end])
