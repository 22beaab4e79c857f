"""RIFF/WAVE wire layout.

The canonical PCM file is a 12-byte RIFF header followed by a 24-byte fmt
chunk and an 8-byte data chunk header, 44 bytes in total, then the samples:

    offset  size  field
    0       4     chunk_id         "RIFF"
    4       4     chunk_size       36 + subchunk2_size
    8       4     format           "WAVE"
    12      4     subchunk1_id     "fmt "
    16      4     subchunk1_size   16
    20      2     audio_format     1
    22      2     num_channels
    24      4     sampling_rate
    28      4     byte_rate
    32      2     block_align
    34      2     bits_per_sample
    36      4     subchunk2_id     "data"
    40      4     subchunk2_size
    44      N     data

All integers are little-endian.
"""

import struct

from wavepcm.errors import TruncatedInputError

# FourCC identifiers
RIFF_ID = b"RIFF"
WAVE_ID = b"WAVE"
FMT_ID = b"fmt "
DATA_ID = b"data"

# Audio format codes
WAVE_FORMAT_PCM = 1

PCM_FMT_CHUNK_SIZE = 16
HEADER_SIZE = 44

# Bytes between the end of chunk_size and the start of the samples
CHUNK_SIZE_OVERHEAD = HEADER_SIZE - 8

# Largest payload whose chunk_size still fits in 32 bits
MAX_DATA_SIZE = 0xFFFFFFFF - CHUNK_SIZE_OVERHEAD

SUPPORTED_BIT_DEPTHS = (8, 16, 24, 32)

# (name, width) in on-disk order
HEADER_FIELDS: tuple[tuple[str, int], ...] = (
    ("chunk_id", 4),
    ("chunk_size", 4),
    ("format", 4),
    ("subchunk1_id", 4),
    ("subchunk1_size", 4),
    ("audio_format", 2),
    ("num_channels", 2),
    ("sampling_rate", 4),
    ("byte_rate", 4),
    ("block_align", 2),
    ("bits_per_sample", 2),
    ("subchunk2_id", 4),
    ("subchunk2_size", 4),
)

FIELD_WIDTHS = dict(HEADER_FIELDS)

# Fields that must hold a fixed FourCC
TAG_FIELDS: dict[str, bytes] = {
    "chunk_id": RIFF_ID,
    "format": WAVE_ID,
    "subchunk1_id": FMT_ID,
    "subchunk2_id": DATA_ID,
}


def _field_offsets() -> dict[str, int]:
    offsets = {}
    offset = 0
    for name, width in HEADER_FIELDS:
        offsets[name] = offset
        offset += width
    return offsets


FIELD_OFFSETS = _field_offsets()

_INT_FORMATS = {2: "<H", 4: "<I"}


def byte_range(name: str) -> str:
    """Describe a field's position as 1-based inclusive byte numbers, e.g. "bytes 17 - 20"."""
    start = FIELD_OFFSETS[name] + 1
    return f"bytes {start} - {start + FIELD_WIDTHS[name] - 1}"


def unpack_int(raw: bytes) -> int:
    """Decode a 2- or 4-byte little-endian unsigned integer."""
    return struct.unpack(_INT_FORMATS[len(raw)], raw)[0]


def pack_int(value: int, width: int) -> bytes:
    """Encode an unsigned integer into a little-endian field of the given width.

    Raises:
        struct.error: If the value does not fit in the field.
    """
    return struct.pack(_INT_FORMATS[width], value)


def split_header(buffer: bytes) -> dict[str, bytes]:
    """Slice the fixed header region of a WAVE buffer into raw fields.

    Args:
        buffer: The complete file contents.

    Returns:
        Mapping of field name to its raw bytes, in on-disk order.

    Raises:
        TruncatedInputError: If the buffer is shorter than the header.
    """
    if len(buffer) < HEADER_SIZE:
        raise TruncatedInputError(
            f"WAVE PCM header requires {HEADER_SIZE} bytes, got {len(buffer)}"
        )

    fields = {}
    for name, width in HEADER_FIELDS:
        offset = FIELD_OFFSETS[name]
        fields[name] = buffer[offset : offset + width]
    return fields
