"""WAVE PCM encoder and serializer.

encode() wraps raw sample bytes in a header without touching the samples;
to_bytes() lays a WaveFormat out in on-disk order. Neither validates: run
check() in between when correctness matters.
"""

import operator
import struct

from wavepcm.errors import CapacityExceededError
from wavepcm.model import WaveFormat
from wavepcm.riff import (
    CHUNK_SIZE_OVERHEAD,
    DATA_ID,
    FMT_ID,
    HEADER_FIELDS,
    MAX_DATA_SIZE,
    PCM_FMT_CHUNK_SIZE,
    RIFF_ID,
    WAVE_FORMAT_PCM,
    WAVE_ID,
    pack_int,
)


def encode(
    data: bytes | bytearray | memoryview,
    num_channels: int,
    sampling_rate: int,
    bits_per_sample: int,
) -> WaveFormat:
    """Build a WaveFormat around raw interleaved PCM samples.

    Derived fields (byte_rate, block_align, sizes) are computed from the
    parameters. Parameter combinations are not checked, so e.g. a 12-bit
    depth yields a model that check() rejects. Derived values too large for
    their field are stored truncated to the field width.

    Args:
        data: Raw sample bytes, stored unchanged.
        num_channels: Number of interleaved channels.
        sampling_rate: Frames per second.
        bits_per_sample: Bits in one sample of one channel.

    Returns:
        The assembled WaveFormat.

    Raises:
        CapacityExceededError: If data is too long for the 32-bit size fields.
        TypeError: If a parameter is not an integer.
        ValueError: If a parameter does not fit in its own field.
    """
    num_channels = _as_int("num_channels", num_channels)
    sampling_rate = _as_int("sampling_rate", sampling_rate)
    bits_per_sample = _as_int("bits_per_sample", bits_per_sample)

    size = len(data)
    if size > MAX_DATA_SIZE:
        raise CapacityExceededError(
            f"WAVE PCM data is limited to {MAX_DATA_SIZE} bytes, got {size}"
        )

    block_align = num_channels * bits_per_sample // 8
    byte_rate = sampling_rate * num_channels * bits_per_sample // 8

    return WaveFormat(
        chunk_id=RIFF_ID,
        chunk_size=pack_int(size + CHUNK_SIZE_OVERHEAD, 4),
        format=WAVE_ID,
        subchunk1_id=FMT_ID,
        subchunk1_size=pack_int(PCM_FMT_CHUNK_SIZE, 4),
        audio_format=pack_int(WAVE_FORMAT_PCM, 2),
        num_channels=_pack_parameter("num_channels", num_channels, 2),
        sampling_rate=_pack_parameter("sampling_rate", sampling_rate, 4),
        byte_rate=_pack_wrapped(byte_rate, 4),
        block_align=_pack_wrapped(block_align, 2),
        bits_per_sample=_pack_parameter("bits_per_sample", bits_per_sample, 2),
        subchunk2_id=DATA_ID,
        subchunk2_size=pack_int(size, 4),
        data=bytes(data),
    )


def to_bytes(model: WaveFormat) -> bytes:
    """Serialize a WaveFormat to the exact on-disk byte sequence."""
    wav = bytearray()
    for name, _ in HEADER_FIELDS:
        wav.extend(getattr(model, name))
    wav.extend(model.data)
    return bytes(wav)


def _as_int(name: str, value: int) -> int:
    # Accepts numpy integers, rejects floats
    try:
        return operator.index(value)
    except TypeError as e:
        raise TypeError(f"{name} must be an integer, got {value!r}") from e


def _pack_parameter(name: str, value: int, width: int) -> bytes:
    try:
        return pack_int(value, width)
    except struct.error as e:
        raise ValueError(f"{name}={value} does not fit in a {width * 8}-bit field") from e


def _pack_wrapped(value: int, width: int) -> bytes:
    # Keep the low bytes, as an unsigned field of this width would
    return pack_int(value & ((1 << (width * 8)) - 1), width)
