"""Conversion between WAVE PCM sample bytes and numpy arrays.

WAV stores 8-bit samples unsigned (silence at 128) and wider samples as
signed little-endian integers. 24-bit samples have no numpy dtype and are
widened to int32.
"""

import numpy as np
from numpy.typing import NDArray

from wavepcm.errors import UnsupportedBitDepthError, ZeroChannelsError
from wavepcm.model import WaveFormat
from wavepcm.riff import SUPPORTED_BIT_DEPTHS, unpack_int
from wavepcm.writer import encode

# Full-scale magnitude per bit depth, used for normalization
_FULL_SCALE = {
    8: 128.0,
    16: 32768.0,
    24: 8388608.0,  # 2^23
    32: 2147483648.0,  # 2^31
}

_DTYPES = {
    8: np.dtype(np.uint8),
    16: np.dtype("<i2"),
    32: np.dtype("<i4"),
}


def to_samples(model: WaveFormat, *, normalize: bool = False) -> NDArray:
    """Decode the data chunk into a 2D sample array.

    Args:
        model: The format model holding the samples.
        normalize: Return float32 samples scaled to [-1, 1) instead of the
            stored integers.

    Returns:
        Array of shape (num_frames, num_channels). Integer dtype is uint8 for
        8-bit, int16 for 16-bit and int32 for 24- and 32-bit data.

    Raises:
        UnsupportedBitDepthError: If bits_per_sample is not 8, 16, 24 or 32.
        ZeroChannelsError: If num_channels is 0.
        ValueError: If data does not hold a whole number of frames.
    """
    bits_per_sample = unpack_int(model.bits_per_sample)
    num_channels = unpack_int(model.num_channels)
    _check_layout(bits_per_sample, num_channels)

    frame_size = num_channels * bits_per_sample // 8
    if len(model.data) % frame_size:
        raise ValueError(
            f"data length {len(model.data)} is not a multiple of the "
            f"{frame_size}-byte frame size"
        )

    if bits_per_sample == 24:
        samples = _decode_24bit_pcm(model.data)
    else:
        samples = np.frombuffer(model.data, dtype=_DTYPES[bits_per_sample])

    samples = samples.reshape((-1, num_channels))

    if not normalize:
        return samples

    scale = _FULL_SCALE[bits_per_sample]
    if bits_per_sample == 8:
        return ((samples.astype(np.float32) - 128.0) / scale).astype(np.float32)
    return (samples.astype(np.float64) / scale).astype(np.float32)


def from_samples(
    samples: NDArray,
    sampling_rate: int,
    bits_per_sample: int,
) -> WaveFormat:
    """Encode a sample array as a WAVE PCM model.

    Floating point input is clipped to [-1, 1] and scaled to the target
    depth. Integer input is taken to already be in the target range and is
    only cast.

    Args:
        samples: Array of shape (num_frames,) for mono or
            (num_frames, num_channels).
        sampling_rate: Frames per second.
        bits_per_sample: Target depth, one of 8, 16, 24 or 32.

    Returns:
        The encoded WaveFormat.

    Raises:
        UnsupportedBitDepthError: If bits_per_sample is not supported.
        ZeroChannelsError: If samples has no channels.
        ValueError: If samples is not 1D or 2D.
    """
    samples = np.asarray(samples)
    if samples.ndim == 1:
        samples = samples.reshape((-1, 1))
    elif samples.ndim != 2:
        raise ValueError(f"samples must be 1D or 2D, got {samples.ndim}D")

    num_channels = samples.shape[1]
    _check_layout(bits_per_sample, num_channels)

    if np.issubdtype(samples.dtype, np.floating):
        samples = _quantize(samples, bits_per_sample)

    if bits_per_sample == 24:
        data = _encode_24bit_pcm(samples.astype(np.int32))
    else:
        data = samples.astype(_DTYPES[bits_per_sample]).tobytes()

    return encode(data, num_channels, sampling_rate, bits_per_sample)


def _check_layout(bits_per_sample: int, num_channels: int) -> None:
    if bits_per_sample not in SUPPORTED_BIT_DEPTHS:
        raise UnsupportedBitDepthError(
            f"Unsupported bit depth: {bits_per_sample}. Use 8, 16, 24, or 32.",
            field="bits_per_sample",
        )
    if num_channels == 0:
        raise ZeroChannelsError("samples have no channels", field="num_channels")


def _quantize(samples: NDArray, bits_per_sample: int) -> NDArray[np.int64]:
    """Scale float samples in [-1, 1] to integers of the given depth."""
    scale = _FULL_SCALE[bits_per_sample]
    # float32 cannot hold 2^31 - 1, so scale in float64
    clean = np.where(np.isfinite(samples), samples, 0.0).astype(np.float64)
    scaled = np.round(np.clip(clean, -1.0, 1.0) * scale)
    # +1.0 maps one step past the positive limit
    scaled = np.clip(scaled, -scale, scale - 1).astype(np.int64)
    if bits_per_sample == 8:
        scaled += 128
    return scaled


def _decode_24bit_pcm(data: bytes) -> NDArray[np.int32]:
    """Decode packed 24-bit little-endian samples to sign-extended int32."""
    raw = np.frombuffer(data, dtype=np.uint8).reshape((-1, 3)).astype(np.int32)
    values = raw[:, 0] | (raw[:, 1] << 8) | (raw[:, 2] << 16)
    return (values ^ 0x800000) - 0x800000


def _encode_24bit_pcm(samples: NDArray[np.int32]) -> bytes:
    """Pack int32 samples into 3 little-endian bytes each."""
    wide = samples.astype("<i4").reshape(-1).view(np.uint8).reshape((-1, 4))
    return wide[:, :3].tobytes()
