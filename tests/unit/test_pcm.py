"""Unit tests for numpy sample conversion."""

from pathlib import Path

import numpy as np
import pytest
from scipy.io import wavfile

from wavepcm import (
    UnsupportedBitDepthError,
    ZeroChannelsError,
    check,
    decode,
    encode,
    from_samples,
    load_wav,
    save_wav,
    to_bytes,
    to_samples,
)


class TestToSamples:
    """Tests for to_samples function."""

    def test_16bit_stereo_interleaving(self) -> None:
        """Test that interleaved frames become rows."""
        data = np.array([1, -1, 2, -2, 3, -3], dtype="<i2").tobytes()
        wav = encode(data, 2, 44100, 16)

        samples = to_samples(wav)

        assert samples.shape == (3, 2)
        np.testing.assert_array_equal(samples[:, 0], [1, 2, 3])
        np.testing.assert_array_equal(samples[:, 1], [-1, -2, -3])

    def test_8bit_is_unsigned(self) -> None:
        """Test that 8-bit samples keep their unsigned values."""
        wav = encode(bytes([0, 128, 255]), 1, 8000, 8)

        samples = to_samples(wav)

        assert samples.dtype == np.uint8
        np.testing.assert_array_equal(samples[:, 0], [0, 128, 255])

    def test_8bit_normalized(self) -> None:
        """Test that 128 is silence for 8-bit data."""
        wav = encode(bytes([0, 128, 192]), 1, 8000, 8)

        samples = to_samples(wav, normalize=True)

        assert samples.dtype == np.float32
        np.testing.assert_array_almost_equal(samples[:, 0], [-1.0, 0.0, 0.5])

    def test_24bit_sign_extension(self) -> None:
        """Test decoding of packed 24-bit samples."""
        data = b"\xff\xff\x7f" + b"\x00\x00\x80" + b"\xff\xff\xff" + b"\x01\x00\x00"
        wav = encode(data, 1, 48000, 24)

        samples = to_samples(wav)

        assert samples.dtype == np.int32
        np.testing.assert_array_equal(samples[:, 0], [8388607, -8388608, -1, 1])

    def test_32bit_normalized(self) -> None:
        """Test normalization of 32-bit samples."""
        data = np.array([-(2**31), 0, 2**30], dtype="<i4").tobytes()
        wav = encode(data, 1, 48000, 32)

        samples = to_samples(wav, normalize=True)

        np.testing.assert_array_almost_equal(samples[:, 0], [-1.0, 0.0, 0.5])

    def test_empty_data(self) -> None:
        """Test that no samples gives an empty array of the right width."""
        samples = to_samples(encode(b"", 2, 44100, 16))

        assert samples.shape == (0, 2)

    def test_partial_frame(self) -> None:
        """Test that an incomplete trailing frame is an error."""
        with pytest.raises(ValueError, match="frame size"):
            to_samples(encode(bytes(3), 1, 44100, 16))

    def test_unsupported_depth(self) -> None:
        """Test that a 12-bit model cannot be decoded to samples."""
        with pytest.raises(UnsupportedBitDepthError):
            to_samples(encode(bytes(3), 1, 44100, 12))


class TestFromSamples:
    """Tests for from_samples function."""

    @pytest.mark.parametrize(
        ("bits_per_sample", "dtype", "low", "high"),
        [
            (8, np.uint8, 0, 255),
            (16, np.int16, -(2**15), 2**15 - 1),
            (24, np.int32, -(2**23), 2**23 - 1),
            (32, np.int32, -(2**31), 2**31 - 1),
        ],
    )
    def test_integer_roundtrip(
        self, bits_per_sample: int, dtype: type, low: int, high: int
    ) -> None:
        """Test that integer samples survive encode and decode."""
        rng = np.random.default_rng(0)
        original = rng.integers(low, high, size=(64, 3), endpoint=True).astype(dtype)

        wav = from_samples(original, 44100, bits_per_sample)

        check(wav)
        assert wav.header.num_channels == 3
        assert wav.num_frames == 64
        np.testing.assert_array_equal(to_samples(decode(to_bytes(wav))), original)

    def test_mono_1d_input(self) -> None:
        """Test that a 1D array is treated as mono."""
        wav = from_samples(np.array([1, 2, 3], dtype=np.int16), 22050, 16)

        assert wav.header.num_channels == 1
        assert wav.data == b"\x01\x00\x02\x00\x03\x00"

    def test_float_input_is_scaled_and_clipped(self) -> None:
        """Test quantization of float samples."""
        floats = np.array([0.0, 0.5, -1.0, 1.0, 2.0, np.nan], dtype=np.float32)

        wav = from_samples(floats, 44100, 16)

        np.testing.assert_array_equal(
            to_samples(wav)[:, 0], [0, 16384, -32768, 32767, 32767, 0]
        )

    def test_float_to_8bit(self) -> None:
        """Test that float silence maps to the unsigned midpoint."""
        wav = from_samples(np.zeros(4, dtype=np.float64), 8000, 8)

        assert wav.data == bytes([128] * 4)

    def test_float32_full_scale_at_32bit(self) -> None:
        """Test that full-scale float32 keeps its sign at 32-bit depth."""
        floats = np.array([1.0, 0.99999994, -1.0], dtype=np.float32)

        wav = from_samples(floats, 44100, 32)

        samples = to_samples(wav)[:, 0]
        np.testing.assert_array_equal(samples[[0, 2]], [2**31 - 1, -(2**31)])
        assert samples[1] > 2**31 - 256

    def test_float32_matches_float64_at_32bit(self) -> None:
        """Test that float32 and float64 input quantize alike."""
        floats = np.linspace(-1.0, 1.0, 33)

        narrow = from_samples(floats.astype(np.float32), 48000, 32)
        wide = from_samples(floats.astype(np.float32).astype(np.float64), 48000, 32)

        assert narrow.data == wide.data

    def test_rejects_zero_channels(self) -> None:
        """Test that a 2D array without columns is rejected."""
        with pytest.raises(ZeroChannelsError):
            from_samples(np.zeros((4, 0), dtype=np.int16), 44100, 16)

    def test_float_to_24bit(self) -> None:
        """Test that full-scale floats pack into 3 bytes each."""
        wav = from_samples(np.array([-1.0, 1.0]), 48000, 24)

        assert wav.data == b"\x00\x00\x80" + b"\xff\xff\x7f"

    def test_rejects_3d_input(self) -> None:
        """Test that only 1D and 2D arrays are accepted."""
        with pytest.raises(ValueError, match="1D or 2D"):
            from_samples(np.zeros((2, 2, 2), dtype=np.int16), 44100, 16)

    def test_rejects_unsupported_depth(self) -> None:
        """Test that samples cannot be packed into 12 bits."""
        with pytest.raises(UnsupportedBitDepthError):
            from_samples(np.zeros(4, dtype=np.int16), 44100, 12)


class TestScipyInterop:
    """Files must be interchangeable with scipy.io.wavfile."""

    def test_reads_scipy_file(self, tmp_path: Path) -> None:
        """Test that a file written by scipy decodes and validates."""
        original = np.arange(-500, 500, dtype=np.int16).reshape((-1, 2))
        path = tmp_path / "scipy.wav"
        wavfile.write(str(path), 32000, original)

        wav = load_wav(path)

        assert wav.header.sampling_rate == 32000
        assert wav.header.num_channels == 2
        np.testing.assert_array_equal(to_samples(wav), original)
        assert to_bytes(wav) == path.read_bytes()

    @pytest.mark.parametrize("dtype", [np.uint8, np.int16, np.int32])
    def test_scipy_reads_our_file(self, tmp_path: Path, dtype: type) -> None:
        """Test that scipy reads what we write."""
        info = np.iinfo(dtype)
        original = np.linspace(info.min, info.max, 40).astype(dtype).reshape((-1, 2))
        bits_per_sample = info.bits
        path = tmp_path / "ours.wav"

        save_wav(path, from_samples(original, 44100, bits_per_sample))
        rate, samples = wavfile.read(str(path))

        assert rate == 44100
        np.testing.assert_array_equal(samples, original)
