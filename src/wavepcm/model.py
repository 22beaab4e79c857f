"""The WAVE PCM format model.

Header fields are kept as the raw little-endian bytes found on disk so that
serializing a decoded file reproduces it exactly. Typed values are decoded
on read through WaveFormat.header.
"""

from dataclasses import dataclass, field

from wavepcm.riff import HEADER_FIELDS, unpack_int


@dataclass(frozen=True)
class WaveHeader:
    """Decoded view of a WAVE PCM header."""

    chunk_id: str
    chunk_size: int
    format: str
    subchunk1_id: str
    subchunk1_size: int
    audio_format: int
    num_channels: int
    sampling_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    subchunk2_id: str
    subchunk2_size: int


@dataclass(frozen=True)
class WaveFormat:
    """A WAVE PCM file: fixed-width header fields plus raw sample bytes."""

    chunk_id: bytes
    """RIFF tag ("RIFF")."""

    chunk_size: bytes
    """Total file size minus the 8-byte RIFF header."""

    format: bytes
    """WAVE tag ("WAVE")."""

    subchunk1_id: bytes
    """Format chunk tag ("fmt ")."""

    subchunk1_size: bytes
    """Format chunk size (16 for PCM)."""

    audio_format: bytes
    """Format code (1 for uncompressed PCM)."""

    num_channels: bytes
    """Number of interleaved channels."""

    sampling_rate: bytes
    """Frames per second."""

    byte_rate: bytes
    """sampling_rate * num_channels * bits_per_sample / 8."""

    block_align: bytes
    """num_channels * bits_per_sample / 8."""

    bits_per_sample: bytes
    """Bits in one sample of one channel."""

    subchunk2_id: bytes
    """Data chunk tag ("data")."""

    subchunk2_size: bytes
    """Length of the sample data in bytes."""

    data: bytes = field(repr=False)
    """Raw interleaved PCM samples."""

    def __post_init__(self) -> None:
        for name, width in HEADER_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bytes) or len(value) != width:
                raise ValueError(f"{name} must be {width} bytes, got {value!r}")
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))

    @property
    def header(self) -> WaveHeader:
        """Decode every header field."""
        values: dict[str, str | int] = {}
        for name, _ in HEADER_FIELDS:
            raw = getattr(self, name)
            if name.endswith("_id") or name == "format":
                values[name] = raw.decode("latin-1")
            else:
                values[name] = unpack_int(raw)
        return WaveHeader(**values)  # type: ignore[arg-type]

    @property
    def num_frames(self) -> int:
        """Number of complete sample frames in data."""
        block_align = unpack_int(self.block_align)
        if block_align == 0:
            return 0
        return len(self.data) // block_align

    @property
    def duration(self) -> float:
        """Playback length in seconds."""
        sampling_rate = unpack_int(self.sampling_rate)
        if sampling_rate == 0:
            return 0.0
        return self.num_frames / sampling_rate
