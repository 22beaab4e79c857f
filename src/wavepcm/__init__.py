"""wavepcm - WAVE PCM encoder and decoder.

This package reads and writes uncompressed PCM audio in the canonical
44-byte-header WAVE layout. Header fields are kept as raw bytes so that a
decoded file serializes back to exactly the same bytes.

Example Usage
-------------
>>> from wavepcm import check, decode, encode, to_bytes
>>> wav = encode(bytes(8), num_channels=2, sampling_rate=44100, bits_per_sample=16)
>>> check(wav)
>>> len(to_bytes(wav))
52
>>> decode(to_bytes(wav)).header.byte_rate
176400
"""

from wavepcm.errors import (
    CapacityExceededError,
    InconsistentFieldError,
    MalformedHeaderError,
    RiffError,
    TruncatedInputError,
    UnsupportedBitDepthError,
    ValidationError,
    WaveError,
    ZeroChannelsError,
)
from wavepcm.io import load_wav, read_file, save_wav, write_file
from wavepcm.model import WaveFormat, WaveHeader
from wavepcm.pcm import from_samples, to_samples
from wavepcm.reader import decode
from wavepcm.summary import summarize
from wavepcm.validation import ValidationResult, check, validate
from wavepcm.writer import encode, to_bytes

__all__ = [
    # Model
    "WaveFormat",
    "WaveHeader",
    # Codec
    "decode",
    "encode",
    "to_bytes",
    # Validation
    "check",
    "validate",
    "ValidationResult",
    # Samples
    "to_samples",
    "from_samples",
    # Files
    "read_file",
    "write_file",
    "load_wav",
    "save_wav",
    # Display
    "summarize",
    # Errors
    "WaveError",
    "RiffError",
    "TruncatedInputError",
    "MalformedHeaderError",
    "ValidationError",
    "InconsistentFieldError",
    "UnsupportedBitDepthError",
    "ZeroChannelsError",
    "CapacityExceededError",
]
