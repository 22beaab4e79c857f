"""File helpers for WAVE PCM files.

The codec itself works on in-memory buffers; these functions move those
buffers to and from disk. OSError is not wrapped.
"""

from pathlib import Path

from wavepcm.model import WaveFormat
from wavepcm.reader import decode
from wavepcm.validation import check
from wavepcm.writer import to_bytes


def read_file(path: Path | str) -> bytes:
    """Read a whole file into memory."""
    return Path(path).read_bytes()


def write_file(path: Path | str, data: bytes) -> None:
    """Write bytes to a file, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)


def load_wav(path: Path | str, *, validate: bool = True) -> WaveFormat:
    """Load a WAVE PCM file.

    Args:
        path: Path to the WAV file.
        validate: Whether to check the decoded model.

    Returns:
        The decoded WaveFormat.

    Raises:
        OSError: If the file cannot be read.
        RiffError: If the byte layout is truncated or malformed.
        ValidationError: If validate=True and a field is inconsistent.
    """
    model = decode(read_file(path))
    if validate:
        check(model)
    return model


def save_wav(path: Path | str, model: WaveFormat, *, validate: bool = True) -> None:
    """Save a WaveFormat as a WAVE PCM file.

    Args:
        path: Output file path.
        model: The model to serialize.
        validate: Whether to check the model before writing.

    Raises:
        OSError: If the file cannot be written.
        ValidationError: If validate=True and a field is inconsistent.
    """
    if validate:
        check(model)
    write_file(path, to_bytes(model))
