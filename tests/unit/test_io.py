"""Unit tests for WAVE PCM file helpers."""

import dataclasses
from pathlib import Path

import pytest

from wavepcm import (
    InconsistentFieldError,
    TruncatedInputError,
    encode,
    load_wav,
    read_file,
    save_wav,
    summarize,
    to_bytes,
    write_file,
)


class TestReadWriteFile:
    """Tests for read_file and write_file."""

    def test_roundtrip(self, tmp_path: Path) -> None:
        """Test that bytes written are read back."""
        path = tmp_path / "blob.bin"

        write_file(path, b"\x00\x01\x02")

        assert read_file(path) == b"\x00\x01\x02"

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        """Test that parent directories are created if needed."""
        path = tmp_path / "subdir" / "nested" / "blob.bin"

        write_file(str(path), b"x")

        assert path.exists()

    def test_missing_file_raises_os_error(self, tmp_path: Path) -> None:
        """Test that file system errors are not wrapped."""
        with pytest.raises(FileNotFoundError):
            read_file(tmp_path / "missing.wav")


class TestLoadSaveWav:
    """Tests for load_wav and save_wav."""

    def test_roundtrip(self, tmp_path: Path) -> None:
        """Test basic save and load roundtrip."""
        wav = encode(bytes(range(200)), 2, 48000, 16)
        path = tmp_path / "test_roundtrip.wav"

        save_wav(path, wav)
        loaded = load_wav(path)

        assert loaded == wav
        assert path.read_bytes() == to_bytes(wav)

    def test_save_validates(self, tmp_path: Path) -> None:
        """Test that an inconsistent model is not written."""
        wav = dataclasses.replace(encode(bytes(4), 1, 8000, 16), byte_rate=b"\x00" * 4)
        path = tmp_path / "bad.wav"

        with pytest.raises(InconsistentFieldError):
            save_wav(path, wav)

        assert not path.exists()

    def test_skip_validation(self, tmp_path: Path) -> None:
        """Test that validation can be skipped on both ends."""
        wav = dataclasses.replace(encode(bytes(4), 1, 8000, 16), byte_rate=b"\x00" * 4)
        path = tmp_path / "unchecked.wav"

        save_wav(path, wav, validate=False)

        assert load_wav(path, validate=False) == wav
        with pytest.raises(InconsistentFieldError):
            load_wav(path)

    def test_load_truncated(self, tmp_path: Path) -> None:
        """Test that a cut-off file is reported as truncated."""
        path = tmp_path / "cut.wav"
        path.write_bytes(to_bytes(encode(bytes(100), 1, 8000, 16))[:60])

        with pytest.raises(TruncatedInputError):
            load_wav(path)


class TestSummarize:
    """Tests for summarize function."""

    def test_lists_every_field(self) -> None:
        """Test that the summary names each header value."""
        text = summarize(encode(bytes(8), 2, 44100, 16))
        lines = text.splitlines()

        assert len(lines) == 15
        assert lines[0].startswith("RIFF tag:")
        assert lines[0].endswith("'RIFF'")
        assert "Sampling rate:" in text
        assert "44100 Hz" in text
        assert "176400" in text
        assert lines[-1].endswith("0.000s")

    def test_columns_are_aligned(self) -> None:
        """Test that every value starts in the same column."""
        lines = summarize(encode(bytes(8), 1, 8000, 8)).splitlines()

        starts = {len(line) - len(line.split(":", 1)[1].lstrip()) for line in lines}
        assert len(starts) == 1
