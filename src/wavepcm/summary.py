"""Human-readable summaries of WAVE PCM headers."""

from wavepcm.model import WaveFormat


def summary_rows(model: WaveFormat) -> list[tuple[str, str]]:
    """Label/value pairs describing every header field of a model."""
    header = model.header
    return [
        ("RIFF tag", repr(header.chunk_id)),
        ("Total size", str(header.chunk_size)),
        ("WAVE tag", repr(header.format)),
        ("fmt chunk tag", repr(header.subchunk1_id)),
        ("fmt chunk size", str(header.subchunk1_size)),
        ("Format code", str(header.audio_format)),
        ("Channels", str(header.num_channels)),
        ("Sampling rate", f"{header.sampling_rate} Hz"),
        ("Byte rate", str(header.byte_rate)),
        ("Block alignment", str(header.block_align)),
        ("Bits per sample", str(header.bits_per_sample)),
        ("data chunk tag", repr(header.subchunk2_id)),
        ("Data size", str(header.subchunk2_size)),
        ("Frames", str(model.num_frames)),
        ("Duration", f"{model.duration:.3f}s"),
    ]


def summarize(model: WaveFormat) -> str:
    """Format a model's header as an aligned plain-text block."""
    rows = summary_rows(model)
    width = max(len(label) for label, _ in rows) + 1
    return "\n".join(f"{label + ':':<{width}} {value}" for label, value in rows)
