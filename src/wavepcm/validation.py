"""Validation of WAVE PCM format models.

Every dependent field is re-derived from num_channels, sampling_rate,
bits_per_sample and the data length, then compared with the stored value.
The rules run in a fixed order:

    tags -> subchunk1_size -> audio_format -> bits_per_sample ->
    num_channels -> block_align -> byte_rate -> subchunk2_size -> chunk_size
"""

from collections.abc import Iterator
from dataclasses import dataclass

from wavepcm.errors import (
    InconsistentFieldError,
    MalformedHeaderError,
    UnsupportedBitDepthError,
    ValidationError,
    ZeroChannelsError,
)
from wavepcm.model import WaveFormat
from wavepcm.riff import (
    CHUNK_SIZE_OVERHEAD,
    PCM_FMT_CHUNK_SIZE,
    SUPPORTED_BIT_DEPTHS,
    TAG_FIELDS,
    WAVE_FORMAT_PCM,
    byte_range,
    unpack_int,
)


@dataclass
class ValidationResult:
    """Result of validation with optional warnings."""

    valid: bool
    errors: list[str]
    warnings: list[str]

    @classmethod
    def success(cls, warnings: list[str] | None = None) -> "ValidationResult":
        """Create a successful validation result."""
        return cls(valid=True, errors=[], warnings=warnings or [])

    @classmethod
    def failure(cls, errors: list[str], warnings: list[str] | None = None) -> "ValidationResult":
        """Create a failed validation result."""
        return cls(valid=False, errors=errors, warnings=warnings or [])


def check(model: WaveFormat) -> None:
    """Check that a model satisfies every WAVE PCM invariant.

    Args:
        model: The format model to check.

    Raises:
        MalformedHeaderError: If a FourCC tag is wrong.
        UnsupportedBitDepthError: If bits_per_sample is not 8, 16, 24 or 32.
        ZeroChannelsError: If num_channels is 0.
        InconsistentFieldError: If a stored field differs from its derived
            value. The error's field attribute names the first such field.
    """
    for error in _violations(model):
        raise error


def validate(model: WaveFormat) -> ValidationResult:
    """Validate a model without raising.

    Unlike check(), every violated rule is reported, not only the first.
    Warnings flag files that are valid but probably not what was intended:
    a zero sampling rate, no sample data, or a partial trailing frame.

    Args:
        model: The format model to validate.

    Returns:
        ValidationResult with errors and warnings.
    """
    errors = [str(error) for error in _violations(model)]
    warnings: list[str] = []

    if unpack_int(model.sampling_rate) == 0:
        warnings.append("sampling_rate is 0, playback duration is undefined")

    if not model.data:
        warnings.append("data chunk is empty")
    else:
        block_align = unpack_int(model.block_align)
        if block_align and len(model.data) % block_align:
            warnings.append(
                f"data length {len(model.data)} is not a multiple of "
                f"block_align {block_align}, last frame is incomplete"
            )

    if errors:
        return ValidationResult.failure(errors, warnings)
    return ValidationResult.success(warnings)


def _violations(model: WaveFormat) -> Iterator[ValidationError]:
    """Yield one error per violated rule, in rule order."""
    for name, expected in TAG_FIELDS.items():
        actual = getattr(model, name)
        if actual != expected:
            yield MalformedHeaderError(
                f"WAVE PCM format requires {expected!r} as {byte_range(name)}, "
                f"got {actual!r} instead",
                field=name,
            )

    subchunk1_size = unpack_int(model.subchunk1_size)
    if subchunk1_size != PCM_FMT_CHUNK_SIZE:
        yield _inconsistent("subchunk1_size", subchunk1_size, PCM_FMT_CHUNK_SIZE)

    audio_format = unpack_int(model.audio_format)
    if audio_format != WAVE_FORMAT_PCM:
        yield _inconsistent("audio_format", audio_format, WAVE_FORMAT_PCM)

    bits_per_sample = unpack_int(model.bits_per_sample)
    if bits_per_sample not in SUPPORTED_BIT_DEPTHS:
        yield UnsupportedBitDepthError(
            f"bits_per_sample ({byte_range('bits_per_sample')}) must be one of "
            f"{', '.join(map(str, SUPPORTED_BIT_DEPTHS))}, got {bits_per_sample}",
            field="bits_per_sample",
        )

    num_channels = unpack_int(model.num_channels)
    if num_channels == 0:
        yield ZeroChannelsError(
            f"num_channels ({byte_range('num_channels')}) must be at least 1, got 0",
            field="num_channels",
        )

    block_align = num_channels * bits_per_sample // 8
    stored_block_align = unpack_int(model.block_align)
    if stored_block_align != block_align:
        yield _inconsistent("block_align", stored_block_align, block_align)

    byte_rate = unpack_int(model.sampling_rate) * block_align
    stored_byte_rate = unpack_int(model.byte_rate)
    if stored_byte_rate != byte_rate:
        yield _inconsistent("byte_rate", stored_byte_rate, byte_rate)

    data_size = len(model.data)
    stored_data_size = unpack_int(model.subchunk2_size)
    if stored_data_size != data_size:
        yield _inconsistent("subchunk2_size", stored_data_size, data_size)

    chunk_size = CHUNK_SIZE_OVERHEAD + data_size
    stored_chunk_size = unpack_int(model.chunk_size)
    if stored_chunk_size != chunk_size:
        yield _inconsistent("chunk_size", stored_chunk_size, chunk_size)


def _inconsistent(name: str, stored: int, expected: int) -> InconsistentFieldError:
    return InconsistentFieldError(
        f"WAVE PCM format requires {expected} as {byte_range(name)} ({name}), "
        f"got {stored} instead",
        field=name,
    )
