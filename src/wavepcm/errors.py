"""Exceptions raised by the WAVE PCM codec.

Every error derives from WaveError so callers can catch the whole family
with a single clause. File system failures are not wrapped: OSError from
the I/O helpers reaches the caller unchanged.
"""


class WaveError(Exception):
    """Base class for all codec errors."""


class RiffError(WaveError):
    """Error in the RIFF byte layout of a WAVE stream."""


class ValidationError(WaveError):
    """A header field disagrees with the WAVE PCM rules."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class TruncatedInputError(RiffError):
    """Buffer ends before the header or the declared data does."""


class MalformedHeaderError(RiffError, ValidationError):
    """A fixed FourCC tag does not hold its expected value."""


class InconsistentFieldError(ValidationError):
    """A stored field differs from the value derived from other fields."""


class UnsupportedBitDepthError(ValidationError):
    """Bits per sample is not one of 8, 16, 24 or 32."""


class ZeroChannelsError(ValidationError):
    """The fmt chunk declares zero channels."""


class CapacityExceededError(WaveError):
    """Sample data is too large for the 32-bit size fields."""
