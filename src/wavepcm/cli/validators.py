def validate_channel_count(type_: object, value: int) -> None:
    """Validate that a channel count fits the 16-bit fmt field."""
    if not 1 <= value <= 0xFFFF:
        raise ValueError("Channel count must be between 1 and 65535")


def validate_sampling_rate(type_: object, value: int) -> None:
    """Validate that a sampling rate fits the 32-bit fmt field."""
    if not 1 <= value <= 0xFFFFFFFF:
        raise ValueError("Sampling rate must be between 1 and 4294967295")
