"""
Validation Messages
===================

Renders ValidationResult error codes as user-facing text.

The core validator never formats text; the CLI and HTTP service use
this module to explain a rejection.
"""

from typing import List, Optional

from fseq_validator.config import ValidationConfig, settings
from fseq_validator.models.error_codes import ErrorKind
from fseq_validator.models.result import ValidationResult


def format_duration(duration_ms: int) -> str:
    """Render milliseconds as HH:MM:SS.mmm (wraps at 24 hours)."""
    total_seconds, millis = divmod(int(duration_ms), 1000)
    total_minutes, seconds = divmod(total_seconds, 60)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours % 24:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"


def format_percentage(ratio: float) -> str:
    """Render a ratio as a percentage with at most two decimals."""
    text = f"{ratio * 100:.2f}".rstrip("0").rstrip(".")
    return text or "0"


def describe_duration_limit(duration_ms: int) -> str:
    """Render a duration ceiling in whole minutes where possible."""
    minutes, remainder = divmod(int(duration_ms), 60_000)
    if remainder:
        return format_duration(duration_ms)
    return f"{minutes} minute" if minutes == 1 else f"{minutes} minutes"


def build_error_messages(
    result: ValidationResult,
    config: Optional[ValidationConfig] = None,
) -> List[str]:
    """
    Build one message per error, in error order.

    Args:
        result: Validation outcome
        config: Policy that produced `result`; expected values and limits
            are quoted from it (defaults to the loaded settings)

    Returns:
        List of messages (empty for a valid result)
    """
    if config is None:
        config = settings.validation

    messages = []
    for error in result.errors:
        if error == ErrorKind.INPUT_DATA:
            messages.append("An input of bytes must be provided!")
        elif error == ErrorKind.FILE_FORMAT:
            messages.append("Unknown file format, expected FSEQ v2.0")
        elif error == ErrorKind.CHANNEL_COUNT:
            messages.append(
                f"Expected {config.required_channel_count} channels, "
                f"got {result.channel_count}"
            )
        elif error == ErrorKind.FSEQ_TYPE:
            messages.append("Expected file format to be V2 Uncompressed")
        elif error == ErrorKind.DURATION:
            messages.append(
                "Expected total duration to be less than "
                f"{describe_duration_limit(config.max_duration_ms)}, "
                f"got {format_duration(result.duration_ms)}"
            )
        elif error == ErrorKind.MEMORY:
            messages.append(
                f"Used {format_percentage(result.memory_usage_ratio)}% of available memory! "
                f"Sequence uses {result.command_count} commands, "
                f"but the maximum allowed is {config.memory_limit}!"
            )

    return messages


def build_summary(result: ValidationResult) -> List[str]:
    """Summary lines for an accepted sequence."""
    return [
        f"Found {result.frame_count} frames, step time of {result.step_time_ms} ms "
        f"for a total duration of {format_duration(result.duration_ms)}",
        f"Used {format_percentage(result.memory_usage_ratio)}% of the available memory",
    ]
