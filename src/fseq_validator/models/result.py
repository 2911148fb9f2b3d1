"""
Validation Result Model
=======================

This module defines the output contract of the validator.

Output Contract:
    {
        "frame_count": 2247,
        "channel_count": 48,
        "step_time_ms": 20,
        "duration_ms": 44940,
        "command_count": 112,
        "memory_usage_ratio": 0.032,
        "errors": []
    }

Design Rules:
    - The result is valid if and only if `errors` is empty
    - Fields the validator did not reach before a terminal error stay at 0
    - `command_count` and `memory_usage_ratio` are only meaningful after
      a full frame scan
    - Results are frozen once returned
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from fseq_validator.models.error_codes import ErrorKind


class ValidationResult(BaseModel):
    """
    Outcome of validating one sequence buffer.

    Attributes:
        frame_count: Frame count from the header
        channel_count: Channel count from the header
        step_time_ms: Frame interval from the header
        duration_ms: frame_count * step_time_ms (0 if no frame scan ran)
        command_count: Detected group changes across all frames
        memory_usage_ratio: command_count / memory limit (1.0 = 100%)
        errors: Ordered error codes (immutable), empty when the sequence is accepted
    """

    model_config = ConfigDict(frozen=True)

    frame_count: int = Field(default=0, ge=0, description="Number of frames")
    channel_count: int = Field(default=0, ge=0, description="Channels per frame")
    step_time_ms: int = Field(default=0, ge=0, description="Frame interval (ms)")
    duration_ms: int = Field(default=0, ge=0, description="Total duration (ms)")
    command_count: int = Field(default=0, ge=0, description="Controller commands")
    memory_usage_ratio: float = Field(
        default=0.0,
        ge=0.0,
        description="Fraction of controller memory used (>1.0 does not fit)",
    )
    errors: Tuple[ErrorKind, ...] = Field(
        default=(),
        description="Error codes, empty when valid",
    )

    @property
    def is_valid(self) -> bool:
        """True when no error was found."""
        return not self.errors
