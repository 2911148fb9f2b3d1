"""
Error Codes
===========

Fixed set of machine-readable validation error codes.

Rules:
    - No free-text in the core; rendering lives in fseq_validator.messages
    - The integer values are part of the public contract and MUST NOT be
      reordered, since stored results and API clients rely on them
"""

from enum import IntEnum


class ErrorKind(IntEnum):
    """
    Reasons a sequence is rejected.

    The first four are terminal header failures, checked in value order.
    DURATION and MEMORY need a full frame scan and may appear together.

    Attributes:
        INPUT_DATA: No buffer, or a buffer too short to hold a header
        FILE_FORMAT: Magic, data offset, frame count, step time or version rejected
        CHANNEL_COUNT: Channel count is not the required value
        FSEQ_TYPE: Sequence is compressed
        DURATION: Total duration exceeds the configured ceiling
        MEMORY: Command count exceeds the controller memory limit
    """

    # Terminal header failures
    INPUT_DATA = 0
    FILE_FORMAT = 1
    CHANNEL_COUNT = 2
    FSEQ_TYPE = 3

    # Post-scan threshold failures
    DURATION = 4
    MEMORY = 5

    @property
    def is_terminal(self) -> bool:
        """Whether this error stops validation before the frame scan."""
        return self < ErrorKind.DURATION
