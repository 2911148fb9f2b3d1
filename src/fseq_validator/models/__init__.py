"""
Data Models
===========

Typed models for the FSEQ validator.

This module re-exports all data models for convenient access.

Models:
    Errors:
        - ErrorKind: Stable machine-readable error codes

    Header:
        - FseqHeader: Parsed fixed header

    Frame:
        - FrameState: Four decoded channel group vectors
        - RollingState: Change-detection accumulator

    Output:
        - ValidationResult: Complete output contract
"""

from fseq_validator.models.error_codes import ErrorKind
from fseq_validator.models.header import FseqHeader
from fseq_validator.models.frame import GROUP_NAMES, FrameState, RollingState
from fseq_validator.models.result import ValidationResult

__all__ = [
    # Errors
    "ErrorKind",
    # Header
    "FseqHeader",
    # Frame
    "GROUP_NAMES",
    "FrameState",
    "RollingState",
    # Output
    "ValidationResult",
]
