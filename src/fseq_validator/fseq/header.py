"""
Header Parser
=============

Extraction and acceptance checks for the fixed FSEQ v2 header.

Header Layout (little-endian):
    offset  width  field
    0       4      magic ("PSEQ")
    4       u8     data offset
    6       u8     minor version
    7       u8     major version
    10      u32    channel count
    14      u32    frame count
    18      u8     step time (ms)
    20      u8     compression type

Gates (checked in order, first failure wins):
    1. Structural   -> FILE_FORMAT
    2. Channel      -> CHANNEL_COUNT
    3. Compression  -> FSEQ_TYPE
"""

import logging
from typing import Optional

from fseq_validator.config import ValidationConfig
from fseq_validator.fseq.reader import BinaryReader, BufferLike, OutOfBoundsError
from fseq_validator.models.error_codes import ErrorKind
from fseq_validator.models.header import FseqHeader


logger = logging.getLogger(__name__)


HEADER_SIZE = 22
MAGIC = b"PSEQ"


def parse_header(data: BufferLike) -> FseqHeader:
    """
    Parse the fixed header from the start of a sequence buffer.

    Args:
        data: Full file contents (at least HEADER_SIZE bytes)

    Returns:
        FseqHeader with all fields populated

    Raises:
        OutOfBoundsError: If the buffer is shorter than the header
    """
    reader = BinaryReader(data)
    if len(reader) < HEADER_SIZE:
        raise OutOfBoundsError(
            f"Header needs {HEADER_SIZE} bytes, buffer has {len(reader)}"
        )

    return FseqHeader(
        magic=reader.read_bytes(0, 4),
        data_offset=reader.read_u8(4),
        minor_version=reader.read_u8(6),
        major_version=reader.read_u8(7),
        channel_count=reader.read_u32(10),
        frame_count=reader.read_u32(14),
        step_time_ms=reader.read_u8(18),
        compression_type=reader.read_u8(20),
    )


class HeaderParser:
    """
    Applies the header acceptance gates.

    Attributes:
        config: Validation policy supplying every threshold
    """

    def __init__(self, config: ValidationConfig) -> None:
        self.config = config

    def is_structurally_valid(self, header: FseqHeader) -> bool:
        """Structural gate: magic, offset, frame count, step time, versions."""
        cfg = self.config
        return (
            header.magic == MAGIC
            and header.data_offset >= cfg.min_data_offset
            and header.frame_count >= 1
            and header.step_time_ms >= cfg.min_step_time_ms
            and header.minor_version in cfg.accepted_minor_versions
            and header.major_version == cfg.accepted_major_version
        )

    def check(self, header: FseqHeader) -> Optional[ErrorKind]:
        """
        Run all header gates.

        Args:
            header: Parsed header

        Returns:
            The first failing ErrorKind, or None if the header is accepted
        """
        if not self.is_structurally_valid(header):
            logger.warning(f"Header rejected (file format): {header!r}")
            return ErrorKind.FILE_FORMAT

        if header.channel_count != self.config.required_channel_count:
            logger.warning(
                f"Header rejected: expected {self.config.required_channel_count} "
                f"channels, got {header.channel_count}"
            )
            return ErrorKind.CHANNEL_COUNT

        if header.compression_type != self.config.accepted_compression_type:
            logger.warning(
                f"Header rejected: compression type {header.compression_type}"
            )
            return ErrorKind.FSEQ_TYPE

        return None
