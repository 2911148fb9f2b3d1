"""
Header Model
============

Typed record of the fixed FSEQ v2 header.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FseqHeader:
    """
    Fields extracted from the first 22 bytes of a sequence file.

    Produced by parse_header, consumed by HeaderParser gates and the
    Validator. Never mutated after parsing.

    Attributes:
        magic: 4-byte file identifier (b"PSEQ" for valid files)
        data_offset: Byte offset of the first frame
        minor_version: FSEQ minor version
        major_version: FSEQ major version
        channel_count: Channels per frame
        frame_count: Number of frames in the sequence
        step_time_ms: Interval between frames in milliseconds
        compression_type: 0 for uncompressed sequences
    """

    magic: bytes
    data_offset: int
    minor_version: int
    major_version: int
    channel_count: int
    frame_count: int
    step_time_ms: int
    compression_type: int

    @property
    def duration_ms(self) -> int:
        """Total playback time declared by the header."""
        return self.frame_count * self.step_time_ms

    def __repr__(self) -> str:
        return (
            f"FseqHeader(magic={self.magic!r}, "
            f"v{self.major_version}.{self.minor_version}, "
            f"offset={self.data_offset}, channels={self.channel_count}, "
            f"frames={self.frame_count}, step={self.step_time_ms}ms, "
            f"compression={self.compression_type})"
        )
