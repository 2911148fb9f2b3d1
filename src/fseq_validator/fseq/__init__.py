"""
FSEQ Module
===========

Binary decoding of FSEQ v2 uncompressed sequence files.

This module provides the parsing layer of the validator:
    - BinaryReader: Bounds-checked little-endian reads
    - parse_header / HeaderParser: Header record and acceptance gates
    - FrameDecoder: 48-byte frame to channel group states
"""

from fseq_validator.fseq.reader import BinaryReader, FseqError, OutOfBoundsError
from fseq_validator.fseq.header import HEADER_SIZE, MAGIC, HeaderParser, parse_header
from fseq_validator.fseq.frame_decoder import FRAME_SIZE, FrameDecoder


__all__ = [
    "BinaryReader",
    "FseqError",
    "OutOfBoundsError",
    "HEADER_SIZE",
    "MAGIC",
    "HeaderParser",
    "parse_header",
    "FRAME_SIZE",
    "FrameDecoder",
]
