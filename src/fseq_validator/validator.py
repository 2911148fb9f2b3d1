"""
Sequence Validator
==================

Orchestrates header parsing, frame decoding and command counting, then
applies the duration and memory thresholds.

Validation Flow:
    1. INPUT_DATA     no buffer or shorter than the header     (terminal)
    2. FILE_FORMAT    structural header gate                   (terminal)
       CHANNEL_COUNT  channel gate                             (terminal)
       FSEQ_TYPE      compression gate                         (terminal)
    3. Frame scan     FrameDecoder -> CommandCounter
    4. DURATION       frame_count * step_time_ms > ceiling     (non-terminal)
    5. MEMORY         command_count / memory_limit > 1         (non-terminal)

Every call builds its own CommandCounter, so a Validator instance can be
shared between threads.
"""

import logging
import time
from typing import List, Optional

from fseq_validator.config import ValidationConfig, settings
from fseq_validator.fseq.frame_decoder import FrameDecoder
from fseq_validator.fseq.header import HEADER_SIZE, HeaderParser, parse_header
from fseq_validator.fseq.reader import BinaryReader, BufferLike
from fseq_validator.models.error_codes import ErrorKind
from fseq_validator.models.header import FseqHeader
from fseq_validator.models.result import ValidationResult
from fseq_validator.signals.command_counter import CommandCounter


logger = logging.getLogger(__name__)


class Validator:
    """
    Pre-playback validator for FSEQ v2 sequences.

    Attributes:
        config: Validation policy (limits and accepted versions)

    Example:
        validator = Validator()
        result = validator.validate(data)
        if result.is_valid:
            print(f"{result.memory_usage_ratio:.1%} of memory used")
    """

    def __init__(self, config: Optional[ValidationConfig] = None) -> None:
        """
        Initialize validator.

        Args:
            config: Validation policy. Defaults to the loaded settings.
        """
        self.config = config if config is not None else settings.validation
        self.header_parser = HeaderParser(self.config)
        self.decoder = FrameDecoder()

    def count_commands(self, data: BufferLike, header: FseqHeader) -> int:
        """
        Scan every frame and count controller commands.

        Raises:
            OutOfBoundsError: If the buffer holds fewer frames than declared
        """
        reader = BinaryReader(data)
        counter = CommandCounter(log_every_n_frames=self.config.log_every_n_frames)

        for index in range(header.frame_count):
            position = self.decoder.frame_position(header.data_offset, index)
            counter.update(self.decoder.decode(reader, position))

        logger.debug(f"Frame scan complete: {counter.get_metrics()}")
        return counter.command_count

    def validate(self, data: Optional[BufferLike]) -> ValidationResult:
        """
        Validate a full sequence buffer.

        Args:
            data: Complete file contents

        Returns:
            ValidationResult (valid when `errors` is empty)

        Raises:
            OutOfBoundsError: If frame data is truncated
        """
        size = 0 if data is None else memoryview(data).nbytes
        if size < HEADER_SIZE:
            logger.warning(f"No usable input: {size} byte(s)")
            return ValidationResult(errors=[ErrorKind.INPUT_DATA])

        start = time.perf_counter()
        header = parse_header(data)
        logger.info(f"Validating sequence: {header!r}")

        fields = {
            "frame_count": header.frame_count,
            "channel_count": header.channel_count,
            "step_time_ms": header.step_time_ms,
        }

        gate_error = self.header_parser.check(header)
        if gate_error is not None:
            return ValidationResult(errors=[gate_error], **fields)

        command_count = self.count_commands(data, header)
        errors: List[ErrorKind] = []

        duration_ms = header.duration_ms
        if duration_ms > self.config.max_duration_ms:
            logger.warning(
                f"Duration {duration_ms}ms exceeds {self.config.max_duration_ms}ms"
            )
            errors.append(ErrorKind.DURATION)

        memory_usage_ratio = command_count / self.config.memory_limit
        if memory_usage_ratio > 1:
            logger.warning(
                f"Command count {command_count} exceeds memory limit "
                f"{self.config.memory_limit}"
            )
            errors.append(ErrorKind.MEMORY)

        result = ValidationResult(
            duration_ms=duration_ms,
            command_count=command_count,
            memory_usage_ratio=memory_usage_ratio,
            errors=errors,
            **fields,
        )

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"Validation finished in {elapsed_ms:.1f}ms: commands={command_count}, "
            f"memory={memory_usage_ratio:.2%}, errors={[e.name for e in errors]}"
        )
        return result


def validate(
    data: Optional[BufferLike],
    config: Optional[ValidationConfig] = None,
) -> ValidationResult:
    """Validate `data` with a one-off Validator."""
    return Validator(config).validate(data)
