"""
Test Configuration
==================

Pytest fixtures and synthetic sequence builders for the FSEQ validator.
"""

import struct
from typing import Iterable, Optional

import pytest


FRAME_SIZE = 48

# 2247 frames at 20ms split into 28 segments of 81 frames; every segment
# boundary changes all four groups, giving 28 * 4 = 112 commands.
SCENARIO_FRAMES = 2247
SCENARIO_SEGMENT = 81
SCENARIO_COMMANDS = 112


def make_frame(light: int = 0, closure: int = 0, gap: int = 0) -> bytes:
    """One 48-byte frame with uniform light and closure channel values."""
    return bytes([light] * 30) + bytes([closure] * 16) + bytes([gap] * 2)


def alternating_frame(index: int) -> bytes:
    """Frame whose four groups all differ from those of index - 1."""
    return make_frame(200, 255) if index % 2 else make_frame(0, 0)


def build_fseq(
    frames: Iterable[bytes],
    *,
    magic: bytes = b"PSEQ",
    data_offset: int = 24,
    minor: int = 0,
    major: int = 2,
    channel_count: int = 48,
    frame_count: Optional[int] = None,
    step_time_ms: int = 20,
    compression: int = 0,
) -> bytearray:
    """Assemble an uncompressed FSEQ v2 buffer."""
    frames = list(frames)
    if frame_count is None:
        frame_count = len(frames)

    header = bytearray(data_offset)
    header[0:4] = magic
    header[4] = data_offset
    header[6] = minor
    header[7] = major
    struct.pack_into("<H", header, 8, data_offset)
    struct.pack_into("<I", header, 10, channel_count)
    struct.pack_into("<I", header, 14, frame_count)
    header[18] = step_time_ms
    header[20] = compression

    return header + b"".join(frames)


def scenario_frames() -> list:
    return [alternating_frame(i // SCENARIO_SEGMENT) for i in range(SCENARIO_FRAMES)]


@pytest.fixture
def fseq_builder():
    """Provide the build_fseq helper."""
    return build_fseq


@pytest.fixture
def frame_builder():
    """Provide the make_frame helper."""
    return make_frame


@pytest.fixture
def lightshow_valid() -> bytearray:
    """A valid 2247-frame sequence producing 112 commands."""
    return build_fseq(scenario_frames())


@pytest.fixture
def lightshow_over_memory() -> bytearray:
    """1000 frames where every frame changes every group (4000 commands)."""
    return build_fseq(alternating_frame(i) for i in range(1000))


@pytest.fixture
def validation_config():
    """Default validation policy."""
    from fseq_validator.config import ValidationConfig

    return ValidationConfig()
