"""
Frame State Models
==================

Decoded per-frame state and the rolling change-detection accumulator.

Core Concepts:
    - FrameState: The four channel group vectors derived from one frame
    - RollingState: Last seen vector per group plus the running command count

Groups:
    light_state     30 values in {0, 1}        (on/off per light channel)
    ramp_state      14 values in [0.5, 3.0]    (brightness ramp speed)
    closure_group1  10 values in [0.5, 4.0]    (closure channels 0-9)
    closure_group2   6 values in [0.5, 4.0]    (closure channels 10-15)
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

import numpy as np


GROUP_NAMES: Tuple[str, ...] = (
    "light_state",
    "ramp_state",
    "closure_group1",
    "closure_group2",
)


def _empty() -> np.ndarray:
    return np.empty(0, dtype=np.float64)


@dataclass(frozen=True, slots=True)
class FrameState:
    """
    Channel group states decoded from a single 48-byte frame.

    Produced by FrameDecoder, consumed by CommandCounter. The raw
    frame bytes are discarded once this is built.

    Attributes:
        light_state: Light on/off flags
        ramp_state: Ramp levels for the first 14 light channels
        closure_group1: Closure levels for channels 0-9
        closure_group2: Closure levels for channels 10-15
    """

    light_state: np.ndarray
    ramp_state: np.ndarray
    closure_group1: np.ndarray
    closure_group2: np.ndarray

    def groups(self) -> Tuple[np.ndarray, ...]:
        """Group vectors in GROUP_NAMES order."""
        return (
            self.light_state,
            self.ramp_state,
            self.closure_group1,
            self.closure_group2,
        )

    def __repr__(self) -> str:
        return (
            f"FrameState(lights_on={int(self.light_state.sum())}, "
            f"ramp={self.ramp_state.tolist()}, "
            f"closures={self.closure_group1.tolist() + self.closure_group2.tolist()})"
        )


@dataclass(slots=True)
class RollingState:
    """
    Change-detection accumulator for one validation pass.

    Owned by a single CommandCounter. Previous vectors start empty so
    the first frame always differs in every group.

    Attributes:
        previous: Last stored vector per group, keyed by GROUP_NAMES
        command_count: Running number of detected group changes
        frames_seen: Number of frames applied
        changes_per_group: Detected changes per group
    """

    previous: Dict[str, np.ndarray] = field(
        default_factory=lambda: {name: _empty() for name in GROUP_NAMES}
    )
    command_count: int = 0
    frames_seen: int = 0
    changes_per_group: Dict[str, int] = field(
        default_factory=lambda: {name: 0 for name in GROUP_NAMES}
    )

    def to_dict(self) -> dict:
        """Export as dictionary for logging/serialization."""
        return {
            "frames_seen": self.frames_seen,
            "command_count": self.command_count,
            "changes_per_group": dict(self.changes_per_group),
        }
