"""
Command Counter
===============

Counts the playback commands a sequence will occupy on the controller.

The controller stores one instruction each time a channel group changes
state, so the counter compares every decoded frame with the last stored
vector of each of the four groups:

    for each group:
        if new vector != previous vector (length or any value):
            command_count += 1
            previous vector = new vector

Previous vectors start empty, so the first frame always adds exactly 4.

Memory is O(1) in the number of frames: only the most recent vector of
each group is retained, inside a RollingState owned by this counter.
"""

import logging
from typing import Optional

import numpy as np

from fseq_validator.models.frame import GROUP_NAMES, FrameState, RollingState


logger = logging.getLogger(__name__)


def apply_frame(state: RollingState, frame: FrameState) -> int:
    """
    Fold one frame into the rolling state.

    Args:
        state: Accumulator updated in place
        frame: Decoded frame

    Returns:
        Number of commands this frame added (0-4)
    """
    added = 0
    for name, vector in zip(GROUP_NAMES, frame.groups()):
        if not np.array_equal(vector, state.previous[name]):
            state.previous[name] = vector
            state.changes_per_group[name] += 1
            added += 1

    state.command_count += added
    state.frames_seen += 1
    return added


class CommandCounter:
    """
    Streaming change detector over decoded frames.

    Attributes:
        log_every_n_frames: Log progress every N frames

    Example:
        counter = CommandCounter()

        for frame_state in frames:
            counter.update(frame_state)

        print(counter.command_count)
    """

    def __init__(
        self,
        log_every_n_frames: int = 1000,
        state: Optional[RollingState] = None,
    ) -> None:
        """
        Initialize command counter.

        Args:
            log_every_n_frames: Log progress every N frames
            state: Existing accumulator to continue from (fresh if None)
        """
        if log_every_n_frames < 1:
            raise ValueError("log_every_n_frames must be >= 1")

        self.log_every_n_frames = log_every_n_frames
        self._state = state if state is not None else RollingState()

    def update(self, frame: FrameState) -> int:
        """
        Process one decoded frame.

        Args:
            frame: Decoded frame state

        Returns:
            Number of commands this frame added
        """
        added = apply_frame(self._state, frame)

        if self._state.frames_seen % self.log_every_n_frames == 0:
            logger.debug(
                f"CommandCounter [frame {self._state.frames_seen}]: "
                f"commands={self._state.command_count}"
            )

        return added

    def reset(self) -> None:
        """Reset counter state."""
        self._state = RollingState()
        logger.debug("CommandCounter reset")

    @property
    def state(self) -> RollingState:
        """Current rolling state."""
        return self._state

    @property
    def command_count(self) -> int:
        """Commands counted so far."""
        return self._state.command_count

    @property
    def frame_count(self) -> int:
        """Number of frames processed."""
        return self._state.frames_seen

    def get_metrics(self) -> dict:
        """Get counter metrics for observability."""
        return self._state.to_dict()
