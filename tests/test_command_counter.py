"""
Command Counter Tests
=====================
"""

import numpy as np
import pytest

from fseq_validator.fseq.frame_decoder import FrameDecoder
from fseq_validator.models.frame import FrameState, RollingState
from fseq_validator.signals.command_counter import CommandCounter, apply_frame


@pytest.fixture
def decode():
    decoder = FrameDecoder()
    return lambda frame: decoder.decode_window(np.frombuffer(frame, dtype=np.uint8))


class TestCommandCounter:
    """Tests for rolling change detection."""

    def test_first_frame_adds_four(self, decode, frame_builder):
        """Verify the first frame changes every group."""
        counter = CommandCounter()
        assert counter.update(decode(frame_builder())) == 4
        assert counter.command_count == 4

    def test_repeated_frame_adds_nothing(self, decode, frame_builder):
        """Verify identical frames add no commands."""
        counter = CommandCounter()
        frame = decode(frame_builder(light=50, closure=70))
        counter.update(frame)
        assert counter.update(frame) == 0
        assert counter.update(decode(frame_builder(light=50, closure=70))) == 0
        assert counter.command_count == 4
        assert counter.frame_count == 3

    def test_single_group_change(self, decode):
        """Verify only the changed group is counted."""
        counter = CommandCounter()
        counter.update(decode(bytes(48)))

        closure_only = bytes(30) + bytes(10) + bytes([255] * 6) + bytes(2)
        assert counter.update(decode(closure_only)) == 1
        assert counter.state.changes_per_group["closure_group2"] == 2
        assert counter.state.changes_per_group["closure_group1"] == 1

    def test_light_change_without_ramp_change(self, decode):
        """0 and 255 share ramp level 0.5 but differ in on/off state."""
        counter = CommandCounter()
        counter.update(decode(bytes(48)))
        assert counter.update(decode(bytes([255] * 30) + bytes(18))) == 1

    def test_compares_against_last_stored_vector(self, decode, frame_builder):
        """Verify comparison is against the last stored vector."""
        counter = CommandCounter()
        a = decode(frame_builder(light=0))
        b = decode(frame_builder(light=200))
        counter.update(a)
        counter.update(b)
        assert counter.update(a) == 2
        assert counter.command_count == 8

    def test_length_difference_counts_as_change(self):
        """Verify a length mismatch counts as a change."""
        state = RollingState()
        frame = FrameState(
            light_state=np.zeros(30, dtype=np.uint8),
            ramp_state=np.full(14, 0.5),
            closure_group1=np.full(10, 0.5),
            closure_group2=np.full(6, 0.5),
        )
        apply_frame(state, frame)

        shorter = FrameState(
            light_state=np.zeros(29, dtype=np.uint8),
            ramp_state=frame.ramp_state,
            closure_group1=frame.closure_group1,
            closure_group2=frame.closure_group2,
        )
        assert apply_frame(state, shorter) == 1
        assert state.command_count == 5

    def test_monotonic(self, decode, frame_builder):
        """Verify the running count never decreases."""
        counter = CommandCounter()
        counts = []
        for i in range(20):
            counter.update(decode(frame_builder(light=(i * 37) % 256, closure=i * 10)))
            counts.append(counter.command_count)
        assert counts == sorted(counts)

    def test_reset(self, decode, frame_builder):
        """Verify reset restores the empty state."""
        counter = CommandCounter()
        counter.update(decode(frame_builder()))
        counter.reset()
        assert counter.command_count == 0
        assert counter.update(decode(frame_builder())) == 4

    def test_continues_from_existing_state(self, decode, frame_builder):
        """Verify a counter can resume from a caller-owned state."""
        state = RollingState()
        apply_frame(state, decode(frame_builder()))

        counter = CommandCounter(state=state)
        assert counter.update(decode(frame_builder())) == 0
        assert counter.command_count == 4

    def test_metrics(self, decode, frame_builder):
        """Verify metrics expose frames, commands and group changes."""
        counter = CommandCounter()
        counter.update(decode(frame_builder()))
        metrics = counter.get_metrics()
        assert metrics["frames_seen"] == 1
        assert metrics["command_count"] == 4
        assert set(metrics["changes_per_group"].values()) == {1}

    def test_invalid_log_interval(self):
        """Verify a zero log interval is rejected."""
        with pytest.raises(ValueError):
            CommandCounter(log_every_n_frames=0)
