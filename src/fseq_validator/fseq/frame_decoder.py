"""
Frame Decoder
=============

Decodes one 48-channel frame into the four channel group states.

Frame Layout (48 bytes):
    [0, 30)   light channels
    [30, 46)  closure channels
    [46, 48)  unused, read and skipped

Decoding Rules:
    light_state[i]  = 1 if L[i] > 127 else 0
    ramp_state[i]   = min((raw // 13 + 1) / 2, 3)   for i < 14
                      where raw = 255 - L[i] if L[i] > 127 else L[i]
    closure[i]      = (C[i] // 32 + 1) / 2
    closure_group1  = closure[0:10]
    closure_group2  = closure[10:16]
"""

import logging

import numpy as np

from fseq_validator.fseq.reader import BinaryReader
from fseq_validator.models.frame import FrameState


logger = logging.getLogger(__name__)


LIGHT_CHANNELS = 30
CLOSURE_CHANNELS = 16
UNUSED_CHANNELS = 2
FRAME_SIZE = LIGHT_CHANNELS + CLOSURE_CHANNELS + UNUSED_CHANNELS

RAMP_CHANNELS = 14
CLOSURE_GROUP1_SIZE = 10

LIGHT_ON_THRESHOLD = 127
RAMP_STEP = 13
RAMP_MAX = 3.0
CLOSURE_STEP = 32


class FrameDecoder:
    """
    Stateless decoder from raw frame bytes to FrameState.

    Example:
        decoder = FrameDecoder()
        for index in range(header.frame_count):
            position = decoder.frame_position(header.data_offset, index)
            state = decoder.decode(reader, position)
    """

    @staticmethod
    def frame_position(data_offset: int, index: int) -> int:
        """Byte position of frame `index`."""
        return data_offset + FRAME_SIZE * index

    def decode(self, reader: BinaryReader, position: int) -> FrameState:
        """
        Decode the frame starting at `position`.

        Args:
            reader: Reader over the full sequence buffer
            position: Byte position of the frame

        Returns:
            FrameState with the four group vectors

        Raises:
            OutOfBoundsError: If the buffer ends before the frame does
        """
        window = np.frombuffer(reader.read_bytes(position, FRAME_SIZE), dtype=np.uint8)
        return self.decode_window(window)

    def decode_window(self, window: np.ndarray) -> FrameState:
        """Decode an already-read 48-byte window."""
        lights = window[:LIGHT_CHANNELS].astype(np.int16)
        closures = window[LIGHT_CHANNELS:LIGHT_CHANNELS + CLOSURE_CHANNELS].astype(np.int16)

        is_on = lights > LIGHT_ON_THRESHOLD
        light_state = is_on.astype(np.uint8)

        ramp_lights = lights[:RAMP_CHANNELS]
        raw = np.where(is_on[:RAMP_CHANNELS], 255 - ramp_lights, ramp_lights)
        ramp_state = np.minimum((raw // RAMP_STEP + 1) / 2, RAMP_MAX)

        closure_state = (closures // CLOSURE_STEP + 1) / 2

        return FrameState(
            light_state=light_state,
            ramp_state=ramp_state,
            closure_group1=closure_state[:CLOSURE_GROUP1_SIZE],
            closure_group2=closure_state[CLOSURE_GROUP1_SIZE:],
        )
