"""
Signals Module
==============

Temporal processing of decoded frames.

This module turns the per-frame group states into the command count
the controller memory check is based on.
"""

from fseq_validator.signals.command_counter import CommandCounter, apply_frame

__all__ = ["CommandCounter", "apply_frame"]
