# lfsr_engine/errors.py
from __future__ import annotations


class LFSRError(ValueError):
    """Base class for register misuse errors."""


class InvalidSize(LFSRError):
    """Register width outside the supported 3..16 bit range."""


class InvalidState(LFSRError):
    """Attempt to load the all-zero state into a register."""
