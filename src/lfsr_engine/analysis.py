# lfsr_engine/analysis.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence

import numpy as np

from lfsr_engine.engine import LFSR, SELF_TEST_SLACK


@dataclass(frozen=True)
class SequenceReport:
    """
    Statistics for one period generated from a register's current state.

    period is None when the register never returned to its start state
    (zero lock or a cycle that does not include the start).
    """
    size: int
    polynomial: str
    period: Optional[int]
    max_period: int
    ones: int
    zeros: int

    @property
    def is_maximal(self) -> bool:
        return self.period == self.max_period


def measure_period(lfsr: LFSR, *, limit: Optional[int] = None) -> Optional[int]:
    """
    Count steps until the register returns to its current state.

    Returns None if the state hits zero or `limit` steps pass first.
    The register's state and period counter are left as they were.
    """
    if limit is None:
        limit = lfsr.get_max_period() + SELF_TEST_SLACK

    start = lfsr.get_state()
    with lfsr.preserved():
        for steps in range(1, limit + 1):
            lfsr.next_bit()
            state = lfsr.get_state()
            if state == start:
                return steps
            if state == 0:
                return None
        return None


def bit_balance(bits: Sequence[int]) -> tuple[int, int]:
    """Return (ones, zeros)."""
    a = np.asarray(bits, dtype=np.uint8)
    ones = int(np.count_nonzero(a))
    return ones, int(a.size - ones)


def run_lengths(bits: Sequence[int]) -> Dict[int, int]:
    """
    Histogram of run lengths (runs of equal consecutive bits, not wrapped).
    """
    a = np.asarray(bits, dtype=np.int8)
    if a.size == 0:
        return {}
    edges = np.flatnonzero(np.diff(a)) + 1
    bounds = np.concatenate(([0], edges, [a.size]))
    lengths, counts = np.unique(np.diff(bounds), return_counts=True)
    return {int(n): int(c) for n, c in zip(lengths, counts)}


def autocorrelation(bits: Sequence[int]) -> np.ndarray:
    """
    Periodic autocorrelation of the +/-1 mapped sequence.

    For an m-sequence of period P: r[0] == P and r[k] == -1 for k != 0.
    """
    x = 2 * np.asarray(bits, dtype=np.float64) - 1
    if x.size == 0:
        return np.zeros(0, dtype=np.int64)
    spectrum = np.fft.rfft(x)
    r = np.fft.irfft(spectrum * np.conj(spectrum), n=x.size)
    return np.rint(r).astype(np.int64)


def analyze(lfsr: LFSR) -> SequenceReport:
    """
    Measure period and bit balance over one max_period run from the current
    state. The register is left unchanged.
    """
    period = measure_period(lfsr)

    with lfsr.preserved():
        bits = lfsr.generate_sequence(0)

    ones, zeros = bit_balance(bits)
    return SequenceReport(
        size=lfsr.get_size(),
        polynomial=lfsr.get_polynomial_string(),
        period=period,
        max_period=lfsr.get_max_period(),
        ones=ones,
        zeros=zeros,
    )
