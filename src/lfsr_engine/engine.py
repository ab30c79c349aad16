# lfsr_engine/engine.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, List

from lfsr_engine.bitops import bits_to_int, to_binary_string
from lfsr_engine.errors import InvalidState
from lfsr_engine.polynomials import check_size, polynomial_mask, polynomial_string

logger = logging.getLogger(__name__)

# Extra steps allowed past max_period before self_test gives up.
SELF_TEST_SLACK = 100


def _seed_to_state(seed: int, mask: int) -> int:
    if seed == 0:
        return 1
    return (seed & mask) or 1


class LFSR:
    """
    Fibonacci-style linear feedback shift register, 3..16 bits wide.

    Each step XORs the state bits selected by the polynomial mask, shifts
    the register right by one and inserts that feedback bit at the top of
    the window. The feedback bit is also the output bit.

    This is NOT crypto.

    A register must not be shared between threads without external locking.
    """

    def __init__(self, size: int, seed: int = 0):
        self._size = check_size(size)
        self._polynomial_mask = polynomial_mask(size)
        self._max_period = (1 << size) - 1
        self._state = _seed_to_state(seed, self._max_period)
        self._period_counter = 0

    def __repr__(self) -> str:
        return (
            f"LFSR(size={self._size}, state=0b{self.get_state_string()}, "
            f"period_counter={self._period_counter})"
        )

    # ----------------------------
    # Generation
    # ----------------------------

    def next_bit(self) -> bool:
        feedback = bin(self._state & self._polynomial_mask).count("1") & 1
        self._state = (self._state >> 1) | (feedback << (self._size - 1))
        self._period_counter += 1
        return bool(feedback)

    def next_byte(self) -> int:
        """8 bits, first generated bit in bit 0."""
        return self._next_bits(8)

    def next_word(self) -> int:
        """16 bits, first generated bit in bit 0."""
        return self._next_bits(16)

    def _next_bits(self, count: int) -> int:
        return bits_to_int(self.next_bit() for _ in range(count))

    def generate_sequence(self, max_bits: int = 0) -> List[bool]:
        """
        Generate one batch of bits in generation order.

        max_bits == 0 means a full period; larger requests are capped at
        max_period.
        """
        if max_bits < 0:
            raise ValueError("max_bits must be non-negative")
        limit = self._max_period if max_bits == 0 else min(max_bits, self._max_period)
        return [self.next_bit() for _ in range(limit)]

    # ----------------------------
    # State
    # ----------------------------

    @property
    def state(self) -> int:
        return self._state

    @property
    def size(self) -> int:
        return self._size

    @property
    def polynomial_mask(self) -> int:
        return self._polynomial_mask

    @property
    def period_counter(self) -> int:
        return self._period_counter

    @property
    def max_period(self) -> int:
        return self._max_period

    def get_state(self) -> int:
        return self._state

    def set_state(self, new_state: int) -> None:
        """
        Load a raw register value.

        Raises InvalidState for 0; the register is left untouched in that
        case. Non-zero values are masked to the register width.
        """
        if new_state == 0:
            raise InvalidState("State cannot be zero (all-zero state is invalid)")
        self._state = new_state & self._max_period
        self._period_counter = 0
        logger.debug("set_state: size=%d state=0x%X", self._size, self._state)

    def reset(self, new_seed: int = 0) -> None:
        """
        Reseed the register. Zero (or a seed that masks to zero) becomes 1.
        Never raises.
        """
        self._state = _seed_to_state(new_seed, self._max_period)
        self._period_counter = 0
        logger.debug("reset: size=%d state=0x%X", self._size, self._state)

    def get_size(self) -> int:
        return self._size

    def get_polynomial_mask(self) -> int:
        return self._polynomial_mask

    def get_period_counter(self) -> int:
        return self._period_counter

    def get_max_period(self) -> int:
        return self._max_period

    def is_period_complete(self) -> bool:
        return self._period_counter >= self._max_period

    def get_state_string(self) -> str:
        return to_binary_string(self._state, self._size)

    def get_polynomial_string(self) -> str:
        return polynomial_string(self._size, self._polynomial_mask)

    # ----------------------------
    # Verification
    # ----------------------------

    def self_test(self) -> bool:
        """
        Check the register never locks at zero and cycles with exactly
        max_period steps from the current state.

        State and period counter are restored before returning.
        """
        original_state = self._state
        with self.preserved():
            ok = self._run_self_test(original_state)

        if ok:
            logger.debug("self_test passed: size=%d", self._size)
        else:
            logger.warning(
                "self_test failed: size=%d polynomial=%s start=0x%X",
                self._size, self.get_polynomial_string(), original_state,
            )
        return ok

    @contextmanager
    def preserved(self) -> Iterator["LFSR"]:
        """
        Restore state and period counter on exit, however the block ends.
        """
        state, counter = self._state, self._period_counter
        try:
            yield self
        finally:
            self._state = state
            self._period_counter = counter

    def _run_self_test(self, original_state: int) -> bool:
        for _ in range(10):
            self.next_bit()
            if self._state == 0:
                return False

        self.reset(original_state)
        start_state = self._state
        bits_generated = 0
        while True:
            self.next_bit()
            bits_generated += 1
            if bits_generated > self._max_period + SELF_TEST_SLACK:
                return False
            if self._state == start_state:
                break

        return bits_generated == self._max_period


def create(size: int, seed: int = 0) -> LFSR:
    """Build a register; raises InvalidSize for widths outside [3, 16]."""
    return LFSR(size, seed)
