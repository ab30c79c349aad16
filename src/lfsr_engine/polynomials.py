# lfsr_engine/polynomials.py
from __future__ import annotations

from typing import Dict

from lfsr_engine.errors import InvalidSize

MIN_SIZE = 3
MAX_SIZE = 16

# Feedback tap masks, excluding the implicit x^n term.
PRIMITIVE_POLYNOMIALS: Dict[int, int] = {
    3: 0x0003,
    4: 0x0009,
    5: 0x0012,
    6: 0x0021,
    7: 0x0041,
    8: 0x008E,
    9: 0x0108,
    10: 0x0204,
    11: 0x0402,
    12: 0x0829,
    13: 0x100D,
    14: 0x2015,
    15: 0x4001,
    16: 0x8016,
}


def _validate_table(table: Dict[int, int]) -> None:
    expected = set(range(MIN_SIZE, MAX_SIZE + 1))
    if set(table) != expected:
        raise RuntimeError(
            f"polynomial table must cover widths {MIN_SIZE}..{MAX_SIZE}, got {sorted(table)}"
        )
    for size, mask in table.items():
        if mask <= 0 or mask >> size:
            raise RuntimeError(f"polynomial mask 0x{mask:X} does not fit a {size}-bit register")


_validate_table(PRIMITIVE_POLYNOMIALS)


def check_size(size: int) -> int:
    """
    Validate a register width and return it.

    Raises InvalidSize for non-int values or widths outside [3, 16].
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidSize(f"register size must be int, got {type(size).__name__}")
    if size < MIN_SIZE or size > MAX_SIZE:
        raise InvalidSize(
            f"Register size must be between {MIN_SIZE} and {MAX_SIZE} bits, got {size}"
        )
    return size


def polynomial_mask(size: int) -> int:
    return PRIMITIVE_POLYNOMIALS[check_size(size)]


def polynomial_string(size: int, mask: int) -> str:
    """
    Render a feedback polynomial, highest degree first.

      polynomial_string(3, 0x3) == "x^3 + x + 1"
    """
    terms = [f"x^{size}"]
    for i in range(size - 1, -1, -1):
        if mask & (1 << i):
            if i == 0:
                terms.append("1")
            elif i == 1:
                terms.append("x")
            else:
                terms.append(f"x^{i}")
    return " + ".join(terms)
