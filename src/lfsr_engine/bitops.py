# lfsr_engine/bitops.py
from typing import Iterable


def bits_to_int(bits: Iterable[int], msb_first: bool = False) -> int:
    v = 0
    if msb_first:
        for b in bits:
            v = (v << 1) | (int(b) & 1)
    else:
        for i, b in enumerate(bits):
            v |= (int(b) & 1) << i
    return v


def to_binary_string(value: int, width: int) -> str:
    if value < 0:
        raise ValueError("value must be non-negative")
    return format(value & ((1 << width) - 1), f"0{width}b")
