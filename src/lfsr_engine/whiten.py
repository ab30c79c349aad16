# lfsr_engine/whiten.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lfsr_engine.config import _get_size
from lfsr_engine.engine import LFSR


@dataclass(frozen=True)
class Config:
    """
    XOR whitening driven by the register's byte output. Symmetric:
      rx(tx(x)) == x

    This is NOT crypto. It's for spectral/run-length properties.

    size: register width, 3..16.
    seed: non-zero seed that fits in `size` bits.
    """
    size: int = 15  # x^15 + x^14 + 1, maximal period
    seed: int = 0x1ACE


def tx(data: bytes, *, cfg: Any) -> bytes:
    """
    TX direction: apply whitening to bytes.
    """
    return _xor_whiten(data, cfg=cfg)


def rx(data: bytes, *, cfg: Any) -> bytes:
    """
    RX direction: remove whitening from bytes.
    Whitening is symmetric, so this is identical to tx().
    """
    return _xor_whiten(data, cfg=cfg)


# ----------------------------
# Internal
# ----------------------------

def _get_seed(cfg: Any, size: int) -> int:
    seed = getattr(cfg, "seed", None)
    if seed is None:
        raise AttributeError("cfg missing required int attribute: seed")
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise TypeError("cfg.seed must be int")
    if seed <= 0 or seed >> size:
        raise ValueError(f"cfg.seed must be a non-zero {size}-bit value")
    return seed


def _xor_whiten(data: bytes, *, cfg: Any) -> bytes:
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("data must be bytes-like")

    size = _get_size(cfg)
    lfsr = LFSR(size, _get_seed(cfg, size))
    out = bytearray(len(data))
    for i, b in enumerate(data):
        out[i] = (b ^ lfsr.next_byte()) & 0xFF
    return bytes(out)
