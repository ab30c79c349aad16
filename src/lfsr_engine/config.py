# lfsr_engine/config.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lfsr_engine.engine import LFSR
from lfsr_engine.polynomials import check_size


@dataclass(frozen=True)
class Config:
    """
    Register construction parameters.

    size: register width in bits, 3..16.
    seed: initial state; 0 (or a value that masks to 0) starts at 1.
    """
    size: int = 16
    seed: int = 0


def from_config(cfg: Any) -> LFSR:
    """
    Build a register from any object exposing int `size` and `seed`.
    """
    return LFSR(_get_size(cfg), _get_seed(cfg))


def _get_size(cfg: Any) -> int:
    size = getattr(cfg, "size", None)
    if size is None:
        raise AttributeError("cfg missing required int attribute: size")
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError("cfg.size must be int")
    return check_size(size)


def _get_seed(cfg: Any) -> int:
    seed = getattr(cfg, "seed", None)
    if seed is None:
        raise AttributeError("cfg missing required int attribute: seed")
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise TypeError("cfg.seed must be int")
    if seed < 0:
        raise ValueError("cfg.seed must be non-negative")
    return seed
