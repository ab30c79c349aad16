from __future__ import annotations

from pathlib import Path

import pytest

from lfsr_engine.engine import LFSR
from lfsr_engine.polynomials import MAX_SIZE, MIN_SIZE

ALL_SIZES = list(range(MIN_SIZE, MAX_SIZE + 1))

# Widths whose table polynomial cycles through every non-zero state.
MAXIMAL_SIZES = [3, 4, 6, 7, 14, 15]


def repo_root() -> Path:
    """
    Find the repository root by walking upward until we find pyproject.toml.
    """
    start = Path(__file__).resolve()
    for p in [start] + list(start.parents):
        if (p / "pyproject.toml").exists():
            return p
    raise RuntimeError("repo_root(): could not find pyproject.toml walking upward")


@pytest.fixture
def lfsr3() -> LFSR:
    return LFSR(3, 1)
