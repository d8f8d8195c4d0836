"""Pytest helpers for the spectral_tdgl library."""

from __future__ import annotations

import numpy as np
import pytest

from spectral_tdgl import TDGLParams


@pytest.fixture
def scenario_params() -> TDGLParams:
    """Reference scenario: N=64, dt=0.02, b=0.5, c=-1.5, L=50."""
    return TDGLParams(N=64, dt=0.02, b=0.5, c=-1.5, L_domain=50.0)


@pytest.fixture
def rng():
    """Seeded RNG factory."""

    def _rng(seed: int) -> np.random.Generator:
        return np.random.default_rng(seed)

    return _rng


@pytest.fixture
def random_complex(rng):
    """Factory for random complex vectors of length N."""

    def _make(N: int, seed: int = 0) -> np.ndarray:
        g = rng(seed)
        return g.normal(size=N) + 1j * g.normal(size=N)

    return _make
