# src/spectral_tdgl/numerics/grids.py
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import numpy as np
from numpy.typing import NDArray

from ..exceptions import InvalidArgumentError

__all__ = [
    "ChebyshevGrid",
    "chebyshev_nodes",
    "to_physical",
    "to_reference",
    "build_grid",
]


@lru_cache(maxsize=32)
def _nodes_cached(N: int) -> NDArray[np.floating]:
    k = np.arange(N, dtype=float)
    x = np.cos(np.pi * k / (N - 1))[::-1].copy()
    # exact endpoints; cos(pi) rounds fine but the midpoint can come out as 6e-17
    x[0] = -1.0
    x[-1] = 1.0
    if N % 2 == 1:
        x[N // 2] = 0.0
    x.setflags(write=False)
    return x


def chebyshev_nodes(N: int) -> NDArray[np.floating]:
    """Chebyshev-Gauss-Lobatto nodes on [-1, 1] in ascending order.

    ``x_k = -cos(pi k / (N - 1))`` for ``k = 0..N-1``. The returned array is
    read-only and shared between callers.
    """
    if N < 2:
        raise InvalidArgumentError("Need N >= 2 Chebyshev nodes")
    return _nodes_cached(int(N))


def to_physical(xi: NDArray[np.floating], L_domain: float) -> NDArray[np.floating]:
    """Map reference coordinates xi in [-1, 1] onto [0, L_domain]."""
    return 0.5 * float(L_domain) * (np.asarray(xi, dtype=float) + 1.0)


def to_reference(x: NDArray[np.floating], L_domain: float) -> NDArray[np.floating]:
    return 2.0 * np.asarray(x, dtype=float) / float(L_domain) - 1.0


@dataclass(frozen=True, slots=True)
class ChebyshevGrid:
    xi: NDArray[np.floating]  # reference nodes in [-1, 1]
    x: NDArray[np.floating]  # physical nodes in [0, L_domain]
    L_domain: float

    @property
    def N(self) -> int:
        return int(self.xi.shape[0])


def build_grid(N: int, L_domain: float) -> ChebyshevGrid:
    if not (L_domain > 0.0):
        raise InvalidArgumentError("L_domain must be > 0")
    xi = chebyshev_nodes(N)
    x = to_physical(xi, L_domain)
    x.setflags(write=False)
    return ChebyshevGrid(xi=xi, x=x, L_domain=float(L_domain))
