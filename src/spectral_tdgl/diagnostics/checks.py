from __future__ import annotations

from typing import cast

import numpy as np
from numpy.typing import NDArray

from ..exceptions import InvalidArgumentError
from ..numerics.grids import ChebyshevGrid
from ..numerics.pde.solver import TDGLSolution

__all__ = [
    "boundary_residuals",
    "snapshot_increments",
    "max_modulus",
    "l2_norm",
]


def boundary_residuals(solution: TDGLSolution) -> NDArray[np.floating]:
    """|psi(0)| and |psi(L)| for every snapshot, shape (n_saved, 2).

    The grid contains both endpoints, so these are exact series values.
    """
    snaps = np.asarray(solution.snapshots)
    if snaps.shape[0] == 0:
        return np.empty((0, 2), dtype=float)
    return cast(NDArray[np.floating], np.abs(snaps[:, [0, -1]]))


def snapshot_increments(solution: TDGLSolution) -> NDArray[np.floating]:
    """Max-abs change between consecutive snapshots, shape (n_saved - 1,)."""
    snaps = np.asarray(solution.snapshots)
    if snaps.shape[0] < 2:
        return np.empty(0, dtype=float)
    return cast(NDArray[np.floating], np.max(np.abs(np.diff(snaps, axis=0)), axis=1))


def max_modulus(solution: TDGLSolution) -> NDArray[np.floating]:
    snaps = np.asarray(solution.snapshots)
    if snaps.shape[0] == 0:
        return np.empty(0, dtype=float)
    return cast(NDArray[np.floating], np.max(np.abs(snaps), axis=1))


def l2_norm(psi: NDArray, grid: ChebyshevGrid) -> float:
    """Trapezoid-rule ``sqrt(int_0^L |psi|^2 dx)`` on the physical grid."""
    psi = np.asarray(psi)
    if psi.shape != grid.x.shape:
        raise InvalidArgumentError(f"psi must have shape {grid.x.shape} got {psi.shape}")
    return float(np.sqrt(np.trapezoid(np.abs(psi) ** 2, grid.x)))
