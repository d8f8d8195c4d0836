from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np
import scipy.sparse as sp
from numpy.typing import NDArray

from ...exceptions import InvalidArgumentError

__all__ = [
    "Side",
    "DirichletBC",
    "endpoint_row",
    "dirichlet_rows",
    "border_operator",
    "border_rhs",
]


class Side(str, Enum):
    LEFT = "left"  # x = 0  (xi = -1)
    RIGHT = "right"  # x = L (xi = +1)


@dataclass(frozen=True, slots=True)
class DirichletBC:
    """Homogeneous Dirichlet conditions psi(0) = psi(L) = 0.

    Each side contributes one bordered row; the row order is left then right.
    """

    sides: tuple[Side, ...] = (Side.LEFT, Side.RIGHT)

    @property
    def n_rows(self) -> int:
        return len(self.sides)


def endpoint_row(N: int, side: Side) -> NDArray[np.floating]:
    """Row vector evaluating a Chebyshev series at one endpoint.

    ``T_k(-1) = (-1)^k`` and ``T_k(+1) = 1``.
    """
    side = Side(side)
    if side == Side.LEFT:
        return np.where(np.arange(N) % 2 == 0, 1.0, -1.0)
    return np.ones(N, dtype=float)


def dirichlet_rows(N: int, bc: DirichletBC | None = None) -> sp.csr_matrix:
    bc = DirichletBC() if bc is None else bc
    rows = np.vstack([endpoint_row(N, s) for s in bc.sides])
    return sp.csr_matrix(rows)


def border_operator(A: sp.spmatrix, rows: sp.spmatrix) -> sp.csr_matrix:
    """Replace interior equations by boundary rows.

    Returns a new matrix ``[rows; A[0 : N - k]]`` where ``k`` is the number of
    boundary rows. ``A`` is not modified.
    """
    A = sp.csr_matrix(A)
    rows = sp.csr_matrix(rows)
    N = A.shape[0]
    k = rows.shape[0]
    if A.shape != (N, N):
        raise InvalidArgumentError(f"Operator must be square, got {A.shape}")
    if rows.shape[1] != N:
        raise InvalidArgumentError(f"Boundary rows must have {N} columns, got {rows.shape[1]}")
    if not (0 < k < N):
        raise InvalidArgumentError(f"Need 0 < number of boundary rows < N, got {k}")
    dtype = np.result_type(A.dtype, rows.dtype)
    return sp.csr_matrix(sp.vstack([rows, A[: N - k]], format="csr", dtype=dtype))


def border_rhs(v: NDArray, n_rows: int = 2, values: Sequence[complex] | None = None) -> NDArray:
    """Right-hand side counterpart of :func:`border_operator`.

    ``out[:n_rows]`` holds the boundary data (zero by default) and
    ``out[n_rows:] = v[: N - n_rows]``. Returns a fresh array.
    """
    v = np.asarray(v)
    N = int(v.shape[0])
    if not (0 < n_rows < N):
        raise InvalidArgumentError(f"Need 0 < n_rows < N, got n_rows={n_rows}, N={N}")
    out = np.zeros_like(v)
    if values is not None:
        if len(values) != n_rows:
            raise InvalidArgumentError(f"Expected {n_rows} boundary values, got {len(values)}")
        out[:n_rows] = np.asarray(values, dtype=out.dtype)
    out[n_rows:] = v[: N - n_rows]
    return out
