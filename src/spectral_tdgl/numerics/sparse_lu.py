# src/spectral_tdgl/numerics/sparse_lu.py
"""Factor-once / solve-many sparse direct solves.

Bordered operators carry a few dense boundary rows on top of a banded body.
Pivoted LU on such a matrix fills in the whole upper triangle, so for
``n_border > 0`` the factorization is split:

    M = T + P (B - P^T)

where ``B`` are the dense boundary rows, ``T`` is ``M`` with those rows
replaced by unit rows (banded, factored by SuperLU in natural order) and ``P``
selects the first ``n_border`` rows. With ``Z = T^{-1} P`` the capacitance
matrix is ``B Z`` (``n_border x n_border``), and

    M^{-1} r = y - Z (B Z)^{-1} (B y - r[:n_border]),    y = T^{-1} r.

Storage and solve cost are linear in N.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, cast

import numpy as np
import scipy.sparse as sp
from numpy.typing import NDArray
from scipy.sparse.linalg import splu

from ..exceptions import InvalidArgumentError, SingularOperatorError

__all__ = [
    "FactoredOperator",
    "factor_operator",
    "structural_rank_deficient",
]

# capacitance matrices worse than this are treated as singular
_MAX_CAPACITANCE_COND = 1e13


def structural_rank_deficient(A: sp.spmatrix) -> bool:
    """True if some row or column of ``A`` has no stored nonzero entries.

    This is a cheap necessary check only; splu catches the remaining cases.
    """
    A = sp.csr_matrix(A)
    A.eliminate_zeros()
    row_counts = np.diff(A.indptr)
    col_counts = np.bincount(A.indices, minlength=A.shape[1])
    return bool(np.any(row_counts == 0) or np.any(col_counts == 0))


def _splu(A: sp.csc_matrix, **options: Any) -> Any:
    try:
        return splu(A, **options)
    except RuntimeError as e:
        # SuperLU: "Factor is exactly singular"
        raise SingularOperatorError(str(e)) from e


def _lu_solve(lu: Any, dtype: np.dtype, rhs: NDArray) -> NDArray:
    # SuperLU.solve wants rhs in the factor's dtype
    if np.iscomplexobj(rhs) and not np.issubdtype(dtype, np.complexfloating):
        re = lu.solve(np.ascontiguousarray(rhs.real, dtype=dtype))
        im = lu.solve(np.ascontiguousarray(rhs.imag, dtype=dtype))
        return cast(NDArray, re + 1j * im)
    return cast(NDArray, np.asarray(lu.solve(np.asarray(rhs, dtype=dtype))))


@dataclass(frozen=True, slots=True)
class FactoredOperator:
    """Sparse LU factorization, computed once and reused for every solve.

    Wraps :class:`scipy.sparse.linalg.SuperLU`; nothing is modified after
    construction. For bordered operators ``border``, ``Z`` and
    ``capacitance_inv`` hold the low-rank correction described in the module
    docstring.
    """

    lu: Any  # scipy.sparse.linalg.SuperLU
    shape: tuple[int, int]
    dtype: np.dtype
    n_border: int = 0
    border: NDArray | None = None  # (n_border, N)
    Z: NDArray | None = None  # (N, n_border)
    capacitance_inv: NDArray | None = None  # (n_border, n_border)

    @property
    def N(self) -> int:
        return int(self.shape[0])

    @property
    def nnz(self) -> int:
        """Stored entries in L + U plus the dense correction."""
        extra = 0 if self.Z is None else int(self.Z.size)
        return int(self.lu.L.nnz + self.lu.U.nnz) + extra

    def solve(self, rhs: NDArray) -> NDArray:
        rhs = np.asarray(rhs)
        if rhs.shape != (self.N,):
            raise InvalidArgumentError(f"rhs must have shape {(self.N,)} got {rhs.shape}")

        y = _lu_solve(self.lu, self.dtype, rhs)
        if self.n_border == 0:
            return y

        assert self.border is not None and self.Z is not None
        assert self.capacitance_inv is not None
        k = self.n_border
        mismatch = self.border @ y - rhs[:k]
        return cast(NDArray, y - self.Z @ (self.capacitance_inv @ mismatch))


def factor_operator(A: sp.spmatrix, *, n_border: int = 0) -> FactoredOperator:
    """Factor a square sparse matrix with SuperLU.

    Parameters
    ----------
    A:
        Square sparse matrix.
    n_border:
        Number of leading dense boundary rows. ``0`` factors ``A`` directly
        (COLAMD ordering, partial pivoting).

    Raises
    ------
    SingularOperatorError
        If ``A`` is not square, has non-finite entries, is structurally
        singular, SuperLU reports an exactly singular factor, or the boundary
        capacitance matrix is numerically singular.
    """
    A = sp.csc_matrix(A)
    n_rows, n_cols = A.shape
    if n_rows != n_cols:
        raise SingularOperatorError(f"Operator must be square, got shape {A.shape}")
    if n_rows == 0:
        raise SingularOperatorError("Operator is empty")
    if not np.all(np.isfinite(A.data)):
        raise SingularOperatorError("Operator has non-finite entries")
    if structural_rank_deficient(A):
        raise SingularOperatorError("Operator is structurally singular (empty row or column)")

    if n_border == 0:
        return FactoredOperator(lu=_splu(A), shape=(n_rows, n_cols), dtype=A.dtype)

    N = n_rows
    k = int(n_border)
    if not (0 < k < N):
        raise InvalidArgumentError(f"Need 0 < n_border < N, got n_border={n_border}, N={N}")

    rows = sp.csr_matrix(A)
    border = rows[:k].toarray()
    core = sp.vstack([sp.eye(k, N, dtype=A.dtype), rows[k:]], format="csc")
    # natural order keeps the LU factors inside the band
    lu = _splu(core, permc_spec="NATURAL")

    P = np.zeros((N, k), dtype=A.dtype)
    P[np.arange(k), np.arange(k)] = 1.0
    Z = np.asarray(lu.solve(P))
    capacitance = border @ Z

    if not np.all(np.isfinite(capacitance)):
        raise SingularOperatorError("Boundary capacitance matrix is not finite")
    if np.linalg.cond(capacitance) > _MAX_CAPACITANCE_COND:
        raise SingularOperatorError("Boundary rows are linearly dependent on the operator")
    try:
        cap_inv = np.linalg.inv(capacitance)
    except np.linalg.LinAlgError as e:
        raise SingularOperatorError(str(e)) from e

    return FactoredOperator(
        lu=lu,
        shape=(n_rows, n_cols),
        dtype=A.dtype,
        n_border=k,
        border=border,
        Z=Z,
        capacitance_inv=cap_inv,
    )
