# src/spectral_tdgl/numerics/ultraspherical.py
"""
Sparse ultraspherical (Gegenbauer) spectral operators.

Responsibility: return matrices acting on coefficient vectors; no grid logic.

- differentiation_matrix(N, lam): Chebyshev-T coefficients -> C^(lam)
  coefficients of the lam-th derivative.
- conversion_matrix(N, lam): C^(lam) coefficients -> C^(lam+1) coefficients
  (lam=0 means Chebyshev-T -> C^(1)).

Both have bandwidth independent of N, which is what keeps the bordered
time-step operator sparse.
"""

from __future__ import annotations

import math

import numpy as np
import scipy.sparse as sp

from ..exceptions import InvalidArgumentError

__all__ = [
    "differentiation_matrix",
    "conversion_matrix",
    "conversion_chain",
]


def _check_int(name: str, value: int) -> int:
    if isinstance(value, bool) or int(value) != value:
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    return int(value)


def differentiation_matrix(N: int, lam: int) -> sp.csr_matrix:
    """D(N, lam): entry ``(n - lam, n) = 2^(lam-1) (lam-1)! n`` for n = lam..N-1."""
    N = _check_int("N", N)
    lam = _check_int("lam", lam)
    if lam < 1:
        raise InvalidArgumentError("Differentiation order lam must be >= 1")
    if N <= lam:
        raise InvalidArgumentError(f"Need N > lam, got N={N}, lam={lam}")

    n = np.arange(lam, N, dtype=float)
    vals = (2.0 ** (lam - 1)) * math.factorial(lam - 1) * n
    return sp.diags([vals], [lam], shape=(N, N), format="csr", dtype=float)


def conversion_matrix(N: int, lam: int) -> sp.csr_matrix:
    """S(N, lam): raise the ultraspherical parameter from lam to lam+1."""
    N = _check_int("N", N)
    lam = _check_int("lam", lam)
    if N < 1:
        raise InvalidArgumentError("N must be >= 1")
    if lam < 0:
        raise InvalidArgumentError("lam must be >= 0")

    if lam == 0:
        diag = np.ones(N, dtype=float)
        diag[0] = 2.0
        upper = -np.ones(max(N - 2, 0), dtype=float)
        diag *= 0.5
        upper *= 0.5
    else:
        k = np.arange(N, dtype=float)
        diag = lam / (lam + k)
        upper = -lam / (lam + k[: max(N - 2, 0)] + 2.0)

    if N <= 2:
        return sp.diags([diag], [0], shape=(N, N), format="csr", dtype=float)
    return sp.diags([diag, upper], [0, 2], shape=(N, N), format="csr", dtype=float)


def conversion_chain(N: int, lam: int) -> sp.csr_matrix:
    """Product ``S(N, lam-1) ... S(N, 0)``: Chebyshev-T -> C^(lam) coefficients.

    ``lam=0`` returns the identity.
    """
    lam = _check_int("lam", lam)
    if lam < 0:
        raise InvalidArgumentError("lam must be >= 0")
    out = sp.identity(_check_int("N", N), dtype=float, format="csr")
    for k in range(lam):
        out = conversion_matrix(N, k) @ out
    return sp.csr_matrix(out)
