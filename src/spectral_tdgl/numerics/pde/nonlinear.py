from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import scipy.sparse as sp
from numpy.typing import NDArray

from ...config import TDGLParams
from ...exceptions import InvalidArgumentError
from ..transform import ChebyshevTransform, get_transform
from .boundary import border_rhs

__all__ = ["cubic_update", "evaluate_rhs", "NonlinearResidual"]


def cubic_update(psi: NDArray, dt: float, c: float) -> NDArray:
    """Pointwise explicit part ``(1 - dt (1 + i c) |psi|^2) psi``."""
    psi = np.asarray(psi, dtype=complex)
    mod2 = psi.real * psi.real + psi.imag * psi.imag
    return (1.0 - dt * complex(1.0, c) * mod2) * psi


def evaluate_rhs(
    coeffs: NDArray,
    conversion: sp.spmatrix,
    params: TDGLParams,
    transform: ChebyshevTransform | None = None,
    *,
    n_bc: int = 2,
) -> NDArray[np.complexfloating]:
    """Right-hand side of the bordered system for the next step.

    grid -> cubic update -> coefficients -> S1 S0 -> bordering. ``coeffs``
    is left untouched.
    """
    N = int(params.N)
    coeffs = np.asarray(coeffs)
    if coeffs.shape != (N,):
        raise InvalidArgumentError(f"coeffs must have shape {(N,)} got {coeffs.shape}")
    tr = get_transform(N) if transform is None else transform
    if tr.N != N:
        raise InvalidArgumentError(f"Transform planned for N={tr.N}, state has N={N}")

    psi = tr.to_grid(coeffs)
    rhs = tr.to_coefficients(cubic_update(psi, float(params.dt), float(params.c)))
    rhs = np.asarray(conversion @ rhs, dtype=complex)
    return border_rhs(rhs, n_rows=n_bc)


@dataclass(frozen=True, slots=True)
class NonlinearResidual:
    """``evaluate_rhs`` bound to the read-only collaborators of one solve."""

    params: TDGLParams
    conversion: sp.csr_matrix
    transform: ChebyshevTransform
    n_bc: int = 2

    def __call__(self, coeffs: NDArray) -> NDArray[np.complexfloating]:
        return evaluate_rhs(
            coeffs, self.conversion, self.params, self.transform, n_bc=self.n_bc
        )
