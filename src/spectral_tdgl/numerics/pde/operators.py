from __future__ import annotations

from dataclasses import dataclass

import scipy.sparse as sp

from ...config import TDGLParams
from ..ultraspherical import conversion_chain, differentiation_matrix
from .boundary import DirichletBC, border_operator, dirichlet_rows

__all__ = [
    "TDGLOperators",
    "unconstrained_operator",
    "assemble_operator",
    "build_operators",
]


def unconstrained_operator(
    params: TDGLParams, conversion: sp.spmatrix | None = None
) -> sp.csr_matrix:
    """Implicit part of one IMEX step in C^(2) coefficients.

        A = (1 - dt) S1 S0 - dt (2/L)^2 (1 + i b) D2

    i.e. backward Euler for ``psi_t = psi + (1 + i b) psi_xx`` with the
    identity term converted so that both sides live in the same basis.
    """
    N = int(params.N)
    dt = float(params.dt)
    S = conversion_chain(N, 2) if conversion is None else conversion
    D2 = differentiation_matrix(N, 2)
    diffusion = dt * params.scale**2 * complex(1.0, float(params.b))
    A = (1.0 - dt) * S.astype(complex) - diffusion * D2.astype(complex)
    return sp.csr_matrix(A)


def assemble_operator(
    params: TDGLParams,
    *,
    bc: DirichletBC | None = None,
    conversion: sp.spmatrix | None = None,
) -> sp.csc_matrix:
    """Boundary-bordered time-step operator, in CSC format ready for splu.

    Row 0 evaluates the series at x = 0, row 1 at x = L; rows 2..N-1 are rows
    0..N-3 of :func:`unconstrained_operator`.
    """
    bc = DirichletBC() if bc is None else bc
    A = unconstrained_operator(params, conversion=conversion)
    return sp.csc_matrix(border_operator(A, dirichlet_rows(int(params.N), bc)))


@dataclass(frozen=True, slots=True)
class TDGLOperators:
    """Read-only operators shared by every step of a solve."""

    conversion: sp.csr_matrix  # S1 S0
    operator: sp.csc_matrix  # bordered implicit operator
    bc: DirichletBC


def build_operators(params: TDGLParams, *, bc: DirichletBC | None = None) -> TDGLOperators:
    bc = DirichletBC() if bc is None else bc
    S = conversion_chain(int(params.N), 2)
    L = assemble_operator(params, bc=bc, conversion=S)
    return TDGLOperators(conversion=S, operator=L, bc=bc)
