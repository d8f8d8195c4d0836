"""Chebyshev-ultraspherical IMEX solver for the 1D TDGL equation.

PDE form (x in [0, L]):

    psi_t = psi + (1 + i b) psi_xx - (1 + i c) |psi|^2 psi

with homogeneous Dirichlet boundary conditions. The linear part is treated
implicitly through one sparse LU factorization; the cubic term is explicit.
"""

from .boundary import DirichletBC, Side, border_operator, border_rhs, dirichlet_rows
from .initial_conditions import (
    sample_initial_condition,
    sine_mode,
    sine_squared,
    steady_state_envelope,
)
from .nonlinear import NonlinearResidual, cubic_update, evaluate_rhs
from .operators import (
    TDGLOperators,
    assemble_operator,
    build_operators,
    unconstrained_operator,
)
from .solver import SolverState, TDGLSolution, TDGLSolver, solve_tdgl

__all__ = [
    # Boundary conditions
    "DirichletBC",
    "Side",
    "dirichlet_rows",
    "border_operator",
    "border_rhs",
    # Operators
    "TDGLOperators",
    "unconstrained_operator",
    "assemble_operator",
    "build_operators",
    # Nonlinear term
    "cubic_update",
    "evaluate_rhs",
    "NonlinearResidual",
    # Initial conditions
    "sine_squared",
    "sine_mode",
    "steady_state_envelope",
    "sample_initial_condition",
    # Solver
    "SolverState",
    "TDGLSolution",
    "TDGLSolver",
    "solve_tdgl",
]
