"""
spectral_tdgl

Spectral (Chebyshev / ultraspherical) solver for the 1D time-dependent
Ginzburg-Landau equation with homogeneous Dirichlet boundaries.

The main entry points are re-exported here, so you can write, for example:

    from spectral_tdgl import TDGLParams, SteppingConfig, solve_tdgl
"""

from .config import SteppingConfig, TDGLParams, TransformConfig
from .exceptions import (
    InvalidArgumentError,
    NumericalDivergenceError,
    SingularOperatorError,
    SpectralTDGLError,
)
from .numerics.grids import ChebyshevGrid, build_grid
from .numerics.pde import SolverState, TDGLSolution, TDGLSolver, solve_tdgl
from .numerics.transform import to_coefficients, to_grid

__all__ = [
    # Config
    "TDGLParams",
    "SteppingConfig",
    "TransformConfig",
    # Errors
    "SpectralTDGLError",
    "InvalidArgumentError",
    "SingularOperatorError",
    "NumericalDivergenceError",
    # Grid / transforms
    "ChebyshevGrid",
    "build_grid",
    "to_coefficients",
    "to_grid",
    # Solver
    "SolverState",
    "TDGLSolution",
    "TDGLSolver",
    "solve_tdgl",
]
