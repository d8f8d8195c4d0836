# src/spectral_tdgl/numerics/__init__.py
"""
Numerical building blocks (advanced API).

Top-level package `spectral_tdgl` exposes the everyday solver API.
This subpackage exposes the transform, operator and factorization primitives.
"""

from .grids import ChebyshevGrid, build_grid, chebyshev_nodes, to_physical, to_reference
from .sparse_lu import FactoredOperator, factor_operator
from .transform import (
    ChebyshevTransform,
    boundary_values,
    evaluate_series,
    get_transform,
    to_coefficients,
    to_grid,
)
from .ultraspherical import conversion_chain, conversion_matrix, differentiation_matrix

__all__ = [
    # Grid
    "ChebyshevGrid",
    "build_grid",
    "chebyshev_nodes",
    "to_physical",
    "to_reference",
    # Transform
    "ChebyshevTransform",
    "get_transform",
    "to_coefficients",
    "to_grid",
    "evaluate_series",
    "boundary_values",
    # Ultraspherical operators
    "differentiation_matrix",
    "conversion_matrix",
    "conversion_chain",
    # Sparse LU
    "FactoredOperator",
    "factor_operator",
]
