"""Initial-condition profiles on the physical domain [0, L].

All profiles vanish at both ends, matching the homogeneous Dirichlet
conditions of the solver.
"""

from __future__ import annotations

from typing import cast

import numpy as np
from numpy.typing import NDArray

from ...exceptions import InvalidArgumentError
from ...typing import ComplexArray, ComplexDType, ProfileFn
from ..grids import ChebyshevGrid

__all__ = [
    "sine_squared",
    "sine_mode",
    "steady_state_envelope",
    "sample_initial_condition",
]


def sine_squared(
    x: NDArray[np.floating], L_domain: float, *, amplitude: float = 2.0, modes: int = 2
) -> NDArray[np.floating]:
    """``amplitude * sin(modes * pi * x / L)**2``.

    With the defaults this is ``2 sin(2 pi x / L)^2``.
    """
    x = np.asarray(x, dtype=float)
    return cast(
        NDArray[np.floating],
        float(amplitude) * np.sin(int(modes) * np.pi * x / float(L_domain)) ** 2,
    )


def sine_mode(
    x: NDArray[np.floating], L_domain: float, *, amplitude: float = 0.1, mode: int = 1
) -> NDArray[np.floating]:
    x = np.asarray(x, dtype=float)
    return cast(
        NDArray[np.floating],
        float(amplitude) * np.sin(int(mode) * np.pi * x / float(L_domain)),
    )


def steady_state_envelope(x: NDArray[np.floating], L_domain: float) -> NDArray[np.floating]:
    """Approximate stationary profile of the real equation (b = c = 0).

    Each wall carries the half-kink ``tanh(d / sqrt(2))``; the product is
    accurate once ``L`` is several healing lengths long.
    """
    x = np.asarray(x, dtype=float)
    s = np.sqrt(2.0)
    return cast(
        NDArray[np.floating],
        np.tanh(x / s) * np.tanh((float(L_domain) - x) / s),
    )


def _eval_x(fn: ProfileFn, x: NDArray[np.floating]) -> ComplexArray:
    """Evaluate fn on an array x.

    We attempt a vectorized call first; if that fails or returns an unexpected
    shape, we fall back to scalar evaluation.
    """
    try:
        arr = np.asarray(fn(x), dtype=ComplexDType)
        if arr.shape == x.shape:
            return arr
    except (TypeError, ValueError):
        pass

    out = np.empty(x.shape, dtype=ComplexDType)
    for i, xi in enumerate(x):
        out[i] = complex(fn(float(xi)))
    return out


def sample_initial_condition(
    fn: ProfileFn,
    grid: ChebyshevGrid,
    *,
    boundary_tol: float | None = 1e-10,
) -> ComplexArray:
    """Sample ``fn(x)`` on the physical Chebyshev grid.

    ``fn`` may be scalar-only or NumPy-vectorized. With ``boundary_tol`` set,
    the samples at x = 0 and x = L must vanish to that tolerance.
    """
    psi0 = _eval_x(fn, np.asarray(grid.x, dtype=float))
    if not np.all(np.isfinite(psi0)):
        raise InvalidArgumentError("Initial condition produced non-finite values")
    if boundary_tol is not None:
        if abs(psi0[0]) > boundary_tol or abs(psi0[-1]) > boundary_tol:
            raise InvalidArgumentError(
                "Initial condition must vanish at both ends: "
                f"psi(0)={psi0[0]:.3g}, psi(L)={psi0[-1]:.3g}"
            )
    return psi0
