from __future__ import annotations

import math
from dataclasses import dataclass

from spectral_tdgl.exceptions import InvalidArgumentError


def _finite(name: str, value: float) -> float:
    try:
        out = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{name} must be a real number, got {value!r}") from e
    if not math.isfinite(out):
        raise InvalidArgumentError(f"{name} must be finite, got {value!r}")
    return out


def _integer(name: str, value: int) -> int:
    # bools and 2.5 are rejected; 3.0 and np.int64(3) are accepted
    try:
        out = int(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}") from e
    if isinstance(value, bool) or out != value:
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    return out


@dataclass(frozen=True, slots=True)
class TDGLParams:
    """Equation and discretization parameters for one solve.

    The equation is

        psi_t = psi + (1 + i b) psi_xx - (1 + i c) |psi|^2 psi

    on ``x in [0, L_domain]`` with ``psi = 0`` at both ends.

    Parameters
    ----------
    N : int
        Number of Chebyshev modes (and grid nodes).
    dt : float
        Time step.
    b : float
        Linear dispersion coefficient.
    c : float
        Nonlinear dispersion coefficient.
    L_domain : float
        Physical domain length.
    """

    N: int
    dt: float
    b: float = 0.0
    c: float = 0.0
    L_domain: float = 2.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "N", _integer("N", self.N))
        if self.N < 3:
            raise InvalidArgumentError("N must be >= 3 (two rows are used by boundary conditions)")
        for name in ("dt", "b", "c", "L_domain"):
            object.__setattr__(self, name, _finite(name, getattr(self, name)))
        if self.dt <= 0:
            raise InvalidArgumentError("dt must be > 0")
        if self.L_domain <= 0:
            raise InvalidArgumentError("L_domain must be > 0")

    @property
    def scale(self) -> float:
        """Chain-rule factor d/dx = scale * d/dxi for xi in [-1, 1]."""
        return 2.0 / float(self.L_domain)


@dataclass(frozen=True, slots=True)
class SteppingConfig:
    n_iter: int
    d_save: int = 1
    # False disables NumericalDivergenceError; NaN/Inf then end up in the archive
    check_finite: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "n_iter", _integer("n_iter", self.n_iter))
        object.__setattr__(self, "d_save", _integer("d_save", self.d_save))
        if self.n_iter < 0:
            raise InvalidArgumentError("n_iter must be >= 0")
        if self.d_save <= 0:
            raise InvalidArgumentError("d_save must be > 0")

    @property
    def n_saved(self) -> int:
        return self.n_iter // self.d_save


@dataclass(frozen=True, slots=True)
class TransformConfig:
    # forwarded to scipy.fft; None means single-threaded
    workers: int | None = None

    def __post_init__(self) -> None:
        if self.workers is not None:
            object.__setattr__(self, "workers", _integer("workers", self.workers))
        if self.workers == 0:
            raise InvalidArgumentError("workers must be None or a nonzero int")
