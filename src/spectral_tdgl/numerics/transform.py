# src/spectral_tdgl/numerics/transform.py
"""Grid <-> Chebyshev-coefficient transforms built on a type-I DCT.

On the ascending Chebyshev-Gauss-Lobatto grid ``x_k = -cos(pi k/(N-1))`` a
function sampled as ``f_k`` has Chebyshev coefficients ``a_n`` with

    f(x) = sum_n a_n T_n(x).

Reversing the samples puts them on the descending nodes ``cos(pi k/(N-1))``,
where the unnormalized DCT-I is exactly twice the trapezoid-rule projection
onto ``T_n``. Every normalization below has an exact counterpart in the
inverse direction, so ``to_grid(to_coefficients(f))`` reproduces ``f`` to
round-off.

The transforms have value semantics: each call allocates its own output and
never writes into the caller's array.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import cast

import numpy as np
import scipy.fft
from numpy.polynomial import chebyshev as C
from numpy.typing import NDArray

from ..exceptions import InvalidArgumentError

__all__ = [
    "ChebyshevTransform",
    "get_transform",
    "to_coefficients",
    "to_grid",
    "evaluate_series",
    "boundary_values",
]


def _dct1(v: NDArray[np.floating], workers: int | None) -> NDArray[np.floating]:
    # overwrite_x=False: scipy must not touch v
    return cast(
        NDArray[np.floating],
        scipy.fft.dct(v, type=1, norm=None, overwrite_x=False, workers=workers),
    )


@dataclass(frozen=True, slots=True)
class ChebyshevTransform:
    """Reusable transform plan for a fixed mode count.

    The plan owns the endpoint weights and the worker count passed to
    :mod:`scipy.fft`; pocketfft caches its own twiddle factors per length, so
    building one plan and applying it every time step is the cheap path.

    Real and imaginary parts are transformed independently, which keeps the
    result identical regardless of ``workers``.
    """

    N: int
    workers: int | None = None
    _endpoint: NDArray[np.floating] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.N < 2:
            raise InvalidArgumentError("DCT-I needs N >= 2")
        w = np.ones(self.N, dtype=float)
        w[0] = 2.0
        w[-1] = 2.0
        w.setflags(write=False)
        object.__setattr__(self, "_endpoint", w)

    def _check(self, v: NDArray) -> NDArray:
        v = np.asarray(v)
        if v.shape != (self.N,):
            raise InvalidArgumentError(f"Expected shape {(self.N,)} got {v.shape}")
        return v

    def _apply(self, v: NDArray, real_fn) -> NDArray:
        if np.iscomplexobj(v):
            out = np.empty(self.N, dtype=np.complex128)
            out.real = real_fn(np.ascontiguousarray(v.real, dtype=float))
            out.imag = real_fn(np.ascontiguousarray(v.imag, dtype=float))
            return out
        return real_fn(np.asarray(v, dtype=float))

    def _forward_real(self, f: NDArray[np.floating]) -> NDArray[np.floating]:
        a = _dct1(f[::-1], self.workers)
        a /= self.N - 1
        a /= self._endpoint
        return a

    def _inverse_real(self, a: NDArray[np.floating]) -> NDArray[np.floating]:
        f = _dct1(a * self._endpoint, self.workers)
        f *= 0.5
        return f[::-1].copy()

    def to_coefficients(self, values: NDArray) -> NDArray:
        """Grid samples (ascending nodes) -> Chebyshev coefficients."""
        return self._apply(self._check(values), self._forward_real)

    def to_grid(self, coeffs: NDArray) -> NDArray:
        """Chebyshev coefficients -> grid samples (ascending nodes)."""
        return self._apply(self._check(coeffs), self._inverse_real)


@lru_cache(maxsize=32)
def get_transform(N: int, workers: int | None = None) -> ChebyshevTransform:
    """Return a cached :class:`ChebyshevTransform` for ``(N, workers)``."""
    return ChebyshevTransform(N=int(N), workers=workers)


def to_coefficients(values: NDArray) -> NDArray:
    values = np.asarray(values)
    return get_transform(int(values.shape[-1])).to_coefficients(values)


def to_grid(coeffs: NDArray) -> NDArray:
    coeffs = np.asarray(coeffs)
    return get_transform(int(coeffs.shape[-1])).to_grid(coeffs)


def evaluate_series(coeffs: NDArray, xi: NDArray | float) -> NDArray:
    """Evaluate ``sum_n a_n T_n(xi)`` at arbitrary reference points (Clenshaw)."""
    xi_arr = np.asarray(xi, dtype=float)
    if np.any(np.abs(xi_arr) > 1.0 + 1e-12):
        raise InvalidArgumentError("Evaluation points must lie in [-1, 1]")
    return C.chebval(xi_arr, np.asarray(coeffs))


def boundary_values(coeffs: NDArray) -> tuple[complex, complex]:
    """Return ``(f(-1), f(+1))`` from the endpoint identities of T_n.

    ``T_n(-1) = (-1)^n`` and ``T_n(1) = 1``.
    """
    a = np.asarray(coeffs)
    signs = np.where(np.arange(a.shape[-1]) % 2 == 0, 1.0, -1.0)
    return complex(np.dot(signs, a)), complex(np.sum(a))
