from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import cast

import numpy as np
from numpy.typing import NDArray

from ...config import SteppingConfig, TDGLParams, TransformConfig
from ...exceptions import (
    InvalidArgumentError,
    NumericalDivergenceError,
    SingularOperatorError,
)
from ...typing import ComplexArray, ComplexDType, StopFn
from ..grids import ChebyshevGrid, build_grid
from ..sparse_lu import FactoredOperator, factor_operator
from ..transform import ChebyshevTransform, get_transform
from .boundary import DirichletBC
from .nonlinear import NonlinearResidual
from .operators import TDGLOperators, build_operators

__all__ = ["SolverState", "TDGLSolution", "TDGLSolver", "solve_tdgl"]

logger = logging.getLogger(__name__)


class SolverState(str, Enum):
    INITIALIZING = "initializing"
    STEPPING = "stepping"
    DONE = "done"
    FAILED = "failed"
    CANCELLED = "cancelled"


@dataclass(frozen=True, slots=True)
class TDGLSolution:
    grid: ChebyshevGrid
    snapshots: ComplexArray  # (n_saved, N), grid space
    times: NDArray[np.floating]  # (n_saved,)
    saved_iterations: NDArray[np.integer]  # (n_saved,), 1-based
    coeffs_final: ComplexArray  # coefficient state after the last step
    iterations: int
    params: TDGLParams
    state: SolverState

    @property
    def n_saved(self) -> int:
        return int(self.snapshots.shape[0])

    @property
    def psi_final(self) -> ComplexArray:
        """Last saved snapshot."""
        if self.n_saved == 0:
            raise IndexError("No snapshots were saved")
        return cast(ComplexArray, self.snapshots[-1])

    @property
    def modulus(self) -> NDArray[np.floating]:
        return cast(NDArray[np.floating], np.abs(self.snapshots))


class TDGLSolver:
    """IMEX stepper for one set of :class:`TDGLParams`.

    Construction is the initializing phase: the bordered operator is
    assembled and factored once. :meth:`run` can then be called for any
    number of initial conditions; the factorization and conversion matrix are
    shared read-only between runs.

    Raises
    ------
    SingularOperatorError
        If the bordered operator cannot be factored.
    """

    def __init__(
        self,
        params: TDGLParams,
        *,
        transform_cfg: TransformConfig | None = None,
        bc: DirichletBC | None = None,
    ) -> None:
        transform_cfg = TransformConfig() if transform_cfg is None else transform_cfg
        self.state = SolverState.INITIALIZING
        self.params = params
        self.grid = build_grid(int(params.N), float(params.L_domain))
        self.transform: ChebyshevTransform = get_transform(
            int(params.N), transform_cfg.workers
        )
        self.operators: TDGLOperators = build_operators(params, bc=bc)
        try:
            self.factor: FactoredOperator = factor_operator(
                self.operators.operator, n_border=self.operators.bc.n_rows
            )
        except SingularOperatorError:
            logger.warning("Could not factor operator for %r", params)
            raise
        self.residual = NonlinearResidual(
            params=params,
            conversion=self.operators.conversion,
            transform=self.transform,
            n_bc=self.operators.bc.n_rows,
        )
        logger.debug(
            "Factored %dx%d operator (nnz=%d, LU nnz=%d) for dt=%g b=%g c=%g L=%g",
            params.N,
            params.N,
            self.operators.operator.nnz,
            self.factor.nnz,
            params.dt,
            params.b,
            params.c,
            params.L_domain,
        )

    def step(self, coeffs: NDArray) -> ComplexArray:
        """Advance one coefficient state by ``dt``; ``coeffs`` is not modified."""
        return cast(ComplexArray, self.factor.solve(self.residual(coeffs)))

    def _check_psi0(self, psi0: NDArray) -> ComplexArray:
        N = int(self.params.N)
        psi0 = np.asarray(psi0)
        if psi0.shape != (N,):
            raise InvalidArgumentError(f"psi0 must have shape {(N,)} got {psi0.shape}")
        if not np.all(np.isfinite(psi0)):
            raise InvalidArgumentError("psi0 has non-finite values")
        return np.array(psi0, dtype=ComplexDType)

    def run(
        self,
        psi0: NDArray,
        stepping: SteppingConfig,
        *,
        should_stop: StopFn | None = None,
    ) -> TDGLSolution:
        """March ``psi0`` (grid samples) for ``stepping.n_iter`` steps.

        A snapshot is stored after step ``i`` (1-based) when
        ``(i - 1) % d_save == 0``, up to ``n_iter // d_save`` snapshots.
        ``should_stop(i)`` is polled before step ``i``; a truthy value ends
        the run with state ``CANCELLED`` and the snapshots saved so far.

        Raises
        ------
        NumericalDivergenceError
            If a step yields NaN/Inf. This is the divergence contract of the
            solver; ``stepping.check_finite=False`` switches it off, and the run
            then ends ``DONE`` even when the archive holds NaN/Inf snapshots.
            Only use that for inspecting a blow-up after the fact.
        """
        dt = float(self.params.dt)
        n_iter = int(stepping.n_iter)
        d_save = int(stepping.d_save)
        n_saved = stepping.n_saved

        coeffs = self.transform.to_coefficients(self._check_psi0(psi0))

        archive = np.empty((n_saved, int(self.params.N)), dtype=ComplexDType)
        saved_at = np.empty(n_saved, dtype=int)
        k = 0

        self.state = SolverState.STEPPING
        completed = 0
        for i in range(1, n_iter + 1):
            if should_stop is not None and should_stop(i):
                logger.warning("Run cancelled before iteration %d (%d saved)", i, k)
                self.state = SolverState.CANCELLED
                break

            coeffs = self.step(coeffs)

            if stepping.check_finite and not np.all(np.isfinite(coeffs)):
                logger.warning("Non-finite state at iteration %d (t=%g)", i, i * dt)
                self.state = SolverState.FAILED
                raise NumericalDivergenceError(
                    iteration=i,
                    archive=archive[:k].copy(),
                    times=saved_at[:k] * dt,
                )
            completed = i

            if (i - 1) % d_save == 0 and k < n_saved:
                # to_grid allocates; coeffs stays the stepping state
                archive[k] = self.transform.to_grid(coeffs)
                saved_at[k] = i
                k += 1
                logger.debug("Saved snapshot %d/%d at iteration %d", k, n_saved, i)
        else:
            self.state = SolverState.DONE

        return TDGLSolution(
            grid=self.grid,
            snapshots=archive[:k],
            times=saved_at[:k] * dt,
            saved_iterations=saved_at[:k],
            coeffs_final=coeffs,
            iterations=completed,
            params=self.params,
            state=self.state,
        )


def solve_tdgl(
    psi0: NDArray,
    params: TDGLParams,
    stepping: SteppingConfig,
    *,
    transform_cfg: TransformConfig | None = None,
    should_stop: StopFn | None = None,
) -> TDGLSolution:
    """Solve the 1D TDGL equation from grid samples ``psi0``.

    One-shot wrapper around :class:`TDGLSolver`; returns the solution
    archive of ``stepping.n_saved`` grid-space snapshots.
    """
    solver = TDGLSolver(params, transform_cfg=transform_cfg)
    return solver.run(psi0, stepping, should_stop=should_stop)
