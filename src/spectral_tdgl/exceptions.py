from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


class SpectralTDGLError(Exception):
    """Base class for all solver failures."""


class InvalidArgumentError(SpectralTDGLError, ValueError):
    """Raised when a size, order, stride or input array is malformed.

    Always raised before any numerical work starts; nothing is clamped or
    truncated on the caller's behalf.
    """


class SingularOperatorError(SpectralTDGLError, np.linalg.LinAlgError):
    """Raised when the boundary-bordered operator cannot be factored."""


class NumericalDivergenceError(SpectralTDGLError, FloatingPointError):
    """Raised when a time step produces NaN or Inf coefficients.

    Attributes
    ----------
    iteration : int
        1-based index of the step that produced the non-finite state.
    archive : ndarray, shape (k, N)
        Grid-space snapshots that were saved before the failure.
    times : ndarray, shape (k,)
        Simulation times of the saved snapshots.

    Notes
    -----
    Usually means ``dt`` is too large for the explicit cubic term. Retrying
    with the same parameters will fail the same way.
    """

    def __init__(
        self,
        iteration: int,
        archive: NDArray[np.complexfloating],
        times: NDArray[np.floating] | None = None,
    ) -> None:
        self.iteration = int(iteration)
        self.archive = archive
        self.times = (
            np.empty(0, dtype=float) if times is None else np.asarray(times, dtype=float)
        )
        super().__init__(
            f"Non-finite state at iteration {self.iteration} "
            f"({self.archive.shape[0]} snapshot(s) saved before failure)"
        )
