from __future__ import annotations

import numpy as np
import pandas as pd

from ..numerics.pde.solver import TDGLSolution
from .checks import boundary_residuals, l2_norm, max_modulus, snapshot_increments


def summary_table(solution: TDGLSolution) -> pd.DataFrame:
    """One row per saved snapshot.

    Columns: iteration, t, max_abs, l2, left_bc, right_bc, increment
    (increment is NaN for the first snapshot).
    """
    bc = boundary_residuals(solution)
    inc = np.concatenate(([np.nan], snapshot_increments(solution)))
    if solution.n_saved == 0:
        inc = np.empty(0, dtype=float)

    return pd.DataFrame(
        {
            "iteration": np.asarray(solution.saved_iterations, dtype=int),
            "t": np.asarray(solution.times, dtype=float),
            "max_abs": max_modulus(solution),
            "l2": [l2_norm(s, solution.grid) for s in solution.snapshots],
            "left_bc": bc[:, 0],
            "right_bc": bc[:, 1],
            "increment": inc,
        }
    )
