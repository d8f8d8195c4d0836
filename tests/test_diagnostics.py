# tests/test_diagnostics.py
import numpy as np
import pandas as pd
import pytest

from spectral_tdgl import InvalidArgumentError, SteppingConfig, build_grid, solve_tdgl
from spectral_tdgl.diagnostics import (
    boundary_residuals,
    l2_norm,
    max_modulus,
    snapshot_increments,
    summary_table,
)
from spectral_tdgl.numerics.pde import sample_initial_condition, sine_squared


@pytest.fixture
def short_solution(scenario_params):
    p = scenario_params
    grid = build_grid(p.N, p.L_domain)
    psi0 = sample_initial_condition(lambda x: sine_squared(x, p.L_domain), grid)
    return solve_tdgl(psi0, p, SteppingConfig(n_iter=40, d_save=8))


def test_l2_norm_of_constant() -> None:
    grid = build_grid(33, 50.0)
    assert l2_norm(np.ones(33), grid) == pytest.approx(np.sqrt(50.0), rel=1e-12)
    assert l2_norm(np.zeros(33, dtype=complex), grid) == 0.0

    with pytest.raises(InvalidArgumentError):
        _ = l2_norm(np.ones(32), grid)


def test_checks_shapes(short_solution) -> None:
    sol = short_solution

    assert boundary_residuals(sol).shape == (5, 2)
    assert np.all(boundary_residuals(sol) < 1e-6)
    assert snapshot_increments(sol).shape == (4,)
    np.testing.assert_allclose(max_modulus(sol), np.abs(sol.snapshots).max(axis=1))


def test_summary_table(short_solution) -> None:
    df = summary_table(short_solution)

    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == [
        "iteration",
        "t",
        "max_abs",
        "l2",
        "left_bc",
        "right_bc",
        "increment",
    ]
    assert len(df) == 5
    assert df["iteration"].tolist() == [1, 9, 17, 25, 33]
    assert np.isnan(df["increment"].iloc[0])
    assert np.all(np.isfinite(df["increment"].iloc[1:]))
    np.testing.assert_allclose(df["t"], df["iteration"] * 0.02)


def test_summary_table_of_empty_run(scenario_params) -> None:
    p = scenario_params
    grid = build_grid(p.N, p.L_domain)
    psi0 = sample_initial_condition(lambda x: sine_squared(x, p.L_domain), grid)

    df = summary_table(solve_tdgl(psi0, p, SteppingConfig(n_iter=0)))

    assert len(df) == 0
    assert "increment" in df.columns
