"""Run the reference TDGL scenario and print a snapshot summary.

Run from the repository root:

    PYTHONPATH=src python scripts/run_tdgl.py
    PYTHONPATH=src python scripts/run_tdgl.py --N 128 --dt 0.01 --n-iter 4000
    PYTHONPATH=src python scripts/run_tdgl.py --b 0 --c 0 --every 20

The default parameters are N=64, dt=0.02, b=0.5, c=-1.5, L=50 with initial
condition 2 sin(2 pi x / L)^2, 1000 steps and a snapshot every 5 steps.
"""

from __future__ import annotations

import argparse
import logging
import time
from collections.abc import Sequence

import pandas as pd

from spectral_tdgl import SteppingConfig, TDGLParams, TDGLSolver, TransformConfig
from spectral_tdgl.diagnostics import summary_table
from spectral_tdgl.numerics.pde import sample_initial_condition, sine_squared


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    p.add_argument("--N", type=int, default=64, help="Chebyshev modes")
    p.add_argument("--dt", type=float, default=0.02)
    p.add_argument("--b", type=float, default=0.5)
    p.add_argument("--c", type=float, default=-1.5)
    p.add_argument("--L", type=float, default=50.0, help="domain length")
    p.add_argument("--amplitude", type=float, default=2.0)
    p.add_argument("--modes", type=int, default=2)
    p.add_argument("--n-iter", type=int, default=1000)
    p.add_argument("--every", type=int, default=5, help="save stride d_save")
    p.add_argument("--workers", type=int, default=None, help="scipy.fft workers")
    p.add_argument("--rows", type=int, default=12, help="table rows to print")
    p.add_argument("--verbose", "-v", action="store_true")
    return p.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    params = TDGLParams(N=args.N, dt=args.dt, b=args.b, c=args.c, L_domain=args.L)
    stepping = SteppingConfig(n_iter=args.n_iter, d_save=args.every)

    t0 = time.perf_counter()
    solver = TDGLSolver(params, transform_cfg=TransformConfig(workers=args.workers))
    t_setup = time.perf_counter() - t0

    psi0 = sample_initial_condition(
        lambda x: sine_squared(x, params.L_domain, amplitude=args.amplitude, modes=args.modes),
        solver.grid,
    )

    t0 = time.perf_counter()
    sol = solver.run(psi0, stepping)
    t_run = time.perf_counter() - t0

    df = summary_table(sol)
    step = max(1, len(df) // max(1, args.rows))
    with pd.option_context("display.width", 120, "display.float_format", "{:.3e}".format):
        print(df.iloc[::step].to_string(index=False))

    print("-" * 40)
    print(f"state:            {sol.state.value}")
    print(f"snapshots:        {sol.n_saved}")
    print(f"setup time [s]:   {t_setup:.4f}")
    print(f"stepping time [s]: {t_run:.4f}")
    if sol.n_saved:
        print(f"max |psi|:        {df['max_abs'].max():.4f}")
        print(f"max boundary |psi|: {df[['left_bc', 'right_bc']].to_numpy().max():.3e}")


if __name__ == "__main__":
    main()
