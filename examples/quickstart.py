from __future__ import annotations

import numpy as np

from spectral_tdgl import SteppingConfig, TDGLParams, build_grid, solve_tdgl


def main() -> None:
    params = TDGLParams(N=64, dt=0.02, b=0.5, c=-1.5, L_domain=50.0)
    grid = build_grid(params.N, params.L_domain)
    psi0 = 2.0 * np.sin(2.0 * np.pi * grid.x / params.L_domain) ** 2

    sol = solve_tdgl(psi0, params, SteppingConfig(n_iter=1000, d_save=5))

    print("snapshots:", sol.snapshots.shape)
    print("max |psi|:", np.abs(sol.snapshots).max())
    print("boundary:", np.abs(sol.snapshots[:, [0, -1]]).max())


if __name__ == "__main__":
    main()
