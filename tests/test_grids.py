# tests/test_grids.py
import numpy as np
import pytest

from spectral_tdgl import InvalidArgumentError, build_grid
from spectral_tdgl.numerics.grids import chebyshev_nodes, to_physical, to_reference


@pytest.mark.parametrize("N", [2, 3, 8, 33])
def test_nodes_ascending_with_exact_endpoints(N: int) -> None:
    x = chebyshev_nodes(N)
    k = np.arange(N)

    assert x[0] == -1.0
    assert x[-1] == 1.0
    assert np.all(np.diff(x) > 0)
    np.testing.assert_allclose(x, -np.cos(np.pi * k / (N - 1)), atol=1e-15)


def test_odd_grid_has_exact_midpoint() -> None:
    assert chebyshev_nodes(9)[4] == 0.0


def test_nodes_are_read_only() -> None:
    x = chebyshev_nodes(8)
    with pytest.raises(ValueError):
        x[0] = 0.0
    assert chebyshev_nodes(8) is x


def test_physical_map_round_trip() -> None:
    xi = chebyshev_nodes(17)
    x = to_physical(xi, 50.0)

    assert x[0] == 0.0
    assert x[-1] == 50.0
    np.testing.assert_allclose(to_reference(x, 50.0), xi, atol=1e-15)


def test_build_grid() -> None:
    grid = build_grid(12, 7.5)

    assert grid.N == 12
    assert grid.L_domain == 7.5
    np.testing.assert_array_equal(grid.x, to_physical(grid.xi, 7.5))
    assert not grid.x.flags.writeable


def test_invalid_grids() -> None:
    with pytest.raises(InvalidArgumentError):
        _ = chebyshev_nodes(1)
    with pytest.raises(InvalidArgumentError):
        _ = build_grid(8, 0.0)
