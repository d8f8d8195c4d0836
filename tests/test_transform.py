# tests/test_transform.py
import numpy as np
import pytest

from spectral_tdgl import InvalidArgumentError
from spectral_tdgl.numerics.grids import chebyshev_nodes
from spectral_tdgl.numerics.transform import (
    ChebyshevTransform,
    boundary_values,
    evaluate_series,
    get_transform,
    to_coefficients,
    to_grid,
)


@pytest.mark.parametrize("N", [8, 16, 64, 128])
def test_round_trip_random_complex(N: int, random_complex) -> None:
    x = random_complex(N, seed=N)
    tr = get_transform(N)

    back = tr.to_grid(tr.to_coefficients(x))

    np.testing.assert_allclose(back, x, rtol=1e-10, atol=1e-12 * np.max(np.abs(x)))


@pytest.mark.parametrize("N", [8, 16, 64, 128])
def test_round_trip_coefficients_first(N: int, random_complex) -> None:
    a = random_complex(N, seed=100 + N)
    tr = get_transform(N)

    np.testing.assert_allclose(tr.to_coefficients(tr.to_grid(a)), a, rtol=1e-10, atol=1e-12)


@pytest.mark.parametrize("N", [8, 17, 64])
def test_one_hot_coefficients_reproduce_chebyshev_polynomials(N: int) -> None:
    """to_grid(e_m) must equal T_m(x_k) = cos(m arccos x_k) on the nodes."""
    x = chebyshev_nodes(N)
    tr = get_transform(N)
    for m in range(N):
        e = np.zeros(N)
        e[m] = 1.0
        expected = np.cos(m * np.arccos(np.clip(x, -1.0, 1.0)))
        np.testing.assert_allclose(tr.to_grid(e), expected, rtol=0.0, atol=1e-10)


def test_coefficients_of_known_polynomial() -> None:
    """x^2 = (T_0 + T_2) / 2."""
    N = 9
    x = chebyshev_nodes(N)
    a = to_coefficients(x**2)

    expected = np.zeros(N)
    expected[0] = 0.5
    expected[2] = 0.5
    np.testing.assert_allclose(a, expected, atol=1e-14)


def test_inputs_not_modified(random_complex) -> None:
    N = 32
    x = random_complex(N, seed=1)
    x0 = x.copy()
    tr = get_transform(N)

    a = tr.to_coefficients(x)
    np.testing.assert_array_equal(x, x0)

    a0 = a.copy()
    _ = tr.to_grid(a)
    np.testing.assert_array_equal(a, a0)


def test_real_input_stays_real() -> None:
    N = 16
    out = to_coefficients(np.linspace(0.0, 1.0, N))
    assert not np.iscomplexobj(out)
    assert np.iscomplexobj(to_grid(np.ones(N, dtype=complex)))


def test_complex_transform_is_componentwise(random_complex) -> None:
    N = 24
    z = random_complex(N, seed=3)
    tr = get_transform(N)

    out = tr.to_coefficients(z)
    np.testing.assert_allclose(out.real, tr.to_coefficients(z.real), rtol=0.0, atol=1e-15)
    np.testing.assert_allclose(out.imag, tr.to_coefficients(z.imag), rtol=0.0, atol=1e-15)


def test_workers_do_not_change_results(random_complex) -> None:
    N = 64
    z = random_complex(N, seed=5)

    serial = ChebyshevTransform(N=N)
    threaded = ChebyshevTransform(N=N, workers=2)

    np.testing.assert_array_equal(serial.to_coefficients(z), threaded.to_coefficients(z))
    np.testing.assert_array_equal(serial.to_grid(z), threaded.to_grid(z))


def test_plans_are_cached() -> None:
    assert get_transform(16) is get_transform(16)
    assert get_transform(16) is not get_transform(32)


def test_shape_errors() -> None:
    tr = get_transform(8)
    with pytest.raises(InvalidArgumentError):
        _ = tr.to_coefficients(np.zeros(7))
    with pytest.raises(InvalidArgumentError):
        _ = tr.to_grid(np.zeros((8, 2)))
    with pytest.raises(InvalidArgumentError):
        _ = ChebyshevTransform(N=1)


def test_evaluate_series_matches_grid_values(random_complex) -> None:
    N = 20
    a = random_complex(N, seed=11)
    x = chebyshev_nodes(N)

    np.testing.assert_allclose(evaluate_series(a, x), to_grid(a), rtol=1e-10, atol=1e-12)

    with pytest.raises(InvalidArgumentError):
        _ = evaluate_series(a, 1.5)


def test_boundary_values_use_endpoint_identities(random_complex) -> None:
    N = 15
    a = random_complex(N, seed=21)

    left, right = boundary_values(a)
    grid = to_grid(a)

    assert left == pytest.approx(grid[0], abs=1e-12)
    assert right == pytest.approx(grid[-1], abs=1e-12)
    assert left == pytest.approx(complex(evaluate_series(a, -1.0)), abs=1e-12)
