# tests/test_config.py
import math

import pytest

from spectral_tdgl import (
    InvalidArgumentError,
    SpectralTDGLError,
    SteppingConfig,
    TDGLParams,
    TransformConfig,
)


def test_params_defaults_and_scale() -> None:
    p = TDGLParams(N=8, dt=0.1)
    assert (p.b, p.c, p.L_domain) == (0.0, 0.0, 2.0)
    assert p.scale == pytest.approx(1.0)
    assert TDGLParams(N=8, dt=0.1, L_domain=50.0).scale == pytest.approx(0.04)


def test_params_are_immutable() -> None:
    p = TDGLParams(N=8, dt=0.1)
    with pytest.raises(AttributeError):
        p.dt = 0.2  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"N": 2, "dt": 0.1},
        {"N": 8.5, "dt": 0.1},
        {"N": True, "dt": 0.1},
        {"N": 8, "dt": 0.0},
        {"N": 8, "dt": -1.0},
        {"N": 8, "dt": math.nan},
        {"N": 8, "dt": 0.1, "b": math.inf},
        {"N": 8, "dt": 0.1, "c": math.nan},
        {"N": 8, "dt": 0.1, "L_domain": 0.0},
        {"N": 8, "dt": 0.1, "L_domain": -3.0},
        {"N": None, "dt": 0.1},
        {"N": "abc", "dt": 0.1},
        {"N": math.inf, "dt": 0.1},
        {"N": 8, "dt": "fast"},
        {"N": 8, "dt": None},
    ],
)
def test_invalid_params(kwargs: dict) -> None:
    with pytest.raises(InvalidArgumentError):
        _ = TDGLParams(**kwargs)


def test_invalid_argument_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        _ = TDGLParams(N=1, dt=0.1)
    assert issubclass(InvalidArgumentError, SpectralTDGLError)


def test_stepping_config() -> None:
    assert SteppingConfig(n_iter=1000, d_save=5).n_saved == 200
    assert SteppingConfig(n_iter=7, d_save=3).n_saved == 2
    assert SteppingConfig(n_iter=0).n_saved == 0
    assert SteppingConfig(n_iter=3).check_finite

    with pytest.raises(InvalidArgumentError):
        _ = SteppingConfig(n_iter=-1)
    with pytest.raises(InvalidArgumentError):
        _ = SteppingConfig(n_iter=10, d_save=0)


def test_transform_config() -> None:
    assert TransformConfig().workers is None
    assert TransformConfig(workers=-1).workers == -1
    with pytest.raises(InvalidArgumentError):
        _ = TransformConfig(workers=0)


def test_integral_values_are_normalized() -> None:
    p = TDGLParams(N=16.0, dt=1)
    assert type(p.N) is int and p.N == 16
    assert type(p.dt) is float

    cfg = SteppingConfig(n_iter=10.0, d_save=2.0)
    assert (cfg.n_iter, cfg.d_save) == (10, 2)
    assert type(cfg.n_saved) is int


@pytest.mark.parametrize(
    "kwargs",
    [
        {"n_iter": 10, "d_save": 0.5},
        {"n_iter": 10, "d_save": 2.5},
        {"n_iter": 2.5},
        {"n_iter": True},
        {"n_iter": 10, "d_save": None},
        {"n_iter": "10"},
    ],
)
def test_non_integer_stepping_is_rejected(kwargs: dict) -> None:
    with pytest.raises(InvalidArgumentError):
        _ = SteppingConfig(**kwargs)


def test_non_integer_workers_are_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        _ = TransformConfig(workers=1.5)
