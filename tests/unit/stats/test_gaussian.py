from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from unittest.mock import patch

import numpy as np
import pytest

from pysatl_mvss.errors import InvalidParameterError, NumericalDegeneracyError
from pysatl_mvss.stats.gaussian import sample_mvnormal

Q = np.array([[10.0, 7.5], [7.5, 10.0]])


@pytest.mark.parametrize(
    "n, covariance, expected_shape",
    [
        (100, Q, (100, 2)),
        (1, Q, (1, 2)),
        (50, [[4.0]], (50, 1)),
        (1, [[4.0]], (1, 1)),
        (10, np.eye(5), (10, 5)),
    ],
)
def test_output_is_always_two_dimensional(
    n: int, covariance: np.ndarray, expected_shape: tuple[int, int]
) -> None:
    draws = sample_mvnormal(n, covariance, rng=0)
    assert draws.shape == expected_shape
    assert draws.dtype == np.float64


def test_reproducible_with_seed() -> None:
    np.testing.assert_array_equal(sample_mvnormal(200, Q, rng=4), sample_mvnormal(200, Q, rng=4))


def test_accepts_generator() -> None:
    draws = sample_mvnormal(10, Q, rng=np.random.default_rng(3))
    assert draws.shape == (10, 2)


def test_mean_and_covariance() -> None:
    draws = sample_mvnormal(50000, Q, rng=8)

    np.testing.assert_allclose(draws.mean(axis=0), [0.0, 0.0], atol=0.1)
    np.testing.assert_allclose(np.cov(draws.T), Q, rtol=0.05)


def test_singular_covariance_is_supported() -> None:
    draws = sample_mvnormal(1000, [[1.0, 1.0], [1.0, 1.0]], rng=6)

    assert np.isfinite(draws).all()
    np.testing.assert_allclose(draws[:, 0], draws[:, 1], atol=1e-6)


@pytest.mark.parametrize(
    "covariance",
    [
        [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]],
        [1.0, 2.0],
    ],
)
def test_non_square_covariance_is_rejected(covariance: list) -> None:
    with pytest.raises(InvalidParameterError, match="square"):
        sample_mvnormal(10, covariance)


def test_indefinite_covariance_is_rejected() -> None:
    with pytest.raises(InvalidParameterError):
        sample_mvnormal(10, [[1.0, 2.0], [2.0, 1.0]])


def test_decomposition_failure_is_a_numerical_error() -> None:
    failure = np.linalg.LinAlgError("SVD did not converge")
    with patch("pysatl_mvss.stats.gaussian.multivariate_normal", side_effect=failure):
        with pytest.raises(NumericalDegeneracyError, match="SVD did not converge") as exc_info:
            sample_mvnormal(10, Q)

    assert exc_info.value.__cause__ is failure
    assert isinstance(exc_info.value, RuntimeError)
