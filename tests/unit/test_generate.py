"""
End-to-end properties of :func:`pysatl_mvss.generate`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from importlib.util import find_spec

import numpy as np
import pytest
from scipy import stats

from pysatl_mvss import generate
from pysatl_mvss.errors import BackendUnavailableError, InvalidParameterError
from pysatl_mvss.families.configuration import configure_families_register
from pysatl_mvss.stats.api import SubordinatorBackend
from pysatl_mvss.types import FamilyName

requires_pyro = pytest.mark.skipif(find_spec("pyro") is None, reason="pyro-ppl is not installed")

BACKENDS = [
    SubordinatorBackend.LEVY_STABLE_S1,
    pytest.param(SubordinatorBackend.PYRO_STABLE, marks=requires_pyro),
]

Q2 = np.array([[10.0, 7.5], [7.5, 10.0]])
Q3 = np.array([[10.0, 7.5, 7.5], [7.5, 10.0, 7.5], [7.5, 7.5, 10.0]])


class TestShapeAndReproducibility:
    @pytest.mark.parametrize("n", [1, 2, 257])
    @pytest.mark.parametrize("q", [Q2, Q3, np.array([[4.0]])])
    @pytest.mark.parametrize("backend", BACKENDS)
    def test_output_shape(self, n: int, q: np.ndarray, backend: SubordinatorBackend) -> None:
        out = generate(n, alpha=1.5, Q=q, subordinator_backend=backend, rng=0)

        assert out.shape == (n, q.shape[0])
        assert out.dtype == np.float64
        assert np.isfinite(out).all()

    def test_default_alpha_and_delta(self) -> None:
        out = generate(10, Q=Q2, rng=1)
        assert out.shape == (10, 2)

    @pytest.mark.parametrize("backend", BACKENDS)
    def test_same_seed_gives_identical_output(self, backend: SubordinatorBackend) -> None:
        first = generate(500, alpha=1.71, Q=Q3, subordinator_backend=backend, rng=2024)
        second = generate(500, alpha=1.71, Q=Q3, subordinator_backend=backend, rng=2024)
        np.testing.assert_array_equal(first, second)

    def test_backend_accepts_string_names(self) -> None:
        by_name = generate(50, alpha=1.2, Q=Q2, subordinator_backend="levy_stable_s1", rng=3)
        by_member = generate(
            50, alpha=1.2, Q=Q2, subordinator_backend=SubordinatorBackend.LEVY_STABLE_S1, rng=3
        )
        np.testing.assert_array_equal(by_name, by_member)

    def test_matches_family_api(self) -> None:
        family = configure_families_register().get(FamilyName.SUBGAUSSIAN_STABLE)
        via_family = family(alpha=1.71, Q=Q2, delta=[1.0, 2.0]).sample(100, rng=8).array

        np.testing.assert_array_equal(
            generate(100, alpha=1.71, Q=Q2, delta=[1.0, 2.0], rng=8), via_family
        )

    @requires_pyro
    def test_backends_agree_in_marginal_law(self) -> None:
        scipy_out = generate(4000, alpha=1.5, Q=Q2, subordinator_backend="levy_stable_s1", rng=31)
        pyro_out = generate(4000, alpha=1.5, Q=Q2, subordinator_backend="pyro_stable", rng=31)

        assert not np.allclose(scipy_out, pyro_out)
        for column in range(2):
            assert stats.ks_2samp(scipy_out[:, column], pyro_out[:, column]).pvalue > 1e-3


class TestDistributionalProperties:
    def test_location_invariance(self) -> None:
        v = np.array([3.0, -1.5, 100.0])
        shifted = generate(1000, alpha=1.5, Q=Q3, delta=v, rng=9)
        centered = generate(1000, alpha=1.5, Q=Q3, delta=[0.0, 0.0, 0.0], rng=9)

        np.testing.assert_allclose(shifted - centered, np.tile(v, (1000, 1)), atol=1e-6)

    def test_scale_consistency(self) -> None:
        # scaling Q by c scales the spread by sqrt(c); IQR is finite for every alpha
        c = 4.0
        base = generate(20000, alpha=1.5, Q=Q2, rng=40)
        scaled = generate(20000, alpha=1.5, Q=c * Q2, rng=41)

        for column in range(2):
            ratio = stats.iqr(scaled[:, column]) / stats.iqr(base[:, column])
            assert ratio == pytest.approx(math.sqrt(c), rel=0.1)

    def test_near_gaussian_limit(self) -> None:
        # as alpha -> 2 the law tends to N(delta, 2 Q)
        q = np.array([[1.0, 0.5], [0.5, 1.0]])
        out = generate(20000, alpha=1.999, Q=q, rng=50)

        np.testing.assert_allclose(np.cov(out.T), 2.0 * q, rtol=0.1, atol=0.05)

    def test_bivariate_scenario(self) -> None:
        out = generate(10000, alpha=1.71, Q=Q2, delta=[0.0, 0.0], rng=1710)

        assert out.shape == (10000, 2)
        # heavy tails: excess kurtosis far above the Gaussian value of 0
        assert (stats.kurtosis(out, axis=0) > 3.0).all()
        # elliptical law: Kendall's tau determines the correlation of the shape matrix
        tau = stats.kendalltau(out[:, 0], out[:, 1]).statistic
        assert math.sin(math.pi * tau / 2) == pytest.approx(0.75, abs=0.03)

    def test_pearson_correlation_over_replicates(self) -> None:
        # the Pearson estimate is dominated by a few large draws, so use the median
        # over independent replicates
        seeds = np.random.SeedSequence(7).spawn(20)
        correlations = [
            np.corrcoef(generate(10000, alpha=1.71, Q=Q2, rng=seed).T)[0, 1] for seed in seeds
        ]
        assert float(np.median(correlations)) == pytest.approx(0.75, abs=0.12)


class TestErrors:
    @pytest.mark.parametrize("alpha", [0.0, 2.0, -1.0, 2.0001, 3.0])
    def test_alpha_boundary(self, alpha: float) -> None:
        with pytest.raises(InvalidParameterError, match="0 < alpha < 2"):
            generate(10, alpha=alpha, Q=Q2)

    def test_q_is_required(self) -> None:
        with pytest.raises(InvalidParameterError, match="Q is required"):
            generate(10, alpha=1.5)

    @pytest.mark.parametrize(
        "q, message",
        [
            ([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]], "square"),
            ([[1.0, 0.9], [0.1, 1.0]], "symmetric"),
            ([[1.0, 2.0], [2.0, 1.0]], "positive semi-definite"),
        ],
    )
    def test_invalid_shape_matrix(self, q: list, message: str) -> None:
        with pytest.raises(InvalidParameterError, match=message):
            generate(10, alpha=1.5, Q=q)

    def test_delta_length_mismatch(self) -> None:
        with pytest.raises(InvalidParameterError, match="len"):
            generate(10, alpha=1.5, Q=Q2, delta=[1.0, 2.0, 3.0])

    @pytest.mark.parametrize("n", [0, -5, 2.5, True])
    def test_invalid_sample_size(self, n: object) -> None:
        with pytest.raises(InvalidParameterError, match="Number of samples"):
            generate(n, alpha=1.5, Q=Q2)  # type: ignore[arg-type]

    def test_unknown_backend(self) -> None:
        with pytest.raises(BackendUnavailableError):
            generate(10, alpha=1.5, Q=Q2, subordinator_backend="stabledist")

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            generate(10, alpha=2.0, Q=Q2)
