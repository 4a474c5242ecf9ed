"""
Sampling Strategies
===================

This module defines the pluggable sampling interface and the strategy that
draws from the subgaussian stable family:

- :class:`SamplingStrategy` draws samples from a distribution.
- :class:`SubgaussianStableSamplingStrategy` runs the subordinator and
  Gaussian stages and combines them into an ``(n, d)`` sample.

Notes
-----
- Strategies are stateless apart from their default configuration.
- Each call spawns two independent child generators, one per stage, so the
  result for a fixed seed does not depend on which stage runs first.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from numbers import Integral
from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from pysatl_mvss.errors import InvalidParameterError
from pysatl_mvss.stats.api import SamplingConfig
from pysatl_mvss.stats.combiner import combine
from pysatl_mvss.stats.gaussian import sample_mvnormal
from pysatl_mvss.stats.subordinator import (
    resolve_subordinator_sampler,
    subordinator_parameters,
)

from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from .distribution import Distribution

logger = logging.getLogger(__name__)


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(self, n: int, distr: Distribution, **options: Any) -> Sample: ...


def check_sample_size(n: Any) -> int:
    """
    Validate a sample size.

    Returns
    -------
    int
        ``n`` as a plain ``int``.

    Raises
    ------
    InvalidParameterError
        If ``n`` is not a positive integer. Booleans are rejected.
    """
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidParameterError(f"Number of samples must be an integer, got {n!r}")
    if n <= 0:
        raise InvalidParameterError(f"Number of samples must be positive, got {n}")
    return int(n)


class SubgaussianStableSamplingStrategy(SamplingStrategy):
    """
    Sampler of ``X = sqrt(A) * G + delta``.

    ``A`` is the positive stable subordinator and ``G ~ N(0, Q)``.

    Parameters
    ----------
    default_config : SamplingConfig or None, optional
        Backend and seed used when a call does not override them. If ``None``,
        uses :class:`SamplingConfig` defaults.
    """

    def __init__(self, default_config: SamplingConfig | None = None) -> None:
        self._default_config = default_config or SamplingConfig()

    @property
    def default_config(self) -> SamplingConfig:
        """Default sampling configuration."""
        return self._default_config

    def sample(self, n: int, distr: Distribution, **options: Any) -> ArraySample:
        """
        Generate ``n`` observations of ``distr``.

        Parameters
        ----------
        n : int
            Number of observations, positive.
        distr : Distribution
            A subgaussian stable distribution. Its ``base_parameters`` must
            provide ``alpha``, ``Q`` and ``delta``.
        **options : Any
            - ``backend``: subordinator backend, overrides the configuration;
            - ``rng``: seed or :class:`numpy.random.Generator`, overrides the
              configured seed.

        Returns
        -------
        ArraySample
            Sample of shape ``(n, d)``.

        Raises
        ------
        InvalidParameterError
            If ``n`` is not a positive integer.
        BackendUnavailableError
            If the backend is unknown.
        NumericalDegeneracyError
            If a stage produced numerically invalid values.
        """
        n = check_sample_size(n)
        params = distr.base_parameters  # type: ignore[attr-defined]

        # everything that can fail on input is checked before the first draw
        sub_params = subordinator_parameters(params.alpha)
        sampler = resolve_subordinator_sampler(options.get("backend", self._default_config.backend))
        rng = np.random.default_rng(options.get("rng", self._default_config.seed))
        sub_rng, gauss_rng = rng.spawn(2)

        logger.debug(
            "Sampling %d x %d subgaussian stable variates (alpha=%s, backend=%s)",
            n,
            params.dimension,
            params.alpha,
            sampler.backend,
        )
        subordinator = sampler.sample(n, sub_params, sub_rng)
        gaussian = sample_mvnormal(n, params.Q, gauss_rng)
        return ArraySample(combine(subordinator, gaussian, params.delta))
