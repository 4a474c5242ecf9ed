"""
Sampling Backends API
=====================

This module defines the contracts between the subgaussian stable sampler
and the libraries that provide its univariate stable draws. The concrete
backends live in :mod:`pysatl_mvss.stats.subordinator`.

The API integrates with the
:class:`~pysatl_mvss.distributions.strategies.SamplingStrategy` protocol
through :class:`~pysatl_mvss.distributions.strategies.SubgaussianStableSamplingStrategy`,
which reads its defaults from :class:`SamplingConfig`.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    import numpy as np

    from pysatl_mvss.stats.subordinator import SubordinatorParameters
    from pysatl_mvss.types import NumericArray


class StableConvention(StrEnum):
    """
    Labeling conventions of the stable law ``S(alpha, beta, gamma, delta; k)``.

    The conventions differ only in the meaning of the location parameter.

    Attributes
    ----------
    S0 : str
        Nolan's ``k = 0``: ``gamma * (Z - beta * tan(pi alpha / 2)) + delta``
        for a standard S1 variate ``Z``. Continuous in ``alpha``.
    S1 : str
        Samorodnitsky-Taqqu ``k = 1``: ``gamma * Z + delta``. The location of
        a positive stable law is the left end of its support.
    """

    S0 = "S0"
    S1 = "S1"


class SubordinatorBackend(StrEnum):
    """
    Closed set of libraries that can draw the positive stable subordinator.

    Every backend draws from the same law with its own algorithm and random
    stream, so equal seeds give different bits but the same distribution.

    Attributes
    ----------
    LEVY_STABLE_S1 : str
        :data:`scipy.stats.levy_stable` fed S1 parameters. The default.
    PYRO_STABLE : str
        :class:`pyro.distributions.Stable` fed S0 parameters. Needs the
        optional ``pyro-ppl`` package.
    """

    LEVY_STABLE_S1 = "levy_stable_s1"
    PYRO_STABLE = "pyro_stable"


@dataclass(frozen=True, slots=True)
class SamplingConfig:
    """
    Default configuration of the subgaussian stable sampling strategy.

    Parameters
    ----------
    backend : SubordinatorBackend, default SubordinatorBackend.LEVY_STABLE_S1
        Library used for the positive stable subordinator.
    seed : int | None, default None
        Seed of the generator used when a call does not pass its own ``rng``.
        If ``None``, every call uses fresh system entropy.

    Notes
    -----
    A fixed ``seed`` makes every call of the strategy return the same sample.
    Pass ``rng`` per call to get a reproducible stream instead.
    """

    backend: SubordinatorBackend = SubordinatorBackend.LEVY_STABLE_S1
    seed: int | None = None


class SubordinatorSampler(Protocol):
    """
    Protocol for positive stable samplers.

    Implementations are stateless: all randomness comes from ``rng``.
    """

    backend: SubordinatorBackend

    def sample(
        self, n: int, parameters: SubordinatorParameters, rng: np.random.Generator
    ) -> NumericArray:
        """
        Draw ``n`` i.i.d. variates of the one-sided stable law.

        Parameters
        ----------
        n : int
            Number of variates to draw.
        parameters : SubordinatorParameters
            Law of the subordinator in the S1 convention.
        rng : numpy.random.Generator
            Source of randomness.

        Returns
        -------
        numpy.ndarray
            1D array of shape ``(n,)``.
        """
        ...
