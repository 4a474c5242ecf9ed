"""
Positive Stable Subordinator
============================

Maps the tail index of the subgaussian stable law to the law of its
subordinator and draws the subordinator through one of the backends listed
in :class:`~pysatl_mvss.stats.api.SubordinatorBackend`.

For ``0 < alpha < 2`` the subordinator is

.. math::

    A \\sim S\\left(\\tfrac{\\alpha}{2},\\ 1,\\
    2\\cos\\left(\\tfrac{\\pi\\alpha}{4}\\right)^{2/\\alpha},\\ 0;\\ 1\\right),

a totally skewed stable variable with support ``[0, inf)`` and Laplace
transform ``E exp(-sA) = exp(-(2s)^(alpha/2))``.

References
----------
Nolan JP (2013), Multivariate elliptically contoured stable distributions:
theory and estimation. Comput Stat 28:2067-2089.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

import numpy as np
from scipy.stats import levy_stable

from pysatl_mvss.errors import (
    BackendUnavailableError,
    InvalidParameterError,
    NumericalDegeneracyError,
)
from pysatl_mvss.stats.api import StableConvention, SubordinatorBackend, SubordinatorSampler

if TYPE_CHECKING:
    from typing import Any

    from pysatl_mvss.types import NumericArray, SeedLike

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SubordinatorParameters:
    """
    Law of the positive stable subordinator in the S1 convention.

    Parameters
    ----------
    tail_index : float
        Stability index, ``alpha / 2``. Lies in ``(0, 1)``.
    skewness : float
        Skewness ``beta``. Always ``1`` so that the support is ``[0, inf)``.
    scale : float
        Scale ``gamma``.
    location : float
        S1 location ``delta``.
    """

    tail_index: float
    skewness: float
    scale: float
    location: float

    def location_in(self, convention: StableConvention) -> float:
        """
        Express the location in another labeling convention.

        The law does not change, only the number a library expects.

        Parameters
        ----------
        convention : StableConvention
            Target convention.

        Returns
        -------
        float
            Location parameter in ``convention``.
        """
        if convention == StableConvention.S1:
            return self.location
        # tail_index < 1, so the tangent is finite
        shift = self.skewness * self.scale * math.tan(math.pi * self.tail_index / 2)
        return self.location + shift


def subordinator_parameters(alpha: float) -> SubordinatorParameters:
    """
    Map the tail index of the subgaussian law to its subordinator.

    Parameters
    ----------
    alpha : float
        Tail index of the subgaussian stable law, ``0 < alpha < 2``.

    Returns
    -------
    SubordinatorParameters
        ``S(alpha/2, 1, 2 cos(pi alpha / 4)^(2/alpha), 0; 1)``.

    Raises
    ------
    InvalidParameterError
        If ``alpha`` is outside ``(0, 2)``.
    NumericalDegeneracyError
        If the scale is not a positive finite number.
    """
    alpha = float(alpha)
    if not 0.0 < alpha < 2.0:
        raise InvalidParameterError(f"alpha must lie in the open interval (0, 2), got {alpha}")

    scale = 2.0 * math.cos(math.pi * alpha / 4.0) ** (2.0 / alpha)
    if not (math.isfinite(scale) and scale > 0.0):
        raise NumericalDegeneracyError(
            f"Subordinator scale degenerated to {scale} for alpha={alpha}"
        )

    return SubordinatorParameters(
        tail_index=alpha / 2.0,
        skewness=1.0,
        scale=scale,
        location=0.0,
    )


class LevyStableSampler(SubordinatorSampler):
    """
    Subordinator drawn with :data:`scipy.stats.levy_stable`.

    The sampler owns a private ``levy_stable`` object pinned to S1, so the
    module-level ``levy_stable.parameterization`` is neither read nor touched.
    """

    backend: ClassVar[SubordinatorBackend] = SubordinatorBackend.LEVY_STABLE_S1
    convention: ClassVar[StableConvention] = StableConvention.S1

    def __init__(self) -> None:
        self._law: Any = type(levy_stable)(name="levy_stable")
        self._law.parameterization = self.convention.value

    def sample(
        self, n: int, parameters: SubordinatorParameters, rng: np.random.Generator
    ) -> NumericArray:
        draws = self._law.rvs(
            parameters.tail_index,
            parameters.skewness,
            loc=parameters.location_in(self.convention),
            scale=parameters.scale,
            size=n,
            random_state=rng,
        )
        return np.asarray(draws, dtype=np.float64).reshape(n)


class PyroStableSampler(SubordinatorSampler):
    """
    Subordinator drawn with :class:`pyro.distributions.Stable`.

    Pyro runs its own Chambers-Mallows-Stuck transform on the torch generator.
    Each call seeds a forked torch CPU state from ``rng``, so the global torch
    state is left as it was and equal seeds give equal draws.

    Raises
    ------
    BackendUnavailableError
        On construction, if ``pyro-ppl`` is not installed.
    """

    backend: ClassVar[SubordinatorBackend] = SubordinatorBackend.PYRO_STABLE
    convention: ClassVar[StableConvention] = StableConvention.S0

    def __init__(self) -> None:
        try:
            import torch
            from pyro.distributions import Stable
        except ImportError as exc:
            raise BackendUnavailableError(
                f"Subordinator backend '{self.backend}' needs the pyro-ppl package"
            ) from exc
        self._torch: Any = torch
        self._stable: Any = Stable

    def sample(
        self, n: int, parameters: SubordinatorParameters, rng: np.random.Generator
    ) -> NumericArray:
        torch = self._torch

        def as_tensor(value: float) -> Any:
            return torch.tensor(value, dtype=torch.float64)

        law = self._stable(
            as_tensor(parameters.tail_index),
            as_tensor(parameters.skewness),
            scale=as_tensor(parameters.scale),
            loc=as_tensor(parameters.location_in(self.convention)),
            coords=self.convention.value,
        )
        seed = int(rng.integers(np.iinfo(np.int64).max))
        with torch.random.fork_rng(devices=[]):
            torch.manual_seed(seed)
            draws = law.sample(torch.Size((n,)))
        return np.asarray(draws.numpy(), dtype=np.float64).reshape(n)


_BACKENDS: dict[SubordinatorBackend, type[SubordinatorSampler]] = {
    SubordinatorBackend.LEVY_STABLE_S1: LevyStableSampler,
    SubordinatorBackend.PYRO_STABLE: PyroStableSampler,
}


def resolve_subordinator_sampler(
    backend: SubordinatorBackend | str,
) -> SubordinatorSampler:
    """
    Instantiate the sampler behind ``backend``.

    Parameters
    ----------
    backend : SubordinatorBackend or str
        Backend member or its string value, e.g. ``"pyro_stable"``.

    Returns
    -------
    SubordinatorSampler
        A fresh, stateless sampler.

    Raises
    ------
    BackendUnavailableError
        If ``backend`` does not name a known backend or its library is not
        installed.
    """
    try:
        member = SubordinatorBackend(backend)
    except ValueError as exc:
        known = ", ".join(b.value for b in SubordinatorBackend)
        raise BackendUnavailableError(
            f"Unknown subordinator backend {backend!r}; available backends: {known}"
        ) from exc

    sampler_class = _BACKENDS[member]
    logger.debug("Resolved subordinator backend %s -> %s", member, sampler_class.__name__)
    return sampler_class()


def sample_one_sided_stable(
    n: int,
    parameters: SubordinatorParameters,
    backend: SubordinatorBackend | str = SubordinatorBackend.LEVY_STABLE_S1,
    rng: SeedLike = None,
) -> NumericArray:
    """
    Draw ``n`` i.i.d. positive stable variates.

    Parameters
    ----------
    n : int
        Number of variates.
    parameters : SubordinatorParameters
        Law of the subordinator, see :func:`subordinator_parameters`.
    backend : SubordinatorBackend or str, optional
        Library used for the draws.
    rng : int, SeedSequence, Generator or None, optional
        Seed or generator, see :func:`numpy.random.default_rng`.

    Returns
    -------
    numpy.ndarray
        1D array of shape ``(n,)``.
    """
    sampler = resolve_subordinator_sampler(backend)
    logger.debug(
        "Drawing %d subordinator variates with %s: %s", n, sampler.backend, parameters
    )
    return sampler.sample(n, parameters, np.random.default_rng(rng))
