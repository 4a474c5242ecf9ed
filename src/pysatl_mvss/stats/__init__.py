"""
Sampling stages of the subgaussian stable law
=============================================

- parameter mapping and backends of the positive stable subordinator
  (:mod:`.subordinator`, contracts in :mod:`.api`);
- the zero-mean Gaussian core (:mod:`.gaussian`);
- the combiner that mixes both into the final sample (:mod:`.combiner`).

The multivariate normal draws come from :mod:`scipy.stats`. The univariate
stable draws come from :mod:`scipy.stats` or, optionally, from Pyro.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from pysatl_mvss.stats.api import (
    SamplingConfig,
    StableConvention,
    SubordinatorBackend,
    SubordinatorSampler,
)
from pysatl_mvss.stats.combiner import combine
from pysatl_mvss.stats.gaussian import sample_mvnormal
from pysatl_mvss.stats.subordinator import (
    LevyStableSampler,
    PyroStableSampler,
    SubordinatorParameters,
    resolve_subordinator_sampler,
    sample_one_sided_stable,
    subordinator_parameters,
)

__all__ = [
    "SamplingConfig",
    "StableConvention",
    "SubordinatorBackend",
    "SubordinatorSampler",
    "SubordinatorParameters",
    "LevyStableSampler",
    "PyroStableSampler",
    "subordinator_parameters",
    "resolve_subordinator_sampler",
    "sample_one_sided_stable",
    "sample_mvnormal",
    "combine",
]
