"""
Distribution Interface
======================

The :class:`Distribution` protocol is what sampling strategies see of a
distribution: its type and the strategy that draws from it.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Any

    from pysatl_mvss.distributions.sampling import Sample
    from pysatl_mvss.distributions.strategies import SamplingStrategy
    from pysatl_mvss.types import DistributionType


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by sampling strategies."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...

    def sample(self, n: int, **options: Any) -> Sample:
        return self.sampling_strategy.sample(n, distr=self, **options)
