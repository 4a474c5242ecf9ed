from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from typing import Any, ClassVar

import numpy as np
import numpy.typing as npt

from pysatl_mvss.stats.api import SubordinatorBackend, SubordinatorSampler
from pysatl_mvss.stats.subordinator import SubordinatorParameters
from pysatl_mvss.types import multivariate_continuous


@dataclass
class ShapeParameters:
    """Stand-in for the base parametrization of the subgaussian family."""

    alpha: float
    Q: npt.NDArray[np.float64]
    delta: npt.NDArray[np.float64]

    @property
    def dimension(self) -> int:
        return int(self.Q.shape[0])


@dataclass
class StubDistribution:
    """Minimal distribution exposing what the sampling strategy reads."""

    base_parameters: ShapeParameters
    sampling_strategy: Any = None

    @property
    def distribution_type(self) -> Any:
        return multivariate_continuous(self.base_parameters.dimension)


def make_stub_distribution(
    alpha: float = 1.5,
    Q: Any = ((2.0, 0.5), (0.5, 1.0)),  # noqa: N803
    delta: Any = None,
) -> StubDistribution:
    shape = np.asarray(Q, dtype=np.float64)
    loc = np.zeros(shape.shape[0]) if delta is None else np.asarray(delta, dtype=np.float64)
    return StubDistribution(ShapeParameters(alpha, shape, loc))


@dataclass
class ConstantSubordinatorSampler(SubordinatorSampler):
    """Returns a fixed value for every draw and records the calls."""

    value: float = 1.0
    calls: list[int] = field(default_factory=list)
    backend: ClassVar[SubordinatorBackend] = SubordinatorBackend.LEVY_STABLE_S1

    def sample(
        self, n: int, parameters: SubordinatorParameters, rng: np.random.Generator
    ) -> npt.NDArray[np.float64]:
        self.calls.append(n)
        return np.full(n, self.value)
