"""
Core Type Definitions
=====================

Fundamental types and aliases shared by the sampling stages, the parametric
family machinery and the public API.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

import numpy as np
from numpy.typing import ArrayLike, NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    CONTINUOUS : str
        Continuous probability distribution.
    """

    CONTINUOUS = "continuous"


class DistributionType:
    """Base class for distribution type descriptors."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution type for Euclidean space distributions.

    Parameters
    ----------
    kind : Kind
        Distribution kind.
    dimension : int
        Spatial dimension ``d`` of a single observation.
    """

    kind: Kind
    dimension: int


def multivariate_continuous(dimension: int) -> EuclideanDistributionType:
    """Type of a continuous distribution on ``R^dimension``."""
    return EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=dimension)


NumericArray = NDArray[np.float64]
"""Type alias for the float arrays produced by the samplers."""

MatrixLike = ArrayLike
"""Anything :func:`numpy.asarray` turns into a 2D matrix (nested lists, arrays)."""

VectorLike = ArrayLike
"""Anything :func:`numpy.asarray` turns into a 1D vector."""

SeedLike = int | np.random.SeedSequence | np.random.Generator | None
"""Accepted forms of a random seed, see :func:`numpy.random.default_rng`."""

ParametrizationName: TypeAlias = str
"""Type alias for parametrization names."""


class FamilyName(StrEnum):
    SUBGAUSSIAN_STABLE = "SubgaussianStable"


__all__ = [
    "Kind",
    "DistributionType",
    "EuclideanDistributionType",
    "multivariate_continuous",
    "NumericArray",
    "MatrixLike",
    "VectorLike",
    "SeedLike",
    "ParametrizationName",
    "FamilyName",
]
