"""
Distributions subpackage

Interfaces and default implementations for the distributions of PySATL MVSS:

- distribution protocol (:mod:`.distribution`);
- sampling protocol and array-backed samples (:mod:`.sampling`);
- pluggable sampling strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .distribution import Distribution
from .sampling import ArraySample, Sample
from .strategies import (
    SamplingStrategy,
    SubgaussianStableSamplingStrategy,
    check_sample_size,
)

__all__ = [
    # distribution
    "Distribution",
    # sampling
    "Sample",
    "ArraySample",
    # strategies
    "SamplingStrategy",
    "SubgaussianStableSamplingStrategy",
    "check_sample_size",
]
