"""
Concrete distribution instances with specific parameter values.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_mvss.distributions.distribution import Distribution
from pysatl_mvss.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from typing import Any

    from pysatl_mvss.distributions.sampling import Sample
    from pysatl_mvss.distributions.strategies import SamplingStrategy
    from pysatl_mvss.families.parametric_family import ParametricFamily
    from pysatl_mvss.families.parametrizations import Parametrization
    from pysatl_mvss.types import DistributionType


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : DistributionType
        Type of this distribution.
    parameters : Parametrization
        Parameter values as given by the user.
    base_parameters : Parametrization
        The same parameters in the base parametrization of the family.
    """

    family_name: str
    _distribution_type: DistributionType
    parameters: Parametrization
    base_parameters: Parametrization

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def parametrization_name(self) -> str:
        """Name of the parametrization the distribution was created with."""
        return self.parameters.name

    @property
    def family(self) -> ParametricFamily:
        """The parametric family this distribution belongs to."""
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Get the sampling strategy for this distribution."""
        return self.family.sampling_strategy

    def sample(self, n: int, **options: Any) -> Sample:
        """
        Generate samples from this distribution.

        Parameters
        ----------
        n : int
            Number of observations to generate.
        **options : Any
            Passed to the sampling strategy (e.g. ``backend``, ``rng``).

        Returns
        -------
        Sample
            Generated observations.
        """
        return self.sampling_strategy.sample(n, distr=self, **options)
