"""
Distribution Families Configuration
====================================

Registers the built-in parametric families:

- :class:`SubgaussianStable Family`: multivariate subgaussian stable law with
  shape-matrix and isotropic parametrizations.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Registration is lazy and cached; call ``reset_families_register`` to start
  over (used by the tests).
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_mvss.families.builtins import configure_subgaussian_stable_family
from pysatl_mvss.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Register all built-in families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_subgaussian_stable_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
