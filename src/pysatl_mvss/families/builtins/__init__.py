"""
Built-in distribution families for PySATL MVSS.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_mvss.families.builtins.subgaussian_stable import (
    configure_subgaussian_stable_family,
)

__all__ = [
    "configure_subgaussian_stable_family",
]
