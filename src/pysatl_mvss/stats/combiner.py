"""
Combiner of the subordinator and Gaussian stages.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_mvss.errors import InvalidParameterError, NumericalDegeneracyError

if TYPE_CHECKING:
    from pysatl_mvss.types import NumericArray, VectorLike


def combine(
    subordinator: VectorLike, gaussian: VectorLike, delta: VectorLike
) -> NumericArray:
    """
    Compute ``sqrt(subordinator[i]) * gaussian[i] + delta`` for every row.

    Parameters
    ----------
    subordinator : array_like
        Non-negative draws of shape ``(n,)``.
    gaussian : array_like
        Gaussian draws of shape ``(n, d)``. Row ``i`` is paired with
        ``subordinator[i]``.
    delta : array_like
        Location vector of length ``d``.

    Returns
    -------
    numpy.ndarray
        Array of shape ``(n, d)``.

    Raises
    ------
    InvalidParameterError
        If the shapes do not pair up.
    NumericalDegeneracyError
        If a subordinator draw is negative or not finite.
    """
    a = np.asarray(subordinator, dtype=np.float64)
    g = np.asarray(gaussian, dtype=np.float64)
    loc = np.asarray(delta, dtype=np.float64)

    if a.ndim != 1:
        raise InvalidParameterError(f"Subordinator draws must be 1D, got shape {a.shape}")
    if g.ndim != 2:
        raise InvalidParameterError(f"Gaussian draws must be 2D, got shape {g.shape}")
    if g.shape[0] != a.shape[0]:
        raise InvalidParameterError(
            f"Got {a.shape[0]} subordinator draws for {g.shape[0]} Gaussian draws"
        )
    if loc.shape != (g.shape[1],):
        raise InvalidParameterError(
            f"delta must have length {g.shape[1]}, got shape {loc.shape}"
        )

    bad = ~np.isfinite(a) | (a < 0.0)
    if bad.any():
        first = int(np.flatnonzero(bad)[0])
        raise NumericalDegeneracyError(
            f"{int(bad.sum())} subordinator draw(s) are negative or not finite "
            f"(first at row {first}: {a[first]!r})"
        )

    return np.sqrt(a)[:, np.newaxis] * g + loc
