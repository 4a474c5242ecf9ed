"""
Functional entry point for drawing subgaussian stable vectors.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_mvss.distributions.strategies import check_sample_size
from pysatl_mvss.errors import InvalidParameterError
from pysatl_mvss.families.configuration import configure_families_register
from pysatl_mvss.stats.api import SubordinatorBackend
from pysatl_mvss.types import FamilyName

if TYPE_CHECKING:
    from pysatl_mvss.types import MatrixLike, NumericArray, SeedLike, VectorLike


def generate(
    n: int,
    alpha: float = 1.0,
    Q: MatrixLike | None = None,  # noqa: N803
    delta: VectorLike | None = None,
    subordinator_backend: SubordinatorBackend | str = SubordinatorBackend.LEVY_STABLE_S1,
    rng: SeedLike = None,
) -> NumericArray:
    """
    Draw ``n`` vectors from the multivariate subgaussian stable distribution.

    Parameters
    ----------
    n : int
        Number of observations, positive.
    alpha : float, default 1.0
        Tail index, ``0 < alpha < 2``. The default gives the multivariate
        Cauchy law.
    Q : array_like
        ``d x d`` symmetric positive semi-definite shape matrix. Required.
    delta : array_like, optional
        Location vector of length ``d``. Defaults to the zero vector.
    subordinator_backend : SubordinatorBackend or str, optional
        Library that draws the positive stable subordinator.
    rng : int, SeedSequence, Generator or None, optional
        Seed or generator. The same seed and parameters give the same output.

    Returns
    -------
    numpy.ndarray
        Array of shape ``(n, d)``.

    Raises
    ------
    InvalidParameterError
        If ``n``, ``alpha``, ``Q`` or ``delta`` is invalid.
    BackendUnavailableError
        If ``subordinator_backend`` is unknown.
    NumericalDegeneracyError
        If sampling produced numerically invalid values.

    Examples
    --------
    Ten draws of a bivariate law:

        >>> generate(10, alpha=1.71, Q=[[10, 7.5], [7.5, 10]]).shape
        (10, 2)
    """
    check_sample_size(n)
    if Q is None:
        raise InvalidParameterError("The shape matrix Q is required")

    family = configure_families_register().get(FamilyName.SUBGAUSSIAN_STABLE)
    distr = family(alpha=alpha, Q=Q, delta=delta)
    return distr.sample(n, backend=subordinator_backend, rng=rng).array
