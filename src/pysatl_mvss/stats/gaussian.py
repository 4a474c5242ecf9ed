"""
Gaussian core sampler: zero-mean multivariate normal draws with an explicit
covariance matrix.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

import numpy as np
from scipy.stats import multivariate_normal

from pysatl_mvss.errors import InvalidParameterError, NumericalDegeneracyError

if TYPE_CHECKING:
    from pysatl_mvss.types import MatrixLike, NumericArray, SeedLike

logger = logging.getLogger(__name__)


def sample_mvnormal(n: int, covariance: MatrixLike, rng: SeedLike = None) -> NumericArray:
    """
    Draw ``n`` i.i.d. vectors from ``N(0, covariance)``.

    The covariance is used as given. Singular positive semi-definite matrices
    are accepted, and the draws then live on the corresponding subspace.

    Parameters
    ----------
    n : int
        Number of vectors.
    covariance : array_like
        ``d x d`` symmetric positive semi-definite matrix.
    rng : int, SeedSequence, Generator or None, optional
        Seed or generator, see :func:`numpy.random.default_rng`.

    Returns
    -------
    numpy.ndarray
        Array of shape ``(n, d)``, also for ``n == 1`` or ``d == 1``.

    Raises
    ------
    InvalidParameterError
        If ``covariance`` is not a square matrix or is not positive
        semi-definite.
    NumericalDegeneracyError
        If the decomposition of ``covariance`` fails numerically.
    """
    cov = np.asarray(covariance, dtype=np.float64)
    if cov.ndim != 2 or cov.shape[0] != cov.shape[1]:
        raise InvalidParameterError(f"Covariance must be a square matrix, got shape {cov.shape}")

    d = cov.shape[0]
    try:
        law = multivariate_normal(mean=np.zeros(d), cov=cov, allow_singular=True)
    except np.linalg.LinAlgError as exc:
        raise NumericalDegeneracyError(f"Could not decompose the covariance: {exc}") from exc
    except ValueError as exc:
        # scipy reports an indefinite covariance as a ValueError
        raise InvalidParameterError(str(exc)) from exc

    logger.debug("Drawing %d Gaussian vectors of dimension %d", n, d)
    draws = law.rvs(size=n, random_state=np.random.default_rng(rng))
    return np.asarray(draws, dtype=np.float64).reshape(n, d)
