"""
Subgaussian stable distribution family implementation.

Contains the SubgaussianStable family with shape-matrix and isotropic
parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from numbers import Integral
from typing import TYPE_CHECKING, Any, cast

import numpy as np

from pysatl_mvss.errors import InvalidParameterError
from pysatl_mvss.families.parametric_family import ParametricFamily
from pysatl_mvss.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_mvss.families.registry import ParametricFamilyRegister
from pysatl_mvss.types import FamilyName, multivariate_continuous

if TYPE_CHECKING:
    from pysatl_mvss.types import EuclideanDistributionType, NumericArray

# Relative tolerance of the symmetry and positive semi-definiteness checks
PSD_TOLERANCE = 1e-10


def _as_float(value: Any, name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"{name} must be a real number, got {value!r}") from exc


def _as_float_array(value: Any, name: str) -> NumericArray:
    try:
        return np.asarray(value, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"{name} must be a real array, got {value!r}") from exc


def _location(delta: Any, dimension: int) -> NumericArray:
    if delta is None:
        return np.zeros(dimension)
    return _as_float_array(delta, "delta")


def configure_subgaussian_stable_family() -> None:
    """
    Configure and register the SubgaussianStable distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.SUBGAUSSIAN_STABLE):
        return

    SUBGAUSSIAN_STABLE_DOC = """
    Multivariate subgaussian stable distribution.

    An elliptically contoured law on R^d obtained by mixing a Gaussian vector
    with an independent positive stable scale:

        X = sqrt(A) * G + delta,
        A ~ S(alpha/2, 1, 2 cos(pi alpha / 4)^(2/alpha), 0; 1),
        G ~ N(0, Q).

    Its characteristic function is

        E exp(i <u, X>) = exp(-(u' Q u)^(alpha/2) + i <u, delta>),

    so every projection <u, X> is symmetric alpha-stable with scale
    sqrt(u' Q u). Smaller alpha gives heavier tails; as alpha -> 2 the law
    tends to N(delta, 2 Q).

    References: Nolan JP (2013), Multivariate elliptically contoured stable
    distributions: theory and estimation. Comput Stat 28:2067-2089.
    """

    def _distr_type(parameters: Parametrization) -> EuclideanDistributionType:
        parameters = cast(_ShapeMatrix, parameters)
        return multivariate_continuous(parameters.dimension)

    SubgaussianStable = ParametricFamily(
        name=FamilyName.SUBGAUSSIAN_STABLE,
        distr_type=_distr_type,
        distr_parametrizations=["shapeMatrix", "isotropic"],
    )
    SubgaussianStable.__doc__ = SUBGAUSSIAN_STABLE_DOC

    @parametrization(family=SubgaussianStable, name="shapeMatrix")
    class _ShapeMatrix(Parametrization):
        """
        Standard parametrization of the subgaussian stable distribution.

        Parameters
        ----------
        alpha : float
            Tail index, ``0 < alpha < 2``.
        Q : array_like
            ``d x d`` symmetric positive semi-definite shape matrix.
        delta : array_like or None
            Location vector of length ``d``; the zero vector if ``None``.
        """

        alpha: float
        Q: NumericArray
        delta: NumericArray | None = None

        def __post_init__(self) -> None:
            shape = _as_float_array(self.Q, "Q")
            object.__setattr__(self, "alpha", _as_float(self.alpha, "alpha"))
            object.__setattr__(self, "Q", shape)
            dimension = shape.shape[0] if shape.ndim == 2 else 0
            object.__setattr__(self, "delta", _location(self.delta, dimension))

        @property
        def dimension(self) -> int:
            """Dimension ``d`` of the observations."""
            return int(self.Q.shape[0])

        @constraint(description="0 < alpha < 2")
        def check_alpha_range(self) -> bool:
            """Check that the tail index lies in the open interval (0, 2)."""
            return 0.0 < self.alpha < 2.0

        @constraint(description="Q is a non-empty square matrix")
        def check_q_square(self) -> bool:
            return self.Q.ndim == 2 and self.Q.shape[0] == self.Q.shape[1] and self.Q.size > 0

        @constraint(description="Q is finite")
        def check_q_finite(self) -> bool:
            return bool(np.isfinite(self.Q).all())

        @constraint(description="Q is symmetric")
        def check_q_symmetric(self) -> bool:
            magnitude = max(1.0, float(np.abs(self.Q).max()))
            return bool(np.allclose(self.Q, self.Q.T, rtol=0.0, atol=PSD_TOLERANCE * magnitude))

        @constraint(description="Q is positive semi-definite")
        def check_q_psd(self) -> bool:
            """Check the smallest eigenvalue, allowing round-off below zero."""
            eigenvalues = np.linalg.eigvalsh(self.Q)
            magnitude = max(1.0, float(np.abs(eigenvalues).max()))
            return bool(eigenvalues.min() >= -PSD_TOLERANCE * magnitude)

        @constraint(description="len(delta) == dim(Q)")
        def check_delta_dimension(self) -> bool:
            return cast(np.ndarray, self.delta).shape == (self.dimension,)

        @constraint(description="delta is finite")
        def check_delta_finite(self) -> bool:
            return bool(np.isfinite(cast(np.ndarray, self.delta)).all())

    @parametrization(family=SubgaussianStable, name="isotropic")
    class _Isotropic(Parametrization):
        """
        Isotropic (radially symmetric) parametrization.

        Parameters
        ----------
        alpha : float
            Tail index, ``0 < alpha < 2``.
        gamma : float
            Stable scale of every unit-length projection.
        dimension : int
            Dimension ``d`` of the observations.
        delta : array_like or None
            Location vector of length ``d``; the zero vector if ``None``.
        """

        alpha: float
        gamma: float
        dimension: int
        delta: NumericArray | None = None

        def __post_init__(self) -> None:
            object.__setattr__(self, "alpha", _as_float(self.alpha, "alpha"))
            object.__setattr__(self, "gamma", _as_float(self.gamma, "gamma"))
            dimension = self.dimension if isinstance(self.dimension, Integral) else 0
            object.__setattr__(self, "delta", _location(self.delta, int(dimension)))

        @constraint(description="0 < alpha < 2")
        def check_alpha_range(self) -> bool:
            return 0.0 < self.alpha < 2.0

        @constraint(description="gamma > 0")
        def check_gamma_positive(self) -> bool:
            return bool(np.isfinite(self.gamma)) and self.gamma > 0

        @constraint(description="dimension is a positive integer")
        def check_dimension(self) -> bool:
            return (
                isinstance(self.dimension, Integral)
                and not isinstance(self.dimension, bool)
                and self.dimension >= 1
            )

        @constraint(description="len(delta) == dimension")
        def check_delta_dimension(self) -> bool:
            return cast(np.ndarray, self.delta).shape == (self.dimension,)

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to the shape-matrix parametrization, ``Q = gamma^2 I``.
            """
            shape = self.gamma**2 * np.eye(int(self.dimension))
            return _ShapeMatrix(alpha=self.alpha, Q=shape, delta=self.delta)  # type: ignore[call-arg]

    ParametricFamilyRegister.register(SubgaussianStable)
