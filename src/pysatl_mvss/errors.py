"""
Error Types
===========

Exceptions raised by the sampler. Each one also derives from the built-in
exception that callers would expect (``ValueError``, ``LookupError``,
``RuntimeError``), so generic handlers keep working.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class MvssError(Exception):
    """Base class for all sampler errors."""


class InvalidParameterError(MvssError, ValueError):
    """
    A distribution parameter or the sample size is invalid.

    Raised for ``alpha`` outside ``(0, 2)``, a shape matrix that is not
    square, symmetric or positive semi-definite, a location vector whose
    length does not match the shape matrix, and a non-positive or
    non-integral sample size.
    """


class BackendUnavailableError(MvssError, LookupError):
    """The requested subordinator backend is not known to this runtime."""


class NumericalDegeneracyError(MvssError, RuntimeError):
    """
    Sampling produced, or would produce, numerically invalid values.

    Raised when a subordinator draw is negative or non-finite, when the
    subordinator scale degenerates, or when the Gaussian sampler fails on
    its covariance matrix.
    """


__all__ = [
    "MvssError",
    "InvalidParameterError",
    "BackendUnavailableError",
    "NumericalDegeneracyError",
]
