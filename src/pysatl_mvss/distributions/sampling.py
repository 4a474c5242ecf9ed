"""
Sampling Interfaces
===================

Sample containers returned by sampling strategies.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_mvss.types import NumericArray


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> NumericArray: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Array-backed sample of ``n`` observations in ``R^d``.

    Parameters
    ----------
    data : numpy.ndarray
        2D array of shape ``(n, d)``; row ``i`` is observation ``i``.

    Raises
    ------
    ValueError
        If data is not 2D.
    """

    dimension: int
    data: NumericArray

    def __init__(self, data: NumericArray) -> None:
        data = np.asarray(data, dtype=np.float64)
        if data.ndim != 2:
            raise ValueError(f"ArraySample expects 2D array of shape (n, d), got {data.shape}.")
        self.data = data
        self.dimension = int(data.shape[1])

    def __len__(self) -> int:
        """Return the number of observations (n)."""
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[NumericArray]:
        """Iterate over observations (rows)."""
        yield from self.data

    def __repr__(self) -> str:
        return f"ArraySample(n={len(self)}, dimension={self.dimension})"

    @property
    def array(self) -> NumericArray:
        """Return the backing ``(n, d)`` array."""
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        n, d = self.data.shape
        return int(n), int(d)
