"""
Distribution Engine.

Gaussian-like distributions described by a mean vector and a covariance
matrix, plus the affine-transformation law used to project them:

    mean' = A @ mean + b
    cov'  = A @ cov @ A.T

Point is the degenerate case: an exact observation with zero covariance.

All instances are immutable. Means are stored as 1-D arrays (the column
vector, flattened); covariances as (d, d) arrays. Both are read-only.
"""

from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from uapca.config import get_config
from uapca.validation import (
    as_matrix,
    as_vector,
    check_covariance,
    check_finite,
    check_linear_map,
    check_translation,
)


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr = np.array(arr, dtype=np.float64, copy=True)
    arr.flags.writeable = False
    return arr


class Distribution(ABC):
    """Anything exposing a mean vector and a covariance matrix."""

    @abstractmethod
    def mean(self) -> np.ndarray:
        """Mean vector, shape (d,)."""

    @abstractmethod
    def covariance(self) -> np.ndarray:
        """Covariance matrix, shape (d, d)."""

    @property
    def n_dims(self) -> int:
        return self.mean().shape[0]


class Projection(ABC):
    """Distributions that can be projected onto a lower dimensional subspace."""

    @abstractmethod
    def project(self, projection_matrix: Any) -> Distribution:
        """
        Project onto the subspace spanned by the rows of projection_matrix.

        Args:
            projection_matrix: (k, d) row matrix.
        """


class AffineTransformation(ABC):
    """Distributions that support an affine map A @ x + b."""

    @abstractmethod
    def affine_transformation(self, A: Any, b: Any) -> Distribution:
        """
        Args:
            A: (k, d) linear map, defined as a row matrix.
            b: translation with k entries (1-D or a (1, k) row vector).
        """


class MultivariateNormal(AffineTransformation, Distribution, Projection):
    """
    Multivariate normal N(mean, covariance).

    Args:
        mean: d values (list, 1-D array, or (d, 1) / (1, d) matrix).
        covariance: (d, d) symmetric positive semi-definite matrix.
    """

    def __init__(self, mean: Any, covariance: Any):
        mean = as_vector(mean, 'mean')
        check_finite(mean, 'mean')
        covariance = as_matrix(covariance, 'covariance')

        config = get_config()
        check_covariance(
            covariance, mean.shape[0], config.symmetry_tolerance, config.psd_tolerance
        )

        self._mean = _frozen(mean)
        self._cov = _frozen(covariance)

    @classmethod
    def _from_arrays(cls, mean: np.ndarray, covariance: np.ndarray) -> 'MultivariateNormal':
        # Results of A @ C @ A.T carry round-off asymmetry; keep them exact.
        obj = cls.__new__(cls)
        obj._mean = _frozen(mean)
        obj._cov = _frozen(covariance)
        return obj

    @classmethod
    def standard(cls, n_dims: int) -> 'MultivariateNormal':
        """Standard normal N(0, I) in n_dims dimensions."""
        return cls(np.zeros(n_dims), np.eye(n_dims))

    def mean(self) -> np.ndarray:
        return self._mean

    def covariance(self) -> np.ndarray:
        return self._cov

    def affine_transformation(self, A: Any, b: Any) -> 'MultivariateNormal':
        A = as_matrix(A, 'A')
        check_linear_map(A, self.n_dims)
        b = as_vector(b, 'b')
        check_translation(b, A.shape[0])

        new_mean = A @ self._mean + b
        new_cov = A @ self._cov @ A.T
        return MultivariateNormal._from_arrays(new_mean, new_cov)

    def project(self, projection_matrix: Any) -> 'MultivariateNormal':
        P = as_matrix(projection_matrix, 'projection_matrix')
        return self.affine_transformation(P, np.zeros(P.shape[0]))

    def __repr__(self):
        return f"MultivariateNormal(mean={self._mean.tolist()}, covariance={self._cov.tolist()})"


class Point(AffineTransformation, Distribution, Projection):
    """An exact observation: a distribution with zero covariance."""

    def __init__(self, data: Any):
        data = as_vector(data, 'data')
        check_finite(data, 'data')
        self._data = _frozen(data)

    def mean(self) -> np.ndarray:
        return self._data

    def data(self) -> np.ndarray:
        """Coordinates of the point."""
        return self._data

    def covariance(self) -> np.ndarray:
        n = self._data.shape[0]
        return np.zeros((n, n))

    def affine_transformation(self, A: Any, b: Any) -> 'Point':
        A = as_matrix(A, 'A')
        check_linear_map(A, self.n_dims)
        b = as_vector(b, 'b')
        check_translation(b, A.shape[0])
        return Point(A @ self._data + b)

    def project(self, projection_matrix: Any) -> 'Point':
        P = as_matrix(projection_matrix, 'projection_matrix')
        check_linear_map(P, self.n_dims)
        return Point(P @ self._data)

    def __repr__(self):
        return f"Point({self._data.tolist()})"
