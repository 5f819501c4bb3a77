"""
Sampler -- random draws from a fitted distribution.

Precomputes the mean and the square-root transformation matrix S once, then
maps standard-normal draws Z through Z @ S + mean.
"""

from typing import Optional, Union

import numpy as np

from uapca.core.eigen import transformation_matrix


class Sampler:
    """
    Draw samples from a distribution with mean and covariance.

    Args:
        distribution: any Distribution (MultivariateNormal, Point, ...).
        seed: seed or Generator for numpy.random.default_rng.
    """

    def __init__(self, distribution, seed: Optional[Union[int, np.random.Generator]] = None):
        self._mean = np.array(distribution.mean(), dtype=np.float64)
        self._A = transformation_matrix(distribution)
        self._rng = np.random.default_rng(seed)

    @property
    def n_dims(self) -> int:
        return self._mean.shape[0]

    def sample_n(self, count: int) -> np.ndarray:
        """
        Draw count independent samples.

        Returns:
            (count, d) array, one sample per row.
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")

        # Rows of Z are samples, so S multiplies from the right
        Z = self._rng.standard_normal((count, self.n_dims))
        return Z @ self._A + self._mean

    def sample(self) -> np.ndarray:
        """Draw a single sample, shape (d,)."""
        return self.sample_n(1)[0]
