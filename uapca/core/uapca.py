"""
Uncertainty-aware PCA Engine.

PCA over distributions instead of points. Each distribution contributes its
mean AND its own covariance to the aggregate second-moment matrix:

    center = outer(mean of means)
    M      = mean_i( outer(mean_i) + scale^2 * cov_i - center )

M is the covariance of the means plus the (scaled) average covariance. Its
eigenvectors, ordered by eigenvalue, are the principal directions; a
leading prefix of them projects distributions with the affine law.

fit and transform are decoupled: a basis learned on one collection can be
applied to any other collection of the same dimensionality.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import numpy as np

from uapca.config import get_config
from uapca.core.eigen import sort_components, symmetric_eigendecomposition
from uapca.errors import DimensionMismatch, EmptyInput
from uapca.validation import (
    as_matrix,
    as_vector,
    check_component_count,
    require_distributions,
)

logger = logging.getLogger(__name__)


def outer_product(x: np.ndarray) -> np.ndarray:
    """x @ x.T for a vector x."""
    x = np.asarray(x, dtype=np.float64).reshape(-1)
    return np.outer(x, x)


def arithmetic_mean(arrays: Sequence[np.ndarray]) -> np.ndarray:
    """Element-wise mean of equally shaped arrays."""
    if len(arrays) == 0:
        raise EmptyInput("Cannot average an empty sequence")

    total = np.zeros_like(np.asarray(arrays[0], dtype=np.float64))
    for a in arrays:
        total = total + a
    return total / len(arrays)


def centering(means: Sequence[np.ndarray]) -> np.ndarray:
    """Outer product of the mean of the distribution means."""
    return outer_product(arithmetic_mean(means))


def _moments(distributions: List, n_dims: int):
    means = []
    covs = []
    for i, d in enumerate(distributions):
        means.append(as_vector(d.mean(), 'mean'))
        cov = as_matrix(d.covariance(), 'covariance')
        if cov.shape != (n_dims, n_dims):
            raise DimensionMismatch(
                (n_dims, n_dims), cov.shape,
                f"Distribution {i} has covariance {cov.shape}, expected ({n_dims}, {n_dims})",
            )
        covs.append(cov)
    return means, covs


@dataclass(frozen=True, eq=False)
class UaPCA:
    """
    Fitted uncertainty-aware principal components.

    Attributes:
        lengths: (d,) eigenvalues, descending.
        vectors: (d, d) row matrix; vectors[i] is the direction of lengths[i].
        scale: covariance weight used when fitting.
    """
    lengths: np.ndarray
    vectors: np.ndarray
    scale: float = 1.0

    @classmethod
    def fit(cls, distributions: Iterable, scale: Optional[float] = None) -> 'UaPCA':
        """
        Fit principal components to a collection of distributions.

        Args:
            distributions: non-empty iterable of objects with mean() and
                covariance(), all of the same dimensionality.
            scale: weight of each distribution's own covariance. Defaults
                to the configured default_scale (1.0).

        Returns:
            UaPCA
        """
        dists, n_dims = require_distributions(distributions)
        if scale is None:
            scale = get_config().default_scale
        scale = float(scale)

        means, covs = _moments(dists, n_dims)
        center = centering(means)
        empirical_cov = arithmetic_mean([
            outer_product(m) + (scale * scale) * c - center
            for m, c in zip(means, covs)
        ])

        eigenvalues, eigenvectors = symmetric_eigendecomposition(empirical_cov)
        lengths, vectors = sort_components(eigenvalues, eigenvectors)

        logger.debug(
            f"UaPCA fit: n={len(dists)}, d={n_dims}, scale={scale}, "
            f"lambda_max={lengths[0]:.6g}, lambda_min={lengths[-1]:.6g}"
        )

        lengths = np.array(lengths, copy=True)
        vectors = np.array(vectors, copy=True)
        lengths.flags.writeable = False
        vectors.flags.writeable = False
        return cls(lengths=lengths, vectors=vectors, scale=scale)

    @property
    def n_components(self) -> int:
        return self.lengths.shape[0]

    def explained_ratio(self) -> np.ndarray:
        """Fraction of the aggregate variance per component."""
        total = float(self.lengths.sum())
        if total <= 0:
            return np.zeros_like(self.lengths)
        return self.lengths / total

    def projection_matrix(self, components: int) -> np.ndarray:
        """The first `components` principal directions as a (k, d) row matrix."""
        components = check_component_count(components, self.n_components)
        return np.array(self.vectors[:components], copy=True)

    def transform(self, distributions: Iterable, components: int) -> List:
        """
        Project distributions onto the leading principal directions.

        Args:
            distributions: objects supporting project(); need not be the
                ones passed to fit.
            components: number of leading components, 1 <= k <= d.

        Returns:
            List of k-dimensional distributions, same order as the input.
        """
        P = self.projection_matrix(components)

        projected = []
        for i, d in enumerate(distributions):
            if not callable(getattr(d, 'project', None)):
                raise TypeError(f"Element {i} ({type(d).__name__}) does not support project()")
            projected.append(d.project(P))
        return projected


def fit(distributions: Iterable, scale: Optional[float] = None) -> UaPCA:
    """Module-level alias for UaPCA.fit."""
    return UaPCA.fit(distributions, scale=scale)


def transform(pca: UaPCA, distributions: Iterable, components: int) -> List:
    """Module-level alias for pca.transform(distributions, components)."""
    return pca.transform(distributions, components)
