"""
Factor Tracer -- scaled principal axes of the projected uncertainty ellipsoid.

The basis is fitted once at construction. Each call scales the principal
directions by scale * sqrt(lambda_i) and projects them through the same
top-k basis used by UaPCA.transform:

    axis_i  = scale * sqrt(lambda_i) * v_i      (original space)
    point_i = vectors[:k] @ axis_i              (k-dimensional)

Two scales are involved and they are kept apart:
    fit scale   weights the input covariances when the basis is fitted
                (get_factor_tracer(..., scale=...), default_scale if omitted)
    call scale  multiplies sqrt(lambda_i) when tracing (tracer(scale))
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

from uapca.core.distribution import Point
from uapca.core.eigen import clamp_eigenvalues
from uapca.core.uapca import UaPCA
from uapca.validation import check_component_count, require_distributions


@dataclass(frozen=True, eq=False)
class FactorTracer:
    """
    Callable from a scale to k projected axis points.

    Attributes:
        pca: the fitted basis.
        components: target dimensionality k.
    """
    pca: UaPCA
    components: int

    def axes(self, scale: float) -> np.ndarray:
        """Projected axis vectors stacked as a (k, k) array, row i = axis i."""
        k = self.components
        P = self.pca.projection_matrix(k)
        sigma = np.sqrt(clamp_eigenvalues(self.pca.lengths[:k]))

        # Rows of vectors[:k] scaled by scale * sqrt(lambda), then projected
        scaled = (float(scale) * sigma)[:, None] * self.pca.vectors[:k]
        return scaled @ P.T

    def __call__(self, scale: float) -> List[Point]:
        return [Point(row) for row in self.axes(scale)]


def get_factor_tracer(
    distributions: Iterable,
    components: int,
    scale: Optional[float] = None,
) -> FactorTracer:
    """
    Fit UaPCA on distributions and return a tracer for the leading k axes.

    Args:
        distributions: non-empty iterable of distributions.
        components: target dimensionality k, 1 <= k <= d.
        scale: fit-time covariance weight (see module docstring).

    Returns:
        FactorTracer
    """
    dists, n_dims = require_distributions(distributions)
    components = check_component_count(components, n_dims)

    pca = UaPCA.fit(dists, scale=scale)
    return FactorTracer(pca=pca, components=components)
