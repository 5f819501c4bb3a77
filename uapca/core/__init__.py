"""
UaPCA Core
==========

Pure computation: arrays and distributions in, distributions and arrays out.
No file I/O.

Structure:
    distribution.py - Distribution interfaces, MultivariateNormal, Point
    eigen.py        - Symmetric eigendecomposition, transformation matrix
    sampler.py      - Sampler (random draws via the transformation matrix)
    uapca.py        - UaPCA fit / transform
    tracer.py       - Factor tracer
    flatten.py      - polars views of components and distributions
"""

from uapca.core.distribution import (
    Distribution,
    Projection,
    AffineTransformation,
    MultivariateNormal,
    Point,
)
from uapca.core.eigen import (
    symmetric_eigendecomposition,
    sort_components,
    clamp_eigenvalues,
    transformation_matrix,
)
from uapca.core.sampler import Sampler
from uapca.core.uapca import (
    UaPCA,
    fit,
    transform,
    arithmetic_mean,
    outer_product,
    centering,
)
from uapca.core.tracer import FactorTracer, get_factor_tracer
from uapca.core.flatten import flatten_components, flatten_distributions

__all__ = [
    # Distributions
    'Distribution',
    'Projection',
    'AffineTransformation',
    'MultivariateNormal',
    'Point',
    # Eigen
    'symmetric_eigendecomposition',
    'sort_components',
    'clamp_eigenvalues',
    'transformation_matrix',
    # Sampling
    'Sampler',
    # UaPCA
    'UaPCA',
    'fit',
    'transform',
    'arithmetic_mean',
    'outer_product',
    'centering',
    # Tracer
    'FactorTracer',
    'get_factor_tracer',
    # Tables
    'flatten_components',
    'flatten_distributions',
]
