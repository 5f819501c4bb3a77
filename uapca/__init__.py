"""
UaPCA — uncertainty-aware principal component analysis.

Public API:
    from uapca import MultivariateNormal, Point, UaPCA, get_factor_tracer

    dists = [MultivariateNormal([0, 0], [[1, 0], [0, 1]]),
             MultivariateNormal([1, 1], [[1, 0], [0, 1]])]
    pca = UaPCA.fit(dists)
    projected = pca.transform(dists, 1)

    tracer = get_factor_tracer(dists, 2)
    axes = tracer(2.0)          # [Point, Point]

Layers:
    uapca.core        Distributions, eigen helpers, fit/transform, tracer, sampler
    uapca.validation  Input checks (raise before any arithmetic)
    uapca.config      Numerical defaults (defaults.yaml)
    uapca.errors      DimensionMismatch, EmptyInput, InvalidComponentCount,
                      NumericalDegeneracy
"""

from uapca.core import (
    Distribution,
    Projection,
    AffineTransformation,
    MultivariateNormal,
    Point,
    transformation_matrix,
    Sampler,
    UaPCA,
    fit,
    transform,
    arithmetic_mean,
    FactorTracer,
    get_factor_tracer,
    flatten_components,
    flatten_distributions,
)
from uapca.errors import (
    UaPCAError,
    DimensionMismatch,
    EmptyInput,
    InvalidComponentCount,
    NumericalDegeneracy,
)
from uapca.config import UaPCAConfig, get_config, load_config, set_config

__all__ = [
    'Distribution',
    'Projection',
    'AffineTransformation',
    'MultivariateNormal',
    'Point',
    'transformation_matrix',
    'Sampler',
    'UaPCA',
    'fit',
    'transform',
    'arithmetic_mean',
    'FactorTracer',
    'get_factor_tracer',
    'flatten_components',
    'flatten_distributions',
    'UaPCAError',
    'DimensionMismatch',
    'EmptyInput',
    'InvalidComponentCount',
    'NumericalDegeneracy',
    'UaPCAConfig',
    'get_config',
    'load_config',
    'set_config',
]
