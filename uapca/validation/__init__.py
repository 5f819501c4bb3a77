"""
UaPCA Validation Module

Validates vectors, matrices, distribution collections and component counts
before any computation.

Exports:
    - as_vector / as_matrix: coerce array-likes, raising DimensionMismatch
    - check_finite: reject NaN or Inf entries
    - check_covariance: shape, finiteness, symmetry and PSD of a covariance
    - check_linear_map / check_translation: affine-map shape checks
    - require_distributions: non-empty, consistent-dimension collections
    - check_component_count: 1 <= k <= d
"""

from .input_validation import (
    as_vector,
    as_matrix,
    check_finite,
    check_covariance,
    check_linear_map,
    check_translation,
    require_distributions,
    check_component_count,
)

__all__ = [
    'as_vector',
    'as_matrix',
    'check_finite',
    'check_covariance',
    'check_linear_map',
    'check_translation',
    'require_distributions',
    'check_component_count',
]
