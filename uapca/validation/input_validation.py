"""
Input Validation

Shape and content checks for vectors, matrices and distribution collections.
All checks run before any arithmetic and raise the errors in uapca.errors.

PRINCIPLE: "Check before compute, not after failure"

Usage:
    from uapca.validation import as_vector, require_distributions

    mean = as_vector([0.0, 1.0])
    dists, n_dims = require_distributions(dists)
"""

import numbers
from typing import Any, Iterable, List, Tuple

import numpy as np

from uapca.errors import (
    DimensionMismatch,
    EmptyInput,
    InvalidComponentCount,
    NumericalDegeneracy,
)


def as_vector(data: Any, name: str = 'vector') -> np.ndarray:
    """
    Coerce array-like data to a 1-D float array.

    Column (d, 1) and row (1, d) matrices are flattened.
    """
    arr = np.asarray(data, dtype=np.float64)

    if arr.ndim == 2 and 1 in arr.shape:
        arr = arr.reshape(-1)

    if arr.ndim != 1:
        raise DimensionMismatch(
            '1-D', arr.shape,
            f"{name} must be a 1-D vector, got shape {arr.shape}",
        )

    return arr


def as_matrix(data: Any, name: str = 'matrix') -> np.ndarray:
    """Coerce array-like data to a 2-D float array. A 1-D input becomes one row."""
    arr = np.asarray(data, dtype=np.float64)

    if arr.ndim == 1:
        arr = arr.reshape(1, -1)

    if arr.ndim != 2:
        raise DimensionMismatch(
            '2-D', arr.shape,
            f"{name} must be a 2-D matrix, got shape {arr.shape}",
        )

    return arr


def check_finite(vec: np.ndarray, name: str = 'vector') -> None:
    """Reject NaN or Inf entries."""
    if not np.all(np.isfinite(vec)):
        raise NumericalDegeneracy(f"{name} contains NaN or Inf")


def check_covariance(
    cov: np.ndarray,
    n_dims: int,
    symmetry_tolerance: float,
    psd_tolerance: float,
) -> None:
    """
    Check a covariance matrix is (n_dims, n_dims), finite, symmetric and
    positive semi-definite.

    Eigenvalues down to -psd_tolerance * max(1, max|lambda|) count as
    round-off, matching the clamp applied when the matrix is decomposed.
    """
    if cov.shape != (n_dims, n_dims):
        raise DimensionMismatch(
            (n_dims, n_dims), cov.shape,
            f"Covariance must be ({n_dims}, {n_dims}) to match the mean, got {cov.shape}",
        )

    if not np.all(np.isfinite(cov)):
        raise NumericalDegeneracy("Covariance contains NaN or Inf")

    scale = max(1.0, float(np.max(np.abs(cov)))) if cov.size else 1.0
    asymmetry = float(np.max(np.abs(cov - cov.T))) if cov.size else 0.0
    if asymmetry > symmetry_tolerance * scale:
        raise NumericalDegeneracy(
            f"Covariance is not symmetric (max |C - C.T| = {asymmetry:.3e})"
        )

    if cov.size:
        eigenvalues = np.linalg.eigvalsh(cov)
        tol = psd_tolerance * max(1.0, float(np.max(np.abs(eigenvalues))))
        worst = float(np.min(eigenvalues))
        if worst < -tol:
            raise NumericalDegeneracy(
                f"Covariance is not positive semi-definite: eigenvalue {worst:.6e} "
                f"is below the tolerance -{tol:.3e}",
                eigenvalue=worst,
            )


def check_linear_map(A: np.ndarray, n_dims: int) -> None:
    """A (k, d) linear map must have d == n_dims columns."""
    if A.shape[1] != n_dims:
        raise DimensionMismatch(
            n_dims, A.shape[1],
            f"Linear map has {A.shape[1]} columns but the distribution has {n_dims} dimensions",
        )


def check_translation(b: np.ndarray, n_rows: int) -> None:
    """A translation must have one entry per row of the linear map."""
    if b.shape[0] != n_rows:
        raise DimensionMismatch(
            n_rows, b.shape[0],
            f"Translation has {b.shape[0]} entries but the linear map has {n_rows} rows",
        )


def require_distributions(distributions: Iterable) -> Tuple[List, int]:
    """
    Materialise a distribution collection and check it is usable for fitting.

    Returns:
        (list of distributions, shared dimensionality)

    Raises:
        EmptyInput: no distributions
        TypeError: an element has no mean()/covariance()
        DimensionMismatch: dimensionalities disagree, or are zero
    """
    if distributions is None:
        raise EmptyInput()

    dists = list(distributions)
    if len(dists) == 0:
        raise EmptyInput()

    n_dims = None
    for i, d in enumerate(dists):
        if not (callable(getattr(d, 'mean', None)) and callable(getattr(d, 'covariance', None))):
            raise TypeError(
                f"Element {i} ({type(d).__name__}) does not provide mean() and covariance()"
            )

        dim = np.asarray(d.mean()).size
        if n_dims is None:
            n_dims = dim
        elif dim != n_dims:
            raise DimensionMismatch(
                n_dims, dim,
                f"Distribution {i} has {dim} dimensions, expected {n_dims}",
            )

    if n_dims == 0:
        raise DimensionMismatch(
            '>= 1', 0, "Distributions must have at least one dimension"
        )

    return dists, n_dims


def check_component_count(components: Any, n_dims: int) -> int:
    """Return components as int if 1 <= components <= n_dims."""
    if isinstance(components, bool) or not isinstance(components, numbers.Integral):
        raise InvalidComponentCount(components, n_dims)

    components = int(components)
    if components < 1 or components > n_dims:
        raise InvalidComponentCount(components, n_dims)

    return components
