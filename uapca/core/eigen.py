"""
Eigendecomposition Engine.

Symmetric eigen-decomposition and the building blocks shared by fitting,
sampling and factor tracing:

    symmetric_eigendecomposition  eigh on a symmetrised matrix
    sort_components               (eigenvalue, eigenvector) pairs, descending
    clamp_eigenvalues             negative-eigenvalue policy
    transformation_matrix         S = diag(sqrt(lambda)) @ V.T, S.T @ S = C

Negative eigenvalue policy
--------------------------
A PSD covariance can come back from eigh with tiny negative eigenvalues.
Values in [-tol, 0), with tol = psd_tolerance * max(1, max|lambda|), are
clamped to exactly zero before any square root (logged at DEBUG). Values
below -tol mean the input is not PSD and raise NumericalDegeneracy.
"""

import logging
from typing import Any, Optional, Tuple

import numpy as np

from uapca.config import get_config
from uapca.errors import DimensionMismatch, NumericalDegeneracy

logger = logging.getLogger(__name__)


def symmetric_eigendecomposition(matrix: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Eigen-decompose a symmetric matrix.

    Parameters
    ----------
    matrix : np.ndarray
        Square symmetric matrix (n x n)

    Returns
    -------
    tuple
        (eigenvalues, eigenvectors)
        eigenvalues: 1D array, in the order returned by eigh (ascending)
        eigenvectors: 2D array, columns are unit eigenvectors
    """
    matrix = np.asarray(matrix, dtype=np.float64)

    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise DimensionMismatch('square', matrix.shape, f"Matrix must be square, got {matrix.shape}")

    if not np.all(np.isfinite(matrix)):
        raise NumericalDegeneracy("Cannot eigen-decompose a matrix containing NaN or Inf")

    # eigh reads one triangle only; symmetrise so both halves count
    sym = (matrix + matrix.T) / 2.0
    eigenvalues, eigenvectors = np.linalg.eigh(sym)

    return eigenvalues, eigenvectors


def sort_components(
    eigenvalues: np.ndarray,
    eigenvectors: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Order eigenpairs by eigenvalue, descending.

    The sort is stable: equal eigenvalues keep their decomposition order and
    are not otherwise disambiguated.

    Returns:
        (lengths, vectors) where vectors[i] is the eigenvector (as a row)
        paired with lengths[i].
    """
    idx = np.argsort(-eigenvalues, kind='stable')
    return eigenvalues[idx], eigenvectors[:, idx].T


def clamp_eigenvalues(eigenvalues: np.ndarray, tolerance: Optional[float] = None) -> np.ndarray:
    """
    Apply the negative eigenvalue policy (see module docstring).

    Args:
        eigenvalues: 1-D array of eigenvalues.
        tolerance: relative tolerance; defaults to config psd_tolerance.

    Returns:
        Copy of eigenvalues with round-off negatives set to 0.
    """
    if tolerance is None:
        tolerance = get_config().psd_tolerance

    eigenvalues = np.array(eigenvalues, dtype=np.float64, copy=True)
    if eigenvalues.size == 0:
        return eigenvalues

    tol = tolerance * max(1.0, float(np.max(np.abs(eigenvalues))))
    worst = float(np.min(eigenvalues))

    if worst < -tol:
        raise NumericalDegeneracy(
            f"Matrix is not positive semi-definite: eigenvalue {worst:.6e} "
            f"is below the tolerance -{tol:.3e}",
            eigenvalue=worst,
        )

    negative = eigenvalues < 0
    if negative.any():
        logger.debug(
            f"Clamped {int(negative.sum())} negative eigenvalue(s) to zero (min={worst:.3e}, tol={tol:.3e})"
        )
        eigenvalues[negative] = 0.0

    return eigenvalues


def transformation_matrix(distribution: Any) -> np.ndarray:
    """
    Square-root linear map of a covariance matrix.

    Args:
        distribution: a Distribution, or a (d, d) covariance matrix.

    Returns:
        S = diag(sqrt(lambda_i)) @ V.T, shape (d, d), with S.T @ S == C.
        Rows are not ordered by eigenvalue.
    """
    cov = distribution.covariance() if hasattr(distribution, 'covariance') else distribution

    eigenvalues, eigenvectors = symmetric_eigendecomposition(cov)
    eigenvalues = clamp_eigenvalues(eigenvalues)

    return np.diag(np.sqrt(eigenvalues)) @ eigenvectors.T
