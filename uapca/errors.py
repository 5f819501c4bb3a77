"""
UaPCA error taxonomy.

Every error is raised synchronously to the immediate caller. Each one also
subclasses ValueError, so code that already guards engine calls with
``except ValueError`` keeps working.
"""

from typing import Optional


class UaPCAError(Exception):
    """Base class for all UaPCA failures."""


class DimensionMismatch(UaPCAError, ValueError):
    """Raised when input dimensionalities disagree."""

    def __init__(self, expected, actual, message: Optional[str] = None):
        self.expected = expected
        self.actual = actual

        if message is None:
            message = f"Dimension mismatch: expected {expected}, got {actual}"

        super().__init__(message)


class EmptyInput(UaPCAError, ValueError):
    """Raised when fit or tracer construction receives zero distributions."""

    def __init__(self, message: str = "At least one distribution is required"):
        super().__init__(message)


class InvalidComponentCount(UaPCAError, ValueError):
    """Raised when the requested component count is outside [1, n_dims]."""

    def __init__(self, components, n_dims: int):
        self.components = components
        self.n_dims = n_dims
        super().__init__(
            f"Component count must be between 1 and {n_dims}, got {components}"
        )


class NumericalDegeneracy(UaPCAError, ValueError):
    """Raised when a covariance is not symmetric positive semi-definite."""

    def __init__(self, message: str, eigenvalue: Optional[float] = None):
        self.eigenvalue = eigenvalue
        super().__init__(message)
