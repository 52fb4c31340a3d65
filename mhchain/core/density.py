"""
Target density interface for MCMC sampling.

A target density is any callable mapping a position on the real line to a
nonnegative real number. It does not have to be normalized: the sampler
only ever divides two of its values.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Protocol, runtime_checkable

import numpy as np

from mhchain.core.errors import DensityEvaluationError


@runtime_checkable
class DensityProtocol(Protocol):
    """
    Protocol for target densities.

    Examples:
        Function::

            def beta_like(x: float) -> float:
                return x ** 1.6 * (1.0 - x) ** 5.3 if 0.0 < x < 1.0 else 0.0

        Class::

            class Triangle:
                def __call__(self, x: float) -> float:
                    return max(0.0, 1.0 - abs(x))
    """

    def __call__(self, x: float) -> float:
        """Evaluate the unnormalized density at x."""
        ...


def validate_density_value(value, position: float) -> float:
    """
    Validate a value returned by a target density.

    NaN and infinities are passed through as floats so that the caller can
    decide how to treat them. Values that can never be a density are errors.

    Args:
        value: Raw value returned by the density.
        position: Position the density was evaluated at (for messages).

    Returns:
        The value as a Python float.

    Raises:
        DensityEvaluationError: If the value is not a real scalar or is negative.
    """
    if isinstance(value, np.ndarray) and value.size == 1:
        value = value.item()
    if isinstance(value, bool) or not isinstance(value, Real):
        raise DensityEvaluationError(
            f"Density must return a real scalar, got {type(value).__name__} at x={position!r}."
        )

    value = float(value)
    if value < 0.0:
        raise DensityEvaluationError(
            f"Density must be nonnegative, got {value!r} at x={position!r}."
        )
    return value


def has_support(value: float) -> bool:
    """True when a validated density value is strictly positive and finite."""
    return math.isfinite(value) and value > 0.0
