"""
Script housing some helper functions
"""

# Imports
import sys
from typing import Iterable, Optional, TextIO

import numpy as np


def beta_kernel(x: float, a: float = 2.6, b: float = 6.3) -> float:
    """
    Unnormalized Beta(a, b) density, x^(a-1) * (1-x)^(b-1) on (0, 1).

    Parameters
    ----------
    x : float
        Point at which to evaluate the density
    a, b : float
        Shape parameters of the Beta distribution

    Returns
    -------
    density : float
        Density value, 0.0 outside (0, 1)
    """
    if not 0.0 < x < 1.0:
        return 0.0
    return x ** (a - 1.0) * (1.0 - x) ** (b - 1.0)


def beta_mean(a: float = 2.6, b: float = 6.3) -> float:
    """Mean of the Beta(a, b) distribution."""
    return a / (a + b)


def write_samples(samples: Iterable[float], stream: Optional[TextIO] = None) -> None:
    """
    Write samples one per line.

    Parameters
    ----------
    samples : iterable of float
        Positions returned by a chain
    stream : text stream, optional
        Destination, stdout if omitted
    """
    stream = sys.stdout if stream is None else stream
    for value in np.asarray(samples, dtype=float):
        stream.write(f"{float(value)!r}\n")
