"""
Chain state representation for one-dimensional MCMC sampling.

This module provides the ChainState dataclass which holds the position of
the Markov chain at a single iteration together with the (unnormalized)
target density at that position.
"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Optional


@dataclass
class ChainState:
    """
    Represents the state of a Markov chain at a single iteration.

    Attributes:
        position (float):
            Current position of the chain on the real line.

        density (Optional[float]):
            Target density at ``position``. Only ratios of densities are used,
            so the value need not come from a normalized density. ``None``
            until the kernel evaluates it. Default: None.

    Examples:
        >>> state = ChainState(position=0.3, density=1.2)
        >>> state.is_evaluated
        True
    """

    position: float
    """Current position on the real line."""

    density: Optional[float] = None
    """Unnormalized target density at position."""

    def __post_init__(self) -> None:
        """Check that the position is a finite real number and store it as float."""
        if isinstance(self.position, bool) or not isinstance(self.position, Real):
            raise TypeError(
                f"position must be a real number, got {type(self.position).__name__}."
            )
        if not math.isfinite(self.position):
            raise ValueError(f"position must be finite, got {self.position}.")
        self.position = float(self.position)

    @property
    def is_evaluated(self) -> bool:
        """Whether the target density has been computed for this state."""
        return self.density is not None

    def __repr__(self) -> str:
        density_str = f"density={self.density:.4g}" if self.density is not None else "density=?"
        return f"ChainState(position={self.position:.6g}, {density_str})"
