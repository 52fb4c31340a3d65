"""
Template class file for proposal
"""

# Imports
import numpy as np
from typing import Protocol, Tuple


class ProposalProtocol(Protocol):
    """
    Protocol for proposal distributions
    """

    symmetric: bool
    """True when q(b | a) == q(a | b) for all a, b"""

    def propose(self, current: float, rng: np.random.Generator) -> float:
        """Generate a candidate position from the current position using one draw of rng"""
        raise NotImplementedError("Implement propose method")

    def proposal_logpdf(self, current: float, proposed: float) -> Tuple[float, float]:
        """Compute forward (proposed given current) and reverse (current given proposed) log probability"""
        raise NotImplementedError("Implement proposal_logpdf method")
