"""
Uniform-step proposals for one-dimensional MCMC sampling
"""

import math
from enum import Enum
from typing import Tuple, Union

import numpy as np

from mhchain.core.proposal import ProposalProtocol


def check_width(width: float) -> float:
    if isinstance(width, bool) or not isinstance(width, (int, float, np.floating, np.integer)):
        raise ValueError(f"width must be a real number, got {type(width).__name__}.")
    width = float(width)
    if not math.isfinite(width) or width <= 0.0:
        raise ValueError(f"width must be positive and finite, got {width}.")
    return width


def uniform_logpdf(offset: float, width: float) -> float:
    """Log density of width * (U - 0.5), U ~ Uniform[0, 1), evaluated at offset."""
    half = 0.5 * width
    if -half <= offset < half:
        return -math.log(width)
    return -math.inf


class GenericProposal(ProposalProtocol):
    """Random walk with a uniform step of the given width centered at the current position"""

    symmetric = True

    def __init__(self, width: float = 0.5):
        self.width = check_width(width)

    def propose(self, current: float, rng: np.random.Generator) -> float:
        """Generate candidate position from current position"""
        return current + self.width * (rng.random() - 0.5)

    def proposal_logpdf(self, current: float, proposed: float) -> Tuple[float, float]:
        """Calculate forward and reverse log probability"""
        logq_forward = uniform_logpdf(proposed - current, self.width)
        logq_reverse = uniform_logpdf(current - proposed, self.width)
        return logq_forward, logq_reverse

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self.width})"


class RandomWalkProposal(GenericProposal):
    """Random walk with a unit-width uniform step"""

    def __init__(self):
        super().__init__(width=1.0)

    def propose(self, current: float, rng: np.random.Generator) -> float:
        return current + (rng.random() - 0.5)

    def __repr__(self) -> str:
        return "RandomWalkProposal()"


class IndependentProposal(ProposalProtocol):
    """
    Independent proposal from a fixed uniform distribution on [-width/2, width/2).

    The candidate ignores the current position, so the proposal is not
    symmetric: q(b | a) = q(b) while q(a | b) = q(a).
    """

    symmetric = False

    def __init__(self, width: float = 0.5):
        self.width = check_width(width)

    def propose(self, current: float, rng: np.random.Generator) -> float:
        return self.width * (rng.random() - 0.5)

    def proposal_logpdf(self, current: float, proposed: float) -> Tuple[float, float]:
        """Calculate forward and reverse log probability"""
        logq_forward = uniform_logpdf(proposed, self.width)
        logq_reverse = uniform_logpdf(current, self.width)
        return logq_forward, logq_reverse

    def __repr__(self) -> str:
        return f"IndependentProposal(width={self.width})"


class ProposalKind(str, Enum):
    """Closed set of available proposals"""

    RANDOM_WALK = "random_walk"
    GENERIC = "generic"
    INDEPENDENT = "independent"


def make_proposal(kind: Union[ProposalKind, str], width: float = 0.5) -> ProposalProtocol:
    """
    Build a proposal from its kind.

    Parameters:
    ----------
        kind (ProposalKind or str): One of 'random_walk', 'generic', 'independent'.
        width (float): Step width for 'generic' and 'independent'. The random
            walk always uses a unit step and ignores it.

    Returns:
    -------
        proposal (ProposalProtocol): The proposal instance.
    """
    try:
        kind = ProposalKind(kind)
    except ValueError:
        valid = ", ".join(k.value for k in ProposalKind)
        raise ValueError(f"Unknown proposal kind: {kind!r}. Supported kinds are {valid}.") from None

    if kind is ProposalKind.RANDOM_WALK:
        return RandomWalkProposal()
    if kind is ProposalKind.GENERIC:
        return GenericProposal(width)
    return IndependentProposal(width)
