"""
Class file for the Metropolis-Hastings kernel
"""

# Imports
import math
import numpy as np
from mhchain.core.state import ChainState
from mhchain.core.kernel import KernelProtocol
from mhchain.core.proposal import ProposalProtocol
from mhchain.core.density import DensityProtocol, validate_density_value, has_support
from mhchain.core.errors import DensityEvaluationError
from mhchain.utils.logging import MHChainLogger

logger = MHChainLogger.get_logger(__name__)


class MetropolisHastingsKernel(KernelProtocol):
    """
    Metropolis-Hastings kernel for one-dimensional MCMC sampling.

    The acceptance ratio is density(proposed) / density(current). With
    ``hastings_correction`` the ratio is multiplied by q(current | proposed) /
    q(proposed | current) for proposals that are not symmetric; without it
    every proposal is treated as symmetric.

    Candidates whose density is zero, NaN or infinite get density 0.0 and
    are therefore always rejected.
    """

    def __init__(self, target_density: DensityProtocol, hastings_correction: bool = False):
        """
        Initialize the Metropolis-Hastings kernel with a target density.
        """
        if not callable(target_density):
            raise TypeError("target_density must be callable.")
        self.target_density = target_density
        self.hastings_correction = hastings_correction

    def evaluate(self, position: float) -> float:
        """
        Evaluate and validate the target density at a position.

        Raises:
            DensityEvaluationError: If the density raises or returns a value
                that is negative or not a real number.
        """
        try:
            value = self.target_density(position)
        except DensityEvaluationError:
            raise
        except Exception as exc:
            raise DensityEvaluationError(
                f"Density evaluation failed at x={position!r}: {exc}"
            ) from exc
        return validate_density_value(value, position)

    def propose(self, proposal: ProposalProtocol, current_state: ChainState, rng: np.random.Generator) -> ChainState:
        """
        Generate a candidate state from the current state using the proposal.
        """
        proposed_position = proposal.propose(current_state.position, rng)

        if not math.isfinite(proposed_position):
            logger.debug("Rejecting non-finite candidate %r", proposed_position)
            return ChainState(position=current_state.position, density=0.0)

        density = self.evaluate(proposed_position)
        if not has_support(density):
            if density != 0.0:
                logger.debug("Rejecting candidate x=%r with density %r", proposed_position, density)
            density = 0.0

        return ChainState(position=proposed_position, density=density)

    def acceptance_ratio(self, proposal: ProposalProtocol, current: ChainState, proposed: ChainState) -> float:
        """
        Compute the acceptance ratio for the proposed state.

        The ratio is not clipped: values above one mean certain acceptance.
        """
        if proposed.density == 0.0:
            return 0.0

        ratio = proposed.density / current.density

        if self.hastings_correction and not proposal.symmetric:
            logq_forward, logq_reverse = proposal.proposal_logpdf(current.position, proposed.position)
            if logq_reverse == -math.inf:
                return 0.0
            ratio *= math.exp(logq_reverse - logq_forward)

        return ratio
