"""
Class file for a single chain Metropolis-Hastings sampler.
"""

from dataclasses import replace
from typing import List, Optional

import numpy as np

from mhchain.core.config import ChainConfig, check_log_every, check_sample_count
from mhchain.core.density import DensityProtocol, has_support
from mhchain.core.errors import DensityEvaluationError
from mhchain.core.proposal import ProposalProtocol
from mhchain.core.state import ChainState
from mhchain.kernels.metropolis import MetropolisHastingsKernel
from mhchain.proposals.uniform import make_proposal
from mhchain.utils.logging import MHChainLogger

logger = MHChainLogger.get_logger(__name__)


class MHChain:
    """
    Single Markov chain driven by the Metropolis-Hastings rule.

    The chain owns one random generator. Every step draws from it exactly
    twice, first for the proposal and then for the accept test. The initial
    position is a single uniform draw on [0, 1) taken at construction.

    Attributes:
        kernel (MetropolisHastingsKernel): Evaluates the density and the acceptance ratio.
        proposal (ProposalProtocol): Generates candidate positions.
        n_samples (int): Number of samples produced by each call to run.
        rng (np.random.Generator): Random source of the chain.
        initial_state (ChainState): State drawn at construction.
        current_state (ChainState): State after the last successful run.
        n_accepted (int): Accepted moves during the last run, 0 after a failed run.
        log_every (int): Iterations between progress messages (0 disables).
    """

    def __init__(self, target_density: DensityProtocol, proposal: ProposalProtocol, n_samples: int,
                 seed: Optional[int] = None, rng: Optional[np.random.Generator] = None,
                 hastings_correction: bool = False, log_every: int = 0):

        self.n_samples = check_sample_count(n_samples)

        if rng is not None:
            if seed is not None:
                raise ValueError("Pass either seed or rng, not both.")
            if not isinstance(rng, np.random.Generator):
                raise TypeError(f"rng must be a numpy.random.Generator, got {type(rng).__name__}.")
            self.rng = rng
        else:
            self.rng = np.random.default_rng(seed)

        self.kernel = MetropolisHastingsKernel(target_density, hastings_correction=hastings_correction)
        self.proposal = proposal
        self.log_every = check_log_every(log_every)

        self.initial_state = ChainState(position=self.rng.random())
        self.current_state = self.initial_state
        self.n_accepted = 0

    @classmethod
    def from_config(cls, target_density: DensityProtocol, config: ChainConfig) -> "MHChain":
        """Build a chain and its proposal from a ChainConfig."""
        return cls(
            target_density,
            make_proposal(config.kind, config.width),
            config.n_samples,
            seed=config.seed,
            hastings_correction=config.hastings_correction,
            log_every=config.log_every,
        )

    @property
    def acceptance_rate(self) -> float:
        """Fraction of accepted moves during the last run."""
        if self.n_samples == 0:
            return 0.0
        return self.n_accepted / self.n_samples

    def _evaluated_current(self) -> ChainState:
        state = self.current_state
        if state.is_evaluated:
            return state

        density = self.kernel.evaluate(state.position)
        if not has_support(density):
            raise DensityEvaluationError(
                f"Target density is {density!r} at the current state x={state.position!r}; "
                "the chain must start where the density is positive and finite."
            )
        return replace(state, density=density)

    def run(self) -> np.ndarray:
        """
        Run the sampler for n_samples iterations.

        Returns:
        -------
            samples (np.ndarray): Positions visited by the chain, one per
            iteration. Rejected candidates never appear.

        Raises:
        -------
            DensityEvaluationError: If the density has no support at the current
            state or fails while running. No samples are returned and the chain
            keeps its previous state.
        """
        self.n_accepted = 0
        if self.n_samples == 0:
            return np.empty(0, dtype=float)

        current_state = self._evaluated_current()
        samples: List[float] = []
        acceptance_count = 0

        logger.info("Running %d iterations with %r from x=%.6g",
                    self.n_samples, self.proposal, current_state.position)

        for i in range(1, self.n_samples + 1):

            # Propose a new state
            proposed_state = self.kernel.propose(self.proposal, current_state, self.rng)

            # Compute the acceptance ratio
            ar = self.kernel.acceptance_ratio(self.proposal, current_state, proposed_state)

            # Accept or reject the proposed state
            if self.rng.random() < ar:
                current_state = proposed_state
                acceptance_count += 1

            samples.append(current_state.position)

            if self.log_every and i % self.log_every == 0:
                logger.info("Iteration %d/%d, acceptance rate %.3f",
                            i, self.n_samples, acceptance_count / i)

        self.current_state = current_state
        self.n_accepted = acceptance_count

        logger.info("Finished %d iterations, acceptance rate %.3f",
                    self.n_samples, self.acceptance_rate)

        return np.asarray(samples, dtype=float)
