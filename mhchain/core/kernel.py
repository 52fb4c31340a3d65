"""
Template class file for the kernel
"""

# Imports
import numpy as np
from typing import Protocol
from mhchain.core.state import ChainState
from mhchain.core.proposal import ProposalProtocol

class KernelProtocol(Protocol):
    """
    Protocol for MCMC transition kernels.
    """

    def evaluate(self, position: float) -> float:
        """Evaluate the target density at a position"""
        raise NotImplementedError("Implement evaluate method")

    def propose(self, proposal: ProposalProtocol, state: 'ChainState', rng: np.random.Generator) -> 'ChainState':
        """Generate candidate state from current state"""
        raise NotImplementedError("Implement propose method")

    def acceptance_ratio(self, proposal: ProposalProtocol, current: 'ChainState', proposed: 'ChainState') -> float:
        """Compute acceptance ratio"""
        raise NotImplementedError("Implement acceptance_ratio method")
