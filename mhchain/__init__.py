from mhchain.core.config import ChainConfig
from mhchain.core.errors import DensityEvaluationError, InvalidSampleCount, MHChainError
from mhchain.core.state import ChainState
from mhchain.kernels.metropolis import MetropolisHastingsKernel
from mhchain.proposals.uniform import (
    GenericProposal,
    IndependentProposal,
    ProposalKind,
    RandomWalkProposal,
    make_proposal,
)
from mhchain.samplers.single_chain import MHChain

__version__ = "0.1.0"

__all__ = [
    "MHChain",
    "ChainConfig",
    "ChainState",
    "MetropolisHastingsKernel",
    "RandomWalkProposal",
    "GenericProposal",
    "IndependentProposal",
    "ProposalKind",
    "make_proposal",
    "MHChainError",
    "InvalidSampleCount",
    "DensityEvaluationError",
]
