from mhchain.proposals.uniform import (
    GenericProposal,
    IndependentProposal,
    ProposalKind,
    RandomWalkProposal,
    make_proposal,
)

__all__ = [
    "RandomWalkProposal",
    "GenericProposal",
    "IndependentProposal",
    "ProposalKind",
    "make_proposal",
]
