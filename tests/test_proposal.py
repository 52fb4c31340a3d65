import math

import numpy as np
import pytest

from mhchain.proposals.uniform import (
    GenericProposal,
    IndependentProposal,
    ProposalKind,
    RandomWalkProposal,
    make_proposal,
    uniform_logpdf,
)


class FixedDraws:
    """Stand-in generator returning preset uniform draws."""

    def __init__(self, *draws):
        self.draws = list(draws)
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.draws.pop(0)


# --------------------------------------------------
# Candidate formulas
# --------------------------------------------------
def test_random_walk_candidate():
    rng = FixedDraws(0.75)
    assert RandomWalkProposal().propose(1.0, rng) == 1.25
    assert rng.calls == 1


def test_generic_candidate_scales_step_by_width():
    rng = FixedDraws(0.75, 0.0)
    proposal = GenericProposal(width=0.5)
    assert proposal.propose(1.0, rng) == 1.125
    assert proposal.propose(1.0, rng) == 0.75
    assert rng.calls == 2


def test_generic_default_width():
    assert GenericProposal().width == 0.5


def test_independent_candidate_ignores_current():
    proposal = IndependentProposal(width=0.5)
    assert proposal.propose(1.0, FixedDraws(0.75)) == 0.125
    assert proposal.propose(-40.0, FixedDraws(0.75)) == 0.125


def test_generic_samples_stay_within_step():
    rng = np.random.default_rng(0)
    proposal = GenericProposal(width=0.5)
    samples = np.array([proposal.propose(2.0, rng) for _ in range(1000)])
    assert np.all(samples >= 1.75)
    assert np.all(samples < 2.25)
    assert np.isclose(np.mean(samples), 2.0, atol=0.02)


def test_proposals_do_not_touch_other_generator_methods():
    class OnlyRandom:
        def random(self):
            return 0.5

    for proposal in (RandomWalkProposal(), GenericProposal(0.3), IndependentProposal(0.3)):
        proposal.propose(0.2, OnlyRandom())


# --------------------------------------------------
# Proposal densities
# --------------------------------------------------
def test_uniform_logpdf_support_is_half_open():
    assert uniform_logpdf(-0.25, 0.5) == -math.log(0.5)
    assert uniform_logpdf(0.2499, 0.5) == -math.log(0.5)
    assert uniform_logpdf(0.25, 0.5) == -math.inf


def test_generic_logpdf_is_symmetric():
    proposal = GenericProposal(width=0.5)
    assert proposal.symmetric
    logq_fwd, logq_rev = proposal.proposal_logpdf(0.0, 0.1)
    assert np.isclose(logq_fwd, logq_rev)
    assert np.isclose(logq_fwd, -np.log(0.5))

    logq_fwd, logq_rev = proposal.proposal_logpdf(0.0, 0.3)
    assert logq_fwd == -math.inf
    assert logq_rev == -math.inf


def test_random_walk_has_unit_width():
    proposal = RandomWalkProposal()
    assert proposal.symmetric
    assert proposal.width == 1.0
    assert proposal.proposal_logpdf(0.0, 0.4) == (0.0, 0.0)


def test_independent_logpdf_depends_on_endpoints_only():
    proposal = IndependentProposal(width=2.0)
    assert not proposal.symmetric

    logq_fwd, logq_rev = proposal.proposal_logpdf(0.5, -0.2)
    assert np.isclose(logq_fwd, -np.log(2.0))
    assert np.isclose(logq_rev, -np.log(2.0))

    logq_fwd, logq_rev = proposal.proposal_logpdf(1.5, -0.2)
    assert np.isclose(logq_fwd, -np.log(2.0))
    assert logq_rev == -math.inf


# --------------------------------------------------
# Validation and factory
# --------------------------------------------------
@pytest.mark.parametrize("width", [0.0, -0.5, math.inf, math.nan, "wide"])
def test_width_validation(width):
    with pytest.raises(ValueError):
        GenericProposal(width=width)
    with pytest.raises(ValueError):
        IndependentProposal(width=width)


@pytest.mark.parametrize(
    "kind, cls",
    [
        ("random_walk", RandomWalkProposal),
        ("generic", GenericProposal),
        ("independent", IndependentProposal),
        (ProposalKind.INDEPENDENT, IndependentProposal),
    ],
)
def test_make_proposal(kind, cls):
    proposal = make_proposal(kind, width=0.3)
    assert type(proposal) is cls


def test_make_proposal_passes_width():
    assert make_proposal("generic", width=0.3).width == 0.3
    assert make_proposal("independent").width == 0.5
    assert make_proposal("random_walk", width=0.3).width == 1.0


def test_make_proposal_unknown_kind():
    with pytest.raises(ValueError, match="Unknown proposal kind"):
        make_proposal("hamiltonian")
