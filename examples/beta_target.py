"""
Example: sampling a Beta(2.6, 6.3)-shaped density with each proposal
and printing the chain one value per line.
"""

import argparse

import numpy as np

from mhchain import ChainConfig, MHChain, ProposalKind
from mhchain.utils.tools import beta_kernel, write_samples


def run_beta_example(kind: str = "generic", n_samples: int = 100000, width: float = 0.5,
                     seed: int = None, hastings_correction: bool = False) -> np.ndarray:
    """
    Run the Beta example.

    Args:
        kind: Proposal kind ('random_walk', 'generic' or 'independent')
        n_samples: Number of samples to generate
        width: Step width of the width-based proposals
        seed: Seed of the chain's random generator
        hastings_correction: Correct the acceptance ratio of the independent proposal
    """
    config = ChainConfig(
        n_samples=n_samples,
        kind=kind,
        width=width,
        seed=seed,
        hastings_correction=hastings_correction,
        log_every=max(n_samples // 10, 1),
    )
    chain = MHChain.from_config(beta_kernel, config)
    return chain.run()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--kind", default=ProposalKind.GENERIC.value,
                        choices=[k.value for k in ProposalKind])
    parser.add_argument("--samples", type=int, default=100000)
    parser.add_argument("--width", type=float, default=0.5)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--hastings-correction", action="store_true")
    args = parser.parse_args()

    samples = run_beta_example(args.kind, args.samples, args.width, args.seed, args.hastings_correction)
    write_samples(samples)
