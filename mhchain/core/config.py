"""
Construction inputs of a chain collected in one value.
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Optional, Union

from mhchain.core.errors import InvalidSampleCount
from mhchain.proposals.uniform import ProposalKind, check_width


def check_sample_count(n_samples) -> int:
    """Return n_samples as int or raise InvalidSampleCount."""
    if isinstance(n_samples, bool) or not isinstance(n_samples, Integral):
        raise InvalidSampleCount(
            f"n_samples must be an integer, got {type(n_samples).__name__}."
        )
    if n_samples < 0:
        raise InvalidSampleCount(f"n_samples must be nonnegative, got {n_samples}.")
    return int(n_samples)


def check_log_every(log_every) -> int:
    """Return log_every as int or raise ValueError."""
    if isinstance(log_every, bool) or not isinstance(log_every, Integral):
        raise ValueError(f"log_every must be an integer, got {type(log_every).__name__}.")
    if log_every < 0:
        raise ValueError(f"log_every must be nonnegative, got {log_every}.")
    return int(log_every)


@dataclass(frozen=True)
class ChainConfig:
    """
    Settings for a single Metropolis-Hastings run.

    Attributes:
        n_samples (int): Number of samples to draw.
        kind (ProposalKind): Proposal used to generate candidates.
        width (float): Step width for width-based proposals.
        seed (Optional[int]): Seed of the chain's random generator.
        hastings_correction (bool): Include the proposal density ratio in the
            acceptance ratio of asymmetric proposals.
        log_every (int): Log progress every this many iterations (0 disables).
    """

    n_samples: int
    kind: Union[ProposalKind, str] = ProposalKind.GENERIC
    width: float = 0.5
    seed: Optional[int] = None
    hastings_correction: bool = False
    log_every: int = 0

    def __post_init__(self) -> None:
        check_sample_count(self.n_samples)
        try:
            object.__setattr__(self, "kind", ProposalKind(self.kind))
        except ValueError:
            raise ValueError(f"Unknown proposal kind: {self.kind!r}.") from None
        object.__setattr__(self, "width", check_width(self.width))
        check_log_every(self.log_every)
