"""
Exceptions raised by the sampling engine
"""


class MHChainError(Exception):
    """Base class for all sampler errors"""


class InvalidSampleCount(MHChainError, ValueError):
    """Requested number of samples is negative or not an integer"""


class DensityEvaluationError(MHChainError, ArithmeticError):
    """
    The target density raised, returned a value that is not a density,
    or has no support at the state the chain currently occupies.
    """
