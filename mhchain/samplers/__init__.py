from mhchain.samplers.single_chain import MHChain

__all__ = [
    "MHChain",
]
