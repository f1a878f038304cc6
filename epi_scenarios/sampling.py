from typing import Callable, Optional

from numpy.random import SFC64, Generator, SeedSequence

SampleTransform = Callable[[float], float]


def identity(x: float) -> float:
    """Use instead of a PoissonSampler for a deterministic trajectory"""
    return x


class PoissonSampler:
    """
    Replaces an expected count with a Poisson distributed count of events.

    Every call is an independent draw from `numpy_bit_generator`, which is
    the only state the sampler holds.
    """

    def __init__(self, numpy_bit_generator: Generator) -> None:
        self.numpy_bit_generator = numpy_bit_generator

    def __call__(self, x: float) -> float:
        if x <= 0:
            return 0.0
        return float(self.numpy_bit_generator.poisson(x))


def make_generators(seed: Optional[int], n: int) -> list[Generator]:
    """
    Creates `n` statistically independent random streams from one seed.

    Args:
        seed (Optional[int]): Root seed, None takes fresh entropy from the OS
        n (int): Number of streams

    Returns:
        list[Generator]: One generator per stream
    """
    return [Generator(SFC64(child)) for child in SeedSequence(seed).spawn(n)]
