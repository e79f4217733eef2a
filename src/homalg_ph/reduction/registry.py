from typing import Union
from homalg_ph.reduction.base import Reduction
from homalg_ph.reduction.standard import StandardReduction
from homalg_ph.reduction.twist import TwistReduction

ALGORITHMS = {
    'standard': StandardReduction,
    'twist': TwistReduction,
}


def get_reduction_algorithm(algorithm: Union[str, Reduction] = 'standard', **kwargs) -> Reduction:
    """
    Resolve a strategy by name (`'standard'` or `'twist'`); instances pass through.
    Keyword arguments go to the strategy constructor.
    """
    if isinstance(algorithm, Reduction):
        if kwargs:
            raise ValueError(
                f"Options {sorted(kwargs)} cannot be applied to an existing {algorithm.name} instance"
            )
        return algorithm
    if algorithm not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm: {algorithm}. Choose from {sorted(ALGORITHMS)}")
    return ALGORITHMS[algorithm](**kwargs)
