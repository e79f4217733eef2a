from homalg_ph.reduction.base import Reduction, ReductionStats
from homalg_ph.reduction.standard import StandardReduction
from homalg_ph.reduction.twist import TwistReduction, column_degrees, is_graded
from homalg_ph.reduction.registry import get_reduction_algorithm

__all__ = [
    "Reduction",
    "ReductionStats",
    "StandardReduction",
    "TwistReduction",
    "column_degrees",
    "is_graded",
    "get_reduction_algorithm",
]
