"""Module defining parametric random variables for reliability analysis."""
from .enum import ParameterStatus
from .randomvariable import RandomVariable
from .standardnormal import StandardNormalDistribution
from .normal import NormalDistribution
from .lognormal import LognormalDistribution

__all__ = [
    "ParameterStatus",
    "RandomVariable",
    "StandardNormalDistribution",
    "NormalDistribution",
    "LognormalDistribution",
]
