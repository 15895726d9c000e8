"""Parametric random variables for structural reliability analysis."""
from reliadist._version import __version__
from reliadist.distributions import (
    LognormalDistribution,
    NormalDistribution,
    ParameterStatus,
    RandomVariable,
    StandardNormalDistribution,
)
from reliadist.utils.logging import LogLevel, set_log

__all__ = [
    "__version__",
    "LognormalDistribution",
    "NormalDistribution",
    "ParameterStatus",
    "RandomVariable",
    "StandardNormalDistribution",
    "LogLevel",
    "set_log",
]
