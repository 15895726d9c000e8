"""
Core package of reliadist.
"""
from reliadist.core.config import ReliaDistConfiguration, get_config

__all__ = [
    "ReliaDistConfiguration",
    "get_config",
]
