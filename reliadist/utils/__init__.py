"""Helper functions and logging facilities of reliadist."""
from .logging import LogLevel, set_log
from .helpers import check_arg, check_number

__all__ = [
    "LogLevel",
    "set_log",
    "check_arg",
    "check_number",
]
