"""Customized log handlers for reliadist diagnostics.

Random variables report their diagnostics (invalid parameterization, probability
out of range...) through the standard logging module. Each record emitted on
behalf of a random variable carries its tag as extra attribute `tag`, which can
be used to focus the log on a few variables with :py:class:`RandomVariableFilter`.
"""
import io
import logging
import sys
from enum import IntEnum
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Iterable, Optional, Union

import numpy

from reliadist.utils.helpers import check_arg


root_logger = logging.getLogger()
logger = logging.getLogger(__name__)


DEFAULT_STREAM = object()


class LogLevel(IntEnum):
    """reliadist log level.

    FULL_DEBUG : Detailed debug log
    DEBUG : Debug log
    INFO : Information log
    WARNING : Warning log
    ERROR : Error log
    CRITICAL : Critical log
    """

    FULL_DEBUG = logging.DEBUG - 1
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


class RandomVariableFilter(logging.Filter):
    """Log record filter keeping messages related to some random variables.

    Records without `tag` attribute, and records of level strictly above ERROR,
    are always kept.

    Parameters
    ----------
    tags : Iterable[int]
        Tags of the random variables to focus on
    """

    def __init__(self, tags: Iterable[int]):
        super().__init__()
        self.__tags = frozenset(tags)

    @property
    def tags(self) -> frozenset:
        """frozenset[int] : Tags of the random variables let through."""
        return self.__tags

    def filter(self, record: logging.LogRecord) -> int:
        """Is the specified record to be logged? Returns zero for no, nonzero for yes.

        Parameters
        ----------
        record : logging.LogRecord
            Log record to test

        Returns
        -------
        int
            Non-zero if the record is to be logged.
        """
        tag = getattr(record, "tag", None)
        return int(
            tag is None or record.levelno > LogLevel.ERROR or tag in self.__tags
        )


class FileLogHandler(RotatingFileHandler):
    """Special RotatingFileHandler for reliadist log message.

    Parameters
    ----------
    filename : str or Path, optional
        Log filename; default "reliadist_trace.log"
    backupCount : int, optional
        Number of backup log files; default 5
    encoding : str, optional
        File encoding to be enforced
    """

    def __init__(
        self,
        filename: Union[str, Path] = "reliadist_trace.log",
        backupCount: int = 5,
        encoding: Optional[str] = None,
    ) -> None:
        super().__init__(
            filename, backupCount=backupCount, encoding=encoding, delay=True
        )


class StreamLogHandler(logging.StreamHandler):
    """Special StreamHandler for reliadist log message."""

    def __init__(self, stream: io.TextIOBase = DEFAULT_STREAM) -> None:
        if stream is DEFAULT_STREAM:
            stream = sys.stdout
        super().__init__(stream=stream)


def rollover_logfile() -> None:
    """Rollover logfile of reliadist FileLogHandler."""
    for handler in root_logger.handlers:
        if isinstance(handler, FileLogHandler):
            handler.doRollover()


def set_log(
    filename: Union[str, Path, None] = None,
    stream: Optional[io.TextIOBase] = DEFAULT_STREAM,
    level: Optional[int] = None,
    tags: Optional[Iterable[int]] = None,
    format: str = "%(levelname)s - %(message)s",
    encoding: Optional[str] = None,
    backupCount: int = 5,
) -> None:
    """Set the reliadist log behavior.

    By default the log messages are written to ``sys.stdout`` only. Set `filename`
    to write them into a rotating log file as well, and `stream` to None to
    deactivate the stream handler.

    If `backupCount` is nonzero, at most `backupCount` files will be kept, and if more
    would be created when rollover occurs, the oldest one is deleted.

    Parameters
    ----------
    filename : str or Path or None, optional
        Log filename; default None (no log file)
    stream : io.TextIOBase or None, optional
        Log stream; default ``sys.stdout``
    level : int or LogLevel or None, optional
        Log level; default None (i.e. level defined in the configuration file)
    tags : Iterable[int] or None, optional
        Tags of the random variables on which to focus the log messages; default None (all)
    format : str, optional
        Log record format; default "%(levelname)s - %(message)s" - for the available attributes (see https://docs.python.org/3/library/logging.html#logrecord-attributes)
    encoding : str, optional
        File encoding to be enforced
    backupCount : int, optional
        Number of backup log files; default 5
    """
    nonetype = type(None)
    check_arg(filename, "filename", (str, Path, nonetype))
    if stream is not DEFAULT_STREAM:
        check_arg(stream, "stream", (io.TextIOBase, nonetype))
    check_arg(level, "level", (int, LogLevel, nonetype))
    check_arg(format, "format", str)
    check_arg(encoding, "encoding", (str, nonetype))
    check_arg(backupCount, "backupCount", int, lambda v: v >= 0)
    if tags is not None:
        tags = list(tags)
        for tag in tags:
            check_arg(tag, "tags", (int, numpy.integer))

    if level is None:
        from reliadist.core.config import get_config
        level = get_config().log_level

    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        if isinstance(handler, (FileLogHandler, StreamLogHandler)):
            handler.close()  # Be sure to close the file descriptor
            root_logger.removeHandler(handler)

    def add_handler(h):
        fmt = logging.Formatter(format)
        h.setFormatter(fmt)
        h.setLevel(level)
        if tags is not None:
            h.addFilter(RandomVariableFilter(tags))
        root_logger.addHandler(h)

    handlers = list()
    if filename is not None:
        handlers.append(
            FileLogHandler(filename, backupCount=backupCount, encoding=encoding)
        )

    if stream is not None:
        handlers.append(StreamLogHandler(stream))

    for handler in handlers:
        add_handler(handler)

    if len(handlers) == 0:
        logger.warning("No reliadist log handlers added.")
