"""Base class of parametric random variables."""
import logging
import sys
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Optional, TextIO, Tuple

import numpy

from reliadist.core.config import get_config
from reliadist.utils.helpers import check_arg, check_number
from .enum import ParameterStatus


class RandomVariable(ABC):
    """Abstract class to define a parametric random variable.

    Derived classes implement the moments, the native parameters and the
    evaluation kernels `_pdf`, `_cdf` and `_inverse_cdf`. The public evaluation
    methods take care of argument checks and of degenerate parameterizations:
    they never raise on numerical issues, but log a diagnostic and return a
    sentinel value.

    Parameters
    ----------
    tag : int
        Identifier of the random variable, unique within its owner.
    start_value : float, optional
        Seed value for iterative consumers; default 0.
    """

    __slots__ = ("__weakref__", "_tag", "_start_value", "_status")

    TYPE: ClassVar[str] = ""
    """str : Discriminator of the distribution family"""

    LABEL: ClassVar[str] = ""
    """str : Human readable name of the distribution family"""

    def __init__(self, tag: int, start_value: float = 0.0):
        if isinstance(tag, (bool, numpy.bool_)):
            raise TypeError(f"argument 'tag' should be an integer; got bool {tag!r}")
        check_arg(tag, "tag", (int, numpy.integer))
        self._tag = int(tag)
        self._start_value = check_number(start_value, "start_value")
        self._status = ParameterStatus.VALID

    @property
    def tag(self) -> int:
        """int : Identifier of the random variable."""
        return self._tag

    @property
    def type(self) -> str:
        """str : Distribution discriminator, e.g. "LOGNORMAL"."""
        return self.TYPE

    @property
    def start_value(self) -> float:
        """float : Seed value for iterative algorithms; not used by the distribution itself."""
        return self._start_value

    @property
    def status(self) -> ParameterStatus:
        """ParameterStatus : State of the parameterization."""
        return self._status

    @property
    @abstractmethod
    def mean(self) -> float:
        """float : Mean of the random variable."""
        pass

    @property
    @abstractmethod
    def stdv(self) -> float:
        """float : Standard deviation of the random variable."""
        pass

    @property
    @abstractmethod
    def parameters(self) -> numpy.ndarray:
        """numpy.ndarray : Native parameters of the distribution, in definition order."""
        pass

    @abstractmethod
    def _parameter_items(self) -> List[Tuple[str, float]]:
        """Names and values of the native parameters, as printed by `print`."""
        pass

    @abstractmethod
    def _pdf(self, x: float) -> float:
        pass

    @abstractmethod
    def _cdf(self, x: float) -> float:
        pass

    @abstractmethod
    def _inverse_cdf(self, p: float) -> float:
        pass

    def pdf(self, x: float) -> float:
        """Probability density function.

        Parameters
        ----------
        x : float
            Value of the random variable

        Returns
        -------
        float
            Probability density at `x`; nan if `x` is nan or the distribution is degenerate
        """
        x = check_number(x, "x")
        if numpy.isnan(x):
            return numpy.nan
        if self._is_degenerate("PDF"):
            return numpy.nan
        return self._pdf(x)

    def cdf(self, x: float) -> float:
        """Cumulative distribution function.

        Parameters
        ----------
        x : float
            Value of the random variable

        Returns
        -------
        float
            Probability of the variable being lower than or equal to `x`;
            nan if `x` is nan or the distribution is degenerate
        """
        x = check_number(x, "x")
        if numpy.isnan(x):
            return numpy.nan
        if self._is_degenerate("CDF"):
            return numpy.nan
        return self._cdf(x)

    def inverse_cdf(self, p: float) -> float:
        """Inverse of the cumulative distribution function.

        Parameters
        ----------
        p : float
            Probability, within [0, 1]

        Returns
        -------
        float
            Value `x` such that `cdf(x) == p`; 0 if `p` is out of [0, 1], nan if
            the distribution is degenerate
        """
        p = check_number(p, "p")
        if p > 1.0 or p < 0.0:
            self._log(
                logging.ERROR,
                f"Invalid probability value {p!r} input to inverse CDF function of {self.LABEL} RV #{self.tag}",
            )
            return 0.0
        if self._is_degenerate("inverse CDF"):
            return numpy.nan
        return self._inverse_cdf(p)

    def print(self, stream: Optional[TextIO] = None) -> None:
        """Write a description of the random variable.

        Parameters
        ----------
        stream : TextIO, optional
            Output text stream; default ``sys.stdout``
        """
        if stream is None:
            stream = sys.stdout
        precision = get_config().precision
        stream.write(f"{self.LABEL} RV #{self.tag}\n")
        for name, value in self._parameter_items():
            stream.write(f"\t{name} = {value:.{precision}g}\n")

    def __json__(self) -> Dict[str, Any]:
        """Creates a JSONable dictionary representation of the object.

        Returns
        -------
        Dict[str, Any]
            The dictionary
        """
        return {
            "tag": self.tag,
            "type": self.type,
            "parameters": self.parameters.tolist(),
            "start_value": self.start_value,
        }

    def __repr__(self) -> str:
        params = ", ".join(f"{name}={value!r}" for name, value in self._parameter_items())
        return f"{type(self).__name__}(tag={self.tag}, {params})"

    def _log(self, level: int, msg: str) -> None:
        logger = logging.getLogger(type(self).__module__)
        logger.log(level, msg, extra={"tag": self.tag})

    def _is_degenerate(self, operation: str) -> bool:
        if self._status.is_valid:
            return False
        self._log(
            logging.ERROR,
            f"Cannot evaluate {operation} of {self.LABEL} RV #{self.tag}: {self._status.value}",
        )
        return True
