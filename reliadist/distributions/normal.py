"""Class defining a normal random variable."""
import logging
from typing import List, Sequence, Tuple

import numpy

from reliadist.utils.helpers import check_number
from .enum import ParameterStatus
from .randomvariable import RandomVariable
from .standardnormal import StandardNormalDistribution


class NormalDistribution(RandomVariable):
    """A class to define a gaussian random variable.

    Parameters
    ----------
    tag : int
        Identifier of the random variable.
    mean : float
        Mean of the variable.
    stdv : float
        Standard deviation of the variable; must be strictly positive.
    start_value : float, optional
        Seed value for iterative consumers; default 0.
    """

    __slots__ = ("_mean", "_stdv")

    TYPE = "NORMAL"
    LABEL = "Normal"

    def __init__(self, tag: int, mean: float, stdv: float, start_value: float = 0.0):
        super().__init__(tag, start_value)
        self._mean = check_number(mean, "mean")
        self._stdv = check_number(stdv, "stdv")
        self._check_stdv(ParameterStatus.INVALID_MOMENTS)

    @classmethod
    def from_parameters(
        cls, tag: int, parameters: Sequence[float], start_value: float = 0.0
    ) -> "NormalDistribution":
        """Create a normal random variable from its native parameters `[mean, stdv]`.

        A sequence of wrong length leaves the variable degenerate, with zero
        mean and standard deviation.
        """
        rv = cls.__new__(cls)
        RandomVariable.__init__(rv, tag, start_value)

        parameters = numpy.ravel(parameters)
        if parameters.size != 2:
            rv._log(
                logging.ERROR,
                f"Normal RV requires 2 parameters, mean and stdv, for RV with tag {tag}; got {parameters.size}",
            )
            rv._mean = rv._stdv = 0.0
            rv._status = ParameterStatus.INVALID_PARAMETER_COUNT
            return rv

        rv._mean = check_number(parameters[0], "mean")
        rv._stdv = check_number(parameters[1], "stdv")
        rv._check_stdv(ParameterStatus.INVALID_PARAMETERS)
        return rv

    def _check_stdv(self, failure: ParameterStatus) -> None:
        if not self._stdv > 0.0:
            self._log(
                logging.ERROR,
                f"Normal RV #{self.tag} requires a strictly positive standard deviation; got {self._stdv!r}",
            )
            self._status = failure

    @property
    def mean(self) -> float:
        return self._mean

    @property
    def stdv(self) -> float:
        return self._stdv

    @property
    def parameters(self) -> numpy.ndarray:
        """numpy.ndarray : `[mean, stdv]`"""
        return numpy.array([self._mean, self._stdv])

    def _parameter_items(self) -> List[Tuple[str, float]]:
        return [("mean", self._mean), ("stdv", self._stdv)]

    def _pdf(self, x: float) -> float:
        phi = StandardNormalDistribution()
        return phi.pdf((x - self._mean) / self._stdv) / self._stdv

    def _cdf(self, x: float) -> float:
        phi = StandardNormalDistribution()
        return phi.cdf((x - self._mean) / self._stdv)

    def _inverse_cdf(self, p: float) -> float:
        phi = StandardNormalDistribution()
        return self._mean + self._stdv * phi.inverse_cdf(p)
