"""Class defining a lognormal random variable."""
import logging
from typing import List, Sequence, Tuple

import numpy

from reliadist.utils.helpers import check_number
from .enum import ParameterStatus
from .randomvariable import RandomVariable
from .standardnormal import SQRT_2PI, StandardNormalDistribution


class LognormalDistribution(RandomVariable):
    """A class to define a lognormal random variable.

    The logarithm of the variable follows a normal law of mean `lambda` and
    standard deviation `zeta`. The support is either the positive half-line or,
    for a negative variable (opposite of a positive lognormal variable), the
    negative half-line.

    Parameters
    ----------
    tag : int
        Identifier of the random variable.
    mean : float
        Mean of the variable; a negative mean defines a negative variable.
    stdv : float
        Standard deviation of the variable.
    start_value : float, optional
        Seed value for iterative consumers; default 0.

    Notes
    -----
    The sign of a variable built from its moments is given by the sign of the
    mean, whereas it is given by the sign of `lambda` for a variable built with
    :py:meth:`from_parameters`.
    """

    __slots__ = ("_lambda", "_zeta", "_is_positive")

    TYPE = "LOGNORMAL"
    LABEL = "Lognormal"

    def __init__(self, tag: int, mean: float, stdv: float, start_value: float = 0.0):
        super().__init__(tag, start_value)
        mean = check_number(mean, "mean")
        stdv = check_number(stdv, "stdv")

        self._is_positive = not mean < 0.0
        self._lambda = self._zeta = 0.0

        if not self._set_parameters(abs(mean), stdv):
            self._log(
                logging.ERROR,
                f"Error setting parameters in Lognormal RV with tag {tag}",
            )

    @classmethod
    def from_parameters(
        cls, tag: int, parameters: Sequence[float], start_value: float = 0.0
    ) -> "LognormalDistribution":
        """Create a lognormal random variable from its native parameters `[lambda, zeta]`.

        A negative `lambda` defines a negative variable, with log-mean `abs(lambda)`.
        A sequence of wrong length leaves the variable degenerate, with
        `lambda == zeta == 0`.
        """
        rv = cls.__new__(cls)
        RandomVariable.__init__(rv, tag, start_value)
        rv._is_positive = True

        parameters = numpy.ravel(parameters)
        if parameters.size != 2:
            rv._log(
                logging.ERROR,
                f"Lognormal RV requires 2 parameters, lambda and zeta, for RV with tag {tag}; got {parameters.size}",
            )
            rv._lambda = rv._zeta = 0.0
            rv._status = ParameterStatus.INVALID_PARAMETER_COUNT
            return rv

        lambda_ = check_number(parameters[0], "lambda")
        rv._zeta = check_number(parameters[1], "zeta")
        if lambda_ < 0.0:
            rv._is_positive = False
            lambda_ = -lambda_
        rv._lambda = lambda_

        if not rv._zeta > 0.0:
            rv._log(
                logging.ERROR,
                f"Lognormal RV #{tag} requires a strictly positive zeta; got {rv._zeta!r}",
            )
            rv._status = ParameterStatus.INVALID_PARAMETERS
        return rv

    def _set_parameters(self, mean: float, stdv: float) -> bool:
        """Set `lambda` and `zeta` from the moments of a positive variable.

        Called once, on construction.

        Parameters
        ----------
        mean : float
            Mean of the positive variable; must be strictly positive.
        stdv : float
            Standard deviation; only its magnitude is used.

        Returns
        -------
        bool
            False if the mean is not strictly positive; `lambda` and `zeta` are then nan.
        """
        if not mean > 0.0:
            self._log(
                logging.ERROR,
                f"Lognormal RV #{self.tag} requires a strictly positive mean magnitude; got {mean!r}",
            )
            self._lambda = self._zeta = numpy.nan
            self._status = ParameterStatus.INVALID_MOMENTS
            return False

        cov = stdv / mean
        zeta2 = numpy.log1p(cov * cov)
        self._zeta = float(numpy.sqrt(zeta2))
        self._lambda = float(numpy.log(mean) - 0.5 * zeta2)
        self._status = ParameterStatus.VALID

        if not self._zeta > 0.0:
            # Zero (or undefined) standard deviation: no spread in log space
            self._log(
                logging.ERROR,
                f"Lognormal RV #{self.tag} is degenerate with stdv={stdv!r}; got zeta={self._zeta!r}",
            )
            self._status = ParameterStatus.INVALID_MOMENTS
        return True

    @property
    def is_positive(self) -> bool:
        """bool : True if the support is the positive half-line, False if it is the negative one."""
        return self._is_positive

    @property
    def lambda_(self) -> float:
        """float : Mean of the logarithm of the (positive) variable."""
        return self._lambda

    @property
    def zeta(self) -> float:
        """float : Standard deviation of the logarithm of the (positive) variable."""
        return self._zeta

    @property
    def mean(self) -> float:
        mean = float(numpy.exp(self._lambda + 0.5 * self._zeta ** 2))
        return mean if self._is_positive else -mean

    @property
    def stdv(self) -> float:
        zeta2 = self._zeta ** 2
        return float(numpy.exp(self._lambda + 0.5 * zeta2) * numpy.sqrt(numpy.expm1(zeta2)))

    @property
    def parameters(self) -> numpy.ndarray:
        """numpy.ndarray : `[lambda, zeta]`, shape parameters of the positive variable."""
        return numpy.array([self._lambda, self._zeta])

    def _parameter_items(self) -> List[Tuple[str, float]]:
        return [("lambda", self._lambda), ("zeta", self._zeta)]

    def _pdf(self, x: float) -> float:
        if not self._is_positive:
            # Plain mirror x -> -x, rather than the shifted reflection f_pos(x + 2|x|)
            x = -x

        if x <= 0.0:
            return 0.0
        z = (numpy.log(x) - self._lambda) / self._zeta
        return float(numpy.exp(-0.5 * z * z) / (SQRT_2PI * self._zeta * x))

    def _cdf(self, x: float) -> float:
        phi = StandardNormalDistribution()

        if self._is_positive:
            if x > 0.0:
                result = phi.cdf((numpy.log(x) - self._lambda) / self._zeta)
            else:
                result = 0.0
        else:
            if x < 0.0:
                result = 1.0 - phi.cdf((numpy.log(abs(x)) - self._lambda) / self._zeta)
            else:
                result = 1.0

        # Applied on top of the branch above for negative variables
        return result if self._is_positive else 1.0 - result

    def _inverse_cdf(self, p: float) -> float:
        phi = StandardNormalDistribution()

        if self._is_positive:
            u = phi.inverse_cdf(p)
            return float(numpy.exp(u * self._zeta + self._lambda))
        else:
            u = phi.inverse_cdf(1.0 - p)
            return -float(numpy.exp(u * self._zeta + self._lambda))
