"""Standard normal distribution, building block of the normal-based distributions."""
import logging

import numpy
import scipy.special

from reliadist.patterns import Singleton
from reliadist.utils.helpers import check_number

logger = logging.getLogger(__name__)

SQRT_2PI = numpy.sqrt(2.0 * numpy.pi)


class StandardNormalDistribution(metaclass=Singleton):
    """Normal distribution with zero mean and unit standard deviation.

    The class is a singleton: all calls to the constructor return the same
    instance, which holds no mutable state and can therefore be shared by all
    distributions relying on the normal law.

    The cumulative function and its inverse are evaluated with `scipy.special.ndtr`
    and `scipy.special.ndtri`, accurate to double precision over the whole real
    line (in particular in the tails, where `1 - cdf(x)` would lose all significant
    digits).

    Examples
    --------
    >>> phi = StandardNormalDistribution()
    >>> phi.cdf(0.0)
    0.5
    >>> round(phi.inverse_cdf(0.975), 2)
    1.96
    """

    __slots__ = ()

    TYPE = "STANDARD_NORMAL"

    @property
    def type(self) -> str:
        """str : Distribution discriminator, "STANDARD_NORMAL"."""
        return self.TYPE

    @property
    def parameters(self) -> numpy.ndarray:
        """numpy.ndarray : `[mean, stdv]`, i.e. `[0, 1]`"""
        return numpy.array([0.0, 1.0])

    @property
    def mean(self) -> float:
        """float : Mean of the distribution; always 0."""
        return 0.0

    @property
    def stdv(self) -> float:
        """float : Standard deviation of the distribution; always 1."""
        return 1.0

    def pdf(self, x: float) -> float:
        """Probability density function, `exp(-x**2 / 2) / sqrt(2 pi)`."""
        x = check_number(x, "x")
        return float(numpy.exp(-0.5 * x * x) / SQRT_2PI)

    def cdf(self, x: float) -> float:
        """Cumulative distribution function.

        Satisfies `cdf(-inf) == 0`, `cdf(0) == 0.5`, `cdf(inf) == 1` and
        `cdf(-x) == 1 - cdf(x)`.
        """
        x = check_number(x, "x")
        return float(scipy.special.ndtr(x))

    def inverse_cdf(self, p: float) -> float:
        """Inverse of the cumulative distribution function.

        Parameters
        ----------
        p : float
            Probability, within [0, 1]

        Returns
        -------
        float
            Quantile of order `p`; `-inf` for `p == 0`, `inf` for `p == 1`,
            and 0 if `p` is out of [0, 1].
        """
        p = check_number(p, "p")
        if p > 1.0 or p < 0.0:
            logger.error(
                f"Invalid probability value {p!r} input to inverse CDF function of standard normal distribution"
            )
            return 0.0
        return float(scipy.special.ndtri(p))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
