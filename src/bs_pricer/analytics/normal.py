"""
Normal distribution used by the Black-Scholes formulas.

The CDF is evaluated through the error function from the math module so
the package does not need scipy.
"""

import math
from dataclasses import dataclass
from statistics import NormalDist

from bs_pricer.errors import DomainError


@dataclass(frozen=True)
class NormalDistribution:
    """
    Gaussian distribution with a given mean and standard deviation.

    Parameters
    ----------
    mean : float
        Mean μ of the distribution
    stddev : float
        Standard deviation σ. Must be non-zero; this is not checked.
    """

    mean: float = 0.0
    stddev: float = 1.0

    def pdf(self, x: float) -> float:
        """
        Probability density function.

        Parameters
        ----------
        x : float
            Input value

        Returns
        -------
        float
            φ(x) = exp(-(x-μ)²/(2σ²)) / (σ√(2π))
        """
        z = x - self.mean
        return math.exp(-z * z / (2.0 * self.stddev * self.stddev)) / (
            self.stddev * math.sqrt(2.0 * math.pi)
        )

    def cdf(self, x: float) -> float:
        """
        Cumulative distribution function.

        Parameters
        ----------
        x : float
            Input value

        Returns
        -------
        float
            P(X <= x) = 0.5 * (1 + erf((x-μ)/(σ√2)))
        """
        # erfc(-z) == 1 + erf(z), without the cancellation in the lower tail
        return 0.5 * math.erfc(-(x - self.mean) / (self.stddev * math.sqrt(2.0)))

    def ppf(self, p: float) -> float:
        """
        Inverse of the cumulative distribution function.

        Parameters
        ----------
        p : float
            Probability, strictly between 0 and 1

        Returns
        -------
        float
            x such that cdf(x) = p

        Raises
        ------
        DomainError
            If p is not in the open interval (0, 1)
        """
        if not 0.0 < p < 1.0:
            raise DomainError(f"Probability must lie in (0, 1), got {p}")
        return NormalDist(self.mean, self.stddev).inv_cdf(p)


STANDARD_NORMAL = NormalDistribution(0.0, 1.0)


def norm_pdf(x: float) -> float:
    """Standard normal density φ(x)."""
    return STANDARD_NORMAL.pdf(x)


def norm_cdf(x: float) -> float:
    """Standard normal CDF Φ(x)."""
    return STANDARD_NORMAL.cdf(x)


def norm_ppf(p: float) -> float:
    """Standard normal quantile Φ⁻¹(p)."""
    return STANDARD_NORMAL.ppf(p)
