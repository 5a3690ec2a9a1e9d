"""
Black-Scholes analytical pricing formulas for validation.

Independent of bs_pricer: inputs are decimals (0.2 for 20%) and tau is the
time to expiry.
"""

import math

import numpy as np


def norm_cdf(x: float) -> float:
    """
    Cumulative distribution function for standard normal distribution.

    Parameters
    ----------
    x : float
        Input value

    Returns
    -------
    float
        CDF value at x
    """
    return 0.5 * (1.0 + math.erf(x / math.sqrt(2.0)))


def norm_pdf(x: float) -> float:
    """
    Probability density function for standard normal distribution.

    Parameters
    ----------
    x : float
        Input value

    Returns
    -------
    float
        PDF value at x
    """
    return math.exp(-0.5 * x**2) / math.sqrt(2.0 * math.pi)


def _d1(S0: float, K: float, r: float, sigma: float, tau: float) -> float:
    return (np.log(S0 / K) + (r + 0.5 * sigma**2) * tau) / (sigma * np.sqrt(tau))


def black_scholes_call(S0: float, K: float, r: float, sigma: float, tau: float) -> float:
    """
    Compute European call option price using Black-Scholes formula.

    Parameters
    ----------
    S0 : float
        Spot price
    K : float
        Strike price
    r : float
        Risk-free interest rate (decimal)
    sigma : float
        Volatility (decimal)
    tau : float
        Time to expiry

    Returns
    -------
    float
        Call option price
    """
    d1 = _d1(S0, K, r, sigma, tau)
    d2 = d1 - sigma * np.sqrt(tau)
    return S0 * norm_cdf(d1) - K * np.exp(-r * tau) * norm_cdf(d2)


def black_scholes_put(S0: float, K: float, r: float, sigma: float, tau: float) -> float:
    """
    Compute European put option price using Black-Scholes formula.

    Parameters
    ----------
    S0 : float
        Spot price
    K : float
        Strike price
    r : float
        Risk-free interest rate (decimal)
    sigma : float
        Volatility (decimal)
    tau : float
        Time to expiry

    Returns
    -------
    float
        Put option price
    """
    d1 = _d1(S0, K, r, sigma, tau)
    d2 = d1 - sigma * np.sqrt(tau)
    return K * np.exp(-r * tau) * norm_cdf(-d2) - S0 * norm_cdf(-d1)


def black_scholes_delta_call(S0: float, K: float, r: float, sigma: float, tau: float) -> float:
    """Call delta N(d1)."""
    return norm_cdf(_d1(S0, K, r, sigma, tau))


def black_scholes_vega(S0: float, K: float, r: float, sigma: float, tau: float) -> float:
    """
    Vega per unit of volatility (not per vol point).

    Vega is the same for calls and puts.
    """
    return S0 * norm_pdf(_d1(S0, K, r, sigma, tau)) * np.sqrt(tau)


def black_scholes_theta_call(S0: float, K: float, r: float, sigma: float, tau: float) -> float:
    """Call theta per year."""
    d1 = _d1(S0, K, r, sigma, tau)
    d2 = d1 - sigma * np.sqrt(tau)
    return -S0 * norm_pdf(d1) * sigma / (2 * np.sqrt(tau)) - r * K * np.exp(-r * tau) * norm_cdf(d2)
