"""
Black-Scholes analytical pricing formulas for European options.

Every function takes the same market inputs in the same order:

    spot, time, strike, expiry, vol, rate

where ``time`` is the valuation date and ``expiry`` the expiration date
(both in years), and ``vol`` and ``rate`` are annualized and quoted in
percent (20.0 means 20%). They are divided by 100 before entering the
formulas.
"""

import math
from dataclasses import dataclass

from bs_pricer.analytics.normal import norm_cdf, norm_pdf
from bs_pricer.errors import DomainError, InvalidArgumentError

OPTION_TYPES = ("call", "put")

# Theta is reported as the value lost over one calendar day.
DAYS_PER_YEAR = 365.0


@dataclass(frozen=True)
class BlackScholesGreeks:
    """
    Price and Greeks of a European option.

    Attributes
    ----------
    price : float
        Option premium
    delta : float
        Sensitivity to the spot price
    gamma : float
        Sensitivity of delta to the spot price
    vega : float
        Price change for a one point (1%) move in volatility
    theta : float
        Price change over one calendar day
    """

    price: float
    delta: float
    gamma: float
    vega: float
    theta: float

    def __repr__(self) -> str:
        return (
            f"BlackScholesGreeks(price={self.price:.6f}, delta={self.delta:.6f}, "
            f"gamma={self.gamma:.6f}, vega={self.vega:.6f}, theta={self.theta:.6f})"
        )


def check_option_type(option_type: str) -> None:
    """Raise InvalidArgumentError unless option_type is 'call' or 'put'."""
    if option_type not in OPTION_TYPES:
        raise InvalidArgumentError(f"option_type must be 'call' or 'put', got {option_type!r}")


def discount_factor(rate: float, tau: float) -> float:
    """
    Discount factor e^{-rτ} for a rate in percent.

    Raises
    ------
    DomainError
        If the factor overflows a float (absurdly negative rates)
    """
    try:
        return math.exp(-rate / 100.0 * tau)
    except OverflowError as e:
        raise DomainError(f"Discount factor overflows for rate={rate}% over {tau} years") from e


def _check_market_inputs(
    spot: float, time: float, strike: float, expiry: float, vol: float, rate: float
) -> None:
    values = {
        "spot": spot,
        "time": time,
        "strike": strike,
        "expiry": expiry,
        "vol": vol,
        "rate": rate,
    }
    for name, value in values.items():
        if not math.isfinite(value):
            raise DomainError(f"{name} must be finite, got {value}")
    if spot <= 0:
        raise DomainError(f"Spot price must be positive, got {spot}")
    if strike <= 0:
        raise DomainError(f"Strike must be positive, got {strike}")
    if vol <= 0:
        raise DomainError(f"Volatility must be positive, got {vol}")
    if expiry - time <= 0:
        raise DomainError(
            f"Time to expiry must be positive, got expiry={expiry} and time={time}"
        )


def bs_d1_d2(
    spot: float, time: float, strike: float, expiry: float, vol: float, rate: float
) -> tuple[float, float, float]:
    """
    Compute d1, d2 and the time to expiry shared by all formulas.

    Parameters
    ----------
    spot, time, strike, expiry : float
        See module docstring
    vol : float
        Volatility in percent
    rate : float
        Risk-free rate in percent

    Returns
    -------
    tuple[float, float, float]
        (d1, d2, tau) with tau = expiry - time

    Raises
    ------
    DomainError
        If any input is non-finite, spot/strike/vol are not positive, or
        expiry does not lie after time

    Notes
    -----
    d1 = [ln(S/K) + (r + σ²/2)τ] / (σ√τ)
    d2 = [ln(S/K) + (r - σ²/2)τ] / (σ√τ)
    """
    _check_market_inputs(spot, time, strike, expiry, vol, rate)

    sigma = vol / 100.0
    r = rate / 100.0
    tau = expiry - time
    log_moneyness = math.log(spot / strike)
    sigma_root_tau = sigma * math.sqrt(tau)

    d1 = (log_moneyness + (r + 0.5 * sigma**2) * tau) / sigma_root_tau
    d2 = (log_moneyness + (r - 0.5 * sigma**2) * tau) / sigma_root_tau
    return d1, d2, tau


def bs_call_price(
    spot: float, time: float, strike: float, expiry: float, vol: float, rate: float
) -> float:
    """
    Black-Scholes price of a European call.

    C = S Φ(d1) - K e^{-rτ} Φ(d2)
    """
    d1, d2, tau = bs_d1_d2(spot, time, strike, expiry, vol, rate)
    return spot * norm_cdf(d1) - strike * discount_factor(rate, tau) * norm_cdf(d2)


def bs_put_price(
    spot: float, time: float, strike: float, expiry: float, vol: float, rate: float
) -> float:
    """
    Black-Scholes price of a European put.

    P = -S Φ(-d1) + K e^{-rτ} Φ(-d2)
    """
    d1, d2, tau = bs_d1_d2(spot, time, strike, expiry, vol, rate)
    return -spot * norm_cdf(-d1) + strike * discount_factor(rate, tau) * norm_cdf(-d2)


def bs_call_delta(
    spot: float, time: float, strike: float, expiry: float, vol: float, rate: float
) -> float:
    """Call delta, Φ(d1)."""
    d1, _, _ = bs_d1_d2(spot, time, strike, expiry, vol, rate)
    return norm_cdf(d1)


def bs_put_delta(
    spot: float, time: float, strike: float, expiry: float, vol: float, rate: float
) -> float:
    """Put delta, -Φ(-d1)."""
    d1, _, _ = bs_d1_d2(spot, time, strike, expiry, vol, rate)
    return -norm_cdf(-d1)


def bs_gamma(
    spot: float, time: float, strike: float, expiry: float, vol: float, rate: float
) -> float:
    """
    Gamma of a European option (same for calls and puts).

    Gamma = φ(d1) / (S σ √τ)
    """
    d1, _, tau = bs_d1_d2(spot, time, strike, expiry, vol, rate)
    sigma = vol / 100.0
    return norm_pdf(d1) / (spot * sigma * math.sqrt(tau))


def bs_vega(
    spot: float, time: float, strike: float, expiry: float, vol: float, rate: float
) -> float:
    """
    Vega of a European option (same for calls and puts).

    Vega = S √τ φ(d1) / 100, i.e. the price change for a one point move
    in the percentage volatility.
    """
    d1, _, tau = bs_d1_d2(spot, time, strike, expiry, vol, rate)
    return spot * math.sqrt(tau) * norm_pdf(d1) / 100.0


def bs_call_theta(
    spot: float, time: float, strike: float, expiry: float, vol: float, rate: float
) -> float:
    """
    One day call theta.

    Theta = [-S σ φ(d1) / (2√τ) - r K e^{-rτ} Φ(d2)] / 365
    """
    d1, d2, tau = bs_d1_d2(spot, time, strike, expiry, vol, rate)
    sigma = vol / 100.0
    r = rate / 100.0
    decay = -spot * sigma * norm_pdf(d1) / (2.0 * math.sqrt(tau))
    carry = -r * strike * discount_factor(rate, tau) * norm_cdf(d2)
    return (decay + carry) / DAYS_PER_YEAR


def bs_put_theta(
    spot: float, time: float, strike: float, expiry: float, vol: float, rate: float
) -> float:
    """
    One day put theta.

    Theta = [-S σ φ(d1) / (2√τ) + r K e^{-rτ} Φ(-d2)] / 365
    """
    d1, d2, tau = bs_d1_d2(spot, time, strike, expiry, vol, rate)
    sigma = vol / 100.0
    r = rate / 100.0
    decay = -spot * sigma * norm_pdf(d1) / (2.0 * math.sqrt(tau))
    carry = r * strike * discount_factor(rate, tau) * norm_cdf(-d2)
    return (decay + carry) / DAYS_PER_YEAR


def bs_price(
    spot: float,
    time: float,
    strike: float,
    expiry: float,
    vol: float,
    rate: float,
    option_type: str = "call",
) -> float:
    """
    Compute European option price using the Black-Scholes formula.

    Parameters
    ----------
    spot : float
        Spot price of the underlying (must be > 0)
    time : float
        Valuation time in years
    strike : float
        Strike price (must be > 0)
    expiry : float
        Expiration date in years (must be > time)
    vol : float
        Annualized volatility in percent (must be > 0)
    rate : float
        Annualized risk-free rate in percent
    option_type : str
        'call' or 'put'

    Returns
    -------
    float
        Option price

    Raises
    ------
    InvalidArgumentError
        If option_type is not 'call' or 'put'
    DomainError
        If the market inputs are degenerate
    """
    check_option_type(option_type)
    if option_type == "call":
        return bs_call_price(spot, time, strike, expiry, vol, rate)
    return bs_put_price(spot, time, strike, expiry, vol, rate)


def bs_delta(
    spot: float,
    time: float,
    strike: float,
    expiry: float,
    vol: float,
    rate: float,
    option_type: str = "call",
) -> float:
    """Delta for a call or put. See bs_price for the parameters."""
    check_option_type(option_type)
    if option_type == "call":
        return bs_call_delta(spot, time, strike, expiry, vol, rate)
    return bs_put_delta(spot, time, strike, expiry, vol, rate)


def bs_theta(
    spot: float,
    time: float,
    strike: float,
    expiry: float,
    vol: float,
    rate: float,
    option_type: str = "call",
) -> float:
    """One day theta for a call or put. See bs_price for the parameters."""
    check_option_type(option_type)
    if option_type == "call":
        return bs_call_theta(spot, time, strike, expiry, vol, rate)
    return bs_put_theta(spot, time, strike, expiry, vol, rate)


def bs_greeks(
    spot: float,
    time: float,
    strike: float,
    expiry: float,
    vol: float,
    rate: float,
    option_type: str = "call",
) -> BlackScholesGreeks:
    """
    Price and all Greeks in a single container.

    Parameters
    ----------
    spot, time, strike, expiry, vol, rate, option_type
        See bs_price

    Returns
    -------
    BlackScholesGreeks
        Price, delta, gamma, vega and one day theta
    """
    return BlackScholesGreeks(
        price=bs_price(spot, time, strike, expiry, vol, rate, option_type),
        delta=bs_delta(spot, time, strike, expiry, vol, rate, option_type),
        gamma=bs_gamma(spot, time, strike, expiry, vol, rate),
        vega=bs_vega(spot, time, strike, expiry, vol, rate),
        theta=bs_theta(spot, time, strike, expiry, vol, rate, option_type),
    )
