"""
European option product.

An Option holds the contract terms (strike, expiry, type) and forwards
market inputs to the Black-Scholes formulas.
"""

import math
from dataclasses import dataclass, replace

from bs_pricer.analytics.black_scholes import (
    BlackScholesGreeks,
    bs_delta,
    bs_gamma,
    bs_greeks,
    bs_price,
    bs_theta,
    bs_vega,
    check_option_type,
)
from bs_pricer.analytics.implied_vol import implied_vol
from bs_pricer.errors import DomainError, InvalidArgumentError


@dataclass(frozen=True)
class Option:
    """
    European call or put.

    Strike and expiry are fixed at construction; the instance is frozen,
    so assigning to any attribute raises dataclasses.FrozenInstanceError.

    Parameters
    ----------
    strike : float
        Strike price (must be > 0)
    expiry : float
        Expiration date in years (must be > 0)
    option_type : str
        'call' or 'put'

    Examples
    --------
    >>> option = Option(strike=100.0, expiry=1.0)
    >>> round(option.price(spot=100.0, time=0.0, vol=20.0, rate=5.0), 4)
    10.4506
    """

    strike: float
    expiry: float
    option_type: str = "call"

    def __post_init__(self) -> None:
        check_option_type(self.option_type)
        if not math.isfinite(self.strike) or self.strike <= 0:
            raise DomainError(f"Strike must be positive and finite, got {self.strike}")
        if not math.isfinite(self.expiry) or self.expiry <= 0:
            raise DomainError(f"Expiry must be positive and finite, got {self.expiry}")

    def with_type(self, option_type: str) -> "Option":
        """Return a copy of this option with a different type."""
        return replace(self, option_type=option_type)

    def _check_time(self, time: float) -> None:
        if time > self.expiry:
            raise InvalidArgumentError(
                f"Evaluation time must precede expiry: time={time}, expiry={self.expiry}"
            )

    def price(self, spot: float, time: float, vol: float, rate: float) -> float:
        """
        Option premium at valuation time.

        Parameters
        ----------
        spot : float
            Spot price of the underlying
        time : float
            Valuation time in years (must not exceed expiry)
        vol : float
            Volatility in percent
        rate : float
            Risk-free rate in percent

        Returns
        -------
        float
            Option price

        Raises
        ------
        InvalidArgumentError
            If time is after expiry
        """
        self._check_time(time)
        return bs_price(spot, time, self.strike, self.expiry, vol, rate, self.option_type)

    def delta(self, spot: float, time: float, vol: float, rate: float) -> float:
        """Option delta. See price for the parameters."""
        self._check_time(time)
        return bs_delta(spot, time, self.strike, self.expiry, vol, rate, self.option_type)

    def gamma(self, spot: float, time: float, vol: float, rate: float) -> float:
        """Option gamma. See price for the parameters."""
        self._check_time(time)
        return bs_gamma(spot, time, self.strike, self.expiry, vol, rate)

    def vega(self, spot: float, time: float, vol: float, rate: float) -> float:
        """Option vega per vol point. See price for the parameters."""
        self._check_time(time)
        return bs_vega(spot, time, self.strike, self.expiry, vol, rate)

    def theta(self, spot: float, time: float, vol: float, rate: float) -> float:
        """One day option theta. See price for the parameters."""
        self._check_time(time)
        return bs_theta(spot, time, self.strike, self.expiry, vol, rate, self.option_type)

    def greeks(self, spot: float, time: float, vol: float, rate: float) -> BlackScholesGreeks:
        """Price and all Greeks at once."""
        self._check_time(time)
        return bs_greeks(spot, time, self.strike, self.expiry, vol, rate, self.option_type)

    def implied_vol(self, price: float, spot: float, rate: float, **kwargs) -> float:
        """
        Implied volatility (percent) of this option at time 0.

        Keyword arguments (tol, max_iter) are passed to the solver.
        """
        return implied_vol(
            price, spot, self.strike, self.expiry, rate, self.option_type, **kwargs
        )
