"""
Black-Scholes Option Pricer

Closed-form European option prices, Greeks and implied volatility.
Volatilities and rates are quoted in percent throughout.
"""

from bs_pricer._version import __version__

# Analytics
from bs_pricer.analytics.black_scholes import (
    BlackScholesGreeks,
    bs_delta,
    bs_gamma,
    bs_greeks,
    bs_price,
    bs_theta,
    bs_vega,
)
from bs_pricer.analytics.implied_vol import ImpliedVolResult, implied_vol, implied_vol_result
from bs_pricer.analytics.normal import NormalDistribution

# Errors
from bs_pricer.errors import (
    ConvergenceError,
    DomainError,
    InvalidArgumentError,
    PricingError,
)

# Products
from bs_pricer.options.option import Option

__all__ = [
    # Version
    "__version__",
    # Analytics
    "BlackScholesGreeks",
    "ImpliedVolResult",
    "NormalDistribution",
    "bs_price",
    "bs_delta",
    "bs_gamma",
    "bs_vega",
    "bs_theta",
    "bs_greeks",
    "implied_vol",
    "implied_vol_result",
    # Errors
    "PricingError",
    "InvalidArgumentError",
    "DomainError",
    "ConvergenceError",
    # Products
    "Option",
]
