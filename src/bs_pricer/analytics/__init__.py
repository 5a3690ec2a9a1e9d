"""
Analytics module for Black-Scholes pricing and implied volatility.

Provides closed-form prices and Greeks for European options and a
Newton-Raphson implied volatility solver, without scipy dependency.
"""

from bs_pricer.analytics.black_scholes import (
    BlackScholesGreeks,
    bs_call_delta,
    bs_call_price,
    bs_call_theta,
    bs_d1_d2,
    bs_delta,
    bs_gamma,
    bs_greeks,
    bs_price,
    bs_put_delta,
    bs_put_price,
    bs_put_theta,
    bs_theta,
    bs_vega,
)
from bs_pricer.analytics.implied_vol import ImpliedVolResult, implied_vol, implied_vol_result
from bs_pricer.analytics.normal import (
    STANDARD_NORMAL,
    NormalDistribution,
    norm_cdf,
    norm_pdf,
    norm_ppf,
)

__all__ = [
    "BlackScholesGreeks",
    "ImpliedVolResult",
    "NormalDistribution",
    "STANDARD_NORMAL",
    "bs_call_delta",
    "bs_call_price",
    "bs_call_theta",
    "bs_d1_d2",
    "bs_delta",
    "bs_gamma",
    "bs_greeks",
    "bs_price",
    "bs_put_delta",
    "bs_put_price",
    "bs_put_theta",
    "bs_theta",
    "bs_vega",
    "implied_vol",
    "implied_vol_result",
    "norm_cdf",
    "norm_pdf",
    "norm_ppf",
]
