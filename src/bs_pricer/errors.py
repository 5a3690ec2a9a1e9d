"""
Exception types raised by the pricing and implied volatility routines.
"""


class PricingError(ValueError):
    """Base class for all errors raised by bs_pricer."""


class InvalidArgumentError(PricingError):
    """
    Raised when an argument violates a contract of the call.

    Examples are an unknown option type, a valuation time after expiry,
    or an option price outside its no-arbitrage bounds.
    """


class DomainError(PricingError):
    """
    Raised when an input would make the closed-form formulas degenerate.

    Non-positive spot, strike, volatility or time to expiry, and
    non-finite values, fall in this category.
    """


class ConvergenceError(PricingError):
    """Raised when the Newton-Raphson iteration fails to converge."""
