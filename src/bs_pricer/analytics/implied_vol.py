"""
Implied volatility solver for European options.

Inverts the Black-Scholes formula in normalized coordinates

    x = ln(F / K),    β = price e^{rT/2} / √(S K),    F = S e^{rT}

where the normalized price is

    b(σ) = θ e^{x/2} Φ(θ(x/σ + σ/2)) - θ e^{-x/2} Φ(θ(x/σ - σ/2))

with σ the total volatility (annual volatility times √T) and θ = +1 for
calls, -1 for puts. The inflection point σ_c = √(2|x|) splits the price
axis at b_c = b(σ_c):

- β >= b_c: b is concave in σ, Newton runs directly on b(σ) - β from a
  seed built on the inverse normal CDF.
- β < b_c: b is flat and convex near σ = 0, so Newton runs on
  ln(b(σ) - ι) - ln(β - ι), ι being the normalized intrinsic value,
  from an algebraic seed.

Rates and volatilities are quoted in percent, as everywhere else in the
package.
"""

import logging
import math
from dataclasses import dataclass

from bs_pricer.analytics.black_scholes import check_option_type, discount_factor
from bs_pricer.analytics.normal import norm_cdf, norm_pdf, norm_ppf
from bs_pricer.errors import ConvergenceError, DomainError, InvalidArgumentError

logger = logging.getLogger(__name__)

DEFAULT_TOL = 1e-8
DEFAULT_MAX_ITER = 100


@dataclass(frozen=True)
class ImpliedVolResult:
    """
    Outcome of an implied volatility solve.

    Attributes
    ----------
    vol : float
        Annualized implied volatility in percent
    iterations : int
        Number of Newton steps taken
    branch : str
        'upper' when β >= b_c (Newton on the normalized price), 'lower'
        when β < b_c (Newton on its logarithm)
    seed : float
        Initial total volatility σ√T handed to Newton
    """

    vol: float
    iterations: int
    branch: str
    seed: float


def normalized_price(x: float, sigma: float, theta: int) -> float:
    """
    Normalized Black price b(σ) for log-moneyness x and total volatility σ.
    """
    return theta * math.exp(x / 2.0) * norm_cdf(theta * (x / sigma + sigma / 2.0)) - (
        theta * math.exp(-x / 2.0) * norm_cdf(theta * (x / sigma - sigma / 2.0))
    )


def normalized_vega(x: float, sigma: float) -> float:
    """Derivative of the normalized price with respect to σ (same for both θ)."""
    x_over_s2 = x / (sigma * sigma)
    return math.exp(x / 2.0) * norm_pdf(x / sigma + sigma / 2.0) * (-x_over_s2 + 0.5) - (
        math.exp(-x / 2.0) * norm_pdf(x / sigma - sigma / 2.0) * (-x_over_s2 - 0.5)
    )


def normalized_intrinsic(x: float, theta: int) -> float:
    """Normalized intrinsic value ι: zero out of the money."""
    if theta * x <= 0:
        return 0.0
    return theta * (math.exp(x / 2.0) - math.exp(-x / 2.0))


def _check_solver_inputs(
    price: float, spot: float, strike: float, expiry: float, rate: float, option_type: str
) -> None:
    check_option_type(option_type)
    values = {"price": price, "spot": spot, "strike": strike, "expiry": expiry, "rate": rate}
    for name, value in values.items():
        if not math.isfinite(value):
            raise DomainError(f"{name} must be finite, got {value}")
    if spot <= 0:
        raise DomainError(f"Spot price must be positive, got {spot}")
    if strike <= 0:
        raise DomainError(f"Strike must be positive, got {strike}")
    if expiry <= 0:
        raise DomainError(f"Time to expiry must be positive, got {expiry}")

    discounted_strike = discount_factor(rate, expiry) * strike
    if option_type == "call":
        lower_bound = max(spot - discounted_strike, 0.0)
        upper_bound = spot
    else:
        lower_bound = max(discounted_strike - spot, 0.0)
        upper_bound = discounted_strike

    if price <= lower_bound:
        raise InvalidArgumentError(
            f"Option price out of range: {option_type} price {price:.6f} is at or below "
            f"the arbitrage lower bound {lower_bound:.6f}"
        )
    if price >= upper_bound:
        raise InvalidArgumentError(
            f"Option price out of range: {option_type} price {price:.6f} is at or above "
            f"the arbitrage upper bound {upper_bound:.6f}"
        )


def _newton(residual, derivative, seed: float, tol: float, max_iter: int) -> tuple[float, int]:
    """
    Newton-Raphson on residual(σ) = 0, stopping when successive iterates
    differ by at most tol.

    A step that would take σ to zero or below is damped to a halving of σ.
    """
    old_sigma = seed
    for iteration in range(1, max_iter + 1):
        value = residual(old_sigma)
        slope = derivative(old_sigma)
        if slope == 0 or not math.isfinite(slope):
            raise ConvergenceError(
                f"Newton step undefined at sigma={old_sigma:.6e} (derivative {slope})"
            )
        new_sigma = old_sigma - value / slope
        if not math.isfinite(new_sigma):
            raise ConvergenceError(f"Newton iterate is not finite after {iteration} steps")
        if new_sigma <= 0:
            new_sigma = 0.5 * old_sigma
        if abs(new_sigma - old_sigma) <= tol:
            return new_sigma, iteration
        old_sigma = new_sigma

    raise ConvergenceError(
        f"Implied volatility did not converge after {max_iter} iterations "
        f"(last sigma={old_sigma:.10f})"
    )


def implied_vol_result(
    price: float,
    spot: float,
    strike: float,
    expiry: float,
    rate: float,
    option_type: str = "call",
    *,
    tol: float = DEFAULT_TOL,
    max_iter: int = DEFAULT_MAX_ITER,
) -> ImpliedVolResult:
    """
    Solve for implied volatility and report how the solve went.

    Parameters
    ----------
    price : float
        Observed option price
    spot : float
        Spot price of the underlying (must be > 0)
    strike : float
        Strike price (must be > 0)
    expiry : float
        Time to expiry in years (must be > 0)
    rate : float
        Annualized risk-free rate in percent
    option_type : str, optional
        'call' (θ = +1) or 'put' (θ = -1). Default is 'call'.
    tol : float, optional
        Absolute tolerance on successive total-volatility iterates
        (default: 1e-8)
    max_iter : int, optional
        Maximum number of Newton steps (default: 100)

    Returns
    -------
    ImpliedVolResult
        Implied volatility in percent with solver diagnostics

    Raises
    ------
    InvalidArgumentError
        If option_type is unknown or price violates the no-arbitrage bounds.
        For calls these are max(S - K e^{-rT}, 0) < price < S, for puts
        max(K e^{-rT} - S, 0) < price < K e^{-rT}.
    DomainError
        If spot, strike or expiry are not positive, inputs are not finite, or
        the discount factor overflows
    ConvergenceError
        If Newton does not converge within max_iter steps
    """
    _check_solver_inputs(price, spot, strike, expiry, rate, option_type)
    if max_iter < 1:
        raise InvalidArgumentError(f"max_iter must be at least 1, got {max_iter}")

    r = rate / 100.0
    theta = 1 if option_type == "call" else -1

    x = r * expiry + math.log(spot / strike)
    beta = price / math.sqrt(discount_factor(rate, expiry) * spot * strike)

    def b(sigma: float) -> float:
        return normalized_price(x, sigma, theta)

    def b_prime(sigma: float) -> float:
        return normalized_vega(x, sigma)

    sigma_c = math.sqrt(2.0 * abs(x))
    # b(σ) -> 0 as σ -> 0 when the forward is at the money
    b_c = b(sigma_c) if sigma_c > 0 else 0.0

    if beta >= b_c:
        branch = "upper"
        upper = math.exp(theta * x / 2.0)
        p = (upper - beta) * norm_cdf(-math.sqrt(abs(x) / 2.0)) / (upper - b_c)
        seed = -2.0 * norm_ppf(p)
        sigma, iterations = _newton(lambda s: b(s) - beta, b_prime, seed, tol, max_iter)
    else:
        branch = "lower"
        iota = normalized_intrinsic(x, theta)

        def g(sigma: float) -> float:
            excess = b(sigma) - iota
            if excess <= 0:
                raise ConvergenceError(
                    f"Normalized time value vanished at sigma={sigma:.6e}; "
                    "price too close to intrinsic value"
                )
            return math.log(excess) - math.log(beta - iota)

        def g_prime(sigma: float) -> float:
            return b_prime(sigma) / (b(sigma) - iota)

        seed = math.sqrt(2.0 * x * x / (abs(x) - 4.0 * math.log((beta - iota) / (b_c - iota))))
        sigma, iterations = _newton(g, g_prime, seed, tol, max_iter)

    vol = 100.0 * sigma / math.sqrt(expiry)
    logger.debug(
        "implied_vol %s: x=%.6g beta=%.6g b_c=%.6g branch=%s seed=%.6g iterations=%d vol=%.6f",
        option_type,
        x,
        beta,
        b_c,
        branch,
        seed,
        iterations,
        vol,
    )
    return ImpliedVolResult(vol=vol, iterations=iterations, branch=branch, seed=seed)


def implied_vol(
    price: float,
    spot: float,
    strike: float,
    expiry: float,
    rate: float,
    option_type: str = "call",
    *,
    tol: float = DEFAULT_TOL,
    max_iter: int = DEFAULT_MAX_ITER,
) -> float:
    """
    Compute the implied volatility (in percent) of a European option.

    Solves for σ such that bs_price(spot, 0, strike, expiry, σ, rate,
    option_type) equals price. See implied_vol_result for the parameters
    and raised exceptions.

    Examples
    --------
    >>> round(implied_vol(10.4506, 100, 100, 1.0, 5.0), 2)
    20.0
    """
    return implied_vol_result(
        price, spot, strike, expiry, rate, option_type, tol=tol, max_iter=max_iter
    ).vol
