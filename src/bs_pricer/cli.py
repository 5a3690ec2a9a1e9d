#!/usr/bin/env python
"""
Command-line interface for Black-Scholes option pricing.

This module provides the main CLI entrypoint for the bs-price command.
Volatility and rate are given in percent.

Example usage:
    bs-price --S0 100 --K 100 --T 1.0 --sigma 20 --r 5
    bs-price --S0 100 --K 100 --T 1.0 --sigma 20 --r 5 --option_type put --t 0.25
    bs-price --S0 100 --K 100 --T 1.0 --r 5 --implied_vol 10.4506
"""

import argparse
import logging
import sys

from bs_pricer.analytics.implied_vol import implied_vol_result
from bs_pricer.errors import PricingError
from bs_pricer.options.option import Option


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    args : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Black-Scholes option pricing and implied volatility",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Market parameters
    parser.add_argument("--S0", type=float, required=True, help="Spot price")
    parser.add_argument("--K", type=float, required=True, help="Strike price")
    parser.add_argument("--T", type=float, required=True, help="Expiry date (years)")
    parser.add_argument("--t", type=float, default=0.0, help="Valuation time (years)")
    parser.add_argument("--r", type=float, required=True, help="Risk-free rate (percent)")
    parser.add_argument(
        "--sigma",
        type=float,
        default=None,
        help="Volatility (percent); required unless only --implied_vol is requested",
    )

    # Option parameters
    parser.add_argument(
        "--option_type",
        type=str,
        choices=["call", "put"],
        default="call",
        help="Option type: call or put",
    )

    # Implied volatility
    parser.add_argument(
        "--implied_vol",
        type=float,
        default=None,
        help="Compute implied volatility from given market price (valuation at t=0)",
    )
    parser.add_argument(
        "--tol",
        type=float,
        default=1e-8,
        help="Convergence tolerance for the implied volatility solver",
    )
    parser.add_argument(
        "--max_iter",
        type=int,
        default=100,
        help="Maximum Newton iterations for the implied volatility solver",
    )

    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    return parser.parse_args(args)


def main(args: list[str] | None = None) -> int:
    """Main entry point for CLI.

    Parameters
    ----------
    args : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    int
        Exit code (0 for success, non-zero for errors).
    """
    parsed = parse_args(args)

    if parsed.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    if parsed.sigma is None and parsed.implied_vol is None:
        print("Error: --sigma is required unless --implied_vol is given")
        return 1

    try:
        option = Option(strike=parsed.K, expiry=parsed.T, option_type=parsed.option_type)
    except PricingError as e:
        print(f"Error: {e}")
        return 1

    # Print input parameters
    print("=" * 70)
    print("Black-Scholes Option Pricer")
    print("=" * 70)
    print("\nInput Parameters:")
    print(f"  Spot Price (S0):        {parsed.S0:,.2f}")
    print(f"  Strike Price (K):       {parsed.K:,.2f}")
    print(f"  Risk-free Rate (r):     {parsed.r:.4f}%")
    if parsed.sigma is not None:
        print(f"  Volatility (σ):         {parsed.sigma:.4f}%")
    print(f"  Valuation Time (t):     {parsed.t:.4f} years")
    print(f"  Expiry (T):             {parsed.T:.4f} years")
    print(f"  Option Type:            {parsed.option_type.upper()}")

    if parsed.sigma is not None:
        print("\n" + "=" * 70)
        print("Black-Scholes Analytics")
        print("=" * 70)

        try:
            greeks = option.greeks(parsed.S0, parsed.t, parsed.sigma, parsed.r)
        except PricingError as e:
            print(f"\nError: {e}")
            return 1

        print("\nResults:")
        print(f"  Price:  {greeks.price:.6f}")
        print(f"  Delta:  {greeks.delta:.6f}")
        print(f"  Gamma:  {greeks.gamma:.6f}")
        print(f"  Vega:   {greeks.vega:.6f}  (per vol point)")
        print(f"  Theta:  {greeks.theta:.6f}  (per day)")

    # Implied volatility
    if parsed.implied_vol is not None:
        print("\n" + "=" * 70)
        print("Implied Volatility")
        print("=" * 70)

        try:
            result = implied_vol_result(
                parsed.implied_vol,
                parsed.S0,
                parsed.K,
                parsed.T,
                parsed.r,
                parsed.option_type,
                tol=parsed.tol,
                max_iter=parsed.max_iter,
            )
        except PricingError as e:
            print(f"\nError computing implied volatility: {e}")
            return 1

        print(f"\nMarket Price:      {parsed.implied_vol:.6f}")
        print(f"Implied Vol:       {result.vol:.6f}%")
        print(f"Iterations:        {result.iterations} ({result.branch} branch)")
        if parsed.sigma is not None:
            print(f"Input Vol:         {parsed.sigma:.6f}%")
            print(f"Vol Difference:    {result.vol - parsed.sigma:.6f}")

        # Verify by computing BS price with implied vol
        verify_price = option.price(parsed.S0, 0.0, result.vol, parsed.r)
        print("\nVerification:")
        print(f"  BS(IV) Price:    {verify_price:.6f}")
        print(f"  Target Price:    {parsed.implied_vol:.6f}")
        print(f"  Price Error:     {abs(verify_price - parsed.implied_vol):.2e}")

    print("\n" + "=" * 70)
    return 0


if __name__ == "__main__":
    sys.exit(main())
