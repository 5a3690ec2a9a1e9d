#!/usr/bin/env python
"""
Implied volatility smile demonstration.

Prices a ladder of strikes with a synthetic smile, recovers the implied
volatility of each price and reports which solver branch was used.
Optionally plots the smile if matplotlib is available.
"""

import sys
from pathlib import Path

import numpy as np

# Add parent directory to path to allow imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bs_pricer.analytics.black_scholes import bs_price
from bs_pricer.analytics.implied_vol import implied_vol_result
from bs_pricer.errors import PricingError


def main():
    """Run IV smile demonstration."""
    # Parameters (vol and rate in percent)
    spot = 100.0
    rate = 5.0
    expiry = 1.0
    option_type = "put"

    # Volatility smile parameters
    base_vol = 20.0  # ATM volatility
    skew = -15.0  # Volatility skew
    curvature = 25.0  # Smile curvature

    strikes = np.linspace(60.0, 140.0, 17)
    moneyness = strikes / spot
    true_vols = base_vol + skew * (moneyness - 1.0) + curvature * (moneyness - 1.0) ** 2

    print("=" * 100)
    print("Implied Volatility Smile Demonstration")
    print("=" * 100)
    print(f"\nParameters: S={spot}, r={rate}%, T={expiry}, option_type={option_type}")
    print(f"Volatility model: σ(K) = {base_vol} + {skew}*(K/S - 1) + {curvature}*(K/S - 1)²")
    print("\n" + "-" * 100)
    print(f"{'Strike':<10} {'Moneyness':<12} {'True Vol':<12} "
          f"{'Market Price':<15} {'Implied Vol':<15} {'Branch':<8} {'Abs Error':<12}")
    print("-" * 100)

    results = []
    for strike, m, true_vol in zip(strikes, moneyness, true_vols):
        market_price = bs_price(spot, 0.0, strike, expiry, true_vol, rate, option_type)

        try:
            result = implied_vol_result(market_price, spot, strike, expiry, rate, option_type)
        except PricingError as e:
            print(f"{strike:<10.1f} {m:<12.4f} {true_vol:<12.6f} "
                  f"{market_price:<15.6f} {'ERROR':<15} {str(e)}")
            continue

        error = abs(result.vol - true_vol)
        results.append((strike, true_vol, result.vol, error))
        print(f"{strike:<10.1f} {m:<12.4f} {true_vol:<12.6f} {market_price:<15.6f} "
              f"{result.vol:<15.6f} {result.branch:<8} {error:<12.2e}")

    print("-" * 100)

    if results:
        errors = np.array([r[3] for r in results])
        print("\nRecovery Statistics:")
        print(f"  Maximum error:  {errors.max():.2e}")
        print(f"  Average error:  {errors.mean():.2e}")
        print(f"  All errors < 1e-6: {'✓' if np.all(errors < 1e-6) else '✗'}")

    # Optional plotting
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        print("\nNote: matplotlib not available - skipping plot generation")
        print("Install with: pip install matplotlib")
        return

    plt.figure(figsize=(10, 6))
    plt.plot([r[0] for r in results], [r[1] for r in results], 'b-o',
             label='True Volatility', linewidth=2)
    plt.plot([r[0] for r in results], [r[2] for r in results], 'r--s',
             label='Implied Volatility', linewidth=2)
    plt.axvline(spot, color='gray', linestyle=':', alpha=0.7, label=f'ATM (S={spot})')
    plt.xlabel('Strike Price (K)', fontsize=12)
    plt.ylabel('Volatility (%)', fontsize=12)
    plt.title('Volatility Smile: True vs Recovered Implied Volatility', fontsize=14)
    plt.legend(fontsize=10)
    plt.grid(True, alpha=0.3)
    plt.tight_layout()

    plots_dir = Path(__file__).parent.parent / "plots"
    plots_dir.mkdir(exist_ok=True)
    output_path = plots_dir / "iv_smile.png"
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    print(f"\nPlot saved to: {output_path}")
    print("=" * 100)


if __name__ == "__main__":
    main()
