#!/usr/bin/env python
"""
Price a European option or back out its implied volatility from a source
tree, without installing bs_pricer first.

Every flag is forwarded unchanged to bs_pricer.cli.main, so the options
match the 'bs-price' console script.

    python scripts/bs_price.py --S0 100 --K 100 --r 5 --sigma 20 --T 1.0
    python scripts/bs_price.py --S0 100 --K 100 --r 5 --T 1.0 \
        --option_type put --implied_vol 5.5735
"""

import sys
from pathlib import Path

# Make the src/ layout importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bs_pricer.cli import main

if __name__ == "__main__":
    sys.exit(main())
