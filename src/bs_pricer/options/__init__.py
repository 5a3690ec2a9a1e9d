"""
Option products.
"""

from bs_pricer.options.option import Option

__all__ = ["Option"]
