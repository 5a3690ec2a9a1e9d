"""
Tests for the normal distribution helpers.
"""

import math

import pytest

from bs_pricer.analytics.normal import (
    STANDARD_NORMAL,
    NormalDistribution,
    norm_cdf,
    norm_pdf,
    norm_ppf,
)
from bs_pricer.errors import DomainError


class TestStandardNormal:
    """Known values of φ, Φ and Φ⁻¹."""

    def test_pdf_at_zero(self):
        assert norm_pdf(0.0) == pytest.approx(1.0 / math.sqrt(2.0 * math.pi), abs=1e-15)

    def test_pdf_is_symmetric(self):
        for x in [0.1, 0.5, 1.0, 2.5]:
            assert norm_pdf(x) == pytest.approx(norm_pdf(-x), abs=1e-15)

    def test_cdf_known_values(self):
        assert norm_cdf(0.0) == pytest.approx(0.5, abs=1e-15)
        assert norm_cdf(1.96) == pytest.approx(0.9750021048517795, abs=1e-12)
        assert norm_cdf(-1.0) == pytest.approx(0.15865525393145707, abs=1e-12)

    def test_cdf_complement(self):
        for x in [-3.0, -0.7, 0.3, 2.2]:
            assert norm_cdf(x) + norm_cdf(-x) == pytest.approx(1.0, abs=1e-15)

    def test_cdf_lower_tail_keeps_precision(self):
        """Φ(-10) ≈ 7.62e-24 must not collapse to zero."""
        assert norm_cdf(-10.0) == pytest.approx(7.619853024160527e-24, rel=1e-10)

    def test_ppf_inverts_cdf(self):
        for p in [0.001, 0.1, 0.5, 0.8, 0.999]:
            assert norm_cdf(norm_ppf(p)) == pytest.approx(p, abs=1e-12)

    @pytest.mark.parametrize("p", [0.0, 1.0, -0.1, 1.5])
    def test_ppf_rejects_invalid_probability(self, p):
        with pytest.raises(DomainError, match="Probability must lie in"):
            norm_ppf(p)

    def test_module_functions_use_standard_normal(self):
        assert STANDARD_NORMAL == NormalDistribution(0.0, 1.0)
        assert STANDARD_NORMAL.cdf(0.4) == norm_cdf(0.4)


class TestShiftedNormal:
    """Non-standard mean and standard deviation."""

    def test_cdf_at_mean_is_half(self):
        dist = NormalDistribution(mean=1.5, stddev=2.0)
        assert dist.cdf(1.5) == pytest.approx(0.5, abs=1e-15)

    def test_pdf_scales_with_stddev(self):
        dist = NormalDistribution(mean=1.0, stddev=2.0)
        assert dist.pdf(1.0) == pytest.approx(norm_pdf(0.0) / 2.0, abs=1e-15)
        assert dist.pdf(3.0) == pytest.approx(norm_pdf(1.0) / 2.0, abs=1e-15)

    def test_cdf_matches_standardized(self):
        dist = NormalDistribution(mean=-0.5, stddev=0.25)
        assert dist.cdf(0.0) == pytest.approx(norm_cdf(2.0), abs=1e-14)

    def test_ppf_shifted(self):
        dist = NormalDistribution(mean=10.0, stddev=3.0)
        assert dist.ppf(0.5) == pytest.approx(10.0, abs=1e-12)
        assert dist.ppf(norm_cdf(1.0)) == pytest.approx(13.0, abs=1e-9)
