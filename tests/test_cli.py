"""
Tests for the bs-price command-line interface.
"""

import pytest

from bs_pricer.cli import main, parse_args


class TestParseArgs:
    """Argument parsing and defaults."""

    def test_defaults(self):
        parsed = parse_args(["--S0", "100", "--K", "100", "--T", "1", "--r", "5"])
        assert parsed.t == 0.0
        assert parsed.sigma is None
        assert parsed.option_type == "call"
        assert parsed.implied_vol is None
        assert parsed.tol == 1e-8
        assert parsed.max_iter == 100

    def test_missing_required(self):
        with pytest.raises(SystemExit):
            parse_args(["--S0", "100"])

    def test_invalid_option_type(self):
        with pytest.raises(SystemExit):
            parse_args(
                ["--S0", "100", "--K", "100", "--T", "1", "--r", "5", "--option_type", "x"]
            )


class TestMain:
    """End-to-end runs of the CLI."""

    BASE = ["--S0", "100", "--K", "100", "--T", "1", "--r", "5"]

    def test_price_and_greeks(self, capsys):
        assert main(self.BASE + ["--sigma", "20"]) == 0
        out = capsys.readouterr().out
        assert "Price:  10.450584" in out
        assert "Delta:  0.636831" in out
        assert "Implied Volatility" not in out

    def test_put(self, capsys):
        assert main(self.BASE + ["--sigma", "20", "--option_type", "put"]) == 0
        out = capsys.readouterr().out
        assert "Price:  5.573526" in out

    def test_implied_vol_only(self, capsys):
        assert main(self.BASE + ["--implied_vol", "10.4506"]) == 0
        out = capsys.readouterr().out
        assert "Implied Vol:       20.0000" in out
        assert "Verification" in out

    def test_implied_vol_with_sigma(self, capsys):
        assert main(self.BASE + ["--sigma", "20", "--implied_vol", "10.4506"]) == 0
        out = capsys.readouterr().out
        assert "Vol Difference" in out

    def test_sigma_or_implied_vol_required(self, capsys):
        assert main(self.BASE) == 1
        assert "--sigma is required" in capsys.readouterr().out

    def test_price_out_of_range(self, capsys):
        assert main(self.BASE + ["--implied_vol", "150"]) == 1
        assert "Option price out of range" in capsys.readouterr().out

    def test_valuation_after_expiry(self, capsys):
        assert main(self.BASE + ["--sigma", "20", "--t", "2"]) == 1
        assert "Evaluation time must precede expiry" in capsys.readouterr().out

    def test_invalid_strike(self, capsys):
        args = ["--S0", "100", "--K", "-1", "--T", "1", "--r", "5", "--sigma", "20"]
        assert main(args) == 1
        assert "Strike must be positive" in capsys.readouterr().out

    def test_convergence_failure_reported(self, capsys):
        args = self.BASE + ["--implied_vol", "10.4506", "--max_iter", "1", "--tol", "1e-14"]
        assert main(args) == 1
        assert "did not converge" in capsys.readouterr().out
