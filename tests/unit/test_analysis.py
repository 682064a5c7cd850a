"""
Unit tests for currency length analysis.

Tests analyze_currency_lengths(), the text report and the command entry point.
"""

import json
import logging

import pytest

from pydantic_currency.analysis import (
    LengthAnalysis,
    analyze_currency_lengths,
    format_report,
    main,
)

FIAT = ["USD", "EUR", "MNT"]
CRYPTO = ["BTC", "ETH", "W", "DOGE", "MNT", "SAFEMOON", "MATIC", "XRP", "ADA", "BABYDOGE"]


class TestAnalyzeCurrencyLengths:
    """Test cases for analyze_currency_lengths()."""

    def test_counts_and_longest_codes(self):
        """Test totals and longest codes."""
        analysis = analyze_currency_lengths(fiat=FIAT, crypto=CRYPTO, thresholds=[90], schema_limit=10)

        assert analysis.fiat_count == 3
        assert analysis.longest_fiat == "USD"
        assert analysis.longest_fiat_examples == ["USD", "EUR", "MNT"]
        assert analysis.crypto_count == 10
        assert analysis.longest_crypto == "SAFEMOON"

    def test_distribution(self):
        """Test length buckets and cumulative percentages."""
        analysis = analyze_currency_lengths(fiat=FIAT, crypto=CRYPTO, thresholds=[90], schema_limit=10)
        buckets = {b.length: b for b in analysis.distribution}

        assert sorted(buckets) == [1, 3, 4, 5, 8]
        assert buckets[3].count == 5
        assert buckets[3].cumulative_count == 6
        assert buckets[3].percentage == 60.0
        assert buckets[3].examples == ["BTC", "ETH", "MNT"]
        assert buckets[8].cumulative_count == 10
        assert buckets[8].percentage == 100.0

    def test_coverage_thresholds(self):
        """Test the shortest length reaching each threshold."""
        analysis = analyze_currency_lengths(
            fiat=FIAT, crypto=CRYPTO, thresholds=[99, 50, 80], schema_limit=10
        )
        coverage = {c.threshold: c.length for c in analysis.coverage}

        assert [c.threshold for c in analysis.coverage] == [50, 80, 99]
        assert coverage == {50: 3, 80: 5, 99: 8}

    def test_excluded_codes(self):
        """Test symbols over each exclusion limit."""
        analysis = analyze_currency_lengths(fiat=FIAT, crypto=CRYPTO, thresholds=[90], schema_limit=10)
        excluded = {e.limit: e for e in analysis.excluded}

        assert sorted(excluded) == [5, 6, 7]
        assert excluded[5].examples == ["SAFEMOON", "BABYDOGE"]
        assert excluded[7].count == 2

    def test_conflicts(self):
        """Test symbols that are also fiat codes."""
        analysis = analyze_currency_lengths(fiat=FIAT, crypto=CRYPTO, thresholds=[90], schema_limit=10)
        assert analysis.conflicts == ["MNT"]

    def test_reference_data_defaults(self):
        """Test the analysis runs on the reference lists."""
        analysis = analyze_currency_lengths()

        assert analysis.fiat_count > 100
        assert analysis.crypto_count > 100
        assert len(analysis.longest_fiat) == 3
        assert "CAD" in analysis.conflicts
        assert analysis.distribution[-1].percentage == 100.0


class TestFormatReport:
    """Test cases for format_report()."""

    def test_report_sections(self):
        """Test the report lists every section."""
        analysis = analyze_currency_lengths(fiat=FIAT, crypto=CRYPTO, thresholds=[99], schema_limit=10)
        report = format_report(analysis)

        assert "Fiat currencies:" in report
        assert 'Longest code: "SAFEMOON" (8 characters)' in report
        assert "99% coverage: 8 characters" in report
        assert "Current schema limit (10) is sufficient" in report
        assert "5+ characters (2 excluded): SAFEMOON, BABYDOGE" in report
        assert "  - MNT" in report

    def test_report_recommends_larger_limit(self):
        """Test a recommendation when the limit is too small."""
        analysis = analyze_currency_lengths(fiat=FIAT, crypto=CRYPTO, thresholds=[99], schema_limit=5)
        assert "Consider updating max length to 8" in format_report(analysis)


class TestMain:
    """Test cases for the command entry point."""

    @pytest.fixture(autouse=True)
    def reset_package_logger(self):
        """Detach handlers installed by setup_logging()."""
        yield
        logger = logging.getLogger("pydantic_currency")
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)

    def test_prints_report(self, capsys):
        """Test the command prints the report and succeeds."""
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "Currency Length Analysis" in out

    def test_json_output(self, capsys):
        """Test --json appends a parseable JSON document."""
        assert main(["--json"]) == 0
        out = capsys.readouterr().out
        payload = json.loads(out[out.index("\n{") + 1:])

        analysis = LengthAnalysis.model_validate(payload)
        assert analysis.crypto_count > 0
