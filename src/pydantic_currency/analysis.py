"""
Currency code length analysis.

Reports how cryptocurrency symbol lengths are distributed, which length limit
covers a given share of symbols, and which symbols collide with fiat codes.
Used to pick a sensible ``max_length`` for CryptocurrencyProvider.

Usage:
    python -m pydantic_currency.analysis [--json]

Exit codes:
    0: Report printed.
    1: Reference data could not be loaded.
"""

import argparse
import sys
from collections import Counter, defaultdict
from collections.abc import Sequence

from pydantic import BaseModel, Field

from pydantic_currency.core.config import settings
from pydantic_currency.core.logging import get_logger, setup_logging
from pydantic_currency.data import crypto_symbols, fiat_codes
from pydantic_currency.exceptions import CurrencyError

logger = get_logger(__name__)

EXCLUSION_LIMITS = (5, 6, 7, 8, 9, 10)


class LengthBucket(BaseModel):
    """Symbols of one length and the running coverage up to that length."""

    length: int
    count: int
    cumulative_count: int
    percentage: float = Field(description="Cumulative share of symbols, in percent")
    examples: list[str]


class CoverageThreshold(BaseModel):
    """Shortest length limit reaching a coverage percentage, if any."""

    threshold: float
    length: int | None


class ExcludedCodes(BaseModel):
    """Symbols rejected by a given length limit."""

    limit: int
    count: int
    examples: list[str]


class LengthAnalysis(BaseModel):
    """Full result of a currency length analysis."""

    fiat_count: int
    longest_fiat: str
    longest_fiat_examples: list[str]
    crypto_count: int
    longest_crypto: str
    distribution: list[LengthBucket]
    coverage: list[CoverageThreshold]
    excluded: list[ExcludedCodes]
    conflicts: list[str]
    schema_limit: int


def analyze_currency_lengths(
    fiat: Sequence[str] | None = None,
    crypto: Sequence[str] | None = None,
    thresholds: Sequence[float] | None = None,
    schema_limit: int | None = None,
) -> LengthAnalysis:
    """
    Analyze currency code lengths.

    Args:
        fiat: Fiat codes, defaults to the ISO 4217 table
        crypto: Cryptocurrency symbols, defaults to the reference list
        thresholds: Coverage percentages to report, defaults to settings
        schema_limit: Length limit to compare against, defaults to settings

    Returns:
        LengthAnalysis with distribution, coverage and conflicts
    """
    fiat = list(fiat_codes() if fiat is None else fiat)
    crypto = list(crypto_symbols() if crypto is None else crypto)
    thresholds = sorted(settings.coverage_thresholds if thresholds is None else thresholds)
    schema_limit = settings.schema_limit if schema_limit is None else schema_limit

    longest_fiat = max(fiat, key=len, default="")
    longest_crypto = max(crypto, key=len, default="")

    counts = Counter(len(code) for code in crypto)
    by_length: dict[int, list[str]] = defaultdict(list)
    for code in crypto:
        by_length[len(code)].append(code)

    distribution = []
    cumulative = 0
    for length in sorted(counts):
        cumulative += counts[length]
        distribution.append(
            LengthBucket(
                length=length,
                count=counts[length],
                cumulative_count=cumulative,
                percentage=round(cumulative / len(crypto) * 100, 2),
                examples=by_length[length][:3],
            )
        )

    coverage = [
        CoverageThreshold(
            threshold=threshold,
            length=next(
                (b.length for b in distribution if b.percentage >= threshold), None
            ),
        )
        for threshold in thresholds
    ]

    excluded = []
    for limit in EXCLUSION_LIMITS:
        over = [code for code in crypto if len(code) > limit]
        if over:
            excluded.append(ExcludedCodes(limit=limit, count=len(over), examples=over[:5]))

    fiat_set = set(fiat)
    conflicts = [code for code in crypto if code in fiat_set]

    logger.debug(
        f"Analyzed {len(fiat)} fiat codes and {len(crypto)} crypto symbols, "
        f"{len(conflicts)} conflicts"
    )

    return LengthAnalysis(
        fiat_count=len(fiat),
        longest_fiat=longest_fiat,
        longest_fiat_examples=[c for c in fiat if len(c) == len(longest_fiat)][:5],
        crypto_count=len(crypto),
        longest_crypto=longest_crypto,
        distribution=distribution,
        coverage=coverage,
        excluded=excluded,
        conflicts=conflicts,
        schema_limit=schema_limit,
    )


def format_report(analysis: LengthAnalysis) -> str:
    """Render an analysis as a plain-text report."""
    lines = [
        "Currency Length Analysis",
        "========================",
        "",
        "Fiat currencies:",
        f"  Total count: {analysis.fiat_count}",
        f'  Longest code: "{analysis.longest_fiat}" ({len(analysis.longest_fiat)} characters)',
        f"  Examples: {', '.join(analysis.longest_fiat_examples)}",
        "",
        "Cryptocurrencies:",
        f"  Total count: {analysis.crypto_count}",
        f'  Longest code: "{analysis.longest_crypto}" ({len(analysis.longest_crypto)} characters)',
        "",
        "Length | Count | Cumulative | Percentage | Examples",
        "-------|-------|------------|------------|---------",
    ]
    top = max((c.threshold for c in analysis.coverage), default=100.0)
    for bucket in analysis.distribution:
        marker = " *" if bucket.percentage >= top else ""
        lines.append(
            f"{bucket.length:>6} | {bucket.count:>5} | {bucket.cumulative_count:>10} | "
            f"{bucket.percentage:>9}%{marker} | {', '.join(bucket.examples)}"
        )

    lines += ["", "Recommendations:", f"  Current schema limit: {analysis.schema_limit} characters"]
    for item in analysis.coverage:
        found = f"{item.length} characters" if item.length is not None else "N/A"
        lines.append(f"  {item.threshold:g}% coverage: {found}")

    if analysis.coverage and analysis.coverage[-1].length is not None:
        optimal = analysis.coverage[-1].length
        if optimal <= analysis.schema_limit:
            lines.append(
                f"  Current schema limit ({analysis.schema_limit}) is sufficient "
                f"for {analysis.coverage[-1].threshold:g}% coverage"
            )
        else:
            lines.append(f"  Consider updating max length to {optimal}")

    if analysis.excluded:
        lines += ["", "Excluded cryptocurrencies by length limit:"]
        for item in analysis.excluded:
            more = "..." if item.count > len(item.examples) else ""
            lines.append(
                f"  {item.limit}+ characters ({item.count} excluded): "
                f"{', '.join(item.examples)}{more}"
            )

    if analysis.conflicts:
        lines += ["", "Conflicts between fiat and crypto codes:"]
        lines += [f"  - {code}" for code in analysis.conflicts]

    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the analysis command."""
    parser = argparse.ArgumentParser(
        description="Analyze currency code lengths to choose a max_length limit.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Also print the analysis as JSON",
    )
    args = parser.parse_args(argv)

    setup_logging()

    try:
        analysis = analyze_currency_lengths()
    except CurrencyError as e:
        logger.error(f"Error analyzing currency lengths: {e.message}")
        return 1

    print(format_report(analysis))
    if args.json:
        print()
        print(analysis.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
