"""
Pytest configuration and fixtures for pydantic-currency tests.

This module provides:
- Small deterministic symbol lists
- Schema fixtures for fiat, crypto and combined providers
- Reference data cache isolation
"""

import pytest

from pydantic_currency import (
    MultiCurrencyProvider,
    create_currency_schema,
    crypto_provider,
    fiat_provider,
)
from pydantic_currency.data import crypto_symbols, fiat_codes


# ============================================================================
# Reference Data Fixtures
# ============================================================================
@pytest.fixture
def sample_symbols() -> list[str]:
    """Ten symbols in a fixed order, with mixed lengths."""
    return ["BTC", "ETH", "USDT", "W", "MATIC", "DOGE", "XRP", "SAFEMOON", "ADA", "OP"]


@pytest.fixture
def clear_reference_cache():
    """Reset cached reference lists before and after a test."""
    crypto_symbols.cache_clear()
    fiat_codes.cache_clear()
    yield
    crypto_symbols.cache_clear()
    fiat_codes.cache_clear()


# ============================================================================
# Schema Fixtures
# ============================================================================
@pytest.fixture
def fiat_schema():
    """Schema using the default fiat provider."""
    return create_currency_schema()


@pytest.fixture
def crypto_schema():
    """Schema using the default cryptocurrency provider."""
    return create_currency_schema(provider=crypto_provider)


@pytest.fixture
def combined_provider():
    """Fiat and crypto providers combined, fiat first."""
    return MultiCurrencyProvider([fiat_provider, crypto_provider])


@pytest.fixture
def combined_schema(combined_provider):
    """Schema using the combined fiat and crypto provider."""
    return create_currency_schema(provider=combined_provider)
