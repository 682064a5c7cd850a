"""
Pydantic schemas for currency code validation.

This package provides:
- CurrencySchema and its factory
- Ready-made annotated currency code types
- The structured validation outcome model
"""

from pydantic_currency.schemas.currency import (
    CryptoCurrencyCode,
    CurrencyCode,
    CurrencySchema,
    create_currency_schema,
    resolve_provider,
)
from pydantic_currency.schemas.result import CurrencyValidationResult

__all__ = [
    # Currency schemas
    "CurrencySchema",
    "create_currency_schema",
    "resolve_provider",
    "CurrencyCode",
    "CryptoCurrencyCode",
    # Outcomes
    "CurrencyValidationResult",
]
