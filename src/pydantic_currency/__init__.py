"""
pydantic-currency: currency code validation for pydantic.

Build a validator from one or more currency providers:

    >>> from pydantic_currency import create_currency_schema, fiat_provider, crypto_provider
    >>> schema = create_currency_schema(provider=[fiat_provider, crypto_provider])
    >>> schema.validate("eth")
    'ETH'
"""

from pydantic_currency.exceptions import (
    ConflictingFiltersError,
    CurrencyError,
    EmptyCodeSetError,
    EmptyProviderListError,
    InvalidFilterError,
    ProviderConfigurationError,
    ReferenceDataError,
)
from pydantic_currency.providers import (
    BaseCurrencyProvider,
    CryptocurrencyProvider,
    CurrencyProvider,
    FiatCurrencyProvider,
    MultiCurrencyProvider,
    StaticCurrencyProvider,
    crypto_provider,
    fiat_provider,
)
from pydantic_currency.schemas import (
    CryptoCurrencyCode,
    CurrencyCode,
    CurrencySchema,
    CurrencyValidationResult,
    create_currency_schema,
)

__version__ = "0.1.0"

__all__ = [
    # Schemas
    "CurrencySchema",
    "CurrencyValidationResult",
    "create_currency_schema",
    "CurrencyCode",
    "CryptoCurrencyCode",
    # Providers
    "CurrencyProvider",
    "BaseCurrencyProvider",
    "FiatCurrencyProvider",
    "CryptocurrencyProvider",
    "StaticCurrencyProvider",
    "MultiCurrencyProvider",
    "fiat_provider",
    "crypto_provider",
    # Exceptions
    "CurrencyError",
    "ProviderConfigurationError",
    "InvalidFilterError",
    "ConflictingFiltersError",
    "EmptyProviderListError",
    "EmptyCodeSetError",
    "ReferenceDataError",
]
