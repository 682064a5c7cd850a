"""
Currency code schemas for pydantic.

This module provides:
- CurrencySchema, a case-insensitive currency code validator
- create_currency_schema() factory resolving the provider option
- Ready-made ``CurrencyCode`` and ``CryptoCurrencyCode`` annotated types

Example:
    >>> from pydantic import BaseModel
    >>> class Payment(BaseModel):
    ...     currency: CurrencyCode
    >>> Payment(currency="usd").currency
    'USD'
"""

from collections.abc import Iterable, Sequence
from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError, core_schema

from pydantic_currency.core.logging import get_logger
from pydantic_currency.providers import (
    CurrencyProvider,
    MultiCurrencyProvider,
    crypto_provider,
    fiat_provider,
)
from pydantic_currency.schemas.result import CurrencyValidationResult

logger = get_logger(__name__)

EMPTY_MESSAGE = "Currency code cannot be empty"
TOO_LONG_MESSAGE = "Currency code cannot exceed {max_length} characters"
INVALID_MESSAGE = "Invalid currency code. Must be a valid currency code from {provider}."

ProviderOption = CurrencyProvider | Sequence[CurrencyProvider] | None


def resolve_provider(provider: ProviderOption = None) -> CurrencyProvider:
    """
    Resolve the provider option to a single provider.

    Args:
        provider: A provider, a list of providers, or None for fiat codes

    Returns:
        The effective provider

    Raises:
        TypeError: If the value is not a provider or list of providers
        EmptyProviderListError: If an empty list is given
    """
    if provider is None:
        return fiat_provider
    if isinstance(provider, (list, tuple)):
        for member in provider:
            if not isinstance(member, CurrencyProvider):
                raise TypeError(
                    "provider list members must implement CurrencyProvider, "
                    f"got {type(member).__name__}"
                )
        return MultiCurrencyProvider(provider)
    if not isinstance(provider, CurrencyProvider):
        raise TypeError(
            f"provider must implement CurrencyProvider, got {type(provider).__name__}"
        )
    return provider


class CurrencySchema:
    """
    Validator accepting only codes known to a currency provider.

    Input must be a string. Empty and over-length strings are rejected before
    the uppercase lookup; accepted input is returned uppercase. The schema
    can be used as pydantic metadata (``Annotated[str, schema]``), called
    directly, or through ``validate`` / ``safe_parse``.
    """

    def __init__(self, provider: ProviderOption = None, message: str | None = None) -> None:
        self._provider = resolve_provider(provider)
        self._valid_codes = frozenset(self._provider.get_valid_codes())
        self._max_length = self._provider.get_max_length()
        self._message = message
        self._adapter: TypeAdapter[str] = TypeAdapter(self.annotation)

        logger.debug(
            f"Currency schema built from {self._provider.get_name()} "
            f"({len(self._valid_codes)} codes, max_length={self._max_length})"
        )

    @property
    def provider(self) -> CurrencyProvider:
        return self._provider

    @property
    def max_length(self) -> int:
        return self._max_length

    @property
    def message(self) -> str | None:
        return self._message

    @property
    def annotation(self) -> Any:
        """``Annotated[str, self]``, usable as a pydantic field type."""
        return Annotated[str, self]

    def __call__(self, value: str) -> str:
        """
        Validate and normalize a currency code string.

        Args:
            value: Candidate currency code

        Returns:
            The uppercase currency code

        Raises:
            PydanticCustomError: If the code is empty, too long, or unknown
        """
        if not value:
            raise PydanticCustomError("currency_code_empty", EMPTY_MESSAGE)

        if len(value) > self._max_length:
            raise PydanticCustomError(
                "currency_code_too_long",
                TOO_LONG_MESSAGE,
                {"max_length": self._max_length},
            )

        code = value.upper()
        if code not in self._valid_codes:
            # Custom messages carry no context so braces in them stay literal
            if self._message:
                raise PydanticCustomError("currency_code_invalid", self._message)
            raise PydanticCustomError(
                "currency_code_invalid",
                INVALID_MESSAGE,
                {"provider": self._provider.get_name()},
            )

        return code

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            self, core_schema.str_schema(strict=True)
        )

    def validate(self, value: Any) -> str:
        """
        Validate a value, raising on failure.

        Raises:
            ValidationError: If the value is not an accepted currency code
        """
        return self._adapter.validate_python(value)

    def safe_parse(self, value: Any) -> CurrencyValidationResult:
        """
        Validate a value without raising.

        Args:
            value: Candidate currency code

        Returns:
            Successful result with the normalized code, or a failed result
            carrying the first validation message
        """
        try:
            code = self._adapter.validate_python(value)
        except ValidationError as e:
            error = e.errors()[0]
            return CurrencyValidationResult.fail(error["msg"], error["type"])
        return CurrencyValidationResult.ok(code)

    def validate_many(self, values: Iterable[Any]) -> list[CurrencyValidationResult]:
        """Validate each value independently, in input order."""
        return [self.safe_parse(value) for value in values]

    def __repr__(self) -> str:
        return (
            f"CurrencySchema(provider={self._provider.get_name()!r}, "
            f"max_length={self._max_length})"
        )


def create_currency_schema(
    provider: ProviderOption = None,
    message: str | None = None,
) -> CurrencySchema:
    """
    Create a schema for validating currency codes using a currency provider.

    Args:
        provider: A provider, a list of providers combined with
                  MultiCurrencyProvider, or None for fiat currencies
        message: Custom message for unknown codes, used verbatim

    Returns:
        CurrencySchema instance

    Example:
        >>> crypto = create_currency_schema(provider=crypto_provider)
        >>> multi = create_currency_schema(provider=[fiat_provider, crypto_provider])
        >>> multi.validate("btc")
        'BTC'
    """
    return CurrencySchema(provider=provider, message=message)


CurrencyCode = create_currency_schema().annotation
CryptoCurrencyCode = create_currency_schema(provider=crypto_provider).annotation
