"""
Currency code providers.

This module provides:
- CurrencyProvider protocol that any code source can satisfy
- FiatCurrencyProvider backed by the ISO 4217 table
- CryptocurrencyProvider with optional length or percentage filtering
- StaticCurrencyProvider for custom code sets
- MultiCurrencyProvider combining several providers into one
- Default ``fiat_provider`` and ``crypto_provider`` instances

Providers are immutable after construction and safe to share.
"""

import math
from collections.abc import Iterable, Sequence
from numbers import Real
from typing import Protocol, runtime_checkable

from pydantic_currency.core.logging import get_logger
from pydantic_currency.data import crypto_symbols, fiat_codes
from pydantic_currency.exceptions import (
    ConflictingFiltersError,
    EmptyCodeSetError,
    EmptyProviderListError,
    InvalidFilterError,
)

logger = get_logger(__name__)


@runtime_checkable
class CurrencyProvider(Protocol):
    """
    Interface for sources of valid currency codes.

    Custom providers only need these three methods; inheriting from a
    bundled provider is not required.
    """

    def get_valid_codes(self) -> set[str]:
        """
        Get all valid currency codes for this provider.

        Returns:
            A set of valid currency codes (uppercase)
        """
        ...

    def get_max_length(self) -> int:
        """
        Get the maximum length of currency codes for this provider.

        Returns:
            The maximum length of currency codes
        """
        ...

    def get_name(self) -> str:
        """
        Get a human-readable name for this provider.

        Returns:
            The provider name
        """
        ...


class BaseCurrencyProvider:
    """
    Provider holding a frozen set of codes and its maximum code length.

    Subclasses resolve their codes and pass them to ``__init__``.
    """

    name = "Currency Provider"

    def __init__(self, codes: Iterable[str]) -> None:
        self._valid_codes = frozenset(codes)
        if not self._valid_codes:
            raise EmptyCodeSetError(self.get_name())
        self._max_length = max(len(code) for code in self._valid_codes)

    def get_valid_codes(self) -> set[str]:
        """
        Get all valid currency codes.

        Returns:
            Copy of the code set to prevent external modification
        """
        return set(self._valid_codes)

    def get_max_length(self) -> int:
        return self._max_length

    def get_name(self) -> str:
        return self.name

    def is_supported(self, code: str) -> bool:
        """
        Check if a currency code is supported (case-insensitive).

        Args:
            code: Currency code to look up

        Returns:
            True if the code is in this provider's set, False otherwise
        """
        return code.upper() in self._valid_codes

    def __len__(self) -> int:
        return len(self._valid_codes)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(codes={len(self._valid_codes)}, "
            f"max_length={self._max_length})"
        )


class FiatCurrencyProvider(BaseCurrencyProvider):
    """Fiat currency provider that includes all ISO 4217 currency codes."""

    name = "Fiat Currency Provider"

    def __init__(self) -> None:
        super().__init__(fiat_codes())
        logger.debug(f"{self.name} ready with {len(self)} codes")


class CryptocurrencyProvider(BaseCurrencyProvider):
    """
    Cryptocurrency provider that includes cryptocurrency symbols.

    Can be narrowed with either a maximum symbol length or a percentage of the
    symbol list. Percentage filtering keeps a prefix of the source list, so the
    result is deterministic for a given source.
    """

    name = "Cryptocurrency Provider"

    def __init__(
        self,
        max_length: int | None = None,
        percentage: float | None = None,
        *,
        symbols: Sequence[str] | None = None,
    ) -> None:
        """
        Initialize CryptocurrencyProvider.

        Args:
            max_length: Keep only symbols of at most this many characters
            percentage: Keep the first ``floor(len * percentage)`` symbols,
                        with ``0 < percentage <= 1``
            symbols: Source symbol list, defaults to the reference list

        Raises:
            ConflictingFiltersError: If both filters are given
            InvalidFilterError: If a filter value is out of its domain
            EmptyCodeSetError: If filtering leaves no symbols
        """
        if max_length is not None and percentage is not None:
            raise ConflictingFiltersError(
                details={"max_length": max_length, "percentage": percentage}
            )

        source = crypto_symbols() if symbols is None else symbols
        # Deduplicate while keeping source order
        selected = list(dict.fromkeys(code.upper() for code in source))

        if max_length is not None:
            if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length <= 0:
                raise InvalidFilterError(
                    "max_length", max_length, "max_length must be a positive integer"
                )
            selected = [code for code in selected if len(code) <= max_length]

        elif percentage is not None:
            if (
                isinstance(percentage, bool)
                or not isinstance(percentage, Real)
                or not 0 < percentage <= 1
            ):
                raise InvalidFilterError(
                    "percentage",
                    percentage,
                    "percentage must be a number greater than 0 and at most 1",
                )
            count = math.floor(len(selected) * percentage)
            selected = selected[:count]

        self.max_length_filter = max_length
        self.percentage_filter = percentage
        super().__init__(selected)
        logger.debug(
            f"{self.name} ready with {len(self)} codes "
            f"(max_length={max_length}, percentage={percentage})"
        )


class StaticCurrencyProvider(BaseCurrencyProvider):
    """Provider for a fixed, user-supplied set of currency codes."""

    def __init__(self, codes: Iterable[str], name: str = "Custom Currency Provider") -> None:
        self.name = name
        super().__init__(code.upper() for code in codes)


class MultiCurrencyProvider(BaseCurrencyProvider):
    """
    Multi-currency provider that combines multiple currency providers.

    The first provider in the list takes precedence over subsequent providers.
    Acceptance is a plain union of the member code sets, so the order only
    shows up in the provider name.
    """

    def __init__(self, providers: Sequence[CurrencyProvider]) -> None:
        if len(providers) == 0:
            raise EmptyProviderListError()

        self._providers = tuple(providers)

        # Earlier providers take precedence; later duplicates add nothing
        codes: set[str] = set()
        for provider in self._providers:
            codes |= provider.get_valid_codes()

        super().__init__(codes)

    @property
    def providers(self) -> tuple[CurrencyProvider, ...]:
        """Member providers in precedence order."""
        return self._providers

    def get_name(self) -> str:
        provider_names = ", ".join(p.get_name() for p in self._providers)
        return f"Multi Currency Provider ({provider_names})"


# Default providers
fiat_provider = FiatCurrencyProvider()
crypto_provider = CryptocurrencyProvider()
