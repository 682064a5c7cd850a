"""
Custom exception classes for pydantic-currency.

Exceptions here describe configuration problems that are fatal to building a
provider. Per-value validation failures are never raised through this
hierarchy; they surface as pydantic errors or as structured outcomes.

Exception hierarchy:
    CurrencyError (base)
    ├── ProviderConfigurationError
    │   ├── InvalidFilterError
    │   ├── ConflictingFiltersError
    │   ├── EmptyProviderListError
    │   └── EmptyCodeSetError
    └── ReferenceDataError
"""

from typing import Any


class CurrencyError(Exception):
    """
    Base exception class for all pydantic-currency exceptions.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code
        details: Optional additional error details
    """

    def __init__(
        self,
        message: str,
        error_code: str = "CURRENCY_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize currency exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for structured reporting.

        Returns:
            Dictionary with error information
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, error_code={self.error_code!r})"


# =============================================================================
# Provider Construction Errors
# =============================================================================


class ProviderConfigurationError(CurrencyError):
    """Base class for errors raised while constructing a currency provider."""

    def __init__(
        self,
        message: str = "Invalid currency provider configuration",
        error_code: str = "PROVIDER_CONFIGURATION_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class InvalidFilterError(ProviderConfigurationError):
    """Raised when a filter value is outside of its valid domain."""

    def __init__(
        self,
        field: str,
        value: Any,
        message: str,
    ) -> None:
        super().__init__(
            message=message,
            error_code="INVALID_FILTER",
            details={"field": field, "value": value},
        )
        self.field = field
        self.value = value


class ConflictingFiltersError(ProviderConfigurationError):
    """Raised when both max_length and percentage filters are supplied."""

    def __init__(
        self,
        message: str = "Cannot specify both max_length and percentage",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="CONFLICTING_FILTERS",
            details=details,
        )


class EmptyProviderListError(ProviderConfigurationError):
    """Raised when a multi-currency provider is built from no providers."""

    def __init__(
        self,
        message: str = "At least one provider must be specified",
    ) -> None:
        super().__init__(
            message=message,
            error_code="EMPTY_PROVIDER_LIST",
        )


class EmptyCodeSetError(ProviderConfigurationError):
    """Raised when a provider resolves to no currency codes at all."""

    def __init__(
        self,
        provider_name: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=f"{provider_name} has no currency codes after filtering",
            error_code="EMPTY_CODE_SET",
            details={"provider": provider_name, **(details or {})},
        )
        self.provider_name = provider_name


# =============================================================================
# Reference Data Errors
# =============================================================================


class ReferenceDataError(CurrencyError):
    """Raised when a currency reference list cannot be read or parsed."""

    def __init__(
        self,
        source: str,
        reason: str,
    ) -> None:
        super().__init__(
            message=f"Could not load currency reference data from {source}: {reason}",
            error_code="REFERENCE_DATA_ERROR",
            details={"source": source, "reason": reason},
        )
        self.source = source
