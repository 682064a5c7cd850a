"""
Validation outcome schema.

A CurrencyValidationResult is what ``CurrencySchema.safe_parse`` returns: the
normalized code on success, or exactly one human-readable message on failure.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CurrencyValidationResult(BaseModel):
    """
    Outcome of validating a single currency code.

    Attributes:
        success: Whether the input was accepted
        data: Normalized (uppercase) code when accepted
        error: Failure message when rejected
        error_type: Machine-readable pydantic error type when rejected
    """

    success: bool = Field(description="Whether the input was accepted")
    data: str | None = Field(None, description="Normalized currency code")
    error: str | None = Field(None, description="Human-readable failure message")
    error_type: str | None = Field(None, description="Pydantic error type")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "success": False,
                "data": None,
                "error": "Currency code cannot be empty",
                "error_type": "currency_code_empty",
            }
        },
    )

    @model_validator(mode="after")
    def check_outcome(self) -> "CurrencyValidationResult":
        """A result carries data on success and an error on failure, never both."""
        if self.success and (self.data is None or self.error is not None):
            raise ValueError("successful result requires data and no error")
        if not self.success and (self.error is None or self.data is not None):
            raise ValueError("failed result requires an error and no data")
        return self

    @classmethod
    def ok(cls, code: str) -> "CurrencyValidationResult":
        """Build a successful result for a normalized code."""
        return cls(success=True, data=code)

    @classmethod
    def fail(cls, message: str, error_type: str | None = None) -> "CurrencyValidationResult":
        """Build a failed result carrying one message."""
        return cls(success=False, error=message, error_type=error_type)
