"""Custom exception hierarchy for the Unit Converter MCP Server.

All errors are designed to be actionable - they tell the caller how to fix the problem.
"""

from typing import Optional, List, Dict, Any
from dataclasses import dataclass


@dataclass
class ErrorContext:
    """Structured context for errors."""
    category: Optional[str] = None
    requested_value: Optional[Any] = None
    valid_values: Optional[List[str]] = None
    additional_info: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        result = {}
        if self.category is not None:
            result["category"] = self.category
        if self.requested_value is not None:
            result["requested_value"] = self.requested_value
        if self.valid_values is not None:
            result["valid_values"] = self.valid_values
        if self.additional_info is not None:
            result.update(self.additional_info)
        return result


@dataclass
class ErrorDetail:
    """Detailed error information."""
    type: str
    message: str
    suggestion: str
    context: Optional[ErrorContext] = None
    correlation_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {
            "type": self.type,
            "message": self.message,
            "suggestion": self.suggestion,
        }
        if self.context:
            ctx = self.context.to_dict()
            if ctx:
                result["context"] = ctx
        if self.correlation_id:
            result["correlation_id"] = self.correlation_id
        return result


@dataclass
class ErrorResponse:
    """Structured error response format."""
    success: bool = False
    error: Optional[ErrorDetail] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {"success": self.success}
        if self.error:
            result["error"] = self.error.to_dict()
        return result


class ConverterError(Exception):
    """Base exception for all unit converter errors."""

    error_type: str = "ConverterError"
    default_suggestion: str = "Check the conversion parameters and try again."

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        suggestion: Optional[str] = None,
        correlation_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()
        self.suggestion = suggestion or self.default_suggestion
        self.correlation_id = correlation_id

    def to_response(self) -> ErrorResponse:
        """Convert exception to structured error response."""
        return ErrorResponse(
            success=False,
            error=ErrorDetail(
                type=self.error_type,
                message=self.message,
                context=self.context,
                suggestion=self.suggestion,
                correlation_id=self.correlation_id,
            )
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return self.to_response().to_dict()


class InvalidCategoryError(ConverterError):
    """Raised when a measurement category is not recognized."""

    error_type = "InvalidCategory"
    default_suggestion = "Use list_categories() to see the supported categories."

    def __init__(
        self,
        category: Any,
        valid_categories: List[str],
        **kwargs,
    ):
        message = f"Unknown category '{category}'. Valid categories: {valid_categories}"
        context = ErrorContext(
            requested_value=str(category),
            valid_values=list(valid_categories),
        )
        super().__init__(message, context=context, **kwargs)


class InvalidUnitError(ConverterError):
    """Raised when a unit is not a member of the category's unit set."""

    error_type = "InvalidUnit"
    default_suggestion = "Use list_units(category) to see the units available for this category."

    def __init__(
        self,
        unit: Any,
        category: str,
        valid_units: List[str],
        **kwargs,
    ):
        message = f"Unit '{unit}' is not a {category} unit. Valid units: {valid_units}"
        context = ErrorContext(
            category=category,
            requested_value=str(unit),
            valid_values=list(valid_units),
        )
        super().__init__(message, context=context, **kwargs)


class InvalidValueError(ConverterError):
    """Raised when an input value is not a finite real number."""

    error_type = "InvalidValue"
    default_suggestion = "Provide a finite decimal number such as '12', '-3.5' or '1e3'."

    def __init__(
        self,
        value: Any,
        reason: Optional[str] = None,
        **kwargs,
    ):
        if reason:
            message = f"Invalid value {value!r}: {reason}"
        else:
            message = f"Invalid value {value!r}: not a finite number"
        context = ErrorContext(requested_value=value)
        super().__init__(message, context=context, **kwargs)


class UnsupportedConversionError(ConverterError):
    """Raised when a unit pair inside a valid category has no conversion formula."""

    error_type = "UnsupportedConversion"
    default_suggestion = "This unit pair cannot be converted directly. Report it as a missing formula."

    def __init__(
        self,
        category: str,
        source_unit: str,
        destination_unit: str,
        **kwargs,
    ):
        message = f"No {category} conversion from {source_unit} to {destination_unit}"
        context = ErrorContext(
            category=category,
            additional_info={
                "source_unit": source_unit,
                "destination_unit": destination_unit,
            },
        )
        super().__init__(message, context=context, **kwargs)
