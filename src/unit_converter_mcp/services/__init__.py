"""Services for the Unit Converter MCP Server."""

from .conversion_service import (
    ConversionService,
    parse_value,
    resolve_category,
    resolve_unit,
    format_result,
)

__all__ = [
    "ConversionService",
    "parse_value",
    "resolve_category",
    "resolve_unit",
    "format_result",
]
