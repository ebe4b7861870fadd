"""Pydantic models for the Unit Converter MCP Server."""

from .conversion import (
    ConversionRequest,
    ConversionResult,
    CategoryInfo,
    UnitCatalog,
)

__all__ = [
    "ConversionRequest", "ConversionResult", "CategoryInfo", "UnitCatalog",
]
