"""Conversion models for the Unit Converter MCP Server.

Defines the request/result pair exchanged with the conversion engine and
the unit catalog used to populate selection controls.
"""

import math
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional, List

from ..engine import Category, to_unit
from ..exceptions import ConverterError


class ConversionRequest(BaseModel):
    """A single conversion: value, category and unit pair."""

    category: Category = Field(description="Measurement category")
    source_unit: str = Field(description="Unit the value is expressed in")
    destination_unit: str = Field(description="Unit to convert to")
    value: float = Field(description="Value to convert (finite)")

    @field_validator("value")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        """Reject NaN and infinite values."""
        if not math.isfinite(v):
            raise ValueError("value must be a finite number")
        return v

    @model_validator(mode="after")
    def validate_units(self) -> "ConversionRequest":
        """Ensure both units belong to the category."""
        try:
            self.source_unit = to_unit(self.category, self.source_unit).value
            self.destination_unit = to_unit(self.category, self.destination_unit).value
        except ConverterError as e:
            raise ValueError(e.message) from e
        return self

    model_config = {
        "json_schema_extra": {
            "example": {
                "category": "Length",
                "source_unit": "Inches",
                "destination_unit": "Centimeters",
                "value": 12.0
            }
        }
    }


class ConversionResult(BaseModel):
    """Outcome of a successful conversion."""

    category: Category = Field(description="Measurement category")
    source_unit: str = Field(description="Unit the input was expressed in")
    destination_unit: str = Field(description="Unit of the result")
    value: float = Field(description="Input value")
    result: float = Field(description="Converted value")
    display: str = Field(description="Result rendered as text")

    model_config = {
        "json_schema_extra": {
            "example": {
                "category": "Length",
                "source_unit": "Inches",
                "destination_unit": "Centimeters",
                "value": 12.0,
                "result": 30.48,
                "display": "30.48"
            }
        }
    }


class CategoryInfo(BaseModel):
    """Units available in one category."""

    category: Category = Field(description="Measurement category")
    units: List[str] = Field(description="Unit names in display order")
    base_unit: Optional[str] = Field(
        default=None,
        description="Normalization unit (None for temperature)"
    )


class UnitCatalog(BaseModel):
    """All categories and their units."""

    categories: List[CategoryInfo] = Field(default_factory=list)
