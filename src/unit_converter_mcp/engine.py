"""Conversion engine for length, weight and temperature values.

Length and weight are converted in two stages through a base unit:
the source value is scaled to the base unit, then divided by the
destination unit's factor.

    Length base unit: centimeters (cm)
    Weight base unit: kilograms (kg)

Temperature scales are affine rather than proportional, so each pair of
temperature units has its own direct formula.

All tables in this module are read-only and built once at import time.
Every function is pure and safe to call from any thread.
"""

import math
import numbers
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Tuple, Type, Union

from .exceptions import (
    InvalidCategoryError,
    InvalidUnitError,
    InvalidValueError,
    UnsupportedConversionError,
)


class Category(str, Enum):
    """Measurement categories, in display order."""
    LENGTH = "Length"
    WEIGHT = "Weight"
    TEMPERATURE = "Temperature"


class LengthUnit(str, Enum):
    """Length units, in display order."""
    INCHES = "Inches"
    FEET = "Feet"
    YARDS = "Yards"
    MILES = "Miles"
    CENTIMETERS = "Centimeters"


class WeightUnit(str, Enum):
    """Weight units, in display order."""
    POUNDS = "Pounds"
    OUNCES = "Ounces"
    TONS = "Tons"
    GRAMS = "Grams"
    KILOGRAMS = "Kilograms"


class TemperatureUnit(str, Enum):
    """Temperature units, in display order."""
    CELSIUS = "Celsius"
    FAHRENHEIT = "Fahrenheit"
    KELVIN = "Kelvin"


Unit = Union[LengthUnit, WeightUnit, TemperatureUnit]


UNIT_TYPES: Mapping[Category, Type[Enum]] = MappingProxyType({
    Category.LENGTH: LengthUnit,
    Category.WEIGHT: WeightUnit,
    Category.TEMPERATURE: TemperatureUnit,
})

# 1 unit = factor * base unit
LENGTH_FACTORS_TO_CM: Mapping[LengthUnit, float] = MappingProxyType({
    LengthUnit.INCHES: 2.54,
    LengthUnit.FEET: 30.48,
    LengthUnit.YARDS: 91.44,
    LengthUnit.MILES: 160934.0,
    LengthUnit.CENTIMETERS: 1.0,
})

WEIGHT_FACTORS_TO_KG: Mapping[WeightUnit, float] = MappingProxyType({
    WeightUnit.POUNDS: 0.453592,
    WeightUnit.OUNCES: 0.0283495,
    WeightUnit.TONS: 907.185,
    WeightUnit.GRAMS: 0.001,
    WeightUnit.KILOGRAMS: 1.0,
})

FACTORS_TO_BASE: Mapping[Category, Mapping[Any, float]] = MappingProxyType({
    Category.LENGTH: LENGTH_FACTORS_TO_CM,
    Category.WEIGHT: WEIGHT_FACTORS_TO_KG,
})

BASE_UNITS: Mapping[Category, Unit] = MappingProxyType({
    Category.LENGTH: LengthUnit.CENTIMETERS,
    Category.WEIGHT: WeightUnit.KILOGRAMS,
})

KELVIN_OFFSET = 273.15
FAHRENHEIT_SCALE = 1.8
FAHRENHEIT_OFFSET = 32.0

_C = TemperatureUnit.CELSIUS
_F = TemperatureUnit.FAHRENHEIT
_K = TemperatureUnit.KELVIN

TEMPERATURE_FORMULAS: Mapping[Tuple[TemperatureUnit, TemperatureUnit], Callable[[float], float]] = MappingProxyType({
    (_C, _F): lambda v: v * FAHRENHEIT_SCALE + FAHRENHEIT_OFFSET,
    (_C, _K): lambda v: v + KELVIN_OFFSET,
    (_F, _C): lambda v: (v - FAHRENHEIT_OFFSET) / FAHRENHEIT_SCALE,
    (_F, _K): lambda v: (v - FAHRENHEIT_OFFSET) / FAHRENHEIT_SCALE + KELVIN_OFFSET,
    (_K, _C): lambda v: v - KELVIN_OFFSET,
    (_K, _F): lambda v: (v - KELVIN_OFFSET) * FAHRENHEIT_SCALE + FAHRENHEIT_OFFSET,
})


def categories() -> Tuple[Category, ...]:
    """Return all categories in display order."""
    return tuple(Category)


def to_category(category: Union[Category, str]) -> Category:
    """Coerce a category or its exact name to a Category.

    Raises:
        InvalidCategoryError: If the name is not a known category
    """
    if isinstance(category, Category):
        return category
    try:
        return Category(category)
    except ValueError:
        raise InvalidCategoryError(
            category, [c.value for c in Category]
        ) from None


def units_for(category: Union[Category, str]) -> Tuple[Unit, ...]:
    """Return the units of a category in display order.

    Args:
        category: Category member or its exact name (e.g. "Length")

    Returns:
        Tuple of unit enum members

    Raises:
        InvalidCategoryError: If the category is unknown
    """
    return tuple(UNIT_TYPES[to_category(category)])


def to_unit(category: Union[Category, str], unit: Union[Unit, str]) -> Unit:
    """Coerce a unit or its exact name to a member of the category's unit set.

    A unit that belongs to a different category is rejected.

    Raises:
        InvalidCategoryError: If the category is unknown
        InvalidUnitError: If the unit is not in the category's set
    """
    category = to_category(category)
    unit_type = UNIT_TYPES[category]
    if isinstance(unit, unit_type):
        return unit
    try:
        return unit_type(unit)
    except ValueError:
        raise InvalidUnitError(
            getattr(unit, "value", unit),
            category.value,
            [u.value for u in unit_type],
        ) from None


def base_unit(category: Union[Category, str]) -> Optional[Unit]:
    """Return the normalization unit of a category, or None for temperature."""
    return BASE_UNITS.get(to_category(category))


def factor_to_base(category: Union[Category, str], unit: Union[Unit, str]) -> float:
    """Return how many base units one unit is worth.

    Raises:
        InvalidCategoryError: If the category has no base unit (temperature)
        InvalidUnitError: If the unit is not in the category's set
    """
    category = to_category(category)
    if category not in FACTORS_TO_BASE:
        raise InvalidCategoryError(
            category.value, [c.value for c in FACTORS_TO_BASE]
        )
    return FACTORS_TO_BASE[category][to_unit(category, unit)]


def ensure_finite(value: Any) -> float:
    """Validate that a value is a finite real number and return it as a float.

    Raises:
        InvalidValueError: For booleans, non-numbers, NaN and infinities
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidValueError(value, reason="expected a real number")
    try:
        value = float(value)
    except OverflowError:
        raise InvalidValueError(value, reason="value must be finite") from None
    if not math.isfinite(value):
        raise InvalidValueError(value, reason="value must be finite")
    return value


def convert(
    category: Union[Category, str],
    source_unit: Union[Unit, str],
    destination_unit: Union[Unit, str],
    value: float,
) -> float:
    """Convert a value between two units of the same category.

    Converting a unit to itself returns the value unchanged.

    Args:
        category: Measurement category
        source_unit: Unit the value is expressed in
        destination_unit: Unit to convert to
        value: Finite real number

    Returns:
        Converted value

    Raises:
        InvalidCategoryError: If the category is unknown
        InvalidUnitError: If either unit is not in the category's set
        InvalidValueError: If the value is not a finite real number,
            or the converted value does not fit in a float
        UnsupportedConversionError: If no formula exists for the unit pair
    """
    category = to_category(category)
    source = to_unit(category, source_unit)
    destination = to_unit(category, destination_unit)
    value = ensure_finite(value)

    if source == destination:
        return value

    if category is Category.TEMPERATURE:
        formula = TEMPERATURE_FORMULAS.get((source, destination))
        if formula is None:
            raise UnsupportedConversionError(
                category.value, source.value, destination.value
            )
        result = formula(value)
    else:
        factors = FACTORS_TO_BASE[category]
        base_value = value * factors[source]
        result = base_value / factors[destination]
        if math.isinf(base_value):
            # base value overflowed; the scaled result may still fit
            result = value * (factors[source] / factors[destination])

    if not math.isfinite(result):
        raise InvalidValueError(value, reason="result out of range")
    return result
