"""Conversion service: the text boundary around the conversion engine.

Accepts raw user input (category name, unit names, value text), validates
and parses it, runs the engine and renders the result as text. Names are
matched case-insensitively; values must parse to a finite number.
"""

import numbers
from typing import Any, Optional, Union

from ..config import get_config, ServerConfig
from ..engine import (
    Category,
    Unit,
    base_unit,
    categories,
    convert,
    ensure_finite,
    units_for,
)
from ..exceptions import (
    ConverterError,
    InvalidCategoryError,
    InvalidUnitError,
    InvalidValueError,
)
from ..models import CategoryInfo, ConversionRequest, ConversionResult, UnitCatalog
from ..logging import get_logger

logger = get_logger(__name__)


def parse_value(text: Any) -> float:
    """Parse raw input into a finite float.

    Numbers are accepted as-is. Text is stripped of surrounding whitespace
    and parsed as a decimal or scientific literal.

    Args:
        text: Raw input (string or number)

    Returns:
        Parsed value

    Raises:
        InvalidValueError: If input is empty, non-numeric, NaN or infinite
    """
    if isinstance(text, bool):
        raise InvalidValueError(text, reason="expected a number, got a boolean")
    if isinstance(text, numbers.Real):
        return ensure_finite(text)
    if not isinstance(text, str):
        raise InvalidValueError(text, reason="expected text or a number")

    stripped = text.strip()
    if not stripped:
        raise InvalidValueError(text, reason="no value entered")
    try:
        value = float(stripped)
    except ValueError:
        raise InvalidValueError(text, reason="not a number") from None
    return ensure_finite(value)


def resolve_category(name: Union[Category, str]) -> Category:
    """Look up a category by name, ignoring case and surrounding whitespace.

    Raises:
        InvalidCategoryError: If no category matches
    """
    if isinstance(name, Category):
        return name
    valid = [c.value for c in categories()]
    if isinstance(name, str):
        key = name.strip().lower()
        for category in categories():
            if category.value.lower() == key:
                return category
    raise InvalidCategoryError(name, valid)


def resolve_unit(category: Union[Category, str], name: Union[Unit, str]) -> Unit:
    """Look up a unit of a category by name, ignoring case and surrounding whitespace.

    Raises:
        InvalidCategoryError: If the category is unknown
        InvalidUnitError: If the category has no such unit
    """
    category = resolve_category(category)
    units = units_for(category)
    if name in units:
        return units[units.index(name)]
    if isinstance(name, str):
        key = name.strip().lower()
        for unit in units:
            if unit.value.lower() == key:
                return unit
    raise InvalidUnitError(
        getattr(name, "value", name),
        category.value,
        [u.value for u in units],
    )


def format_result(value: float, precision: Optional[int] = None) -> str:
    """Render a converted value as text.

    Without a precision Python's repr() is used: the shortest text that
    reads back as the same float. It stays positional from 1e-4 up to 1e16
    ("10000000.0") and switches to exponent form outside that range
    ("1e+16", "1e-05").

    With a precision the value is rounded to that many decimal places and
    trailing zeros are dropped.
    """
    if precision is None:
        return repr(float(value))
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


class ConversionService:
    """Boundary layer between raw caller input and the conversion engine.

    Usage:
        service = ConversionService()
        result = service.convert("length", "inches", "centimeters", "12")
        print(result.display)  # "30.48"
    """

    def __init__(self, config: Optional[ServerConfig] = None) -> None:
        """Initialize service with optional config.

        Args:
            config: Server configuration (uses global config if not provided)
        """
        self.config = config or get_config()

    def catalog(self) -> UnitCatalog:
        """Get every category with its units in display order."""
        return UnitCatalog(
            categories=[self.category_info(c) for c in categories()]
        )

    def category_info(self, category: Union[Category, str]) -> CategoryInfo:
        """Get the units of one category.

        Raises:
            InvalidCategoryError: If the category is unknown
        """
        category = resolve_category(category)
        base = base_unit(category)
        return CategoryInfo(
            category=category,
            units=[u.value for u in units_for(category)],
            base_unit=base.value if base is not None else None,
        )

    def format_result(self, value: float) -> str:
        """Render a value using the configured precision."""
        return format_result(value, self.config.result_precision)

    def convert(
        self,
        category: Union[Category, str],
        source_unit: Union[Unit, str],
        destination_unit: Union[Unit, str],
        value: Any,
    ) -> ConversionResult:
        """Validate raw input and convert it.

        Args:
            category: Category name (case-insensitive)
            source_unit: Source unit name (case-insensitive)
            destination_unit: Destination unit name (case-insensitive)
            value: Raw value text or number

        Returns:
            ConversionResult with the numeric and rendered result

        Raises:
            ConverterError: Any validation or conversion failure
        """
        try:
            resolved = resolve_category(category)
            source = resolve_unit(resolved, source_unit)
            destination = resolve_unit(resolved, destination_unit)
            number = parse_value(value)
        except ConverterError as e:
            self._log_rejection(e)
            raise

        request = ConversionRequest(
            category=resolved,
            source_unit=source.value,
            destination_unit=destination.value,
            value=number,
        )
        return self.convert_request(request)

    def convert_request(self, request: ConversionRequest) -> ConversionResult:
        """Convert a request whose names and value are already canonical.

        Raises:
            ConverterError: If the engine rejects the conversion
        """
        try:
            result = convert(
                request.category,
                request.source_unit,
                request.destination_unit,
                request.value,
            )
        except ConverterError as e:
            self._log_rejection(e)
            raise

        logger.debug(
            "Conversion completed",
            category=request.category.value,
            source_unit=request.source_unit,
            destination_unit=request.destination_unit,
            value=request.value,
            result=result,
        )
        return ConversionResult(
            category=request.category,
            source_unit=request.source_unit,
            destination_unit=request.destination_unit,
            value=request.value,
            result=result,
            display=self.format_result(result),
        )

    def _log_rejection(self, error: ConverterError) -> None:
        logger.info(
            "Conversion rejected",
            error_type=error.error_type,
            error=error.message,
        )
