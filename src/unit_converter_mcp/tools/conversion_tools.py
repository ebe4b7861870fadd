"""Conversion tools for the Unit Converter MCP Server.

These tools let a client discover categories and units, and convert
a value between two units of the same category.
"""

from typing import Union
from mcp.server.fastmcp import FastMCP

from ..services.conversion_service import ConversionService
from ..exceptions import ConverterError
from ..logging import get_logger, LogContext

logger = get_logger(__name__)


def register_conversion_tools(mcp: FastMCP) -> None:
    """Register all conversion tools with the MCP server.

    Args:
        mcp: FastMCP server instance
    """

    @mcp.tool()
    async def list_categories() -> dict:
        """List the supported measurement categories.

        Returns:
            Dict containing:
            - categories: Category names in display order

        Example response:
            {
                "categories": ["Length", "Weight", "Temperature"]
            }
        """
        logger.info("list_categories called")
        catalog = ConversionService().catalog()
        return {"categories": [info.category.value for info in catalog.categories]}

    @mcp.tool()
    async def list_units(category: str) -> dict:
        """List the units of a measurement category.

        Units are returned in display order. Source and destination units
        passed to convert_units() must both come from this list.

        Args:
            category: Category name ("Length", "Weight" or "Temperature",
                     case-insensitive). Use list_categories() to see them.

        Returns:
            Dict containing:
            - category: Canonical category name
            - units: Unit names in display order
            - base_unit: Unit values are normalized through (null for Temperature)

        Example response:
            {
                "success": true,
                "category": "Length",
                "units": ["Inches", "Feet", "Yards", "Miles", "Centimeters"],
                "base_unit": "Centimeters"
            }
        """
        with LogContext(tool="list_units") as ctx:
            logger.info("list_units called", category=category)
            try:
                info = ConversionService().category_info(category)
            except ConverterError as e:
                e.correlation_id = ctx.correlation_id
                return e.to_dict()
            return {"success": True, **info.model_dump(mode="json")}

    @mcp.tool()
    async def get_unit_catalog() -> dict:
        """Get every category together with its units.

        **Use this** to populate category and unit selectors in one call.

        Returns:
            Dict containing:
            - categories: List of {category, units, base_unit}
        """
        logger.info("get_unit_catalog called")
        return ConversionService().catalog().model_dump(mode="json")

    @mcp.tool()
    async def convert_units(
        category: str,
        source_unit: str,
        destination_unit: str,
        value: Union[str, float],
    ) -> dict:
        """Convert a value from one unit to another within a category.

        Length and weight are converted through a base unit (centimeters,
        kilograms). Temperature uses direct formulas, so it is not
        proportional: -40 Celsius is -40 Fahrenheit.

        Args:
            category: "Length", "Weight" or "Temperature" (case-insensitive)
            source_unit: Unit the value is expressed in (e.g. "Inches")
            destination_unit: Unit to convert to (e.g. "Centimeters")
            value: Number to convert, as a number or text such as "12.5".
                   Empty, non-numeric, NaN and infinite values are rejected.

        Returns:
            Dict containing:
            - success: True if the conversion succeeded
            - result: Converted value
            - display: Converted value rendered as text
            - error: Structured error (type, message, suggestion) on failure

        Example response:
            {
                "success": true,
                "category": "Length",
                "source_unit": "Inches",
                "destination_unit": "Centimeters",
                "value": 1.0,
                "result": 2.54,
                "display": "2.54"
            }

        Example error response:
            {
                "success": false,
                "error": {
                    "type": "InvalidUnit",
                    "message": "Unit 'Gallons' is not a Length unit. ...",
                    "suggestion": "Use list_units(category) to see ..."
                }
            }
        """
        with LogContext(tool="convert_units") as ctx:
            logger.info(
                "convert_units called",
                category=category,
                source_unit=source_unit,
                destination_unit=destination_unit,
            )
            try:
                result = ConversionService().convert(
                    category, source_unit, destination_unit, value
                )
            except ConverterError as e:
                e.correlation_id = ctx.correlation_id
                return e.to_dict()
            return {"success": True, **result.model_dump(mode="json")}
