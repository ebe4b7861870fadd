"""Main entry point for the Unit Converter MCP Server."""

import argparse
from mcp.server.fastmcp import FastMCP

from .config import get_config
from .logging import setup_logging, get_logger
from .tools import (
    register_conversion_tools,
    register_system_tools,
)


# Create FastMCP server instance
mcp = FastMCP(
    "UnitConverter",
    instructions="""You are an assistant that converts measurements between units.

WORKFLOW:
1. Use list_categories() to see the supported categories
2. Use list_units(category) to see the units of a category
3. Use convert_units(category, source_unit, destination_unit, value) to convert

CATEGORIES:
- Length: Inches, Feet, Yards, Miles, Centimeters (normalized through centimeters)
- Weight: Pounds, Ounces, Tons, Grams, Kilograms (normalized through kilograms)
- Temperature: Celsius, Fahrenheit, Kelvin (direct formulas)

IMPORTANT:
- Both units must belong to the chosen category
- Names are case-insensitive
- Tons are US short tons (907.185 kg)
- Temperature is not proportional: negating the input does not negate the result
- On failure convert_units returns success=false with an error type and suggestion
""",
)


def main() -> None:
    """Main entry point."""
    # Parse arguments
    parser = argparse.ArgumentParser(description="Unit Converter MCP Server")
    parser.add_argument(
        "--transport",
        type=str,
        choices=["sse", "stdio"],
        help="MCP transport type (overrides config)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)"
    )
    args = parser.parse_args()

    # Get configuration
    config = get_config()

    # Setup logging
    setup_logging(config, log_level=args.log_level)
    logger = get_logger(__name__)

    transport = args.transport or config.server_transport

    logger.info(
        "Starting Unit Converter MCP Server",
        transport=transport,
        result_precision=config.result_precision,
    )

    # Register tools
    register_conversion_tools(mcp)
    logger.info("Conversion tools registered")

    register_system_tools(mcp)
    logger.info("System tools registered")

    # Run MCP server
    logger.info("Starting MCP server", transport=transport)
    mcp.run(transport=transport)


if __name__ == "__main__":
    main()
