"""System tools for the Unit Converter MCP Server.

These tools provide health check and version information
for monitoring and diagnostics.
"""

from mcp.server.fastmcp import FastMCP

from .. import __version__
from ..engine import categories, convert, Category, TemperatureUnit
from ..logging import get_logger

API_VERSION = "1.0"

logger = get_logger(__name__)


def register_system_tools(mcp: FastMCP) -> None:
    """Register all system tools with the MCP server.

    Args:
        mcp: FastMCP server instance
    """

    @mcp.tool()
    async def check_health() -> dict:
        """Check the health status of the conversion engine.

        Runs a known conversion (0 Celsius to Fahrenheit must give 32)
        to verify the engine tables are intact.

        Returns:
            Dict with health status:
            - healthy: True if the engine answered correctly
            - server_status: "running" if MCP server is operational
            - categories: Number of supported categories
            - message: Human-readable status message

        Example response:
            {
                "healthy": true,
                "server_status": "running",
                "categories": 3,
                "message": "All systems operational"
            }
        """
        logger.info("check_health called")
        sample = convert(
            Category.TEMPERATURE,
            TemperatureUnit.CELSIUS,
            TemperatureUnit.FAHRENHEIT,
            0.0,
        )
        healthy = sample == 32.0
        if not healthy:
            logger.warning("Engine self-check failed", sample=sample)

        return {
            "healthy": healthy,
            "server_status": "running",
            "server_version": __version__,
            "categories": len(categories()),
            "message": (
                "All systems operational"
                if healthy
                else f"Engine self-check returned {sample}, expected 32.0"
            ),
        }

    @mcp.tool()
    async def get_version() -> dict:
        """Get version information for the server.

        Returns:
            Dict with version information:
            - server_version: MCP server version
            - api_version: Tool API version

        Example response:
            {
                "server_version": "0.1.0",
                "api_version": "1.0"
            }
        """
        logger.info("get_version called")
        return {
            "server_version": __version__,
            "api_version": API_VERSION,
        }
