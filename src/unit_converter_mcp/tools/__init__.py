"""MCP tools for the Unit Converter MCP Server."""

from .conversion_tools import register_conversion_tools
from .system_tools import register_system_tools

__all__ = [
    "register_conversion_tools",
    "register_system_tools",
]
