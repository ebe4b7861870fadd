"""Unit Converter MCP Server.

Converts values between length, weight and temperature units.
"""

__version__ = "0.1.0"
