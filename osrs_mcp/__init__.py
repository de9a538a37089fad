"""osrs_mcp: OSRS wiki and game data file tools over MCP."""

__all__ = ["__version__"]

__version__ = "0.1.0"
