"""scc-mcp — scc code metrics exposed as MCP queries."""

__version__ = "0.1.0"
