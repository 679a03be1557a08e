"""In-memory job portal exposed as MCP tools and resources."""

__version__ = "1.0.0"
