"""Command-line options of the MCP server entry point."""
