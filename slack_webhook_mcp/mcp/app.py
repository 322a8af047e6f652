"""MCP server factory for creating and managing the FastMCP instance.

Usage Examples
==============

**1. Get the MCP server instance:**

    .. code-block:: python

        from slack_webhook_mcp.mcp.app import mcp_factory

        mcp_server = mcp_factory.get()

**2. Run stdio transport:**

    .. code-block:: python

        mcp_server = mcp_factory.get()
        mcp_server.run(transport="stdio")

**3. Get the streamable-http app to serve with uvicorn:**

    .. code-block:: python

        import uvicorn

        uvicorn.run(mcp_factory.get().streamable_http_app(), host="127.0.0.1", port=8000)

Transport Types
===============
- **stdio**: Standard input/output for local MCP clients
- **sse**: Server-Sent Events for HTTP-based clients
- **streamable-http**: Streamable HTTP transport for HTTP-based clients
"""

from typing import Final, Type

from mcp.server.fastmcp import FastMCP

SERVER_NAME: Final[str] = "slack-webhook"
SERVER_INSTRUCTIONS: Final[str] = "Posts messages to a Slack channel through an incoming webhook."

_MCP_SERVER_INSTANCE: FastMCP | None = None


class MCPServerFactory:
    """Factory owning the single FastMCP server instance of the process.

    Examples
    --------
    **Reset for testing:**

    .. code-block:: python

        from slack_webhook_mcp.mcp.app import mcp_factory

        mcp_factory.reset()
        mcp_server = mcp_factory.create()
    """

    @staticmethod
    def create() -> FastMCP:
        """Create the MCP server.

        Returns
        -------
        FastMCP
            Server named ``slack-webhook``

        Raises
        ------
        AssertionError
            If an instance has already been created
        """
        global _MCP_SERVER_INSTANCE
        assert _MCP_SERVER_INSTANCE is None, "It is not allowed to create more than one instance of FastMCP."
        _MCP_SERVER_INSTANCE = FastMCP(name=SERVER_NAME, instructions=SERVER_INSTRUCTIONS)
        return _MCP_SERVER_INSTANCE

    @staticmethod
    def get() -> FastMCP:
        """Get the MCP server instance.

        Raises
        ------
        AssertionError
            If the server instance has not been created yet
        """
        assert _MCP_SERVER_INSTANCE is not None, "It must be created FastMCP first."
        return _MCP_SERVER_INSTANCE

    @staticmethod
    def reset() -> None:
        """Reset the singleton instance (for testing purposes)."""
        global _MCP_SERVER_INSTANCE
        _MCP_SERVER_INSTANCE = None


mcp_factory: Final[Type[MCPServerFactory]] = MCPServerFactory
mcp: Final[FastMCP] = mcp_factory.create()
