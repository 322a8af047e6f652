"""Call ``send_slack_message`` on a server started with

.. code-block:: bash

    python -m slack_webhook_mcp.mcp --transport streamable-http --port 9000
"""

import asyncio

from mcp import ClientSession
from mcp.client.streamable_http import streamablehttp_client


async def mcp_client():
    url = "http://localhost:9000/mcp"
    async with streamablehttp_client(url) as (
        read_stream,
        write_stream,
        _close_fn,
    ):
        async with ClientSession(read_stream, write_stream) as session:
            await session.initialize()
            tools = await session.list_tools()
            print("Available tools:", [tool.name for tool in tools.tools])
            # Uses SLACK_WEBHOOK_URL of the server unless webhook_url is passed
            res = await session.call_tool(
                name="send_slack_message",
                arguments={
                    "message": "*Hello* from a Python MCP client",
                    "format": "markdown",
                },
            )
            print("send_slack_message →", res.model_dump())


if __name__ == "__main__":
    asyncio.run(mcp_client())
