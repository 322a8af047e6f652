"""Console entry-point for the Slack webhook MCP server.

Run with:

.. code-block:: bash

    python -m slack_webhook_mcp.mcp --transport stdio

This delegates to `slack_webhook_mcp.mcp.entry.main()`.
"""
from slack_webhook_mcp.mcp.entry import main

if __name__ == "__main__":
    main()
