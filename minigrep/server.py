"""
minigrep MCP Server

MCP delivery layer - wraps the search use case as an MCP tool.
Separation of concerns: this file only handles MCP protocol.
"""
import argparse
import logging
import os
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .adapters.mcp import MCPHandlers
from .cli import configure_logging
from .container import Container

logger = logging.getLogger(__name__)

# Get host/port from env or default
HTTP_PORT = int(os.getenv("MINIGREP_HTTP_PORT", "6661"))
HTTP_HOST = os.getenv("MINIGREP_HTTP_HOST", "127.0.0.1")

# Initialize MCP server with HTTP config
mcp = FastMCP("minigrep", host=HTTP_HOST, port=HTTP_PORT)

handlers = MCPHandlers(Container())


@mcp.tool()
async def search_file(
    query: str,
    file_path: str,
    ignore_case: Optional[bool] = None
) -> dict:
    """
    Return every line of a text file that contains the query.

    Plain substring match, no regex. Lines come back in file order with
    their original casing.

    Args:
        query: Text to look for
        file_path: Path of the file to search
        ignore_case: Compare lowercased text. Defaults to whether the
            IGNORE_CASE environment variable is set on the server.

    Returns:
        Dictionary with matching lines and count, or success=False with error

    Example:
        search_file("duct", "poem.txt")
        → {lines: ["safe, fast, productive."], count: 1, ...}
    """
    return await handlers.search_file(
        query=query,
        file_path=file_path,
        ignore_case=ignore_case
    )


def main():
    """Main entry point for the MCP server."""
    parser = argparse.ArgumentParser(
        description="minigrep: line search over local files, as an MCP tool."
    )
    parser.add_argument(
        "--transport",
        default="stdio",
        choices=["stdio", "streamable-http"],
        help="Transport method (default: stdio)"
    )
    parser.add_argument(
        "--host",
        default=HTTP_HOST,
        help=f"Host to bind to for HTTP transport (default: {HTTP_HOST}, or set MINIGREP_HTTP_HOST)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=HTTP_PORT,
        help=f"Port to bind to for HTTP transport (default: {HTTP_PORT}, or set MINIGREP_HTTP_PORT)"
    )
    args = parser.parse_args()

    configure_logging()

    if args.transport == "streamable-http":
        mcp.settings.host = args.host
        mcp.settings.port = args.port
        logger.info(f"Starting minigrep on http://{args.host}:{args.port}")
        mcp.run(transport="streamable-http")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
