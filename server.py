#!/usr/bin/env python3
"""
X MCP Server
A Model Context Protocol server for reading and posting to X (Twitter).

Serves over stdio by default; set PORT to serve streamable HTTP on /mcp instead.
"""

import asyncio
import contextlib

import structlog
import uvicorn
from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from mcp.types import Tool
from starlette.applications import Starlette
from starlette.routing import Mount

import config
import tools
from tools.x.context import XToolContext, create_context
from utils import setup_logging

logger = structlog.get_logger()

SERVER_NAME = "x-mcp-server"
SERVER_VERSION = "1.0.0"


def create_server(context: XToolContext) -> Server:
    """Create the MCP server with all tool handlers bound to ``context``."""
    app = Server(SERVER_NAME, version=SERVER_VERSION)

    @app.list_tools()
    async def list_tools() -> list[Tool]:
        """List available X tools."""
        return tools.TOOLS

    # McpError must surface as a JSON-RPC error, not an isError tool result
    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        """Handle tool calls."""
        content = await tools.call_tool(req.params.name, req.params.arguments or {}, context)
        return types.ServerResult(types.CallToolResult(content=content))

    app.request_handlers[types.CallToolRequest] = call_tool

    return app


async def run_stdio(app: Server) -> None:
    """Run the MCP server over stdio."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info("X MCP server running", transport="stdio")
        await app.run(
            read_stream,
            write_stream,
            app.create_initialization_options()
        )


def create_http_app(app: Server) -> Starlette:
    """Wrap the MCP server in a Starlette app serving streamable HTTP on /mcp."""
    session_manager = StreamableHTTPSessionManager(app=app, stateless=True)

    async def handle_streamable_http(scope, receive, send):
        await session_manager.handle_request(scope, receive, send)

    @contextlib.asynccontextmanager
    async def lifespan(_starlette_app):
        async with session_manager.run():
            yield

    return Starlette(
        routes=[Mount("/mcp", app=handle_streamable_http)],
        lifespan=lifespan,
    )


def main():
    """Run the MCP server."""
    setup_logging(config.get_log_level())

    missing = config.missing_credentials()
    if missing:
        logger.warning("X API credentials not set, API calls will fail", missing=missing)

    app = create_server(create_context())

    port = config.get_http_port()
    if port:
        logger.info("X MCP server running", transport="http", port=port)
        uvicorn.run(create_http_app(app), host="0.0.0.0", port=port)
    else:
        asyncio.run(run_stdio(app))


if __name__ == "__main__":
    main()
