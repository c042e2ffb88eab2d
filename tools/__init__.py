"""
X MCP Tools - Tool definitions and dispatcher.
"""

import structlog
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, ErrorData, TextContent, Tool

from tools import x
from tools.x.context import XToolContext
from tools.x.exceptions import UnknownToolError, XToolError

logger = structlog.get_logger()

# Prefix for unexpected failures surfaced as internal errors
INTERNAL_ERROR_LABEL = "Twitter API error"


# Collect all tools
TOOLS: list[Tool] = [
    *x.TOOLS,
]

# Map tool names to handlers
_HANDLERS = {
    **x.HANDLERS,
}


async def call_tool(name: str, arguments: dict | None, context: XToolContext) -> list[TextContent]:
    """
    Dispatch a tool call to the appropriate handler.

    Structured tool errors keep their own MCP error code; anything else is
    reported as an internal error with the original message.
    """
    logger.info("Tool call received", tool=name)
    try:
        handler = _HANDLERS.get(name)
        if handler is None:
            raise UnknownToolError(f"Unknown tool: {name}")
        return await handler(arguments or {}, context)
    except McpError:
        raise
    except XToolError as e:
        logger.warning("Tool call rejected", tool=name, error=str(e))
        raise McpError(ErrorData(code=e.code, message=str(e))) from e
    except Exception as e:
        logger.exception("Tool call failed", tool=name)
        raise McpError(ErrorData(code=INTERNAL_ERROR, message=f"{INTERNAL_ERROR_LABEL}: {e}")) from e
