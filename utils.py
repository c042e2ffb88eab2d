"""
Shared utilities for X MCP Server.
"""

import json
import logging
import sys

import structlog
from mcp.types import TextContent


def setup_logging(level: str = "INFO") -> None:
    """Configure structlog to write to stderr (stdout carries the MCP stdio stream)."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(message)s",
        stream=sys.stderr,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def json_content(payload) -> list[TextContent]:
    """Wrap a JSON-serializable payload as a pretty-printed text content block."""
    return [TextContent(type="text", text=json.dumps(payload, indent=2))]
