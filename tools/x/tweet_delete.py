"""
delete_tweet tool - Delete one of your tweets.
"""

from mcp.types import Tool, TextContent

from tools.x.context import XToolContext
from tools.x.schemas import DeleteTweetArguments, parse_arguments
from utils import json_content


TOOL = Tool(
    name="delete_tweet",
    description="Delete one of your tweets",
    inputSchema={
        "type": "object",
        "properties": {
            "tweet_id": {
                "type": "string",
                "description": "The ID of the tweet to delete"
            }
        },
        "required": ["tweet_id"]
    }
)


async def handle(arguments: dict, context: XToolContext) -> list[TextContent]:
    """Handle delete_tweet tool call."""
    args = parse_arguments(DeleteTweetArguments, arguments)
    deleted = await context.limiter.throttle("delete", lambda: context.client.delete_by_id(args.tweet_id))
    return json_content(deleted.get("data"))
