"""
get_home_timeline tool - Read the most recent tweets from the home timeline.
"""

from mcp.types import Tool, TextContent

from config import TIMELINE_MAX_RESULTS
from tools.x.context import XToolContext
from tools.x.schemas import HomeTimelineArguments, parse_arguments
from utils import json_content


TOOL = Tool(
    name="get_home_timeline",
    description="Get the most recent tweets from your home timeline",
    inputSchema={
        "type": "object",
        "properties": {
            "limit": {
                "type": "integer",
                "description": "Number of tweets to retrieve (max 100)",
                "minimum": 1,
                "maximum": 100,
                "default": 20
            }
        }
    }
)


async def handle(arguments: dict, context: XToolContext) -> list[TextContent]:
    """Handle get_home_timeline tool call."""
    args = parse_arguments(HomeTimelineArguments, arguments)

    # The free tier caps timeline reads regardless of the requested limit
    timeline = await context.limiter.throttle("home", lambda: context.client.fetch_home_timeline(
        max_results=min(args.limit, TIMELINE_MAX_RESULTS),
        **{"tweet.fields": ["author_id", "created_at", "referenced_tweets"]},
        expansions=["author_id", "referenced_tweets.id"],
    ))

    return json_content(timeline)
