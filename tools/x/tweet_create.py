"""
create_tweet tool - Post a new tweet, optionally with one image or video.
"""

from mcp.types import Tool, TextContent

from tools.x.context import XToolContext
from tools.x.exceptions import InvalidToolArguments
from tools.x.media import attach_media
from tools.x.schemas import CreateTweetArguments, parse_arguments
from utils import json_content


TOOL = Tool(
    name="create_tweet",
    description="Create a new tweet with optional image or video attachment",
    inputSchema={
        "type": "object",
        "properties": {
            "text": {
                "type": "string",
                "description": "The text content of the tweet",
                "maxLength": 280
            },
            "image_path": {
                "type": "string",
                "description": "Optional absolute path to an image file to attach (PNG, JPEG, GIF, WEBP)"
            },
            "video_path": {
                "type": "string",
                "description": "Optional absolute path to a video file to attach (MP4, MOV, AVI, WEBM, M4V). Max 512MB. Cannot be used with image_path."
            }
        },
        "required": ["text"]
    }
)


async def handle(arguments: dict, context: XToolContext) -> list[TextContent]:
    """Handle create_tweet tool call."""
    args = parse_arguments(CreateTweetArguments, arguments)

    if args.image_path and args.video_path:
        raise InvalidToolArguments(
            "Cannot attach both image and video to the same tweet. Please provide only one."
        )

    media_id = await attach_media(context.client, args.image_path, args.video_path)

    async def post() -> dict:
        if media_id:
            return await context.client.post_with_media(args.text, media_id)
        return await context.client.post_text(args.text)

    tweet = await context.limiter.throttle("tweet", post)
    return json_content(tweet.get("data"))
