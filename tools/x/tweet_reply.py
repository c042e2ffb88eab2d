"""
reply_to_tweet tool - Reply to a tweet, optionally with one image or video.
"""

from mcp.types import Tool, TextContent

from tools.x.context import XToolContext
from tools.x.exceptions import InvalidToolArguments
from tools.x.media import attach_media
from tools.x.schemas import ReplyToTweetArguments, parse_arguments
from utils import json_content


TOOL = Tool(
    name="reply_to_tweet",
    description="Reply to a tweet with optional image or video attachment",
    inputSchema={
        "type": "object",
        "properties": {
            "tweet_id": {
                "type": "string",
                "description": "The ID of the tweet to reply to"
            },
            "text": {
                "type": "string",
                "description": "The text content of the reply",
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
        "required": ["tweet_id", "text"]
    }
)


async def handle(arguments: dict, context: XToolContext) -> list[TextContent]:
    """Handle reply_to_tweet tool call."""
    args = parse_arguments(ReplyToTweetArguments, arguments)

    if args.image_path and args.video_path:
        raise InvalidToolArguments(
            "Cannot attach both image and video to the same reply. Please provide only one."
        )

    media_id = await attach_media(context.client, args.image_path, args.video_path)

    async def post() -> dict:
        if media_id:
            return await context.client.post_with_media(args.text, media_id, reply_to=args.tweet_id)
        return await context.client.post_text(args.text, reply_to=args.tweet_id)

    reply = await context.limiter.throttle("reply", post)
    return json_content(reply.get("data"))
