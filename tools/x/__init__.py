"""
X (Twitter) tools — timeline, tweet, reply and delete via the X API.

Requires TWITTER_API_KEY, TWITTER_API_SECRET, TWITTER_ACCESS_TOKEN and
TWITTER_ACCESS_SECRET in the environment (or a .env file).
"""

from tools.x import timeline, tweet_create, tweet_reply, tweet_delete


TOOLS = [
    timeline.TOOL,
    tweet_create.TOOL,
    tweet_reply.TOOL,
    tweet_delete.TOOL,
]

HANDLERS = {
    "get_home_timeline": timeline.handle,
    "create_tweet": tweet_create.handle,
    "reply_to_tweet": tweet_reply.handle,
    "delete_tweet": tweet_delete.handle,
}
