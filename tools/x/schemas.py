"""
Typed argument records for the X tools, one model per tool.
"""

from typing import TypeVar

from pydantic import BaseModel, Field, ValidationError

from config import TWEET_MAX_LENGTH
from tools.x.exceptions import InvalidToolArguments

M = TypeVar("M", bound=BaseModel)


class HomeTimelineArguments(BaseModel):
    limit: int = Field(20, ge=1, le=100, description="Number of tweets to retrieve (max 100)")


class CreateTweetArguments(BaseModel):
    text: str = Field(..., max_length=TWEET_MAX_LENGTH)
    image_path: str | None = None
    video_path: str | None = None


class ReplyToTweetArguments(BaseModel):
    tweet_id: str = Field(..., min_length=1)
    text: str = Field(..., max_length=TWEET_MAX_LENGTH)
    image_path: str | None = None
    video_path: str | None = None


class DeleteTweetArguments(BaseModel):
    tweet_id: str = Field(..., min_length=1)


def parse_arguments(model: type[M], arguments: dict | None) -> M:
    """Validate raw tool arguments against ``model``.

    Raises:
        InvalidToolArguments: With one line per invalid field.
    """
    try:
        return model.model_validate(arguments or {})
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'arguments'}: {err['msg']}"
            for err in e.errors()
        )
        raise InvalidToolArguments(f"Invalid arguments: {details}") from e
