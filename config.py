"""
Configuration management for X MCP Server.
Reads API credentials and rate-limit tuning from the environment (.env supported).
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()

# X API endpoints
API_BASE = "https://api.twitter.com/2"
UPLOAD_BASE = "https://upload.twitter.com/1.1"

# Credential environment variables (OAuth 1.0a user context)
CREDENTIAL_VARS = (
    "TWITTER_API_KEY",
    "TWITTER_API_SECRET",
    "TWITTER_ACCESS_TOKEN",
    "TWITTER_ACCESS_SECRET",
)

TWEET_MAX_LENGTH = 280

# Free tier only returns a handful of timeline entries per request
TIMELINE_MAX_RESULTS = 5

MIB = 1024 * 1024

# Videos above this size are uploaded with the long-video media category
LONG_VIDEO_THRESHOLD = 15 * MIB

# Chunk size for APPEND segments of the chunked media upload
UPLOAD_CHUNK_SIZE = 1 * MIB


@dataclass(frozen=True)
class Credentials:
    api_key: str
    api_secret: str
    access_token: str
    access_secret: str


def get_credentials() -> Credentials:
    """Get API credentials from the environment. Missing values become empty strings."""
    return Credentials(
        api_key=os.environ.get("TWITTER_API_KEY", ""),
        api_secret=os.environ.get("TWITTER_API_SECRET", ""),
        access_token=os.environ.get("TWITTER_ACCESS_TOKEN", ""),
        access_secret=os.environ.get("TWITTER_ACCESS_SECRET", ""),
    )


def missing_credentials() -> list[str]:
    """List credential variables that are unset or empty."""
    return [name for name in CREDENTIAL_VARS if not os.environ.get(name)]


def _float_env(name: str, default: float) -> float:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def get_rate_limit_cooldown() -> float:
    """Seconds an endpoint group stays blocked after each call (default: 15 minutes)."""
    return _float_env("X_RATE_LIMIT_COOLDOWN_SECONDS", 15 * 60)


def get_rate_limit_buffer() -> float:
    """Extra seconds added to every rate-limit wait."""
    return _float_env("X_RATE_LIMIT_BUFFER_SECONDS", 1.0)


def get_api_timeout() -> float:
    """HTTP timeout in seconds for X API requests."""
    return _float_env("X_API_TIMEOUT_SECONDS", 30.0)


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()


def get_http_port() -> int | None:
    """Port for streamable HTTP mode, or None to serve over stdio."""
    value = os.environ.get("PORT")
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None
