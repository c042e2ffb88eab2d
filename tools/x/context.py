"""
Shared services handed to every X tool handler.
"""

from dataclasses import dataclass

import config
from tools.x.client import XClient
from tools.x.rate_limit import RateLimiter


@dataclass
class XToolContext:
    client: XClient
    limiter: RateLimiter


def create_context() -> XToolContext:
    """Build the client and rate limiter from environment configuration."""
    return XToolContext(
        client=XClient(config.get_credentials(), timeout=config.get_api_timeout()),
        limiter=RateLimiter(
            cooldown=config.get_rate_limit_cooldown(),
            buffer=config.get_rate_limit_buffer(),
        ),
    )
