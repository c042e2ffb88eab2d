"""
Per-endpoint rate limiting for X API calls.

The free tier grants a small fixed quota per 15-minute window for each
endpoint category, and the remaining quota is not observed locally. Every
successful call therefore blocks its group for a full cooldown window, and
a 429 from the API does the same before being reported to the caller.
"""

import asyncio
import time
from typing import Awaitable, Callable, TypeVar

import structlog

from tools.x.exceptions import RateLimitError

logger = structlog.get_logger()

T = TypeVar("T")

GROUPS = ("home", "tweet", "reply", "delete")

# Remote status code for "too many requests"
TOO_MANY_REQUESTS = 429


class RateLimiter:
    """Serializes and throttles calls per endpoint group.

    ``resets`` maps each group to the epoch second before which the group
    should not be called again (0 when unset). A per-group lock keeps at most
    one call in flight, so a queued call only computes its wait after the
    previous call has pushed the reset forward.
    """

    def __init__(
        self,
        cooldown: float = 15 * 60,
        buffer: float = 1.0,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.cooldown = cooldown
        self.buffer = buffer
        self._clock = clock
        self._sleep = sleep
        self.resets: dict[str, float] = {group: 0.0 for group in GROUPS}
        self._locks: dict[str, asyncio.Lock] = {group: asyncio.Lock() for group in GROUPS}

    @property
    def retry_minutes(self) -> int:
        return max(1, round(self.cooldown / 60))

    def reset_at(self, group: str) -> float:
        self._check_group(group)
        return self.resets[group]

    async def throttle(self, group: str, operation: Callable[[], Awaitable[T]]) -> T:
        """Run ``operation`` once ``group`` is usable, then start its cooldown.

        Raises:
            RateLimitError: If the API answered with 429.
            ValueError: If ``group`` is not a known endpoint group.
        """
        self._check_group(group)

        async with self._locks[group]:
            now = self._clock()
            reset = self.resets[group]
            if now < reset:
                wait = reset - now + self.buffer
                logger.info("Waiting for rate limit window", group=group, seconds=round(wait, 1))
                await self._sleep(wait)

            try:
                result = await operation()
            except Exception as e:
                if getattr(e, "code", None) == TOO_MANY_REQUESTS:
                    self._push_reset(group)
                    logger.warning("Rate limit hit", group=group)
                    raise RateLimitError(group, self.retry_minutes) from e
                raise

            self._push_reset(group)
            return result

    def _push_reset(self, group: str) -> None:
        self.resets[group] = max(self.resets[group], self._clock() + self.cooldown)

    @staticmethod
    def _check_group(group: str) -> None:
        if group not in GROUPS:
            raise ValueError(f"Unknown rate limit group: {group}")
