"""
X API client — async httpx wrapper with OAuth 1.0a request signing.

Tweets go through the v2 API; media goes through the v1.1 upload endpoint
(simple upload for images, chunked INIT/APPEND/FINALIZE/STATUS for video).
"""

import asyncio

import httpx
import structlog
from oauthlib.oauth1 import Client as OAuth1Client

from config import API_BASE, UPLOAD_BASE, UPLOAD_CHUNK_SIZE, Credentials
from tools.x.exceptions import XApiError

logger = structlog.get_logger()


class OAuth1Auth(httpx.Auth):
    """Sign each request with an OAuth 1.0a Authorization header.

    Query parameters are part of the signature; JSON and multipart bodies are not.
    """

    def __init__(self, credentials: Credentials) -> None:
        self._client = OAuth1Client(
            credentials.api_key,
            client_secret=credentials.api_secret,
            resource_owner_key=credentials.access_token,
            resource_owner_secret=credentials.access_secret,
        )

    def auth_flow(self, request: httpx.Request):
        _, headers, _ = self._client.sign(str(request.url), http_method=request.method)
        request.headers["Authorization"] = headers["Authorization"]
        yield request


def _error_message(resp: httpx.Response) -> str:
    """Pull a readable message out of an X API error response."""
    try:
        body = resp.json()
    except ValueError:
        return resp.text or f"HTTP {resp.status_code}"

    if isinstance(body, dict):
        if body.get("detail"):
            return str(body["detail"])
        if body.get("title"):
            return str(body["title"])
        errors = body.get("errors")
        if isinstance(errors, list) and errors:
            first = errors[0]
            if isinstance(first, dict) and first.get("message"):
                return str(first["message"])
        if body.get("error"):
            return str(body["error"])
    return resp.text or f"HTTP {resp.status_code}"


def _media_id(body: dict) -> str:
    """Get the media ID from an upload response."""
    media_id = body.get("media_id_string") if isinstance(body, dict) else None
    if not media_id:
        raise XApiError("Upload response did not include a media_id_string")
    return media_id


class XClient:
    """Thin async client over the X API endpoints used by the tools."""

    def __init__(
        self,
        credentials: Credentials,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._auth = OAuth1Auth(credentials)
        self._timeout = timeout
        self._transport = transport
        self._user_id: str | None = None

    async def _request(self, method: str, url: str, **kwargs) -> dict:
        """
        Make a signed request and return the parsed JSON body.

        Raises:
            XApiError: On an HTTP error status (carries the status code) or a non-JSON body.
            httpx.HTTPError: On connection errors.
        """
        async with httpx.AsyncClient(
            timeout=self._timeout, auth=self._auth, transport=self._transport
        ) as client:
            resp = await client.request(method, url, **kwargs)

        if resp.status_code >= 400:
            raise XApiError(_error_message(resp), code=resp.status_code)
        if resp.status_code == 204 or not resp.content:
            return {}
        try:
            return resp.json()
        except ValueError:
            raise XApiError(
                f"Malformed response from {resp.url.path}: {resp.text[:200]}",
                code=resp.status_code,
            ) from None

    async def get_me_id(self) -> str:
        """Get the authenticated user's ID (cached after the first call)."""
        if self._user_id is None:
            body = await self._request("GET", f"{API_BASE}/users/me")
            self._user_id = body["data"]["id"]
        return self._user_id

    async def fetch_home_timeline(self, **params) -> dict:
        """Fetch the reverse-chronological home timeline. List params are comma-joined."""
        user_id = await self.get_me_id()
        query = {
            key: ",".join(value) if isinstance(value, (list, tuple)) else value
            for key, value in params.items()
        }
        return await self._request(
            "GET",
            f"{API_BASE}/users/{user_id}/timelines/reverse_chronological",
            params=query,
        )

    async def post_text(self, text: str, reply_to: str | None = None) -> dict:
        payload = {"text": text}
        if reply_to:
            payload["reply"] = {"in_reply_to_tweet_id": reply_to}
        return await self._request("POST", f"{API_BASE}/tweets", json=payload)

    async def post_with_media(self, text: str, media_id: str, reply_to: str | None = None) -> dict:
        payload = {"text": text, "media": {"media_ids": [media_id]}}
        if reply_to:
            payload["reply"] = {"in_reply_to_tweet_id": reply_to}
        return await self._request("POST", f"{API_BASE}/tweets", json=payload)

    async def delete_by_id(self, tweet_id: str) -> dict:
        return await self._request("DELETE", f"{API_BASE}/tweets/{tweet_id}")

    async def upload_media(self, data: bytes, mime_type: str, long_video: bool = False) -> str:
        """Upload media and return its media ID string."""
        if mime_type.startswith("video/"):
            category = "amplify_video" if long_video else "tweet_video"
            return await self._chunked_upload(data, mime_type, category)

        category = "tweet_gif" if mime_type == "image/gif" else "tweet_image"
        body = await self._request(
            "POST",
            f"{UPLOAD_BASE}/media/upload.json",
            params={"media_category": category},
            files={"media": ("media", data, mime_type)},
        )
        return _media_id(body)

    async def _chunked_upload(self, data: bytes, mime_type: str, category: str) -> str:
        url = f"{UPLOAD_BASE}/media/upload.json"

        init = await self._request(
            "POST",
            url,
            params={
                "command": "INIT",
                "total_bytes": str(len(data)),
                "media_type": mime_type,
                "media_category": category,
            },
        )
        media_id = _media_id(init)

        for index, start in enumerate(range(0, len(data), UPLOAD_CHUNK_SIZE)):
            await self._request(
                "POST",
                url,
                data={"command": "APPEND", "media_id": media_id, "segment_index": str(index)},
                files={"media": ("chunk", data[start:start + UPLOAD_CHUNK_SIZE], "application/octet-stream")},
            )

        final = await self._request(
            "POST", url, params={"command": "FINALIZE", "media_id": media_id}
        )
        await self._wait_for_processing(media_id, final.get("processing_info"))
        return media_id

    async def _wait_for_processing(self, media_id: str, info: dict | None) -> None:
        """Poll STATUS until the uploaded media finishes server-side processing."""
        while info:
            state = info.get("state")
            if state == "succeeded":
                return
            if state == "failed":
                error = info.get("error") or {}
                raise XApiError(
                    error.get("message") or "Media processing failed",
                    code=error.get("code"),
                )

            delay = info.get("check_after_secs", 1)
            logger.debug("Waiting for media processing", media_id=media_id, state=state, seconds=delay)
            await asyncio.sleep(delay)

            status = await self._request(
                "GET",
                f"{UPLOAD_BASE}/media/upload.json",
                params={"command": "STATUS", "media_id": media_id},
            )
            info = status.get("processing_info")
