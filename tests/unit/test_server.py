"""Tests for MCP server wiring."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from mcp import types
from mcp.shared.exceptions import McpError
from starlette.applications import Starlette

from server import SERVER_NAME, create_http_app, create_server
from tools.x.context import XToolContext, create_context
from tools.x.rate_limit import RateLimiter


def _call_request(name: str, arguments: dict) -> types.CallToolRequest:
    return types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )


@pytest.fixture
def context() -> XToolContext:
    client = MagicMock()
    client.delete_by_id = AsyncMock(return_value={"data": {"deleted": True}})
    return XToolContext(client=client, limiter=RateLimiter(sleep=AsyncMock()))


class TestCreateServer:
    def test_server_name(self, context) -> None:
        assert create_server(context).name == SERVER_NAME

    async def test_lists_x_tools(self, context) -> None:
        app = create_server(context)
        handler = app.request_handlers[types.ListToolsRequest]

        result = await handler(types.ListToolsRequest(method="tools/list"))

        names = [tool.name for tool in result.root.tools]
        assert names == ["get_home_timeline", "create_tweet", "reply_to_tweet", "delete_tweet"]

    async def test_tool_call_returns_content(self, context) -> None:
        handler = create_server(context).request_handlers[types.CallToolRequest]

        result = await handler(_call_request("delete_tweet", {"tweet_id": "1"}))

        assert not result.root.isError
        assert json.loads(result.root.content[0].text) == {"deleted": True}

    async def test_unknown_tool_raises_method_not_found(self, context) -> None:
        handler = create_server(context).request_handlers[types.CallToolRequest]

        with pytest.raises(McpError) as exc_info:
            await handler(_call_request("follow_user", {}))

        assert exc_info.value.error.code == types.METHOD_NOT_FOUND
        assert exc_info.value.error.message == "Unknown tool: follow_user"

    async def test_invalid_arguments_raise_invalid_request(self, context) -> None:
        handler = create_server(context).request_handlers[types.CallToolRequest]

        with pytest.raises(McpError) as exc_info:
            await handler(_call_request("delete_tweet", {}))

        assert exc_info.value.error.code == types.INVALID_REQUEST
        context.client.delete_by_id.assert_not_awaited()

    def test_http_app_mounts_mcp(self, context) -> None:
        http_app = create_http_app(create_server(context))

        assert isinstance(http_app, Starlette)
        assert [route.path for route in http_app.routes] == ["/mcp"]


class TestCreateContext:
    def test_uses_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("X_RATE_LIMIT_COOLDOWN_SECONDS", "60")
        monkeypatch.setenv("X_RATE_LIMIT_BUFFER_SECONDS", "2")

        context = create_context()

        assert context.limiter.cooldown == 60
        assert context.limiter.buffer == 2
        assert all(context.limiter.reset_at(group) == 0 for group in ("home", "tweet", "reply", "delete"))

    def test_contexts_are_isolated(self) -> None:
        first, second = create_context(), create_context()
        first.limiter.resets["tweet"] = 123.0

        assert second.limiter.reset_at("tweet") == 0
