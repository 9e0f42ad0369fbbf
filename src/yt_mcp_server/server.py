"""
YouTube MCP Server - Main server implementation.

Exposes YouTube Data API search and lookup tools, plus a popular-videos
resource, via the MCP protocol over stdio.
"""

import asyncio
import json
import logging
import sys
from typing import Any, Awaitable, Callable, Optional

from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    CallToolRequest,
    CallToolResult,
    ErrorData,
    Resource,
    ServerResult,
    TextContent,
    Tool,
)

from yt_mcp_server import __version__
from yt_mcp_server import registry
from yt_mcp_server.config import DEFAULT_LOG_LEVEL, ConfigurationError, ServerConfig
from yt_mcp_server.formatters import (
    DEFAULT_MAX_RESULTS,
    clamp_max_results,
    format_channel_detail,
    format_channel_search_item,
    format_video_detail,
    format_video_search_item,
    page_context,
)
from yt_mcp_server.url_parser import resolve_channel_id, resolve_video_id
from yt_mcp_server.youtube_api import YouTubeAPI, YouTubeAPIError

logger = logging.getLogger(__name__)

SERVER_NAME = "yt-mcp-server"

# JSON-RPC server-error range; MCP uses it for "resource not found".
NOT_FOUND = -32002

POPULAR_MAX_RESULTS = DEFAULT_MAX_RESULTS

ToolHandler = Callable[[Any], Awaitable[CallToolResult]]


class YouTubeMCPServer:
    """YouTube MCP Server with search and lookup tools."""

    def __init__(self, config: ServerConfig, api: Optional[YouTubeAPI] = None):
        self.config = config
        self.api = api or YouTubeAPI(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            verify_ssl=config.verify_ssl,
        )

        self.tool_handlers: dict[str, ToolHandler] = {
            registry.SEARCH_VIDEOS: self._search_videos,
            registry.GET_VIDEO_DETAILS: self._get_video_details,
            registry.GET_CHANNEL_DETAILS: self._get_channel_details,
            registry.SEARCH_CHANNELS: self._search_channels,
        }

        # MCP Server
        self.server = Server(SERVER_NAME, version=__version__)
        self._setup_handlers()

    def _setup_handlers(self):
        """Register the four MCP request handlers."""

        @self.server.list_resources()
        async def list_resources() -> list[Resource]:
            return registry.list_resources()

        @self.server.read_resource()
        async def read_resource(uri) -> list[ReadResourceContents]:
            text = await self.read_resource(str(uri))
            return [ReadResourceContents(content=text, mime_type="application/json")]

        @self.server.list_tools()
        async def list_tools() -> list[Tool]:
            return registry.list_tools()

        # Registered directly: the call_tool() decorator turns every
        # exception into an isError result, and validation, routing and
        # not-found failures must reach the client as protocol errors.
        self.server.request_handlers[CallToolRequest] = self._handle_call_tool

    async def _handle_call_tool(self, req: CallToolRequest) -> ServerResult:
        result = await self.call_tool(req.params.name, req.params.arguments)
        return ServerResult(result)

    async def read_resource(self, uri: str) -> str:
        """
        Read a resource by URI and return its JSON text.

        Raises:
            McpError: INVALID_REQUEST for an unknown URI, INTERNAL_ERROR when
                the upstream call fails.
        """
        if uri != registry.POPULAR_VIDEOS_URI:
            raise McpError(ErrorData(code=INVALID_REQUEST, message=f"Unknown resource: {uri}"))

        try:
            data = self.api.most_popular(POPULAR_MAX_RESULTS)
        except YouTubeAPIError as e:
            logger.warning("Reading %s failed: %s", uri, e.message)
            raise McpError(ErrorData(
                code=INTERNAL_ERROR,
                message=f"YouTube API error: {e.message}",
            )) from e

        response = {
            "items": [format_video_detail(item) for item in data.get("items", [])],
            "pageInfo": data.get("pageInfo"),
        }
        return json.dumps(response, indent=2, ensure_ascii=False)

    async def call_tool(self, name: str, arguments: Any) -> CallToolResult:
        """
        Route a tool call by name.

        Upstream failures come back as an isError result; everything else
        (unknown tool, bad arguments, not found) is raised as McpError.
        """
        handler = self.tool_handlers.get(name)
        if handler is None:
            raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))

        logger.debug("call_tool %s %s", name, arguments)
        try:
            return await handler(arguments)
        except YouTubeAPIError as e:
            logger.warning("Tool %s failed upstream: %s", name, e.message)
            return CallToolResult(
                content=[TextContent(type="text", text=f"YouTube API error: {e.message}")],
                isError=True,
            )

    async def _search_videos(self, args: Any) -> CallToolResult:
        """Handle search_videos tool call."""
        query, max_results, page_token = _search_arguments(registry.SEARCH_VIDEOS, args)
        data = self.api.search(query, "video", max_results, page_token)

        response = {
            "items": [format_video_search_item(item) for item in data.get("items", [])],
            **page_context(data),
        }
        return _text_result(response)

    async def _search_channels(self, args: Any) -> CallToolResult:
        """Handle search_channels tool call."""
        query, max_results, page_token = _search_arguments(registry.SEARCH_CHANNELS, args)
        data = self.api.search(query, "channel", max_results, page_token)

        response = {
            "items": [format_channel_search_item(item) for item in data.get("items", [])],
            **page_context(data),
        }
        return _text_result(response)

    async def _get_video_details(self, args: Any) -> CallToolResult:
        """Handle get_video_details tool call."""
        video_id = _required_string(registry.GET_VIDEO_DETAILS, args, "videoId")
        data = self.api.get_videos(resolve_video_id(video_id))

        items = data.get("items") or []
        if not items:
            raise McpError(ErrorData(code=NOT_FOUND, message=f"Video not found: {video_id}"))

        return _text_result(format_video_detail(items[0]))

    async def _get_channel_details(self, args: Any) -> CallToolResult:
        """Handle get_channel_details tool call."""
        channel_id = _required_string(registry.GET_CHANNEL_DETAILS, args, "channelId")
        data = self.api.get_channels(resolve_channel_id(channel_id))

        items = data.get("items") or []
        if not items:
            raise McpError(ErrorData(code=NOT_FOUND, message=f"Channel not found: {channel_id}"))

        return _text_result(format_channel_detail(items[0]))

    async def run(self):
        """Run the MCP server."""
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )


def _text_result(payload: Any) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=json.dumps(payload, indent=2, ensure_ascii=False))]
    )


def _invalid_params(tool: str, detail: str) -> McpError:
    return McpError(ErrorData(code=INVALID_PARAMS, message=f"Invalid {tool} arguments: {detail}"))


def _required_string(tool: str, args: Any, key: str) -> str:
    if not isinstance(args, dict):
        raise _invalid_params(tool, "expected an object")
    value = args.get(key)
    if not isinstance(value, str):
        raise _invalid_params(tool, f"'{key}' must be a string")
    return value


def _search_arguments(tool: str, args: Any) -> tuple[str, int, Optional[str]]:
    query = _required_string(tool, args, "query")

    max_results = args.get("maxResults")
    if max_results is not None and (
        isinstance(max_results, bool) or not isinstance(max_results, (int, float))
    ):
        raise _invalid_params(tool, "'maxResults' must be a number")

    page_token = args.get("pageToken")
    if page_token is not None and not isinstance(page_token, str):
        raise _invalid_params(tool, "'pageToken' must be a string")

    return query, clamp_max_results(max_results), page_token


def configure_logging(level: str = DEFAULT_LOG_LEVEL):
    """Log to stderr; stdout carries the stdio transport."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )


def main():
    """Main entry point."""
    try:
        config = ServerConfig.from_env()
    except ConfigurationError as e:
        configure_logging()
        logger.error("Configuration error: %s", e)
        sys.exit(1)

    configure_logging(config.log_level)

    # Create and run server
    server = YouTubeMCPServer(config)
    logger.info("Starting %s %s on stdio", SERVER_NAME, __version__)

    try:
        asyncio.run(server.run())
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
        sys.exit(0)
    except Exception:
        logger.exception("[MCP Error] server stopped")
        sys.exit(1)


if __name__ == "__main__":
    main()
