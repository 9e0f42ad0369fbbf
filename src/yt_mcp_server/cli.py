"""
YouTube MCP CLI - Run the server's tools from a terminal, without an MCP client.

Usage:
    yt-mcp search "python asyncio" --max-results 5
    yt-mcp search "python asyncio" --page-token CAUQAA
    yt-mcp channels "3blue1brown"
    yt-mcp video dQw4w9WgXcQ
    yt-mcp video https://youtu.be/dQw4w9WgXcQ
    yt-mcp channel UCYO_jab_esuFRV4b17AJtAw
    yt-mcp popular
"""

import argparse
import asyncio
import sys
from typing import Optional

from mcp.shared.exceptions import McpError

from yt_mcp_server import registry
from yt_mcp_server.config import ConfigurationError, ServerConfig
from yt_mcp_server.server import YouTubeMCPServer, configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yt-mcp",
        description="Query the YouTube Data API through the yt-mcp-server tools",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, help_text in (
        ("search", "Search videos"),
        ("channels", "Search channels"),
    ):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument("query", help="Search terms")
        sub.add_argument(
            "--max-results",
            "-n",
            type=int,
            default=None,
            help="Number of results, 1-50 (default: 10)",
        )
        sub.add_argument(
            "--page-token",
            "-p",
            type=str,
            default=None,
            help="Page token from a previous search",
        )

    video = subparsers.add_parser("video", help="Video details")
    video.add_argument("video_id", help="Video ID or URL")

    channel = subparsers.add_parser("channel", help="Channel details")
    channel.add_argument("channel_id", help="Channel ID or /channel/ URL")

    subparsers.add_parser("popular", help="Most popular videos right now")

    return parser


def tool_call_for(args: argparse.Namespace) -> tuple[str, dict]:
    """Map parsed arguments to a (tool name, tool arguments) pair."""
    if args.command in ("search", "channels"):
        tool = registry.SEARCH_VIDEOS if args.command == "search" else registry.SEARCH_CHANNELS
        arguments = {"query": args.query}
        if args.max_results is not None:
            arguments["maxResults"] = args.max_results
        if args.page_token:
            arguments["pageToken"] = args.page_token
        return tool, arguments
    if args.command == "video":
        return registry.GET_VIDEO_DETAILS, {"videoId": args.video_id}
    if args.command == "channel":
        return registry.GET_CHANNEL_DETAILS, {"channelId": args.channel_id}
    raise ValueError(f"Not a tool command: {args.command}")


async def run_command(server: YouTubeMCPServer, args: argparse.Namespace) -> int:
    """Execute one command, print its JSON text and return the exit status."""
    try:
        if args.command == "popular":
            print(await server.read_resource(registry.POPULAR_VIDEOS_URI))
            return 0

        tool, arguments = tool_call_for(args)
        result = await server.call_tool(tool, arguments)
    except McpError as e:
        print(f"Error: {e.error.message}", file=sys.stderr)
        return 1

    text = "\n".join(block.text for block in result.content if block.type == "text")
    if result.isError:
        print(text, file=sys.stderr)
        return 1
    print(text)
    return 0


def main(argv: Optional[list[str]] = None):
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = ServerConfig.from_env()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(config.log_level)
    server = YouTubeMCPServer(config)
    sys.exit(asyncio.run(run_command(server, args)))


if __name__ == "__main__":
    main()
