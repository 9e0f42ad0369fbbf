"""
Static catalog of the resources and tools this server exposes.
"""

from mcp.types import Resource, Tool

POPULAR_VIDEOS_URI = "youtube://popular/videos"

SEARCH_VIDEOS = "search_videos"
GET_VIDEO_DETAILS = "get_video_details"
GET_CHANNEL_DETAILS = "get_channel_details"
SEARCH_CHANNELS = "search_channels"

_MAX_RESULTS_SCHEMA = {
    "type": "number",
    "description": "Maximum number of results to return (1-50, default 10)",
    "minimum": 1,
    "maximum": 50,
}

_PAGE_TOKEN_SCHEMA = {
    "type": "string",
    "description": "Page token from a previous response (nextPageToken or prevPageToken)",
}


def list_resources() -> list[Resource]:
    return [
        Resource(
            uri=POPULAR_VIDEOS_URI,
            name="Popular Videos",
            description="Most popular videos on YouTube right now",
            mimeType="application/json",
        ),
    ]


def list_tools() -> list[Tool]:
    return [
        Tool(
            name=SEARCH_VIDEOS,
            description="Search YouTube videos by keyword. Returns title, URL, channel, publish date, description and thumbnail for each match, plus page tokens.",
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "Search terms",
                    },
                    "maxResults": _MAX_RESULTS_SCHEMA,
                    "pageToken": _PAGE_TOKEN_SCHEMA,
                },
                "required": ["query"],
            },
        ),
        Tool(
            name=GET_VIDEO_DETAILS,
            description="Get details for a single YouTube video: snippet, tags and view/like/comment counts.",
            inputSchema={
                "type": "object",
                "properties": {
                    "videoId": {
                        "type": "string",
                        "description": "YouTube video ID (a watch or youtu.be URL also works)",
                    },
                },
                "required": ["videoId"],
            },
        ),
        Tool(
            name=GET_CHANNEL_DETAILS,
            description="Get details for a YouTube channel: snippet, country and subscriber/view/video counts.",
            inputSchema={
                "type": "object",
                "properties": {
                    "channelId": {
                        "type": "string",
                        "description": "YouTube channel ID, starts with UC (a /channel/ URL also works)",
                    },
                },
                "required": ["channelId"],
            },
        ),
        Tool(
            name=SEARCH_CHANNELS,
            description="Search YouTube channels by keyword. Returns title, URL, publish date, description and thumbnail for each match, plus page tokens.",
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "Search terms",
                    },
                    "maxResults": _MAX_RESULTS_SCHEMA,
                    "pageToken": _PAGE_TOKEN_SCHEMA,
                },
                "required": ["query"],
            },
        ),
    ]
