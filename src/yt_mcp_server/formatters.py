"""
Response formatters - reshape raw YouTube Data API items into the
simplified projections returned to MCP clients.

Output keys are camelCase: they are wire names, read by the calling agent.
"""

import math
from typing import Any, Optional

DEFAULT_MAX_RESULTS = 10
MIN_MAX_RESULTS = 1
MAX_MAX_RESULTS = 50

THUMBNAIL_PREFERENCE = ("high", "medium", "default")


def video_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"


def channel_url(channel_id: str) -> str:
    return f"https://www.youtube.com/channel/{channel_id}"


def clamp_max_results(value: Any) -> int:
    """Clamp a requested page size to 1-50; absent, falsy or NaN means 10."""
    if not value or (isinstance(value, float) and math.isnan(value)):
        return DEFAULT_MAX_RESULTS
    return int(max(MIN_MAX_RESULTS, min(value, MAX_MAX_RESULTS)))


def best_thumbnail(thumbnails: Optional[dict]) -> Optional[str]:
    """Return the URL of the best available thumbnail, or None."""
    for key in THUMBNAIL_PREFERENCE:
        thumbnail = (thumbnails or {}).get(key)
        if thumbnail:
            return thumbnail.get("url")
    return None


def format_video_search_item(item: dict) -> dict:
    snippet = item.get("snippet", {})
    video_id = item.get("id", {}).get("videoId")
    return {
        "title": snippet.get("title"),
        "id": video_id,
        "url": video_url(video_id),
        "channelTitle": snippet.get("channelTitle"),
        "publishedAt": snippet.get("publishedAt"),
        "description": snippet.get("description"),
        "thumbnail": best_thumbnail(snippet.get("thumbnails")),
    }


def format_channel_search_item(item: dict) -> dict:
    snippet = item.get("snippet", {})
    channel_id = item.get("id", {}).get("channelId")
    return {
        "title": snippet.get("title"),
        "id": channel_id,
        "url": channel_url(channel_id),
        "publishedAt": snippet.get("publishedAt"),
        "description": snippet.get("description"),
        "thumbnail": best_thumbnail(snippet.get("thumbnails")),
    }


def format_video_detail(item: dict) -> dict:
    """
    Project a `videos` resource (snippet + statistics).

    Statistics are passed through as the upstream sends them; the API
    encodes counts as strings and omits the ones a video has hidden.
    """
    snippet = item.get("snippet", {})
    stats = item.get("statistics", {})
    video_id = item.get("id")
    channel_id = snippet.get("channelId")
    return {
        "title": snippet.get("title"),
        "id": video_id,
        "url": video_url(video_id),
        "channelTitle": snippet.get("channelTitle"),
        "channelId": channel_id,
        "channelUrl": channel_url(channel_id),
        "publishedAt": snippet.get("publishedAt"),
        "description": snippet.get("description"),
        "tags": list(snippet.get("tags") or []),
        "viewCount": stats.get("viewCount"),
        "likeCount": stats.get("likeCount"),
        "commentCount": stats.get("commentCount"),
        "thumbnail": best_thumbnail(snippet.get("thumbnails")),
    }


def format_channel_detail(item: dict) -> dict:
    """Project a `channels` resource (snippet + statistics)."""
    snippet = item.get("snippet", {})
    stats = item.get("statistics", {})
    channel_id = item.get("id")
    return {
        "title": snippet.get("title"),
        "id": channel_id,
        "url": channel_url(channel_id),
        "customUrl": snippet.get("customUrl") or None,
        "publishedAt": snippet.get("publishedAt"),
        "description": snippet.get("description"),
        "country": snippet.get("country"),
        "subscriberCount": stats.get("subscriberCount"),
        "viewCount": stats.get("viewCount"),
        "videoCount": stats.get("videoCount"),
        "thumbnail": best_thumbnail(snippet.get("thumbnails")),
    }


def page_context(data: dict) -> dict:
    """Pagination metadata, copied through untouched. Absent tokens stay absent."""
    context = {"pageInfo": data.get("pageInfo")}
    for key in ("nextPageToken", "prevPageToken"):
        if key in data:
            context[key] = data[key]
    return context
