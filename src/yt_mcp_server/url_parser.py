"""
YouTube URL Parser - Let lookup tools accept a URL where an ID is expected.
"""

import re
from urllib.parse import urlparse, parse_qs
from dataclasses import dataclass
from typing import Optional

VIDEO_ID_PATTERN = r'[a-zA-Z0-9_-]{11}'


@dataclass
class YouTubeURL:
    """Parsed YouTube URL with extracted components."""

    original_url: str
    video_id: Optional[str] = None
    channel_id: Optional[str] = None


def is_youtube_url(value: str) -> bool:
    return any(domain in value.lower() for domain in ['youtube.com', 'youtu.be'])


def parse_youtube_url(url: str) -> YouTubeURL:
    """
    Parse a YouTube video or channel-ID URL.

    Handle URLs (/@name) carry no channel ID and are rejected.

    Supported formats:
    - https://www.youtube.com/watch?v=VIDEO_ID
    - https://youtu.be/VIDEO_ID
    - https://www.youtube.com/shorts/VIDEO_ID
    - https://www.youtube.com/embed/VIDEO_ID
    - https://www.youtube.com/channel/CHANNEL_ID

    Raises:
        ValueError: If URL is not a YouTube video or channel URL
    """
    url = url.strip()

    if not is_youtube_url(url):
        raise ValueError(f"Not a YouTube URL: {url}")

    # Handle youtu.be short URLs
    if 'youtu.be/' in url:
        match = re.search(rf'youtu\.be/({VIDEO_ID_PATTERN})', url)
        if match:
            return YouTubeURL(original_url=url, video_id=match.group(1))
        raise ValueError(f"Could not find a video ID in: {url}")

    parsed = urlparse(url if '://' in url else f"https://{url}")
    query = parse_qs(parsed.query)
    path = parsed.path

    if 'v' in query:
        return YouTubeURL(original_url=url, video_id=query['v'][0])

    match = re.search(rf'/(?:shorts|embed|live)/({VIDEO_ID_PATTERN})', path)
    if match:
        return YouTubeURL(original_url=url, video_id=match.group(1))

    match = re.search(r'/channel/([^/?]+)', path)
    if match:
        return YouTubeURL(original_url=url, channel_id=match.group(1))

    raise ValueError(f"Could not determine URL type: {url}")


def resolve_video_id(value: str) -> str:
    """Return the video ID in a URL, or the value itself when it is not a URL."""
    value = value.strip()
    if not is_youtube_url(value):
        return value
    try:
        parsed = parse_youtube_url(value)
    except ValueError:
        return value
    return parsed.video_id or value


def resolve_channel_id(value: str) -> str:
    """
    Return the channel ID in a /channel/ URL, or the value itself.

    Handle URLs (/@name) fail to parse and are passed through as-is, so
    the upstream lookup reports them as not found.
    """
    value = value.strip()
    if not is_youtube_url(value):
        return value
    try:
        parsed = parse_youtube_url(value)
    except ValueError:
        return value
    return parsed.channel_id or value
