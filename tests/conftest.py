import pytest
from unittest.mock import MagicMock

from yt_mcp_server.config import ServerConfig
from yt_mcp_server.server import YouTubeMCPServer
from yt_mcp_server.youtube_api import YouTubeAPI


# --- Canned API responses ---

THUMBNAILS = {
    "default": {"url": "https://i.ytimg.com/vi/dQw4w9WgXcQ/default.jpg"},
    "medium": {"url": "https://i.ytimg.com/vi/dQw4w9WgXcQ/mqdefault.jpg"},
    "high": {"url": "https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg"},
}

SEARCH_VIDEOS_RESPONSE = {
    "kind": "youtube#searchListResponse",
    "nextPageToken": "CAoQAA",
    "regionCode": "US",
    "pageInfo": {"totalResults": 1000000, "resultsPerPage": 1},
    "items": [
        {
            "kind": "youtube#searchResult",
            "id": {"kind": "youtube#video", "videoId": "dQw4w9WgXcQ"},
            "snippet": {
                "publishedAt": "2009-10-25T06:57:33Z",
                "channelId": "UCuAXFkgsw1L7xaCfnd5JJOw",
                "title": "Rick Astley - Never Gonna Give You Up",
                "description": "The official video for Never Gonna Give You Up",
                "thumbnails": THUMBNAILS,
                "channelTitle": "Rick Astley",
            },
        },
    ],
}

SEARCH_CHANNELS_RESPONSE = {
    "kind": "youtube#searchListResponse",
    "nextPageToken": "CAUQAA",
    "prevPageToken": "CAUQAQ",
    "pageInfo": {"totalResults": 42, "resultsPerPage": 1},
    "items": [
        {
            "kind": "youtube#searchResult",
            "id": {"kind": "youtube#channel", "channelId": "UCYO_jab_esuFRV4b17AJtAw"},
            "snippet": {
                "publishedAt": "2015-03-03T23:11:55Z",
                "channelId": "UCYO_jab_esuFRV4b17AJtAw",
                "title": "3Blue1Brown",
                "description": "Animated math",
                "thumbnails": {"default": {"url": "https://yt3.ggpht.com/default.jpg"}},
                "channelTitle": "3Blue1Brown",
            },
        },
    ],
}

VIDEO_ITEM = {
    "kind": "youtube#video",
    "id": "dQw4w9WgXcQ",
    "snippet": {
        "publishedAt": "2009-10-25T06:57:33Z",
        "channelId": "UCuAXFkgsw1L7xaCfnd5JJOw",
        "title": "Rick Astley - Never Gonna Give You Up",
        "description": "The official video for Never Gonna Give You Up",
        "thumbnails": THUMBNAILS,
        "channelTitle": "Rick Astley",
        "tags": ["rick astley", "never gonna give you up"],
    },
    "statistics": {
        "viewCount": "1500000000",
        "likeCount": "17000000",
        "favoriteCount": "0",
        "commentCount": "2300000",
    },
}

VIDEOS_RESPONSE = {
    "kind": "youtube#videoListResponse",
    "pageInfo": {"totalResults": 1, "resultsPerPage": 1},
    "items": [VIDEO_ITEM],
}

CHANNEL_ITEM = {
    "kind": "youtube#channel",
    "id": "UCYO_jab_esuFRV4b17AJtAw",
    "snippet": {
        "title": "3Blue1Brown",
        "description": "Animated math",
        "customUrl": "@3blue1brown",
        "publishedAt": "2015-03-03T23:11:55Z",
        "thumbnails": {"medium": {"url": "https://yt3.ggpht.com/medium.jpg"}},
        "country": "US",
    },
    "statistics": {
        "viewCount": "600000000",
        "subscriberCount": "6500000",
        "hiddenSubscriberCount": False,
        "videoCount": "150",
    },
}

CHANNELS_RESPONSE = {
    "kind": "youtube#channelListResponse",
    "pageInfo": {"totalResults": 1, "resultsPerPage": 5},
    "items": [CHANNEL_ITEM],
}

EMPTY_LIST_RESPONSE = {
    "kind": "youtube#videoListResponse",
    "pageInfo": {"totalResults": 0, "resultsPerPage": 0},
    "items": [],
}

QUOTA_ERROR_BODY = {
    "error": {
        "code": 403,
        "message": "The request cannot be completed because you have exceeded your quota.",
        "errors": [{"reason": "quotaExceeded", "domain": "youtube.quota"}],
    }
}


@pytest.fixture
def config():
    return ServerConfig(api_key="test-key")


@pytest.fixture
def mock_api():
    """YouTubeAPI stand-in; each test sets the return values it needs."""
    return MagicMock(spec=YouTubeAPI)


@pytest.fixture
def yt_server(config, mock_api):
    return YouTubeMCPServer(config, api=mock_api)
