"""
YouTube Data API v3 client - search, videos, and channels endpoints.

Every request carries the static API key as the `key` query parameter.
Responses are returned as the raw JSON the upstream API sends back;
shaping them is left to the formatters module.
"""

import logging
from typing import Any, Optional

import requests
import urllib3

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.googleapis.com/youtube/v3"

ENDPOINT_SEARCH = "search"
ENDPOINT_VIDEOS = "videos"
ENDPOINT_CHANNELS = "channels"

PART_SEARCH = "snippet"
PART_VIDEOS = "snippet,statistics"
PART_CHANNELS = "snippet,statistics"


class YouTubeAPIError(Exception):
    """Network or HTTP failure while talking to the YouTube Data API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class YouTubeAPI:
    """
    YouTube Data API v3 client.

    Holds a single requests session; nothing on it changes after
    construction. No retries are configured.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        verify_ssl: bool = True,
    ):
        """
        Initialize YouTube API client.

        Args:
            api_key: YouTube Data API key
            base_url: API root, without trailing slash
            timeout: Seconds to wait for the upstream before giving up (None waits forever)
            verify_ssl: Verify TLS certificates (disable for intercepting proxies)
        """
        if not api_key:
            raise ValueError("YouTube API key required.")

        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self._session = None

    @property
    def session(self) -> requests.Session:
        """Lazy initialization of requests session."""
        if self._session is None:
            self._session = requests.Session()
            self._session.params = {"key": self.api_key}
            if not self.verify_ssl:
                urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
                self._session.verify = False
        return self._session

    def _request(self, endpoint: str, params: dict[str, Any]) -> dict:
        """
        GET an endpoint and decode its JSON body.

        Raises:
            YouTubeAPIError: On connection failures, non-2xx responses and
                undecodable bodies (requests raises its JSONDecodeError as a
                RequestException). When the upstream sends a structured
                error, its `error.message` becomes the exception message.
        """
        url = f"{self.base_url}/{endpoint}"
        logger.debug("GET %s %s", url, params)

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise YouTubeAPIError(_upstream_message(e), status_code=status) from e
        except requests.RequestException as e:
            raise YouTubeAPIError(str(e)) from e

    def search(
        self,
        query: str,
        result_type: str,
        max_results: int,
        page_token: Optional[str] = None,
    ) -> dict:
        """
        Search for videos or channels.

        Args:
            query: Search query
            result_type: "video" or "channel"
            max_results: Number of results (already clamped to 1-50)
            page_token: Page token from a previous response
        """
        params = {
            "part": PART_SEARCH,
            "q": query,
            "type": result_type,
            "maxResults": max_results,
        }

        if page_token:
            params["pageToken"] = page_token

        return self._request(ENDPOINT_SEARCH, params)

    def get_videos(self, video_id: str) -> dict:
        """Look up a video by ID."""
        return self._request(ENDPOINT_VIDEOS, {"part": PART_VIDEOS, "id": video_id})

    def get_channels(self, channel_id: str) -> dict:
        """Look up a channel by ID (starts with UC)."""
        return self._request(ENDPOINT_CHANNELS, {"part": PART_CHANNELS, "id": channel_id})

    def most_popular(self, max_results: int) -> dict:
        """Fetch the most popular videos chart."""
        params = {
            "part": PART_VIDEOS,
            "chart": "mostPopular",
            "maxResults": max_results,
        }
        return self._request(ENDPOINT_VIDEOS, params)


def _upstream_message(error: requests.HTTPError) -> str:
    response = error.response
    if response is not None:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            upstream = body.get("error")
            if isinstance(upstream, dict) and upstream.get("message"):
                return upstream["message"]
    return str(error)
