import pytest

from yt_mcp_server.url_parser import (
    parse_youtube_url,
    resolve_channel_id,
    resolve_video_id,
)


class TestParseYouTubeURL:
    @pytest.mark.parametrize("url", [
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ&list=PL123",
        "https://www.youtube.com/shorts/dQw4w9WgXcQ",
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "youtube.com/watch?v=dQw4w9WgXcQ",
    ])
    def test_video_urls(self, url):
        parsed = parse_youtube_url(url)
        assert parsed.video_id == "dQw4w9WgXcQ"
        assert parsed.channel_id is None

    def test_channel_url(self):
        parsed = parse_youtube_url("https://www.youtube.com/channel/UCYO_jab_esuFRV4b17AJtAw")
        assert parsed.channel_id == "UCYO_jab_esuFRV4b17AJtAw"

    def test_handle_url_rejected(self):
        with pytest.raises(ValueError):
            parse_youtube_url("https://www.youtube.com/@3blue1brown")

    def test_not_youtube(self):
        with pytest.raises(ValueError):
            parse_youtube_url("https://vimeo.com/12345")

    def test_unknown_path(self):
        with pytest.raises(ValueError):
            parse_youtube_url("https://www.youtube.com/feed/trending")


class TestResolve:
    def test_plain_video_id_unchanged(self):
        assert resolve_video_id("dQw4w9WgXcQ") == "dQw4w9WgXcQ"

    def test_video_url(self):
        assert resolve_video_id(" https://youtu.be/dQw4w9WgXcQ ") == "dQw4w9WgXcQ"

    def test_unparseable_url_passes_through(self):
        assert resolve_video_id("https://www.youtube.com/feed") == "https://www.youtube.com/feed"

    def test_channel_url(self):
        assert resolve_channel_id("https://www.youtube.com/channel/UC123") == "UC123"

    def test_handle_passes_through(self):
        url = "https://www.youtube.com/@3blue1brown"
        assert resolve_channel_id(url) == url
