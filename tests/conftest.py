"""Shared fixtures: canned watch pages, timed text and a fake HTTP client."""

import json

import pytest

from youtube_caption_fetcher import YouTubeCaptionFetcher, Settings
from youtube_caption_fetcher.exceptions import NetworkError


WATCH_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
EN_CAPTION_URL = "https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=en"
FR_CAPTION_URL = "https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=fr"

TIMED_TEXT_XML = (
    '<?xml version="1.0" encoding="utf-8" ?>'
    '<transcript>'
    '<text start="0.08" dur="2.5">Hello &amp; welcome</text>'
    '<text start="2.580" dur="3.1">it&#39;s a test</text>'
    '</transcript>'
)


def make_watch_page(tracks=None, title="My Video - YouTube"):
    """Build a minimal watch page embedding a caption manifest."""
    parts = ["<!DOCTYPE html><html><head>"]
    if title is not None:
        parts.append(f"<title>{title}</title>")
    parts.append("</head><body><script>var ytInitialPlayerResponse = {")
    if tracks is not None:
        parts.append(
            '"captions":{"playerCaptionsTracklistRenderer":{"captionTracks":'
            + json.dumps(tracks, separators=(",", ":"))
            + ',"audioTracks":[]}}'
        )
    parts.append("};</script></body></html>")
    return "".join(parts)


DEFAULT_TRACKS = [
    {"baseUrl": EN_CAPTION_URL, "name": {"simpleText": "English"}, "languageCode": "en"},
    {"baseUrl": FR_CAPTION_URL, "name": {"simpleText": "French"}, "languageCode": "fr", "kind": "asr"},
]


class FakeHttpClient:
    """Serves canned bodies by URL and records every request."""

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []
        self.closed = False

    def get_text(self, url):
        self.calls.append(url)
        body = self.responses.get(url)
        if body is None:
            raise NetworkError(f"HTTP 404 while fetching {url}", url=url)
        if isinstance(body, Exception):
            raise body
        return body

    def get_content(self, url):
        body = self.get_text(url)
        return body.encode("utf-8")

    def close(self):
        self.closed = True


@pytest.fixture
def watch_page():
    return make_watch_page(DEFAULT_TRACKS)


@pytest.fixture
def fake_http(watch_page):
    return FakeHttpClient({
        WATCH_URL: watch_page,
        EN_CAPTION_URL: TIMED_TEXT_XML,
        FR_CAPTION_URL: '<transcript><text start="1.0">Bonjour</text></transcript>',
    })


@pytest.fixture
def fetcher(fake_http):
    return YouTubeCaptionFetcher("en", settings=Settings(user_agent="test-agent"), http_client=fake_http)
