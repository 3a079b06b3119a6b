"""Tests for URL and language-code validation."""

import pytest

from youtube_caption_fetcher.exceptions import (
    CaptionFetcherError,
    InvalidUrlError,
    InvalidLanguageCodeError,
)
from youtube_caption_fetcher.validation import validate_video_url, validate_language_code


class TestValidateVideoUrl:
    @pytest.mark.parametrize("url", [
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "http://youtube.com/watch?v=dQw4w9WgXcQ",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=120",
    ])
    def test_accepts_watch_urls(self, url):
        assert validate_video_url(url) == url

    @pytest.mark.parametrize("url", [
        "",
        "not a url",
        "https://youtu.be/dQw4w9WgXcQ",
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "https://m.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://example.com/watch?v=dQw4w9WgXcQ",
        "ftp://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://www.youtube.com/watch?list=abc",
        "https://www.youtube.com/watch?v=abc def",
        "www.youtube.com/watch?v=dQw4w9WgXcQ",
    ])
    def test_rejects_other_urls(self, url):
        with pytest.raises(InvalidUrlError):
            validate_video_url(url)

    def test_error_carries_url(self):
        with pytest.raises(InvalidUrlError) as exc_info:
            validate_video_url("https://youtu.be/abc")
        assert exc_info.value.url == "https://youtu.be/abc"
        assert isinstance(exc_info.value, CaptionFetcherError)

    def test_rejects_non_string(self):
        with pytest.raises(InvalidUrlError):
            validate_video_url(None)


class TestValidateLanguageCode:
    @pytest.mark.parametrize("code,expected", [
        ("en", "en"),
        ("FR", "fr"),
        ("jA", "ja"),
    ])
    def test_normalizes_to_lowercase(self, code, expected):
        assert validate_language_code(code) == expected

    @pytest.mark.parametrize("code", [
        "", "e", "eng", "en-US", "e1", "12", " en", "en\n",
        "\u017fa",  # LATIN SMALL LETTER LONG S
        "\u212aa",  # KELVIN SIGN
    ])
    def test_rejects_malformed_codes(self, code):
        with pytest.raises(InvalidLanguageCodeError) as exc_info:
            validate_language_code(code)
        assert exc_info.value.language_code == code
