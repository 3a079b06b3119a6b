"""Tests for page-title extraction."""

import pytest

from youtube_caption_fetcher.exceptions import VideoTitleNotFoundError
from youtube_caption_fetcher.extractor.title import extract_title


class TestExtractTitle:
    def test_strips_site_suffix(self):
        assert extract_title("<title>My Video - YouTube</title>") == "My Video"

    def test_decodes_entities(self):
        html = "<html><title>Tom &amp; Jerry &#39;Best&#39; - YouTube</title></html>"
        assert extract_title(html) == "Tom & Jerry 'Best'"

    def test_trims_whitespace(self):
        assert extract_title("<title>  Spaced  </title>") == "Spaced"

    def test_suffix_only_removed_at_end(self):
        assert extract_title("<title>A - YouTube review</title>") == "A - YouTube review"

    def test_first_title_wins(self):
        html = "<title>First</title><title>Second</title>"
        assert extract_title(html) == "First"

    def test_custom_suffix(self):
        assert extract_title("<title>Clip | Site</title>", suffix=" | Site") == "Clip"

    def test_multiline_title(self):
        assert extract_title("<title>Line one\nline two - YouTube</title>") == "Line one\nline two"

    @pytest.mark.parametrize("html", ["", "<html><head></head></html>", "<title></title>"])
    def test_missing_title(self, html):
        with pytest.raises(VideoTitleNotFoundError):
            extract_title(html, url="https://www.youtube.com/watch?v=abc")
