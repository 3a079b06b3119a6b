"""Extractors for YouTube watch pages and timed text."""

from .http import HttpClient, random_user_agent
from .manifest import extract_caption_tracks, select_track, find_caption_url
from .timedtext import parse_timed_text
from .title import extract_title

__all__ = [
    "HttpClient",
    "random_user_agent",
    "extract_caption_tracks",
    "select_track",
    "find_caption_url",
    "parse_timed_text",
    "extract_title",
]
