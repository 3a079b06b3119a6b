"""
YouTube Caption Fetcher
=======================

Fetch caption transcripts and titles of YouTube videos by scraping the
watch page and the timed-text endpoint.

Features:
- Transcript in a chosen language as ordered (time, text) segments
- Video title with the site suffix removed
- Listing of the caption tracks a video advertises

Example:
    fetcher = YouTubeCaptionFetcher("en")
    segments = fetcher.get_transcript("https://www.youtube.com/watch?v=xxx")

    $ ycf transcript "https://www.youtube.com/watch?v=xxx" --lang fr
"""

__version__ = "1.0.0"
__author__ = "Harmonic Insight"

from .fetcher import YouTubeCaptionFetcher
from .config import Settings, DEFAULT_SETTINGS
from .models.video import (
    VideoReference,
    LanguageCode,
    CaptionTrack,
    TranscriptSegment,
    VideoCaptions,
)
from .exceptions import (
    CaptionFetcherError,
    InvalidUrlError,
    InvalidLanguageCodeError,
    NetworkError,
    CaptionManifestNotFoundError,
    SubtitleParsingError,
    VideoTitleNotFoundError,
)

__all__ = [
    # Fetcher
    "YouTubeCaptionFetcher",
    # Config
    "Settings",
    "DEFAULT_SETTINGS",
    # Models
    "VideoReference",
    "LanguageCode",
    "CaptionTrack",
    "TranscriptSegment",
    "VideoCaptions",
    # Errors
    "CaptionFetcherError",
    "InvalidUrlError",
    "InvalidLanguageCodeError",
    "NetworkError",
    "CaptionManifestNotFoundError",
    "SubtitleParsingError",
    "VideoTitleNotFoundError",
    # Meta
    "__version__",
]
