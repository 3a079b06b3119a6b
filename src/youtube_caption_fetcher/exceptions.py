"""
Exception hierarchy for YouTube Caption Fetcher.

Every error raised by the fetcher derives from CaptionFetcherError, so callers
can catch broadly or pick a specific failure.
"""

from typing import Optional


class CaptionFetcherError(Exception):
    """Base class for all fetcher errors."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        language_code: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.url = url
        self.language_code = language_code
        self.cause = cause


class InvalidUrlError(CaptionFetcherError):
    """The video URL is not a youtube.com watch-page URL."""


class InvalidLanguageCodeError(CaptionFetcherError):
    """The language code is not two alphabetic characters."""


class NetworkError(CaptionFetcherError):
    """Transport failure while fetching the watch page or timed text."""


class CaptionManifestNotFoundError(CaptionFetcherError):
    """No usable caption track could be located in the watch page."""


class SubtitleParsingError(CaptionFetcherError):
    """The timed-text response is not well-formed XML."""


class VideoTitleNotFoundError(CaptionFetcherError):
    """The watch page has no <title> element."""
