"""
Input validation for video URLs and language codes.

Only youtube.com watch-page URLs are accepted. Short links (youtu.be) and
embed URLs are rejected even though they point at the same video.
"""

import re
from urllib.parse import urlparse

from .exceptions import InvalidUrlError, InvalidLanguageCodeError


WATCH_URL_PATTERN = re.compile(r'^https?://(www\.)?youtube\.com/watch\?v=')
LANGUAGE_CODE_PATTERN = re.compile(r'^[a-z]{2}$', re.IGNORECASE | re.ASCII)


def _is_absolute_url(url: str) -> bool:
    if not url or any(c.isspace() for c in url):
        return False
    parsed = urlparse(url)
    return bool(parsed.scheme) and bool(parsed.netloc)


def validate_video_url(url: str) -> str:
    """
    Validate a YouTube watch-page URL.

    Args:
        url: Candidate video URL.

    Returns:
        The URL, unchanged.

    Raises:
        InvalidUrlError: If the URL is malformed or not a watch-page URL.
    """
    if not isinstance(url, str) or not _is_absolute_url(url) or not WATCH_URL_PATTERN.match(url):
        raise InvalidUrlError(f"Invalid YouTube URL: {url}", url=url if isinstance(url, str) else None)
    return url


def validate_language_code(language_code: str) -> str:
    """
    Validate a two-letter language code and normalize it to lowercase.

    Raises:
        InvalidLanguageCodeError: If the code is not exactly two letters.
    """
    if not isinstance(language_code, str) or not LANGUAGE_CODE_PATTERN.fullmatch(language_code):
        raise InvalidLanguageCodeError(
            f"Invalid language code: {language_code}",
            language_code=language_code if isinstance(language_code, str) else None,
        )
    return language_code.lower()
