"""
Caption-track manifest extraction from watch-page HTML.

The watch page embeds its player configuration, which contains a
`"captionTracks":[...]` array. The array is captured with a pattern up to
its first closing bracket, so a nested array appearing before the end of
the manifest breaks extraction.
"""

import json
import logging
import re
from typing import Optional

from ..exceptions import CaptionManifestNotFoundError
from ..models.video import CaptionTrack

logger = logging.getLogger(__name__)


CAPTION_TRACKS_PATTERN = re.compile(r'"captionTracks":(\[[^\]]*\])')
BASE_URL_MARKER = '"baseUrl":'


def extract_caption_tracks(html: str, url: Optional[str] = None) -> list[CaptionTrack]:
    """
    Locate and decode the caption-track manifest.

    Args:
        html: Watch-page HTML.
        url: Video URL, used for error context only.

    Returns:
        Caption tracks in manifest order.

    Raises:
        CaptionManifestNotFoundError: If the manifest is missing or undecodable.
    """
    match = CAPTION_TRACKS_PATTERN.search(html or '')
    if not match or BASE_URL_MARKER not in match.group(1):
        logger.warning("No caption manifest in page for %s", url)
        raise CaptionManifestNotFoundError(f"Caption URL not found for video: {url}", url=url)

    try:
        entries = json.loads(match.group(1))
    except json.JSONDecodeError as e:
        logger.warning("Caption manifest for %s is not valid JSON: %s", url, e)
        raise CaptionManifestNotFoundError(
            f"Caption manifest is not valid JSON for video: {url}",
            url=url,
            cause=e,
        ) from e

    if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
        logger.warning("Caption manifest for %s has an unexpected shape", url)
        raise CaptionManifestNotFoundError(
            f"Caption manifest has an unexpected shape for video: {url}",
            url=url,
        )

    tracks = [CaptionTrack.from_manifest_entry(entry) for entry in entries]
    logger.debug("Found %d caption track(s): %s", len(tracks), [t.language_code for t in tracks])
    return tracks


def select_track(tracks: list[CaptionTrack], language_code: str, url: Optional[str] = None) -> CaptionTrack:
    """
    Pick the first track whose language code equals `language_code`.

    Later tracks in the same language (e.g. auto-generated ones) are ignored.

    Raises:
        CaptionManifestNotFoundError: If no track matches or the match has no base URL.
    """
    track = next((t for t in tracks if t.language_code == language_code), None)
    if track is None:
        logger.warning("No %s caption track for %s", language_code, url)
        raise CaptionManifestNotFoundError(
            f"Caption URL not found for languageCode: {language_code}",
            url=url,
            language_code=language_code,
        )

    if not isinstance(track.base_url, str) or not track.base_url:
        logger.warning("The %s caption track for %s has no base URL", language_code, url)
        raise CaptionManifestNotFoundError(
            "Base URL not found in caption data",
            url=url,
            language_code=language_code,
        )
    return track


def find_caption_url(html: str, language_code: str, url: Optional[str] = None) -> str:
    """Return the timed-text URL for `language_code` from watch-page HTML."""
    tracks = extract_caption_tracks(html, url=url)
    return select_track(tracks, language_code, url=url).base_url
