"""
Caption fetcher that runs the extraction pipeline for a single video.

validate URL -> fetch watch page -> locate caption track -> fetch timed text -> parse
"""

import logging
from typing import Callable, Optional

from .config import Settings, DEFAULT_SETTINGS
from .exceptions import VideoTitleNotFoundError
from .extractor import (
    HttpClient,
    extract_caption_tracks,
    select_track,
    parse_timed_text,
    extract_title,
)
from .models.video import (
    VideoReference,
    LanguageCode,
    CaptionTrack,
    TranscriptSegment,
    VideoCaptions,
)

logger = logging.getLogger(__name__)


class YouTubeCaptionFetcher:
    """
    Fetch caption transcripts and titles of YouTube videos.

    The language code, headers and HTTP policy are fixed at construction.
    Every call fetches fresh data; nothing is cached between calls.
    """

    def __init__(
        self,
        language_code: Optional[str] = None,
        settings: Optional[Settings] = None,
        http_client: Optional[HttpClient] = None,
        user_agent_provider: Optional[Callable[[], str]] = None,
    ):
        """
        Initialize the caption fetcher.

        Args:
            language_code: Two-letter caption language. Defaults to
                settings.language_code ("en").
            settings: Configuration settings. Uses defaults if not provided.
            http_client: Pre-built HTTP client (mainly for tests).
            user_agent_provider: Picks the user agent when settings has none.

        Raises:
            InvalidLanguageCodeError: If the language code is malformed.
        """
        self.settings = settings or DEFAULT_SETTINGS
        if language_code is None:
            language_code = self.settings.language_code
        self.language = LanguageCode(language_code)
        self.http = http_client or HttpClient(self.settings, user_agent_provider=user_agent_provider)

    @property
    def language_code(self) -> str:
        return self.language.code

    def get_transcript(self, video_url: str) -> list[TranscriptSegment]:
        """
        Fetch the transcript of a video in the configured language.

        Args:
            video_url: YouTube watch-page URL.

        Returns:
            Segments in the order they appear in the timed-text document.

        Raises:
            InvalidUrlError, NetworkError, CaptionManifestNotFoundError,
            SubtitleParsingError
        """
        video = VideoReference(video_url)
        html = self.http.get_text(video.url)
        return self._transcript_from_page(video, html)

    def get_video_title(self, video_url: str) -> str:
        """
        Fetch the title of a video.

        Raises:
            InvalidUrlError, NetworkError, VideoTitleNotFoundError
        """
        video = VideoReference(video_url)
        html = self.http.get_text(video.url)
        title = extract_title(html, url=video.url, suffix=self.settings.title_suffix)
        logger.info("Title for %s: %s", video.video_id, title)
        return title

    def list_caption_tracks(self, video_url: str) -> list[CaptionTrack]:
        """
        List every caption track advertised by the watch page.

        Raises:
            InvalidUrlError, NetworkError, CaptionManifestNotFoundError
        """
        video = VideoReference(video_url)
        html = self.http.get_text(video.url)
        return extract_caption_tracks(html, url=video.url)

    def fetch(self, video_url: str) -> VideoCaptions:
        """
        Fetch title and transcript with a single watch-page request.

        A missing title leaves `title` as None; transcript errors propagate.
        """
        video = VideoReference(video_url)
        html = self.http.get_text(video.url)
        segments = self._transcript_from_page(video, html)

        try:
            title = extract_title(html, url=video.url, suffix=self.settings.title_suffix)
        except VideoTitleNotFoundError:
            logger.warning("No title found for %s", video.url)
            title = None

        return VideoCaptions(
            url=video.url,
            language=self.language_code,
            segments=segments,
            title=title,
        )

    def _transcript_from_page(self, video: VideoReference, html: str) -> list[TranscriptSegment]:
        tracks = extract_caption_tracks(html, url=video.url)
        track = select_track(tracks, self.language_code, url=video.url)
        logger.debug(
            "Selected %s track%s for %s",
            track.language_code,
            " (auto-generated)" if track.is_generated else "",
            video.video_id,
        )

        xml = self.http.get_content(track.base_url)
        segments = parse_timed_text(xml, url=track.base_url)
        logger.info("Transcript for %s: %d segments", video.video_id, len(segments))
        return segments

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "YouTubeCaptionFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
