"""
Video and caption data models.

All models are transient: built for a single request and handed to the
caller, never cached.
"""

from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import parse_qs, urlparse

from ..validation import validate_video_url, validate_language_code


@dataclass(frozen=True)
class VideoReference:
    """A validated YouTube watch-page URL."""
    url: str

    def __post_init__(self):
        validate_video_url(self.url)

    @property
    def video_id(self) -> str:
        """The value of the `v` query parameter."""
        values = parse_qs(urlparse(self.url).query).get('v', [''])
        return values[0]

    def __str__(self) -> str:
        return self.url


@dataclass(frozen=True)
class LanguageCode:
    """A two-letter language code, stored lowercase."""
    code: str

    def __post_init__(self):
        # frozen dataclass: bypass __setattr__ to store the normalized value
        object.__setattr__(self, 'code', validate_language_code(self.code))

    def __str__(self) -> str:
        return self.code


@dataclass
class CaptionTrack:
    """One entry of the caption-track manifest embedded in the watch page."""
    language_code: str
    base_url: Optional[str]
    kind: Optional[str] = None
    name: Any = None
    raw: dict = field(default_factory=dict, repr=False)

    @classmethod
    def from_manifest_entry(cls, entry: dict) -> "CaptionTrack":
        return cls(
            language_code=entry.get('languageCode', ''),
            base_url=entry.get('baseUrl'),
            kind=entry.get('kind'),
            name=entry.get('name'),
            raw=entry,
        )

    @property
    def is_generated(self) -> bool:
        """True for automatic speech recognition tracks."""
        return self.kind == 'asr'

    @property
    def display_name(self) -> str:
        """Human-readable track name as provided by the manifest."""
        if isinstance(self.name, str):
            return self.name
        if isinstance(self.name, dict):
            if 'simpleText' in self.name:
                return str(self.name['simpleText'])
            runs = self.name.get('runs') or []
            return ''.join(str(run.get('text', '')) for run in runs if isinstance(run, dict))
        return ''

    def to_dict(self) -> dict:
        return {
            "language_code": self.language_code,
            "name": self.display_name,
            "kind": self.kind,
            "is_generated": self.is_generated,
            "base_url": self.base_url,
        }


@dataclass
class TranscriptSegment:
    """A single caption line: start time as written in the XML, and its text."""
    time: str
    text: str

    def to_dict(self) -> dict:
        return {
            "time": self.time,
            "text": self.text,
        }


@dataclass
class VideoCaptions:
    """Title and transcript of one video, taken from a single page fetch."""
    url: str
    language: str
    segments: list[TranscriptSegment]
    title: Optional[str] = None

    @property
    def segment_count(self) -> int:
        return len(self.segments)

    @property
    def full_text(self) -> str:
        return ' '.join(s.text.replace('\n', ' ').strip() for s in self.segments if s.text.strip())

    def to_dict(self, include_segments: bool = True) -> dict:
        result = {
            "url": self.url,
            "title": self.title,
            "language": self.language,
            "segment_count": self.segment_count,
            "full_text": self.full_text,
        }
        if include_segments:
            result["segments"] = [s.to_dict() for s in self.segments]
        return result
