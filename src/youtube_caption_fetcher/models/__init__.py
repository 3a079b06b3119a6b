"""Data models for YouTube caption data."""

from .video import (
    VideoReference,
    LanguageCode,
    CaptionTrack,
    TranscriptSegment,
    VideoCaptions,
)

__all__ = [
    "VideoReference",
    "LanguageCode",
    "CaptionTrack",
    "TranscriptSegment",
    "VideoCaptions",
]
