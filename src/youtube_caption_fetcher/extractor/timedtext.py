"""
Timed-text XML parsing.

Each caption line is a `<text start="..." dur="...">` element. Start times
are kept as the literal attribute string.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Optional, Union

from ..exceptions import SubtitleParsingError
from ..models.video import TranscriptSegment

logger = logging.getLogger(__name__)


def parse_timed_text(xml: Union[str, bytes], url: Optional[str] = None) -> list[TranscriptSegment]:
    """
    Parse timed-text XML into transcript segments.

    Every `text` element is collected, whatever its depth, in document order.
    Entity references are decoded by the XML parser; markup is not otherwise
    stripped.

    Args:
        xml: Timed-text XML document. Bytes let the parser honor the
            encoding in the XML declaration.
        url: Caption URL, used for error context only.

    Returns:
        Segments in document order.

    Raises:
        SubtitleParsingError: If the document is not well-formed XML.
    """
    try:
        root = ET.fromstring(xml)
    except (ET.ParseError, TypeError, ValueError) as e:
        logger.warning("Failed to parse timed text from %s: %s", url, e)
        raise SubtitleParsingError(f"Failed to parse XML: {e}", url=url, cause=e) from e

    segments = [
        TranscriptSegment(
            time=node.get('start', ''),
            text=''.join(node.itertext()),
        )
        for node in root.iter('text')
    ]
    logger.debug("Parsed %d timed-text segment(s)", len(segments))
    return segments
