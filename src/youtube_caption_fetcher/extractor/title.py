"""
Video title extraction from watch-page HTML.
"""

import html as html_lib
import logging
import re
from typing import Optional

from ..exceptions import VideoTitleNotFoundError

logger = logging.getLogger(__name__)


TITLE_PATTERN = re.compile(r'<title>(.*?)</title>', re.IGNORECASE | re.DOTALL)
DEFAULT_TITLE_SUFFIX = ' - YouTube'


def extract_title(html: str, url: Optional[str] = None, suffix: str = DEFAULT_TITLE_SUFFIX) -> str:
    """
    Extract the page title, decode entities and drop the site suffix.

    The first `<title>` match wins, so a title-like string inside an earlier
    script block would be picked up instead.

    Raises:
        VideoTitleNotFoundError: If no non-empty <title> element exists.
    """
    match = TITLE_PATTERN.search(html or '')
    if not match or not match.group(1):
        logger.warning("No <title> in page for %s", url)
        raise VideoTitleNotFoundError(f"Video title not found for URL: {url}", url=url)

    title = html_lib.unescape(match.group(1)).strip()
    if suffix and title.endswith(suffix):
        title = title[:-len(suffix)]
    return title.strip()
