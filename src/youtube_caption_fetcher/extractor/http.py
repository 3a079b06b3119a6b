"""
HTTP client shared by the watch-page and timed-text fetches.

Emulates a desktop Chrome browser. Headers, timeout and redirect policy are
fixed when the client is built and never change afterwards.
"""

import logging
import random
import time
from typing import Callable, Optional

import requests
from requests.adapters import HTTPAdapter

from ..config import Settings, DEFAULT_SETTINGS
from ..exceptions import NetworkError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


def random_user_agent(rng: Optional[random.Random] = None) -> str:
    """Build a plausible Windows Chrome user-agent string."""
    rng = rng or random
    return (
        f"Mozilla/5.0 (Windows NT {rng.randint(6, 10)}.0; Win64; x64) "
        f"AppleWebKit/537.36 (KHTML, like Gecko) "
        f"Chrome/{rng.randint(90, 117)}.0.0.0 Safari/537.36"
    )


def default_headers(user_agent: str, accept_language: str) -> dict:
    """Browser-like request headers."""
    return {
        'accept': (
            'text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,'
            'image/webp,image/apng,*/*;q=0.8,application/signed-exchange;v=b3;q=0.9'
        ),
        'accept-language': accept_language,
        'cache-control': 'no-cache',
        'pragma': 'no-cache',
        'sec-ch-ua': '"Google Chrome";v="117", "Not;A=Brand";v="8", "Chromium";v="117"',
        'sec-ch-ua-mobile': '?0',
        'sec-ch-ua-platform': '"Windows"',
        'sec-fetch-dest': 'document',
        'sec-fetch-mode': 'navigate',
        'sec-fetch-site': 'none',
        'sec-fetch-user': '?1',
        'upgrade-insecure-requests': '1',
        'user-agent': user_agent,
    }


class HttpClient:
    """Blocking GET client built on requests.Session."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
        user_agent_provider: Optional[Callable[[], str]] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            settings: Configuration settings. Uses defaults if not provided.
            session: Pre-built session (mainly for tests).
            user_agent_provider: Called once to pick the user agent when
                settings.user_agent is not set.
        """
        self.settings = settings or DEFAULT_SETTINGS

        if self.settings.user_agent:
            self.user_agent = self.settings.user_agent
        else:
            self.user_agent = (user_agent_provider or random_user_agent)()

        self.session = session or requests.Session()
        self._configure_session()

    def _configure_session(self) -> None:
        session = self.session
        session.headers.update(default_headers(self.user_agent, self.settings.accept_language))
        session.max_redirects = self.settings.max_redirects
        session.verify = self.settings.verify_ssl

        # Only http and https may be followed, including on redirects
        session.adapters.clear()
        session.mount('https://', HTTPAdapter())
        session.mount('http://', HTTPAdapter())

        if not self.settings.verify_ssl:
            logger.warning("TLS certificate verification is disabled")

    def _fetch(self, url: str) -> tuple[requests.Response, bytes]:
        """
        GET a URL within a total deadline of settings.timeout seconds.

        requests only bounds each connect and read, so the body is streamed
        and the deadline is checked after every chunk. A stalled read can
        still overshoot the deadline by at most one read timeout.
        """
        logger.debug("GET %s", url)
        deadline = time.monotonic() + self.settings.timeout
        try:
            response = self.session.get(
                url,
                timeout=self.settings.timeout,
                allow_redirects=True,
                stream=True,
            )
            try:
                response.raise_for_status()
                chunks = []
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    chunks.append(chunk)
                    if time.monotonic() > deadline:
                        logger.warning("Timed out after %ss fetching %s", self.settings.timeout, url)
                        raise NetworkError(
                            f"Timed out after {self.settings.timeout}s while fetching {url}",
                            url=url,
                        )
            finally:
                response.close()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else 'unknown'
            logger.warning("HTTP %s fetching %s", status, url)
            raise NetworkError(f"HTTP {status} while fetching {url}", url=url, cause=e) from e
        except requests.TooManyRedirects as e:
            logger.warning("Too many redirects fetching %s", url)
            raise NetworkError(
                f"Exceeded {self.settings.max_redirects} redirects while fetching {url}",
                url=url,
                cause=e,
            ) from e
        except requests.RequestException as e:
            logger.warning("Request failed for %s: %s", url, e)
            raise NetworkError(f"Request failed for {url}: {e}", url=url, cause=e) from e

        content = b''.join(chunks)
        logger.debug("Fetched %s (%d bytes)", url, len(content))
        return response, content

    def get_content(self, url: str) -> bytes:
        """
        GET a URL and return the raw response body.

        Raises:
            NetworkError: On any transport failure, non-2xx status or timeout.
        """
        return self._fetch(url)[1]

    def get_text(self, url: str) -> str:
        """
        GET a URL and return the decoded response body.

        Bodies without a declared charset are decoded as UTF-8.

        Raises:
            NetworkError: On any transport failure, non-2xx status or timeout.
        """
        response, content = self._fetch(url)
        encoding = 'utf-8'
        if 'charset=' in response.headers.get('content-type', '').lower() and response.encoding:
            encoding = response.encoding
        try:
            return content.decode(encoding, errors='replace')
        except LookupError:
            return content.decode('utf-8', errors='replace')

    def close(self) -> None:
        self.session.close()
