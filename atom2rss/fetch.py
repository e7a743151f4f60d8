"""Source feed retrieval for the Atom to RSS converter."""

from urllib.parse import quote, urlparse

import requests

from .config import FetchConfig
from .errors import FetchError
from .logging_config import create_execution_logger


class FeedFetcher:
    """Downloads the raw text of a feed over HTTP."""

    def __init__(self, config: FetchConfig | None = None, execution_id: str | None = None):
        """Initialize FeedFetcher with configuration.

        Args:
            config: Fetch configuration, defaults when omitted
            execution_id: Execution ID for logging context
        """
        self.config = config or FetchConfig()
        self.logger = create_execution_logger("feed_fetcher", execution_id)
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": self.config.user_agent})

        self.logger.info(
            "FeedFetcher initialized",
            timeout=self.config.timeout,
            proxied=bool(self.config.proxy_template),
        )

    def request_url(self, feed_url: str) -> str:
        """Return the URL actually requested for ``feed_url``."""
        if not self.config.proxy_template:
            return feed_url
        return self.config.proxy_template.format(url=quote(feed_url, safe=""))

    def fetch(self, feed_url: str) -> str:
        """Fetch the raw feed text.

        Args:
            feed_url: URL of the Atom feed

        Returns:
            Response body decoded as text

        Raises:
            ValueError: If the URL is empty or not HTTP(S)
            FetchError: If the download fails
        """
        if not feed_url or not feed_url.strip():
            raise ValueError("Feed URL cannot be empty")

        feed_url = feed_url.strip()
        parsed_url = urlparse(feed_url)
        if parsed_url.scheme not in ("http", "https"):
            error_msg = f"Feed URL must use HTTP or HTTPS: {feed_url}"
            self.logger.error(error_msg, feed_url=feed_url, scheme=parsed_url.scheme)
            raise ValueError(error_msg)

        try:
            self.logger.info("Downloading feed content", feed_url=feed_url)
            response = self.session.get(
                self.request_url(feed_url), timeout=self.config.timeout
            )
            response.raise_for_status()
        except requests.RequestException as e:
            self.logger.error(
                f"Failed to download feed {feed_url}: {e}",
                feed_url=feed_url,
                error=str(e),
            )
            raise FetchError(f"Failed to download feed {feed_url}") from e

        self.logger.info(
            "Feed downloaded successfully",
            feed_url=feed_url,
            status_code=response.status_code,
            content_length=len(response.content),
        )
        return response.text
