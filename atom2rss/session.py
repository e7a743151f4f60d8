"""Interactive conversion session: fetch, convert, preview and export."""

import itertools
import threading
from pathlib import Path

from .config import OutputConfig
from .converter import convert
from .errors import ConverterError
from .fetch import FeedFetcher
from .logging_config import create_execution_logger

EXPORT_FILENAME = "rss-feed.xml"
EXPORT_MIME_TYPE = "text/xml"


class ConversionSession:
    """Holds the state shown to a user converting one feed at a time.

    Several ``load`` calls may overlap when issued from different threads.
    Each one gets an increasing request id and a result is only committed
    when no newer request has committed before it, so a slow stale response
    never overwrites a fresher one.
    """

    def __init__(
        self,
        fetcher: FeedFetcher | None = None,
        output_config: OutputConfig | None = None,
        execution_id: str | None = None,
    ):
        self.logger = create_execution_logger("session", execution_id)
        self.fetcher = fetcher or FeedFetcher(execution_id=self.logger.execution_id)
        self.output_config = output_config or OutputConfig()

        self.url = ""
        self.feed_text = ""
        self.rss_text = ""
        self.show_error = False

        self._lock = threading.Lock()
        self._request_ids = itertools.count(1)
        self._committed_id = 0
        self._pending = 0

    @property
    def loading(self) -> bool:
        with self._lock:
            return self._pending > 0

    def set_url(self, url: str) -> None:
        """Store the feed URL and clear any previous error."""
        self.url = url
        self.show_error = False

    def load(self) -> bool:
        """Fetch the current URL and convert it.

        Returns:
            True when a fresh result was committed, False otherwise
        """
        url = self.url
        if not url:
            return False

        with self._lock:
            request_id = next(self._request_ids)
            self._pending += 1

        self.logger.info("Starting conversion request", request_id=request_id, feed_url=url)
        feed_text = None
        rss_text = None
        try:
            feed_text = self.fetcher.fetch(url)
            rss_text = convert(
                feed_text, self.output_config, execution_id=self.logger.execution_id
            )
        except (ConverterError, ValueError) as e:
            self.logger.error(
                f"Conversion request failed: {e}",
                request_id=request_id,
                feed_url=url,
                error=str(e),
            )
        finally:
            with self._lock:
                self._pending -= 1

        return self._commit(request_id, feed_text, rss_text)

    def _commit(self, request_id: int, feed_text: str | None, rss_text: str | None) -> bool:
        with self._lock:
            if request_id <= self._committed_id:
                self.logger.warning(
                    "Discarding stale conversion result",
                    request_id=request_id,
                    committed_id=self._committed_id,
                )
                return False

            self._committed_id = request_id
            if feed_text is not None:
                self.feed_text = feed_text
            if rss_text is None:
                self.show_error = True
                return False

            self.rss_text = rss_text
            self.show_error = False

        self.logger.info("Conversion committed", request_id=request_id)
        return True

    def export_rss(self, directory: str | Path) -> Path:
        """Write the current RSS output to ``rss-feed.xml`` in ``directory``.

        Raises:
            ValueError: If nothing has been converted yet
        """
        if not self.rss_text:
            raise ValueError("No RSS output to export")

        path = Path(directory) / EXPORT_FILENAME
        path.write_bytes(self.rss_text.encode("utf-8"))
        self.logger.info("RSS exported", path=str(path), size=path.stat().st_size)
        return path
