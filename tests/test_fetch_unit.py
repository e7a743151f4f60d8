"""Unit tests for the feed fetcher."""

from unittest.mock import Mock

import pytest
import requests

from atom2rss.config import FetchConfig
from atom2rss.errors import FetchError
from atom2rss.fetch import FeedFetcher


def _response(text: str = "<feed/>", status_code: int = 200) -> Mock:
    response = Mock()
    response.text = text
    response.content = text.encode("utf-8")
    response.status_code = status_code
    return response


class TestFeedFetcherUnit:
    """Unit tests for FeedFetcher."""

    def test_fetch_returns_text(self):
        fetcher = FeedFetcher(FetchConfig(timeout=5))
        fetcher.session = Mock()
        fetcher.session.get.return_value = _response("<feed>ok</feed>")

        assert fetcher.fetch("https://example.org/feed.atom") == "<feed>ok</feed>"
        fetcher.session.get.assert_called_once_with("https://example.org/feed.atom", timeout=5)

    def test_user_agent_header(self):
        fetcher = FeedFetcher()

        assert fetcher.session.headers["User-Agent"] == FetchConfig().user_agent

    def test_proxy_template(self):
        fetcher = FeedFetcher(
            FetchConfig(proxy_template="https://api.allorigins.win/raw?url={url}")
        )
        fetcher.session = Mock()
        fetcher.session.get.return_value = _response()

        fetcher.fetch("https://example.org/feed.atom?x=1")

        fetcher.session.get.assert_called_once_with(
            "https://api.allorigins.win/raw?url=https%3A%2F%2Fexample.org%2Ffeed.atom%3Fx%3D1",
            timeout=30,
        )

    def test_http_error_becomes_fetch_error(self):
        fetcher = FeedFetcher()
        fetcher.session = Mock()
        response = _response(status_code=404)
        response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
        fetcher.session.get.return_value = response

        with pytest.raises(FetchError) as excinfo:
            fetcher.fetch("https://example.org/missing")

        assert isinstance(excinfo.value.__cause__, requests.HTTPError)

    def test_connection_error_becomes_fetch_error(self):
        fetcher = FeedFetcher()
        fetcher.session = Mock()
        fetcher.session.get.side_effect = requests.ConnectionError("refused")

        with pytest.raises(FetchError):
            fetcher.fetch("http://example.org/feed")

    @pytest.mark.parametrize("url", ["", "   ", "ftp://example.org/feed", "example.org/feed"])
    def test_invalid_url_rejected(self, url):
        fetcher = FeedFetcher()
        fetcher.session = Mock()

        with pytest.raises(ValueError):
            fetcher.fetch(url)

        fetcher.session.get.assert_not_called()
