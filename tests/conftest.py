import pytest

from sample_pages import LISTING_HTML, WATCH_HTML


class RecordingFetcher:
    """Stands in for scraper.fetch_page and remembers every URL asked for."""

    def __init__(self, html: str = LISTING_HTML):
        self.html = html
        self.urls = []

    async def __call__(self, url: str) -> str:
        self.urls.append(url)
        return self.html


@pytest.fixture
def listing_html():
    return LISTING_HTML


@pytest.fixture
def watch_html():
    return WATCH_HTML


@pytest.fixture
def fetcher():
    return RecordingFetcher()
