"""
Fetching and parsing of einthusan pages.

- fetch_page: one GET against the catalog site, raw HTML back
- Page: CSS-selector queries over a parsed document
- parse_listing: listing page -> [MovieEntry] in document order
- parse_watch: title page -> WatchDetails, with the video host rewritten to the CDN alias
"""

import re
from typing import Optional

import httpx
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from loguru import logger

from catalog import MAIN_URL
from errors import FetchError, ParseError
from models import MovieEntry, WatchDetails

CDN_HOST = "cdn1.einthusan.io"
FETCH_TIMEOUT = 25

HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/122.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Connection": "keep-alive",
    "Referer": MAIN_URL + "/",
}

# Octet ranges are not checked: 999.1.1.1 matches too.
DOTTED_QUAD_RE = re.compile(r"\b\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}\b", re.ASCII)

LISTING_ITEMS = "#UIMovieSummary > ul > li"
LISTING_TITLE = "div.block2 > a.title > h3"
LISTING_LINK = "div.block2 > a.title"
LISTING_IMAGE = "div.block1 > a > img"

WATCH_TITLE = "#UIMovieSummary div.block2 a.title h3"
WATCH_POSTER = "#UIMovieSummary div.block1 img"
WATCH_PLAYER = "#UIVideoPlayer"


async def fetch_page(url: str) -> str:
    logger.info(f"[Fetcher] GET {url}")
    try:
        async with httpx.AsyncClient(follow_redirects=True, timeout=FETCH_TIMEOUT) as client:
            response = await client.get(url, headers=HEADERS)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error(f"[Fetcher] Failed to fetch {url}: {e}")
        raise FetchError(f"Failed to fetch {url}: {e}") from e

    if response.status_code != 200:
        logger.warning(f"[Fetcher] {url} answered HTTP {response.status_code}, parsing body anyway")
    return response.text


class Page:
    """A parsed document answering structural selector queries."""

    def __init__(self, root):
        self.root = root

    @classmethod
    def parse(cls, html: str) -> "Page":
        try:
            return cls(BeautifulSoup(html, "html.parser"))
        except ParserRejectedMarkup as e:
            raise ParseError(f"Could not parse document: {e}") from e

    def items(self, selector: str) -> list["Page"]:
        return [Page(node) for node in self.root.select(selector)]

    def first(self, selector: str) -> Optional["Page"]:
        node = self.root.select_one(selector)
        return Page(node) if node is not None else None

    def text(self, selector: str) -> str:
        node = self.root.select_one(selector)
        return node.get_text().strip() if node is not None else ""

    def attr(self, selector: str, name: str) -> str:
        node = self.root.select_one(selector)
        if node is None:
            return ""
        return self._attr_value(node, name)

    def own_attr(self, name: str) -> str:
        return self._attr_value(self.root, name)

    @staticmethod
    def _attr_value(node, name: str) -> str:
        value = node.get(name) or ""
        # multi-valued attributes (class, rel) come back as lists
        if isinstance(value, list):
            value = " ".join(value)
        return value


def with_scheme(src: str) -> str:
    if src.startswith("//"):
        return "https:" + src
    return src


def rewrite_video_host(url: str) -> str:
    return DOTTED_QUAD_RE.sub(CDN_HOST, url)


def parse_listing(html: str) -> list[MovieEntry]:
    page = Page.parse(html)
    movies = []
    for item in page.items(LISTING_ITEMS):
        title = item.text(LISTING_TITLE)
        if not title:
            continue
        movies.append(MovieEntry(
            title=title,
            image_url=with_scheme(item.attr(LISTING_IMAGE, "src")),
            page_url=MAIN_URL + item.attr(LISTING_LINK, "href"),
        ))
    logger.debug(f"[Scraper] Extracted {len(movies)} listing entries")
    return movies


def parse_watch(html: str) -> WatchDetails:
    page = Page.parse(html)

    title = page.text(WATCH_TITLE)
    poster = with_scheme(page.attr(WATCH_POSTER, "src"))

    video_url = ""
    player = page.first(WATCH_PLAYER)
    if player is not None:
        video_url = player.own_attr("data-mp4-link") or player.own_attr("data-hls-link")

    if video_url:
        video_url = rewrite_video_host(with_scheme(video_url))
    else:
        logger.debug(f"[Scraper] No playable source on watch page for '{title}'")

    return WatchDetails(title=title, poster_url=poster, video_url=video_url)
