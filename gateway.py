"""
Request pipeline: intent -> catalog URL -> fetched page -> records.
Each function handles exactly one request and keeps no state between calls.
"""

from typing import Awaitable, Callable, Optional

from catalog import Intent, Search, Watch, build_url
from errors import ValidationError
from models import ListingResult, MovieEntry, WatchDetails
from ranking import rank_by_title
from scraper import fetch_page, parse_listing, parse_watch

Fetcher = Callable[[str], Awaitable[str]]


async def search_movies(intent: Search, fetch: Optional[Fetcher] = None) -> list[MovieEntry]:
    if not intent.query:
        return []
    html = await (fetch or fetch_page)(build_url(intent))
    return rank_by_title(intent.query, parse_listing(html))


async def list_movies(intent: Intent, fetch: Optional[Fetcher] = None) -> ListingResult:
    """Browse, Actor, Genre, Decade and Year all share this path; order is the catalog's."""
    html = await (fetch or fetch_page)(build_url(intent))
    return ListingResult(
        language=intent.language,
        page=intent.page,
        movies=parse_listing(html),
    )


async def watch_details(intent: Watch, fetch: Optional[Fetcher] = None) -> WatchDetails:
    if not intent.page_url:
        raise ValidationError("URL parameter is required")
    html = await (fetch or fetch_page)(build_url(intent))
    return parse_watch(html)
