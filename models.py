"""
Record types returned by the extractors and the gateway pipeline.
All of them are request-scoped values; nothing here is shared between requests.
"""

from dataclasses import dataclass, field


@dataclass
class MovieEntry:
    title: str
    image_url: str = ""
    page_url: str = ""

    def to_dict(self) -> dict:
        return {
            "img_url": self.image_url,
            "page_url": self.page_url,
            "title": self.title,
        }


@dataclass
class ListingResult:
    """
    One page of catalog results plus the request metadata echoed back to the caller.
    has_more only says the page was non-empty; the catalog gives no real end marker.
    """
    language: str
    page: int
    movies: list[MovieEntry] = field(default_factory=list)

    @property
    def next_page(self) -> int:
        return self.page + 1

    @property
    def has_more(self) -> bool:
        return len(self.movies) > 0


@dataclass
class WatchDetails:
    title: str = ""
    poster_url: str = ""
    video_url: str = ""

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "video_url": self.video_url,
            "img_url": self.poster_url,
        }
