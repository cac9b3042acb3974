"""
Intents understood by the gateway and the catalog URL each one maps to.
Caller values go into the URL verbatim; einthusan decides what is valid.
"""

from dataclasses import dataclass
from typing import Union

MAIN_URL = "https://einthusan.tv"
LISTING_PATH = "/movie/results/"


@dataclass(frozen=True)
class Search:
    language: str
    query: str


@dataclass(frozen=True)
class Browse:
    language: str
    category: str = "recent"
    page: int = 1


@dataclass(frozen=True)
class Actor:
    language: str
    actor_code: str
    page: int = 1


@dataclass(frozen=True)
class Genre:
    language: str
    action: str = "0"
    comedy: str = "0"
    romance: str = "0"
    storyline: str = "0"
    performance: str = "0"
    ratecount: str = "1"
    page: int = 1


@dataclass(frozen=True)
class Decade:
    language: str
    decade: str
    page: int = 1


@dataclass(frozen=True)
class Year:
    language: str
    year: str
    page: int = 1


@dataclass(frozen=True)
class Watch:
    page_url: str


Intent = Union[Search, Browse, Actor, Genre, Decade, Year, Watch]


def with_page(url: str, page: int) -> str:
    # page 1 is the catalog default and is never written out
    if page > 1:
        return f"{url}&page={page}"
    return url


def build_url(intent: Intent) -> str:
    listing = MAIN_URL + LISTING_PATH

    if isinstance(intent, Search):
        query = intent.query.replace(" ", "+")
        return f"{listing}?lang={intent.language}&query={query}"

    if isinstance(intent, Browse):
        if intent.category == "popular":
            url = f"{listing}?find=Popularity&lang={intent.language}&ptype=view&tp=alltime"
        else:
            url = f"{listing}?find=Recent&lang={intent.language}"
        return with_page(url, intent.page)

    if isinstance(intent, Actor):
        url = f"{listing}?find=Cast&id={intent.actor_code}&lang={intent.language}&role="
        return with_page(url, intent.page)

    if isinstance(intent, Genre):
        url = (
            f"{listing}?lang={intent.language}&find=Rating"
            f"&action={intent.action}&comedy={intent.comedy}&romance={intent.romance}"
            f"&storyline={intent.storyline}&performance={intent.performance}"
            f"&ratecount={intent.ratecount}"
        )
        return with_page(url, intent.page)

    if isinstance(intent, Decade):
        url = f"{listing}?decade={intent.decade}&find=Decade&lang={intent.language}"
        return with_page(url, intent.page)

    if isinstance(intent, Year):
        url = f"{listing}?find=Year&lang={intent.language}&year={intent.year}"
        return with_page(url, intent.page)

    if isinstance(intent, Watch):
        return intent.page_url

    raise TypeError(f"Unsupported intent: {intent!r}")
