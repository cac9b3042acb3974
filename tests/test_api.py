import pytest
from fastapi.testclient import TestClient

import api
import gateway
from errors import FetchError, ParseError
from sample_pages import WATCH_HTML, WATCH_NO_VIDEO_HTML

LISTING = "https://einthusan.tv/movie/results/"


@pytest.fixture
def client(fetcher, monkeypatch):
    monkeypatch.setattr(gateway, "fetch_page", fetcher)
    return TestClient(api.app)


def test_index_lists_endpoints(client):
    data = client.get("/").json()
    assert data["message"] == "thirai api"
    assert set(data["endpoints"]) == {"search", "browse", "actors", "genre", "decade", "year", "watch"}


def test_search_empty_query_skips_fetch(client, fetcher):
    r = client.get("/search/tamil")
    assert r.status_code == 200
    assert r.json() == {"language": "tamil", "movies": [], "q": ""}
    assert fetcher.urls == []


def test_search_ranks_and_serializes(client, fetcher):
    data = client.get("/search/tamil", params={"q": "vikram vedha"}).json()
    assert data["q"] == "vikram vedha"
    assert data["language"] == "tamil"
    assert data["movies"][0] == {
        "img_url": "",
        "page_url": "https://einthusan.tv",
        "title": "Vikram Vedha",
    }
    assert fetcher.urls == [f"{LISTING}?lang=tamil&query=vikram+vedha"]


def test_browse_defaults(client, fetcher):
    data = client.get("/language/tamil").json()
    assert data["category"] == "recent"
    assert data["page"] == 1
    assert data["next_page"] == 2
    assert data["has_more"] is True
    assert [m["title"] for m in data["movies"]] == ["Vikram", "Vikram Vedha", "Kaithi"]
    assert set(data) == {"category", "has_more", "language", "movies", "next_page", "page"}
    assert fetcher.urls == [f"{LISTING}?find=Recent&lang=tamil"]


def test_browse_popular_category_is_lowercased(client, fetcher):
    data = client.get("/language/hindi", params={"category": "POPULAR", "page": "3"}).json()
    assert data["category"] == "popular"
    assert data["page"] == 3
    assert fetcher.urls == [f"{LISTING}?find=Popularity&lang=hindi&ptype=view&tp=alltime&page=3"]


def test_unparseable_page_becomes_zero(client, fetcher):
    data = client.get("/year/tamil/2025", params={"page": "two"}).json()
    assert data["page"] == 0
    assert data["next_page"] == 1
    assert fetcher.urls == [f"{LISTING}?find=Year&lang=tamil&year=2025"]


def test_actor_payload(client, fetcher):
    data = client.get("/actors/tamil/KH", params={"page": "2"}).json()
    assert data["actor_id"] == "KH"
    assert data["actor_name"] == "Unknown Actor"
    assert data["next_page"] == 3
    assert "category" not in data
    assert fetcher.urls == [f"{LISTING}?find=Cast&id=KH&lang=tamil&role=&page=2"]


def test_genre_payload(client, fetcher):
    data = client.get("/genre/hindi", params={"action": "4", "ratecount": "5"}).json()
    assert data["category"] == "Genre"
    assert fetcher.urls == [
        f"{LISTING}?lang=hindi&find=Rating&action=4&comedy=0&romance=0&storyline=0&performance=0&ratecount=5"
    ]


def test_decade_and_year_categories(client):
    assert client.get("/decade/malayalam/1990").json()["category"] == "Decade: 1990"
    assert client.get("/year/tamil/2025").json()["category"] == "Year: 2025"


def test_watch_requires_url(client, fetcher):
    r = client.get("/watch")
    assert r.status_code == 400
    assert r.json() == {"error": "URL parameter is required"}
    assert fetcher.urls == []


def test_watch_payload(client, fetcher):
    fetcher.html = WATCH_HTML
    r = client.get("/watch", params={"url": "https://einthusan.tv/movie/watch/aB1/?lang=tamil"})
    assert r.status_code == 200
    assert r.json() == {
        "title": "Vikram",
        "video_url": "https://cdn1.einthusan.io/etv/content/aB1.mp4?e=1700000000&md5=x",
        "img_url": "https://img.einthusan.io/aB1.jpg",
    }


def test_watch_without_video(client, fetcher):
    fetcher.html = WATCH_NO_VIDEO_HTML
    data = client.get("/watch", params={"url": "https://einthusan.tv/movie/watch/cD2/"}).json()
    assert data["video_url"] == ""
    assert data["title"] == "Master"


@pytest.mark.parametrize("error", [FetchError("Failed to fetch: connection refused"), ParseError("Could not parse document")])
def test_upstream_failures_are_500(error, monkeypatch):
    async def failing_fetch(url):
        raise error

    monkeypatch.setattr(gateway, "fetch_page", failing_fetch)
    r = TestClient(api.app).get("/language/tamil")
    assert r.status_code == 500
    assert r.json() == {"error": error.message}


def test_cors_allows_configured_origin(client):
    r = client.get("/", headers={"Origin": "https://thirai.me"})
    assert r.headers["access-control-allow-origin"] == "https://thirai.me"
    assert r.headers["access-control-allow-credentials"] == "true"
