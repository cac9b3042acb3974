import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

import gateway
from catalog import Actor, Browse, Decade, Genre, Search, Watch, Year
from errors import GatewayError
from models import ListingResult

app = FastAPI(
    title="Thirai API",
    description="Live REST API for einthusan.tv: search, browse, filter and resolve playable video links",
    version="1.0.0"
)

CORS_ORIGINS = [
    o.strip() for o in os.getenv(
        "THIRAI_CORS_ORIGINS",
        "https://thirai.me,http://thirai.me,https://www.thirai.me",
    ).split(",") if o.strip()
]
PORT = int(os.getenv("PORT", "8080"))

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS", "PUT"],
    allow_headers=["Origin", "Content-Type", "Accept", "Authorization"],
    expose_headers=["Content-Length"],
    allow_credentials=True,
)


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    logger.warning(f"[API] {request.url.path} failed with {exc.status_code}: {exc.message}")
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


def parse_page(value: str) -> int:
    # unparseable pages fall back to 0: nothing appended upstream, next_page is 1
    try:
        return int(value)
    except ValueError:
        return 0


def listing_payload(result: ListingResult, **head) -> dict:
    return {
        **head,
        "has_more": result.has_more,
        "language": result.language,
        "movies": [m.to_dict() for m in result.movies],
        "next_page": result.next_page,
        "page": result.page,
    }


@app.get("/")
def list_endpoints():
    return {
        "message": "thirai api",
        "endpoints": {
            "search": "/search/:language?q=movie_title",
            "browse": "/language/:language?category=recent|popular&page=1",
            "actors": "/actors/:language/:actorcode?page=1",
            "genre": "/genre/:language?action=0-4&comedy=0-4&romance=0-4&storyline=0-4&performance=0-4&ratecount=1&page=1",
            "decade": "/decade/:language/:decade?page=1",
            "year": "/year/:language/:year?page=1",
            "watch": "/watch?url=einthusan_page_url",
        },
        "example_usage": "Try /year/tamil/2025 or /genre/hindi?action=4&ratecount=5",
    }


@app.get("/search/{language}")
async def search(language: str, q: str = ""):
    movies = await gateway.search_movies(Search(language=language, query=q))
    logger.info(f"[API] /search/{language} q='{q}' -> {len(movies)} movies")
    return {
        "language": language,
        "movies": [m.to_dict() for m in movies],
        "q": q,
    }


@app.get("/language/{language}")
async def browse(language: str, category: str = "recent", page: str = "1"):
    category = category.lower()
    result = await gateway.list_movies(Browse(language=language, category=category, page=parse_page(page)))
    logger.info(f"[API] /language/{language} {category} page={result.page} -> {len(result.movies)} movies")
    return listing_payload(result, category=category)


@app.get("/actors/{language}/{actor_code}")
async def actor_movies(language: str, actor_code: str, page: str = "1"):
    result = await gateway.list_movies(Actor(language=language, actor_code=actor_code, page=parse_page(page)))
    logger.info(f"[API] /actors/{language}/{actor_code} page={result.page} -> {len(result.movies)} movies")
    # the catalog listing carries no actor name
    return listing_payload(result, actor_id=actor_code, actor_name="Unknown Actor")


@app.get("/genre/{language}")
async def genre(
    language: str,
    action: str = "0",
    comedy: str = "0",
    romance: str = "0",
    storyline: str = "0",
    performance: str = "0",
    ratecount: str = "1",
    page: str = "1",
):
    intent = Genre(
        language=language,
        action=action,
        comedy=comedy,
        romance=romance,
        storyline=storyline,
        performance=performance,
        ratecount=ratecount,
        page=parse_page(page),
    )
    result = await gateway.list_movies(intent)
    logger.info(f"[API] /genre/{language} page={result.page} -> {len(result.movies)} movies")
    return listing_payload(result, category="Genre")


@app.get("/decade/{language}/{decade}")
async def decade_movies(language: str, decade: str, page: str = "1"):
    result = await gateway.list_movies(Decade(language=language, decade=decade, page=parse_page(page)))
    logger.info(f"[API] /decade/{language}/{decade} page={result.page} -> {len(result.movies)} movies")
    return listing_payload(result, category=f"Decade: {decade}")


@app.get("/year/{language}/{year}")
async def year_movies(language: str, year: str, page: str = "1"):
    result = await gateway.list_movies(Year(language=language, year=year, page=parse_page(page)))
    logger.info(f"[API] /year/{language}/{year} page={result.page} -> {len(result.movies)} movies")
    return listing_payload(result, category=f"Year: {year}")


@app.get("/watch")
async def watch(url: str = ""):
    details = await gateway.watch_details(Watch(page_url=url))
    logger.info(f"[API] /watch resolved '{details.title}' video={'YES' if details.video_url else 'NONE'}")
    return details.to_dict()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=PORT)
