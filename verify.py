import httpx

BASE = "http://localhost:8080"

ENDPOINTS = [
    "/",
    "/search/tamil?q=vikram",
    "/search/tamil?q=",
    "/language/tamil",
    "/language/hindi?category=popular&page=2",
    "/actors/tamil/KH?page=1",
    "/genre/hindi?action=4&ratecount=5",
    "/decade/malayalam/1990",
    "/year/tamil/2025",
    "/watch",
]


def check_movies(movies):
    total = len(movies)
    with_img = sum(1 for m in movies if m.get("img_url"))
    with_page = sum(1 for m in movies if m.get("page_url"))
    print(f"    movies: {total} | images: {with_img}/{total} | pages: {with_page}/{total}")
    if movies:
        m = movies[0]
        print(f"    sample: title={m.get('title', '?')[:40]!r} | img={'YES' if m.get('img_url') else 'EMPTY'}")
    return movies


watch_target = None

for path in ENDPOINTS:
    url = BASE + path
    try:
        r = httpx.get(url, timeout=30)
        data = r.json()
        status = "OK" if r.status_code == 200 else f"ERR {r.status_code}"
        print(f"\n[{status}] {path}")

        if path == "/":
            print(f"  endpoints listed: {len(data.get('endpoints', {}))}")
            continue

        if "error" in data:
            print(f"  error: {data['error']}")
            continue

        if path.startswith("/search"):
            print(f"  q: {data.get('q')!r}")
            movies = check_movies(data.get("movies", []))
            if movies and watch_target is None:
                watch_target = movies[0]["page_url"]
            continue

        if "movies" in data:
            print(f"  category: {data.get('category', data.get('actor_name', '?'))!r} | page: {data.get('page')} -> {data.get('next_page')} | has_more: {data.get('has_more')}")
            check_movies(data["movies"])
            continue

    except Exception as e:
        print(f"\n[FAIL] {path} => {e}")

if watch_target:
    try:
        r = httpx.get(BASE + "/watch", params={"url": watch_target}, timeout=30)
        data = r.json()
        print(f"\n[{'OK' if r.status_code == 200 else f'ERR {r.status_code}'}] /watch?url={watch_target}")
        print(f"  title: {data.get('title')!r}")
        print(f"  img_url: {data.get('img_url') or 'EMPTY'}")
        print(f"  video_url: {data.get('video_url') or 'EMPTY'}")
    except Exception as e:
        print(f"\n[FAIL] /watch => {e}")

print("\n\nDone.")
