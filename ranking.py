"""
Relevance ordering for free-text search results.

A title matches when every character of the phrase appears in it in order (not
necessarily adjacent). Matched titles are scored by rapidfuzz similarity so an exact
title beats a looser one; titles that do not match at all go last.
"""

from typing import Optional

from loguru import logger
from rapidfuzz import fuzz

from models import MovieEntry


def is_subsequence(needle: str, haystack: str) -> bool:
    chars = iter(haystack)
    return all(c in chars for c in needle)


def rank_match(phrase: str, title: str) -> Optional[float]:
    """Score in [0, 100] when phrase is a subsequence of title, None otherwise."""
    phrase = phrase.lower()
    title = title.lower()
    if not is_subsequence(phrase, title):
        return None
    return fuzz.ratio(phrase, title)


def rank_by_title(phrase: str, movies: list[MovieEntry]) -> list[MovieEntry]:
    scores = [rank_match(phrase, m.title) for m in movies]

    # sorted() is stable: ties and non-matches keep extraction order
    order = sorted(
        range(len(movies)),
        key=lambda i: (scores[i] is None, -(scores[i] or 0.0)),
    )
    matched = sum(1 for s in scores if s is not None)
    logger.debug(f"[Ranker] '{phrase}': {matched}/{len(movies)} titles matched")
    return [movies[i] for i in order]
