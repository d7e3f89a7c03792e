"""Client-side search over cached movies."""

from typing import Iterable, List


def _field(movie: dict, name: str) -> str:
    return str(movie.get(name) or "").lower()


def filter_movies(movies: Iterable[dict], query: str) -> List[dict]:
    """Return movies whose title or genre contains `query`, case-insensitive.

    A blank query returns every movie. Order is preserved.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return list(movies)
    return [m for m in movies if needle in _field(m, "title") or needle in _field(m, "genre")]
