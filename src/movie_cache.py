"""In-memory mirror of the remote movie collection used by the UI."""

import logging
from typing import Any, Iterator, List, Optional, Sequence

logger = logging.getLogger(__name__)


class MovieCache:
    """Ordered list of movie dicts keyed by their server-assigned `id`.

    Nothing here performs I/O; callers update the cache only after the
    server has acknowledged a change.
    """
    def __init__(self, movies: Optional[Sequence[dict]] = None):
        self._movies: List[dict] = list(movies or [])

    def __len__(self) -> int:
        return len(self._movies)

    def __iter__(self) -> Iterator[dict]:
        return iter(self._movies)

    def __contains__(self, movie_id: Any) -> bool:
        return self._index_of(movie_id) is not None

    def all(self) -> List[dict]:
        """Snapshot of the cached movies in their current order."""
        return list(self._movies)

    def get(self, movie_id: Any) -> Optional[dict]:
        idx = self._index_of(movie_id)
        return None if idx is None else self._movies[idx]

    def _index_of(self, movie_id: Any) -> Optional[int]:
        for idx, movie in enumerate(self._movies):
            if movie.get("id") == movie_id:
                return idx
        return None

    def replace_all(self, movies: Sequence[dict]) -> None:
        self._movies = list(movies)
        logger.debug("Cache loaded with %d movies", len(self._movies))

    def upsert(self, movie: dict) -> None:
        """Replace the entry with the same `id` in place, else append."""
        idx = self._index_of(movie.get("id"))
        if idx is None:
            self._movies.append(movie)
            logger.debug("Cache appended id=%s", movie.get("id"))
        else:
            self._movies[idx] = movie
            logger.debug("Cache replaced id=%s", movie.get("id"))

    def remove_by_id(self, movie_id: Any) -> bool:
        """Drop the entry with `movie_id`. Returns False when it was absent."""
        before = len(self._movies)
        self._movies = [m for m in self._movies if m.get("id") != movie_id]
        removed = len(self._movies) != before
        if removed:
            logger.debug("Cache removed id=%s", movie_id)
        return removed
