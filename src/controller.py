"""State owned by one UI session: client, cache, search query and the
edit/delete flows.

Every user action funnels through here. Failures are reported through the
`ErrorReporter` and never propagate to the caller; the cache only changes
after the server has acknowledged a mutation.
"""

import logging
from typing import Any, List, Optional

from edit_flow import DeleteConfirmation, EditDraft, EditSession, build_new_movie
from error_reporter import ErrorReporter
from errors import MovieAppError, ValidationError
from movie_cache import MovieCache
from movie_filter import filter_movies
from movie_rows import RenderResult, build_rows
from movies_api import MoviesAPI
from settings import Settings

logger = logging.getLogger(__name__)


class MovieController:
    def __init__(
        self,
        api: MoviesAPI,
        *,
        cache: Optional[MovieCache] = None,
        reporter: Optional[ErrorReporter] = None,
    ):
        self.api = api
        self.cache = cache if cache is not None else MovieCache()
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.query = ""
        self.loaded = False
        self.edit = EditSession()
        self.delete = DeleteConfirmation()

    @classmethod
    def from_settings(cls, settings: Settings) -> "MovieController":
        api = MoviesAPI(settings.api_url, timeout=settings.timeout, max_retries=settings.max_retries)
        return cls(api, reporter=ErrorReporter(dismiss_after=settings.error_seconds))

    # --- Read / view ---
    def load(self) -> bool:
        """Fetch the whole collection and replace the cache."""
        try:
            movies = self.api.list_all()
        except MovieAppError as e:
            self.reporter.report(f"Error fetching movies: {e}")
            return False
        self.cache.replace_all(movies)
        self.loaded = True
        logger.info("Loaded %d movies from %s", len(movies), self.api.base_url)
        return True

    def search(self, query: str) -> None:
        self.query = query or ""

    def visible(self) -> List[dict]:
        """The active view: the cache narrowed by the current query."""
        return filter_movies(self.cache, self.query)

    def rows(self) -> RenderResult:
        return build_rows(self.visible(), on_edit=self.begin_edit, on_delete=self.request_delete)

    # --- Create ---
    def add(self, title: str, genre: str, year: Any) -> bool:
        """Validate and POST a new movie; on success the full list is shown."""
        try:
            draft = build_new_movie(title, genre, year)
        except ValidationError as e:
            self.reporter.report(str(e))
            return False
        try:
            created = self.api.create(draft)
        except MovieAppError as e:
            self.reporter.report(str(e))
            return False
        self.cache.upsert(created)
        self.query = ""
        logger.info("Added movie id=%s", created.get("id"))
        return True

    # --- Update ---
    def begin_edit(self, movie_id: Any) -> Optional[EditDraft]:
        movie = self.cache.get(movie_id) if movie_id is not None else None
        if movie is None:
            self.reporter.report("Cannot edit: missing id")
            return None
        try:
            return self.edit.begin(movie)
        except RuntimeError as e:
            self.reporter.report(str(e))
            return None

    def cancel_edit(self) -> None:
        self.edit.cancel()

    def submit_edit(self, title: str, year: str, genre: str) -> bool:
        """PATCH the changed fields of the movie being edited.

        The active (possibly filtered) view is kept on success.
        """
        movie_id = self.edit.movie_id
        current = self.cache.get(movie_id) if movie_id is not None else None
        if current is None:
            self.edit.cancel()
            self.reporter.report("Cannot edit: missing id")
            return False
        try:
            patch = self.edit.submit(current, title, year, genre)
        except ValidationError as e:
            self.reporter.report(str(e))
            return False
        if not patch:
            self.edit.cancel()
            return True
        try:
            updated = self.api.update(movie_id, patch)
        except MovieAppError as e:
            self.edit.fail(str(e))
            self.reporter.report(str(e))
            return False
        updated.setdefault("id", movie_id)
        self.cache.upsert(updated)
        self.edit.succeed()
        logger.info("Updated movie id=%s fields=%s", movie_id, sorted(patch))
        return True

    # --- Delete ---
    def request_delete(self, movie_id: Any) -> None:
        self.delete.request(movie_id)

    def cancel_delete(self) -> None:
        self.delete.cancel()

    def confirm_delete(self) -> bool:
        """DELETE the pending movie; on success the full list is shown."""
        try:
            movie_id = self.delete.confirm()
        except RuntimeError as e:
            self.reporter.report(str(e))
            return False
        try:
            self.api.remove(movie_id)
        except MovieAppError as e:
            self.reporter.report(str(e))
            return False
        self.cache.remove_by_id(movie_id)
        if self.edit.movie_id == movie_id:
            self.edit.cancel()
        self.query = ""
        logger.info("Deleted movie id=%s", movie_id)
        return True
