"""Thin wrapper around the movie collection REST endpoint.

Responsibilities
- Build a `requests.Session` for the collection (no automatic retries)
- List, create, patch and delete movies
- Translate transport failures and non-2xx statuses into typed errors
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from requests import Response, Session
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from errors import NetworkError, RemoteError
from settings import DEFAULT_API_URL

logger = logging.getLogger(__name__)


class MoviesAPI:
    """Client for a `json-server` style movie collection.

    Parameters
    - base_url: Collection URL (e.g., http://localhost:3000/movies).
    - timeout: Seconds before a request is abandoned.
    - max_retries: Adapter retries, applied to GET only. Default 0.
    - session: Pre-built session, mainly for tests.
    """
    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: float = 10.0,
        max_retries: int = 0,
        session: Optional[Session] = None,
    ):
        self.base_url = (base_url or DEFAULT_API_URL).rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else self._build_session(max_retries)

    def _build_session(self, max_retries: int) -> Session:
        """Return a `requests.Session` that only retries idempotent reads."""
        s = requests.Session()
        retry = Retry(
            total=max_retries,
            connect=max_retries,
            read=max_retries,
            status=max_retries,
            backoff_factor=0.5,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods={"GET"},
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        s.mount("http://", adapter)
        s.mount("https://", adapter)
        return s

    def _get_headers(self) -> Dict[str, str]:
        return {"Accept": "application/json"}

    def _item_url(self, movie_id: Any) -> str:
        return f"{self.base_url}/{movie_id}"

    def _send(self, method: str, url: str, *, failure: str, **kwargs: Any) -> Response:
        """Issue one request; raise `NetworkError`/`RemoteError` on failure.

        `failure` prefixes the status in the error message, e.g. "Add failed:".
        """
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(
                method, url, headers=self._get_headers(), timeout=self.timeout, **kwargs
            )
        except requests.RequestException as e:
            raise NetworkError(f"Could not reach {url}: {e}") from e
        if not 200 <= response.status_code < 300:
            raise RemoteError(response.status_code, f"{failure} {response.status_code}")
        return response

    @staticmethod
    def _decode(response: Response, failure: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise RemoteError(response.status_code, f"{failure} {response.status_code} (invalid JSON body)") from e

    @classmethod
    def _decode_object(cls, response: Response, failure: str) -> dict:
        body = cls._decode(response, failure)
        if not isinstance(body, dict):
            raise RemoteError(response.status_code, f"{failure} {response.status_code} (expected a JSON object)")
        return body

    # --- Read ---
    def list_all(self) -> List[dict]:
        """Fetch the whole collection. A non-list body counts as empty."""
        failure = "Server returned"
        response = self._send("GET", self.base_url, failure=failure)
        movies = self._decode(response, failure)
        if not isinstance(movies, list):
            logger.warning("Expected a JSON array from %s, got %s", self.base_url, type(movies).__name__)
            return []
        return movies

    # --- Mutations ---
    def create(self, draft: Dict[str, Any]) -> dict:
        """POST a new movie; the server assigns and returns its `id`."""
        payload = {"title": draft.get("title"), "genre": draft.get("genre", ""), "year": draft.get("year")}
        response = self._send("POST", self.base_url, failure="Add failed:", json=payload)
        return self._decode_object(response, "Add failed:")

    def update(self, movie_id: Any, fields: Dict[str, Any]) -> dict:
        """PATCH only `fields`; returns the merged representation."""
        response = self._send("PATCH", self._item_url(movie_id), failure="Update failed:", json=dict(fields))
        return self._decode_object(response, "Update failed:")

    def remove(self, movie_id: Any) -> None:
        """DELETE a movie. The response body is ignored."""
        self._send("DELETE", self._item_url(movie_id), failure="Delete failed:")
