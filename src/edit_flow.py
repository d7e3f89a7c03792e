"""Two-phase edit and confirm-before-delete interactions.

An edit starts from a draft prefilled with the movie's current values; the
user changes it and submits, or cancels without any request being sent.

    IDLE -> EDITING -> SUBMITTING -> IDLE
                  ^         |
                  +-- ERROR <+
"""

import enum
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from errors import ValidationError
from movie_rows import parse_year

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class EditState(enum.Enum):
    IDLE = "idle"
    EDITING = "editing"
    SUBMITTING = "submitting"
    ERROR = "error"


@dataclass
class EditDraft:
    movie_id: Any
    title: str = ""
    year: str = ""
    genre: str = ""


def draft_from_movie(movie: dict) -> EditDraft:
    year = parse_year(movie.get("year"))
    return EditDraft(
        movie_id=movie.get("id"),
        title=str(movie.get("title") or ""),
        year="" if year is None else str(year),
        genre=str(movie.get("genre") or ""),
    )


def parse_leading_int(value: Any) -> Optional[int]:
    """Integer at the start of `value` ("2020abc" -> 2020), or None."""
    if value is None or isinstance(value, bool):
        return None
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def build_new_movie(title: str, genre: str, year: Any) -> Dict[str, Any]:
    """Validate the add form: title and a non-zero year must be present."""
    title = (title or "").strip()
    genre = (genre or "").strip()
    parsed = parse_leading_int(year)
    if not title or not parsed:
        raise ValidationError("Please provide Title and Year")
    return {"title": title, "genre": genre, "year": parsed}


def build_patch(current: dict, title: str, year: str, genre: str) -> Dict[str, Any]:
    """Validate edited values and return only the fields that changed.

    A blank year keeps the stored year; a non-numeric one is rejected.
    """
    title = (title or "").strip()
    if not title:
        raise ValidationError("Title cannot be empty")

    patch: Dict[str, Any] = {}
    if title != str(current.get("title") or ""):
        patch["title"] = title

    year_text = (year or "").strip()
    if year_text:
        parsed = parse_year(year_text)
        if parsed is None or parsed <= 0:
            raise ValidationError(f"Invalid year: {year_text!r}")
        if parsed != parse_year(current.get("year")):
            patch["year"] = parsed

    genre = (genre or "").strip()
    if genre != str(current.get("genre") or ""):
        patch["genre"] = genre
    return patch


class EditSession:
    """At most one movie is edited at a time; starting another edit drops
    the unsaved draft."""

    def __init__(self) -> None:
        self.state = EditState.IDLE
        self.draft: Optional[EditDraft] = None
        self.error: Optional[str] = None

    @property
    def movie_id(self) -> Any:
        return None if self.draft is None else self.draft.movie_id

    def is_editing(self, movie_id: Any) -> bool:
        return self.state in (EditState.EDITING, EditState.ERROR) and self.movie_id == movie_id

    def begin(self, movie: dict) -> EditDraft:
        if self.state is EditState.SUBMITTING:
            raise RuntimeError(f"Cannot start an edit while {self.state.value}")
        self.draft = draft_from_movie(movie)
        self.error = None
        self.state = EditState.EDITING
        return self.draft

    def cancel(self) -> None:
        self.state = EditState.IDLE
        self.draft = None
        self.error = None

    def submit(self, current: dict, title: str, year: str, genre: str) -> Dict[str, Any]:
        """Record the entered values and return the PATCH payload.

        Raises `ValidationError` (staying in EDITING) on bad input. An empty
        payload means nothing changed; the caller should `cancel()`.
        """
        if self.state not in (EditState.EDITING, EditState.ERROR) or self.draft is None:
            raise RuntimeError("No edit in progress")
        self.draft.title, self.draft.year, self.draft.genre = title, year, genre
        try:
            patch = build_patch(current, title, year, genre)
        except ValidationError as e:
            self.state = EditState.EDITING
            self.error = str(e)
            raise
        self.error = None
        self.state = EditState.SUBMITTING
        return patch

    def succeed(self) -> None:
        self.cancel()

    def fail(self, message: str) -> None:
        self.state = EditState.ERROR
        self.error = message


class DeleteConfirmation:
    """Pending delete awaiting an explicit yes/no."""

    def __init__(self) -> None:
        self.pending: Any = None

    def request(self, movie_id: Any) -> None:
        self.pending = movie_id

    def is_pending(self, movie_id: Any) -> bool:
        return self.pending is not None and self.pending == movie_id

    def confirm(self) -> Any:
        if self.pending is None:
            raise RuntimeError("No delete awaiting confirmation")
        movie_id, self.pending = self.pending, None
        return movie_id

    def cancel(self) -> None:
        self.pending = None
