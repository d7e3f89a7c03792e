"""Projection of movies into display rows.

The same rows back the Streamlit list (`ui_render`) and the CLI output, so
this module stays free of any UI toolkit.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Tuple

PLACEHOLDER = "No movies found matching your criteria."
UNTITLED = "(Untitled)"
NOT_AVAILABLE = "N/A"
UNKNOWN_GENRE = "Unknown"

_MD_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!|~<>])")

Action = Callable[[Any], None]


def display_title(movie: dict) -> str:
    return str(movie.get("title") or "").strip() or UNTITLED


def parse_year(value: Any) -> Optional[int]:
    """Return `value` as an int year, or None when absent or non-numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    text = str(value).strip()
    if not re.fullmatch(r"-?\d+", text):
        return None
    return int(text)


def display_year(movie: dict) -> str:
    year = parse_year(movie.get("year"))
    # 0 is what an empty numeric input decodes to; treat it as missing
    return str(year) if year else NOT_AVAILABLE


def display_genre(movie: dict) -> str:
    return str(movie.get("genre") or "").strip() or UNKNOWN_GENRE


def format_meta(movie: dict) -> str:
    """Suffix shown after the title, e.g. " (2021) - Sci-Fi"."""
    return f" ({display_year(movie)}) - {display_genre(movie)}"


def escape_markdown(text: str) -> str:
    return _MD_SPECIAL.sub(r"\\\1", text)


@dataclass(frozen=True)
class Trigger:
    """A row action (Edit/Delete) bound to one movie id."""
    label: str
    key: str
    movie_id: Any
    action: Optional[Action] = None

    def fire(self) -> None:
        if self.action is not None:
            self.action(self.movie_id)


@dataclass(frozen=True)
class MovieRow:
    movie_id: Any
    title: str
    meta: str
    triggers: Tuple[Trigger, ...]

    @property
    def markdown(self) -> str:
        return f"**{escape_markdown(self.title)}**{escape_markdown(self.meta)}"

    @property
    def text(self) -> str:
        return f"{self.title}{self.meta}"

    def trigger(self, label: str) -> Trigger:
        for t in self.triggers:
            if t.label == label:
                return t
        raise KeyError(label)


@dataclass(frozen=True)
class RenderResult:
    """Everything one render pass draws: rows, or a single placeholder."""
    rows: Tuple[MovieRow, ...]
    placeholder: Optional[str] = None

    @property
    def triggers(self) -> List[Trigger]:
        return [t for row in self.rows for t in row.triggers]

    def __len__(self) -> int:
        return len(self.rows)


def build_rows(
    movies: Iterable[dict],
    on_edit: Optional[Action] = None,
    on_delete: Optional[Action] = None,
) -> RenderResult:
    """Build one row per movie, or the "no results" placeholder when empty."""
    rows = []
    for movie in movies:
        movie_id = movie.get("id")
        rows.append(
            MovieRow(
                movie_id=movie_id,
                title=display_title(movie),
                meta=format_meta(movie),
                triggers=(
                    Trigger("Edit", f"edit_{movie_id}", movie_id, on_edit),
                    Trigger("Delete", f"delete_{movie_id}", movie_id, on_delete),
                ),
            )
        )
    if not rows:
        return RenderResult(rows=(), placeholder=PLACEHOLDER)
    return RenderResult(rows=tuple(rows))


def render_text(result: RenderResult, *, show_ids: bool = True) -> List[str]:
    """Plain-text lines for terminals; ids are prefixed so they can be targeted."""
    if result.placeholder is not None:
        return [result.placeholder]
    if not show_ids:
        return [row.text for row in result.rows]
    return [f"[{row.movie_id}] {row.text}" for row in result.rows]
