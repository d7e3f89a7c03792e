import argparse
import sys
from typing import Callable, List, Optional

from controller import MovieController
from error_reporter import ErrorReporter
from logging_config import setup_logging
from movie_rows import build_rows, render_text
from movies_api import MoviesAPI
from settings import load_settings


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="movies-cli",
        description="List, add, update and delete movies in a REST movie catalog.",
    )
    p.add_argument("--base-url", help="Override MOVIES_API_URL")
    p.add_argument("--timeout", type=float, help="Request timeout in seconds (overrides MOVIES_TIMEOUT)")
    p.add_argument("--log-level", help="Override LOG_LEVEL (e.g. DEBUG)")

    sub = p.add_subparsers(dest="command", required=True)

    ls = sub.add_parser("list", help="Print all movies, optionally filtered")
    ls.add_argument("--search", default="", help="Title or genre substring (case-insensitive)")

    add = sub.add_parser("add", help="Create a movie")
    add.add_argument("--title", required=True)
    add.add_argument("--year", required=True, help="Release year, e.g. 2021")
    add.add_argument("--genre", default="")

    upd = sub.add_parser("update", help="Change fields of an existing movie")
    upd.add_argument("id", help="Movie id")
    upd.add_argument("--title")
    upd.add_argument("--year")
    upd.add_argument("--genre")

    rm = sub.add_parser("delete", help="Delete a movie")
    rm.add_argument("id", help="Movie id")
    rm.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")

    args = p.parse_args(argv)
    if args.command == "update" and args.title is None and args.year is None and args.genre is None:
        p.error("update needs at least one of --title, --year, --genre")
    return args


def _resolve_id(controller: MovieController, raw: str):
    """Match a CLI id against the cache, which may hold ints or strings."""
    for movie in controller.cache:
        if str(movie.get("id")) == raw:
            return movie.get("id")
    return raw


def _flush_error(reporter: ErrorReporter) -> int:
    message = reporter.current()
    if message:
        print(message, file=sys.stderr)
        reporter.clear()
        return 1
    return 0


def run(args: argparse.Namespace, controller: MovieController, confirm: Callable[[str], str] = input) -> int:
    if args.command == "add":
        if not controller.add(args.title, args.genre, args.year):
            return _flush_error(controller.reporter)
        created = controller.cache.all()[-1]
        print(f"Added [{created.get('id')}] {created.get('title')}")
        return 0

    if not controller.load():
        return _flush_error(controller.reporter)

    if args.command == "list":
        controller.search(args.search)
        for line in render_text(controller.rows()):
            print(line)
        return 0

    movie_id = _resolve_id(controller, args.id)

    if args.command == "update":
        draft = controller.begin_edit(movie_id)
        if draft is None:
            return _flush_error(controller.reporter)
        ok = controller.submit_edit(
            draft.title if args.title is None else args.title,
            draft.year if args.year is None else args.year,
            draft.genre if args.genre is None else args.genre,
        )
        if not ok:
            return _flush_error(controller.reporter)
        for line in render_text(build_rows([controller.cache.get(movie_id)])):
            print(f"Updated {line}")
        return 0

    if args.command == "delete":
        if movie_id not in controller.cache:
            print(f"No movie with id={args.id}", file=sys.stderr)
            return 1
        controller.request_delete(movie_id)
        if not args.yes:
            answer = confirm(f"Delete movie {args.id}? [y/N] ").strip().lower()
            if answer not in {"y", "yes"}:
                controller.cancel_delete()
                print("Cancelled.")
                return 0
        if not controller.confirm_delete():
            return _flush_error(controller.reporter)
        print(f"Deleted id={args.id}")
        return 0

    return 2


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = load_settings()
    setup_logging(args.log_level or settings.log_level, settings.log_file)

    api = MoviesAPI(
        args.base_url or settings.api_url,
        timeout=args.timeout if args.timeout is not None else settings.timeout,
        max_retries=settings.max_retries,
    )
    controller = MovieController(api, reporter=ErrorReporter(dismiss_after=settings.error_seconds))
    return run(args, controller)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
