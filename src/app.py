"""Streamlit UI for browsing and editing a movie catalog served over REST.

Highlights
- One GET on session start, then the list is served from the local cache
- Search by title or genre without extra requests
- Add, inline edit and confirm-before-delete, each a single request
- Errors shown in one slot that clears itself after a few seconds
"""

import streamlit as st

from controller import MovieController
from logging_config import setup_logging
from settings import Settings, load_settings
from ui_controls import init_state, add_form, search_box, show_full_list
from ui_render import draw_error, draw_movies

CONTROLLER_KEY = "movie_controller"

st.set_page_config(page_title="Movie Catalog", layout="wide")


def _get_controller(settings: Settings) -> MovieController:
    """One controller per browser session, loaded on first use."""
    controller = st.session_state.get(CONTROLLER_KEY)
    if controller is None:
        controller = MovieController.from_settings(settings)
        controller.load()
        st.session_state[CONTROLLER_KEY] = controller
    return controller


def _on_reload(controller: MovieController) -> None:
    if controller.load():
        controller.cancel_edit()
        controller.cancel_delete()
        show_full_list()


def _error_slot(controller: MovieController) -> None:
    # Re-check the slot every second so messages disappear without input
    st.fragment(run_every=1.0)(draw_error)(controller.reporter)


def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)
    init_state()
    controller = _get_controller(settings)

    hdr_l, hdr_r = st.columns([4, 1])
    with hdr_l:
        st.markdown("<h3 style='margin-bottom:0.25rem'>Movie Catalog</h3>", unsafe_allow_html=True)
        st.caption(f"Source: {controller.api.base_url}")
    with hdr_r:
        st.button("Reload", on_click=_on_reload, args=(controller,))

    _error_slot(controller)
    search_box(controller)
    add_form(controller)
    draw_movies(controller)


if __name__ == "__main__":
    main()
