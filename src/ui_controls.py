"""Search box, add form and session-state helpers for the Streamlit app."""

import streamlit as st

from controller import MovieController

SEARCH_KEY = "movie_search"
ADD_TITLE_KEY = "add_title"
ADD_GENRE_KEY = "add_genre"
ADD_YEAR_KEY = "add_year"


def init_state() -> None:
    defaults = {
        SEARCH_KEY: "",
        ADD_TITLE_KEY: "",
        ADD_GENRE_KEY: "",
        ADD_YEAR_KEY: "",
    }
    for k, v in defaults.items():
        st.session_state.setdefault(k, v)


def _reset_add_form() -> None:
    for k in (ADD_TITLE_KEY, ADD_GENRE_KEY, ADD_YEAR_KEY):
        st.session_state[k] = ""


def show_full_list() -> None:
    """Clear the search box; only valid inside a widget callback."""
    st.session_state[SEARCH_KEY] = ""


def _on_search(controller: MovieController) -> None:
    controller.search(st.session_state.get(SEARCH_KEY, ""))


def _on_add(controller: MovieController) -> None:
    ok = controller.add(
        st.session_state.get(ADD_TITLE_KEY, ""),
        st.session_state.get(ADD_GENRE_KEY, ""),
        st.session_state.get(ADD_YEAR_KEY, ""),
    )
    if ok:
        _reset_add_form()
        show_full_list()


def search_box(controller: MovieController) -> None:
    st.text_input(
        "Search",
        key=SEARCH_KEY,
        placeholder="Filter by title or genre",
        on_change=_on_search,
        args=(controller,),
    )
    # Keep the controller in step with the widget after reruns
    controller.search(st.session_state.get(SEARCH_KEY, ""))


def add_form(controller: MovieController) -> None:
    with st.expander("Add New Movie", expanded=False):
        with st.form("add_movie_form", clear_on_submit=False):
            c1, c2, c3 = st.columns([2.4, 1.4, 1])
            with c1:
                st.text_input("Title", key=ADD_TITLE_KEY)
            with c2:
                st.text_input("Genre", key=ADD_GENRE_KEY)
            with c3:
                st.text_input("Year", key=ADD_YEAR_KEY, placeholder="e.g. 2021")
            st.form_submit_button("Add Movie", on_click=_on_add, args=(controller,))
