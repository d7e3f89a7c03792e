"""Movie list, inline edit form and delete confirmation for the Streamlit app.

Each script run redraws the whole list from the controller's active view;
there is no keyed diffing, which is fine for a catalog of this size.
"""

from typing import Any, Optional

import streamlit as st

from controller import MovieController
from error_reporter import ErrorReporter
from movie_rows import MovieRow, Trigger
from ui_controls import show_full_list


def _field_key(name: str, movie_id: Any) -> str:
    return f"edit_{name}_{movie_id}"


def _on_edit(controller: MovieController, trigger: Trigger) -> None:
    trigger.fire()
    draft = controller.edit.draft
    if draft is None or draft.movie_id != trigger.movie_id:
        return
    # Seed the form widgets with the draft before they are created
    st.session_state[_field_key("title", draft.movie_id)] = draft.title
    st.session_state[_field_key("year", draft.movie_id)] = draft.year
    st.session_state[_field_key("genre", draft.movie_id)] = draft.genre


def _on_save(controller: MovieController, movie_id: Any) -> None:
    controller.submit_edit(
        st.session_state.get(_field_key("title", movie_id), ""),
        st.session_state.get(_field_key("year", movie_id), ""),
        st.session_state.get(_field_key("genre", movie_id), ""),
    )


def _on_confirm_delete(controller: MovieController) -> None:
    if controller.confirm_delete():
        show_full_list()


def _edit_form(controller: MovieController, row: MovieRow) -> None:
    movie_id = row.movie_id
    draft = controller.edit.draft
    # Widget state is dropped while the row is filtered out; restore it
    if draft is not None:
        for name in ("title", "year", "genre"):
            st.session_state.setdefault(_field_key(name, movie_id), getattr(draft, name))
    with st.form(f"edit_form_{movie_id}"):
        st.text_input("Title", key=_field_key("title", movie_id))
        st.text_input("Release Year", key=_field_key("year", movie_id))
        st.text_input("Genre", key=_field_key("genre", movie_id))
        if controller.edit.error:
            st.caption(controller.edit.error)
        c1, c2 = st.columns(2)
        with c1:
            st.form_submit_button("Save", on_click=_on_save, args=(controller, movie_id))
        with c2:
            st.form_submit_button("Cancel", on_click=controller.cancel_edit)


def _delete_confirm(controller: MovieController, row: MovieRow) -> None:
    st.warning(f"Delete {row.title}?")
    c1, c2 = st.columns(2)
    with c1:
        st.button(
            "Yes, delete",
            key=f"confirm_delete_{row.movie_id}",
            on_click=_on_confirm_delete,
            args=(controller,),
        )
    with c2:
        st.button("Keep", key=f"cancel_delete_{row.movie_id}", on_click=controller.cancel_delete)


def draw_movies(controller: MovieController) -> None:
    result = controller.rows()
    if result.placeholder is not None:
        st.info(result.placeholder)
        return

    for row in result.rows:
        cols = st.columns([0.76, 0.12, 0.12])
        with cols[0]:
            st.markdown(row.markdown)
        edit, delete = row.trigger("Edit"), row.trigger("Delete")
        with cols[1]:
            st.button(edit.label, key=edit.key, on_click=_on_edit, args=(controller, edit))
        with cols[2]:
            st.button(delete.label, key=delete.key, on_click=delete.fire)
        if controller.edit.is_editing(row.movie_id):
            _edit_form(controller, row)
        if controller.delete.is_pending(row.movie_id):
            _delete_confirm(controller, row)


def draw_error(reporter: ErrorReporter) -> Optional[str]:
    message = reporter.current()
    if message:
        st.error(message)
    return message
