import locale
import logging

import streamlit as st

from frontend_ui.session import SearchSession, SortKey, ViewState, record_field
from quote_api.config import LOG_LEVEL
from quote_api.search import find_quotes

# --- Configuration ---
SESSION_KEY = "quote_session"
SORT_WIDGET_KEY = "quote_sort_key"
SORT_LABELS = {SortKey.AUTHOR.value: "Author", SortKey.BOOK.value: "Book Title"}

IDLE_MESSAGE = "Start your literary journey."
LOADING_MESSAGE = "Searching..."
EMPTY_MESSAGE = "No quotes found with that word. Please try a different one!"


def get_session():
    """Returns the SearchSession for this browser session, creating it on first run."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = SearchSession()
    return st.session_state[SESSION_KEY]


def run_search(session, term, client=None):
    session.start_search(term)
    results = []
    try:
        with st.spinner(LOADING_MESSAGE):
            results = find_quotes(term, client)
    finally:
        # Leave LOADING even if the search blew up.
        session.complete_search(results)


def format_quote(record):
    quote = record_field(record, "quote")
    author = record_field(record, "author")
    book = record_field(record, "book")
    return f'*"{quote}"*\n\n— {author}, *{book}*'


def _on_sort_change(session):
    session.change_sort(st.session_state[SORT_WIDGET_KEY])


def render_sort_control(session):
    options = [key.value for key in SortKey]
    st.selectbox(
        "Sort by:",
        options=options,
        index=options.index(session.sort_key.value),
        format_func=SORT_LABELS.get,
        key=SORT_WIDGET_KEY,
        on_change=_on_sort_change,
        args=(session,),
    )


def render_quotes(session):
    for record in session.current_page_records():
        with st.container(border=True):
            st.markdown(format_quote(record))


def render_pagination(session):
    # Previous, one button per page, Next
    cols = st.columns(session.total_pages + 2)
    with cols[0]:
        st.button(
            "Previous",
            key="page_prev",
            disabled=not session.has_previous,
            on_click=session.change_page,
            args=(session.current_page - 1,),
        )
    for page in range(1, session.total_pages + 1):
        with cols[page]:
            st.button(
                str(page),
                key=f"page_{page}",
                type="primary" if page == session.current_page else "secondary",
                on_click=session.change_page,
                args=(page,),
            )
    with cols[-1]:
        st.button(
            "Next",
            key="page_next",
            disabled=not session.has_next,
            on_click=session.change_page,
            args=(session.current_page + 1,),
        )


def render_results(session):
    state = session.view_state
    if state is ViewState.LOADING:
        st.markdown(LOADING_MESSAGE)
    elif state is ViewState.POPULATED:
        render_sort_control(session)
        render_quotes(session)
        render_pagination(session)
    elif state is ViewState.EMPTY:
        st.info(EMPTY_MESSAGE)
    else:
        st.markdown(IDLE_MESSAGE)
    return state


def main():
    logging.basicConfig(level=LOG_LEVEL)
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logging.getLogger(__name__).warning("System locale unavailable; sorting by code point.")

    st.set_page_config(page_title="Find a Word in a Book")
    st.title("📚 Find a Word in a Book")
    st.markdown("Enter a word to find a list of meaningful quotes that contain it.")

    session = get_session()

    # A form submits on Enter as well as on the button.
    with st.form("search_form"):
        term = st.text_input(
            "Search word",
            value=session.term,
            placeholder="e.g., world, life, love...",
        )
        submitted = st.form_submit_button("Search", type="primary")

    if submitted:
        run_search(session, term)

    render_results(session)


if __name__ == "__main__":
    main()
