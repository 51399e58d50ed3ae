"""Streamlit front-end for the Rhyme Finder project."""

from __future__ import annotations

from typing import Optional

import streamlit as st

from rhyme_finder.app.app import RhymeFinderApp
from rhyme_finder.app.services.datamuse import QueryMode
from rhyme_finder.app.services.query_service import OutcomeStatus, QueryOutcome
from rhyme_finder.app.services.result_formatter import (
    BLANK_TERM_MESSAGE,
    LOADING_MESSAGE,
    WordResultFormatter,
    escape_markdown,
)
from rhyme_finder.app.settings import Settings
from rhyme_finder.core import RequestSequencer, SavedWordList
from rhyme_finder.utils.logging_config import configure_logging


@st.cache_resource(show_spinner=False)
def _load_app() -> RhymeFinderApp:
    """Initialise and cache the core application facade."""

    settings = Settings.from_env()
    configure_logging(settings.log_level)
    return RhymeFinderApp(settings)


def _session_defaults() -> None:
    if "saved_words" not in st.session_state:
        st.session_state.saved_words = SavedWordList()
    if "sequencer" not in st.session_state:
        st.session_state.sequencer = RequestSequencer()
    if "outcome" not in st.session_state:
        st.session_state.outcome = None


def _save_word(app: RhymeFinderApp, word: str) -> None:
    app.search_service.save_word(st.session_state.saved_words, word)


def _render_outcome(
    app: RhymeFinderApp,
    formatter: WordResultFormatter,
    outcome: Optional[QueryOutcome],
) -> None:
    if outcome is None:
        return

    st.subheader(escape_markdown(outcome.description))
    if outcome.status is not OutcomeStatus.OK:
        st.write(formatter.format_outcome(outcome))
        return

    for group_index, group in enumerate(outcome.groups):
        if group.header:
            st.markdown(f"### {group.header}")
        for word_index, word in enumerate(group.words):
            word_col, save_col = st.columns([5, 1])
            word_col.markdown(escape_markdown(word))
            save_col.button(
                "(save)",
                key=f"save-{outcome.request_id}-{group_index}-{word_index}",
                on_click=_save_word,
                args=(app, word),
            )


def main() -> None:
    """Render the interactive Streamlit experience."""

    st.set_page_config(page_title="Rhyme Finder", layout="centered")
    _session_defaults()

    app = _load_app()
    formatter = app.formatter

    st.title("Rhyme Finder")
    st.markdown(formatter.format_saved_words(st.session_state.saved_words))

    with st.form("word_lookup"):
        term = st.text_input("Word", placeholder="Enter a word", label_visibility="collapsed")
        rhyme_col, synonym_col = st.columns(2)
        with rhyme_col:
            rhyme_clicked = st.form_submit_button("Show rhyming words", type="primary")
        with synonym_col:
            synonym_clicked = st.form_submit_button("Show synonyms")

    if rhyme_clicked or synonym_clicked:
        mode = QueryMode.RHYME if rhyme_clicked else QueryMode.SYNONYM
        if not term or not term.strip():
            st.info(BLANK_TERM_MESSAGE)
        else:
            with st.spinner(LOADING_MESSAGE):
                outcome = app.search_service.search(
                    term,
                    mode,
                    sequencer=st.session_state.sequencer,
                )
            if not outcome.is_stale:
                st.session_state.outcome = outcome

    _render_outcome(app, formatter, st.session_state.outcome)


if __name__ == "__main__":
    main()
