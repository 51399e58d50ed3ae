"""User interface assembly for the Gradio front-end."""

from __future__ import annotations

from typing import Callable, Iterator, Optional, Tuple

import gradio as gr

from rhyme_finder.core import RequestSequencer, SavedWordList

from ..services.datamuse import QueryMode
from ..services.query_service import OutcomeStatus, QueryOutcome, WordQueryService, describe_query
from ..services.result_formatter import (
    BLANK_TERM_MESSAGE,
    LOADING_MESSAGE,
    WordResultFormatter,
    escape_markdown,
)

LookupUpdate = Tuple[str, str, Optional[QueryOutcome]]


def lookup_updates(
    search_service: WordQueryService,
    formatter: WordResultFormatter,
    term: Optional[str],
    mode: QueryMode,
    sequencer: RequestSequencer,
) -> Iterator[LookupUpdate]:
    """Yield ``(description, status, outcome)`` updates for one lookup.

    The first update shows the loading indicator and clears the previous
    results. Nothing further is yielded when the response turned out stale,
    so the newer lookup's output stays on screen.
    """

    term = (term or "").strip()
    if not term:
        yield ("", BLANK_TERM_MESSAGE, None)
        return

    mode = QueryMode(mode)
    yield (f"## {escape_markdown(describe_query(term, mode))}", LOADING_MESSAGE, None)

    outcome = search_service.search(term, mode, sequencer=sequencer)
    if outcome.is_stale:
        return

    status = "" if outcome.status is OutcomeStatus.OK else formatter.format_outcome(outcome)
    yield (formatter.format_description(outcome), status, outcome)


def save_word_update(
    search_service: WordQueryService,
    formatter: WordResultFormatter,
    saved: Optional[SavedWordList],
    word: str,
) -> Tuple[SavedWordList, str]:
    """Append ``word`` to the session list and return the refreshed label."""

    if saved is None:
        saved = SavedWordList()
    search_service.save_word(saved, word)
    return saved, formatter.format_saved_words(saved)


def make_save_handler(
    search_service: WordQueryService,
    formatter: WordResultFormatter,
    word: str,
) -> Callable[[SavedWordList], Tuple[SavedWordList, str]]:
    """Return the click handler for the ``(save)`` button next to ``word``."""

    def save_word(saved: SavedWordList) -> Tuple[SavedWordList, str]:
        return save_word_update(search_service, formatter, saved, word)

    return save_word


def create_interface(
    search_service: WordQueryService,
    formatter: Optional[WordResultFormatter] = None,
) -> gr.Blocks:
    """Construct the interactive Gradio Blocks UI."""

    formatter = formatter or WordResultFormatter()

    def rhyme_lookup(term: str, sequencer: RequestSequencer):
        yield from lookup_updates(search_service, formatter, term, QueryMode.RHYME, sequencer)

    def synonym_lookup(term: str, sequencer: RequestSequencer):
        yield from lookup_updates(search_service, formatter, term, QueryMode.SYNONYM, sequencer)

    interface_css = """
    .rf-container {max-width: 960px; margin: 0 auto; gap: 16px;}
    .rf-saved {color: #334155; font-size: 1rem;}
    .rf-status {color: #64748b; font-style: italic;}
    .rf-word-row {align-items: center; gap: 8px;}
    .rf-word {font-weight: 600;}
    """

    with gr.Blocks(
        title="Rhyme Finder",
        theme=gr.themes.Soft(),
        css=interface_css,
    ) as interface:
        saved_state = gr.State(SavedWordList())
        sequencer_state = gr.State(RequestSequencer())
        outcome_state = gr.State(None)

        with gr.Column(elem_classes=["rf-container"]):
            gr.Markdown("# Rhyme Finder")
            saved_md = gr.Markdown(
                value=formatter.format_saved_words(()),
                elem_classes=["rf-saved"],
            )

            with gr.Row():
                word_input = gr.Textbox(
                    show_label=False,
                    placeholder="Enter a word",
                    lines=1,
                    scale=4,
                    elem_id="rf-term",
                )
                rhyme_btn = gr.Button(
                    "Show rhyming words", variant="primary", scale=1, elem_id="rf-rhyme"
                )
                synonym_btn = gr.Button(
                    "Show synonyms", variant="secondary", scale=1, elem_id="rf-synonym"
                )

            description_md = gr.Markdown(value="")
            status_md = gr.Markdown(value="", elem_classes=["rf-status"])

            @gr.render(inputs=[outcome_state])
            def render_results(outcome: Optional[QueryOutcome]):
                if outcome is None or not outcome.groups:
                    return
                for group in outcome.groups:
                    if group.header:
                        gr.Markdown(f"### {group.header}")
                    for word in group.words:
                        with gr.Row(equal_height=True, elem_classes=["rf-word-row"]):
                            gr.Markdown(escape_markdown(word), elem_classes=["rf-word"])
                            save_btn = gr.Button(
                                "(save)",
                                size="sm",
                                variant="secondary",
                                scale=0,
                                min_width=80,
                            )
                        save_btn.click(
                            fn=make_save_handler(search_service, formatter, word),
                            inputs=[saved_state],
                            outputs=[saved_state, saved_md],
                        )

        lookup_outputs = [description_md, status_md, outcome_state]

        rhyme_btn.click(
            fn=rhyme_lookup,
            inputs=[word_input, sequencer_state],
            outputs=lookup_outputs,
        )
        word_input.submit(
            fn=rhyme_lookup,
            inputs=[word_input, sequencer_state],
            outputs=lookup_outputs,
        )
        synonym_btn.click(
            fn=synonym_lookup,
            inputs=[word_input, sequencer_state],
            outputs=lookup_outputs,
        )

    return interface


__all__ = ["create_interface", "lookup_updates", "make_save_handler", "save_word_update"]
