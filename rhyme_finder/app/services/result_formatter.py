"""Text rendering for lookup outcomes and the saved word list."""

from __future__ import annotations

import re
from typing import Iterable, List

from .query_service import OutcomeStatus, QueryOutcome

LOADING_MESSAGE = "loading..."
NO_RESULT_MESSAGE = "(no result)"
NO_SAVED_WORDS = "(none)"
BLANK_TERM_MESSAGE = "Please enter a word to look up."

_MARKDOWN_SPECIALS = re.compile(r"([\\`*_{}\[\]()#+\-.!|<>~])")


def escape_markdown(text: object) -> str:
    """Backslash-escape Markdown syntax so ``text`` renders literally."""

    return _MARKDOWN_SPECIALS.sub(r"\\\1", str(text))


class WordResultFormatter:
    """Render lookup outcomes as Markdown for the output panel."""

    def format_outcome(self, outcome: QueryOutcome) -> str:
        if outcome.status is OutcomeStatus.FAILED:
            detail = outcome.error or "the word service did not respond"
            return (
                f"❌ Lookup failed for '{escape_markdown(outcome.term)}': "
                f"{escape_markdown(detail)}"
            )

        if outcome.status is OutcomeStatus.EMPTY or not outcome.groups:
            return NO_RESULT_MESSAGE

        lines: List[str] = []
        for group in outcome.groups:
            if group.header:
                if lines:
                    lines.append("")
                lines.append(f"### {group.header}")
            for word in group.words:
                lines.append(f"- {escape_markdown(word)}")
        return "\n".join(lines) + "\n"

    def format_description(self, outcome: QueryOutcome) -> str:
        return f"## {escape_markdown(outcome.description)}"

    def saved_words_text(self, saved: Iterable[str]) -> str:
        """Return the saved words joined by commas, or ``(none)``."""

        words = [str(word) for word in saved]
        if not words:
            return NO_SAVED_WORDS
        return ", ".join(words)

    def format_saved_words(self, saved: Iterable[str]) -> str:
        words = [escape_markdown(word) for word in saved]
        return f"Saved words: {', '.join(words) if words else NO_SAVED_WORDS}"


__all__ = [
    "BLANK_TERM_MESSAGE",
    "LOADING_MESSAGE",
    "NO_RESULT_MESSAGE",
    "NO_SAVED_WORDS",
    "WordResultFormatter",
    "escape_markdown",
]
