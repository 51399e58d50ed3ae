"""Query dispatcher turning a term and mode into displayable word groups."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Hashable, List, Optional

from rhyme_finder.core import RequestSequencer, SavedWordList, group_by, pluralize

from .datamuse import DatamuseClient, QueryMode, WordServiceError
from ...utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)

SYLLABLE_FIELD = "numSyllables"


class OutcomeStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"
    STALE = "stale"


@dataclass
class ResultGroup:
    """Records shown together, optionally under a header."""

    records: List[Dict[str, Any]]
    header: Optional[str] = None
    key: Hashable = None

    @property
    def words(self) -> List[str]:
        return [str(record.get("word", "")) for record in self.records]


@dataclass
class QueryOutcome:
    """Everything a front-end needs to render one lookup."""

    term: str
    mode: QueryMode
    description: str
    status: OutcomeStatus
    groups: List[ResultGroup] = field(default_factory=list)
    request_id: Optional[int] = None
    error: Optional[str] = None

    @property
    def total(self) -> int:
        return sum(len(group.records) for group in self.groups)

    @property
    def words(self) -> List[str]:
        return [word for group in self.groups for word in group.words]

    @property
    def is_stale(self) -> bool:
        return self.status is OutcomeStatus.STALE


def describe_query(term: str, mode: QueryMode) -> str:
    """Return the heading shown above the results for ``term``."""

    if QueryMode(mode) is QueryMode.RHYME:
        return f"Words that rhyme with {term}"
    return f"Words with a similar meaning to {term}"


def syllable_header(key: Hashable) -> str:
    """Return ``"N syllable:"`` or ``"N syllables:"`` for a syllable group."""

    try:
        count = int(key)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return "Unknown syllable count:"
    return f"{count} syllable{pluralize(count)}:"


def group_rhymes(records: List[Dict[str, Any]]) -> List[ResultGroup]:
    """Bucket rhyme records by syllable count, fewest syllables first."""

    grouped = group_by(records, SYLLABLE_FIELD)
    return [
        ResultGroup(records=bucket, header=syllable_header(key), key=key)
        for key, bucket in grouped.items()
    ]


class WordQueryService:
    """Runs rhyme and synonym lookups and shapes them for display."""

    def __init__(self, client: Optional[DatamuseClient] = None) -> None:
        self.client = client or DatamuseClient()
        self._logger = get_logger(__name__).bind(component="word_query_service")

        self._metric_lookups = create_counter(
            "rhyme_finder_lookups_total",
            "Word lookups issued to the word service.",
            label_names=("mode",),
        )
        self._metric_failures = create_counter(
            "rhyme_finder_lookup_failures_total",
            "Word lookups that failed to produce a response.",
            label_names=("mode",),
        )
        self._metric_stale = create_counter(
            "rhyme_finder_stale_responses_total",
            "Responses discarded because a newer lookup was issued.",
            label_names=("mode",),
        )
        self._metric_latency = create_histogram(
            "rhyme_finder_lookup_seconds",
            "Latency of word service lookups.",
            label_names=("mode",),
        )
        self._metric_saved = create_counter(
            "rhyme_finder_words_saved_total",
            "Words saved to a session list.",
        )

    def search(
        self,
        term: str,
        mode: QueryMode = QueryMode.RHYME,
        *,
        sequencer: Optional[RequestSequencer] = None,
    ) -> QueryOutcome:
        """Look up ``term`` and return the outcome for display.

        Rhyme results are grouped by syllable count; synonym results form a
        single headerless group in the order the service returned them.
        Service failures produce a ``failed`` outcome. When ``sequencer`` is
        given and a newer request was issued before this one finished, the
        outcome is ``stale`` and carries no groups.
        """

        mode = QueryMode(mode)
        term = (term or "").strip()
        if not term:
            raise ValueError("A search term is required")

        request_id = sequencer.issue() if sequencer is not None else None
        description = describe_query(term, mode)
        outcome = QueryOutcome(
            term=term,
            mode=mode,
            description=description,
            status=OutcomeStatus.EMPTY,
            request_id=request_id,
        )

        self._metric_lookups.labels(mode=mode.value).inc()
        with start_span(
            "rhyme_finder.lookup",
            {"lookup.mode": mode.value, "lookup.term": term, "lookup.request_id": request_id},
        ) as span:
            start = time.perf_counter()
            try:
                records = self.client.fetch_words(term, mode)
            except WordServiceError as exc:
                record_exception(span, exc)
                self._metric_failures.labels(mode=mode.value).inc()
                self._logger.warning(
                    "Word lookup failed",
                    context={"mode": mode.value, "term": term, "error": str(exc)},
                )
                outcome.status = OutcomeStatus.FAILED
                outcome.error = str(exc)
                records = []
            finally:
                self._metric_latency.labels(mode=mode.value).observe(
                    time.perf_counter() - start
                )

            if sequencer is not None and not sequencer.is_current(request_id):
                self._metric_stale.labels(mode=mode.value).inc()
                self._logger.info(
                    "Discarding stale lookup",
                    context={
                        "mode": mode.value,
                        "term": term,
                        "request_id": request_id,
                        "latest_request_id": sequencer.latest,
                    },
                )
                outcome.status = OutcomeStatus.STALE
                outcome.error = None
                return outcome

            if outcome.status is OutcomeStatus.FAILED:
                return outcome

            if records:
                if mode is QueryMode.RHYME:
                    outcome.groups = group_rhymes(records)
                else:
                    outcome.groups = [ResultGroup(records=list(records))]
                outcome.status = OutcomeStatus.OK

            add_span_attributes(
                span,
                {"lookup.results": outcome.total, "lookup.groups": len(outcome.groups)},
            )

        self._logger.info(
            "Word lookup completed",
            context={
                "mode": mode.value,
                "term": term,
                "status": outcome.status.value,
                "results": outcome.total,
            },
        )
        return outcome

    def save_word(self, saved: SavedWordList, word: str) -> SavedWordList:
        """Append ``word`` to ``saved`` and return the same list."""

        saved.save(word)
        self._metric_saved.inc()
        self._logger.debug(
            "Word saved",
            context={"word": word, "saved_total": len(saved)},
        )
        return saved

    def close(self) -> None:
        self.client.close()


__all__ = [
    "OutcomeStatus",
    "QueryOutcome",
    "ResultGroup",
    "WordQueryService",
    "describe_query",
    "group_rhymes",
    "syllable_header",
]
