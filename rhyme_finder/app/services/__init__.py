"""Service layer: word service client, query dispatcher and rendering."""

from .datamuse import DatamuseClient, QueryMode, WordServiceError
from .query_service import (
    OutcomeStatus,
    QueryOutcome,
    ResultGroup,
    WordQueryService,
    describe_query,
    syllable_header,
)
from .result_formatter import WordResultFormatter

__all__ = [
    "DatamuseClient",
    "QueryMode",
    "WordServiceError",
    "OutcomeStatus",
    "QueryOutcome",
    "ResultGroup",
    "WordQueryService",
    "describe_query",
    "syllable_header",
    "WordResultFormatter",
]
