"""HTTP client for the Datamuse ``/words`` endpoint."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

import httpx

from ..settings import DEFAULT_API_URL
from ...utils.observability import get_logger


class QueryMode(str, Enum):
    """Word relation requested from the service."""

    RHYME = "rhyme"
    SYNONYM = "synonym"

    @property
    def parameter(self) -> str:
        return _MODE_PARAMETERS[self]


_MODE_PARAMETERS = {
    QueryMode.RHYME: "rel_rhy",
    QueryMode.SYNONYM: "ml",
}


class WordServiceError(RuntimeError):
    """Raised when the word service cannot be reached or answers badly."""


class DatamuseClient:
    """Fetch word records for a term from Datamuse."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
        max_results: Optional[int] = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.base_url = base_url
        self.max_results = max_results
        self.client = http_client or httpx.Client(base_url=base_url, timeout=timeout)
        self._logger = get_logger(__name__).bind(component="datamuse_client")

    def build_params(self, term: str, mode: QueryMode) -> Dict[str, Any]:
        params: Dict[str, Any] = {QueryMode(mode).parameter: term}
        if self.max_results:
            params["max"] = self.max_results
        return params

    def fetch_words(self, term: str, mode: QueryMode) -> List[Dict[str, Any]]:
        """Return the records the service lists for ``term`` in ``mode``.

        Rows that are not JSON objects are skipped; everything else is passed
        through untouched, in the order received.
        """

        params = self.build_params(term, mode)
        try:
            response = self.client.get(
                "/words",
                params=params,
                headers={"Accept": "application/json"},
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as exc:
            raise WordServiceError(f"Word service request failed: {exc}") from exc
        except ValueError as exc:
            raise WordServiceError("Word service returned invalid JSON") from exc

        if not isinstance(payload, list):
            raise WordServiceError(
                f"Word service returned {type(payload).__name__}, expected a list"
            )

        records = [row for row in payload if isinstance(row, dict)]
        self._logger.debug(
            "Fetched word records",
            context={
                "mode": QueryMode(mode).value,
                "term": term,
                "rows": len(payload),
                "records": len(records),
            },
        )
        return records

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "DatamuseClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


__all__ = ["DatamuseClient", "QueryMode", "WordServiceError"]
