import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rhyme_finder.app.services.datamuse import DatamuseClient, QueryMode

API_URL = "https://words.test"


class StubClient:
    """Client stand-in returning canned records per mode.

    ``error`` is raised instead of answering; ``on_fetch`` runs before the
    answer is returned, e.g. to issue a newer request mid-flight.
    """

    def __init__(
        self,
        responses: Optional[Dict[QueryMode, List[Dict[str, Any]]]] = None,
        *,
        error: Optional[BaseException] = None,
        on_fetch: Optional[Callable[[str, QueryMode], None]] = None,
    ) -> None:
        self.responses = responses or {}
        self.error = error
        self.on_fetch = on_fetch
        self.calls: List[tuple] = []
        self.closed = False

    def fetch_words(self, term: str, mode: QueryMode) -> List[Dict[str, Any]]:
        mode = QueryMode(mode)
        self.calls.append((term, mode))
        if self.on_fetch is not None:
            self.on_fetch(term, mode)
        if self.error is not None:
            raise self.error
        return list(self.responses.get(mode, []))

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def rhymes_for_time() -> List[Dict[str, Any]]:
    return [
        {"word": "rhyme", "score": 3000, "numSyllables": 1},
        {"word": "sometime", "score": 2500, "numSyllables": 2},
        {"word": "climb", "score": 2400, "numSyllables": 1},
        {"word": "overtime", "score": 1900, "numSyllables": 3},
        {"word": "paradigm", "score": 1200, "numSyllables": 3},
    ]


@pytest.fixture
def synonyms_for_happy() -> List[Dict[str, Any]]:
    return [
        {"word": "glad", "score": 900},
        {"word": "cheerful", "score": 850},
        {"word": "content", "score": 800},
    ]


@pytest.fixture
def make_client() -> Callable[..., DatamuseClient]:
    """Build a client whose HTTP traffic is answered by ``handler``."""

    clients: List[DatamuseClient] = []

    def _factory(handler, **kwargs: Any) -> DatamuseClient:
        http_client = httpx.Client(
            base_url=API_URL,
            transport=httpx.MockTransport(handler),
        )
        client = DatamuseClient(base_url=API_URL, http_client=http_client, **kwargs)
        clients.append(client)
        return client

    yield _factory

    for client in clients:
        client.close()


@pytest.fixture
def stub_client_factory() -> Callable[..., StubClient]:
    """Build stub clients; arguments are passed to :class:`StubClient`."""

    return StubClient


@pytest.fixture
def stub_client(stub_client_factory, rhymes_for_time, synonyms_for_happy) -> StubClient:
    return stub_client_factory(
        {
            QueryMode.RHYME: rhymes_for_time,
            QueryMode.SYNONYM: synonyms_for_happy,
        }
    )
