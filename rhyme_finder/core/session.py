"""Per-session state: saved words and request sequencing."""

from __future__ import annotations

import threading
from typing import Iterator, List, Tuple


class SavedWordList:
    """Append-only list of words the user saved during a session.

    Duplicates are kept; saving the same word twice lists it twice.
    """

    def __init__(self) -> None:
        self._words: List[str] = []

    def save(self, word: str) -> None:
        self._words.append(str(word))

    @property
    def words(self) -> Tuple[str, ...]:
        return tuple(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._words))

    def __repr__(self) -> str:
        return f"SavedWordList({self._words!r})"


class RequestSequencer:
    """Hands out increasing request numbers so late responses can be dropped."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._latest = 0

    def issue(self) -> int:
        with self._lock:
            self._latest += 1
            return self._latest

    def is_current(self, request_id: int) -> bool:
        with self._lock:
            return request_id == self._latest

    @property
    def latest(self) -> int:
        with self._lock:
            return self._latest

    def __deepcopy__(self, memo) -> "RequestSequencer":
        # UI frameworks copy initial session state; locks cannot be copied.
        clone = RequestSequencer()
        clone._latest = self.latest
        return clone


__all__ = ["SavedWordList", "RequestSequencer"]
