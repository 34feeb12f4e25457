"""In-memory leaderboard state."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Iterable

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entry:
    name: str
    score: int


def _by_score(entry: Entry) -> int:
    return entry.score


class LeaderboardStore:
    """Ranked, capped list of entries shared by every request handler.

    All reads and writes go through ``self._lock``. The lock only covers the
    in-memory list work; logging and serialization happen outside it.
    """

    def __init__(self, cap: int = 100, seed: Iterable[Entry] = ()):
        cap = int(cap)
        if cap <= 0:
            raise ValueError(f"cap must be positive, got {cap}")
        self._cap = cap
        self._lock = threading.Lock()
        # list.sort is stable, so ties keep their insertion order.
        entries = list(seed)
        entries.sort(key=_by_score, reverse=True)
        self._entries: list[Entry] = entries[:cap]

    @property
    def cap(self) -> int:
        return self._cap

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def submit(self, name: str, score: int) -> None:
        entry = Entry(name=name, score=int(score))
        with self._lock:
            self._entries.append(entry)
            self._entries.sort(key=_by_score, reverse=True)
            if len(self._entries) > self._cap:
                del self._entries[self._cap :]
        log.info("Received score: %d from %s", entry.score, entry.name)

    def top_scores(self) -> list[Entry]:
        with self._lock:
            return list(self._entries)
