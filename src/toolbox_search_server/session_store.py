from __future__ import annotations

import time
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Callable

from .catalog import CatalogIndex, SearchableEntry
from .query_controller import QueryController, Scheduler


@dataclass
class SearchSession:
    session_id: str
    index: CatalogIndex
    controller: QueryController
    touched_at: float
    results: list[SearchableEntry] = field(default_factory=list)

    def refilter(self, query: str) -> None:
        self.results = self.index.filter(query)


class SessionStore:
    def __init__(self, max_keep: int, ttl_sec: int, now_fn: Callable[[], float] | None = None) -> None:
        self.max_keep = max(1, int(max_keep))
        self.ttl_sec = max(1, int(ttl_sec))
        self._now_fn = now_fn or time.time
        self._items: OrderedDict[str, SearchSession] = OrderedDict()

    def __len__(self) -> int:
        self._cleanup()
        return len(self._items)

    def _drop(self, session_id: str) -> SearchSession | None:
        session = self._items.pop(session_id, None)
        if session is not None:
            session.controller.close()
        return session

    def _cleanup(self) -> None:
        now = self._now_fn()
        expired = [key for key, session in self._items.items() if now - session.touched_at > self.ttl_sec]
        for key in expired:
            self._drop(key)
        while len(self._items) > self.max_keep:
            oldest = next(iter(self._items))
            self._drop(oldest)

    def open(
        self,
        index: CatalogIndex,
        scheduler: Scheduler,
        *,
        debounce_ms: int,
        initial_query: str = "",
    ) -> SearchSession:
        self._cleanup()
        session_id = uuid.uuid4().hex
        controller = QueryController(scheduler, debounce_ms=debounce_ms, initial_query=initial_query)
        session = SearchSession(
            session_id=session_id,
            index=index,
            controller=controller,
            touched_at=self._now_fn(),
        )
        controller.on_settle = session.refilter
        session.refilter(controller.debounced)
        self._items[session_id] = session
        self._cleanup()
        return session

    def get(self, session_id: str) -> SearchSession | None:
        self._cleanup()
        session = self._items.get(session_id)
        if session is None:
            return None
        session.touched_at = self._now_fn()
        self._items.move_to_end(session_id)
        return session

    def close(self, session_id: str) -> bool:
        return self._drop(session_id) is not None

    def close_all(self) -> None:
        for key in list(self._items):
            self._drop(key)
