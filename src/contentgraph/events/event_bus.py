from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from contentgraph.events.notifications import Notification

Subscriber = Callable[["RecordedEvent"], None]


@dataclass(frozen=True)
class RecordedEvent:
    """
    Notification plus its position in the log.
    """

    sequence: int
    event: Notification

    @property
    def name(self) -> str:
        return self.event.name

    def to_dict(self) -> dict:
        return {"sequence": self.sequence, **self.event.to_dict()}


class EventBus:
    """
    Append-only notification log with synchronous subscribers.

    Subscribers run inside the emitting call, in subscription order.
    Emission happens after the mutation committed, so a failing
    subscriber is logged and skipped: it cannot fail the operation
    or keep later subscribers from being notified.
    """

    def __init__(self) -> None:
        self._log: List[RecordedEvent] = []
        self._subscribers: List[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def emit(self, event: Notification) -> RecordedEvent:
        recorded = RecordedEvent(sequence=len(self._log), event=event)
        self._log.append(recorded)
        for callback in list(self._subscribers):
            try:
                callback(recorded)
            except Exception:
                logging.getLogger("contentgraph.events").exception(
                    "subscriber %r failed on %s #%d",
                    callback,
                    recorded.name,
                    recorded.sequence,
                )
        return recorded

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def all(self) -> List[RecordedEvent]:
        return list(self._log)

    def since(self, sequence: int) -> List[RecordedEvent]:
        return self._log[max(sequence, 0):]

    def filter(
        self,
        *,
        name: Optional[str] = None,
        since: Optional[int] = None,
    ) -> List[RecordedEvent]:

        results = self._log if since is None else self.since(since)

        if name is not None:
            results = [e for e in results if e.name == name]

        return list(results)

    def __len__(self) -> int:
        return len(self._log)
