"""Audit events recorded for every accepted workflow operation."""

import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from property_use.models import Event, UseRequest, UseStatus

EVENT_SOURCE = "property-use"

USE_REQUEST_CREATED = "use_request.created"
USE_REQUEST_APPROVED = "use_request.approved"


def use_request_event(
    event_type: str,
    request: UseRequest,
    actor: str,
    previous_status: UseStatus | None = None,
) -> Event:
    """Build the audit event for a use request change.

    Parameters
    ----------
    event_type : str
        One of ``USE_REQUEST_CREATED`` or ``USE_REQUEST_APPROVED``.
    request : UseRequest
        The request as stored after the change.
    actor : str
        Principal that made the call.
    previous_status : UseStatus | None
        Status before the change (None on creation).

    Returns
    -------
    Event
        Event envelope keyed by ``"<property_id>-<use_id>"``.
    """
    data = {
        "property_id": request.property_id,
        "use_id": request.use_id,
        "requester": request.requester,
        "purpose": request.purpose,
        "start_block": request.start_block,
        "end_block": request.end_block,
        "status": request.status,
        "previous_status": previous_status,
    }
    return Event(
        event_id=uuid.uuid4().hex,
        event_type=event_type,
        event_time=datetime.now(timezone.utc),
        source=EVENT_SOURCE,
        subject=f"{request.property_id}-{request.use_id}",
        data=data,
        metadata={"actor": actor},
    )


@dataclass
class EventJournal:
    """Append-only, in-order record of audit events.

    ``drain`` hands pending events to a publisher; ``history`` keeps every
    event ever recorded.
    """

    history: list[Event] = field(default_factory=list)
    _pending: list[Event] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def record(self, event: Event) -> None:
        """Append an event."""
        with self._lock:
            self.history.append(event)
            self._pending.append(event)

    def events(self, property_id: int | None = None) -> list[Event]:
        """Return recorded events, optionally for one property only."""
        with self._lock:
            if property_id is None:
                return list(self.history)
            return [e for e in self.history if e.data["property_id"] == property_id]

    def drain(self) -> list[Event]:
        """Return and clear events not yet published."""
        with self._lock:
            pending, self._pending = self._pending, []
            return pending

    def requeue(self, events: list[Event]) -> None:
        """Put events back at the front of the pending queue."""
        with self._lock:
            self._pending = list(events) + self._pending

    def __len__(self) -> int:
        return len(self.history)
