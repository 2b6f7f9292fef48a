"""Use request store keyed by (property_id, use_id)."""

import threading
from dataclasses import dataclass, field

from property_use.exceptions import DuplicateUseRequestError, UseRequestMissingError
from property_use.models import UseRequest, UseStatus


@dataclass
class UseRequestStore:
    """In-memory store for use requests with a per-property index."""

    requests: dict[tuple[int, int], UseRequest] = field(default_factory=dict)

    # Relationship index
    _property_uses: dict[int, list[int]] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def insert(self, request: UseRequest) -> None:
        """Add a new use request to the store."""
        with self._lock:
            if request.key in self.requests:
                raise DuplicateUseRequestError(
                    f"Use request {request.use_id} already exists for property {request.property_id}"
                )
            self.requests[request.key] = request
            self._property_uses.setdefault(request.property_id, []).append(request.use_id)

    def get(self, property_id: int, use_id: int) -> UseRequest | None:
        """Get a use request by key."""
        with self._lock:
            return self.requests.get((property_id, use_id))

    def set_status(self, property_id: int, use_id: int, status: UseStatus) -> UseRequest:
        """Replace the stored request with one carrying ``status``.

        Returns the updated record.
        """
        with self._lock:
            current = self.requests.get((property_id, use_id))
            if current is None:
                raise UseRequestMissingError(
                    f"Use request {use_id} not found for property {property_id}"
                )
            updated = current.with_status(status)
            self.requests[updated.key] = updated
            return updated

    # Query methods
    def for_property(self, property_id: int) -> list[UseRequest]:
        """Get all use requests for a property, ordered by use id."""
        with self._lock:
            use_ids = sorted(self._property_uses.get(property_id, []))
            return [self.requests[(property_id, uid)] for uid in use_ids]

    def summary(self) -> dict[str, int]:
        """Return use request counts by status."""
        counts = {status.value: 0 for status in UseStatus}
        with self._lock:
            for request in self.requests.values():
                counts[request.status.value] += 1
            counts["total"] = len(self.requests)
        return counts
