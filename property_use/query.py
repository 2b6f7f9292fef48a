"""Read-only accessors over the use counter and request store."""

from property_use.models import UseRequest
from property_use.store import UseCounter, UseRequestStore


class QueryInterface:
    """Side-effect-free reads for use requests."""

    def __init__(self, counter: UseCounter, store: UseRequestStore) -> None:
        self.counter = counter
        self.store = store

    def get_use(self, property_id: int, use_id: int) -> UseRequest | None:
        """Get a use request, or None if it was never created."""
        return self.store.get(property_id, use_id)

    def get_active_uses(self, property_id: int) -> int:
        """Return how many use requests were ever issued for ``property_id``.

        This is the counter value: pending and approved requests both count,
        and no block window is consulted.
        """
        return self.counter.current(property_id)

    def list_uses(self, property_id: int) -> list[UseRequest]:
        """Get all use requests of a property, ordered by use id."""
        return self.store.for_property(property_id)
