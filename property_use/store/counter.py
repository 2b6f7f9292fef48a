"""Per-property use counter."""

import threading
from dataclasses import dataclass, field


@dataclass
class UseCounter:
    """Last issued use id for each property.

    A property with no entry has issued nothing yet and reads as 0.
    Entries are created on the first ``next`` and only ever grow by one.
    """

    counts: dict[int, int] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def next(self, property_id: int) -> int:
        """Commit and return the next use id for ``property_id``."""
        with self._lock:
            use_id = self.counts.get(property_id, 0) + 1
            self.counts[property_id] = use_id
            return use_id

    def current(self, property_id: int) -> int:
        """Return the number of use ids issued for ``property_id``."""
        return self.counts.get(property_id, 0)
