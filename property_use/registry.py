"""Property registry adapter.

The workflow only ever calls ``lookup``. ``InMemoryPropertyRegistry`` also
carries the registry-side operations (registration, ownership transfer,
status changes) so the workflow can be hosted and exercised without an
external registry.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from property_use.exceptions import DuplicatePropertyError, PropertyNotRegisteredError
from property_use.models import Property, PropertyStatus, PropertyView

logger = logging.getLogger(__name__)


@runtime_checkable
class PropertyRegistry(Protocol):
    """Read-only view of the property registry consumed by the workflow."""

    def lookup(self, property_id: int) -> PropertyView | None:
        """Return the current owner and status, or None if unknown."""
        ...


@dataclass
class InMemoryPropertyRegistry:
    """In-memory property registry with referential checks."""

    properties: dict[int, Property] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def lookup(self, property_id: int) -> PropertyView | None:
        with self._lock:
            prop = self.properties.get(property_id)
            return prop.view() if prop is not None else None

    def register(self, prop: Property) -> None:
        """Add a property to the registry."""
        with self._lock:
            if prop.property_id in self.properties:
                raise DuplicatePropertyError(f"Property {prop.property_id} already registered")
            self.properties[prop.property_id] = prop
        logger.debug("Registered property %s owned by %s", prop.property_id, prop.owner)

    def get(self, property_id: int) -> Property | None:
        """Get the full property record."""
        with self._lock:
            return self.properties.get(property_id)

    def transfer_ownership(self, property_id: int, new_owner: str) -> None:
        """Hand a property over to ``new_owner``."""
        with self._lock:
            prop = self._require(property_id)
            previous = prop.owner
            prop.owner = new_owner
        logger.info("Property %s transferred from %s to %s", property_id, previous, new_owner)

    def set_status(self, property_id: int, status: PropertyStatus) -> None:
        """Change the status of a property."""
        with self._lock:
            prop = self._require(property_id)
            prop.status = status
        logger.info("Property %s status set to %s", property_id, status.value)

    def _require(self, property_id: int) -> Property:
        prop = self.properties.get(property_id)
        if prop is None:
            raise PropertyNotRegisteredError(f"Property {property_id} not found")
        return prop

    def summary(self) -> dict[str, int]:
        """Return property counts by status."""
        counts = {status.value: 0 for status in PropertyStatus}
        with self._lock:
            for prop in self.properties.values():
                counts[prop.status.value] += 1
        return counts
