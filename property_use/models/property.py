"""Property models as seen from the temporary-use workflow."""

from dataclasses import dataclass

from property_use.models.enums import PropertyStatus, PropertyType


@dataclass
class Property:
    """Registered property.

    Only ``owner`` and ``status`` matter to the workflow; the remaining
    attributes are descriptive and owned by the registry.
    """

    property_id: int
    owner: str
    status: PropertyStatus = PropertyStatus.VACANT
    location: str = ""
    property_type: PropertyType = PropertyType.BUILDING
    size: int = 0  # Square meters
    registration_block: int = 0

    def view(self) -> "PropertyView":
        """Return the read-only projection handed to the workflow."""
        return PropertyView(owner=self.owner, status=self.status)


@dataclass(frozen=True)
class PropertyView:
    """Current owner and status of a property at lookup time."""

    owner: str
    status: PropertyStatus

    @property
    def is_vacant(self) -> bool:
        return self.status == PropertyStatus.VACANT
