"""Temporary use request model."""

from dataclasses import dataclass, replace

from property_use.models.enums import UseStatus


@dataclass(frozen=True)
class UseRequest:
    """Time-bounded request to use a property.

    Records are frozen; a status change produces a new record through
    ``with_status`` and the store swaps it in under the same key.
    """

    property_id: int
    use_id: int
    requester: str
    purpose: str
    start_block: int
    end_block: int
    status: UseStatus = UseStatus.PENDING

    @property
    def key(self) -> tuple[int, int]:
        return (self.property_id, self.use_id)

    @property
    def duration(self) -> int:
        return self.end_block - self.start_block

    def with_status(self, status: UseStatus) -> "UseRequest":
        """Return a copy of this request carrying ``status``."""
        return replace(self, status=status)
