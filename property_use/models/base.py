"""Base models shared across the package."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Event:
    """Standard event envelope for audit publishing."""

    event_id: str
    event_type: str  # entity.action (e.g., use_request.created)
    event_time: datetime
    source: str  # Service/system that generated
    subject: str  # Entity key affected ("<property_id>-<use_id>")
    data: dict
    metadata: dict = field(default_factory=dict)
