"""Temporary-use contract: the public call surface of the workflow.

Operation names follow the published interface (``request_temporary_use``,
``approve_temporary_use``, ``get_temporary_use``, ``get_active_uses``).
The caller identity and the current block height are explicit arguments;
the hosting layer supplies them per call.
"""

import logging

from property_use.config import PropertyUseConfig
from property_use.events import EventJournal
from property_use.exceptions import SinkError
from property_use.logging import configure_logging
from property_use.models import (
    ApproveUseError,
    Event,
    RequestUseError,
    Result,
    UseRequest,
)
from property_use.query import QueryInterface
from property_use.registry import PropertyRegistry
from property_use.sinks import Sink
from property_use.store import UseCounter, UseRequestStore
from property_use.workflow import WorkflowEngine

logger = logging.getLogger(__name__)

DEFAULT_TOPIC = "dev.property-use.use-requests"


class TemporaryUseContract:
    """Wire registry, stores, workflow and queries behind one object."""

    def __init__(self, registry: PropertyRegistry, topic: str = DEFAULT_TOPIC) -> None:
        self.registry = registry
        self.topic = topic
        self.counter = UseCounter()
        self.store = UseRequestStore()
        self.journal = EventJournal()
        self.engine = WorkflowEngine(registry, self.counter, self.store, self.journal)
        self.queries = QueryInterface(self.counter, self.store)

    @classmethod
    def from_config(cls, config: PropertyUseConfig, registry: PropertyRegistry) -> "TemporaryUseContract":
        """Create a contract publishing to the topic named by ``config``.

        Also applies ``config.log_level`` and ``config.log_format`` to the
        process logging setup.
        """
        configure_logging(config)
        return cls(registry, topic=config.use_requests_topic)

    def request_temporary_use(
        self,
        property_id: int,
        purpose: str,
        duration: int,
        requester: str,
        current_height: int,
    ) -> Result[int, RequestUseError]:
        return self.engine.request_use(property_id, purpose, duration, requester, current_height)

    def approve_temporary_use(
        self,
        property_id: int,
        use_id: int,
        caller: str,
    ) -> Result[bool, ApproveUseError]:
        return self.engine.approve_use(property_id, use_id, caller)

    def get_temporary_use(self, property_id: int, use_id: int) -> UseRequest | None:
        return self.queries.get_use(property_id, use_id)

    def get_active_uses(self, property_id: int) -> int:
        """Total requests ever issued for the property, whatever their status."""
        return self.queries.get_active_uses(property_id)

    def list_temporary_uses(self, property_id: int) -> list[UseRequest]:
        return self.queries.list_uses(property_id)

    def events(self, property_id: int | None = None) -> list[Event]:
        """Audit events recorded so far."""
        return self.journal.events(property_id)

    def publish(self, sink: Sink) -> int:
        """Send unpublished audit events to ``sink``.

        On failure the events are queued again so a later call can retry,
        and the ``SinkError`` propagates.

        Returns
        -------
        int
            Number of events handed to the sink.
        """
        pending = self.journal.drain()
        if not pending:
            return 0
        try:
            sink.write_batch(self.topic, pending)
        except SinkError:
            self.journal.requeue(pending)
            raise
        logger.info("Published %d events to %s", len(pending), self.topic)
        return len(pending)
