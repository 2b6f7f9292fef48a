"""Temporary-use request workflow."""

import logging

from property_use.events import (
    USE_REQUEST_APPROVED,
    USE_REQUEST_CREATED,
    EventJournal,
    use_request_event,
)
from property_use.models import (
    ApproveUseError,
    Err,
    Ok,
    RequestUseError,
    Result,
    UseRequest,
    UseStatus,
)
from property_use.registry import PropertyRegistry
from property_use.store import KeyedLock, UseCounter, UseRequestStore
from property_use.window import compute_window

logger = logging.getLogger(__name__)


class WorkflowEngine:
    """Create and approve temporary use requests.

    Each operation runs its whole read-check-write sequence under the
    target property's lock, so use ids stay gap-free and approvals are
    never lost to a concurrent write. Rejected calls never touch the
    counter, the store or the journal.

    Parameters
    ----------
    registry : PropertyRegistry
        Source of property owner and status.
    counter : UseCounter | None
        Use id counter (a fresh one by default).
    store : UseRequestStore | None
        Use request store (a fresh one by default).
    journal : EventJournal | None
        Audit journal (a fresh one by default).
    """

    def __init__(
        self,
        registry: PropertyRegistry,
        counter: UseCounter | None = None,
        store: UseRequestStore | None = None,
        journal: EventJournal | None = None,
    ) -> None:
        self.registry = registry
        self.counter = counter if counter is not None else UseCounter()
        self.store = store if store is not None else UseRequestStore()
        self.journal = journal if journal is not None else EventJournal()
        self._locks = KeyedLock()

    def request_use(
        self,
        property_id: int,
        purpose: str,
        duration: int,
        requester: str,
        current_height: int,
    ) -> Result[int, RequestUseError]:
        """Ask to use a vacant property for ``duration`` blocks.

        Returns
        -------
        Ok[int] | Err[RequestUseError]
            The new use id, or ``PROPERTY_NOT_FOUND`` / ``PROPERTY_NOT_VACANT``.
        """
        with self._locks.hold(property_id):
            prop = self.registry.lookup(property_id)
            if prop is None:
                return self._reject("request", property_id, RequestUseError.PROPERTY_NOT_FOUND)
            if not prop.is_vacant:
                return self._reject("request", property_id, RequestUseError.PROPERTY_NOT_VACANT)

            if duration <= 0:
                logger.warning(
                    "Accepting non-positive duration %d for property %s", duration, property_id
                )

            use_id = self.counter.next(property_id)
            start_block, end_block = compute_window(current_height, duration)
            request = UseRequest(
                property_id=property_id,
                use_id=use_id,
                requester=requester,
                purpose=purpose,
                start_block=start_block,
                end_block=end_block,
            )
            self.store.insert(request)
            self.journal.record(use_request_event(USE_REQUEST_CREATED, request, requester))

        logger.info(
            "Use request %d created for property %s by %s (blocks %d-%d)",
            use_id,
            property_id,
            requester,
            start_block,
            end_block,
            extra={"property_id": property_id, "use_id": use_id, "actor": requester},
        )
        return Ok(use_id)

    def approve_use(
        self,
        property_id: int,
        use_id: int,
        caller: str,
    ) -> Result[bool, ApproveUseError]:
        """Approve a use request on behalf of the property owner.

        Approving an already approved request succeeds again.

        Returns
        -------
        Ok[bool] | Err[ApproveUseError]
            ``Ok(True)``, or ``PROPERTY_NOT_FOUND`` / ``USE_REQUEST_NOT_FOUND`` /
            ``NOT_AUTHORIZED``.
        """
        with self._locks.hold(property_id):
            prop = self.registry.lookup(property_id)
            if prop is None:
                return self._reject("approval", property_id, ApproveUseError.PROPERTY_NOT_FOUND)

            current = self.store.get(property_id, use_id)
            if current is None:
                return self._reject("approval", property_id, ApproveUseError.USE_REQUEST_NOT_FOUND)

            if caller != prop.owner:
                return self._reject("approval", property_id, ApproveUseError.NOT_AUTHORIZED)

            approved = self.store.set_status(property_id, use_id, UseStatus.APPROVED)
            self.journal.record(
                use_request_event(USE_REQUEST_APPROVED, approved, caller, current.status)
            )

        verb = "re-approved" if current.status == UseStatus.APPROVED else "approved"
        logger.info(
            "Use request %d on property %s %s by %s",
            use_id,
            property_id,
            verb,
            caller,
            extra={"property_id": property_id, "use_id": use_id, "actor": caller},
        )
        return Ok(True)

    def _reject(self, operation: str, property_id: int, code: RequestUseError | ApproveUseError) -> Err:
        logger.info(
            "Rejected %s for property %s: %s (code %d)",
            operation,
            property_id,
            code.name,
            code.value,
            extra={"property_id": property_id, "error_code": code.value},
        )
        return Err(code)
