"""Tests for the property registry adapter."""

import threading

import pytest

from property_use.exceptions import DuplicatePropertyError, PropertyNotRegisteredError
from property_use.models import Property, PropertyStatus, PropertyView
from property_use.registry import InMemoryPropertyRegistry, PropertyRegistry


class TestInMemoryPropertyRegistry:
    """Tests for InMemoryPropertyRegistry."""

    def test_satisfies_protocol(self) -> None:
        assert isinstance(InMemoryPropertyRegistry(), PropertyRegistry)

    def test_lookup(self, registry: InMemoryPropertyRegistry, owner: str) -> None:
        view = registry.lookup(1)

        assert view == PropertyView(owner=owner, status=PropertyStatus.VACANT)
        assert view.is_vacant

    def test_lookup_missing(self, registry: InMemoryPropertyRegistry) -> None:
        assert registry.lookup(999) is None

    def test_lookup_returns_snapshot(self, registry: InMemoryPropertyRegistry, stranger: str) -> None:
        """A view taken before a transfer keeps the old owner."""
        view = registry.lookup(1)
        registry.transfer_ownership(1, stranger)

        assert view.owner != stranger
        assert registry.lookup(1).owner == stranger

    def test_register_duplicate_fails(
        self, registry: InMemoryPropertyRegistry, sample_property: Property
    ) -> None:
        with pytest.raises(DuplicatePropertyError, match="Property 1 already registered"):
            registry.register(sample_property)

    def test_get(self, registry: InMemoryPropertyRegistry, sample_property: Property) -> None:
        assert registry.get(1) is sample_property
        assert registry.get(2) is None

    def test_set_status(self, registry: InMemoryPropertyRegistry) -> None:
        registry.set_status(1, PropertyStatus.OCCUPIED)

        assert registry.lookup(1).status == PropertyStatus.OCCUPIED
        assert not registry.lookup(1).is_vacant

    def test_unknown_property_operations_fail(self, registry: InMemoryPropertyRegistry) -> None:
        with pytest.raises(PropertyNotRegisteredError, match="Property 5 not found"):
            registry.set_status(5, PropertyStatus.VACANT)
        with pytest.raises(PropertyNotRegisteredError):
            registry.transfer_ownership(5, "ST000")

    def test_summary(self, registry: InMemoryPropertyRegistry, stranger: str) -> None:
        registry.register(Property(property_id=2, owner=stranger, status=PropertyStatus.OCCUPIED))

        assert registry.summary() == {"vacant": 1, "occupied": 1, "under-maintenance": 0}

    def test_reads_during_registration(self, registry: InMemoryPropertyRegistry, stranger: str) -> None:
        """Summaries and gets stay consistent while another thread registers."""
        errors: list[Exception] = []
        done = threading.Event()

        def writer() -> None:
            for property_id in range(2, 2002):
                registry.register(Property(property_id=property_id, owner=stranger))
            done.set()

        def reader() -> None:
            try:
                while not done.is_set():
                    assert sum(registry.summary().values()) >= 1
                    assert registry.get(1) is not None
            except Exception as exc:
                errors.append(exc)

        threads = [threading.Thread(target=writer)] + [threading.Thread(target=reader) for _ in range(3)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert sum(registry.summary().values()) == 2001
