"""Pytest configuration and fixtures."""

import logging

import pytest

from property_use.contract import TemporaryUseContract
from property_use.logging import PACKAGE_LOGGER, ContextFormatter, JsonFormatter
from property_use.models import Property, PropertyStatus, PropertyType
from property_use.registry import InMemoryPropertyRegistry

OWNER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
STRANGER = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handlers and levels installed by setup_logging during a test."""
    root = logging.getLogger()
    package = logging.getLogger(PACKAGE_LOGGER)
    root_level, package_level = root.level, package.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, (ContextFormatter, JsonFormatter)):
            root.removeHandler(handler)
    root.setLevel(root_level)
    package.setLevel(package_level)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def owner() -> str:
    """Principal owning the sample property."""
    return OWNER


@pytest.fixture
def stranger() -> str:
    """Principal with no rights on the sample property."""
    return STRANGER


@pytest.fixture
def sample_property() -> Property:
    """Vacant building owned by ``owner``."""
    return Property(
        property_id=1,
        owner=OWNER,
        status=PropertyStatus.VACANT,
        location="123 Main St",
        property_type=PropertyType.BUILDING,
        size=2500,
        registration_block=90,
    )


@pytest.fixture
def registry(sample_property: Property) -> InMemoryPropertyRegistry:
    """Registry holding the sample property."""
    registry = InMemoryPropertyRegistry()
    registry.register(sample_property)
    return registry


@pytest.fixture
def contract(registry: InMemoryPropertyRegistry) -> TemporaryUseContract:
    """Fresh contract over the sample registry."""
    return TemporaryUseContract(registry)
