"""Custom exception hierarchy for property-use.

Business rule failures (unknown property, not vacant, not the owner) are
returned as ``Err`` results and never raised. These exceptions signal
programmer or infrastructure errors.
"""


class PropertyUseError(Exception):
    """Base exception for all property-use errors."""


class EntityNotFoundError(PropertyUseError):
    """Raised when a referenced entity does not exist."""


class PropertyNotRegisteredError(EntityNotFoundError):
    """Raised when a registry-side operation targets an unknown property."""


class UseRequestMissingError(EntityNotFoundError):
    """Raised when a store mutation targets a use request that was never inserted."""


class DuplicateEntityError(PropertyUseError):
    """Raised when an entity is inserted under a key that is already taken."""


class DuplicatePropertyError(DuplicateEntityError):
    """Raised when a property id is registered twice."""


class DuplicateUseRequestError(DuplicateEntityError):
    """Raised when a (property_id, use_id) pair is inserted twice."""


class ConfigurationError(PropertyUseError):
    """Raised when configuration is invalid or missing."""


class SinkError(PropertyUseError):
    """Raised when a sink operation fails."""
