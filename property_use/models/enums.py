"""Enumeration types for properties, use requests and workflow errors."""

from enum import Enum, IntEnum


class PropertyStatus(str, Enum):
    VACANT = "vacant"
    OCCUPIED = "occupied"
    UNDER_MAINTENANCE = "under-maintenance"


class PropertyType(str, Enum):
    BUILDING = "building"
    LAND = "land"
    HOUSE = "house"
    WAREHOUSE = "warehouse"


class UseStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"


class RequestUseError(IntEnum):
    """Error codes returned by ``request_temporary_use``."""

    PROPERTY_NOT_FOUND = 1
    PROPERTY_NOT_VACANT = 2


class ApproveUseError(IntEnum):
    """Error codes returned by ``approve_temporary_use``.

    Code 2 means something different here than in ``RequestUseError``;
    codes are scoped per operation.
    """

    PROPERTY_NOT_FOUND = 1
    USE_REQUEST_NOT_FOUND = 2
    NOT_AUTHORIZED = 3
