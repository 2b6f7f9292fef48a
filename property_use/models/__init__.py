"""Domain models for temporary property use."""

from property_use.models.base import Event
from property_use.models.enums import (
    ApproveUseError,
    PropertyStatus,
    PropertyType,
    RequestUseError,
    UseStatus,
)
from property_use.models.property import Property, PropertyView
from property_use.models.result import Err, Ok, Result
from property_use.models.use_request import UseRequest

__all__ = [
    "ApproveUseError",
    "Err",
    "Event",
    "Ok",
    "Property",
    "PropertyStatus",
    "PropertyType",
    "PropertyView",
    "RequestUseError",
    "Result",
    "UseRequest",
    "UseStatus",
]
