"""Temporary-use requests against a registry of properties."""

from property_use.contract import TemporaryUseContract
from property_use.models import ApproveUseError, Err, Ok, RequestUseError, UseRequest, UseStatus
from property_use.registry import InMemoryPropertyRegistry, PropertyRegistry

__version__ = "0.1.0"

__all__ = [
    "ApproveUseError",
    "Err",
    "InMemoryPropertyRegistry",
    "Ok",
    "PropertyRegistry",
    "RequestUseError",
    "TemporaryUseContract",
    "UseRequest",
    "UseStatus",
    "__version__",
]
