"""In-memory stores backing the temporary-use workflow."""

from property_use.store.counter import UseCounter
from property_use.store.locks import KeyedLock
from property_use.store.requests import UseRequestStore

__all__ = ["KeyedLock", "UseCounter", "UseRequestStore"]
