"""Synthetic properties and use requests for simulated workloads."""

from property_use.generators.property import PropertyGenerator
from property_use.generators.use_request import UseRequestDraft, UseRequestGenerator

__all__ = ["PropertyGenerator", "UseRequestDraft", "UseRequestGenerator"]
