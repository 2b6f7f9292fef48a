"""Base generator class for synthetic workload generators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker

# Crockford base32, as used by ledger principal addresses
PRINCIPAL_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"


class BaseGenerator(ABC):
    """Base class for all generators.

    Provides a seeded Faker instance and a private ``random.Random`` so
    that two generators built with the same seed produce the same data.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    """

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        self.fake = Faker(locale)
        self.rng = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)

    def principal(self) -> str:
        """Return a random testnet-style principal (``ST`` + 39 characters)."""
        return "ST" + "".join(self.rng.choice(PRINCIPAL_ALPHABET) for _ in range(39))
