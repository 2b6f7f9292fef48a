"""Use request parameter generator."""

from __future__ import annotations

from dataclasses import dataclass

from property_use.generators.base import BaseGenerator


@dataclass
class UseRequestDraft:
    """Arguments for a ``request_temporary_use`` call."""

    purpose: str
    duration: int
    requester: str


class UseRequestGenerator(BaseGenerator):
    """Generate plausible temporary use purposes, durations and requesters."""

    PURPOSES = [
        "Community garden",
        "Art exhibition",
        "Farmers market",
        "Pop-up library",
        "Youth sports practice",
        "Neighborhood meeting",
        "Food bank distribution",
        "Outdoor cinema",
    ]

    DURATION_RANGE = (10, 1000)  # blocks

    def __init__(self, seed: int | None = None, requesters: list[str] | None = None) -> None:
        super().__init__(seed)
        self.requesters = requesters

    def purpose(self) -> str:
        """Return a purpose, occasionally a free-text one."""
        if self.rng.random() < 0.8:
            return self.rng.choice(self.PURPOSES)
        return self.fake.sentence(nb_words=4).rstrip(".")

    def generate(self) -> UseRequestDraft:
        """Generate the arguments for one request."""
        return UseRequestDraft(
            purpose=self.purpose(),
            duration=self.rng.randint(*self.DURATION_RANGE),
            requester=self.rng.choice(self.requesters) if self.requesters else self.principal(),
        )
