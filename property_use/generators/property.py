"""Property generator for registry fixtures."""

from __future__ import annotations

from typing import Iterator

from property_use.generators.base import BaseGenerator
from property_use.models import Property, PropertyStatus, PropertyType


class PropertyGenerator(BaseGenerator):
    """Generate synthetic registered properties."""

    PROPERTY_TYPES = list(PropertyType)
    NON_VACANT = [PropertyStatus.OCCUPIED, PropertyStatus.UNDER_MAINTENANCE]

    # Size ranges by property type (square meters)
    SIZE_RANGES = {
        PropertyType.BUILDING: (300, 5000),
        PropertyType.LAND: (500, 20000),
        PropertyType.HOUSE: (60, 400),
        PropertyType.WAREHOUSE: (800, 10000),
    }

    def __init__(
        self,
        seed: int | None = None,
        vacancy_rate: float = 0.7,
        owners: list[str] | None = None,
    ) -> None:
        """Initialize property generator.

        Parameters
        ----------
        seed : int | None
            Random seed for reproducibility.
        vacancy_rate : float
            Share of generated properties that are vacant.
        owners : list[str] | None
            Owners to draw from; a fresh principal per property if omitted.
        """
        super().__init__(seed)
        self.vacancy_rate = vacancy_rate
        self.owners = owners
        self._next_id = 1

    def generate(self, registration_block: int = 0) -> Property:
        """Generate a property with the next sequential id.

        Parameters
        ----------
        registration_block : int
            Block height recorded as the registration date.

        Returns
        -------
        Property
            Generated property.
        """
        property_type = self.rng.choice(self.PROPERTY_TYPES)
        if self.rng.random() < self.vacancy_rate:
            status = PropertyStatus.VACANT
        else:
            status = self.rng.choice(self.NON_VACANT)

        prop = Property(
            property_id=self._next_id,
            owner=self.rng.choice(self.owners) if self.owners else self.principal(),
            status=status,
            location=self.fake.street_address(),
            property_type=property_type,
            size=self.rng.randint(*self.SIZE_RANGES[property_type]),
            registration_block=registration_block,
        )
        self._next_id += 1
        return prop

    def generate_batch(self, count: int, registration_block: int = 0) -> Iterator[Property]:
        """Generate multiple properties.

        Parameters
        ----------
        count : int
            Number of properties to generate.
        registration_block : int
            Block height recorded as the registration date.

        Yields
        ------
        Property
            Generated properties.
        """
        for _ in range(count):
            yield self.generate(registration_block)
