"""Bounded car factory for the rental engine.

The factory mints cars of a requested kind, each carrying a freshly
generated registration, and refuses any request that would take the
number of cars ever created for that kind past its configured cap.
"""

from __future__ import annotations

import logging
from collections import defaultdict

from rental_engine.core.car import Car, car_kind
from rental_engine.core.exceptions import (
    CapacityExceededError,
    ExhaustionError,
    InvalidArgumentError,
)
from rental_engine.core.registration import RegistrationGenerator
from rental_engine.core.restrictions import RestrictionConfig

logger = logging.getLogger(__name__)


class CarFactory:
    """Creates cars up to a per-type instance cap.

    Attributes:
        restrictions: Source of the instance caps.
        registrations: Generator supplying each car's registration.
    """

    __slots__ = ("restrictions", "registrations", "_created")

    def __init__(
        self,
        restrictions: RestrictionConfig | None = None,
        registrations: RegistrationGenerator | None = None,
    ) -> None:
        self.restrictions: RestrictionConfig = restrictions or RestrictionConfig()
        self.registrations: RegistrationGenerator = (
            registrations or RegistrationGenerator()
        )
        self._created: dict[str, int] = defaultdict(int)

    def created(self, type_tag: str) -> int:
        """Number of cars of *type_tag* this factory has ever created."""
        return self._created[car_kind(type_tag).name]

    def create(self, type_tag: str, count: int) -> list[Car]:
        """Create *count* new cars of the given type.

        The cap and the remaining registration space are checked before
        any car is built, so a refused request creates nothing.

        Args:
            type_tag: Case-insensitive car type ("SMALL" or "LARGE").
            count: Number of cars to create (> 0).

        Returns:
            The new cars, each with a full tank and not rented.

        Raises:
            InvalidArgumentError: If the type is unknown or count <= 0.
            CapacityExceededError: If the request would exceed the cap.
            ExhaustionError: If too few registrations remain for the request.
        """
        kind = car_kind(type_tag)
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise InvalidArgumentError(
                f"Cannot create {count!r} cars of type {kind.name}; count must be > 0."
            )

        cap = self.restrictions.instance_cap(kind.name)
        existing = self._created[kind.name]
        if cap is not None and existing + count > cap:
            raise CapacityExceededError(
                f"Creating {count} {kind.name} cars would exceed the limit of {cap} "
                f"({existing} already created)."
            )
        remaining = self.registrations.capacity - self.registrations.issued
        if count > remaining:
            raise ExhaustionError(
                f"Only {remaining} registrations remain; cannot create {count} cars."
            )

        cars: list[Car] = []
        for _ in range(count):
            cars.append(Car(registration=self.registrations.next(), kind=kind))
            self._created[kind.name] += 1

        logger.info(
            "Created %d %s cars (%d in total)",
            count,
            kind.name,
            self._created[kind.name],
        )
        return cars
