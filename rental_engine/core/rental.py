"""Rental manager for the rental engine.

The manager owns the pool of available cars and the licence-to-car
rental map.  Issuing a car is a policy decision: a licence that fails any
rule simply gets ``False`` back.  Exceptions are reserved for malformed
calls and for a broken internal invariant.

Issuance guards, all of which must hold:

- the licence is a full licence;
- the licence holds no active rental;
- years held >= the type's ``min_licence_years`` (0 when unset);
- holder age >= the type's ``min_age`` (skipped when unset);
- the pool holds an unrented car of the type with a full tank.

The first matching car in pool order is chosen.
"""

from __future__ import annotations

import logging
from datetime import date

from rental_engine.core.car import Car
from rental_engine.core.exceptions import InconsistentStateError, InvalidArgumentError
from rental_engine.core.factory import CarFactory
from rental_engine.core.licence import DrivingLicence
from rental_engine.core.restrictions import RestrictionConfig, normalise_tag

logger = logging.getLogger(__name__)


class RentalManager:
    """Fleet context: available-car pool, active rentals and rules.

    Attributes:
        restrictions: Age, licence-age and instance-cap rules.
        factory: Factory used to mint new cars.
    """

    __slots__ = ("restrictions", "factory", "_available", "_rentals")

    def __init__(
        self,
        restrictions: RestrictionConfig | None = None,
        factory: CarFactory | None = None,
    ) -> None:
        """Initialise an empty fleet.

        Args:
            restrictions: Rules to enforce.  Defaults to
                :meth:`RestrictionConfig.with_defaults`.
            factory: Car factory.  Defaults to a factory bound to
                *restrictions* with its own registration generator.
        """
        if restrictions is None:
            restrictions = RestrictionConfig.with_defaults()
        self.restrictions: RestrictionConfig = restrictions
        self.factory: CarFactory = factory or CarFactory(self.restrictions)
        self._available: list[Car] = []
        self._rentals: dict[DrivingLicence, Car] = {}

    # -- Inventory -------------------------------------------------------------

    def create_cars(self, type_tag: str, count: int) -> list[Car]:
        """Create *count* cars of *type_tag* and add them to the pool.

        Raises:
            InvalidArgumentError: If the type is unknown or count <= 0.
            CapacityExceededError: If the type's instance cap would be exceeded.
        """
        cars = self.factory.create(type_tag, count)
        self._available.extend(cars)
        return cars

    def available_cars(self, type_tag: str) -> list[Car]:
        """Cars of *type_tag* currently in the pool, in pool order."""
        tag = normalise_tag(type_tag)
        return [car for car in self._available if car.type_tag == tag]

    def available_count(self, type_tag: str) -> int:
        return len(self.available_cars(type_tag))

    def rented_cars(self) -> list[Car]:
        return list(self._rentals.values())

    def get_car(self, licence: DrivingLicence) -> Car | None:
        """Car rented under *licence*, or ``None`` if it holds no rental."""
        if licence is None:
            raise InvalidArgumentError("licence must not be None.")
        return self._rentals.get(licence)

    # -- Rules -----------------------------------------------------------------

    def _is_eligible(self, licence: DrivingLicence, tag: str, today: date) -> bool:
        if not licence.is_full:
            logger.debug("Refused %s: provisional licence", licence.number)
            return False
        if licence in self._rentals:
            logger.debug("Refused %s: already renting", licence.number)
            return False
        if licence.years_held(today) < self.restrictions.min_licence_years(tag):
            logger.debug("Refused %s: licence not held long enough", licence.number)
            return False
        min_age = self.restrictions.min_age(tag)
        if min_age and licence.age(today) < min_age:
            logger.debug("Refused %s: holder under %d", licence.number, min_age)
            return False
        return True

    def _find_issuable(self, tag: str) -> int | None:
        for index, car in enumerate(self._available):
            if car.type_tag == tag and not car.rented and car.is_fuel_full():
                return index
        return None

    # -- Transitions -----------------------------------------------------------

    def issue_car(
        self, licence: DrivingLicence, type_tag: str, today: date | None = None
    ) -> bool:
        """Try to rent a car of *type_tag* to the holder of *licence*.

        Args:
            licence: Licence of the prospective driver.
            type_tag: Case-insensitive car type.
            today: Reference date for age checks.  Defaults to today.

        Returns:
            ``True`` if a car was issued, ``False`` if any rule refused it.

        Raises:
            InvalidArgumentError: If *licence* or *type_tag* is missing.
        """
        if licence is None:
            raise InvalidArgumentError("licence must not be None.")
        tag = normalise_tag(type_tag)
        today = today or date.today()

        if not self._is_eligible(licence, tag, today):
            return False

        index = self._find_issuable(tag)
        if index is None:
            logger.debug("Refused %s: no %s car available", licence.number, tag)
            return False

        car = self._available.pop(index)
        car.rented = True
        self._rentals[licence] = car
        logger.info("Issued %s to %s", car, licence.number)
        return True

    def terminate_rental(self, licence: DrivingLicence) -> int:
        """End the rental held under *licence* and return the car to the pool.

        Returns:
            Fuel units needed to refill the returned car, or 0 if the
            licence held no rental.

        Raises:
            InvalidArgumentError: If *licence* is missing.
            InconsistentStateError: If the rented car is flagged as not rented.
        """
        if licence is None:
            raise InvalidArgumentError("licence must not be None.")
        car = self._rentals.get(licence)
        if car is None:
            return 0
        if not car.rented:
            raise InconsistentStateError(
                f"Car {car} is held under licence {licence.number} but is not "
                f"flagged as rented."
            )

        del self._rentals[licence]
        car.rented = False
        self._available.append(car)
        fuel_owed = car.fuel_needed()
        logger.info(
            "Terminated rental of %s for %s, %d fuel owed",
            car,
            licence.number,
            fuel_owed,
        )
        return fuel_owed

    def __repr__(self) -> str:
        return (
            f"RentalManager(available={len(self._available)}, "
            f"rented={len(self._rentals)})"
        )
