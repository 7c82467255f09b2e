"""Seeded rental simulation for the rental engine.

Runs a batch of rental requests against a :class:`RentalManager`.  Each
issued rental drives a number of journeys whose lengths are drawn from a
per-call ``numpy.random.Generator``, is terminated, and the returned car
is refuelled so it can be issued again.  Results are fully reproducible
for a given seed and the global random state is never touched.
"""

from __future__ import annotations

from datetime import date
from typing import Any

import numpy as np
from numpy.random import Generator

from rental_engine.core.exceptions import InvalidArgumentError
from rental_engine.core.licence import DrivingLicence
from rental_engine.core.rental import RentalManager


def simulate_rentals(
    manager: RentalManager,
    requests: list[tuple[DrivingLicence, str]],
    trips_per_rental: int,
    max_km: int = 300,
    seed: int = 42,
    today: date | None = None,
) -> dict[str, Any]:
    """Run each ``(licence, car type)`` request through the manager.

    Requests are handled in order.  A refused request is counted and
    skipped.  An issued rental drives ``trips_per_rental`` journeys of
    ``rng.integers(1, max_km, endpoint=True)`` kilometres each, then the
    rental is terminated and the car topped back up.

    Args:
        manager: Fleet to rent from.
        requests: Ordered ``(licence, type_tag)`` pairs.
        trips_per_rental: Journeys driven per issued rental (>= 1).
        max_km: Longest possible journey in kilometres (>= 1).
        seed: Seed for the journey-length generator.
        today: Reference date for eligibility checks.

    Returns:
        Dictionary with keys:
            issued         -- number of requests granted
            refused        -- number of requests refused
            total_km       -- kilometres driven across all rentals
            fuel_consumed  -- fuel units consumed across all rentals
            fuel_owed      -- ``{licence_number: int}`` per granted request

    Raises:
        InvalidArgumentError: If trips_per_rental < 1 or max_km < 1.
    """
    if trips_per_rental < 1:
        raise InvalidArgumentError("trips_per_rental must be >= 1.")
    if max_km < 1:
        raise InvalidArgumentError("max_km must be >= 1.")

    rng: Generator = np.random.default_rng(seed)

    issued = 0
    refused = 0
    total_km = 0
    fuel_consumed = 0
    fuel_owed: dict[str, int] = {}

    for licence, type_tag in requests:
        if not manager.issue_car(licence, type_tag, today=today):
            refused += 1
            continue
        issued += 1

        car = manager.get_car(licence)
        distances = rng.integers(1, max_km, size=trips_per_rental, endpoint=True)
        for km in distances:
            total_km += int(km)
            fuel_consumed += car.drive(int(km))

        owed = manager.terminate_rental(licence)
        fuel_owed[licence.number] = fuel_owed.get(licence.number, 0) + owed
        car.add_fuel(car.fuel_needed())

    return {
        "issued": issued,
        "refused": refused,
        "total_km": total_km,
        "fuel_consumed": fuel_consumed,
        "fuel_owed": fuel_owed,
    }
