"""CLI entrypoint for the car rental simulation engine."""

from __future__ import annotations

import logging
import sys
from datetime import date

from rental_engine import __version__
from rental_engine.config import load_restrictions
from rental_engine.core.licence import LicenceIssuer
from rental_engine.core.rental import RentalManager
from rental_engine.core.simulation import simulate_rentals


def main() -> None:
    """Run a demonstration of the rental engine."""
    logging.basicConfig(
        level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s"
    )

    print(f"Car Rental Simulation Engine v{__version__}")
    print("=" * 56)

    # -- Load restrictions and build the fleet --------------------------------
    restrictions = load_restrictions()
    manager = RentalManager(restrictions)
    manager.create_cars("small", 5)
    manager.create_cars("large", 3)
    print(
        f"\nFleet: {manager.available_count('small')} small, "
        f"{manager.available_count('large')} large"
    )

    # -- Issue licences --------------------------------------------------------
    issuer = LicenceIssuer()
    today = date.today()
    licences = [
        issuer.issue("John", "Wick", date(1975, 4, 10), date(2000, 4, 10), True),
        issuer.issue("Helen", "Wick", date(1978, 2, 1), date(1996, 6, 1), True),
        issuer.issue(
            "Jane", "Doe", date(today.year - 19, 1, 1), date(today.year - 1, 1, 1), True
        ),
        issuer.issue("Sam", "Lee", date(1990, 5, 5), date(today.year, 1, 1), False),
    ]
    print("\nLicences:")
    for licence in licences:
        print(f"  {licence}")

    # -- Simulate rentals ------------------------------------------------------
    requests = [
        (licences[0], "large"),
        (licences[1], "small"),
        (licences[2], "small"),
        (licences[3], "small"),
    ]
    result = simulate_rentals(
        manager, requests, trips_per_rental=4, seed=2026, today=today
    )

    print("-" * 56)
    print(f"\n  {'Licence':<14}  {'Fuel owed':>9}")
    print(f"  {'-------':<14}  {'---------':>9}")
    for number, owed in result["fuel_owed"].items():
        print(f"  {number:<14}  {owed:9d}")

    print(
        f"\nIssued {result['issued']}, refused {result['refused']}; "
        f"{result['total_km']} km driven, {result['fuel_consumed']} fuel used."
    )


if __name__ == "__main__":
    sys.exit(main() or 0)
