"""Car model for the rental engine.

Each car kind defines a fixed fuel capacity and a consumption rate in
kilometres per fuel unit.  A kind may also define a stepped rate that
kicks in once a single journey passes a distance threshold.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from rental_engine.core.exceptions import InvalidArgumentError
from rental_engine.core.registration import Registration

# ---------------------------------------------------------------------------
# Car kinds
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CarKind:
    """Immutable description of a car kind.

    Attributes:
        name: Upper-case type tag (e.g. "SMALL").
        fuel_capacity: Tank size in whole fuel units (> 0).
        consumption_rate: Kilometres driven per fuel unit (> 0).
        step_rate: Kilometres per fuel unit charged on the distance beyond
            ``step_threshold``.  ``None`` disables the step.
        step_threshold: Journey length in kilometres after which the
            stepped rate applies.
    """

    name: str
    fuel_capacity: int
    consumption_rate: int
    step_rate: int | None = None
    step_threshold: int = 0

    def __post_init__(self) -> None:
        if not self.name or self.name != self.name.upper():
            raise InvalidArgumentError("Kind name must be non-empty and upper-case.")
        if self.fuel_capacity <= 0:
            raise InvalidArgumentError("fuel_capacity must be > 0.")
        if self.consumption_rate <= 0:
            raise InvalidArgumentError("consumption_rate must be > 0.")
        if self.step_rate is not None and self.step_rate <= 0:
            raise InvalidArgumentError("step_rate must be > 0.")
        if self.step_threshold < 0:
            raise InvalidArgumentError("step_threshold must be >= 0.")

    def fuel_for(self, kilometres: int) -> int:
        """Fuel units consumed by a single journey of *kilometres* (> 0).

        The base rate is charged on the whole distance; a stepped kind adds
        a further charge on the distance beyond its threshold.  Each term
        is rounded up to a whole unit.
        """
        fuel = math.ceil(kilometres / self.consumption_rate)
        if self.step_rate is not None and kilometres > self.step_threshold:
            fuel += math.ceil((kilometres - self.step_threshold) / self.step_rate)
        return fuel


# Pre-defined kinds -----------------------------------------------------------

SMALL = CarKind(name="SMALL", fuel_capacity=49, consumption_rate=20)
LARGE = CarKind(
    name="LARGE", fuel_capacity=60, consumption_rate=10, step_rate=15, step_threshold=50
)

KINDS: dict[str, CarKind] = {kind.name: kind for kind in (SMALL, LARGE)}


def car_kind(type_tag: str) -> CarKind:
    """Resolve a case-insensitive type tag to its :class:`CarKind`.

    Raises:
        InvalidArgumentError: If the tag is missing or unrecognised.
    """
    if not type_tag or not isinstance(type_tag, str):
        raise InvalidArgumentError("Car type must be a non-empty string.")
    try:
        return KINDS[type_tag.strip().upper()]
    except KeyError:
        raise InvalidArgumentError(f"Unknown car type {type_tag!r}.") from None


# ---------------------------------------------------------------------------
# Car state
# ---------------------------------------------------------------------------


class Car:
    """A rentable car with fuel tracking.

    Fuel remaining never exceeds capacity but may drop below zero, which
    records fuel owed by the driver.

    Attributes:
        registration: Unique registration plate.
        kind: The car's kind.
        fuel_remaining: Current fuel level in whole units.
        rented: Whether the car is currently out on rental.
    """

    __slots__ = ("registration", "kind", "_fuel_remaining", "rented")

    def __init__(self, registration: Registration, kind: CarKind) -> None:
        self.registration: Registration = registration
        self.kind: CarKind = kind
        self._fuel_remaining: int = kind.fuel_capacity
        self.rented: bool = False

    @property
    def fuel_capacity(self) -> int:
        return self.kind.fuel_capacity

    @property
    def fuel_remaining(self) -> int:
        return self._fuel_remaining

    def _set_fuel_remaining(self, value: int) -> None:
        self._fuel_remaining = min(value, self.kind.fuel_capacity)

    def is_fuel_full(self) -> bool:
        return self._fuel_remaining == self.kind.fuel_capacity

    def fuel_needed(self) -> int:
        """Fuel units required to fill the tank, including any fuel owed."""
        if self._fuel_remaining < 0:
            return self.kind.fuel_capacity + abs(self._fuel_remaining)
        return self.kind.fuel_capacity - self._fuel_remaining

    def add_fuel(self, amount: int) -> int:
        """Add fuel to the tank.

        Args:
            amount: Fuel units offered.  Non-positive amounts are ignored.

        Returns:
            Fuel units actually added; never more than needed to fill up.
        """
        if amount <= 0:
            return 0
        if self._fuel_remaining + amount > self.kind.fuel_capacity:
            added = self.kind.fuel_capacity - self._fuel_remaining
        else:
            added = amount
        self._set_fuel_remaining(self._fuel_remaining + added)
        return added

    def drive(self, kilometres: int) -> int:
        """Drive a single journey.

        Only a rented car consumes fuel.  Non-positive distances are
        ignored.

        Args:
            kilometres: Journey length.

        Returns:
            Fuel units consumed by the journey.
        """
        if kilometres <= 0 or not self.rented:
            return 0
        consumed = self.kind.fuel_for(kilometres)
        self._set_fuel_remaining(self._fuel_remaining - consumed)
        return consumed

    @property
    def type_tag(self) -> str:
        return self.kind.name

    def __str__(self) -> str:
        return f"{self.kind.name}[{self.registration}]"

    def __repr__(self) -> str:
        return (
            f"Car(registration={str(self.registration)!r}, kind={self.kind.name!r}, "
            f"fuel_remaining={self._fuel_remaining}, rented={self.rented})"
        )
