"""Core modules for the rental engine."""

from rental_engine.core.car import KINDS, LARGE, SMALL, Car, CarKind, car_kind
from rental_engine.core.exceptions import (
    CapacityExceededError,
    ExhaustionError,
    InconsistentStateError,
    InvalidArgumentError,
    RentalError,
)
from rental_engine.core.factory import CarFactory
from rental_engine.core.licence import DrivingLicence, LicenceIssuer
from rental_engine.core.licence_number import LicenceNumberGenerator
from rental_engine.core.name import Name
from rental_engine.core.registration import Registration, RegistrationGenerator
from rental_engine.core.rental import RentalManager
from rental_engine.core.restrictions import RestrictionConfig
from rental_engine.core.simulation import simulate_rentals

__all__ = [
    "CapacityExceededError",
    "Car",
    "CarFactory",
    "CarKind",
    "DrivingLicence",
    "ExhaustionError",
    "InconsistentStateError",
    "InvalidArgumentError",
    "KINDS",
    "LARGE",
    "LicenceIssuer",
    "LicenceNumberGenerator",
    "Name",
    "Registration",
    "RegistrationGenerator",
    "RentalError",
    "RentalManager",
    "RestrictionConfig",
    "SMALL",
    "car_kind",
    "simulate_rentals",
]
