"""Driving-licence model and issuing authority for the rental engine.

A :class:`DrivingLicence` is an immutable record.  Licences are minted by
a :class:`LicenceIssuer`, which owns the licence-number generator and
keeps every licence it has issued so they can be looked up by number.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from rental_engine.core.exceptions import InvalidArgumentError
from rental_engine.core.licence_number import LicenceNumberGenerator
from rental_engine.core.name import Name

logger = logging.getLogger(__name__)


def _check_fields(birth: date, issue: date, is_full: bool) -> None:
    if not isinstance(birth, date) or not isinstance(issue, date):
        raise InvalidArgumentError("birth and issue must be dates.")
    if issue < birth:
        raise InvalidArgumentError("issue date must not precede birth date.")
    if not isinstance(is_full, bool):
        raise InvalidArgumentError(f"is_full must be a bool, got {is_full!r}.")


@dataclass(frozen=True)
class DrivingLicence:
    """Immutable driving licence.

    Ages are computed by calendar-year subtraction, so a holder born in
    December counts a full year older on 1 January.

    Attributes:
        number: Generated licence number, e.g. ``"JW-1975-1"``.
        name: Normalised holder name.
        birth: Holder's date of birth.
        issue: Date the licence was issued.
        is_full: ``True`` for a full licence, ``False`` for provisional.
    """

    number: str
    name: Name
    birth: date
    issue: date
    is_full: bool

    def __post_init__(self) -> None:
        if not self.number:
            raise InvalidArgumentError("number must not be empty.")
        _check_fields(self.birth, self.issue, self.is_full)

    def age(self, today: date | None = None) -> int:
        """Holder's age in years as of *today* (defaults to the current date)."""
        today = today or date.today()
        return today.year - self.birth.year

    def years_held(self, today: date | None = None) -> int:
        """Years since issue as of *today* (defaults to the current date)."""
        today = today or date.today()
        return today.year - self.issue.year

    def __str__(self) -> str:
        return (
            f"{self.number}[{self.name.first_name}, {self.name.last_name}, "
            f"is full licence = {self.is_full}]"
        )


class LicenceIssuer:
    """Issues driving licences and remembers them by number."""

    __slots__ = ("numbers", "_licences")

    def __init__(self, numbers: LicenceNumberGenerator | None = None) -> None:
        self.numbers: LicenceNumberGenerator = numbers or LicenceNumberGenerator()
        self._licences: dict[str, DrivingLicence] = {}

    def issue(
        self,
        first_name: str,
        last_name: str,
        birth: date,
        issue: date,
        is_full: bool,
    ) -> DrivingLicence:
        """Issue a new licence.

        Args:
            first_name: Holder's first name (letters only, any case).
            last_name: Holder's last name (letters only, any case).
            birth: Date of birth.
            issue: Date of issue; must not precede *birth*.
            is_full: Whether the licence is a full licence.

        Returns:
            The newly issued licence.

        Raises:
            InvalidArgumentError: If any argument is missing or malformed.
            ExhaustionError: If no licence numbers remain for the holder key.
        """
        # Checked before a serial is drawn so a rejected call uses no number.
        _check_fields(birth, issue, is_full)
        name = Name.of(first_name, last_name)
        number = self.numbers.next(name.first_initial, name.last_initial, birth.year)
        licence = DrivingLicence(
            number=number, name=name, birth=birth, issue=issue, is_full=is_full
        )
        self._licences[number] = licence
        logger.info("Issued licence %s", licence)
        return licence

    def get(self, number: str) -> DrivingLicence:
        """Look up a previously issued licence by its number.

        Raises:
            InvalidArgumentError: If no licence with that number exists.
        """
        try:
            return self._licences[number]
        except KeyError:
            raise InvalidArgumentError(f"Licence {number!r} does not exist.") from None

    def __len__(self) -> int:
        return len(self._licences)

    def __contains__(self, number: object) -> bool:
        return number in self._licences
