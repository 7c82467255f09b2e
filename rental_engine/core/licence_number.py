"""Driving-licence number generator.

Licence numbers take the form ``FL-YYYY-N``: the holder's first and last
initials, their birth year, and a serial that counts independently for
each (first initial, last initial, birth year) combination.
"""

from __future__ import annotations

import logging
import re

from rental_engine.core.exceptions import ExhaustionError, InvalidArgumentError

logger = logging.getLogger(__name__)

# Largest serial a 32-bit signed counter can represent.
MAX_SERIAL: int = 2**31 - 1

MIN_BIRTH_YEAR: int = 1900
MAX_BIRTH_YEAR: int = 2999

_INITIAL_PATTERN = re.compile(r"[A-Z]")


class LicenceNumberGenerator:
    """Issues unique licence numbers with a per-key serial.

    Attributes:
        max_serial: Highest serial any single key may reach.
    """

    __slots__ = ("max_serial", "_serials")

    def __init__(self, max_serial: int = MAX_SERIAL) -> None:
        if max_serial < 1:
            raise InvalidArgumentError("max_serial must be >= 1.")
        self.max_serial: int = max_serial
        self._serials: dict[tuple[str, str, int], int] = {}

    def next(self, first_initial: str, last_initial: str, birth_year: int) -> str:
        """Issue the next licence number for the given holder key.

        Args:
            first_initial: Upper-case initial of the first name.
            last_initial: Upper-case initial of the last name.
            birth_year: Four-digit year of birth.

        Returns:
            Licence number string, e.g. ``"JW-1975-1"``.

        Raises:
            InvalidArgumentError: If an initial is not a single upper-case
                letter or the birth year is out of range.
            ExhaustionError: If the key's serial has reached ``max_serial``.
        """
        for initial in (first_initial, last_initial):
            if not isinstance(initial, str) or not _INITIAL_PATTERN.fullmatch(initial):
                raise InvalidArgumentError(
                    f"Initial {initial!r} must be a single upper-case letter."
                )
        if not isinstance(birth_year, int) or not (
            MIN_BIRTH_YEAR <= birth_year <= MAX_BIRTH_YEAR
        ):
            raise InvalidArgumentError(
                f"birth_year must be between {MIN_BIRTH_YEAR} and {MAX_BIRTH_YEAR}, "
                f"got {birth_year}."
            )

        key = (first_initial, last_initial, birth_year)
        serial = self._serials.get(key, 0)
        if serial >= self.max_serial:
            logger.warning("Licence serials exhausted for %s%s-%d", *key)
            raise ExhaustionError(
                f"No licence numbers left for "
                f"{first_initial}{last_initial}-{birth_year}."
            )
        serial += 1
        self._serials[key] = serial
        return f"{first_initial}{last_initial}-{birth_year}-{serial}"

    def issued(self, first_initial: str, last_initial: str, birth_year: int) -> int:
        """Number of licence numbers issued so far for a key."""
        return self._serials.get((first_initial, last_initial, birth_year), 0)
