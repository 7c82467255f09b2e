"""Sequential registration-plate generator for the rental engine.

Registrations are a single lower-case letter followed by a zero-padded
number (``a0001`` .. ``z9999``).  The number runs first; once it passes
the maximum it wraps back to 1 and the letter advances.  Advancing past
the final letter exhausts the generator for good.

Because the number is always padded to the same width, the string form
of each registration sorts strictly after every one issued before it.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from functools import total_ordering

from rental_engine.core.exceptions import ExhaustionError, InvalidArgumentError

logger = logging.getLogger(__name__)

LETTERS: str = string.ascii_lowercase
MAX_NUMBER: int = 9999


@total_ordering
@dataclass(frozen=True)
class Registration:
    """Immutable registration plate.

    Attributes:
        letter: Alphabetic prefix.
        number: Numeric suffix (>= 1).
        width: Zero-pad width of the numeric suffix.
    """

    letter: str
    number: int
    width: int = len(str(MAX_NUMBER))

    def __post_init__(self) -> None:
        if len(self.letter) != 1 or not self.letter.isalpha():
            raise InvalidArgumentError("letter must be a single alphabetic character.")
        if self.number < 1:
            raise InvalidArgumentError("number must be >= 1.")
        if len(str(self.number)) > self.width:
            raise InvalidArgumentError(
                f"number {self.number} does not fit in {self.width} digits."
            )

    def __str__(self) -> str:
        return f"{self.letter}{self.number:0{self.width}d}"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Registration):
            return NotImplemented
        return str(self) < str(other)


class RegistrationGenerator:
    """Issues strictly increasing, unique registrations.

    Attributes:
        letters: Ordered alphabet for the prefix.
        max_number: Largest numeric suffix before the letter advances.
    """

    __slots__ = ("letters", "max_number", "_width", "_last", "_issued", "_exhausted")

    def __init__(self, letters: str = LETTERS, max_number: int = MAX_NUMBER) -> None:
        """Initialise an empty generator.

        Args:
            letters: Alphabet to draw prefixes from, in issue order.
            max_number: Highest number per letter. Must be >= 1.

        Raises:
            InvalidArgumentError: If the alphabet is empty, non-alphabetic,
                unordered or contains duplicates, or max_number < 1.
        """
        if not letters:
            raise InvalidArgumentError("letters must not be empty.")
        if not letters.isalpha():
            raise InvalidArgumentError(f"letters must be alphabetic, got {letters!r}.")
        if list(letters) != sorted(set(letters)):
            raise InvalidArgumentError("letters must be unique and in ascending order.")
        if max_number < 1:
            raise InvalidArgumentError("max_number must be >= 1.")
        self.letters: str = letters
        self.max_number: int = max_number
        self._width: int = len(str(max_number))
        self._last: Registration | None = None
        self._issued: int = 0
        self._exhausted: bool = False

    @property
    def last(self) -> Registration | None:
        """Most recently issued registration, or ``None`` before the first."""
        return self._last

    @property
    def issued(self) -> int:
        return self._issued

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def capacity(self) -> int:
        """Total number of registrations this generator can ever issue."""
        return len(self.letters) * self.max_number

    def next(self) -> Registration:
        """Issue the next registration.

        Returns:
            A registration strictly greater than every one issued so far.

        Raises:
            ExhaustionError: If the final letter has used its last number.
        """
        if self._exhausted:
            raise ExhaustionError("Registration generator is exhausted.")

        if self._last is None:
            letter, number = self.letters[0], 1
        else:
            letter, number = self._last.letter, self._last.number + 1
            if number > self.max_number:
                index = self.letters.index(letter) + 1
                if index >= len(self.letters):
                    self._exhausted = True
                    logger.warning(
                        "Registration space exhausted after %d plates", self._issued
                    )
                    raise ExhaustionError(
                        f"No registrations left after {self._last}; "
                        f"all {self.capacity} have been issued."
                    )
                letter, number = self.letters[index], 1

        registration = Registration(letter=letter, number=number, width=self._width)
        self._last = registration
        self._issued += 1
        return registration
