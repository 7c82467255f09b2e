"""Licence-holder name model for the rental engine."""

from __future__ import annotations

import re
from dataclasses import dataclass

from rental_engine.core.exceptions import InvalidArgumentError

_NAME_PATTERN = re.compile(r"[A-Z]+")


@dataclass(frozen=True)
class Name:
    """Normalised holder name.

    Both parts are stored upper-case and must consist of letters only.

    Attributes:
        first_name: Upper-case first name.
        last_name: Upper-case last name.
    """

    first_name: str
    last_name: str

    def __post_init__(self) -> None:
        for label, value in (
            ("first_name", self.first_name),
            ("last_name", self.last_name),
        ):
            if not isinstance(value, str) or not _NAME_PATTERN.fullmatch(value):
                raise InvalidArgumentError(
                    f"{label} must be one or more upper-case letters, got {value!r}."
                )

    @classmethod
    def of(cls, first_name: str, last_name: str) -> Name:
        """Build a name from raw input, upper-casing both parts.

        Surrounding whitespace is not trimmed, so ``" john "`` is rejected.
        """
        if not isinstance(first_name, str) or not isinstance(last_name, str):
            raise InvalidArgumentError("first_name and last_name must be strings.")
        return cls(first_name=first_name.upper(), last_name=last_name.upper())

    @property
    def first_initial(self) -> str:
        return self.first_name[0]

    @property
    def last_initial(self) -> str:
        return self.last_name[0]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"
