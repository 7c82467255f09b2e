"""Tests for names, licence numbers and licence issuance."""

from datetime import date

import pytest

from rental_engine.core.exceptions import ExhaustionError, InvalidArgumentError
from rental_engine.core.licence import DrivingLicence, LicenceIssuer
from rental_engine.core.licence_number import LicenceNumberGenerator
from rental_engine.core.name import Name

# ---------------------------------------------------------------------------
# Name
# ---------------------------------------------------------------------------


def test_name_is_normalised_to_upper_case() -> None:
    name = Name.of("John", "wick")
    assert name.first_name == "JOHN"
    assert name.last_name == "WICK"
    assert (name.first_initial, name.last_initial) == ("J", "W")
    assert str(name) == "JOHN WICK"


@pytest.mark.parametrize(
    "first, last",
    [
        ("", "Wick"),
        ("John", ""),
        ("J0hn", "Wick"),
        ("John", "Wick Jr"),
        (None, "Wick"),
        (" john ", "Wick"),
        ("John", "Wick\n"),
    ],
)
def test_name_rejects_invalid_parts(first, last) -> None:
    with pytest.raises(InvalidArgumentError):
        Name.of(first, last)


# ---------------------------------------------------------------------------
# Licence numbers
# ---------------------------------------------------------------------------


def test_licence_number_format() -> None:
    gen = LicenceNumberGenerator()
    assert gen.next("J", "W", 1975) == "JW-1975-1"
    assert gen.next("J", "W", 1975) == "JW-1975-2"


def test_serial_counts_per_key() -> None:
    """Each (initials, birth year) key has its own serial."""
    gen = LicenceNumberGenerator()
    assert gen.next("J", "W", 1975) == "JW-1975-1"
    assert gen.next("J", "W", 1976) == "JW-1976-1"
    assert gen.next("S", "W", 1975) == "SW-1975-1"
    assert gen.next("J", "W", 1975) == "JW-1975-2"
    assert gen.issued("J", "W", 1975) == 2
    assert gen.issued("A", "B", 2000) == 0


@pytest.mark.parametrize(
    "first, last, year",
    [
        ("j", "W", 1975),
        ("JW", "W", 1975),
        ("1", "W", 1975),
        ("J\n", "W", 1975),
        ("J", "W", 1899),
        ("J", "W", 3000),
    ],
)
def test_licence_number_rejects_bad_key(first, last, year) -> None:
    gen = LicenceNumberGenerator()
    with pytest.raises(InvalidArgumentError):
        gen.next(first, last, year)


def test_licence_serial_exhaustion() -> None:
    gen = LicenceNumberGenerator(max_serial=2)
    gen.next("J", "W", 1975)
    gen.next("J", "W", 1975)
    with pytest.raises(ExhaustionError):
        gen.next("J", "W", 1975)
    # Other keys are unaffected.
    assert gen.next("J", "W", 1980) == "JW-1980-1"


# ---------------------------------------------------------------------------
# Licences
# ---------------------------------------------------------------------------


def test_issue_builds_licence() -> None:
    issuer = LicenceIssuer()
    licence = issuer.issue("John", "Wick", date(1975, 4, 10), date(2000, 4, 10), True)
    assert licence.number == "JW-1975-1"
    assert licence.name == Name("JOHN", "WICK")
    assert licence.is_full
    assert str(licence) == "JW-1975-1[JOHN, WICK, is full licence = True]"


def test_age_uses_calendar_year_difference() -> None:
    issuer = LicenceIssuer()
    licence = issuer.issue("John", "Wick", date(1975, 12, 31), date(2000, 12, 31), True)
    today = date(2026, 1, 1)
    assert licence.age(today) == 51
    assert licence.years_held(today) == 26


def test_lookup_by_number() -> None:
    issuer = LicenceIssuer()
    first = issuer.issue("John", "Wick", date(1975, 4, 10), date(2000, 4, 10), True)
    second = issuer.issue("Jane", "Wood", date(1975, 6, 1), date(1999, 1, 1), False)
    assert second.number == "JW-1975-2"
    assert issuer.get("JW-1975-1") is first
    assert issuer.get("JW-1975-2") is second
    assert len(issuer) == 2
    assert "JW-1975-2" in issuer
    with pytest.raises(InvalidArgumentError, match="does not exist"):
        issuer.get("XX-1900-1")


def test_issue_rejects_bad_dates() -> None:
    issuer = LicenceIssuer()
    with pytest.raises(InvalidArgumentError):
        issuer.issue("John", "Wick", None, date(2000, 1, 1), True)
    with pytest.raises(InvalidArgumentError, match="precede"):
        issuer.issue("John", "Wick", date(2000, 1, 1), date(1999, 1, 1), True)
    assert len(issuer) == 0


@pytest.mark.parametrize("is_full", [None, 0, 1, "yes"])
def test_issue_rejects_non_bool_is_full(is_full) -> None:
    issuer = LicenceIssuer()
    with pytest.raises(InvalidArgumentError, match="is_full"):
        issuer.issue("John", "Wick", date(1975, 1, 1), date(2000, 1, 1), is_full)
    assert len(issuer) == 0
    # The rejected call drew no serial.
    assert issuer.numbers.issued("J", "W", 1975) == 0


def test_licence_record_validates_its_fields() -> None:
    name = Name("JOHN", "WICK")
    with pytest.raises(InvalidArgumentError, match="is_full"):
        DrivingLicence("JW-1975-1", name, date(1975, 1, 1), date(2000, 1, 1), None)
    with pytest.raises(InvalidArgumentError, match="precede"):
        DrivingLicence("JW-1975-1", name, date(2000, 1, 1), date(1999, 1, 1), True)
    with pytest.raises(InvalidArgumentError, match="dates"):
        DrivingLicence("JW-1975-1", name, "1975-01-01", date(2000, 1, 1), True)


def test_licence_is_immutable() -> None:
    licence = DrivingLicence(
        number="JW-1975-1",
        name=Name("JOHN", "WICK"),
        birth=date(1975, 4, 10),
        issue=date(2000, 4, 10),
        is_full=True,
    )
    with pytest.raises(AttributeError):
        licence.is_full = False  # type: ignore[misc]
