"""Per car-type rental restrictions for the rental engine."""

from __future__ import annotations

from rental_engine.core.exceptions import InvalidArgumentError

# Default (min_age, min_licence_years) rules per car type.
DEFAULT_RULES: dict[str, tuple[int, int]] = {
    "SMALL": (21, 1),
    "LARGE": (25, 5),
}


def normalise_tag(type_tag: str) -> str:
    if not isinstance(type_tag, str) or not type_tag.strip():
        raise InvalidArgumentError("Car type must be a non-empty string.")
    return type_tag.strip().upper()


def _require_positive(label: str, value: int) -> int:
    # bool is an int subclass; True would otherwise pass as 1.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{label} must be an integer, got {value!r}.")
    if value <= 0:
        raise InvalidArgumentError(f"{label} must be > 0, got {value}.")
    return value


class RestrictionConfig:
    """Instance caps, minimum driver age and minimum licence age per car type.

    Type tags are case-insensitive.  Unset age rules read as 0 and an
    unset instance cap means creation is unbounded.
    """

    __slots__ = ("_instance_caps", "_min_ages", "_min_licence_years")

    def __init__(self) -> None:
        self._instance_caps: dict[str, int] = {}
        self._min_ages: dict[str, int] = {}
        self._min_licence_years: dict[str, int] = {}

    @classmethod
    def with_defaults(cls) -> RestrictionConfig:
        """Build a config carrying the standard SMALL and LARGE age rules."""
        config = cls()
        for type_tag, (min_age, min_years) in DEFAULT_RULES.items():
            config.set_min_age(type_tag, min_age)
            config.set_min_licence_years(type_tag, min_years)
        return config

    # -- Setters ---------------------------------------------------------------

    def set_instance_cap(self, type_tag: str, max_instances: int) -> None:
        self._instance_caps[normalise_tag(type_tag)] = _require_positive(
            "max_instances", max_instances
        )

    def set_min_age(self, type_tag: str, years: int) -> None:
        self._min_ages[normalise_tag(type_tag)] = _require_positive("min_age", years)

    def set_min_licence_years(self, type_tag: str, years: int) -> None:
        self._min_licence_years[normalise_tag(type_tag)] = _require_positive(
            "min_licence_years", years
        )

    # -- Getters ---------------------------------------------------------------

    def instance_cap(self, type_tag: str) -> int | None:
        return self._instance_caps.get(normalise_tag(type_tag))

    def min_age(self, type_tag: str) -> int:
        return self._min_ages.get(normalise_tag(type_tag), 0)

    def min_licence_years(self, type_tag: str) -> int:
        return self._min_licence_years.get(normalise_tag(type_tag), 0)

    def __repr__(self) -> str:
        return (
            f"RestrictionConfig(instance_caps={self._instance_caps!r}, "
            f"min_ages={self._min_ages!r}, "
            f"min_licence_years={self._min_licence_years!r})"
        )
