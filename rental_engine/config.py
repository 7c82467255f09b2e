"""Configuration loader for the rental engine."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from rental_engine.core.exceptions import InvalidArgumentError
from rental_engine.core.restrictions import RestrictionConfig

logger = logging.getLogger(__name__)

DATA_DIR: Path = Path(__file__).resolve().parent / "data"
RESTRICTIONS_PATH: Path = DATA_DIR / "restrictions.yaml"

_FIELD_SETTERS: dict[str, str] = {
    "min_age": "set_min_age",
    "min_licence_years": "set_min_licence_years",
    "max_instances": "set_instance_cap",
}


def load_restrictions(path: Path | None = None) -> RestrictionConfig:
    """Load per car-type rental restrictions from a YAML file.

    Args:
        path: Optional override for the restrictions file path.

    Returns:
        A :class:`RestrictionConfig` populated from the file.

    Raises:
        FileNotFoundError: If the restrictions file does not exist.
        InvalidArgumentError: If the file lacks a ``restrictions`` mapping,
            names an unknown field, or holds a non-positive or non-integer
            value.
    """
    restrictions_path = path or RESTRICTIONS_PATH
    if not restrictions_path.exists():
        raise FileNotFoundError(f"Restrictions file not found: {restrictions_path}")

    with open(restrictions_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    entries = data.get("restrictions") if isinstance(data, dict) else None
    if not isinstance(entries, dict):
        raise InvalidArgumentError(
            f"{restrictions_path}: expected a 'restrictions' mapping at the top level"
        )

    config = RestrictionConfig()
    for type_tag, rules in entries.items():
        if not isinstance(rules, dict):
            raise InvalidArgumentError(
                f"{restrictions_path}: rules for '{type_tag}' must be a mapping"
            )
        for field, value in rules.items():
            setter = _FIELD_SETTERS.get(field)
            if setter is None:
                raise InvalidArgumentError(
                    f"{restrictions_path}: unknown field '{field}' for '{type_tag}'"
                )
            # Setters reject non-positive and non-integer values.
            getattr(config, setter)(str(type_tag), value)

    logger.debug(
        "Loaded restrictions for %d car types from %s", len(entries), restrictions_path
    )
    return config
