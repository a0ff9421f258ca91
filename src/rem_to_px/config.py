"""Conversion options: the frozen config record plus mapping/JSON loaders."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

from rem_to_px.errors import ConfigError
from rem_to_px.selectors import BlacklistEntry

logger = logging.getLogger(__name__)

__all__ = ["RemToPxConfig", "load_config", "OPTION_NAMES"]

# Option names as written in config files -> dataclass field names.
OPTION_NAMES: dict[str, str] = {
    "rootValue": "root_value",
    "unitPrecision": "unit_precision",
    "selectorBlackList": "selector_black_list",
    "propList": "prop_list",
    "replace": "replace",
    "mediaQuery": "media_query",
    "minUnitValue": "min_unit_value",
}


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class RemToPxConfig:
    """Options for one conversion session.

    Attributes:
        root_value: Pixels per rem.
        unit_precision: Decimal places kept in converted values.
        selector_black_list: Rules whose selector matches any entry are skipped.
        prop_list: Property patterns eligible for conversion (see ``proplist``).
        replace: Overwrite values in place; when False a px declaration is
            inserted after the original instead.
        media_query: Also convert ``@media`` parameters.
        min_unit_value: rem magnitudes below this are left unconverted.
    """

    root_value: float = 8
    unit_precision: int = 5
    selector_black_list: tuple[BlacklistEntry, ...] = ()
    prop_list: tuple[str, ...] = ("*",)
    replace: bool = True
    media_query: bool = False
    min_unit_value: float = 0

    def __post_init__(self) -> None:
        if not _is_number(self.root_value) or self.root_value <= 0:
            raise ConfigError(f"rootValue must be a positive number, got {self.root_value!r}")
        if (
            not isinstance(self.unit_precision, int)
            or isinstance(self.unit_precision, bool)
            or self.unit_precision < 0
        ):
            raise ConfigError(
                f"unitPrecision must be a non-negative integer, got {self.unit_precision!r}"
            )
        if not _is_number(self.min_unit_value):
            raise ConfigError(f"minUnitValue must be a number, got {self.min_unit_value!r}")
        for name in ("replace", "media_query"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be a boolean, got {getattr(self, name)!r}")
        if not isinstance(self.prop_list, (list, tuple)):
            raise ConfigError("propList must be a list of patterns")
        if not isinstance(self.selector_black_list, (list, tuple)):
            raise ConfigError("selectorBlackList must be a list")
        if not all(isinstance(p, str) for p in self.prop_list):
            raise ConfigError("propList entries must be strings")

        # Sequences are stored as tuples.
        object.__setattr__(self, "prop_list", tuple(self.prop_list))
        object.__setattr__(
            self,
            "selector_black_list",
            tuple(BlacklistEntry.from_raw(e) for e in self.selector_black_list),
        )

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> RemToPxConfig:
        """Build a config from an option mapping.

        Accepts the camelCase names used in config files (``rootValue``) and
        the dataclass field names (``root_value``). Missing keys keep their
        defaults; unknown keys raise :class:`ConfigError`.
        """
        if not options:
            return cls()
        field_names = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = OPTION_NAMES.get(key, key)
            if name not in field_names:
                raise ConfigError(f"Unknown option: {key!r}")
            kwargs[name] = value
        return cls(**kwargs)

    def merged(self, **overrides: Any) -> RemToPxConfig:
        """Return a copy with every non-None override applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        if not updates:
            return self
        return replace(self, **updates)


def load_config(path: str | Path) -> RemToPxConfig:
    """Read options from a JSON file and build a :class:`RemToPxConfig`."""
    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{config_path}: invalid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path}: expected a JSON object of options")
    logger.debug("Loaded options from %s: %s", config_path, sorted(data))
    return RemToPxConfig.from_options(data)
