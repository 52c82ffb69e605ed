"""Runtime settings.

Values resolve in three layers: the built-in defaults, then
``NDA_VALIDATOR_*`` environment variables, then ``nda_validator.toml``:

    [suggestions]
    max_suggestions = 3
    threshold = 0.95
    fuzzy = false

    [export]
    quote_cells = false

    [input]
    encoding = "utf-8"
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
import os
from pathlib import Path
import tomllib
from typing import Any
import warnings

from .constants import Defaults

DEFAULT_CONFIG_FILE = "nda_validator.toml"
ENV_PREFIX = "NDA_VALIDATOR_"

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    max_suggestions: int = Defaults.MAX_SUGGESTIONS
    suggestion_threshold: float = Defaults.SUGGESTION_THRESHOLD
    fuzzy_suggestions: bool = Defaults.FUZZY_SUGGESTIONS
    quote_exported_cells: bool = Defaults.QUOTE_EXPORTED_CELLS
    encoding: str = Defaults.ENCODING

    def __post_init__(self) -> None:
        if self.max_suggestions < 1:
            raise ValueError(
                f"max_suggestions must be positive, got {self.max_suggestions}"
            )
        if not 0.0 <= self.suggestion_threshold <= 1.0:
            raise ValueError(
                "suggestion_threshold must be between 0.0 and 1.0, "
                f"got {self.suggestion_threshold}"
            )
        if not self.encoding.strip():
            raise ValueError("encoding must not be empty")

    @classmethod
    def from_env(cls) -> ValidatorConfig:
        overrides: dict[str, Any] = {}
        for attribute, coerce in _FIELD_COERCERS.items():
            name = f"{ENV_PREFIX}{attribute.upper()}"
            raw = os.getenv(name)
            if raw is not None:
                overrides[attribute] = coerce(raw, key=name)
        return cls(**overrides)


class ConfigLoader:
    @staticmethod
    def load(config_file: Path | None = None) -> ValidatorConfig:
        """Environment settings overlaid with ``config_file`` when it exists.

        An unreadable or invalid file is reported with a warning and ignored.
        """
        config = ValidatorConfig.from_env()
        path = config_file or Path(DEFAULT_CONFIG_FILE)
        if not path.exists():
            return config
        try:
            return ConfigLoader._load_from_toml(path, config)
        except (OSError, tomllib.TOMLDecodeError, ValueError) as e:
            warnings.warn(f"Failed to load config from {path}: {e}", stacklevel=2)
            return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: ValidatorConfig
    ) -> ValidatorConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        overrides: dict[str, Any] = {}
        for (section, key), attribute in _TOML_KEYS.items():
            value = _section(data, section).get(key)
            if value is None:
                continue
            overrides[attribute] = _FIELD_COERCERS[attribute](
                value, key=f"{section}.{key}"
            )
        return replace(base_config, **overrides)


def _section(data: Mapping[str, object], name: str) -> Mapping[str, object]:
    value = data.get(name)
    return value if isinstance(value, Mapping) else {}


def _to_int(value: object, *, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    return int(value)


def _to_float(value: object, *, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"{key} must be a number, got {value!r}")
    return float(value)


def _to_bool(value: object, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in _TRUE_STRINGS:
        return True
    if lowered in _FALSE_STRINGS:
        return False
    raise ValueError(f"{key} must be a boolean, got {value!r}")


def _to_text(value: object, *, key: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {value!r}")
    return value


_FIELD_COERCERS: dict[str, Callable[..., Any]] = {
    "max_suggestions": _to_int,
    "suggestion_threshold": _to_float,
    "fuzzy_suggestions": _to_bool,
    "quote_exported_cells": _to_bool,
    "encoding": _to_text,
}

_TOML_KEYS: dict[tuple[str, str], str] = {
    ("suggestions", "max_suggestions"): "max_suggestions",
    ("suggestions", "threshold"): "suggestion_threshold",
    ("suggestions", "fuzzy"): "fuzzy_suggestions",
    ("export", "quote_cells"): "quote_exported_cells",
    ("input", "encoding"): "encoding",
}
