"""core.config
---------------

Configuration loader/manager for multistl. Loads decomposition settings
(periods, STL options, table layout) from YAML/TOML/JSON and retrieves
them via :py:meth:`ConfigManager.get`.
"""

import os
import json
import yaml
import toml

from multistl.analytics.stl import StlParams


class ConfigValidationError(Exception):
    """Raised when configuration loading or validation fails."""


class ConfigManager:
    """
    Loads and manages decomposition settings from file or defaults.

    Recognised keys: ``periods`` (list of ints), ``stl`` (table of
    :class:`StlParams` options), ``value_col``, ``date_col`` and
    ``fill_method``.
    """

    SUPPORTED_CONFIG_FORMATS: tuple[str, ...] = (".yaml", ".yml", ".toml", ".json")

    DEFAULT_VALUE_COL: str = "y"
    DEFAULT_DATE_COL: str = "date"
    DEFAULT_FILL_METHOD: str = "time"
    FILL_METHODS: tuple[str, ...] = ("linear", "time")

    def __init__(self, config_path=None):
        self.config = {
            "periods": [],
            "stl": {},
            "value_col": self.DEFAULT_VALUE_COL,
            "date_col": self.DEFAULT_DATE_COL,
            "fill_method": self.DEFAULT_FILL_METHOD,
        }
        if config_path:
            self.load(config_path)

    def load(self, path: str) -> None:
        """
        Load configuration from a file (YAML, TOML, or JSON).
        Overwrites existing keys in self.config; the ``stl`` table is merged.
        """
        ext = os.path.splitext(path)[1].lower()
        try:
            with open(path, "r", encoding="utf-8") as f:
                if ext in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                elif ext == ".toml":
                    data = toml.load(f)
                elif ext == ".json":
                    data = json.load(f)
                else:
                    raise ConfigValidationError(f"Unsupported config format: {ext}")
        except Exception as e:
            raise ConfigValidationError(
                f"Failed to load config from {path}: {e}"
            ) from e
        if not isinstance(data, dict):
            raise ConfigValidationError(f"Config file {path} did not produce a dict")
        self._update(data)

    def _update(self, data: dict) -> None:
        stl = data.get("stl")
        if stl is not None and not isinstance(stl, dict):
            raise ConfigValidationError("'stl' must be a table of STL options")
        merged_stl = {**self.config.get("stl", {}), **(stl or {})}
        self.config.update(data)
        self.config["stl"] = merged_stl

    def get(self, key, default=None):
        """
        Retrieve a configuration value by key, or return `default` if not present.
        """
        return self.config.get(key, default)

    def merge(self, other: "ConfigManager") -> None:
        """
        Merge another ConfigManager into this one.
        Values in other.config override this.config; STL options merge per key.
        """
        if not isinstance(other, ConfigManager):
            raise TypeError("Can only merge ConfigManager instances")
        self._update(other.config)

    def get_periods(self) -> list[int]:
        """Return the configured seasonal periods as ints."""
        periods = self.get("periods") or []
        try:
            return [int(p) for p in periods]
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(f"Invalid periods {periods!r}: {e}") from e

    def get_stl_params(self) -> StlParams:
        """Return the STL options as :class:`StlParams`."""
        try:
            return StlParams.from_dict(self.get("stl") or {})
        except (KeyError, TypeError) as e:
            raise ConfigValidationError(f"Invalid STL options: {e}") from e

    def get_value_col(self) -> str:
        return self.get("value_col", self.DEFAULT_VALUE_COL)

    def get_date_col(self) -> str:
        return self.get("date_col", self.DEFAULT_DATE_COL)

    def get_fill_method(self) -> str:
        """Return the gap interpolation method, ``"linear"`` or ``"time"``."""
        method = self.get("fill_method", self.DEFAULT_FILL_METHOD)
        if method not in self.FILL_METHODS:
            raise ConfigValidationError(
                f"Invalid fill_method {method!r}; "
                f"expected one of {', '.join(self.FILL_METHODS)}"
            )
        return method
