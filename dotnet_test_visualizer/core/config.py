"""
Configuration management for the .NET Test Visualizer.
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass

from dotnet_test_visualizer.core.errors import ConfigurationError

CONFIG_ENV_VAR = "DOTNET_TEST_VISUALIZER_CONFIG"
CONFIG_FILE_NAME = "dotnet_test_visualizer.toml"
CONFIG_TABLE = "dotnet_test_visualizer"

PATH_KEYS = frozenset({"config_file", "log_file"})

# Used for every option neither passed explicitly nor set in the config file
DEFAULTS: Dict[str, Any] = {
    "fast_threshold": 0.05,
    "normal_threshold": 0.1,
    "color": True,
    "show_header": True,
    "show_tree": True,
    "sort_groups": True,
    "show_failures": False,
    "verbosity": 0,
}

OPTION_TYPES = {
    "fast_threshold": float,
    "normal_threshold": float,
    "color": bool,
    "show_header": bool,
    "show_tree": bool,
    "sort_groups": bool,
    "show_failures": bool,
    "verbosity": int,
}


def _check_type(key: str, value: Any, source: str) -> Any:
    """Return value converted to the type of option key, or raise ConfigurationError."""
    expected = OPTION_TYPES[key]
    # bool is an int subclass, never accept it for numeric options
    if expected is bool:
        ok = isinstance(value, bool)
    elif expected is float:
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
    else:
        ok = isinstance(value, int) and not isinstance(value, bool)
    if not ok:
        raise ConfigurationError(
            f"{key} in {source} must be of type {expected.__name__}, got {value!r}"
        )
    return expected(value)


@dataclass
class Config:
    """Configuration class for the .NET Test Visualizer.

    Options left at None are taken from the config file, then from DEFAULTS,
    so an explicitly passed value always wins over the file.
    """

    config_file: Optional[Path] = None
    log_file: Optional[Path] = None

    # Timing thresholds (seconds)
    fast_threshold: Optional[float] = None
    normal_threshold: Optional[float] = None

    # Output configuration
    color: Optional[bool] = None
    show_header: Optional[bool] = None
    show_tree: Optional[bool] = None
    sort_groups: Optional[bool] = None
    show_failures: Optional[bool] = None
    verbosity: Optional[int] = None  # 0=warnings, 1=progress, 2=details, 3=debug

    def __post_init__(self):
        """Load file defaults and validate."""
        self._load_config_file()

        for key, default in DEFAULTS.items():
            value = getattr(self, key)
            if value is None:
                setattr(self, key, default)
            else:
                setattr(self, key, _check_type(key, value, "arguments"))

        if self.log_file is not None:
            self.log_file = Path(self.log_file)

        self.validate()

    def validate(self) -> None:
        """Raise ConfigurationError if any value is out of range."""
        if not 0 <= self.verbosity <= 3:
            raise ConfigurationError(f"verbosity must be between 0 and 3, got {self.verbosity}")
        if self.fast_threshold < 0 or self.normal_threshold < 0:
            raise ConfigurationError(
                f"thresholds must be non-negative, got fast={self.fast_threshold} "
                f"normal={self.normal_threshold}"
            )
        if self.fast_threshold > self.normal_threshold:
            raise ConfigurationError(
                f"fast threshold ({self.fast_threshold}) must not exceed "
                f"normal threshold ({self.normal_threshold})"
            )

    def _load_config_file(self) -> None:
        """Fill options that were not given from dotnet_test_visualizer.toml, if present."""
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            self.config_file = Path(env_path).resolve()
        elif self.config_file is None:
            self.config_file = Path.cwd() / CONFIG_FILE_NAME
        else:
            self.config_file = Path(self.config_file).resolve()

        if not self.config_file.exists():
            return

        try:
            try:
                import tomllib  # Python 3.11+
            except ModuleNotFoundError:  # Python 3.8-3.10
                import tomli as tomllib

            data = tomllib.loads(self.config_file.read_text())
        except Exception as e:
            raise ConfigurationError(f"Failed to read config file: {self.config_file}: {e}") from e

        table = data.get(CONFIG_TABLE) or data.get("tool", {}).get(CONFIG_TABLE, {})
        if not isinstance(table, dict):
            raise ConfigurationError(f"[{CONFIG_TABLE}] in {self.config_file} must be a table")

        for key, value in table.items():
            if getattr(self, key, None) is not None:
                continue
            if key == "log_file":
                if not isinstance(value, str):
                    raise ConfigurationError(
                        f"log_file in {self.config_file} must be a path string, got {value!r}"
                    )
                self.log_file = Path(value)
            elif key in OPTION_TYPES:
                setattr(self, key, _check_type(key, value, str(self.config_file)))

    def marker_for(self, seconds: float) -> str:
        """Return the speed marker for a test duration."""
        if seconds <= self.fast_threshold:
            return "🚀"
        if seconds <= self.normal_threshold:
            return "🕐"
        return "🐌"

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "config_file": str(self.config_file) if self.config_file else None,
            "log_file": str(self.log_file) if self.log_file else None,
            "fast_threshold": self.fast_threshold,
            "normal_threshold": self.normal_threshold,
            "color": self.color,
            "show_header": self.show_header,
            "show_tree": self.show_tree,
            "sort_groups": self.sort_groups,
            "show_failures": self.show_failures,
            "verbosity": self.verbosity,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create configuration from dictionary."""
        data = dict(data)
        for key in PATH_KEYS:
            if key in data and isinstance(data[key], str):
                data[key] = Path(data[key])
        return cls(**data)
