"""Configuration loading for Client Manager.

Configuration sources are merged in priority order:
    1. Defaults (defined in ShellConfig)
    2. Global config (~/.client-manager.toml)
    3. Project config (./client-manager.toml)
    4. Explicit config file (--config)
    5. Environment variables (CLIENT_MANAGER_* prefix)
    6. CLI overrides (passed as kwargs)

Example config file:

    sample = true
    verbosity = "verbose"

    [[samples]]
    name = "Hanako"
    location = "Sapporo"

Example:
    >>> config = load_config(sample=True, verbose=True)
    >>> config.verbosity
    'verbose'
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .infrastructure.memory import SAMPLE_CLIENTS
from .logging_config import LEVELS, Verbosity

ENV_PREFIX = "CLIENT_MANAGER_"
CONFIG_FILENAME = "client-manager.toml"
SAMPLE_KEYS = frozenset({"name", "location"})


@dataclass(frozen=True)
class ShellConfig:
    """Settings for one interactive session.

    Attributes:
        sample: Seed the repository with ``samples`` before the first prompt
        samples: (name, location) pairs used when ``sample`` is set
        verbosity: Logging verbosity level
        log_file: Optional path that also receives log records
    """

    sample: bool = False
    samples: tuple[tuple[str, str], ...] = SAMPLE_CLIENTS
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.sample, bool):
            raise InvalidConfigError("sample", self.sample, "expected true or false")
        if self.log_file is not None and not isinstance(self.log_file, str):
            raise InvalidConfigError("log_file", self.log_file, "expected a file path string")
        if self.verbosity not in LEVELS:
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )
        for pair in self.samples:
            if (
                not isinstance(pair, tuple)
                or len(pair) != 2
                or not all(isinstance(part, str) for part in pair)
            ):
                raise InvalidConfigError("samples", pair, "expected a (name, location) pair")


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> ShellConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored so unset flags do not mask file settings

    Returns:
        Validated ShellConfig instance

    Raises:
        ConfigurationError: If a config file is missing or unreadable
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        merged.update(_read_config_file(global_config, "global"))

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        merged.update(_read_config_file(project_config, "project"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_read_config_file(config_file, "explicit"))

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({key: value for key, value in overrides.items() if value is not None})

    if "samples" in merged:
        merged["samples"] = _parse_samples(merged["samples"])

    try:
        return ShellConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _read_config_file(path: Path, label: str) -> dict[str, Any]:
    try:
        return _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} config '{path}': {e}")


def _parse_samples(raw: Any) -> tuple[tuple[str, str], ...]:
    """Turn a TOML ``[[samples]]`` array into (name, location) pairs."""
    if not isinstance(raw, (list, tuple)):
        raise InvalidConfigError("samples", raw, "expected a list of {name, location} tables")

    samples = []
    for entry in raw:
        if isinstance(entry, dict):
            unknown = sorted(set(entry) - SAMPLE_KEYS)
            if unknown:
                raise InvalidConfigError(
                    "samples", entry, f"unknown keys: {', '.join(unknown)}"
                )
            try:
                samples.append((entry["name"], entry["location"]))
            except KeyError as e:
                raise InvalidConfigError("samples", entry, f"missing key {e}")
        elif isinstance(entry, (list, tuple)) and len(entry) == 2:
            samples.append((entry[0], entry[1]))
        else:
            raise InvalidConfigError("samples", entry, "expected a {name, location} table")
    return tuple(samples)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from CLIENT_MANAGER_* environment variables.

    Supported environment variables:
        CLIENT_MANAGER_SAMPLE: bool (true/false/1/0)
        CLIENT_MANAGER_VERBOSITY: quiet/normal/verbose
        CLIENT_MANAGER_LOG_FILE: path

    Returns:
        Dict of field_name -> parsed_value for any CLIENT_MANAGER_* vars found.
    """
    type_hints = get_type_hints(ShellConfig)

    result: dict[str, Any] = {}

    for field_name in ShellConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns None for types that cannot come from an environment variable.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Handle Optional[X] which is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    # Skip tuple types (like samples) - too complex for env vars
    if origin is tuple or type_hint is tuple:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If no TOML parser is available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
