# contractfn/config/loader.py
"""
Layered configuration loading for contractfn.

Merge strategy, later layers win:
    1. Package defaults (contractfn/config/defaults.yaml) - always loaded
    2. User config file - explicit path, else $CONTRACTFN_CONFIG
    3. Environment overrides - $CONTRACTFN_VALIDATION_MODE, $CONTRACTFN_STRICT

The merged mapping is validated with ContractConfig. The active config is
loaded lazily on first use and can be replaced with set_config().

Usage:
    from contractfn.config import get_config, load_config, set_config

    config = load_config("contracts.yaml")
    set_config(config)

    get_config().default_mode
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from contractfn.logging.logger import get_logger
from contractfn.logging.tags import CONFIG

from .schema import ContractConfig

logger = get_logger(__name__)

DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"

CONFIG_PATH_ENV = "CONTRACTFN_CONFIG"
MODE_ENV = "CONTRACTFN_VALIDATION_MODE"
STRICT_ENV = "CONTRACTFN_STRICT"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


# =============================================================================
# Errors
# =============================================================================


class ConfigError(Exception):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match schema."""

    pass


# =============================================================================
# Loading
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file and return it as a dictionary.

    Raises:
        ConfigNotFoundError: If the file doesn't exist
        ConfigParseError: If the YAML is invalid or its root is not a mapping
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e
    except OSError as e:
        raise ConfigParseError(f"Failed to read config: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"{CONFIG} Loaded config from {p}")
    return data


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    """Collect overrides from environment variables."""
    overrides: Dict[str, Any] = {}

    mode = environ.get(MODE_ENV)
    if mode:
        overrides["default_mode"] = mode

    strict = environ.get(STRICT_ENV)
    if strict:
        value = strict.strip().lower()
        if value in _TRUE_VALUES:
            overrides["strict"] = True
        elif value in _FALSE_VALUES:
            overrides["strict"] = False
        else:
            raise ConfigValidationError(f"{STRICT_ENV} must be a boolean, got {strict!r}")

    if overrides:
        logger.debug(f"{CONFIG} Environment overrides: {sorted(overrides)}")
    return overrides


def load_config(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ContractConfig:
    """
    Load and validate the layered configuration.

    Args:
        path: User config file. If None, $CONTRACTFN_CONFIG is used when set.
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Validated ContractConfig

    Raises:
        ConfigNotFoundError: If the user config file doesn't exist
        ConfigParseError: If a YAML file is invalid
        ConfigValidationError: If the merged config doesn't match the schema
    """
    environ = os.environ if environ is None else environ

    data = load_yaml(DEFAULTS_PATH)

    if path is None:
        path = environ.get(CONFIG_PATH_ENV) or None

    resolved = Path(path) if path is not None else None
    if resolved is not None:
        data.update(load_yaml(resolved))

    data.update(_env_overrides(environ))

    try:
        return ContractConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Config validation failed: {e}", path=resolved) from e


# =============================================================================
# Active config
# =============================================================================

_active_config: Optional[ContractConfig] = None


def get_config() -> ContractConfig:
    """Return the active config, loading it on first use."""
    global _active_config
    if _active_config is None:
        _active_config = load_config()
    return _active_config


def set_config(config: Optional[ContractConfig] = None, **overrides: Any) -> ContractConfig:
    """
    Replace the active config.

    Args:
        config: New config. If None, the current one is used as the base.
        **overrides: Field overrides applied on top (e.g. strict=False)

    Returns:
        The config now active
    """
    global _active_config
    base = config if config is not None else get_config()
    if overrides:
        try:
            base = ContractConfig.model_validate({**base.model_dump(), **overrides})
        except ValidationError as e:
            raise ConfigValidationError(f"Config validation failed: {e}") from e

    _active_config = base
    logger.debug(f"{CONFIG} Active config: {base.model_dump(mode='json')}")
    return base


def reset_config() -> None:
    """Forget the active config; the next get_config() reloads it."""
    global _active_config
    _active_config = None
