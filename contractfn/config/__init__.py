# contractfn/config/__init__.py
"""
Configuration management for contractfn.

Usage:
    from contractfn.config import get_config, set_config

    set_config(default_mode="none")   # switch enforcement off process-wide
    get_config().strict
"""

from contractfn.config.loader import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    get_config,
    load_config,
    load_yaml,
    reset_config,
    set_config,
)
from contractfn.config.schema import ContractConfig

__all__ = [
    "ContractConfig",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "get_config",
    "load_config",
    "load_yaml",
    "reset_config",
    "set_config",
]
