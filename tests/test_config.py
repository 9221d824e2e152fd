# tests/test_config.py
"""
Tests for layered configuration loading.

These tests verify:
1. Package defaults load and validate
2. User YAML files override defaults
3. Environment variables override files
4. Errors carry file paths
5. The active config drives contract defaults
"""

from __future__ import annotations

import pytest

from contractfn import Fn, ValidationMode
from contractfn.config import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    ContractConfig,
    get_config,
    load_config,
    load_yaml,
    reset_config,
    set_config,
)
from contractfn.config.loader import CONFIG_PATH_ENV, DEFAULTS_PATH, MODE_ENV, STRICT_ENV

pytestmark = pytest.mark.tier2


# =============================================================================
# Tests: Defaults
# =============================================================================


class TestDefaults:
    """Package defaults."""

    def test_defaults_file_exists(self):
        assert DEFAULTS_PATH.exists()

    def test_defaults_load(self):
        config = load_config(environ={})
        assert config == ContractConfig()
        assert config.default_mode is ValidationMode.BOTH
        assert config.strict is True

    def test_get_config_lazy(self):
        assert get_config().default_mode is ValidationMode.BOTH


# =============================================================================
# Tests: Files
# =============================================================================


class TestConfigFiles:
    """User config files."""

    def test_file_overrides_defaults(self, tmp_path):
        path = tmp_path / "contracts.yaml"
        path.write_text("default_mode: ret\n", encoding="utf-8")

        config = load_config(path, environ={})
        assert config.default_mode is ValidationMode.RET
        assert config.strict is True

    def test_path_from_environment(self, tmp_path):
        path = tmp_path / "contracts.yaml"
        path.write_text("strict: false\n", encoding="utf-8")

        config = load_config(environ={CONFIG_PATH_ENV: str(path)})
        assert config.strict is False

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path, environ={}) == ContractConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigNotFoundError) as exc_info:
            load_config(tmp_path / "nope.yaml", environ={})
        assert "nope.yaml" in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("default_mode: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigParseError, match="Invalid YAML"):
            load_yaml(path)

    def test_root_must_be_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- both\n", encoding="utf-8")
        with pytest.raises(ConfigParseError, match="mapping"):
            load_yaml(path)

    def test_unknown_key_rejected(self, tmp_path):
        path = tmp_path / "typo.yaml"
        path.write_text("defualt_mode: none\n", encoding="utf-8")
        with pytest.raises(ConfigValidationError) as exc_info:
            load_config(path, environ={})
        assert exc_info.value.path == path

    def test_unknown_mode_rejected(self, tmp_path):
        path = tmp_path / "mode.yaml"
        path.write_text("default_mode: sometimes\n", encoding="utf-8")
        with pytest.raises(ConfigValidationError, match="Unknown validation mode"):
            load_config(path, environ={})

    def test_directory_rejected(self, tmp_path):
        with pytest.raises(Exception, match="directory"):
            load_yaml(tmp_path)


# =============================================================================
# Tests: Environment
# =============================================================================


class TestEnvironment:
    """Environment overrides."""

    def test_mode_override(self, tmp_path):
        path = tmp_path / "contracts.yaml"
        path.write_text("default_mode: ret\n", encoding="utf-8")

        config = load_config(path, environ={MODE_ENV: "NONE"})
        assert config.default_mode is ValidationMode.NONE

    @pytest.mark.parametrize("value,expected", [("0", False), ("off", False), ("yes", True)])
    def test_strict_override(self, value, expected):
        assert load_config(environ={STRICT_ENV: value}).strict is expected

    def test_bad_strict_value(self):
        with pytest.raises(ConfigValidationError, match=STRICT_ENV):
            load_config(environ={STRICT_ENV: "maybe"})

    def test_os_environ_used_by_default(self, monkeypatch):
        monkeypatch.setenv(MODE_ENV, "args")
        reset_config()
        assert get_config().default_mode is ValidationMode.ARGS


# =============================================================================
# Tests: Active config
# =============================================================================


class TestActiveConfig:
    """set_config / reset_config and their effect on contracts."""

    def test_set_config_overrides(self):
        config = set_config(default_mode="ret")
        assert config.default_mode is ValidationMode.RET
        assert get_config() is config

    def test_set_config_instance(self):
        config = ContractConfig(strict=False)
        assert set_config(config) is config
        assert get_config().strict is False

    def test_set_config_bad_override(self):
        with pytest.raises(ConfigValidationError):
            set_config(default_mode="sometimes")

    def test_reset(self):
        set_config(default_mode="none")
        reset_config()
        assert get_config().default_mode is ValidationMode.BOTH

    def test_config_is_frozen(self):
        with pytest.raises(Exception):
            get_config().strict = False

    def test_disabling_enforcement_process_wide(self):
        set_config(default_mode="none")
        f = Fn().args(int).returns(int).implement(lambda x: "not checked")
        assert f("x") == "not checked"
