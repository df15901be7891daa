"""Tests for configuration path helpers."""

from pathlib import Path

from flacscan.config.paths import (
    default_config_path,
    default_log_file,
    resolve_overridable_path,
)


def test_env_value_overrides_default(tmp_path: Path) -> None:
    override = tmp_path / "env.toml"

    resolved = resolve_overridable_path(
        env={"FLACSCAN_CONFIG": str(override)},
        env_var="FLACSCAN_CONFIG",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == override.resolve()


def test_blank_env_value_falls_back_to_default(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        env={"FLACSCAN_CONFIG": "   "},
        env_var="FLACSCAN_CONFIG",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == (tmp_path / "default.toml").resolve()


def test_default_config_path_uses_env_mapping(tmp_path: Path) -> None:
    target = tmp_path / "custom.toml"

    assert default_config_path(env={"FLACSCAN_CONFIG": str(target)}) == target.resolve()


def test_defaults_live_under_repo_root(isolated_repo_root: Path) -> None:
    assert default_config_path(env={}) == isolated_repo_root / "config" / "config.toml"
    assert default_log_file() == isolated_repo_root / "logs" / "flacscan.log"
