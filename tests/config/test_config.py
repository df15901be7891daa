"""Test configuration management."""

from pathlib import Path

import pytest

from flacscan.config.config import Config, MATCH_VALUE_DEFAULT
from flacscan.config.paths import default_config_path


def test_default_config(isolated_repo_root: Path) -> None:
    """Default configuration is written to the portable repo location."""
    config = Config()
    assert config.log_file is None
    assert config.match_value == MATCH_VALUE_DEFAULT
    assert config.follow_links is True
    assert config.file_suffix == "flac"

    config.save()
    assert default_config_path() == isolated_repo_root / "config" / "config.toml"
    assert default_config_path().exists()


def test_save_load_toml(isolated_repo_root: Path) -> None:
    """Saved values survive a reload."""
    _ = isolated_repo_root
    original = Config(
        log_file=Path("/test/logs/flacscan.log"),
        match_value='Art "Bird" Parker',
        follow_links=False,
        file_suffix=".flac",
    )
    original.save()

    Config._instance = None  # pyright: ignore[reportPrivateUsage] - reset singleton for test
    loaded = Config.load()

    assert loaded.log_file == Path("/test/logs/flacscan.log")
    assert loaded.match_value == 'Art "Bird" Parker'
    assert loaded.follow_links is False
    assert loaded.file_suffix == ".flac"


def test_load_creates_default_file(isolated_repo_root: Path) -> None:
    """Loading without a config file creates one with defaults."""
    config_file = isolated_repo_root / "config" / "config.toml"
    assert not config_file.exists()

    config = Config.load()

    assert config_file.exists()
    assert config.match_value == MATCH_VALUE_DEFAULT
    assert "match_value" in config_file.read_text(encoding="utf-8")


def test_load_is_cached(isolated_repo_root: Path) -> None:
    _ = isolated_repo_root
    assert Config.load() is Config.load()


def test_unknown_keys_are_ignored(isolated_repo_root: Path) -> None:
    config_file = isolated_repo_root / "config" / "config.toml"
    config_file.parent.mkdir(parents=True)
    _ = config_file.write_text('match_value = "Coltrane"\nlegacy_option = 1\n', encoding="utf-8")

    config = Config.load()

    assert config.match_value == "Coltrane"


def test_empty_log_file_means_none(isolated_repo_root: Path) -> None:
    config_file = isolated_repo_root / "config" / "config.toml"
    config_file.parent.mkdir(parents=True)
    _ = config_file.write_text('log_file = ""\n', encoding="utf-8")

    assert Config.load().log_file is None


def test_invalid_toml_raises(isolated_repo_root: Path) -> None:
    import tomllib

    config_file = isolated_repo_root / "config" / "config.toml"
    config_file.parent.mkdir(parents=True)
    _ = config_file.write_text("match_value = \n", encoding="utf-8")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load()


def test_env_override_for_config_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    custom = tmp_path / "elsewhere" / "flacscan.toml"
    monkeypatch.setenv("FLACSCAN_CONFIG", str(custom))

    Config(match_value="Monk").save()

    assert custom.exists()
    Config._instance = None  # pyright: ignore[reportPrivateUsage]
    assert Config.load().match_value == "Monk"
