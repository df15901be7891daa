"""Configuration management for flacscan."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from flacscan.config.file_ops import write_text_file
from flacscan.config.paths import default_config_path
from flacscan.platform.logging import logger

MATCH_VALUE_DEFAULT: Final[str] = "Miles Davis"
FILE_SUFFIX_DEFAULT: Final[str] = "flac"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects converted in ``__post_init__``."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Tag value counted by ``flacscan count`` when --value is not given
    match_value: str = MATCH_VALUE_DEFAULT

    # Directory walker settings
    follow_links: bool = True
    file_suffix: str = FILE_SUFFIX_DEFAULT

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            write_text_file(target, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", target)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# flacscan Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/flacscan.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Tag value counted by `flacscan count` when --value is omitted")
        lines.append(f"match_value = {self._format_toml_value(config['match_value'])}")
        lines.append("")

        lines.append("# Follow symbolic links while walking directories")
        lines.append(f"follow_links = {self._format_toml_value(config['follow_links'])}")
        lines.append("")

        lines.append("# File name ending that marks a file as FLAC")
        lines.append(f"file_suffix = {self._format_toml_value(config['file_suffix'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file, creating the default file if missing.

        Returns:
            Config: Loaded configuration object, cached for later calls.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning(
                        "Ignoring unknown configuration keys in %s: %s",
                        config_file,
                        ", ".join(unknown),
                    )
                instance = cls(**{k: v for k, v in config_dict.items() if k in known})
                logger.debug("Configuration loaded from %s", config_file)
            else:
                instance = cls()
                instance.save()
                logger.info("Created default configuration at %s", config_file)

            cls._instance = instance
            cls._loaded_from = config_file
            return instance

        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise


__all__ = ["Config", "FILE_SUFFIX_DEFAULT", "MATCH_VALUE_DEFAULT"]
