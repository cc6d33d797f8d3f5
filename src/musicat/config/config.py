"""Configuration management for musicat."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from musicat.config.file_ops import write_text_file
from musicat.config.paths import default_config_path
from musicat.platform.logging import logger

MEDIA_EXTENSIONS_DEFAULT: tuple[str, ...] = (".mp3",)
SENTINEL_NAME_DEFAULT: str = "N/A"
HIDDEN_PREFIX_DEFAULT: str = "."


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Catalog database file
    db_path: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    # Suffixes (lower case, with dot) treated as media files
    media_extensions: list[str] = field(default_factory=lambda: list(MEDIA_EXTENSIONS_DEFAULT))

    # Dimension name used when a tag is missing
    sentinel_name: str = SENTINEL_NAME_DEFAULT

    # Directories whose name starts with this prefix are not scanned
    hidden_prefix: str = HIDDEN_PREFIX_DEFAULT

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata.

        Only fields flagged with ``metadata={"path": True}`` by
        ``_path_field`` are converted.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

        self.media_extensions = [
            ext.lower() if ext.startswith(".") else f".{ext.lower()}"
            for ext in self.media_extensions
            if ext
        ]

    def save(self, target: Path | None = None) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            destination = target or default_config_path()
            write_text_file(destination, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", destination)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# musicat configuration file")
        lines.append("")

        lines.append("# Catalog database file (optional)")
        lines.append("# Defaults to <data_dir>/musicat.db; --dbname overrides it per run")
        lines.append('# Example: db_path = "/var/lib/musicat/catalog.db"')
        if config["db_path"] is not None:
            lines.append(f"db_path = {self._format_toml_value(config['db_path'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/musicat.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# File suffixes treated as media files (case-insensitive)")
        lines.append(f"media_extensions = {self._format_toml_value(config['media_extensions'])}")
        lines.append("")

        lines.append("# Name stored for artist/album/genre when a tag is missing")
        lines.append("# A row with this name must already exist in each dimension table")
        lines.append(f"sentinel_name = {self._format_toml_value(config['sentinel_name'])}")
        lines.append("")

        lines.append("# Directories starting with this prefix are skipped entirely")
        lines.append(f"hidden_prefix = {self._format_toml_value(config['hidden_prefix'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (list, tuple)):
            return "[" + ", ".join(self._format_toml_value(item) for item in value) + "]"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        Returns:
            Config: Loaded configuration object. A commented default file is
            written when none exists yet.
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
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                config_dict = {key: value for key, value in config_dict.items() if key in known}

                for key, value in config_dict.items():
                    if key.endswith("_path") or key.endswith("_file"):
                        config_dict[key] = str(value) if isinstance(value, str) and value.strip() else None

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)
            else:
                instance = cls()
                instance.save(config_file)
                logger.info("Created default configuration at %s", config_file)

            cls._instance = instance
            cls._loaded_from = config_file
            return instance

        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` re-reads the file."""

        cls._instance = None
        cls._loaded_from = None


__all__ = [
    "Config",
    "HIDDEN_PREFIX_DEFAULT",
    "MEDIA_EXTENSIONS_DEFAULT",
    "SENTINEL_NAME_DEFAULT",
]
