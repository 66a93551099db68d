"""Configuration management for pyhead."""
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from pyhead.config.paths import default_config_path
from pyhead.platform.logging import logger


READ_CHUNK_SIZE_DEFAULT = 8192
STDIN_MARKER_DEFAULT = "-"


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

    # Optional log file receiving DEBUG records
    log_file: Path | None = _path_field()

    # Upper bound on bytes pulled from an input per read call
    read_chunk_size: int = READ_CHUNK_SIZE_DEFAULT

    # Argument text that stands for standard input
    stdin_marker: str = STDIN_MARKER_DEFAULT

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> "Config":
        """Build a configuration from parsed TOML, ignoring unknown keys.

        Args:
            values: Parsed TOML document.

        Returns:
            Config: Configuration populated from known keys.
        """
        known = {f.name for f in fields(cls)}
        accepted: dict[str, Any] = {}
        for key, value in values.items():
            if key not in known:
                logger.warning("Ignoring unknown configuration key: %s", key)
                continue
            accepted[key] = value
        return cls(**accepted)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            config_file: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object, or defaults when no file exists.
        """
        if cls._instance is not None and config_file is None:
            return cls._instance

        target = config_file or default_config_path()

        try:
            if target.exists():
                with open(target, "rb") as f:
                    config_dict = tomllib.load(f)
                logger.debug("Configuration loaded from %s", target)
                instance = cls.from_mapping(config_dict)
            else:
                instance = cls()
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = instance
        cls._loaded_from = target
        return instance


config = Config.load()


__all__ = [
    "Config",
    "READ_CHUNK_SIZE_DEFAULT",
    "STDIN_MARKER_DEFAULT",
    "config",
]
