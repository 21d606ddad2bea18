"""
Configuration loader for utilkit.

Loads settings from config/config.json and provides typed access via
dataclasses. Falls back to built-in defaults when no config file exists.
Supports singleton pattern for global access and runtime reload capability.
"""

import io
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError


DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class PathsConfig:
    """Configuration for file system paths."""
    temp_directory: Optional[Path] = None
    logs_directory: Optional[Path] = None


@dataclass
class FilesConfig:
    """Configuration for file helper behavior."""
    temp_dir_attempts: int = 10000
    buffer_size: int = io.DEFAULT_BUFFER_SIZE


@dataclass
class LoggingConfig:
    """Configuration for logging behavior."""
    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    max_file_size_mb: int = 10
    backup_count: int = 5


@dataclass
class Config:
    """
    Main configuration container holding all config sections.

    Provides singleton access via get_config() function.
    """
    paths: PathsConfig = field(default_factory=PathsConfig)
    files: FilesConfig = field(default_factory=FilesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    project_root: Path = field(default_factory=Path)

    @classmethod
    def from_file(cls, config_path: Path) -> "Config":
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the config.json file.

        Returns:
            Populated Config instance.

        Raises:
            ConfigurationError: If file is missing or invalid.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                {"path": str(config_path)}
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {e}",
                {"path": str(config_path)}
            )

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Config file must contain a JSON object",
                {"path": str(config_path)}
            )

        project_root = config_path.resolve().parent.parent

        return cls._parse_config(data, project_root)

    @classmethod
    def defaults(cls, project_root: Path = None) -> "Config":
        """Build a Config holding only default values."""
        return cls._parse_config({}, project_root or Path.cwd())

    @classmethod
    def _parse_config(cls, data: dict, project_root: Path) -> "Config":
        """Parse raw config dict into typed Config object."""
        paths_data = data.get("paths", {})
        paths = PathsConfig(
            temp_directory=cls._resolve_optional_path(paths_data.get("temp_directory"), project_root),
            logs_directory=cls._resolve_optional_path(paths_data.get("logs_directory"), project_root)
        )

        files_data = data.get("files", {})
        files = FilesConfig(
            temp_dir_attempts=files_data.get("temp_dir_attempts", 10000),
            buffer_size=files_data.get("buffer_size", io.DEFAULT_BUFFER_SIZE)
        )
        if files.temp_dir_attempts < 1:
            raise ConfigurationError(
                "files.temp_dir_attempts must be at least 1",
                {"value": files.temp_dir_attempts}
            )

        log_data = data.get("logging", {})
        logging_cfg = LoggingConfig(
            level=log_data.get("level", "INFO"),
            format=log_data.get("format", DEFAULT_LOG_FORMAT),
            max_file_size_mb=log_data.get("max_file_size_mb", 10),
            backup_count=log_data.get("backup_count", 5)
        )

        return cls(
            paths=paths,
            files=files,
            logging=logging_cfg,
            project_root=project_root
        )

    @staticmethod
    def _resolve_optional_path(path_str: Optional[str], project_root: Path) -> Optional[Path]:
        """Resolve a path string, making relative paths absolute. Empty means unset."""
        if not path_str:
            return None
        path = Path(path_str)
        if path.is_absolute():
            return path
        return project_root / path


_config_instance: Optional[Config] = None


def get_config(config_path: Path = None) -> Config:
    """
    Get the singleton Config instance.

    Args:
        config_path: Optional path to config file. If not provided,
                    searches upward from current directory and falls
                    back to defaults when nothing is found.

    Returns:
        The global Config instance.

    Raises:
        ConfigurationError: If a config file exists but cannot be loaded.
    """
    global _config_instance

    if _config_instance is None or config_path is not None:
        if config_path is None:
            config_path = _find_config_file()
        if config_path is None:
            _config_instance = Config.defaults()
        else:
            _config_instance = Config.from_file(config_path)

    return _config_instance


def _find_config_file() -> Optional[Path]:
    """Search upward from current directory to find config/config.json."""
    current = Path.cwd()

    for _ in range(10):
        config_path = current / "config" / "config.json"
        if config_path.exists():
            return config_path

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def reload_config(config_path: Path = None) -> Config:
    """
    Force reload of configuration.

    Args:
        config_path: Optional path to config file.

    Returns:
        Fresh Config instance.
    """
    global _config_instance
    _config_instance = None
    return get_config(config_path)


if __name__ == "__main__":
    try:
        config = get_config()
        print(f"Project root: {config.project_root}")
        print(f"Temp directory: {config.paths.temp_directory or '<system default>'}")
        print(f"Temp dir attempts: {config.files.temp_dir_attempts}")
        print(f"Log level: {config.logging.level}")
    except ConfigurationError as e:
        print(f"Config error: {e.message}")
