"""
Configuration management for tfconfig.

Provides dataclasses for all configuration options with sensible defaults,
YAML file loading, and environment variable overrides.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from pathlib import Path
import os

import yaml
from dotenv import load_dotenv, find_dotenv


_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass
class LoaderConfig:
    """Configuration for module loading."""
    # Abort on the first unreadable or unparsable file
    strict: bool = field(default_factory=lambda: _env_flag("TFCONFIG_STRICT"))
    encoding: str = "utf-8"


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = field(default_factory=lambda: os.getenv("TFCONFIG_LOG_LEVEL", "INFO"))
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    file: Optional[Path] = None

    def __post_init__(self):
        if self.file and isinstance(self.file, str):
            self.file = Path(self.file)


@dataclass
class AppConfig:
    """
    Root configuration object containing all settings.

    Can be loaded from YAML file or constructed programmatically.
    """
    loader: LoaderConfig = field(default_factory=LoaderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: Path | str) -> 'AppConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is not a mapping
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppConfig':
        """
        Create configuration from a dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            AppConfig instance
        """
        loader = LoaderConfig(**data.get('loader', {}))
        logging = LoggingConfig(**data.get('logging', {}))

        return cls(loader=loader, logging=logging)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            'loader': {
                'strict': self.loader.strict,
                'encoding': self.loader.encoding,
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file': str(self.logging.file) if self.logging.file else None,
            },
        }

    def save_yaml(self, path: Path | str) -> None:
        """
        Save configuration to a YAML file.

        Args:
            path: Path to output YAML file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


def get_default_config() -> AppConfig:
    """
    Get the default application configuration.

    Returns:
        AppConfig with all default values
    """
    return AppConfig()


def load_config(config_path: Optional[Path | str] = None) -> AppConfig:
    """
    Load configuration from file or return defaults.

    A .env file in the working directory is loaded first, so the
    TFCONFIG_* environment defaults can be set there.

    Looks for config in this order:
    1. Provided path
    2. ./tfconfig.yaml
    3. ./config/tfconfig.yaml
    4. ~/.tfconfig/config.yaml
    5. Default values

    Args:
        config_path: Optional path to config file

    Returns:
        AppConfig instance
    """
    load_dotenv(find_dotenv(usecwd=True))

    if config_path:
        return AppConfig.from_yaml(config_path)

    default_paths = [
        Path("tfconfig.yaml"),
        Path("config/tfconfig.yaml"),
        Path.home() / ".tfconfig" / "config.yaml",
    ]

    for path in default_paths:
        if path.exists():
            return AppConfig.from_yaml(path)

    return get_default_config()
