"""
Configuration management for csvwatch
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

import tomli

from .errors import ConfigError

RELOAD_POLICIES = ('exact', 'any', 'legacy')
DEFAULT_CONFIG_NAME = 'csvwatch.config.toml'


@dataclass(frozen=True)
class ServerConfig:
    """Immutable settings shared by the server, the watcher and the live-reload server"""
    target: Optional[Path] = None
    port: int = 3000
    stylesheet: Optional[Path] = None
    host: str = '0.0.0.0'
    livereload_host: str = 'localhost'
    livereload_port: int = 35729
    reload_policy: str = 'exact'
    log_level: str = 'info'

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ServerConfig':
        """Create ServerConfig instance from dictionary"""
        target = data.get('target')
        stylesheet = data.get('stylesheet')
        try:
            config = cls(
                target=Path(target) if target else None,
                port=int(data.get('port', 3000)),
                stylesheet=Path(stylesheet) if stylesheet else None,
                host=str(data.get('host', '0.0.0.0')),
                livereload_host=str(data.get('livereload_host', 'localhost')),
                livereload_port=int(data.get('livereload_port', 35729)),
                reload_policy=str(data.get('reload_policy', 'exact')),
                log_level=str(data.get('log_level', 'info')),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration value: {e}") from e
        config.validate()
        return config

    def validate(self) -> None:
        """Raise ConfigError for values no component can work with"""
        if self.reload_policy not in RELOAD_POLICIES:
            raise ConfigError(
                f"Unknown reload policy '{self.reload_policy}' "
                f"(expected one of: {', '.join(RELOAD_POLICIES)})"
            )
        for name in ('port', 'livereload_port'):
            value = getattr(self, name)
            if not 0 <= value <= 65535:
                raise ConfigError(f"{name} out of range: {value}")

    def merged(self, **overrides: Any) -> 'ServerConfig':
        """Return a copy with every non-None override applied"""
        values = {k: v for k, v in overrides.items() if v is not None}
        for key in ('target', 'stylesheet'):
            if key in values:
                values[key] = Path(values[key])
        config = replace(self, **values)
        config.validate()
        return config

    @property
    def uses_custom_stylesheet(self) -> bool:
        return self.stylesheet is not None

    @property
    def livereload_script_url(self) -> str:
        return f"http://{self.livereload_host}:{self.livereload_port}/livereload.js"


def load_config(config_path: str) -> Optional[ServerConfig]:
    """Load configuration from a TOML file.

    Returns None when the file does not exist; raises ConfigError when it
    exists but cannot be parsed.
    """
    config_file = Path(config_path)
    if not config_file.exists():
        return None

    try:
        with open(config_file, 'rb') as f:
            data = tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as e:
        raise ConfigError(f"Error loading config {config_file}: {e}") from e

    # Handle both flat and nested config formats
    if 'csvwatch' in data:
        data = data['csvwatch']

    return ServerConfig.from_dict(data)
