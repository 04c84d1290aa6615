"""
riscfetch Configuration

Runtime settings for the detectors and the terminal renderer. Settings
come from built-in defaults, optionally overridden by a YAML file:

    # ~/.config/riscfetch/config.yaml
    logo: sifive
    style: small
    color: false
    proc_root: /proc
    sys_root: /sys

The file is looked up in this order: explicit path (--config), the
RISCFETCH_CONFIG environment variable, ~/.config/riscfetch/config.yaml.
A missing default file is not an error; a missing explicit file is.
"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "RISCFETCH_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/riscfetch/config.yaml")

VALID_STYLES = ('normal', 'small', 'none')


class ConfigError(ValueError):
    """Configuration file could not be read or contains invalid values"""


@dataclass
class FetchConfig:
    """Configuration for detection and display"""

    # Filesystem roots (overridable for containers and tests)
    proc_root: Path = Path("/proc")
    sys_root: Path = Path("/sys")
    os_release: Path = Path("/etc/os-release")

    # Display defaults
    logo: str = "default"
    style: str = "normal"
    color: Optional[bool] = None  # None = auto-detect from terminal

    # Timeout for external commands (uname), seconds
    command_timeout: float = 5.0

    def __post_init__(self):
        """Normalize paths and validate display settings"""
        self.proc_root = Path(self.proc_root)
        self.sys_root = Path(self.sys_root)
        self.os_release = Path(self.os_release)
        self.style = str(self.style).lower()
        if self.style not in VALID_STYLES:
            raise ConfigError(f"style must be one of {', '.join(VALID_STYLES)}, got {self.style!r}")
        if self.command_timeout <= 0:
            raise ConfigError(f"command_timeout must be positive, got {self.command_timeout}")

    @property
    def cpuinfo_path(self) -> Path:
        return self.proc_root / "cpuinfo"

    @property
    def device_tree_path(self) -> Path:
        return self.proc_root / "device-tree"

    @property
    def cpu0_path(self) -> Path:
        return self.sys_root / "devices" / "system" / "cpu" / "cpu0"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'proc_root': str(self.proc_root),
            'sys_root': str(self.sys_root),
            'os_release': str(self.os_release),
            'logo': self.logo,
            'style': self.style,
            'color': self.color,
            'command_timeout': self.command_timeout,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FetchConfig':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in data.items() if k in known})


def resolve_config_path(path: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """Pick the config file to load, or None to use defaults"""
    if path is not None:
        return Path(path).expanduser()

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()

    default = DEFAULT_CONFIG_PATH.expanduser()
    if default.is_file():
        return default
    return None


def load_config(path: Optional[Union[str, Path]] = None) -> FetchConfig:
    """
    Load configuration from YAML.

    Args:
        path: Explicit config file; see module docstring for the fallbacks

    Returns:
        FetchConfig with file values applied over the defaults

    Raises:
        ConfigError: if the chosen file is unreadable, not a mapping,
            or holds invalid values
    """
    config_path = resolve_config_path(path)
    if config_path is None:
        return FetchConfig()

    logger.debug("Loading config from %s", config_path)
    try:
        with open(config_path, 'r') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return FetchConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    try:
        return FetchConfig.from_dict(data)
    except TypeError as e:
        raise ConfigError(f"Invalid config value in {config_path}: {e}") from e
