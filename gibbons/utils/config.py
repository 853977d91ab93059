"""
Configuration management for gibbons.

This module provides configuration classes and utilities:
- LoggingConfig: where and how library logs are emitted
- NetworkConfig: defaults used when building networks
- GibbonsConfig: complete configuration
- YAML loading/saving utilities

Example:
    >>> from gibbons.utils import load_config, apply_config
    >>>
    >>> config = load_config('configs/debug.yaml')
    >>> logger = apply_config(config)
    >>>
    >>> # Or programmatically
    >>> config = GibbonsConfig(
    ...     logging=LoggingConfig(level='DEBUG'),
    ...     network=NetworkConfig(default_activation='relu')
    ... )

YAML layout:
    name: debug
    logging:
      level: DEBUG
      log_dir: logs
      colored: false
    network:
      default_activation: relu
"""

import logging
from dataclasses import dataclass, asdict, field
from typing import Optional, Dict, Any
from pathlib import Path

import yaml

from ..core.registry import ActivationRegistry
from .logging import setup_logging


LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


# ============================================================================
# LOGGING CONFIGURATION
# ============================================================================

@dataclass
class LoggingConfig:
    """
    Logging configuration.

    Args:
        level: Level name ('DEBUG', 'INFO', ...)
        log_dir: Directory for log files (None disables file logging)
        colored: Use colored console output
        console: Enable console logging
    """

    level: str = 'WARNING'
    log_dir: Optional[str] = None
    colored: bool = True
    console: bool = True

    def __post_init__(self):
        """Validate configuration."""
        self.level = str(self.level).upper()
        if self.level not in LOG_LEVELS:
            raise ValueError(f"level must be one of {list(LOG_LEVELS)}, got {self.level}")

    @property
    def level_value(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.level)


# ============================================================================
# NETWORK CONFIGURATION
# ============================================================================

@dataclass
class NetworkConfig:
    """
    Network building defaults.

    Args:
        default_activation: Registered activation used by neurons built
            without an explicit one
    """

    default_activation: str = 'tanh'

    def __post_init__(self):
        """Validate configuration."""
        if not self.default_activation:
            raise ValueError("default_activation must be a non-empty activation name")


# ============================================================================
# COMPLETE CONFIGURATION
# ============================================================================

@dataclass
class GibbonsConfig:
    """
    Complete configuration.

    Args:
        logging: Logging configuration
        network: Network configuration
        name: Configuration name
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    network: NetworkConfig = field(default_factory=NetworkConfig)
    name: str = 'default'

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'name': self.name,
            'logging': asdict(self.logging),
            'network': asdict(self.network),
        }

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'GibbonsConfig':
        """Create from dictionary. Missing sections take their defaults."""
        return cls(
            logging=LoggingConfig(**(config_dict.get('logging') or {})),
            network=NetworkConfig(**(config_dict.get('network') or {})),
            name=config_dict.get('name', 'default'),
        )


# ============================================================================
# YAML UTILITIES
# ============================================================================

def load_config(config_path: str) -> GibbonsConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        GibbonsConfig instance
    """
    with open(config_path, 'r') as f:
        config_dict = yaml.safe_load(f) or {}

    return GibbonsConfig.from_dict(config_dict)


def save_config(config: GibbonsConfig, config_path: str) -> None:
    """
    Save configuration to YAML file.

    Args:
        config: GibbonsConfig instance
        config_path: Path to save YAML file
    """
    Path(config_path).parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)


def merge_configs(base: GibbonsConfig, override: Dict[str, Any]) -> GibbonsConfig:
    """
    Merge override values into base config.

    Example:
        >>> config = merge_configs(GibbonsConfig(), {'logging': {'level': 'DEBUG'}})
        >>> config.logging.level
        'DEBUG'
    """
    config_dict = base.to_dict()

    def deep_merge(d1, d2):
        for key, value in d2.items():
            if key in d1 and isinstance(d1[key], dict) and isinstance(value, dict):
                deep_merge(d1[key], value)
            else:
                d1[key] = value

    deep_merge(config_dict, override)

    return GibbonsConfig.from_dict(config_dict)


def apply_config(config: GibbonsConfig) -> logging.Logger:
    """
    Configure logging and network defaults.

    Args:
        config: Configuration to apply

    Returns:
        The configured ``gibbons`` logger

    Raises:
        ValueError: If the default activation is not registered
    """
    ActivationRegistry.set_default(config.network.default_activation)

    return setup_logging(
        'gibbons',
        log_dir=config.logging.log_dir,
        level=config.logging.level_value,
        console=config.logging.console,
        colored=config.logging.colored,
    )
