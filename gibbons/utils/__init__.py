"""
Utilities: configuration and logging.

Example:
    >>> from gibbons.utils import load_config, apply_config
    >>>
    >>> logger = apply_config(load_config("configs/debug.yaml"))
"""

from .config import (
    LoggingConfig,
    NetworkConfig,
    GibbonsConfig,
    load_config,
    save_config,
    merge_configs,
    apply_config
)

from .logging import (
    setup_logging,
    ColoredFormatter
)

__all__ = [
    # Config
    'LoggingConfig',
    'NetworkConfig',
    'GibbonsConfig',
    'load_config',
    'save_config',
    'merge_configs',
    'apply_config',

    # Logging
    'setup_logging',
    'ColoredFormatter',
]
