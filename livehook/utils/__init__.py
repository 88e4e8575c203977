"""Utility modules for livehook."""

from .logging import get_logger, setup_logging
from .platform import get_config_dir, get_platform

__all__ = [
    "get_logger",
    "setup_logging",
    "get_config_dir",
    "get_platform",
]
