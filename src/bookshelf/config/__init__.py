"""Configuration loading and path discovery."""

from .config import DEFAULT_SUPPORTED_EXTENSIONS, Config
from .paths import default_config_path, default_log_file

__all__ = ["Config", "DEFAULT_SUPPORTED_EXTENSIONS", "default_config_path", "default_log_file"]
