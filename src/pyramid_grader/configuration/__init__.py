"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, default_configuration, load_configuration
from .runtime_settings import CaseSettings, Configuration, ExecutionSettings, ReportSettings

__all__ = [
    "Configuration",
    "ExecutionSettings",
    "CaseSettings",
    "ReportSettings",
    "ConfigurationError",
    "default_configuration",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
