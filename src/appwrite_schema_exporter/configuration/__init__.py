"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, default_configuration, load_configuration
from .runtime_settings import (
    Configuration,
    DatabaseDefaults,
    FieldGuideSettings,
    OutputSettings,
    PendingField,
)

__all__ = [
    "Configuration",
    "DatabaseDefaults",
    "FieldGuideSettings",
    "OutputSettings",
    "PendingField",
    "ConfigurationError",
    "default_configuration",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
