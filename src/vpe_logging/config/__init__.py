"""Config – 12-factor settings for reporting loggers."""

from vpe_logging.config.settings import (
    EnvSettingsLoader,
    ReportSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
    load_report_settings,
)
from vpe_logging.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "ReportSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "load_report_settings",
]
