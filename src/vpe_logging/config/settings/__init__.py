"""Config settings – 12-factor env-based configuration."""
from vpe_logging.config.settings.base import Settings
from vpe_logging.config.settings.factory import SettingsFactory, load_report_settings
from vpe_logging.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from vpe_logging.config.settings.report import ReportSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "ReportSettings",
    "Settings",
    "SettingsFactory",
    "load_report_settings",
    "SettingsLoader",
]
