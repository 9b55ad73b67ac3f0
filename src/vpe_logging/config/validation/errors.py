"""Config validation – errors raised while building :class:`ReportSettings`.

Every error carries the name of the offending setting: the dataclass field
when the value came from code or overrides, the ``VPE_REPORT_*`` variable
when it came from the environment or a ``.env`` file.
"""
from vpe_logging.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """The report producer cannot be configured from the given sources."""
    default_code = "report_config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "report_setting_missing"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Report setting {setting_name!r} has no value and no default")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A broker list, encoding, acks mode or limit that the producer would reject."""
    default_code = "report_setting_invalid"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"Report setting {setting_name!r} rejected {value!r}: {reason}")
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
