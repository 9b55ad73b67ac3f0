"""Config settings – assembling :class:`ReportSettings` from layered sources.

The usual stack for a pipeline client is, lowest priority first: field
defaults, a ``.env`` file, the process environment, then explicit overrides
passed by the caller (tests, command-line flags).
"""
from __future__ import annotations

import dataclasses
import logging
from typing import Any, Sequence, TypeVar

from vpe_logging.config.settings.base import Settings
from vpe_logging.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from vpe_logging.config.settings.report import ReportSettings
from vpe_logging.config.validation.errors import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

logger = logging.getLogger(__name__)


def _required_fields(settings_cls: type[Settings]) -> list[str]:
    return [
        f.name
        for f in dataclasses.fields(settings_cls)  # type: ignore[arg-type]
        if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING  # type: ignore[misc]
    ]


class SettingsFactory:
    """Build one settings instance out of several loaders plus overrides.

    A loader that fails (unreadable ``.env``, bad variable) is logged and
    skipped; only the values it would have contributed are lost.  Overrides
    are validated together with everything else when the instance is built.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """Return *settings_cls* filled from *loaders*, later ones winning.

        Raises :class:`MissingRequiredSettingError` when a field without a
        default is still unset, and :class:`ConfigError` for any value the
        class refuses (``ReportSettings`` checks brokers, encoding and acks).
        """
        values: dict[str, Any] = {}
        for loader in loaders or ():
            try:
                loaded = loader.load(settings_cls)
            except Exception as exc:  # noqa: BLE001 – a broken source must not block the others
                logger.warning("settings.loader_skipped loader=%s exc=%r", type(loader).__name__, exc)
                continue
            values.update({f.name: getattr(loaded, f.name) for f in dataclasses.fields(loaded)})  # type: ignore[arg-type]
        values.update(overrides or {})

        for name in _required_fields(settings_cls):
            if name not in values:
                raise MissingRequiredSettingError(name)

        try:
            return settings_cls(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Cannot build {settings_cls.__name__}: {exc}") from exc


def load_report_settings(env_file: str | None = ".env", **overrides: Any) -> ReportSettings:
    """Reporting configuration from *env_file*, ``VPE_REPORT_*`` variables and *overrides*.

    Pass ``env_file=None`` to read the process environment only.
    """
    loaders: list[SettingsLoader] = []
    if env_file is not None:
        loaders.append(DotenvSettingsLoader(env_file))
    loaders.append(EnvSettingsLoader())
    return SettingsFactory.create(ReportSettings, loaders, overrides)


__all__ = ["SettingsFactory", "load_report_settings"]
