"""Locale detection services and dependency injection helpers."""

from locale_detection.services.dependencies import (
    CurrentLocaleDep,
    LocaleConfigDep,
    LocaleResolverDep,
    SettingsDep,
    get_request_locale,
)
from locale_detection.services.providers import (
    get_locale_committer,
    get_locale_config,
    get_locale_resolver,
    get_settings,
    reload_locale_config,
)

__all__ = [
    "get_settings",
    "get_locale_config",
    "get_locale_resolver",
    "get_locale_committer",
    "reload_locale_config",
    "SettingsDep",
    "LocaleConfigDep",
    "LocaleResolverDep",
    "CurrentLocaleDep",
    "get_request_locale",
]
