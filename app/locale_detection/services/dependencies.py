"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for the locale detection dependencies.
"""

from typing import Annotated

from fastapi import Depends, Request

from locale_detection.configuration import Settings
from locale_detection.i18n import LocaleConfig, LocaleResolver, get_current_locale
from locale_detection.services.providers import (
    get_locale_config,
    get_locale_resolver,
    get_settings,
)


def get_request_locale(request: Request) -> str:
    """Locale committed for the request by LocaleMiddleware.

    Falls back to the ambient locale, then to the default locale when the
    middleware is not installed.
    """
    locale = getattr(request.state, "locale", None) or get_current_locale()
    return locale or get_locale_config().default_locale


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Locale configuration snapshot dependency
LocaleConfigDep = Annotated[LocaleConfig, Depends(get_locale_config)]

# Locale resolver dependency
LocaleResolverDep = Annotated[LocaleResolver, Depends(get_locale_resolver)]

# Locale resolved for the current request
CurrentLocaleDep = Annotated[str, Depends(get_request_locale)]

__all__ = [
    "SettingsDep",
    "LocaleConfigDep",
    "LocaleResolverDep",
    "CurrentLocaleDep",
    "get_request_locale",
]
