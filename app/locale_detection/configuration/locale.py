"""Locale detection settings."""

from datetime import timedelta
from typing import List, Literal, Optional

import structlog
from pydantic import Field, field_validator

from locale_detection.configuration.base import FeatureSettings
from locale_detection.i18n.errors import LocaleConfigurationError
from locale_detection.i18n.models import (
    DEFAULT_COOKIE_EXPIRY,
    DEFAULT_DETECTION_ORDER,
    CookieAttributes,
    LocaleConfig,
    SourceName,
)

logger = structlog.stdlib.get_logger(component="configuration.locale")


class LocaleSettings(FeatureSettings):
    """Locale detection configuration.

    Environment Variables:
        LOCALE_SUPPORTED: JSON list of supported locales (default: ["en", "fr"])
        LOCALE_DEFAULT: Fallback locale, must be supported (default: en)
        LOCALE_DETECTION_ORDER: JSON list drawn from param, cookie, user, request
            (default: ["user", "param", "cookie", "request"])
        LOCALE_COOKIE_NAME: Cookie holding the persisted locale (default: locale)
        LOCALE_PARAM_KEY: Request parameter and URL default key (default: locale)
        LOCALE_COOKIE_EXPIRY: Cookie max-age as an ISO 8601 duration, e.g. P30D
            (default: 90 days)
        LOCALE_PERSIST_TO_URL_DEFAULTS: Set the locale as a default URL
            parameter (default: True)
        LOCALE_COOKIE_PATH: Cookie path (default: /)
        LOCALE_COOKIE_DOMAIN: Cookie domain (default: unset)
        LOCALE_COOKIE_SECURE: Secure cookie flag (default: False)
        LOCALE_COOKIE_HTTPONLY: HttpOnly cookie flag (default: False)
        LOCALE_COOKIE_SAMESITE: lax, strict or none (default: lax)
        LOCALE_CONTENT_LANGUAGE_HEADER: Emit Content-Language on responses
            (default: True)

    Example:
        ```python
        from locale_detection.services import get_settings

        settings = get_settings()
        config = settings.locale.to_config()
        ```
    """

    supported_locales: List[str] = Field(
        default_factory=lambda: ["en", "fr"],
        alias="LOCALE_SUPPORTED",
        description="Locales the application supports",
    )
    default_locale: str = Field(
        default="en",
        alias="LOCALE_DEFAULT",
        description="Locale used when no source yields a supported locale",
    )
    detection_order: List[SourceName] = Field(
        default_factory=lambda: list(DEFAULT_DETECTION_ORDER),
        alias="LOCALE_DETECTION_ORDER",
        description="Sources consulted, in order, to detect the locale",
    )
    cookie_name: str = Field(
        default="locale",
        alias="LOCALE_COOKIE_NAME",
        description="Cookie the resolved locale is persisted to",
    )
    param_key: str = Field(
        default="locale",
        alias="LOCALE_PARAM_KEY",
        description="Request parameter and default URL parameter name",
    )
    cookie_expiry: timedelta = Field(
        default=DEFAULT_COOKIE_EXPIRY,
        alias="LOCALE_COOKIE_EXPIRY",
        description="Max-age of the locale cookie",
    )
    persist_to_url_defaults: bool = Field(
        default=True,
        alias="LOCALE_PERSIST_TO_URL_DEFAULTS",
        description="Inject the locale into default URL parameters",
    )
    cookie_path: str = Field(default="/", alias="LOCALE_COOKIE_PATH")
    cookie_domain: Optional[str] = Field(default=None, alias="LOCALE_COOKIE_DOMAIN")
    cookie_secure: bool = Field(default=False, alias="LOCALE_COOKIE_SECURE")
    cookie_httponly: bool = Field(default=False, alias="LOCALE_COOKIE_HTTPONLY")
    cookie_samesite: Literal["lax", "strict", "none"] = Field(
        default="lax", alias="LOCALE_COOKIE_SAMESITE"
    )
    content_language_header: bool = Field(
        default=True,
        alias="LOCALE_CONTENT_LANGUAGE_HEADER",
        description="Set the Content-Language response header",
    )

    @field_validator("detection_order", mode="before")
    @classmethod
    def normalize_detection_order(cls, v):
        """Accept source names in any case."""
        if isinstance(v, (list, tuple)):
            return [s.strip().lower() if isinstance(s, str) else s for s in v]
        return v

    def to_config(self) -> LocaleConfig:
        """Build the immutable configuration consumed per request.

        Returns:
            LocaleConfig snapshot of these settings.

        Raises:
            LocaleConfigurationError: If the settings violate a startup
                invariant (e.g., default locale not supported).
        """
        try:
            return LocaleConfig(
                supported_locales=tuple(self.supported_locales),
                default_locale=self.default_locale,
                detection_order=tuple(self.detection_order),
                cookie_name=self.cookie_name,
                param_key=self.param_key,
                cookie_expiry=self.cookie_expiry,
                persist_to_url_defaults=self.persist_to_url_defaults,
                cookie_attributes=CookieAttributes(
                    path=self.cookie_path,
                    domain=self.cookie_domain,
                    secure=self.cookie_secure,
                    httponly=self.cookie_httponly,
                    samesite=self.cookie_samesite,
                ),
                content_language_header=self.content_language_header,
            )
        except LocaleConfigurationError as e:
            logger.error("invalid_locale_configuration", error=str(e))
            raise
