"""Locale detection models.

Defines the closed set of locale sources and the immutable configuration
values consumed by the resolver and the committer.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Iterable, Optional, Tuple

from locale_detection.i18n.errors import LocaleConfigurationError

DEFAULT_COOKIE_EXPIRY = timedelta(days=90)


def normalize_locale(value: str) -> str:
    """Return the canonical (stripped, lower-case) form of a locale string."""
    return value.strip().lower()


class SourceName(str, Enum):
    """Sources a locale candidate can be read from.

    Attributes:
        PARAM: Query or path parameter.
        COOKIE: Previously persisted locale cookie.
        USER: Stored preference of the authenticated user.
        REQUEST: Browser ``Accept-Language`` header.
    """

    PARAM = "param"
    COOKIE = "cookie"
    USER = "user"
    REQUEST = "request"

    @classmethod
    def from_string(cls, source: str) -> "SourceName":
        """Convert a string to a SourceName.

        Args:
            source: Source name (e.g., "param", "COOKIE").

        Returns:
            Matching SourceName.

        Raises:
            ValueError: If the name is not a known source.
        """
        try:
            return cls(source.strip().lower())
        except ValueError as e:
            raise ValueError(f"Unknown locale source: {source}") from e


DEFAULT_DETECTION_ORDER: Tuple[SourceName, ...] = (
    SourceName.USER,
    SourceName.PARAM,
    SourceName.COOKIE,
    SourceName.REQUEST,
)


@dataclass(frozen=True)
class CookieAttributes:
    """Attributes applied to the locale cookie when it reaches the response."""

    path: str = "/"
    domain: Optional[str] = None
    secure: bool = False
    httponly: bool = False
    samesite: str = "lax"


@dataclass(frozen=True)
class CommitOptions:
    """Options controlling what LocaleCommitter writes back.

    Attributes:
        cookie_name: Cookie the resolved locale is written to.
        cookie_expiry: Cookie max-age.
        param_key: Key set in the default URL parameters.
        persist_to_url_defaults: Whether to set the default URL parameter.
        cookie_attributes: Path, domain and security flags for the cookie.
    """

    cookie_name: str = "locale"
    cookie_expiry: timedelta = DEFAULT_COOKIE_EXPIRY
    param_key: str = "locale"
    persist_to_url_defaults: bool = True
    cookie_attributes: CookieAttributes = field(default_factory=CookieAttributes)


@dataclass(frozen=True)
class LocaleConfig:
    """Immutable locale detection configuration.

    Built once at startup; a configuration reload builds a new instance so
    that in-flight requests keep the snapshot they started with.

    Attributes:
        supported_locales: Ordered, de-duplicated canonical locales.
        default_locale: Fallback locale, always a member of supported_locales.
        detection_order: Sources consulted in order; may skip or repeat sources.
        cookie_name: Cookie holding the persisted locale.
        param_key: Request parameter (and URL default) holding the locale.
        cookie_expiry: Max-age of the locale cookie.
        persist_to_url_defaults: Inject the locale into default URL parameters.
        cookie_attributes: Attributes applied to the locale cookie.
        content_language_header: Emit a Content-Language response header.
    """

    supported_locales: Tuple[str, ...]
    default_locale: str
    detection_order: Tuple[SourceName, ...] = DEFAULT_DETECTION_ORDER
    cookie_name: str = "locale"
    param_key: str = "locale"
    cookie_expiry: timedelta = DEFAULT_COOKIE_EXPIRY
    persist_to_url_defaults: bool = True
    cookie_attributes: CookieAttributes = field(default_factory=CookieAttributes)
    content_language_header: bool = True

    def __post_init__(self) -> None:
        supported = _canonical_locales(self.supported_locales)
        if not supported:
            raise LocaleConfigurationError("supported_locales must not be empty")

        if not isinstance(self.default_locale, str):
            raise LocaleConfigurationError("default_locale must be a string")
        default = normalize_locale(self.default_locale)
        if default not in supported:
            raise LocaleConfigurationError(
                f"default_locale '{self.default_locale}' is not one of "
                f"supported_locales {list(supported)}"
            )

        if not self.cookie_name:
            raise LocaleConfigurationError("cookie_name must not be empty")
        if not self.param_key:
            raise LocaleConfigurationError("param_key must not be empty")
        if self.cookie_expiry <= timedelta(0):
            raise LocaleConfigurationError("cookie_expiry must be positive")

        try:
            order = tuple(
                s if isinstance(s, SourceName) else SourceName.from_string(s)
                for s in self.detection_order
            )
        except ValueError as e:
            raise LocaleConfigurationError(str(e)) from e

        # Frozen dataclass: normalised values are written through object.__setattr__
        object.__setattr__(self, "supported_locales", supported)
        object.__setattr__(self, "default_locale", default)
        object.__setattr__(self, "detection_order", order)

    @property
    def commit_options(self) -> CommitOptions:
        """Options for LocaleCommitter derived from this configuration."""
        return CommitOptions(
            cookie_name=self.cookie_name,
            cookie_expiry=self.cookie_expiry,
            param_key=self.param_key,
            persist_to_url_defaults=self.persist_to_url_defaults,
            cookie_attributes=self.cookie_attributes,
        )


def _canonical_locales(locales: Iterable[str]) -> Tuple[str, ...]:
    seen: list[str] = []
    for locale in locales:
        if not isinstance(locale, str):
            raise LocaleConfigurationError(f"Invalid locale in configuration: {locale!r}")
        canonical = normalize_locale(locale)
        if not canonical:
            raise LocaleConfigurationError("supported_locales must not contain blanks")
        if canonical not in seen:
            seen.append(canonical)
    return tuple(seen)
