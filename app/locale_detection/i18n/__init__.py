"""i18n system - locale resolution and persistence.

Determines the locale for each request from an ordered chain of sources and
writes it back into the request.

Main components:
- models: SourceName, LocaleConfig, CommitOptions, CookieAttributes
- validator: LocaleValidator and validate_locale for whitelist checks
- accept_language: parse_accept_language for the Accept-Language header
- extractors: one candidate extractor per source
- resolvers: LocaleResolver walking the detection order
- committer: LocaleCommitter persisting the resolved locale
- context: RequestContext, CookieJar and the ambient locale
"""

from locale_detection.i18n.accept_language import parse_accept_language, primary_tag
from locale_detection.i18n.committer import LocaleCommitter
from locale_detection.i18n.context import (
    CookieJar,
    CookieWrite,
    LocaleUser,
    RequestContext,
    get_current_locale,
    reset_current_locale,
    set_current_locale,
)
from locale_detection.i18n.errors import LocaleConfigurationError
from locale_detection.i18n.extractors import EXTRACTORS
from locale_detection.i18n.models import (
    DEFAULT_COOKIE_EXPIRY,
    DEFAULT_DETECTION_ORDER,
    CommitOptions,
    CookieAttributes,
    LocaleConfig,
    SourceName,
    normalize_locale,
)
from locale_detection.i18n.resolvers import LocaleResolver
from locale_detection.i18n.validator import LocaleValidator, validate_locale

__all__ = [
    "SourceName",
    "LocaleConfig",
    "CommitOptions",
    "CookieAttributes",
    "DEFAULT_COOKIE_EXPIRY",
    "DEFAULT_DETECTION_ORDER",
    "normalize_locale",
    "LocaleConfigurationError",
    "LocaleValidator",
    "validate_locale",
    "parse_accept_language",
    "primary_tag",
    "EXTRACTORS",
    "LocaleResolver",
    "LocaleCommitter",
    "RequestContext",
    "CookieJar",
    "CookieWrite",
    "LocaleUser",
    "get_current_locale",
    "set_current_locale",
    "reset_current_locale",
]
