"""Locale candidate extractors, one per source.

Each extractor is a pure read of the RequestContext. The param, cookie and
user extractors return raw, unvalidated candidates. The request extractor
screens every Accept-Language entry against the supported locales and
returns the first acceptable one, because a header's top entry is often a
regional tag (e.g., "en-us") that only matches through its primary tag.
"""

from typing import Any, Callable, Dict, Optional

from locale_detection.i18n.accept_language import parse_accept_language, primary_tag
from locale_detection.i18n.context import RequestContext
from locale_detection.i18n.models import LocaleConfig, SourceName
from locale_detection.i18n.validator import validate_locale

ACCEPT_LANGUAGE_HEADER = "Accept-Language"

Extractor = Callable[[RequestContext, LocaleConfig], Optional[Any]]


def locale_from_param(context: RequestContext, config: LocaleConfig) -> Optional[Any]:
    return context.param(config.param_key)


def locale_from_cookie(context: RequestContext, config: LocaleConfig) -> Optional[Any]:
    return context.cookies.get(config.cookie_name)


def locale_from_user(context: RequestContext, config: LocaleConfig) -> Optional[Any]:
    user = context.current_user()
    if user is None:
        return None
    return user.locale_preference()


def locale_from_request(context: RequestContext, config: LocaleConfig) -> Optional[str]:
    """Return the most preferred supported locale from Accept-Language.

    Each tag is checked as a whole first, then by its primary tag.
    """
    for tag in parse_accept_language(context.header(ACCEPT_LANGUAGE_HEADER)):
        locale = validate_locale(tag, config.supported_locales) or validate_locale(
            primary_tag(tag), config.supported_locales
        )
        if locale:
            return locale
    return None


EXTRACTORS: Dict[SourceName, Extractor] = {
    SourceName.PARAM: locale_from_param,
    SourceName.COOKIE: locale_from_cookie,
    SourceName.USER: locale_from_user,
    SourceName.REQUEST: locale_from_request,
}
