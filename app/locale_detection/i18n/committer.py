"""Persistence of a resolved locale into the request."""

import structlog

from locale_detection.i18n.context import RequestContext
from locale_detection.i18n.models import CommitOptions

logger = structlog.stdlib.get_logger(component="i18n.committer")


class LocaleCommitter:
    """Writes a resolved locale back into the request.

    On every commit the locale becomes the ambient locale, is written to the
    locale cookie with the configured expiry and, when enabled, is set as the
    default URL parameter so generated links carry it. The locale is trusted
    to come from LocaleResolver and is not validated again.
    """

    def __init__(self, options: CommitOptions):
        self.options = options

    def commit(self, context: RequestContext, locale: str) -> None:
        """Commit a resolved locale to the request context.

        Args:
            context: Request context to write to.
            locale: Resolved, supported locale.
        """
        context.set_locale(locale)
        context.cookies.set(
            self.options.cookie_name,
            locale,
            max_age=self.options.cookie_expiry,
        )
        # When disabled the map is left as the caller set it, never cleared
        if self.options.persist_to_url_defaults:
            context.default_url_params[self.options.param_key] = locale

        logger.debug(
            "locale_committed",
            locale=locale,
            cookie_name=self.options.cookie_name,
            url_defaults=self.options.persist_to_url_defaults,
        )
