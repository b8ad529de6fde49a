"""Locale resolution logic for determining a request's locale.

Walks the configured detection order, validating each source's candidate
against the supported locales, and falls back to the default locale.
"""

from typing import List, Optional, Union

import structlog

from locale_detection.i18n.context import RequestContext
from locale_detection.i18n.extractors import EXTRACTORS
from locale_detection.i18n.models import LocaleConfig, SourceName
from locale_detection.i18n.validator import validate_locale

# Lazy proxy: bound on each call, so it follows the current structlog config
logger = structlog.stdlib.get_logger(component="i18n.resolver")


class LocaleResolver:
    """Resolves the locale for a request from its configured sources.

    Implements the fallback chain described by ``config.detection_order``
    (by default user, param, cookie, request), returning the first source
    that yields a supported locale, or the default locale.

    The resolver holds a single LocaleConfig, so one resolution always sees
    one consistent configuration snapshot.
    """

    def __init__(self, config: LocaleConfig):
        """Initialize locale resolver.

        Args:
            config: Immutable locale detection configuration.
        """
        self.config = config

    @property
    def available_locales(self) -> List[str]:
        return list(self.config.supported_locales)

    @property
    def default_locale(self) -> str:
        return self.config.default_locale

    def resolve_from(
        self,
        context: RequestContext,
        source: Union[SourceName, str],
    ) -> Optional[str]:
        """Resolve the locale from a single named source.

        Args:
            context: Request context to read from.
            source: Source to consult (e.g., SourceName.COOKIE or "cookie").

        Returns:
            Canonical supported locale, or None if the source has none.

        Raises:
            ValueError: If source is not a known source name.
        """
        if not isinstance(source, SourceName):
            source = SourceName.from_string(source)
        candidate = EXTRACTORS[source](context, self.config)
        return validate_locale(candidate, self.config.supported_locales)

    def resolve(self, context: RequestContext) -> str:
        """Resolve the locale for a request.

        Sources are consulted strictly in detection order and the first
        supported locale wins; later sources are never read.

        Args:
            context: Request context to read from.

        Returns:
            A supported locale; the default locale when no source matches.
        """
        for source in self.config.detection_order:
            locale = self.resolve_from(context, source)
            if locale is not None:
                logger.debug(
                    "locale_resolved",
                    locale=locale,
                    source=source.value,
                    default_locale=self.config.default_locale,
                )
                return locale

        logger.debug("locale_resolved_to_default", locale=self.config.default_locale)
        return self.config.default_locale
