from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from locale_detection.logging import configure_logging, get_module_logger
from locale_detection.services import get_locale_config, get_settings

logger = get_module_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and validate the locale configuration at startup.

    An invalid locale configuration raises LocaleConfigurationError here,
    once, instead of on the first request.
    """
    settings = get_settings()
    configure_logging(settings=settings)
    config = getattr(app.state, "locale_config", None) or get_locale_config()
    logger.info(
        "locale_configuration_loaded",
        supported_locales=list(config.supported_locales),
        default_locale=config.default_locale,
        detection_order=[source.value for source in config.detection_order],
        git_sha=settings.GIT_SHA,
    )
    app.state.locale_config = config
    yield
    logger.info("application_shutdown")
