from typing import Optional

from fastapi import FastAPI

from api.router import api_router
from locale_detection.i18n import LocaleConfig, LocaleResolver
from locale_detection.services import get_locale_config, get_locale_resolver
from server.lifespan import lifespan
from server.locale_middleware import LocaleMiddleware, UserGetter, scope_user


def create_app(
    config: Optional[LocaleConfig] = None,
    user_getter: UserGetter = scope_user,
) -> FastAPI:
    """Create the FastAPI application with locale detection installed.

    Args:
        config: Fixed locale configuration. Defaults to the configuration
            loaded from settings.
        user_getter: Callable returning the signed-in user for a request.
    """
    app = FastAPI(lifespan=lifespan)
    app.add_middleware(LocaleMiddleware, config=config, user_getter=user_getter)
    app.state.locale_user_getter = user_getter

    if config is not None:
        resolver = LocaleResolver(config)
        app.state.locale_config = config
        app.dependency_overrides[get_locale_config] = lambda: config
        app.dependency_overrides[get_locale_resolver] = lambda: resolver

    app.include_router(api_router)
    return app


handler = create_app()
