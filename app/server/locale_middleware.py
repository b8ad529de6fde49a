"""Starlette middleware resolving and committing the locale of each request."""

from typing import Any, Callable, Optional, Sequence

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.routing import BaseRoute, Match
from starlette.types import Scope

from locale_detection.i18n import (
    CookieJar,
    LocaleCommitter,
    LocaleConfig,
    LocaleResolver,
    LocaleUser,
    RequestContext,
    reset_current_locale,
    set_current_locale,
)
from locale_detection.logging import bind_request_context
from locale_detection.services import get_locale_committer, get_locale_resolver

UserGetter = Callable[[Request], Optional[LocaleUser]]


def scope_user(request: Request) -> Optional[LocaleUser]:
    """Return the authenticated user from the ASGI scope, if it has a locale preference.

    Starlette's AuthenticationMiddleware stores the user under ``scope["user"]``.
    """
    user = request.scope.get("user")
    if isinstance(user, LocaleUser):
        return user
    return None


def _match_path_params(routes: Sequence[BaseRoute], scope: Scope) -> Optional[dict]:
    # Same precedence as Router: first full match, else first partial match
    partial = None
    for route in routes:
        match, child_scope = route.matches(scope)
        if match == Match.FULL:
            nested = getattr(route, "routes", None)
            if nested:
                found = _match_path_params(nested, {**scope, **child_scope})
                if found is not None:
                    return found
            return child_scope.get("path_params", {})
        if match == Match.PARTIAL and partial is None:
            partial = child_scope
    if partial is not None:
        return partial.get("path_params", {})
    return None


def routed_path_params(request: Request) -> dict[str, Any]:
    """Return the path parameters of the route that will handle the request.

    Middleware runs before routing, when ``request.path_params`` is still
    empty, so the application's routes are matched against the scope here.
    """
    if request.scope.get("path_params"):
        return dict(request.path_params)
    router = getattr(request.scope.get("app"), "router", None)
    if router is None:
        return {}
    return dict(_match_path_params(router.routes, request.scope) or {})


def build_request_context(
    request: Request,
    user_getter: UserGetter = scope_user,
) -> RequestContext:
    """Adapt a Starlette request to a RequestContext.

    Path parameters take precedence over query parameters of the same name.
    """
    params: dict[str, Any] = dict(request.query_params)
    params.update(routed_path_params(request))
    return RequestContext(
        params=params,
        cookies=CookieJar(request.cookies),
        headers=request.headers,
        user=user_getter(request),
    )


class LocaleMiddleware(BaseHTTPMiddleware):
    """Resolve the request locale, commit it, and persist it on the response.

    Stores the locale in ``request.state.locale`` and the default URL
    parameters in ``request.state.default_url_params``, sets the ambient
    locale for the rest of the request, then writes the locale cookie and
    the Content-Language header to the response.

    When no config is given, the application-scoped resolver and committer
    are looked up per request, so a configuration reload applies to later
    requests.
    """

    def __init__(
        self,
        app,
        config: Optional[LocaleConfig] = None,
        user_getter: UserGetter = scope_user,
    ):
        super().__init__(app)
        self.user_getter = user_getter
        self.resolver: Optional[LocaleResolver] = None
        self.committer: Optional[LocaleCommitter] = None
        if config is not None:
            self.resolver = LocaleResolver(config)
            self.committer = LocaleCommitter(config.commit_options)

    async def dispatch(self, request, call_next):
        resolver = self.resolver or get_locale_resolver()
        committer = self.committer or get_locale_committer()
        config = resolver.config

        context = build_request_context(request, self.user_getter)
        token = set_current_locale(None)
        try:
            locale = resolver.resolve(context)
            committer.commit(context, locale)
            request.state.locale = locale
            request.state.default_url_params = context.default_url_params

            with bind_request_context(
                request_path=request.url.path,
                request_method=request.method,
                locale=locale,
            ):
                response = await call_next(request)
        finally:
            reset_current_locale(token)

        context.cookies.apply_to(response, config.cookie_attributes)
        if config.content_language_header and "content-language" not in response.headers:
            response.headers["Content-Language"] = locale
        return response
