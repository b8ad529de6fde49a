from fastapi import APIRouter, Request

from locale_detection.i18n import SourceName
from locale_detection.services import CurrentLocaleDep, LocaleResolverDep
from server.locale_middleware import build_request_context, scope_user

router = APIRouter(tags=["Locale"])


@router.get("/locale")
def get_locale(request: Request, locale: CurrentLocaleDep, resolver: LocaleResolverDep):
    """Report the request's locale and what each source would resolve to."""
    user_getter = getattr(request.app.state, "locale_user_getter", scope_user)
    context = build_request_context(request, user_getter)
    return {
        "locale": locale,
        "default_locale": resolver.default_locale,
        "available_locales": resolver.available_locales,
        "detection_order": [source.value for source in resolver.config.detection_order],
        "sources": {
            source.value: resolver.resolve_from(context, source) for source in SourceName
        },
        "default_url_params": getattr(request.state, "default_url_params", {}),
    }
