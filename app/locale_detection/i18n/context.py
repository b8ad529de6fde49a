"""Request-scoped locale context.

RequestContext bundles everything the resolver reads and the committer
writes for a single request. Web frameworks adapt their request objects to
it (see server.locale_middleware); tests build it directly.

The ambient locale is held in a ContextVar so concurrent requests, whether
asyncio tasks or threads, each observe their own value.
"""

from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, Mapping, MutableMapping, Optional, Protocol, runtime_checkable

from locale_detection.i18n.models import CookieAttributes

_current_locale: ContextVar[Optional[str]] = ContextVar("current_locale", default=None)


def get_current_locale() -> Optional[str]:
    """Get the locale committed for the current request, if any."""
    return _current_locale.get()


def set_current_locale(locale: Optional[str]) -> Token:
    """Set the ambient locale.

    Returns:
        Token that can be passed to reset_current_locale.
    """
    return _current_locale.set(locale)


def reset_current_locale(token: Token) -> None:
    """Restore the ambient locale to the value it had before set_current_locale."""
    _current_locale.reset(token)


@runtime_checkable
class LocaleUser(Protocol):
    """A signed-in user that may carry a stored locale preference."""

    def locale_preference(self) -> Optional[str]: ...


@dataclass(frozen=True)
class CookieWrite:
    """A cookie value waiting to be sent with the response."""

    value: str
    max_age: timedelta


class CookieJar:
    """Incoming request cookies plus cookies to set on the response.

    Reads see pending writes first, so a value set earlier in the request is
    what later reads observe.
    """

    def __init__(self, cookies: Optional[Mapping[str, str]] = None):
        self._incoming: Dict[str, str] = dict(cookies or {})
        self._pending: Dict[str, CookieWrite] = {}

    def get(self, key: str) -> Optional[str]:
        if key in self._pending:
            return self._pending[key].value
        return self._incoming.get(key)

    def set(self, key: str, value: str, max_age: timedelta) -> None:
        self._pending[key] = CookieWrite(value=value, max_age=max_age)

    @property
    def pending(self) -> Dict[str, CookieWrite]:
        """Cookies set during this request, keyed by name."""
        return dict(self._pending)

    def apply_to(self, response: Any, attributes: Optional[CookieAttributes] = None) -> None:
        """Write pending cookies to a Starlette-style response.

        Args:
            response: Object exposing ``set_cookie`` (e.g., starlette Response).
            attributes: Path, domain and security flags for every cookie.
        """
        attrs = attributes or CookieAttributes()
        for key, write in self._pending.items():
            response.set_cookie(
                key=key,
                value=write.value,
                max_age=int(write.max_age.total_seconds()),
                path=attrs.path,
                domain=attrs.domain,
                secure=attrs.secure,
                httponly=attrs.httponly,
                samesite=attrs.samesite,
            )


@dataclass
class RequestContext:
    """Per-request read/write surface for locale detection.

    Attributes:
        params: Merged query and path parameters.
        cookies: Incoming cookies and pending cookie writes.
        headers: Request headers; looked up case-insensitively.
        user: The authenticated user, if any.
        default_url_params: Defaults consumed by URL generation.
        locale: Locale committed for this request, mirrored into the ambient
            ContextVar by set_locale.
    """

    params: Mapping[str, Any] = field(default_factory=dict)
    cookies: CookieJar = field(default_factory=CookieJar)
    headers: Mapping[str, str] = field(default_factory=dict)
    user: Optional[LocaleUser] = None
    default_url_params: MutableMapping[str, Any] = field(default_factory=dict)
    locale: Optional[str] = None

    def param(self, key: str) -> Optional[Any]:
        return self.params.get(key)

    def header(self, name: str) -> Optional[str]:
        value = self.headers.get(name)
        if value is not None:
            return value
        lowered = name.lower()
        for key, candidate in self.headers.items():
            if key.lower() == lowered:
                return candidate
        return None

    def current_user(self) -> Optional[LocaleUser]:
        return self.user

    def set_locale(self, locale: str) -> None:
        """Set the ambient locale for the rest of this request."""
        self.locale = locale
        set_current_locale(locale)
