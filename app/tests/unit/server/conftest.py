"""Fixtures for server module unit tests."""

from typing import Optional

import pytest
from starlette.requests import Request

from tests.factories import FakeUser, make_locale_config


def _user_from_header(request: Request) -> Optional[FakeUser]:
    """Treat an X-User-Locale header as a signed-in user's stored preference."""
    if "x-user" not in request.headers:
        return None
    return FakeUser(request.headers.get("x-user-locale"))


@pytest.fixture
def user_getter():
    return _user_from_header


@pytest.fixture
def server_locale_config():
    """Locale configuration used by the server tests."""
    return make_locale_config()


@pytest.fixture
def make_starlette_request():
    """Factory building an unrouted Starlette request, as middleware sees it."""

    def _make(
        query_string: str = "",
        cookies: Optional[dict] = None,
        headers: Optional[dict] = None,
        user=None,
        path: str = "/",
        app=None,
    ) -> Request:
        raw_headers = [
            (name.lower().encode(), value.encode()) for name, value in (headers or {}).items()
        ]
        if cookies:
            cookie_header = "; ".join(f"{k}={v}" for k, v in cookies.items())
            raw_headers.append((b"cookie", cookie_header.encode()))
        scope = {
            "type": "http",
            "method": "GET",
            "scheme": "http",
            "server": ("testserver", 80),
            "path": path,
            "root_path": "",
            "query_string": query_string.encode(),
            "headers": raw_headers,
            "path_params": {},
        }
        if user is not None:
            scope["user"] = user
        if app is not None:
            scope["app"] = app
        return Request(scope)

    return _make
