import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `locale_detection.i18n`) works during pytest collection.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from locale_detection.i18n import reset_current_locale, set_current_locale  # noqa: E402
from locale_detection.logging import configure_logging  # noqa: E402
from locale_detection.services import providers  # noqa: E402
from tests.factories import FakeUser, make_locale_config, make_request_context  # noqa: E402

configure_logging()


@pytest.fixture(autouse=True)
def isolated_ambient_locale():
    """Restore the ambient locale after each test."""
    token = set_current_locale(None)
    yield
    reset_current_locale(token)


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Drop cached settings and locale services between tests."""
    providers.get_locale_committer.cache_clear()
    providers.get_locale_resolver.cache_clear()
    providers.get_locale_config.cache_clear()
    providers.get_settings.cache_clear()
    yield
    providers.get_locale_committer.cache_clear()
    providers.get_locale_resolver.cache_clear()
    providers.get_locale_config.cache_clear()
    providers.get_settings.cache_clear()


@pytest.fixture
def locale_config():
    """Supported locales en and fr, default en, default detection order."""
    return make_locale_config()


@pytest.fixture
def make_context():
    """Factory fixture building RequestContext instances."""
    return make_request_context


@pytest.fixture
def fake_user():
    """Factory fixture building users with a stored locale preference."""
    return FakeUser
