"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import FakeUser, make_locale_config, make_request_context

__all__ = [
    "FakeUser",
    "make_locale_config",
    "make_request_context",
]
