"""Unit tests for locale_detection.configuration module.

Tests cover:
- LocaleSettings defaults and environment overrides
- LocaleSettings.to_config() and startup invariants
- Settings aggregation
"""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from locale_detection.configuration import LocaleSettings, Settings
from locale_detection.i18n import LocaleConfigurationError, SourceName


@pytest.mark.unit
class TestLocaleSettings:
    """Test suite for LocaleSettings configuration."""

    def test_defaults(self):
        """LocaleSettings uses the documented defaults."""
        locale = LocaleSettings()

        assert locale.supported_locales == ["en", "fr"]
        assert locale.default_locale == "en"
        assert locale.detection_order == [
            SourceName.USER,
            SourceName.PARAM,
            SourceName.COOKIE,
            SourceName.REQUEST,
        ]
        assert locale.cookie_name == "locale"
        assert locale.param_key == "locale"
        assert locale.cookie_expiry == timedelta(days=90)
        assert locale.persist_to_url_defaults is True
        assert locale.content_language_header is True

    def test_environment_overrides(self, monkeypatch):
        """LocaleSettings reads its environment aliases."""
        monkeypatch.setenv("LOCALE_SUPPORTED", '["en", "fr", "de"]')
        monkeypatch.setenv("LOCALE_DEFAULT", "de")
        monkeypatch.setenv("LOCALE_DETECTION_ORDER", '["PARAM", "request"]')
        monkeypatch.setenv("LOCALE_COOKIE_NAME", "lang")
        monkeypatch.setenv("LOCALE_COOKIE_EXPIRY", "PT1H")
        monkeypatch.setenv("LOCALE_PERSIST_TO_URL_DEFAULTS", "false")

        locale = LocaleSettings()

        assert locale.supported_locales == ["en", "fr", "de"]
        assert locale.default_locale == "de"
        assert locale.detection_order == [SourceName.PARAM, SourceName.REQUEST]
        assert locale.cookie_name == "lang"
        assert locale.cookie_expiry == timedelta(hours=1)
        assert locale.persist_to_url_defaults is False

    def test_invalid_source_rejected(self, monkeypatch):
        """Unknown sources fail settings validation."""
        monkeypatch.setenv("LOCALE_DETECTION_ORDER", '["session"]')
        with pytest.raises(ValidationError):
            LocaleSettings()

    def test_populate_by_field_name(self):
        """Fields can be set by name for programmatic overrides."""
        locale = LocaleSettings(default_locale="fr")
        assert locale.default_locale == "fr"


@pytest.mark.unit
class TestToConfig:
    """Test suite for LocaleSettings.to_config()."""

    def test_builds_config(self):
        """to_config() carries every setting into LocaleConfig."""
        locale = LocaleSettings(
            supported_locales=["EN", "fr"],
            cookie_secure=True,
            cookie_samesite="strict",
            persist_to_url_defaults=False,
        )

        config = locale.to_config()

        assert config.supported_locales == ("en", "fr")
        assert config.default_locale == "en"
        assert config.persist_to_url_defaults is False
        assert config.cookie_attributes.secure is True
        assert config.cookie_attributes.samesite == "strict"

    def test_default_not_supported(self):
        """to_config() rejects a default locale outside the supported set."""
        locale = LocaleSettings(supported_locales=["fr"], default_locale="en")
        with pytest.raises(LocaleConfigurationError):
            locale.to_config()

    def test_empty_supported(self):
        """to_config() rejects an empty supported set."""
        locale = LocaleSettings(supported_locales=[])
        with pytest.raises(LocaleConfigurationError):
            locale.to_config()


@pytest.mark.unit
class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_instantiates_locale_settings(self):
        """Settings builds LocaleSettings automatically."""
        settings = Settings()
        assert isinstance(settings.locale, LocaleSettings)

    def test_is_production_without_prefix(self, monkeypatch):
        """An empty PREFIX means production."""
        monkeypatch.setenv("PREFIX", "")
        assert Settings().is_production is True

    def test_is_not_production_with_prefix(self, monkeypatch):
        """A PREFIX marks a non-production environment."""
        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False

    def test_locale_override(self):
        """A locale section can be passed explicitly."""
        settings = Settings(locale=LocaleSettings(default_locale="fr"))
        assert settings.locale.default_locale == "fr"
