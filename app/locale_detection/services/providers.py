"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for the locale detection
services.
"""

from functools import lru_cache

from locale_detection.configuration import Settings
from locale_detection.i18n import LocaleCommitter, LocaleConfig, LocaleResolver


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_locale_config() -> LocaleConfig:
    """
    Get the application-scoped locale configuration snapshot.

    Returns:
        LocaleConfig: Immutable configuration built from settings.

    Raises:
        LocaleConfigurationError: If the locale settings are invalid.
    """
    return get_settings().locale.to_config()


@lru_cache
def get_locale_resolver() -> LocaleResolver:
    """Get the application-scoped LocaleResolver singleton."""
    return LocaleResolver(get_locale_config())


@lru_cache
def get_locale_committer() -> LocaleCommitter:
    """Get the application-scoped LocaleCommitter singleton."""
    return LocaleCommitter(get_locale_config().commit_options)


def reload_locale_config() -> LocaleConfig:
    """
    Reload settings from the environment and rebuild the locale services.

    Requests already being handled keep the resolver they started with;
    later requests see the new configuration.

    Returns:
        LocaleConfig: The freshly built configuration.
    """
    get_locale_committer.cache_clear()
    get_locale_resolver.cache_clear()
    get_locale_config.cache_clear()
    get_settings.cache_clear()
    return get_locale_config()
