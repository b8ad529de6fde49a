"""Configuration module - public API.

Centralized configuration using Pydantic BaseSettings with domain-based
organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    LocaleSettings: Locale detection settings class

Example:
    ```python
    from locale_detection.services import get_settings

    settings = get_settings()
    config = settings.locale.to_config()
    ```
"""

from locale_detection.configuration.locale import LocaleSettings
from locale_detection.configuration.settings import Settings

__all__ = ["Settings", "LocaleSettings"]
