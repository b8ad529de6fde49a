"""Errors raised by the locale detection system.

Request handling never raises: unsupported or malformed candidates simply
fall through to the next source. The only errors are configuration errors
reported once, when the configuration is built.
"""


class LocaleConfigurationError(ValueError):
    """Raised when the locale configuration violates a startup invariant.

    Examples: an empty set of supported locales, or a default locale that is
    not one of the supported locales.
    """
