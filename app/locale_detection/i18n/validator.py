"""Whitelist validation of locale candidates."""

from typing import Any, Iterable, Optional

from locale_detection.i18n.models import normalize_locale


def validate_locale(candidate: Any, supported: Iterable[str]) -> Optional[str]:
    """Return the canonical form of a candidate if it is a supported locale.

    An unsupported candidate is a normal "no match" outcome, not an error:
    absent, blank, non-string and unknown values all return None.

    Args:
        candidate: Raw value read from a locale source.
        supported: Canonical (lower-case) supported locales.

    Returns:
        The canonical locale, or None.
    """
    if not isinstance(candidate, str):
        return None
    canonical = normalize_locale(candidate)
    if canonical and canonical in supported:
        return canonical
    return None


class LocaleValidator:
    """Callable validator bound to one set of supported locales."""

    def __init__(self, supported_locales: Iterable[str]):
        self._supported = frozenset(normalize_locale(s) for s in supported_locales)

    def __call__(self, candidate: Any) -> Optional[str]:
        return validate_locale(candidate, self._supported)

    def __contains__(self, candidate: Any) -> bool:
        return self(candidate) is not None
