"""Locale utilities: normalization, Babel lookup, and default-locale providers.

Centralizes locale format normalization and the "current default locale"
query. The default locale is an injected LocaleProvider rather than a hidden
global so tests and hosts can pin it.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .constants import FALLBACK_LOCALE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "LocaleProvider",
    "StaticLocaleProvider",
    "SystemLocaleProvider",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def get_system_locale() -> str:
    """Detect the process default locale.

    Detection order:
    1. Babel's default_locale() (LANGUAGE, LC_ALL, LC_CTYPE, LANG)
    2. Python locale.getlocale() (OS-level locale)
    3. FALLBACK_LOCALE

    Filters out "C" and "POSIX" pseudo-locales and strips encodings.

    Example:
        >>> import os
        >>> os.environ['LC_ALL'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de_DE'
    """
    from babel import default_locale  # noqa: PLC0415
    import locale as locale_module  # noqa: PLC0415

    detected = default_locale()
    if detected and detected not in ("C", "POSIX", "en_US_POSIX"):
        return normalize_locale(detected)

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return normalize_locale(system_locale.split(".")[0])
    except (ValueError, AttributeError):
        pass

    logger.debug(
        "No default locale in environment (LANG=%r); using %s",
        os.environ.get("LANG"),
        FALLBACK_LOCALE,
    )
    return FALLBACK_LOCALE


@runtime_checkable
class LocaleProvider(Protocol):
    """Source of the default locale used when a filter call names none."""

    def default_locale(self) -> str:
        """Return the locale identifier to use right now."""
        ...  # pylint: disable=unnecessary-ellipsis


class SystemLocaleProvider:
    """Resolve the default locale from the process environment on every call.

    Changes to LANG/LC_ALL made after construction are honored.
    """

    __slots__ = ()

    def default_locale(self) -> str:
        return get_system_locale()

    def __repr__(self) -> str:
        return "SystemLocaleProvider()"


class StaticLocaleProvider:
    """Always return the same configured locale."""

    __slots__ = ("_locale",)

    def __init__(self, locale: str) -> None:
        if not locale:
            msg = "locale must be a non-empty string"
            raise ValueError(msg)
        self._locale = locale

    def default_locale(self) -> str:
        return self._locale

    def __repr__(self) -> str:
        return f"StaticLocaleProvider({self._locale!r})"
