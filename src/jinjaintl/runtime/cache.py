"""Single-slot cache for the shared number formatter.

Constructing a NumberFormatter resolves CLDR locale data, so the number and
currency filters reuse the last formatter while consecutive calls ask for
the same (style, locale) pair.

Architecture:
    - One slot: (style, resolved locale, formatter)
    - Thread-safe using threading.RLock (reentrant lock)
    - Exact equality on style and locale; no normalization
    - Default locale resolved per call through an injected LocaleProvider
    - Formatter construction through an injectable factory

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from threading import RLock
from typing import TypeAlias

from jinjaintl.enums import NumberStyle, OptionKind
from jinjaintl.locale_utils import LocaleProvider, SystemLocaleProvider
from jinjaintl.options import require_option

from .formatters import NumberFormatter

__all__ = ["FormatterCache", "FormatterFactory"]

logger = logging.getLogger(__name__)

FormatterFactory: TypeAlias = Callable[[str, NumberStyle], NumberFormatter]


class FormatterCache:
    """Memoize the most recently requested NumberFormatter.

    Attributes:
        hits: Requests answered from the slot
        misses: Requests that built a new formatter

    Example:
        >>> from jinjaintl.locale_utils import StaticLocaleProvider
        >>> cache = FormatterCache(StaticLocaleProvider("en_US"))
        >>> first = cache.get_or_create("decimal")
        >>> cache.get_or_create("decimal", "en_US") is first
        True
        >>> cache.get_or_create("percent") is first
        False
    """

    __slots__ = ("_factory", "_formatter", "_hits", "_lock", "_locale", "_locale_provider",
                 "_misses", "_style")

    def __init__(
        self,
        locale_provider: LocaleProvider | None = None,
        factory: FormatterFactory = NumberFormatter,
    ) -> None:
        """Initialize an empty cache.

        Args:
            locale_provider: Source of the default locale (default: process locale)
            factory: Callable building a formatter from (locale, style)
        """
        self._locale_provider = locale_provider or SystemLocaleProvider()
        self._factory = factory
        self._lock = RLock()
        self._style: str | None = None
        self._locale: str | None = None
        self._formatter: NumberFormatter | None = None
        self._hits = 0
        self._misses = 0

    @property
    def locale_provider(self) -> LocaleProvider:
        return self._locale_provider

    def get_or_create(self, style: str, locale: str | None = None) -> NumberFormatter:
        """Return the formatter for (style, locale), reusing the slot when possible.

        Args:
            style: Number style name ("decimal", "currency", ...)
            locale: Locale identifier; None uses the provider's default

        Returns:
            NumberFormatter for the requested pair

        Raises:
            UnknownOptionError: If style is not a known number style. The
                slot is left untouched.
        """
        resolved = locale if locale is not None else self._locale_provider.default_locale()

        with self._lock:
            if (
                self._formatter is not None
                and self._style == style
                and self._locale == resolved
            ):
                self._hits += 1
                return self._formatter

            number_style = require_option(OptionKind.NUMBER_STYLE, style)
            formatter = self._factory(resolved, NumberStyle(number_style))
            logger.debug("Built number formatter style=%s locale=%s", style, resolved)
            self._style = style
            self._locale = resolved
            self._formatter = formatter
            self._misses += 1
            return formatter

    def clear(self) -> None:
        """Empty the slot and reset statistics."""
        with self._lock:
            self._style = None
            self._locale = None
            self._formatter = None
            self._hits = 0
            self._misses = 0

    @property
    def hits(self) -> int:
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        with self._lock:
            return self._misses

    def cache_info(self) -> dict[str, int | str | None]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, and the cached style and locale
            (None when empty).
        """
        with self._lock:
            return {
                "hits": self._hits,
                "misses": self._misses,
                "style": self._style,
                "locale": self._locale,
            }
