"""Configuration for the intl extension.

Provides a single frozen dataclass holding the environment-level defaults
the filters fall back to when a call leaves an option out.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .constants import DEFAULT_TIMEZONE
from .locale_utils import LocaleProvider, StaticLocaleProvider, SystemLocaleProvider

__all__ = ["IntlConfig"]


@dataclass(frozen=True, slots=True)
class IntlConfig:
    """Immutable defaults for the localized filters.

    Attributes:
        default_locale: Locale used when a filter call passes none. None
            (default) means the process locale, resolved on every call.
        default_timezone: IANA zone that naive datetimes are interpreted in
            (default: "UTC").

    Example:
        >>> config = IntlConfig(default_locale="de_DE", default_timezone="Europe/Berlin")
        >>> config.locale_provider().default_locale()
        'de_DE'
        >>> config.tzinfo
        zoneinfo.ZoneInfo(key='Europe/Berlin')
    """

    default_locale: str | None = None
    default_timezone: str = DEFAULT_TIMEZONE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If default_locale is empty or default_timezone is not
                a known IANA zone.
        """
        if self.default_locale is not None and not self.default_locale:
            msg = "default_locale must be a non-empty string or None"
            raise ValueError(msg)
        try:
            ZoneInfo(self.default_timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            msg = f"Unknown default_timezone '{self.default_timezone}'"
            raise ValueError(msg) from e

    @property
    def tzinfo(self) -> tzinfo:
        """The default timezone as a tzinfo object."""
        return ZoneInfo(self.default_timezone)

    def locale_provider(self) -> LocaleProvider:
        """Build the LocaleProvider matching default_locale."""
        if self.default_locale is None:
            return SystemLocaleProvider()
        return StaticLocaleProvider(self.default_locale)
