"""Jinja2 extension registering the localized formatting filters.

Usage:
    from jinja2 import Environment

    env = Environment(extensions=["jinjaintl.extension.intl"])
    env.intl_default_locale = "de_DE"          # optional
    env.intl_default_timezone = "Europe/Berlin"  # optional

    env.from_string("{{ price|localizedcurrency('EUR') }}").render(price=9.5)

Environment attributes (added via Environment.extend, read on every call):
    intl_default_locale: Locale used when a filter call names none. None
        means the process locale.
    intl_default_timezone: IANA zone for naive datetimes (default "UTC").
    intl_locale_provider: Optional LocaleProvider overriding
        intl_default_locale.

Python 3.13+. Uses Jinja2 and Babel.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import tzinfo
from decimal import Decimal
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar

from jinja2 import pass_context
from jinja2.ext import Extension

from .config import IntlConfig
from .constants import (
    DEFAULT_CALENDAR,
    DEFAULT_DATE_STYLE,
    DEFAULT_NUMBER_STYLE,
    DEFAULT_NUMBER_TYPE,
    DEFAULT_TIME_STYLE,
    DEFAULT_TIMEZONE,
    FILTER_LOCALIZED_CURRENCY,
    FILTER_LOCALIZED_DATE,
    FILTER_LOCALIZED_NUMBER,
)
from .core.babel_compat import require_babel
from .filters import localized_currency, localized_date, localized_number
from .locale_utils import LocaleProvider
from .runtime.cache import FormatterCache

if TYPE_CHECKING:
    from jinja2 import Environment
    from jinja2.runtime import Context

    from .runtime.dates import DateInput

__all__ = ["IntlExtension", "intl"]

logger = logging.getLogger(__name__)


class _EnvironmentLocaleProvider:
    """Resolve the default locale from the environment's intl settings."""

    __slots__ = ("_extension",)

    def __init__(self, extension: IntlExtension) -> None:
        self._extension = extension

    def default_locale(self) -> str:
        return self._extension.locale_provider.default_locale()


class IntlExtension(Extension):
    """Add localizeddate, localizednumber, and localizedcurrency filters.

    The number and currency filters share one FormatterCache owned by this
    extension instance. The date filter builds a fresh formatter per call.

    Raises:
        IntlUnavailableError: At construction, if Babel is not installed
    """

    name: ClassVar[str] = "intl"

    def __init__(self, environment: Environment) -> None:
        require_babel(type(self).__name__)
        super().__init__(environment)
        environment.extend(
            intl_default_locale=None,
            intl_default_timezone=DEFAULT_TIMEZONE,
            intl_locale_provider=None,
        )
        self._cache = FormatterCache(_EnvironmentLocaleProvider(self))
        self._filters: Mapping[str, Callable[..., str]] = MappingProxyType(
            {
                FILTER_LOCALIZED_DATE: self._localized_date,
                FILTER_LOCALIZED_NUMBER: self._localized_number,
                FILTER_LOCALIZED_CURRENCY: self._localized_currency,
            }
        )
        environment.filters.update(self._filters)
        logger.debug("Registered filters %s", ", ".join(self._filters))

    @property
    def filters(self) -> Mapping[str, Callable[..., str]]:
        """Read-only view of the filters this extension registered."""
        return self._filters

    @property
    def formatter_cache(self) -> FormatterCache:
        return self._cache

    @property
    def config(self) -> IntlConfig:
        """Current intl settings of the environment.

        Raises:
            ValueError: If the environment holds an invalid setting
        """
        return _environment_config(self.environment)

    @property
    def locale_provider(self) -> LocaleProvider:
        return _environment_locale_provider(self.environment)

    @property
    def default_timezone(self) -> tzinfo:
        return self.config.tzinfo

    # Context filters are never constant-folded by the Jinja2 compiler.
    # Settings come from the rendering environment.

    @pass_context
    def _localized_date(  # noqa: PLR0913
        self,
        context: Context,
        value: DateInput,
        date_format: str = DEFAULT_DATE_STYLE,
        time_format: str = DEFAULT_TIME_STYLE,
        locale: str | None = None,
        timezone: tzinfo | str | None = None,
        format: str | None = None,  # noqa: A002
        calendar: str = DEFAULT_CALENDAR,
    ) -> str:
        environment = context.environment
        return localized_date(
            value,
            date_format,
            time_format,
            locale,
            timezone,
            format,
            calendar,
            locale_provider=_environment_locale_provider(environment),
            default_timezone=_environment_config(environment).tzinfo,
        )

    @pass_context
    def _localized_number(
        self,
        context: Context,
        value: int | float | Decimal | str,
        style: str = DEFAULT_NUMBER_STYLE,
        type: str = DEFAULT_NUMBER_TYPE,  # noqa: A002
        locale: str | None = None,
    ) -> str:
        if locale is None:
            locale = _environment_locale_provider(context.environment).default_locale()
        return localized_number(value, style, type, locale, cache=self._cache)

    @pass_context
    def _localized_currency(
        self,
        context: Context,
        value: int | float | Decimal | str | None,
        currency: str | None = None,
        locale: str | None = None,
    ) -> str:
        if locale is None:
            locale = _environment_locale_provider(context.environment).default_locale()
        return localized_currency(value, currency, locale, cache=self._cache)


def _environment_config(environment: Environment) -> IntlConfig:
    env: Any = environment
    return IntlConfig(
        default_locale=env.intl_default_locale,
        default_timezone=env.intl_default_timezone,
    )


def _environment_locale_provider(environment: Environment) -> LocaleProvider:
    provider: LocaleProvider | None = getattr(environment, "intl_locale_provider", None)
    if provider is not None:
        return provider
    return _environment_config(environment).locale_provider()


#: nicer import name
intl = IntlExtension
