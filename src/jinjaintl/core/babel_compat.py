"""Babel availability checks and lazy access to Babel modules.

Babel is the internationalization backend for every filter. The extension
refuses to initialize without it; this module centralizes the check so the
error message is identical wherever it is raised.

Usage Pattern:
    from jinjaintl.core.babel_compat import require_babel

    def __init__(self, environment):
        require_babel("IntlExtension")  # Raises IntlUnavailableError
        ...

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from types import ModuleType

__all__ = [
    "IntlUnavailableError",
    "get_babel_core",
    "get_babel_dates",
    "get_babel_numbers",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel.dates  # noqa: F401, PLC0415  # pylint: disable=unused-import
        import babel.numbers  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class IntlUnavailableError(ImportError):
    """Raised when the internationalization backend is not installed.

    Attributes:
        feature: Name of the component that needed Babel
    """

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for locale-aware formatting. "
            "Install with: pip install Babel"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Returns:
        True if Babel is importable, False otherwise.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        IntlUnavailableError: If Babel is not installed
    """
    if not _check_babel_available():
        raise IntlUnavailableError(feature)


def get_babel_core() -> ModuleType:
    """Get the babel.core module (CLDR global data, locale parsing).

    Raises:
        IntlUnavailableError: If Babel is not installed
    """
    require_babel("get_babel_core")
    from babel import core  # noqa: PLC0415

    return core


def get_babel_numbers() -> ModuleType:
    """Get the babel.numbers module.

    Raises:
        IntlUnavailableError: If Babel is not installed
    """
    require_babel("get_babel_numbers")
    from babel import numbers  # noqa: PLC0415

    return numbers


def get_babel_dates() -> ModuleType:
    """Get the babel.dates module.

    Raises:
        IntlUnavailableError: If Babel is not installed
    """
    require_babel("get_babel_dates")
    from babel import dates  # noqa: PLC0415

    return dates
