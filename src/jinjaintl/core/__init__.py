"""Core infrastructure shared by the runtime and the extension.

Python 3.13+.
"""

from .babel_compat import (
    IntlUnavailableError,
    get_babel_core,
    get_babel_dates,
    get_babel_numbers,
    is_babel_available,
    require_babel,
)

__all__ = [
    "IntlUnavailableError",
    "get_babel_core",
    "get_babel_dates",
    "get_babel_numbers",
    "is_babel_available",
    "require_babel",
]
