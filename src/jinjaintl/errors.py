"""Exception hierarchy for jinja-intl.

All errors raised for bad template input derive from IntlError. Input errors
also derive from ValueError so callers that already catch ValueError keep
working.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = [
    "DateConversionError",
    "FormattingError",
    "IntlError",
    "UnknownOptionError",
]


class IntlError(Exception):
    """Base exception for all jinja-intl errors."""


class UnknownOptionError(IntlError, ValueError):
    """Symbolic option name not present in its option table.

    Attributes:
        kind: Table the name was looked up in ("style", "type", ...)
        value: The rejected name
        known: Valid names for that table, in table order
    """

    def __init__(self, kind: str, value: object, known: tuple[str, ...]) -> None:
        """Initialize UnknownOptionError.

        Args:
            kind: Table noun used in the message
            value: The rejected name
            known: Valid names for that table
        """
        self.kind = kind
        self.value = value
        self.known = known
        joined = '", "'.join(known)
        super().__init__(
            f'The {kind} "{value}" does not exist. Known {kind}s are: "{joined}"'
        )


class FormattingError(IntlError, ValueError):
    """Value cannot be formatted under the requested options.

    Raised for local contract violations (missing currency amount, integer
    overflow for a sized type). Errors raised by Babel itself are not wrapped.
    """


class DateConversionError(IntlError, ValueError):
    """Date-like input cannot be converted to an aware datetime.

    Attributes:
        input_value: The value that failed to convert
    """

    def __init__(self, message: str, *, input_value: object = None) -> None:
        super().__init__(message)
        self.input_value = input_value
