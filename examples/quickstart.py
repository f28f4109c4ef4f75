"""Quickstart example for jinja-intl.

This example demonstrates the three localized filters in Jinja2 templates.

Note: Output shown for Babel with CLDR 44+. Some locales render narrow
no-break spaces (U+202F) before AM/PM and inside grouped numbers.
"""

from datetime import UTC, datetime

from jinja2 import Environment

from jinjaintl import IntlExtension, UnknownOptionError

env = Environment(extensions=[IntlExtension])
env.intl_default_locale = "en_US"
env.intl_default_timezone = "UTC"

moment = datetime(2025, 10, 27, 14, 30, tzinfo=UTC)

# Example 1: Dates
print("=" * 50)
print("Example 1: Dates")
print("=" * 50)

print(env.from_string("{{ d|localizeddate('short', 'none') }}").render(d=moment))
# Output: 10/27/25

print(env.from_string("{{ d|localizeddate('long', 'none', 'de_DE') }}").render(d=moment))
# Output: 27. Oktober 2025

print(
    env.from_string(
        "{{ d|localizeddate(timezone='Asia/Tokyo', format='yyyy-MM-dd HH:mm') }}"
    ).render(d=moment)
)
# Output: 2025-10-27 23:30

# Example 2: Numbers
print("\n" + "=" * 50)
print("Example 2: Numbers")
print("=" * 50)

for style in ("decimal", "percent", "scientific", "spellout", "ordinal", "duration"):
    template = env.from_string("{{ n|localizednumber(style) }}")
    print(f"{style:>10}: {template.render(n=42, style=style)}")
# Output:
#    decimal: 42
#    percent: 4,200%
# scientific: 4.2E1
#   spellout: forty-two
#    ordinal: 42nd
#   duration: 42 sec

print(env.from_string("{{ 1234.56|localizednumber('decimal', 'int64') }}").render())
# Output: 1,234

# Example 3: Currency
print("\n" + "=" * 50)
print("Example 3: Currency")
print("=" * 50)

print(env.from_string("{{ 19.99|localizedcurrency('USD') }}").render())
# Output: $19.99

print(env.from_string("{{ 1234.5|localizedcurrency('EUR', 'de_DE') }}").render())
# Output: 1.234,50 €

# Example 4: Errors
print("\n" + "=" * 50)
print("Example 4: Unknown option names")
print("=" * 50)

try:
    env.from_string("{{ 1|localizednumber('money') }}").render()
except UnknownOptionError as e:
    print(e)
# Output: The style "money" does not exist. Known styles are: "decimal", ...
