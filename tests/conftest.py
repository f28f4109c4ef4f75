"""Pytest configuration for the jinja-intl test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 200 examples
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

from __future__ import annotations

import os

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings
from jinja2 import Environment

from jinjaintl.enums import NumberStyle
from jinjaintl.extension import IntlExtension
from jinjaintl.locale_utils import StaticLocaleProvider
from jinjaintl.runtime.cache import FormatterCache
from jinjaintl.runtime.formatters import NumberFormatter

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================


class CountingFactory:
    """NumberFormatter factory recording every construction."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, NumberStyle]] = []

    def __call__(self, locale: str, style: NumberStyle) -> NumberFormatter:
        self.calls.append((locale, style))
        return NumberFormatter(locale, style)


@pytest.fixture
def factory() -> CountingFactory:
    return CountingFactory()


@pytest.fixture
def cache(factory: CountingFactory) -> FormatterCache:
    """Empty cache defaulting to en_US, instrumented by ``factory``."""
    return FormatterCache(StaticLocaleProvider("en_US"), factory=factory)


@pytest.fixture
def env() -> Environment:
    """Jinja2 environment with the intl extension, pinned to en_US / UTC."""
    environment = Environment(extensions=[IntlExtension])
    environment.intl_default_locale = "en_US"  # type: ignore[attr-defined]
    environment.intl_default_timezone = "UTC"  # type: ignore[attr-defined]
    return environment
